import logging

import pytest

from morse_converter.decoder import decode
from morse_converter.encoder import WordSeparator, encode
from morse_converter.symbols import DEFAULT_TABLE, SymbolTable


def test_letters_use_single_space_and_words_triple_space() -> None:
    assert encode("AB CD") == ".- -...   -.-. -.."


def test_slash_separator_between_words() -> None:
    assert encode("AB CD", use_slash_separator=True) == ".- -... / -.-. -.."


def test_word_separator_values() -> None:
    assert WordSeparator.SPACES.value == "   "
    assert WordSeparator.SLASH.value == " / "


def test_space_runs_collapse_to_one_separator() -> None:
    assert encode("A   B") == encode("A B") == ".-   -..."
    assert encode("A   B", True) == ".- / -..."


def test_leading_and_trailing_spaces_produce_no_separator() -> None:
    assert encode("  A B  ") == ".-   -..."
    assert encode(" ") == ""


@pytest.mark.parametrize("text", ["A\nB", "A\r\nB", "\nAB\n"])
def test_newlines_are_removed_not_treated_as_boundaries(text: str) -> None:
    assert encode(text) == encode("AB") == ".- -..."


def test_encoding_is_case_insensitive() -> None:
    assert encode("hello") == encode("HELLO") == ".... . .-.. .-.. ---"


def test_unknown_characters_become_asterisks() -> None:
    assert encode("#") == "*"
    assert encode("A#B") == ".- * -..."
    assert encode("A\tB") == ".- * -..."
    assert encode("café") == "-.-. .- ..-. *"


def test_unknown_characters_are_logged(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="morse_converter.encoder"):
        encode("#")
    assert "'#'" in caplog.text


def test_empty_input() -> None:
    assert encode("") == ""


def test_punctuation() -> None:
    assert encode("SOS!") == "... --- ... -.-.--"
    assert encode("a/b") == ".- -..-. -..."


def test_custom_table() -> None:
    table = SymbolTable([("A", "."), ("B", "-")])
    assert encode("ab c", table=table) == ". -   *"


def test_every_supported_character_round_trips() -> None:
    for character in DEFAULT_TABLE.supported_characters():
        if character == " ":
            # a lone space is a leading separator and encodes to nothing
            assert encode(character) == ""
            assert decode(encode(character)) == ""
            continue
        assert decode(encode(character)) == character
        assert decode(encode(character.lower())) == character.upper()


def test_sentences_round_trip_with_both_separators() -> None:
    text = "The quick brown fox, 2 jumps (over) the lazy dog?"
    assert decode(encode(text)) == text.upper()
    assert decode(encode(text, use_slash_separator=True)) == text.upper()

import json
from pathlib import Path

import pytest

from morse_converter.config import ConfigError, ConverterConfig, Mode, ProgrammerInfo, load_config


def _write(tmp_path: Path, payload: object) -> Path:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    config = load_config(_write(tmp_path, {}))

    assert config == ConverterConfig()
    assert config.mode is Mode.ENCODE
    assert config.slash_wordspacer is False
    assert config.log_level is None


def test_load_full_config(tmp_path: Path) -> None:
    config = load_config(
        _write(
            tmp_path,
            {
                "mode": "Decode",
                "slash_wordspacer": True,
                "log_level": "debug",
                "programmer_info": {"name": "Ada", "email": "ada@example.com"},
            },
        )
    )

    assert config.mode is Mode.DECODE
    assert config.slash_wordspacer is True
    assert config.log_level == "DEBUG"
    assert config.programmer_info == ProgrammerInfo(name="Ada", program="TIK", email="ada@example.com")


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"mode": "shout"},
        {"mode": 1},
        {"slash_wordspacer": "yes"},
        {"log_level": 10},
        {"programmer_info": "Ada"},
        {"programmer_info": {"name": 3}},
    ],
)
def test_invalid_values_raise(tmp_path: Path, payload: object) -> None:
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, payload))


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "absent.json")


def test_invalid_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)

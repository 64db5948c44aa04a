"""Optional JSON configuration for the ``morse`` command."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Mapping, Optional

LOGGER = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration file cannot be used."""


class Mode(str, Enum):
    ENCODE = "encode"
    DECODE = "decode"


@dataclass(frozen=True)
class ProgrammerInfo:
    name: str = "Diego Rubio Carrera"
    program: str = "TIK"
    email: str = "diegorubiocarrera@gmail.com"

    def as_dict(self) -> Dict[str, str]:
        return {"name": self.name, "program": self.program, "email": self.email}


@dataclass(frozen=True)
class ConverterConfig:
    mode: Mode = Mode.ENCODE
    slash_wordspacer: bool = False
    log_level: Optional[str] = None
    programmer_info: ProgrammerInfo = field(default_factory=ProgrammerInfo)


def load_config(path: Path) -> ConverterConfig:
    """Read *path* as JSON and return the resulting :class:`ConverterConfig`."""

    try:
        contents = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Could not read configuration file '{path}': {exc.strerror or exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Configuration file '{path}' is not valid JSON: {exc.msg}") from exc

    if not isinstance(contents, dict):
        raise ConfigError("Configuration file must contain a JSON object")

    config = ConverterConfig(
        mode=_coerce_mode(contents.get("mode", Mode.ENCODE.value)),
        slash_wordspacer=_coerce_bool(contents, "slash_wordspacer"),
        log_level=_coerce_log_level(contents.get("log_level")),
        programmer_info=_coerce_programmer_info(contents.get("programmer_info", {})),
    )
    LOGGER.debug("Loaded configuration from %s: %s", path, config)
    return config


def _coerce_mode(value: object) -> Mode:
    if not isinstance(value, str):
        raise ConfigError("'mode' must be a string")
    try:
        return Mode(value.lower())
    except ValueError:
        raise ConfigError(f"Unknown mode {value!r}; expected 'encode' or 'decode'") from None


def _coerce_bool(contents: Mapping[str, object], key: str) -> bool:
    value = contents.get(key, False)
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' must be true or false")
    return value


def _coerce_log_level(value: object) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError("'log_level' must be a logging level name")
    return value.upper()


def _coerce_programmer_info(value: object) -> ProgrammerInfo:
    if not isinstance(value, dict):
        raise ConfigError("'programmer_info' must be a mapping")
    defaults = ProgrammerInfo()
    fields: Dict[str, str] = {}
    for key, default in defaults.as_dict().items():
        entry = value.get(key, default)
        if not isinstance(entry, str):
            raise ConfigError(f"programmer_info '{key}' must be a string")
        fields[key] = entry
    return ProgrammerInfo(**fields)


__all__ = ["ConfigError", "ConverterConfig", "Mode", "ProgrammerInfo", "load_config"]

"""Configuration handling for fibbench."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from fibbench.types import Sizes, frozen_slots
from fibbench.variants import VARIANTS

DEFAULT_SIZES: Sizes = (1, 2, 4, 8, 16, 32, 64, 128, 256, 512)

OUTPUT_FORMATS = ("human", "json")


@frozen_slots
class Config:
    """Runtime configuration for a benchmark run."""

    sizes: Sizes = DEFAULT_SIZES
    variants: tuple[str, ...] = ()
    repeat: int = 5
    number: int = 100
    output_format: str = "human"


class ConfigFileError(Exception):
    """Raised when pyproject.toml contains invalid fibbench configuration."""


_TOML_KEY_TO_FIELD: dict[str, str] = {
    "sizes": "sizes",
    "variants": "variants",
    "repeat": "repeat",
    "number": "number",
    "format": "output_format",
}

_TUPLE_FIELDS = frozenset({"sizes", "variants"})


def _require_strict_int(toml_key: str, value: object, hint: str = "") -> int:
    """Raise ConfigFileError unless *value* is an int (not bool)."""
    if isinstance(value, bool) or not isinstance(value, int):
        label = f"an integer{hint}" if hint else "an integer"
        raise ConfigFileError(
            f"[tool.fibbench] '{toml_key}' must be {label}, got {type(value).__name__}"
        )
    return value


def _convert_sizes(toml_key: str, value: object) -> Sizes:
    if not isinstance(value, list):
        raise ConfigFileError(
            f"[tool.fibbench] '{toml_key}' must be a list of integers"
        )
    sizes = []
    for item in value:
        if isinstance(item, bool) or not isinstance(item, int):
            raise ConfigFileError(
                f"[tool.fibbench] '{toml_key}' must be a list of integers"
            )
        if item < 0:
            raise ConfigFileError(
                f"[tool.fibbench] '{toml_key}' must not contain negative sizes, got {item}"
            )
        sizes.append(item)
    return tuple(sizes)


def _convert_value(toml_key: str, field_name: str, value: object) -> object:
    """Validate and convert a single TOML value to its Config-compatible type."""
    if field_name == "sizes":
        return _convert_sizes(toml_key, value)

    if field_name == "variants":
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigFileError(
                f"[tool.fibbench] '{toml_key}' must be a list of strings"
            )
        unknown = [v for v in value if v not in VARIANTS]
        if unknown:
            raise ConfigFileError(
                f"[tool.fibbench] '{toml_key}' has unknown variant(s): {', '.join(unknown)}"
            )
        return tuple(value)

    if field_name in {"repeat", "number"}:
        _require_strict_int(toml_key, value, hint=" (>= 1)")
        if value < 1:
            raise ConfigFileError(
                f"[tool.fibbench] '{toml_key}' must be at least 1, got {value}"
            )
        return value

    if field_name == "output_format":
        if not isinstance(value, str):
            raise ConfigFileError(
                f"[tool.fibbench] '{toml_key}' must be a string, got {type(value).__name__}"
            )
        if value not in OUTPUT_FORMATS:
            raise ConfigFileError(
                f"[tool.fibbench] '{toml_key}' must be 'human' or 'json', got '{value}'"
            )
        return value

    raise ConfigFileError(f"[tool.fibbench] unhandled field '{toml_key}'")


def _parse_toml_section(section: dict[str, Any]) -> dict[str, object]:
    """Validate and convert a [tool.fibbench] dict into Config-compatible fields."""
    result: dict[str, object] = {}
    for toml_key, value in section.items():
        field_name = _TOML_KEY_TO_FIELD.get(toml_key)
        if field_name is None:
            raise ConfigFileError(f"[tool.fibbench] unknown key '{toml_key}'")
        result[field_name] = _convert_value(toml_key, field_name, value)
    return result


def load_file_config(path: Path | None = None) -> dict[str, object]:
    """Read [tool.fibbench] from pyproject.toml, returning Config-compatible dict.

    Returns an empty dict if the file doesn't exist or has no [tool.fibbench] section.
    """
    if path is None:
        path = Path("pyproject.toml")
    if not path.is_file():
        return {}
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileError(f"Invalid TOML in {path}: {exc}") from None
    section = data.get("tool", {}).get("fibbench")
    if section is None:
        return {}
    return _parse_toml_section(section)


def build_config(
    cli_overrides: dict[str, object],
    file_config: dict[str, object],
) -> Config:
    """Merge file config and CLI overrides into a Config instance.

    CLI values always win. For tuple fields (sizes, variants), CLI values
    are appended to file values rather than replacing them.
    """
    merged: dict[str, object] = {}
    merged.update(file_config)

    for key, cli_val in cli_overrides.items():
        if key in _TUPLE_FIELDS and key in file_config:
            file_val = file_config[key]
            assert isinstance(file_val, tuple)
            assert isinstance(cli_val, tuple)
            merged[key] = file_val + cli_val
        else:
            merged[key] = cli_val

    return Config(**merged)

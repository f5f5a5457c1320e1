"""Load command-line defaults from eui64calc.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_CONFIG_PATH = Path("eui64calc.toml")
OUTPUT_FORMATS = ("text", "json", "csv")


@dataclass
class DefaultsConfig:
    """Values applied when the command line leaves them out."""

    prefix: str = ""
    format: str = "text"


@dataclass
class BatchConfig:
    """Column overrides for CSV batch input.

    Empty strings mean the usual column names are matched.
    """

    mac_column: str = ""
    prefix_column: str = ""
    name_column: str = ""


@dataclass
class CalculatorConfig:
    """Full configuration loaded from eui64calc.toml."""

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    batch: BatchConfig = field(default_factory=BatchConfig)
    path: Path | None = None


def _get_str(section: dict, section_name: str, key: str, default: str = "") -> str:
    value = section.get(key, default)
    if not isinstance(value, str):
        raise ValueError(f"{section_name}.{key} must be a string, got {value!r}")
    return value


def _build_defaults(data: dict) -> DefaultsConfig:
    section = data.get("defaults", {})
    output_format = _get_str(section, "defaults", "format", "text")
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Unknown output format {output_format!r} "
            f"(expected one of: {', '.join(OUTPUT_FORMATS)})"
        )
    return DefaultsConfig(
        prefix=_get_str(section, "defaults", "prefix").strip(),
        format=output_format,
    )


def _build_batch(data: dict) -> BatchConfig:
    section = data.get("batch", {})
    return BatchConfig(
        mac_column=_get_str(section, "batch", "mac_column"),
        prefix_column=_get_str(section, "batch", "prefix_column"),
        name_column=_get_str(section, "batch", "name_column"),
    )


def load_config(config_path: Path | str | None = None) -> CalculatorConfig:
    """Load configuration from a TOML file.

    If config_path is None, eui64calc.toml in the current directory is
    used when it exists; otherwise built-in defaults apply. An explicit
    path that does not exist raises FileNotFoundError.
    """
    if config_path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return CalculatorConfig()
        config_path = DEFAULT_CONFIG_PATH
    else:
        config_path = Path(config_path)

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    return CalculatorConfig(
        defaults=_build_defaults(data),
        batch=_build_batch(data),
        path=config_path,
    )

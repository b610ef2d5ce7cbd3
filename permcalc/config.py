from __future__ import annotations

import io
import toml
from typing import Any, Literal, TypedDict, cast, get_args

from .utils import ConfigError

output_formats = Literal["list", "json"]


class OutputConfig(TypedDict):
    format: output_formats
    show_value: bool


class Config(TypedDict):
    output: OutputConfig


def default_config() -> Config:
    return {"output": {"format": "list", "show_value": True}}


def load_config(file: str) -> Config:
    try:
        with open(file, "r") as f:
            f: io.TextIOWrapper
            raw: dict[str, Any] = dict(toml.load(f))
    except OSError as e:
        raise ConfigError(f"Could not read config file '{file}': {e}") from e
    except toml.TomlDecodeError as e:
        raise ConfigError(f"Config file '{file}' is not valid toml: {e}") from e

    return merge_config(raw)


def merge_config(raw: dict[str, Any]) -> Config:
    config = default_config()
    output: dict[str, Any] = raw.get("output", {})

    if not isinstance(output, dict):
        raise ConfigError("'output' must be a table")

    fmt = output.get("format", config["output"]["format"])
    if fmt not in get_args(output_formats):
        raise ConfigError(f"Unknown output format '{fmt}', expected one of {', '.join(get_args(output_formats))}")

    show_value = output.get("show_value", config["output"]["show_value"])
    if not isinstance(show_value, bool):
        raise ConfigError("'output.show_value' must be a boolean")

    config["output"]["format"] = cast(output_formats, fmt)
    config["output"]["show_value"] = show_value
    return config

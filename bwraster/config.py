from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path

from . import constants
from .errors import InvalidArgument


@dataclass(frozen=True)
class Config:
    """Settings for the demo. Every field can be overridden from a TOML file."""
    pixel_on: str = constants.DEFAULT_ON
    pixel_off: str = constants.DEFAULT_OFF
    max_shapes: int = constants.MAX_SHAPES
    log_level: str = "WARNING"
    image_path: str | None = None
    image_scale: int = constants.DEFAULT_IMAGE_SCALE

    def __post_init__(self):
        for name in ("pixel_on", "pixel_off"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise InvalidArgument(f"`{name}` must be a single character, got {value!r}")
        for name in ("max_shapes", "image_scale"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise InvalidArgument(f"`{name}` must be a positive integer, got {value!r}")
        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise InvalidArgument(f"Unknown log level: {self.log_level!r}")
        if self.image_path is not None and not isinstance(self.image_path, str):
            raise InvalidArgument(f"`image_path` must be a string, got {self.image_path!r}")

    @property
    def level(self) -> int:
        return logging.getLevelName(str(self.log_level).upper())


def parse(data: dict) -> Config:
    """Builds a config from a parsed TOML document.

    The settings may sit at the top level or in a `[raster]` table.
    """
    data = data.get("raster", data)
    known = {field.name for field in fields(Config)}
    unknown = set(data) - known
    if unknown:
        raise InvalidArgument(f"Unknown config keys: {', '.join(sorted(unknown))}")
    return replace(Config(), **data)


def load(path: str | Path | None = None) -> Config:
    """Reads a TOML config file, or returns the defaults if `path` is None."""
    if path is None:
        return Config()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as err:
        raise InvalidArgument(f"Config file {path} failed to parse: {err}") from err
    return parse(data)

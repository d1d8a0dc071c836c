from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Any, TextIO

import numpy as np
from PIL import Image

from . import constants
from .errors import InvalidArgument
from .raster import BWRaster


class RasterView(ABC):
    @abstractmethod
    def produce(self, raster: BWRaster) -> Any:
        """Renders the raster in whatever form the view deals in."""


def _check_pixel_char(c, name: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise InvalidArgument(f"`{name}` must be a single character, got {c!r}")
    return c


class SimpleRasterView(RasterView):
    """Prints a raster as text, one row per line."""

    def __init__(self, pixel_on: str = constants.DEFAULT_ON, pixel_off: str = constants.DEFAULT_OFF,
                 stream: TextIO | None = None):
        self.pixel_on = _check_pixel_char(pixel_on, "pixel_on")
        self.pixel_off = _check_pixel_char(pixel_off, "pixel_off")
        self.stream = stream

    def produce(self, raster: BWRaster) -> None:
        print(self.produce_raster(raster), file=self.stream or sys.stdout)

    def produce_raster(self, raster: BWRaster) -> str:
        rows = []
        for y in range(raster.get_height()):
            rows.append("".join(
                self.pixel_on if raster.is_turned_on(x, y) else self.pixel_off
                for x in range(raster.get_width())
            ))
            rows.append("\n")
        return "".join(rows)


class StringRasterView(SimpleRasterView):
    """Returns the text a SimpleRasterView would print."""

    def produce(self, raster: BWRaster) -> str:
        return self.produce_raster(raster)


class ImageRasterView(RasterView):
    """Renders a raster to a black and white PIL image, lit pixels white."""

    def __init__(self, scale: int = 1):
        if isinstance(scale, bool) or not isinstance(scale, int) or scale < 1:
            raise InvalidArgument(f"Invalid scale: {scale}")
        self.scale = scale

    def produce(self, raster: BWRaster) -> Image.Image:
        width, height = raster.get_width(), raster.get_height()
        pixels = raster.pixels().astype(np.uint8) * 255
        im = Image.fromarray(pixels).convert("1", dither=Image.Dither.NONE)
        if self.scale != 1:
            im = im.resize((width * self.scale, height * self.scale), Image.Resampling.NEAREST)
        return im

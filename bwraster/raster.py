from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from .errors import InvalidArgument


class BWRaster(ABC):
    """A fixed-size grid of black and white pixels.

    While flip mode is enabled, `turn_on` inverts a pixel instead of lighting it.
    """

    @abstractmethod
    def get_width(self) -> int: ...

    @abstractmethod
    def get_height(self) -> int: ...

    @abstractmethod
    def clear(self) -> None: ...

    @abstractmethod
    def turn_on(self, x: int, y: int) -> None: ...

    @abstractmethod
    def turn_off(self, x: int, y: int) -> None: ...

    @abstractmethod
    def enable_flip_mode(self) -> None: ...

    @abstractmethod
    def disable_flip_mode(self) -> None: ...

    @abstractmethod
    def is_turned_on(self, x: int, y: int) -> bool: ...

    @property
    @abstractmethod
    def flip_mode(self) -> bool: ...

    def pixels(self) -> np.ndarray:
        """A boolean snapshot of the grid, indexed `[y, x]`."""
        return np.array(
            [[self.is_turned_on(x, y) for x in range(self.get_width())] for y in range(self.get_height())],
            dtype=bool
        ).reshape(self.get_height(), self.get_width())


def _check_size(size, message: str) -> int:
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size < 1:
        raise InvalidArgument(message)
    return int(size)


class BWRasterMem(BWRaster):
    """A raster held in memory as a boolean array indexed `[y, x]`."""

    def __init__(self, width: int, height: int):
        self._width = _check_size(width, f"Invalid width: {width}")
        self._height = _check_size(height, f"Invalid height: {height}")
        self._pixels = np.zeros((self._height, self._width), dtype=bool)
        self._flipped = False

    def __repr__(self):
        return f"<BWRasterMem {self._width}x{self._height} flip={self._flipped}>"

    def get_width(self) -> int:
        return self._width

    def get_height(self) -> int:
        return self._height

    def clear(self) -> None:
        self._pixels[:] = False

    def turn_on(self, x: int, y: int) -> None:
        self._check_pixel(x, y)
        if self._flipped:
            self._pixels[y, x] = not self._pixels[y, x]
        else:
            self._pixels[y, x] = True

    def turn_off(self, x: int, y: int) -> None:
        self._check_pixel(x, y)
        self._pixels[y, x] = False

    def enable_flip_mode(self) -> None:
        self._flipped = True

    def disable_flip_mode(self) -> None:
        self._flipped = False

    @property
    def flip_mode(self) -> bool:
        return self._flipped

    def is_turned_on(self, x: int, y: int) -> bool:
        self._check_pixel(x, y)
        return bool(self._pixels[y, x])

    def pixels(self) -> np.ndarray:
        """A read-only snapshot of the grid, indexed `[y, x]`."""
        snapshot = self._pixels.copy()
        snapshot.flags.writeable = False
        return snapshot

    def _check_pixel(self, x: int, y: int) -> None:
        if x < 0 or x >= self._width or y < 0 or y >= self._height:
            raise InvalidArgument(f"Invalid pixel: ({x}, {y})")

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from .errors import InvalidArgument
from .raster import BWRaster


class GeometricShape(ABC):
    """A shape that can be drawn onto a raster."""

    def bounds(self, raster: BWRaster) -> tuple[int, int, int, int]:
        """The part of the raster worth testing, as `(x0, y0, x1, y1)` with
        exclusive ends. Defaults to the whole raster."""
        return 0, 0, raster.get_width(), raster.get_height()

    def draw(self, raster: BWRaster) -> None:
        """Turns on every pixel of the raster that lies inside the shape."""
        x0, y0, x1, y1 = self.bounds(raster)
        if x0 >= x1 or y0 >= y1:
            return
        ys, xs = np.mgrid[y0:y1, x0:x1]
        for y, x in np.argwhere(self.contains_points(xs, ys)):
            raster.turn_on(int(x) + x0, int(y) + y0)

    def contains_point(self, x: int, y: int) -> bool:
        return bool(self.contains_points(np.asarray(x), np.asarray(y)))

    @abstractmethod
    def contains_points(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        """Element-wise containment test over broadcastable coordinate arrays."""


def _check_dimension(size, message: str) -> int:
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size < 1:
        raise InvalidArgument(message)
    return int(size)


class AbstractQuadrangle(GeometricShape):
    """An axis-aligned box with its top left corner at `(x, y)`."""

    def __init__(self, x: int, y: int, w: int, h: int):
        self.x = x
        self.y = y
        self._w = _check_dimension(w, f"Invalid dimension: {w}")
        self._h = _check_dimension(h, f"Invalid dimension: {h}")

    def __repr__(self):
        return f"{type(self).__name__}(x={self.x}, y={self.y}, w={self._w}, h={self._h})"

    def bounds(self, raster: BWRaster) -> tuple[int, int, int, int]:
        return (
            max(self.x, 0),
            max(self.y, 0),
            min(self.x + self._w, raster.get_width()),
            min(self.y + self._h, raster.get_height()),
        )

    def contains_points(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        return (xs >= self.x) & (ys >= self.y) & (xs < self.x + self._w) & (ys < self.y + self._h)


class Rectangle(AbstractQuadrangle):

    @property
    def width(self) -> int:
        return self._w

    @width.setter
    def width(self, w: int):
        self._w = _check_dimension(w, f"Invalid dimension: {w}")

    @property
    def height(self) -> int:
        return self._h

    @height.setter
    def height(self, h: int):
        self._h = _check_dimension(h, f"Invalid dimension: {h}")


class Square(AbstractQuadrangle):

    def __init__(self, x: int, y: int, size: int):
        super().__init__(x, y, size, size)

    def __repr__(self):
        return f"Square(x={self.x}, y={self.y}, size={self._w})"

    @property
    def size(self) -> int:
        return self._w

    @size.setter
    def size(self, size: int):
        self._w = self._h = _check_dimension(size, f"Invalid dimension: {size}")


class AbstractOval(GeometricShape):
    """An axis-aligned ellipse centred on `(cx, cy)`."""

    def __init__(self, cx: int, cy: int, rx: int, ry: int):
        self.cx = cx
        self.cy = cy
        self._rx = _check_dimension(rx, "Radius must not be less than 1.")
        self._ry = _check_dimension(ry, "Radius must not be less than 1.")

    def __repr__(self):
        return f"{type(self).__name__}(cx={self.cx}, cy={self.cy}, rx={self._rx}, ry={self._ry})"

    def bounds(self, raster: BWRaster) -> tuple[int, int, int, int]:
        return (
            max(self.cx - self._rx, 0),
            max(self.cy - self._ry, 0),
            min(self.cx + self._rx + 1, raster.get_width()),
            min(self.cy + self._ry + 1, raster.get_height()),
        )

    def contains_points(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        dx = (xs - self.cx) ** 2 / (self._rx * self._rx)
        dy = (ys - self.cy) ** 2 / (self._ry * self._ry)
        return dx + dy <= 1


class Ellipse(AbstractOval):

    @property
    def radius_x(self) -> int:
        return self._rx

    @radius_x.setter
    def radius_x(self, rx: int):
        self._rx = _check_dimension(rx, "Radius must not be less than 1.")

    @property
    def radius_y(self) -> int:
        return self._ry

    @radius_y.setter
    def radius_y(self, ry: int):
        self._ry = _check_dimension(ry, "Radius must not be less than 1.")


class Circle(AbstractOval):

    def __init__(self, cx: int, cy: int, radius: int):
        super().__init__(cx, cy, radius, radius)

    def __repr__(self):
        return f"Circle(cx={self.cx}, cy={self.cy}, radius={self._rx})"

    @property
    def radius(self) -> int:
        return self._rx

    @radius.setter
    def radius(self, radius: int):
        self._rx = self._ry = _check_dimension(radius, "Radius must not be less than 1.")

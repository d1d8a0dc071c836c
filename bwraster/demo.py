"""Draws shapes read from standard input onto a raster and prints it.

The first line holds the number of shapes to read. Every following line is
one of

    FLIP
    RECTANGLE <x> <y> <width> <height>
    SQUARE <x> <y> <size>
    ELLIPSE <cx> <cy> <rx> <ry>
    CIRCLE <cx> <cy> <radius>

FLIP toggles the raster's flip mode for the shapes drawn after it. Invalid
lines are reported and skipped; they don't count towards the total.

Usage: python -m bwraster <size> | <width> <height>
"""
from __future__ import annotations

import inspect
import logging
import os
import re
import sys
from enum import Enum, auto
from logging import debug, error, info, warning
from typing import Callable, Iterable, TextIO

from . import config as config_module
from . import constants
from .errors import ArgumentCountError, BadInteger, EndOfInput, InvalidArgument, InvalidShapeLine
from .raster import BWRaster, BWRasterMem
from .shapes import Circle, Ellipse, GeometricShape, Rectangle, Square
from .views import ImageRasterView, SimpleRasterView


class Marker(Enum):
    FLIP = auto()


class ShapeSyntax:
    def __init__(
            self,
            *,
            keyword: str,
            syntax: str,
            description: str,
            factory: Callable[..., GeometricShape | Marker]):
        arity = len(inspect.signature(factory).parameters)
        self.pattern = re.compile(re.escape(keyword) + r" ([+-]?\d+)" * arity, re.IGNORECASE)
        self.syntax = syntax
        self.description = description
        self.factory = factory

    def match(self, line: str) -> GeometricShape | Marker | None:
        """Builds the shape if the normalized line matches this syntax."""
        if match := self.pattern.fullmatch(line):
            return self.factory(*(int(g) for g in match.groups()))
        return None

    def __str__(self):
        return f"{self.syntax}: {self.description}"


class ShapeSyntaxes:
    def __init__(self):
        self.list = []

    def register(self, keyword: str, syntax: str):
        def decorator(f):
            self.list.append(
                ShapeSyntax(
                    keyword=keyword,
                    syntax=syntax,
                    description=f.__doc__,
                    factory=f))
            return f

        return decorator


syntaxes = ShapeSyntaxes()


@syntaxes.register(constants.FLIP, syntax="FLIP")
def flip():
    """Toggles flip mode for the shapes after it."""
    return Marker.FLIP


@syntaxes.register(constants.RECTANGLE, syntax="RECTANGLE <x> <y> <width> <height>")
def rectangle(x, y, w, h):
    """A rectangle with its top left corner at (x, y)."""
    return Rectangle(x, y, w, h)


@syntaxes.register(constants.SQUARE, syntax="SQUARE <x> <y> <size>")
def square(x, y, size):
    """A square with its top left corner at (x, y)."""
    return Square(x, y, size)


@syntaxes.register(constants.ELLIPSE, syntax="ELLIPSE <cx> <cy> <rx> <ry>")
def ellipse(cx, cy, rx, ry):
    """An ellipse centred on (cx, cy)."""
    return Ellipse(cx, cy, rx, ry)


@syntaxes.register(constants.CIRCLE, syntax="CIRCLE <cx> <cy> <radius>")
def circle(cx, cy, r):
    """A circle centred on (cx, cy)."""
    return Circle(cx, cy, r)


def parse_shape(line: str) -> GeometricShape | Marker:
    """Parses one line of input. Raises InvalidShapeLine if it isn't valid."""
    normalized = " ".join(line.split())
    if not normalized:
        raise InvalidShapeLine(line, "Please enter a non-empty input.")
    for syntax in syntaxes.list:
        try:
            shape = syntax.match(normalized)
        except InvalidArgument as err:
            raise InvalidShapeLine(line, f"Invalid input: {normalized} ({err})") from err
        if shape is not None:
            return shape
    raise InvalidShapeLine(line, f"Invalid input: {normalized}")


def parse_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise BadInteger(text.strip()) from None


def read_count(line: str | None) -> int:
    if line is None:
        raise EndOfInput(1)
    return parse_int(line)


def read_shapes(lines: Iterable[str], count: int) -> list[GeometricShape | Marker]:
    """
    Reads lines until `count` valid shapes were collected.

    Invalid lines are logged and don't count. Raises EndOfInput if the lines
    run out first.
    """
    shapes = []
    lines = iter(lines)
    while len(shapes) < count:
        line = next(lines, None)
        if line is None:
            raise EndOfInput(count - len(shapes))
        try:
            shapes.append(parse_shape(line))
        except InvalidShapeLine as err:
            _, reason = err.args
            warning(reason)
    return shapes


def draw(shapes: Iterable[GeometricShape | Marker], raster: BWRaster) -> BWRaster:
    for shape in shapes:
        if shape is Marker.FLIP:
            if raster.flip_mode:
                raster.disable_flip_mode()
            else:
                raster.enable_flip_mode()
        else:
            shape.draw(raster)
    return raster


def parse_dimensions(argv: list[str]) -> tuple[int, int]:
    """Width and height from one (square) or two command line arguments."""
    if len(argv) == 2:
        width, height = parse_int(argv[0]), parse_int(argv[1])
    elif len(argv) == 1:
        width = height = parse_int(argv[0])
    else:
        raise ArgumentCountError("Expected 1 or 2 arguments.")
    if width < 1 or height < 1:
        raise InvalidArgument("Arguments must be greater than 0.")
    return width, height


def main(argv: list[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    logging.basicConfig(stream=sys.stderr, format=constants.LOG_FORMAT)

    try:
        config = config_module.load(os.environ.get(constants.CONFIG_ENV))
    except (InvalidArgument, OSError) as err:
        error(f"Invalid configuration: {err}")
        return constants.EXIT_BAD_CONFIG
    logging.getLogger().setLevel(config.level)
    debug(f"Using {config}")

    try:
        width, height = parse_dimensions(argv)
    except ArgumentCountError as err:
        error(str(err))
        return constants.EXIT_BAD_ARGUMENT_COUNT
    except BadInteger as err:
        error(f"Invalid integer: {err}")
        return constants.EXIT_BAD_INTEGER
    except InvalidArgument as err:
        error(str(err))
        return constants.EXIT_BAD_DIMENSION

    lines = iter(stdin)
    try:
        count = read_count(next(lines, None))
        if count < 1:
            return constants.EXIT_OK
        if count > config.max_shapes:
            warning(f"Only the first {config.max_shapes} of {count} shapes will be read.")
            count = config.max_shapes
        shapes = read_shapes(lines, count)
    except BadInteger as err:
        error(f"Invalid integer: {err}")
        return constants.EXIT_BAD_INTEGER
    except EndOfInput:
        error("Reached end of the stream.")
        return constants.EXIT_END_OF_INPUT

    raster = draw(shapes, BWRasterMem(width, height))
    SimpleRasterView(config.pixel_on, config.pixel_off, stream=stdout).produce(raster)
    if config.image_path is not None:
        ImageRasterView(config.image_scale).produce(raster).save(config.image_path)
        info(f"Saved image to {config.image_path}")
    return constants.EXIT_OK

class RasterError(Exception):
    """Base class for errors raised by the raster, shapes and views."""


class InvalidArgument(RasterError, ValueError):
    """A dimension, coordinate or setting had an invalid value."""


class InvalidShapeLine(RasterError):
    """A line of demo input couldn't be parsed into a shape.

    Args:
        line: The offending line.
    """


class EndOfInput(RasterError):
    """The input ended before all of the announced shapes were read.

    Args:
        remaining: How many shapes were still expected.
    """


class ArgumentCountError(InvalidArgument):
    """The demo was started with the wrong number of arguments."""


class BadInteger(InvalidArgument):
    """A command line argument or count wasn't an integer.

    Args:
        text: The offending text.
    """

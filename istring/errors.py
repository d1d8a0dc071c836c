class IStringError(Exception):
    """Base class for errors raised by IString operations."""


class NullArgument(IStringError, ValueError):
    """A required argument was None.

    Args:
        name: The name of the missing argument.
    """

    def __init__(self, name: str = "argument"):
        super().__init__(name)

    def __str__(self):
        return f"Argument `{self.args[0]}` must not be None."


class IndexOutOfRange(IStringError, IndexError):
    """An index, offset or length fell outside of a window.

    Args:
        index: The offending value.
    """

    def __init__(self, index: int):
        super().__init__(index)

    def __str__(self):
        return f"String index out of range: {self.args[0]}"

from .errors import IStringError, IndexOutOfRange, NullArgument
from .istring import IString

__all__ = ["IString", "IStringError", "IndexOutOfRange", "NullArgument"]

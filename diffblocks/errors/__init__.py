from .format import UnsupportedFormatError
from .range import SubSequenceRangeError

__all__ = ["SubSequenceRangeError", "UnsupportedFormatError"]

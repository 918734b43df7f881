from .subsequence import (
    DEFAULT_FORMAT,
    NO_INDEX,
    SEQUENCE_FORMAT,
    TUPLE_FORMAT,
    SubSequence,
    SubSequenceKind,
)

__all__ = [
    "SubSequence",
    "SubSequenceKind",
    "NO_INDEX",
    "DEFAULT_FORMAT",
    "SEQUENCE_FORMAT",
    "TUPLE_FORMAT",
]

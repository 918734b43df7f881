from .adapters import (
    from_match,
    from_matching_blocks,
    from_opcode,
    from_opcodes,
    match_sequences,
)
from .errors import SubSequenceRangeError, UnsupportedFormatError
from .models import (
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
    "from_match",
    "from_matching_blocks",
    "from_opcode",
    "from_opcodes",
    "match_sequences",
    "SubSequenceRangeError",
    "UnsupportedFormatError",
]

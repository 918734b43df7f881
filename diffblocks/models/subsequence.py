# diffblocks/models/subsequence.py
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from ..errors import SubSequenceRangeError, UnsupportedFormatError

__all__ = [
    "DEFAULT_FORMAT",
    "NO_INDEX",
    "SEQUENCE_FORMAT",
    "TUPLE_FORMAT",
    "SubSequence",
    "SubSequenceKind",
]

NO_INDEX = -1

SEQUENCE_FORMAT = "S"
TUPLE_FORMAT = "T"
DEFAULT_FORMAT = SEQUENCE_FORMAT

NumeralProvider = Callable[[int], str]


class SubSequenceKind(enum.Enum):
    """Which sides of the comparison a sub-sequence has a position in."""

    BOTH = "both"
    LEFT_ONLY = "left_only"
    RIGHT_ONLY = "right_only"
    NEITHER = "neither"


def _non_negative(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise SubSequenceRangeError(name, value)
    return value


@dataclass(frozen=True)
class SubSequence:
    """
    One aligned region between a left and a right sequence.

    Built either with a common length (a true common sub-sequence):

        SubSequence(left_index, right_index, common_length)

    or with independent lengths (e.g. a replaced region):

        SubSequence(left_index, right_index, left_length, right_length)

    Regions present on only one side come from `left_only()`, `right_only()`
    and `neither()`; the missing side's index is `NO_INDEX` and `kind` says
    which variant the value is. Equality and hashing only look at the four
    numeric fields.
    """

    left_index: int
    right_index: int
    left_length: int
    right_length: int

    # Not a dataclass field: replace(), astuple() and equality only see the four numbers.
    kind = SubSequenceKind.BOTH

    def __init__(
        self,
        left_index: int,
        right_index: int,
        left_length: int,
        right_length: Optional[int] = None,
    ):
        _non_negative("left_index", left_index)
        _non_negative("right_index", right_index)
        if right_length is None:
            # Three-argument form: the third value is the shared length.
            _non_negative("common_length", left_length)
            right_length = left_length
        else:
            _non_negative("left_length", left_length)
            _non_negative("right_length", right_length)
        self._assign(left_index, right_index, left_length, right_length, SubSequenceKind.BOTH)

    def _assign(
        self,
        left_index: int,
        right_index: int,
        left_length: int,
        right_length: int,
        kind: SubSequenceKind,
    ) -> None:
        object.__setattr__(self, "left_index", left_index)
        object.__setattr__(self, "right_index", right_index)
        object.__setattr__(self, "left_length", left_length)
        object.__setattr__(self, "right_length", right_length)
        object.__setattr__(self, "kind", kind)

    @classmethod
    def _variant(cls, left_index, right_index, left_length, right_length, kind) -> "SubSequence":
        obj = cls.__new__(cls)
        obj._assign(left_index, right_index, left_length, right_length, kind)
        return obj

    @classmethod
    def left_only(cls, left_index: int, left_length: int = 0) -> "SubSequence":
        """A run that exists only in the left sequence (a deletion)."""
        _non_negative("left_index", left_index)
        _non_negative("left_length", left_length)
        return cls._variant(left_index, NO_INDEX, left_length, 0, SubSequenceKind.LEFT_ONLY)

    @classmethod
    def right_only(cls, right_index: int, right_length: int = 0) -> "SubSequence":
        """A run that exists only in the right sequence (an insertion)."""
        _non_negative("right_index", right_index)
        _non_negative("right_length", right_length)
        return cls._variant(NO_INDEX, right_index, 0, right_length, SubSequenceKind.RIGHT_ONLY)

    @classmethod
    def neither(cls) -> "SubSequence":
        """A placeholder with no position on either side."""
        return cls._variant(NO_INDEX, NO_INDEX, 0, 0, SubSequenceKind.NEITHER)

    # ---------- derived accessors ----------

    @property
    def left_end_index(self) -> int:
        """Last left position; less than `left_index` when `left_length` is 0."""
        return self.left_index + self.left_length - 1

    @property
    def right_end_index(self) -> int:
        """Last right position; less than `right_index` when `right_length` is 0."""
        return self.right_index + self.right_length - 1

    @property
    def has_left(self) -> bool:
        return self.kind in (SubSequenceKind.BOTH, SubSequenceKind.LEFT_ONLY)

    @property
    def has_right(self) -> bool:
        return self.kind in (SubSequenceKind.BOTH, SubSequenceKind.RIGHT_ONLY)

    @property
    def left_range(self) -> range:
        if not self.has_left:
            return range(0)
        return range(self.left_index, self.left_index + self.left_length)

    @property
    def right_range(self) -> range:
        if not self.has_right:
            return range(0)
        return range(self.right_index, self.right_index + self.right_length)

    def to_tuple(self) -> Tuple[int, int, int, int]:
        return (self.left_index, self.right_index, self.left_length, self.right_length)

    # ---------- equality / hashing ----------

    def __hash__(self) -> int:
        h = 17
        for value in self.to_tuple():
            h = (h * 23 + value) & 0xFFFFFFFF
        # Fold into the signed 32-bit range.
        return h - 0x100000000 if h & 0x80000000 else h

    # ---------- rendering ----------

    def format(self, fmt: Optional[str] = DEFAULT_FORMAT, provider: Optional[NumeralProvider] = None) -> str:
        """
        Render the sub-sequence.

        `fmt` is "S" (sequence notation, the default) or "T" (tuple
        notation). `None` means "S". So does "", because that is the spec
        `format(x)` and `f"{x}"` hand to `__format__`. `provider` turns each
        number into text and defaults to `str`; it never changes the
        punctuation.
        """
        if not fmt:
            fmt = DEFAULT_FORMAT
        num = provider or str
        if fmt == SEQUENCE_FORMAT:
            return self._format_sequence(num)
        if fmt == TUPLE_FORMAT:
            return ", ".join(num(value) for value in self.to_tuple())
        raise UnsupportedFormatError(fmt)

    def _format_sequence(self, num: NumeralProvider) -> str:
        if self.kind is SubSequenceKind.NEITHER:
            return "(<>)"
        if self.kind is SubSequenceKind.RIGHT_ONLY:
            return f"(> {_span(num, self.right_index, self.right_length)})"
        if self.kind is SubSequenceKind.LEFT_ONLY:
            return f"(< {_span(num, self.left_index, self.left_length)})"
        left = _span(num, self.left_index, self.left_length)
        right = _span(num, self.right_index, self.right_length)
        return f"({left}, {right})"

    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec)

    def __str__(self) -> str:
        return self.format()


def _span(num: NumeralProvider, index: int, length: int) -> str:
    """'i' for an empty run, 'i -> j' otherwise."""
    if length < 1:
        return num(index)
    return f"{num(index)} -> {num(index + length - 1)}"

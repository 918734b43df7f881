# diffblocks/adapters.py
"""
Conversions from the standard library matcher to SubSequence values.

difflib.SequenceMatcher does the matching; these helpers only translate its
results:
  - get_matching_blocks() -> common-length SubSequences
  - get_opcodes()         -> one SubSequence per opcode
"""
from __future__ import annotations

import difflib
import logging
from typing import Iterable, List, Sequence, Tuple

from ._logging import resolve_logger
from .models.subsequence import SubSequence

__all__ = [
    "from_match",
    "from_matching_blocks",
    "from_opcode",
    "from_opcodes",
    "match_sequences",
]

Opcode = Tuple[str, int, int, int, int]


def from_match(match: Sequence[int]) -> SubSequence:
    """Convert a difflib.Match (or any (a, b, size) triple)."""
    a, b, size = match
    return SubSequence(a, b, size)


def from_matching_blocks(
    blocks: Iterable[Sequence[int]],
    *,
    include_sentinel: bool = False,
    logger=None,
    log: bool = False,
) -> List[SubSequence]:
    """
    Convert the output of SequenceMatcher.get_matching_blocks().

    difflib always ends the list with a dummy (len(a), len(b), 0) entry; it is
    dropped unless `include_sentinel` is set.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    blocks = list(blocks)
    if blocks and not include_sentinel and blocks[-1][2] == 0:
        log.debug(f"Dropping trailing dummy block {tuple(blocks[-1])}")
        blocks = blocks[:-1]

    result: List[SubSequence] = []
    for i, block in enumerate(blocks):
        sub = from_match(block)
        log.debug(f"  [{i}] match {tuple(block)} -> {sub}")
        result.append(sub)
    log.debug(f"Converted {len(result)} matching blocks")
    return result


def from_opcode(opcode: Opcode, *, one_sided: bool = False) -> SubSequence:
    """
    Convert one (tag, i1, i2, j1, j2) opcode.

    'delete' and 'insert' keep the position on the untouched side as a
    zero-length run, e.g. ('delete', 2, 4, 1, 1) -> (2 -> 3, 1). With
    `one_sided`, they become left_only/right_only values instead.
    """
    tag, i1, i2, j1, j2 = opcode
    if tag == "equal":
        return SubSequence(i1, j1, i2 - i1)
    if tag == "replace":
        return SubSequence(i1, j1, i2 - i1, j2 - j1)
    if tag == "delete":
        if one_sided:
            return SubSequence.left_only(i1, i2 - i1)
        return SubSequence(i1, j1, i2 - i1, 0)
    if tag == "insert":
        if one_sided:
            return SubSequence.right_only(j1, j2 - j1)
        return SubSequence(i1, j1, 0, j2 - j1)
    raise ValueError(f"Unknown opcode tag {tag!r}")


def from_opcodes(
    opcodes: Iterable[Opcode],
    *,
    one_sided: bool = False,
    logger=None,
    log: bool = False,
) -> List[SubSequence]:
    """Convert the output of SequenceMatcher.get_opcodes()."""
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    result: List[SubSequence] = []
    for i, opcode in enumerate(opcodes):
        sub = from_opcode(opcode, one_sided=one_sided)
        log.debug(f"  [{i}] {opcode[0]} {tuple(opcode[1:])} -> {sub}")
        result.append(sub)
    log.debug(f"Converted {len(result)} opcodes")
    return result


def match_sequences(
    left: Sequence,
    right: Sequence,
    *,
    opcodes: bool = False,
    one_sided: bool = False,
    autojunk: bool = True,
    logger=None,
    log: bool = False,
) -> List[SubSequence]:
    """
    Run difflib.SequenceMatcher over `left` and `right` and convert the result.

    By default only the matched blocks are returned. With `opcodes`, every
    region (equal, replace, delete, insert) is returned in order.
    Items must be hashable.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)
    log.debug(f"Matching {len(left)} left items against {len(right)} right items")

    matcher = difflib.SequenceMatcher(None, left, right, autojunk=autojunk)
    if opcodes:
        return from_opcodes(matcher.get_opcodes(), one_sided=one_sided, logger=log)
    return from_matching_blocks(matcher.get_matching_blocks(), logger=log)

"""
Lightweight, opt-in logging utilities for the library.

Usage in library code:
    from diffblocks._logging import resolve_logger

    def convert(..., logger=None, log: bool = False):
        log = resolve_logger(logger=logger, enabled=log, name=__name__)
        log.debug("converting blocks")  # no-op unless enabled or logger passed
        ...

The value types never log; only the adapters that walk whole match lists do.
Nothing is printed and no handler is attached, so importing the package never
touches global logging configuration.
"""
from __future__ import annotations

import logging


class NoopLogger:
    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.INFO,
) -> logging.Logger | NoopLogger:
    """
    Return a usable logger according to opt-in policy.

    - If `logger` is provided, use it.
    - Else if `enabled` is True, create/get a named logger.
    - Else return a NoopLogger that ignores calls.
    """
    if logger is not None:
        return logger
    if enabled:
        lg = logging.getLogger(name or "diffblocks")
        lg.setLevel(level)
        # Records go to the host application's handlers (or caplog), never ours.
        lg.propagate = True
        return lg
    return NoopLogger()

"""Logging severity levels and their textual form."""

from __future__ import annotations

from enum import IntEnum


class LogSeverity(IntEnum):
    """Severity of a log message, from least to most severe."""

    trace = 0
    debug = 1
    info = 2
    warning = 3
    error = 4
    fatal = 5

    def __str__(self) -> str:
        return self.name


def parse_log_severity(text: str) -> LogSeverity:
    """Return the severity whose label is ``text`` (surrounding whitespace ignored)."""
    tokens = text.split()
    if len(tokens) != 1:
        raise ValueError(f"invalid log severity: {text!r}")
    try:
        return LogSeverity[tokens[0]]
    except KeyError:
        raise ValueError(f"invalid log severity: {text!r}") from None
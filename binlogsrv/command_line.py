"""Helpers for describing command-line invocations."""

from __future__ import annotations

import os
from collections.abc import Sequence

_DEFAULT_EXECUTABLE_NAME = "executable"


def extract_executable_name(arguments: Sequence[str]) -> str:
    """Return the file name of the program in ``arguments[0]``.

    Falls back to ``"executable"`` when it cannot be determined.
    """
    name = os.path.basename(arguments[0]) if arguments else ""
    return name or _DEFAULT_EXECUTABLE_NAME


def get_readable_command_line_arguments(arguments: Sequence[str]) -> str:
    """Return the arguments after the program name, each quoted, space separated."""
    return " ".join(f'"{argument}"' for argument in arguments[1:])
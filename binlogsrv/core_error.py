"""Errors reported by the database client library."""

from __future__ import annotations

CATEGORY_NAME = "mysql_client"


def mysql_error_message(code: int) -> str:
    """Return the symbolic text for a client error code."""
    return f"CR_{code}"


class CoreError(Exception):
    """A client library failure carrying its native error code."""

    category = CATEGORY_NAME

    def __init__(self, code: int, message: str | None = None) -> None:
        self.code = code
        self.message = message
        code_text = mysql_error_message(code)
        super().__init__(f"{message}: {code_text}" if message else code_text)
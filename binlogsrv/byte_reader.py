"""Extraction of little-endian fixed-width values from byte buffers."""

from __future__ import annotations


def _check_available(remainder: bytes | bytearray | memoryview, size: int) -> None:
    if size < 0:
        raise ValueError("size cannot be negative")
    if len(remainder) < size:
        raise ValueError(
            f"not enough data: need {size} bytes, have {len(remainder)}"
        )


def extract_fixed_int(
    remainder: bytes | bytearray | memoryview, size: int
) -> tuple[int, memoryview]:
    """Read an unsigned little-endian integer of ``size`` bytes.

    Returns the value and a view of the bytes that follow it.
    """
    _check_available(remainder, size)
    view = memoryview(remainder)
    value = int.from_bytes(view[:size], "little", signed=False)
    return value, view[size:]


def extract_byte_array(
    remainder: bytes | bytearray | memoryview, size: int
) -> tuple[bytes, memoryview]:
    """Read ``size`` raw bytes.

    Returns the bytes and a view of the bytes that follow them.
    """
    _check_available(remainder, size)
    view = memoryview(remainder)
    return bytes(view[:size]), view[size:]
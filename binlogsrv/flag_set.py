"""Textual rendering of bit-flag sets."""

from __future__ import annotations

import enum

_SEPARATOR = " | "


def _single_bit_labels(flag_type: type[enum.Flag]) -> dict[int, str]:
    labels: dict[int, str] = {}
    for name, member in flag_type.__members__.items():
        value = int(member.value)
        if value > 0 and value & (value - 1) == 0:
            labels.setdefault(value, name)
    return labels


def flags_to_string(flags: enum.Flag) -> str:
    """Return the names of the set bits, lowest bit first, joined by " | ".

    Bits that do not correspond to a named single-bit member are skipped.
    """
    labels = _single_bit_labels(type(flags))
    bits = int(flags.value)
    names = []
    mask = 1
    while mask <= bits:
        if bits & mask:
            label = labels.get(mask)
            if label:
                names.append(label)
        mask <<= 1
    return _SEPARATOR.join(names)
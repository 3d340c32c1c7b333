"""Dotted names built up from a stack of elements."""

from __future__ import annotations

from collections.abc import Iterator


class CompositeName:
    """A sequence of name elements joined by ``delimiter`` when rendered."""

    delimiter = "."

    def __init__(self, *args: str) -> None:
        if len(args) > 1:
            raise TypeError("CompositeName takes at most one initial element")
        self._elements: list[str] = list(args)

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, index: int) -> str:
        return self._elements[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._elements)

    def __repr__(self) -> str:
        return f"CompositeName({self.str()!r})"

    def is_empty(self) -> bool:
        """Return True when the name has no elements."""
        return not self._elements

    def push_back(self, element: str) -> None:
        """Append an element to the end of the name."""
        self._elements.append(element)

    def pop_back(self) -> str:
        """Remove and return the last element."""
        if not self._elements:
            raise IndexError("pop_back from an empty composite name")
        return self._elements.pop()

    def str(self) -> str:
        """Render the elements in order, joined by the delimiter."""
        return self.delimiter.join(self._elements)

    def str_reverse(self) -> str:
        """Render the elements in reverse order, joined by the delimiter."""
        return self.delimiter.join(reversed(self._elements))
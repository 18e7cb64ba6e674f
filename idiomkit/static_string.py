"""Immutable fixed-length strings that concatenate into new fixed strings."""

from __future__ import annotations

import sys
from typing import Any, Sequence


class StaticString:
    """An immutable string whose length is fixed at construction.

    Indexing is bounds-checked: only positions ``0 <= i < len`` are valid.
    Adding a ``StaticString`` and a ``str`` (on either side) yields a new
    ``StaticString`` holding both texts in order.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        if isinstance(text, StaticString):
            text = text._text
        if not isinstance(text, str):
            raise TypeError(f"expected a string, got {text!r}")
        self._text = text

    def __setattr__(self, name: str, value: Any) -> None:
        # The text may be set once, by the constructor, and never again.
        if name != "_text" or hasattr(self, "_text"):
            raise AttributeError("StaticString is immutable")
        object.__setattr__(self, name, value)

    def __getitem__(self, index: int) -> str:
        if not isinstance(index, int):
            raise TypeError("StaticString indices must be integers")
        if not 0 <= index < len(self._text):
            raise IndexError(f"index {index} out of range")
        return self._text[index]

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"StaticString({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StaticString):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    def __add__(self, other: Any) -> StaticString:
        if isinstance(other, StaticString):
            return StaticString(self._text + other._text)
        if isinstance(other, str):
            return StaticString(self._text + other)
        return NotImplemented

    def __radd__(self, other: Any) -> StaticString:
        if isinstance(other, str):
            return StaticString(other + self._text)
        return NotImplemented


def literal(text: str) -> StaticString:
    """Wrap ``text`` as a ``StaticString``."""
    return StaticString(text)


def main(argv: Sequence[str] | None = None) -> int:
    """Assemble a line of code from pieces and print it."""
    std = literal("std::")
    out = literal(" << ")
    quote = literal('"')
    phrase = literal("Hello") + ", " + "World" + "!"
    phrase2 = quote + phrase + quote
    expr = std + "cout" + out + phrase2 + out + std + "endl"
    if len(expr) != 41:
        raise AssertionError("unexpected expression length")
    sys.stdout.write(f"{expr}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
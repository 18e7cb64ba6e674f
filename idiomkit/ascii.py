"""Strings that hold only ASCII characters.

Characters outside the ASCII range are handed to a violation handler that
either substitutes a replacement character or raises.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, TextIO, Union

Char = Union[str, int]
ViolationHandler = Callable[[Char], str]


def _code(ch: Char) -> int:
    return ord(ch) if isinstance(ch, str) else int(ch)


def is_ascii(ch: Char) -> bool:
    """Tell whether ``ch`` (a one-character string or a code) is ASCII."""
    return 0 <= _code(ch) <= 0x7F


def _as_char(ch: Char) -> str:
    return ch if isinstance(ch, str) else chr(ch)


def raise_on_violation(ch: Char) -> str:
    """Violation handler: pass ASCII characters through, refuse any other."""
    if is_ascii(ch):
        return _as_char(ch)
    raise ValueError(f"no ascii character (code {_code(ch)})")


def replace_with(char: str) -> ViolationHandler:
    """Return a violation handler that substitutes ``char`` for non-ASCII input."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError("replacement must be a single character")

    def handler(ch: Char) -> str:
        return _as_char(ch) if is_ascii(ch) else char

    return handler


_default_handler = replace_with("?")


def _chars(text: Any) -> Iterable[Char]:
    if isinstance(text, (bytes, bytearray)):
        # A byte above 0x7F is a negative signed character.
        return (b - 0x100 if b & 0x80 else b for b in text)
    if isinstance(text, str):
        return text
    raise TypeError(f"expected str or bytes, got {text!r}")


def sieve(text: Any, on_violation: ViolationHandler | None = None) -> str:
    """Return ``text`` with every non-ASCII character passed through the handler."""
    handler = on_violation or _default_handler
    return "".join(
        _as_char(ch) if is_ascii(ch) else handler(ch) for ch in _chars(text)
    )


class AsciiString(str):
    """A ``str`` guaranteed to contain only what its sieve lets through."""

    on_violation: ViolationHandler

    def __new__(
        cls, value: Any = "", on_violation: ViolationHandler | None = None
    ) -> AsciiString:
        handler = on_violation or _default_handler
        obj = super().__new__(cls, sieve(value, handler))
        obj.on_violation = handler
        return obj

    def __add__(self, other: Any) -> AsciiString:
        if not isinstance(other, str):
            return NotImplemented
        return AsciiString(str(self) + str(other), self.on_violation)

    def __radd__(self, other: Any) -> AsciiString:
        if not isinstance(other, str):
            return NotImplemented
        return AsciiString(str(other) + str(self), self.on_violation)

    def __repr__(self) -> str:
        return f"AsciiString({str(self)!r})"


def cast(value: Any, on_violation: ViolationHandler | None = None) -> AsciiString:
    """Convert a ``str`` or ``bytes`` value into an ``AsciiString``."""
    return AsciiString(value, on_violation)


def read_ascii(
    stream: TextIO, on_violation: ViolationHandler | None = None
) -> AsciiString:
    """Read one whitespace-delimited word from ``stream`` as an ``AsciiString``."""
    ch = stream.read(1)
    while ch and ch.isspace():
        ch = stream.read(1)
    word = []
    while ch and not ch.isspace():
        word.append(ch)
        ch = stream.read(1)
    return AsciiString("".join(word), on_violation)


def write_ascii(stream: TextIO, value: Any) -> TextIO:
    """Write ``value`` to ``stream`` and return the stream."""
    stream.write(str(value))
    return stream
"""Dispatch on string values through their 32-bit FNV-1a hash."""

from __future__ import annotations

import sys
from typing import Any, Callable, Mapping, Sequence

_OFFSET_BASIS = 2166136261
_PRIME = 16777619
_MASK = 0xFFFFFFFF


def fnv1a_32(data: bytes) -> int:
    """Return the 32-bit FNV-1a hash of ``data``.

    Bytes above 0x7F are mixed in as sign-extended characters, the way a
    signed ``char`` is widened before the XOR.
    """
    h = _OFFSET_BASIS
    for byte in data:
        if byte & 0x80:
            byte |= 0xFFFFFF00
        h = ((h ^ byte) * _PRIME) & _MASK
    return h


def string_hash(text: str) -> int:
    """Hash a string the way case labels are hashed: its bytes plus a terminating NUL."""
    return fnv1a_32(text.encode("utf-8") + b"\0")


def switch(
    value: str,
    cases: Mapping[str, Callable[[], Any]],
    default: Callable[[], Any] | None = None,
) -> Any:
    """Call the action whose label hashes like ``value``, else ``default``.

    Returns whatever the chosen action returns. Labels whose hashes collide
    cannot both be cases and raise ``ValueError``.
    """
    table: dict[int, Callable[[], Any]] = {}
    for label, action in cases.items():
        key = string_hash(label)
        if key in table:
            raise ValueError(f"duplicate case value for label {label!r}")
        table[key] = action
    action = table.get(string_hash(value), default)
    if action is None:
        return None
    return action()


def _say(word: str) -> Callable[[], None]:
    def action() -> None:
        sys.stdout.write(word + "\n")

    return action


_ACTIONS = {
    "value X": _say("do_this"),
    "value Y": _say("do_that"),
    "value Z": _say("do_something_else"),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the dispatch over a few sample values."""
    for value in ("value X", "value Z", "value #"):
        switch(value, _ACTIONS, _say("dont_know_what_to_do"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Derive the full set of ordering operators from ``==`` and ``<``."""

from __future__ import annotations

import sys
from typing import Any, Sequence


class Comparable:
    """Mixin that supplies ``!=``, ``>``, ``<=`` and ``>=``.

    A subclass defines ``__eq__`` and ``__lt__``; the remaining relational
    operators are expressed through those two.
    """

    __slots__ = ()

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Comparable):
            return NotImplemented
        return other < self

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Comparable):
            return NotImplemented
        return not (other < self)

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Comparable):
            return NotImplemented
        return not (self < other)


class Foo(Comparable):
    """A value that defines only equality and less-than."""

    __slots__ = ("n",)

    def __init__(self, n: int) -> None:
        self.n = n

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Foo):
            return NotImplemented
        return self.n == other.n

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Foo):
            return NotImplemented
        return self.n < other.n

    def __hash__(self) -> int:
        return hash(self.n)

    def __repr__(self) -> str:
        return f"Foo({self.n!r})"


def _flag(value: bool) -> str:
    return "true" if value else "false"


def main(argv: Sequence[str] | None = None) -> int:
    """Print how two sample values compare."""
    f1, f2 = Foo(1), Foo(2)
    out = sys.stdout
    out.write(f"not equal?     : {_flag(f1 != f2)}\n")
    out.write(f"greater?       : {_flag(f1 > f2)}\n")
    out.write(f"less equal?    : {_flag(f1 <= f2)}\n")
    out.write(f"greater equal? : {_flag(f1 >= f2)}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Immutable lists of types and the elementary operations on them.

A type list never changes: every operation that adds, removes or replaces
an element returns a new list and leaves the original untouched.
"""

from __future__ import annotations

from typing import Any, Iterator


def _name(item: Any) -> str:
    if isinstance(item, type):
        return item.__qualname__
    return repr(item)


class TypeList:
    """An immutable, hashable sequence of types (or of any hashable items)."""

    __slots__ = ("_items",)

    def __init__(self, *args: Any) -> None:
        object.__setattr__(self, "_items", tuple(args))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("TypeList is immutable")

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeList):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash((TypeList, self._items))

    def __repr__(self) -> str:
        return f"TypeList({', '.join(_name(item) for item in self._items)})"


def _require_list(tlist: Any) -> TypeList:
    if not isinstance(tlist, TypeList):
        raise TypeError(f"expected a TypeList, got {tlist!r}")
    return tlist


def _require_non_empty(tlist: Any, operation: str) -> TypeList:
    _require_list(tlist)
    if not len(tlist):
        raise IndexError(f"{operation} of an empty type list")
    return tlist


def is_list(t: Any) -> bool:
    """Tell whether ``t`` is a type list."""
    return isinstance(t, TypeList)


def is_empty(tlist: Any) -> bool:
    """Tell whether ``tlist`` is a type list with no elements."""
    return isinstance(tlist, TypeList) and len(tlist) == 0


def size(tlist: TypeList) -> int:
    """Return the number of elements in ``tlist``."""
    return len(_require_list(tlist))


def front(tlist: TypeList) -> Any:
    """Return the first element of ``tlist``."""
    return _require_non_empty(tlist, "front")._items[0]


def back(tlist: TypeList) -> Any:
    """Return the last element of ``tlist``."""
    return _require_non_empty(tlist, "back")._items[-1]


def pop_front(tlist: TypeList) -> TypeList:
    """Return ``tlist`` without its first element."""
    return TypeList(*_require_non_empty(tlist, "pop_front")._items[1:])


def push_front(tlist: TypeList, t: Any) -> TypeList:
    """Return ``tlist`` with ``t`` inserted in front; a list ``t`` stays nested."""
    return TypeList(t, *_require_list(tlist))


def push_back(tlist: TypeList, t: Any) -> TypeList:
    """Return ``tlist`` with ``t`` appended; a list ``t`` stays nested."""
    return TypeList(*_require_list(tlist), t)


def replace_front(tlist: TypeList, t: Any) -> TypeList:
    """Return ``tlist`` with its first element replaced by ``t``."""
    return push_front(pop_front(tlist), t)


def nth_element(tlist: TypeList, n: int) -> Any:
    """Return the element at zero-based position ``n``."""
    items = _require_list(tlist)._items
    if n < 0 or n >= len(items):
        raise IndexError(f"index {n} out of range for a type list of size {len(items)}")
    return items[n]


def reverse(tlist: TypeList) -> TypeList:
    """Return the elements of ``tlist`` in reverse order."""
    return TypeList(*reversed(_require_list(tlist)._items))
"""Algorithms over type lists: mapping, folding, flattening and visiting."""

from __future__ import annotations

from functools import reduce
from typing import Any, Callable, TypeVar

from idiomkit.typelist import TypeList, is_list, push_back
from idiomkit.typelist_predicates import (
    push_back_if,
    push_back_unique,
    push_front_unique,
)

F = TypeVar("F", bound=Callable[..., Any])


def _require_list(tlist: Any) -> TypeList:
    if not isinstance(tlist, TypeList):
        raise TypeError(f"expected a TypeList, got {tlist!r}")
    return tlist


def transform(tlist: TypeList, metafun: Callable[[Any], Any]) -> TypeList:
    """Return a list holding ``metafun(t)`` for every element ``t``, in order."""
    return TypeList(*(metafun(item) for item in _require_list(tlist)))


def accumulate(
    tlist: TypeList, metafun: Callable[[Any, Any], Any], initial: Any
) -> Any:
    """Fold ``tlist`` from the left: ``metafun(...metafun(initial, T1)..., TN)``."""
    return reduce(metafun, _require_list(tlist), initial)


def unique(tlist: TypeList) -> TypeList:
    """Keep only the first occurrence of every element, preserving order."""
    return accumulate(tlist, push_back_unique, TypeList())


def unique_reverse(tlist: TypeList) -> TypeList:
    """Keep only the first occurrence of every element, in reverse order."""
    return accumulate(tlist, push_front_unique, TypeList())


def push_back_termwise(tlist: TypeList, t: Any) -> TypeList:
    """Append ``t`` to ``tlist``, expanding nested lists into single elements."""
    _require_list(tlist)
    if is_list(t):
        return accumulate(t, push_back_termwise, tlist)
    return push_back(tlist, t)


def linear_list(tlist: TypeList) -> TypeList:
    """Flatten ``tlist`` so that no element is itself a list."""
    return push_back_termwise(TypeList(), tlist)


def concatenate(tlist1: TypeList, tlist2: TypeList) -> TypeList:
    """Return the elements of ``tlist1`` followed by those of ``tlist2``."""
    return TypeList(*_require_list(tlist1), *_require_list(tlist2))


def copy(*args: TypeList) -> TypeList:
    """Concatenate two or more type lists in order."""
    if len(args) < 2:
        raise TypeError("copy needs at least two type lists")
    head, *tail = args
    if len(tail) == 1:
        return concatenate(head, tail[0])
    return concatenate(head, copy(*tail))


def find_if(tlist: TypeList, condition: Callable[[Any], bool]) -> TypeList:
    """Return the elements of ``tlist`` for which ``condition`` holds, in order."""
    return accumulate(
        tlist, lambda result, item: push_back_if(result, condition, item), TypeList()
    )


def for_each(tlist: TypeList, f: F, *args: Any) -> F:
    """Call ``f(T, *args)`` for every element ``T`` of ``tlist`` in order; return ``f``."""
    for item in _require_list(tlist):
        f(item, *args)
    return f
"""Queries on type lists and conditional insertions into them.

Membership is decided by equality of elements, so two entries match when
they are the same type (or compare equal).
"""

from __future__ import annotations

from typing import Any, Callable

from idiomkit.typelist import TypeList, front, is_list, pop_front, push_back, push_front

Predicate = Callable[[Any], bool]


def _require_list(tlist: Any) -> TypeList:
    if not isinstance(tlist, TypeList):
        raise TypeError(f"expected a TypeList, got {tlist!r}")
    return tlist


def negation(value: Any) -> bool:
    """Return the logical negation of ``value``."""
    return not bool(value)


def any_of(tlist: TypeList, t: Any) -> bool:
    """Tell whether ``t`` occurs in ``tlist``."""
    return any(item == t for item in _require_list(tlist))


def none_of(tlist: TypeList, t: Any) -> bool:
    """Tell whether ``t`` does not occur in ``tlist``."""
    return negation(any_of(tlist, t))


def all_of(tlist: TypeList, t: Any) -> bool:
    """Tell whether every element of ``tlist`` is ``t``; an empty list gives False."""
    items = _require_list(tlist)
    return len(items) > 0 and all(item == t for item in items)


def any_of_if(tlist: TypeList, predicate: Predicate) -> bool:
    """Tell whether some element of ``tlist`` satisfies ``predicate``."""
    return any(predicate(item) for item in _require_list(tlist))


def none_of_if(tlist: TypeList, predicate: Predicate) -> bool:
    """Tell whether no element of ``tlist`` satisfies ``predicate``."""
    return negation(any_of_if(tlist, predicate))


def all_of_if(tlist: TypeList, predicate: Predicate) -> bool:
    """Tell whether every element satisfies ``predicate``; an empty list gives False."""
    items = _require_list(tlist)
    return len(items) > 0 and all(predicate(item) for item in items)


def any_of_from(tlist1: TypeList, tlist2: TypeList) -> bool:
    """Tell whether some element of ``tlist1`` also occurs in ``tlist2``."""
    _require_list(tlist2)
    return any(any_of(tlist2, item) for item in _require_list(tlist1))


def none_of_from(tlist1: TypeList, tlist2: TypeList) -> bool:
    """Tell whether no element of ``tlist1`` occurs in ``tlist2``."""
    return negation(any_of_from(tlist1, tlist2))


def all_of_from(tlist1: TypeList, tlist2: TypeList) -> bool:
    """Tell whether every element of ``tlist1`` occurs in ``tlist2``.

    An empty ``tlist1`` gives True, whatever ``tlist2`` holds.
    """
    _require_list(tlist2)
    return all(any_of(tlist2, item) for item in _require_list(tlist1))


def is_unique(tlist: TypeList) -> bool:
    """Tell whether ``tlist`` holds no element twice."""
    seen: list[Any] = []
    for item in _require_list(tlist):
        if item in seen:
            return False
        seen.append(item)
    return True


def is_same(tlist: TypeList) -> bool:
    """Tell whether the elements after the first all equal the first one.

    The tail must be non-empty for the answer to be True, so a list of a
    single element gives False. An empty list raises ``IndexError``.
    """
    return all_of(pop_front(tlist), front(tlist))


def has_nested_list(tlist: TypeList) -> bool:
    """Tell whether some element of ``tlist`` is itself a type list."""
    return any(is_list(item) for item in _require_list(tlist))


def push_front_unique(tlist: TypeList, t: Any) -> TypeList:
    """Insert ``t`` in front unless it already occurs in ``tlist``."""
    return tlist if any_of(tlist, t) else push_front(tlist, t)


def push_back_unique(tlist: TypeList, t: Any) -> TypeList:
    """Append ``t`` unless it already occurs in ``tlist``."""
    return tlist if any_of(tlist, t) else push_back(tlist, t)


def push_front_if(tlist: TypeList, condition: Predicate, t: Any) -> TypeList:
    """Insert ``t`` in front when ``condition(t)`` holds."""
    return push_front(tlist, t) if condition(t) else _require_list(tlist)


def push_back_if(tlist: TypeList, condition: Predicate, t: Any) -> TypeList:
    """Append ``t`` when ``condition(t)`` holds."""
    return push_back(tlist, t) if condition(t) else _require_list(tlist)
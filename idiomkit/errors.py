"""Error codes grouped into categories, with an HTTP category of its own.

An ``ErrorCode`` is a value tied to the ``ErrorCategory`` it came from. A
category gives each value a message and can map it to a portable
``ErrorCondition``, which lets codes from different sources be compared.
"""

from __future__ import annotations

import errno
import os
import sys
from enum import IntEnum
from typing import Any, Sequence, TextIO


class HttpErrc(IntEnum):
    """HTTP response codes."""

    continue_request = 100
    switching_protocols = 101
    ok = 200
    forbidden = 403
    gateway_timeout = 504
    version_not_supported = 505


class GenericErrc(IntEnum):
    """Portable error conditions named after errno values."""

    operation_not_permitted = errno.EPERM
    no_such_file_or_directory = errno.ENOENT
    interrupted = errno.EINTR
    io_error = errno.EIO
    resource_unavailable_try_again = errno.EAGAIN
    not_enough_memory = errno.ENOMEM
    permission_denied = errno.EACCES
    file_exists = errno.EEXIST
    not_a_directory = errno.ENOTDIR
    is_a_directory = errno.EISDIR
    invalid_argument = errno.EINVAL
    broken_pipe = errno.EPIPE
    directory_not_empty = errno.ENOTEMPTY
    timed_out = errno.ETIMEDOUT
    connection_refused = errno.ECONNREFUSED


class FutureErrc(IntEnum):
    """Errors reported by futures and promises."""

    future_already_retrieved = 1
    promise_already_satisfied = 2
    no_state = 3
    broken_promise = 4


class IoErrc(IntEnum):
    """Errors reported by I/O streams."""

    stream = 1


class ErrorCategory:
    """A source of error codes; categories are compared by identity."""

    name = "unknown"

    def message(self, code: int) -> str:
        """Return the human-readable text for ``code``."""
        return "Unknown error"

    def default_error_condition(self, code: int) -> ErrorCondition:
        """Return the portable condition that ``code`` corresponds to."""
        return ErrorCondition(code, self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class _GenericCategory(ErrorCategory):
    name = "generic"

    def message(self, code: int) -> str:
        return os.strerror(code)


class _FutureCategory(ErrorCategory):
    name = "future"
    _messages = {
        FutureErrc.future_already_retrieved: "Future already retrieved",
        FutureErrc.promise_already_satisfied: "Promise already satisfied",
        FutureErrc.no_state: "No associated state",
        FutureErrc.broken_promise: "Broken promise",
    }

    def message(self, code: int) -> str:
        return self._messages.get(code, "Unknown error")


class _IostreamCategory(ErrorCategory):
    name = "iostream"

    def message(self, code: int) -> str:
        return "iostream error" if code == IoErrc.stream else "Unknown error"


class _HttpCategory(ErrorCategory):
    name = "http"
    _messages = {
        HttpErrc.continue_request: "Continue",
        HttpErrc.switching_protocols: "Switching protocols",
        HttpErrc.ok: "OK",
        HttpErrc.forbidden: "Forbidden",
        HttpErrc.gateway_timeout: "Gateway time-out",
        HttpErrc.version_not_supported: "HTTP version not supported",
    }

    def message(self, code: int) -> str:
        return self._messages[HttpErrc(code)]

    def default_error_condition(self, code: int) -> ErrorCondition:
        if code == HttpErrc.forbidden:
            return ErrorCondition(GenericErrc.permission_denied, generic_category)
        return ErrorCondition(code, self)


generic_category = _GenericCategory()
future_category = _FutureCategory()
iostream_category = _IostreamCategory()
http_category = _HttpCategory()

_CODE_CATEGORIES: dict[type, ErrorCategory] = {
    HttpErrc: http_category,
    GenericErrc: generic_category,
    FutureErrc: future_category,
    IoErrc: iostream_category,
}


class ErrorCondition:
    """A portable error value within a category."""

    __slots__ = ("value", "category")

    def __init__(self, value: int, category: ErrorCategory) -> None:
        self.value = int(value)
        self.category = category

    def message(self) -> str:
        """Return the text for this condition."""
        return self.category.message(self.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, GenericErrc):
            other = ErrorCondition(other, generic_category)
        if not isinstance(other, ErrorCondition):
            return NotImplemented
        return self.category is other.category and self.value == other.value

    def __hash__(self) -> int:
        return hash((id(self.category), self.value))

    def __repr__(self) -> str:
        return f"ErrorCondition({self.value}, {self.category.name!r})"


class ErrorCode:
    """A specific error value reported by a category."""

    __slots__ = ("value", "category")

    def __init__(self, value: int, category: ErrorCategory) -> None:
        self.value = int(value)
        self.category = category

    def message(self) -> str:
        """Return the text for this code."""
        return self.category.message(self.value)

    def default_error_condition(self) -> ErrorCondition:
        """Return the portable condition this code corresponds to."""
        return self.category.default_error_condition(self.value)

    def __bool__(self) -> bool:
        return self.value != 0

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ErrorCode):
            return self.category is other.category and self.value == other.value
        if isinstance(other, GenericErrc):
            other = ErrorCondition(other, generic_category)
        if isinstance(other, ErrorCondition):
            return self.default_error_condition() == other or (
                other.category is self.category and other.value == self.value
            )
        if isinstance(other, (HttpErrc, FutureErrc, IoErrc)):
            return self == make_error_code(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((id(self.category), self.value))

    def __repr__(self) -> str:
        return f"ErrorCode({self.value}, {self.category.name!r})"


def make_error_code(e: IntEnum) -> ErrorCode:
    """Build the ``ErrorCode`` for an enumerated error value."""
    category = _CODE_CATEGORIES.get(type(e))
    if category is None:
        raise TypeError(f"no error category for {e!r}")
    return ErrorCode(e, category)


def process(ec: ErrorCode, out: TextIO | None = None) -> None:
    """Describe ``ec`` and its default condition on ``out``."""
    out = out if out is not None else sys.stdout
    cond = ec.default_error_condition()
    out.write(
        f"category: {ec.category.name}\n"
        f"code: {ec.value}\n"
        f"bool: {int(bool(ec))}\n"
        f"message: {ec.message()}\n"
        f"default category: {cond.category.name}\n"
        f"default code: {cond.value}\n"
        f"default message: {cond.message()}\n"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Describe a few sample error codes."""
    for e in (
        GenericErrc.file_exists,
        FutureErrc.broken_promise,
        IoErrc.stream,
        HttpErrc.switching_protocols,
        HttpErrc.forbidden,
    ):
        process(make_error_code(e))
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
import errno
import io
import os

import pytest

from idiomkit.errors import (
    ErrorCode,
    ErrorCondition,
    FutureErrc,
    GenericErrc,
    HttpErrc,
    IoErrc,
    http_category,
    generic_category,
    main,
    make_error_code,
    process,
)


def test_http_code_basics():
    ec = make_error_code(HttpErrc.switching_protocols)
    assert ec.category.name == "http"
    assert ec.value == 101
    assert bool(ec) is True
    assert ec.message() == "Switching protocols"


@pytest.mark.parametrize(
    "e, text",
    [
        (HttpErrc.continue_request, "Continue"),
        (HttpErrc.ok, "OK"),
        (HttpErrc.forbidden, "Forbidden"),
        (HttpErrc.gateway_timeout, "Gateway time-out"),
        (HttpErrc.version_not_supported, "HTTP version not supported"),
    ],
)
def test_http_messages(e, text):
    assert make_error_code(e).message() == text


def test_http_unknown_code_message_raises():
    with pytest.raises(ValueError):
        http_category.message(999)


def test_http_default_condition_is_own_category():
    cond = make_error_code(HttpErrc.switching_protocols).default_error_condition()
    assert cond.category is http_category
    assert cond.value == HttpErrc.switching_protocols


def test_forbidden_maps_to_permission_denied():
    ec = make_error_code(HttpErrc.forbidden)
    cond = ec.default_error_condition()
    assert cond.category is generic_category
    assert cond.value == errno.EACCES
    assert cond.message() == os.strerror(errno.EACCES)
    assert ec == GenericErrc.permission_denied
    assert ec == HttpErrc.forbidden
    assert HttpErrc.forbidden == ec


def test_code_does_not_match_other_condition():
    ec = make_error_code(HttpErrc.ok)
    assert [ec == GenericErrc.permission_denied, ec == HttpErrc.forbidden] == [False, False]
    assert ec.default_error_condition() == ErrorCondition(200, http_category)


def test_generic_code():
    ec = make_error_code(GenericErrc.file_exists)
    assert ec.category.name == "generic"
    assert ec.message() == os.strerror(errno.EEXIST)
    assert ec == GenericErrc.file_exists
    assert ec.default_error_condition() == ErrorCondition(errno.EEXIST, generic_category)


def test_future_and_io_codes():
    fe = make_error_code(FutureErrc.broken_promise)
    assert fe.category.name == "future"
    assert fe.message() == "Broken promise"
    io_ec = make_error_code(IoErrc.stream)
    assert io_ec.category.name == "iostream"
    assert io_ec == IoErrc.stream
    assert not (io_ec == fe)


def test_zero_code_is_false():
    zero = ErrorCode(0, http_category)
    assert zero.value == 0
    assert [bool(zero), bool(make_error_code(HttpErrc.ok))] == [False, True]


def test_codes_from_different_categories_differ():
    assert make_error_code(FutureErrc.future_already_retrieved) != make_error_code(IoErrc.stream)
    assert make_error_code(IoErrc.stream) == make_error_code(IoErrc.stream)


def test_make_error_code_rejects_unknown_enum():
    with pytest.raises(TypeError):
        make_error_code(42)


def test_process_output():
    out = io.StringIO()
    process(make_error_code(HttpErrc.forbidden), out)
    assert out.getvalue().splitlines() == [
        "category: http",
        "code: 403",
        "bool: 1",
        "message: Forbidden",
        "default category: generic",
        f"default code: {errno.EACCES}",
        f"default message: {os.strerror(errno.EACCES)}",
    ]


def test_main_describes_five_codes(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert out.count("category: ") == 10
    assert "message: Broken promise" in out
import io

import pytest

from idiomkit.ascii import (
    AsciiString,
    cast,
    is_ascii,
    raise_on_violation,
    read_ascii,
    replace_with,
    sieve,
    write_ascii,
)


@pytest.mark.parametrize("ch, expected", [("a", True), ("\x00", True), ("\x7f", True), ("\x80", False), ("é", False)])
def test_is_ascii_for_characters(ch, expected):
    assert is_ascii(ch) is expected


@pytest.mark.parametrize("code, expected", [(0, True), (0x7F, True), (0x80, False), (-1, False)])
def test_is_ascii_for_codes(code, expected):
    assert is_ascii(code) is expected


def test_plain_ascii_is_kept():
    assert AsciiString("Hello") == "Hello"


def test_default_replacement_is_question_mark():
    assert AsciiString("h\u00e9llo") == "h?llo"


def test_custom_replacement():
    assert AsciiString("h\u00e9llo", replace_with("*")) == "h*llo"


def test_raise_on_violation():
    with pytest.raises(ValueError):
        AsciiString("h\u00e9llo", raise_on_violation)


def test_replace_with_rejects_long_replacement():
    with pytest.raises(ValueError):
        replace_with("ab")


def test_result_only_has_ascii():
    result = sieve("\u65e5\u672c abc \u00fc")
    assert all(is_ascii(c) for c in result)
    assert len(result) == len("\u65e5\u672c abc \u00fc")


def test_cast_from_bytes():
    assert cast(b"abc") == "abc"
    assert cast(b"a\xffb") == "a?b"


def test_cast_rejects_other_types():
    with pytest.raises(TypeError):
        cast(42)


def test_concatenation_stays_sieved():
    joined = AsciiString("abc") + "\u00e9"
    assert isinstance(joined, AsciiString)
    assert joined == "abc?"
    prefixed = "\u00e9" + AsciiString("abc")
    assert isinstance(prefixed, AsciiString)
    assert prefixed == "?abc"


def test_concatenation_keeps_handler():
    with pytest.raises(ValueError):
        AsciiString("abc", raise_on_violation) + "\u00e9"


def test_read_reads_one_word():
    stream = io.StringIO("   world!  next")
    assert read_ascii(stream) == "world!"
    assert read_ascii(stream) == "next"
    assert read_ascii(stream) == ""


def test_read_sieves_input():
    assert read_ascii(io.StringIO("gr\u00fc\u00dfe")) == "gr??e"


def test_read_can_raise():
    with pytest.raises(ValueError):
        read_ascii(io.StringIO("\u00fc"), raise_on_violation)


def test_write_read_round_trip():
    stream = io.StringIO()
    assert write_ascii(stream, AsciiString("Hello")) is stream
    stream.seek(0)
    assert read_ascii(stream) == "Hello"
import pytest

from idiomkit.string_switch import fnv1a_32, main, string_hash, switch


def test_fnv1a_empty_is_offset_basis():
    assert fnv1a_32(b"") == 2166136261


def test_fnv1a_known_vectors():
    assert fnv1a_32(b"a") == 0xE40C292C
    assert fnv1a_32(b"foobar") == 0xBF9CF968


def test_fnv1a_fits_32_bits():
    for data in (b"x" * 100, bytes(range(256)), b"\xff\xfe"):
        assert 0 <= fnv1a_32(data) <= 0xFFFFFFFF


def test_high_bytes_are_sign_extended():
    assert fnv1a_32(b"\x80") == fnv1a_32(b"\x80")
    assert fnv1a_32(b"\x80") != fnv1a_32(b"\x7f")
    # A sign-extended byte flips the upper bits of the running hash too.
    low = ((2166136261 ^ 0x80) * 16777619) & 0xFFFFFFFF
    assert fnv1a_32(b"\x80") != low


def test_string_hash_includes_terminator():
    assert string_hash("value X") == fnv1a_32(b"value X\0")
    assert string_hash("") == fnv1a_32(b"\0")


def test_string_hash_is_deterministic_and_distinguishes():
    assert string_hash("value X") == string_hash("value X")
    assert len({string_hash(s) for s in ("value X", "value Y", "value Z")}) == 3


def _recording_cases(calls):
    return {
        "value X": lambda: calls.append("do_this") or "x",
        "value Y": lambda: calls.append("do_that") or "y",
        "value Z": lambda: calls.append("do_something_else") or "z",
    }


@pytest.mark.parametrize(
    "value,expected",
    [
        ("value X", "do_this"),
        ("value Y", "do_that"),
        ("value Z", "do_something_else"),
        ("value #", "dont_know_what_to_do"),
    ],
)
def test_switch_dispatch(value, expected):
    calls = []
    switch(value, _recording_cases(calls), lambda: calls.append("dont_know_what_to_do"))
    assert calls == [expected]


def test_switch_returns_action_result():
    calls = []
    assert switch("value Y", _recording_cases(calls)) == "y"


def test_switch_without_default_returns_none():
    calls = []
    assert switch("nothing", _recording_cases(calls)) is None
    assert calls == []


def test_switch_duplicate_labels_rejected():
    class Label(str):
        pass

    cases = {"value X": lambda: 1, Label("value X"): lambda: 2}
    assert len(cases) == 1
    colliding = {"value X": lambda: 1}
    colliding[Label("value X") + ""] = lambda: 2
    assert switch("value X", colliding) == 2


def test_switch_hash_collision_raises():
    class Hashless:
        def __init__(self, text):
            self.text = text

    cases = {"a": lambda: 1}
    assert switch("a", cases) == 1
    with pytest.raises(ValueError):
        switch("a", _CollidingCases())


class _CollidingCases(dict):
    def items(self):
        return [("same", lambda: 1), ("same", lambda: 2)]


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == [
        "do_this",
        "do_something_else",
        "dont_know_what_to_do",
    ]
import pytest

from idiomkit.catalogue import (
    Acrobat,
    Circle,
    Rectangle,
    Triangle,
    WordPad,
    editors,
    main,
    shapes,
)
from idiomkit.registrar import DuplicateRegistrationError


@pytest.mark.parametrize(
    "name, cls",
    [("circle", Circle), ("rectangle", Rectangle), ("triangle", Triangle)],
)
def test_shapes_are_enrolled(name, cls):
    made = shapes.get(name)
    assert type(made) is cls
    assert made.name == name


@pytest.mark.parametrize("name, cls", [("Acrobat", Acrobat), ("WordPad", WordPad)])
def test_editors_are_enrolled(name, cls):
    assert type(editors.get(name)) is cls


def test_each_get_makes_a_new_object():
    first = shapes.get("circle")
    second = shapes.get("circle")
    assert [type(first), type(second)] == [Circle, Circle]
    assert [first.name, second.name] == ["circle", "circle"]
    assert len({id(first), id(second)}) == 2


def test_unknown_name_gives_none():
    assert shapes.get("unknown") is None
    assert editors.get("circle") is None


def test_duplicate_registration_is_rejected():
    with pytest.raises(DuplicateRegistrationError):
        shapes.register("circle", Circle)
    assert type(shapes.get("circle")) is Circle


def test_shape_draws_its_name(capsys):
    Triangle().draw()
    assert capsys.readouterr().out == "my name is triangle\n"


def test_editor_prefixes_drawing(capsys):
    Acrobat().draw(Circle())
    assert capsys.readouterr().out == "[Acrobat]: my name is circle\n"


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "[Acrobat]: my name is circle",
        "[WordPad]: my name is rectangle",
        "my name is triangle",
    ]
"""Concrete shapes and editors that enrol themselves by name."""

from __future__ import annotations

import sys
from typing import Callable, Sequence, TypeVar

from idiomkit.registrar import Editor, Registrar, Shape

T = TypeVar("T", bound=type)

shapes = Registrar()
editors = Registrar()


def _auto_enrol(registrar: Registrar) -> Callable[[T], T]:
    """Register a class under its ``name`` attribute in ``registrar``."""

    def decorator(cls: T) -> T:
        registrar.register(cls.name, cls)
        return cls

    return decorator


class _NamedShape(Shape):
    name = ""

    def _do_draw(self) -> None:
        sys.stdout.write(f"my name is {self.name}\n")


@_auto_enrol(shapes)
class Circle(_NamedShape):
    """A circle."""

    name = "circle"


@_auto_enrol(shapes)
class Rectangle(_NamedShape):
    """A rectangle."""

    name = "rectangle"


@_auto_enrol(shapes)
class Triangle(_NamedShape):
    """A triangle."""

    name = "triangle"


class _NamedEditor(Editor):
    name = ""

    def _do_draw(self, shape: Shape) -> None:
        sys.stdout.write(f"[{self.name}]: ")
        shape.draw()


@_auto_enrol(editors)
class Acrobat(_NamedEditor):
    """An editor that prefixes its drawings with its name."""

    name = "Acrobat"


@_auto_enrol(editors)
class WordPad(_NamedEditor):
    """An editor that prefixes its drawings with its name."""

    name = "WordPad"


def main(argv: Sequence[str] | None = None) -> int:
    """Look up editors and shapes by name and draw them."""
    acrobat = editors.get("Acrobat")
    wordpad = editors.get("WordPad")
    if acrobat is None or wordpad is None:
        raise LookupError("required editors are not registered")

    shape = shapes.get("circle")
    if shape is not None:
        acrobat.draw(shape)
    shape = shapes.get("rectangle")
    if shape is not None:
        wordpad.draw(shape)
    shape = shapes.get("triangle")
    if shape is not None:
        shape.draw()
    shape = shapes.get("unknown")
    if shape is not None:
        shape.draw()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
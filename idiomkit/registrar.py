"""Named factories with self-registering implementations.

A ``Registrar`` maps names to factories for one interface. Implementations
join it through the ``enrol`` class decorator and are produced by name.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, TypeVar

T = TypeVar("T")


class DuplicateRegistrationError(KeyError):
    """Raised when a name is registered a second time."""


class Registrar:
    """A name-to-factory table for one interface."""

    def __init__(self) -> None:
        self._factories: dict[str, Callable[[], Any]] = {}

    def register(self, name: str, factory: Callable[[], Any]) -> bool:
        """Register ``factory`` under ``name``; a duplicate name raises."""
        if name in self._factories:
            raise DuplicateRegistrationError(f"duplication is not allowed: {name!r}")
        self._factories[name] = factory
        return True

    def enrol(self, name: str) -> Callable[[type[T]], type[T]]:
        """Class decorator that registers the class itself as the factory."""

        def decorator(cls: type[T]) -> type[T]:
            self.register(name, cls)
            return cls

        return decorator

    def get(self, name: str) -> Any | None:
        """Return a new object made by the factory for ``name``, or None."""
        factory = self._factories.get(name)
        return factory() if factory is not None else None

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._factories))

    def __len__(self) -> int:
        return len(self._factories)


class Shape(ABC):
    """Something that can draw itself."""

    def draw(self) -> None:
        """Draw this shape."""
        self._do_draw()

    @abstractmethod
    def _do_draw(self) -> None:
        """Perform the drawing."""


class Editor(ABC):
    """Something that draws shapes."""

    def draw(self, shape: Shape) -> None:
        """Draw ``shape`` with this editor."""
        self._do_draw(shape)

    @abstractmethod
    def _do_draw(self, shape: Shape) -> None:
        """Perform the drawing of ``shape``."""
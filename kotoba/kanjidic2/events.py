"""Parser events and the builder protocol that consumes them."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Union


class Kanjidic2Error(Exception):
    """Raised when the KANJIDIC2 document does not have the expected shape."""


@dataclass(frozen=True)
class Text:
    """Character data inside an element."""

    text: str


@dataclass(frozen=True)
class Open:
    """The start of an element."""

    name: str


@dataclass(frozen=True)
class Attribute:
    """An attribute of the element that was just opened."""

    name: str
    value: str


@dataclass(frozen=True)
class Close:
    """The end of the current element."""


@dataclass(frozen=True)
class Eof:
    """The end of the input."""


Output = Union[Text, Open, Attribute, Close, Eof]


class _Pending(enum.Enum):
    PENDING = enum.auto()


PENDING = _Pending.PENDING
"""Returned by :meth:`Builder.poll` while the element is not finished."""


class Builder(ABC):
    """Consumes events for one element and produces its value."""

    @abstractmethod
    def wants_text(self) -> bool:
        """Whether plain text inside the current element should be reported."""

    @abstractmethod
    def poll(self, output: Output) -> Any:
        """Feed one event; return the finished value or :data:`PENDING`."""


def _unsupported(output: Output) -> Kanjidic2Error:
    return Kanjidic2Error(f"Unsupported {output!r}")


class TextBuilder(Builder):
    """Builds the text content of a plain text element."""

    def __init__(self) -> None:
        self._text: str | None = None

    def wants_text(self) -> bool:
        return True

    def poll(self, output: Output) -> Any:
        if isinstance(output, Text):
            self._text = output.text
            return PENDING
        if isinstance(output, Close):
            if self._text is None:
                raise Kanjidic2Error("missing text")
            return self._text
        raise _unsupported(output)


ChildSpec = tuple[Callable[[], Builder], Callable[[Any], None]]


class CompositeBuilder(Builder):
    """An element built from named child elements.

    Subclasses list the children they accept in :meth:`_children`, each
    with a builder factory and a handler for the finished child value,
    and assemble the result in :meth:`build` when the element closes.
    """

    def __init__(self) -> None:
        self._child: Builder | None = None
        self._handler: Callable[[Any], None] | None = None

    @abstractmethod
    def _children(self) -> Mapping[str, ChildSpec]:
        """Child element names mapped to their factory and handler."""

    @abstractmethod
    def build(self) -> Any:
        """Assemble the value once the element has closed."""

    def wants_text(self) -> bool:
        return self._child is not None and self._child.wants_text()

    def poll(self, output: Output) -> Any:
        if self._child is None:
            if isinstance(output, Open):
                spec = self._children().get(output.name)
                if spec is None:
                    raise _unsupported(output)
                factory, handler = spec
                self._child = factory()
                self._handler = handler
                return PENDING
            if isinstance(output, Close):
                return self.build()
            raise _unsupported(output)

        value = self._child.poll(output)
        if value is PENDING:
            return PENDING
        handler = self._handler
        self._child = None
        self._handler = None
        if handler is not None:
            handler(value)
        return PENDING


class ArrayBuilder(CompositeBuilder):
    """Collects repeated child elements with a single name into a list."""

    def __init__(self, name: str, factory: Callable[[], Builder]) -> None:
        super().__init__()
        self._name = name
        self._factory = factory
        self._values: list[Any] = []

    def _children(self) -> Mapping[str, ChildSpec]:
        return {self._name: (self._factory, self._values.append)}

    def build(self) -> list[Any]:
        values, self._values = self._values, []
        return values
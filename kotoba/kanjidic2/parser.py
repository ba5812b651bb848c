"""Streaming parser for KANJIDIC2 XML documents."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from xml.parsers import expat

from kotoba.kanjidic2.elements import Character, CharacterBuilder, Header, HeaderBuilder
from kotoba.kanjidic2.events import (
    PENDING,
    Attribute,
    Builder,
    Close,
    Eof,
    Kanjidic2Error,
    Open,
    Output,
    Text,
)

_CHUNK = 1 << 16
_ROOT = "kanjidic2"


class _Stage(enum.Enum):
    INITIAL = enum.auto()
    ROOT = enum.auto()


@dataclass(frozen=True)
class _RawText:
    text: str
    cdata: bool


def _local(name: str) -> str:
    return name.rpartition(":")[2]


class Parser:
    """Pulls :class:`Character` entries one at a time from a document.

    The header, once seen, is available as :attr:`header`.
    """

    def __init__(self, input: str) -> None:
        self._input = input
        self._offset = 0
        self._finished = False
        self._events: deque[Output | _RawText] = deque()
        self._text: list[str] = []
        self._cdata = False
        self._state: _Stage | Builder = _Stage.INITIAL
        self._path: list[str] = []
        self._closed = False
        self.header: Header | None = None

        xml = expat.ParserCreate()
        xml.ordered_attributes = True
        xml.StartElementHandler = self._on_start
        xml.EndElementHandler = self._on_end
        xml.CharacterDataHandler = self._text.append
        xml.StartCdataSectionHandler = self._on_cdata
        self._xml = xml

    def _on_cdata(self) -> None:
        self._cdata = True

    def _flush_text(self) -> None:
        if self._text:
            self._events.append(_RawText("".join(self._text), self._cdata))
            self._text.clear()
        self._cdata = False

    def _on_start(self, name: str, attributes: list[str]) -> None:
        self._flush_text()
        self._events.append(Open(_local(name)))
        for key, value in zip(attributes[::2], attributes[1::2]):
            self._events.append(Attribute(_local(key), value))

    def _on_end(self, name: str) -> None:
        self._flush_text()
        self._events.append(Close())

    def _pull(self) -> Output | _RawText | None:
        while not self._events:
            if self._finished:
                return None
            chunk = self._input[self._offset : self._offset + _CHUNK]
            self._offset += len(chunk)
            final = self._offset >= len(self._input)
            try:
                self._xml.Parse(chunk, final)
            except expat.ExpatError as error:
                raise Kanjidic2Error(f"invalid XML: {error}") from error
            if final:
                self._flush_text()
                self._finished = True
        return self._events.popleft()

    def _wants_text(self) -> bool:
        return isinstance(self._state, Builder) and self._state.wants_text()

    def _next_output(self) -> Output:
        while True:
            if self._closed:
                self._closed = False
                if self._path:
                    self._path.pop()

            event = self._pull()
            if event is None:
                return Eof()
            if isinstance(event, _RawText):
                if event.cdata or self._wants_text():
                    return Text(event.text)
                continue
            if isinstance(event, Open):
                self._path.append(event.name)
            elif isinstance(event, Close):
                self._closed = True
            return event

    def parse(self) -> Character | None:
        """Return the next character, or ``None`` once the root element closes."""
        while True:
            output = self._next_output()
            state = self._state

            if state is _Stage.INITIAL:
                if output != Open(_ROOT):
                    raise Kanjidic2Error(
                        f"expected {_ROOT!r} element, but found {output!r}"
                    )
                self._state = _Stage.ROOT
            elif state is _Stage.ROOT:
                if output == Open("header"):
                    self._state = HeaderBuilder()
                elif output == Open("character"):
                    self._state = CharacterBuilder()
                elif isinstance(output, Close):
                    self._state = _Stage.INITIAL
                    return None
                else:
                    raise Kanjidic2Error(
                        f"expected `header` or `character` element, but found {output!r}"
                    )
            else:
                try:
                    value = state.poll(output)
                except Kanjidic2Error as error:
                    path = "/".join(self._path)
                    raise Kanjidic2Error(f"{path}: {error}") from error
                if value is PENDING:
                    continue
                self._state = _Stage.ROOT
                if isinstance(state, HeaderBuilder):
                    self.header = value
                else:
                    return value

    def __iter__(self) -> Iterator[Character]:
        while (character := self.parse()) is not None:
            yield character


def parse_characters(text: str) -> list[Character]:
    """Parse every character of a KANJIDIC2 document."""
    return list(Parser(text))
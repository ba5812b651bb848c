"""Search prompt state and its URL query-string encoding."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from kotoba.romaji import analyze

_USIZE_MAX = (1 << 64) - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


class Mode(enum.Enum):
    """How text typed into the prompt is processed."""

    UNFILTERED = "unfiltered"
    HIRAGANA = "hiragana"
    KATAKANA = "katakana"


def _parse_index(value: str) -> int | None:
    if _UNSIGNED.fullmatch(value) is None:
        return None
    number = int(value)
    if number > _USIZE_MAX:
        return None
    return number


@dataclass
class Query:
    """The state of the prompt as carried in the page URL.

    ``q`` is the typed text, ``translation`` an optional English sentence,
    ``a`` the substrings found by the last analysis and ``i`` the one
    currently shown.
    """

    q: str = ""
    translation: str | None = None
    a: list[str] = field(default_factory=list)
    i: int = 0
    mode: Mode = Mode.UNFILTERED

    @classmethod
    def deserialize(cls, raw: Iterable[tuple[str, str]]) -> Query:
        """Build a query from key/value pairs; unknown keys are ignored."""
        query = cls()

        for key, value in raw:
            if key == "q":
                query.q = value
            elif key == "t":
                query.translation = value
            elif key == "a":
                query.a.append(value)
            elif key == "i":
                index = _parse_index(value)
                if index is not None:
                    query.i = index
            elif key == "mode":
                if value == "hiragana":
                    query.mode = Mode.HIRAGANA
                elif value == "katakana":
                    query.mode = Mode.KATAKANA
                else:
                    query.mode = Mode.UNFILTERED

        return query

    def serialize(self) -> list[tuple[str, str]]:
        """Key/value pairs for the URL, leaving out default values."""
        out: list[tuple[str, str]] = []

        if self.q:
            out.append(("q", self.q))

        if self.translation is not None:
            out.append(("t", self.translation))

        out.extend(("a", a) for a in self.a)

        if self.i != 0:
            out.append(("i", str(self.i)))

        if self.mode is not Mode.UNFILTERED:
            out.append(("mode", self.mode.value))

        return out

    def current_input(self) -> str:
        """The text to search for: the selected analysis, or else ``q``."""
        if self.a and self.i < len(self.a):
            return self.a[self.i]
        return self.q


def process_query(text: str, mode: Mode) -> str:
    """Convert typed text according to the prompt mode."""
    if mode is Mode.HIRAGANA:
        return "".join(segment.hiragana() for segment in analyze(text))
    if mode is Mode.KATAKANA:
        return "".join(segment.katakana() for segment in analyze(text))
    return text


def decode_query(pairs: Iterable[tuple[str, str]] | None) -> tuple[Query, str]:
    """Decode URL pairs into a query and the text that should be searched."""
    query = Query.deserialize(pairs if pairs is not None else ())
    return query, query.current_input()
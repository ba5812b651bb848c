"""Romaji, hiragana and katakana conversions."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass

from kotoba.romaji_table import kana_rows, rows

_MAX_PATTERN = 4


class Transform(enum.Enum):
    """A transformation to perform."""

    HIRAGANA = "hiragana"
    KATAKANA = "katakana"
    ROMAJI = "romaji"


def _build_patterns() -> dict[str, int]:
    """Map each recognised spelling to its matching priority."""
    patterns: dict[str, int] = {}

    def add(spelling: str) -> None:
        patterns.setdefault(spelling, len(patterns))

    for row in rows():
        add(row.hiragana)
        add(row.katakana)
        for form in row.romaji:
            add(form)
    for kana, _ in kana_rows():
        add(kana)
    return patterns


def _build_hiragana() -> dict[str, str]:
    table: dict[str, str] = {}
    for row in rows():
        table.setdefault(row.katakana, row.hiragana)
        for form in row.romaji:
            table.setdefault(form, row.hiragana)
    return table


def _build_katakana() -> dict[str, str]:
    table: dict[str, str] = {}
    for row in rows():
        table.setdefault(row.hiragana, row.katakana)
        for form in row.romaji:
            table.setdefault(form, row.katakana)
    return table


def _build_romaji() -> dict[str, str]:
    table: dict[str, str] = {}
    for row in rows():
        table.setdefault(row.hiragana, row.canonical)
        table.setdefault(row.katakana, row.canonical)
    for kana, forms in kana_rows():
        table.setdefault(kana, forms[0])
    return table


_PATTERNS = _build_patterns()
_TO_HIRAGANA = _build_hiragana()
_TO_KATAKANA = _build_katakana()
_TO_ROMAJI = _build_romaji()


@dataclass(frozen=True, eq=False)
class Segment:
    """A piece of analysed text that converts as a unit."""

    text: str

    def hiragana(self) -> str:
        """Convert the segment into hiragana."""
        return _TO_HIRAGANA.get(self.text, self.text)

    def katakana(self) -> str:
        """Convert the segment into katakana."""
        return _TO_KATAKANA.get(self.text, self.text)

    def romanize(self) -> str:
        """Romanize the segment."""
        return _TO_ROMAJI.get(self.text, self.text)

    def transform(self, transform: Transform) -> str:
        """Apply the given transformation."""
        if transform is Transform.HIRAGANA:
            return self.hiragana()
        if transform is Transform.KATAKANA:
            return self.katakana()
        return self.romanize()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Segment):
            return self.text == other.text
        if isinstance(other, str):
            return self.text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.text)

    def __str__(self) -> str:
        return self.text


def _segment_length(text: str, start: int) -> int:
    best_rank: int | None = None
    best_length = 1
    for length in range(1, _MAX_PATTERN + 1):
        end = start + length
        if end > len(text):
            break
        rank = _PATTERNS.get(text[start:end])
        if rank is not None and (best_rank is None or rank < best_rank):
            best_rank = rank
            best_length = length
    return best_length


def analyze(input: str) -> Iterator[Segment]:
    """Split text into convertible segments.

    At each position the table spelling with the highest priority that
    prefixes the remaining text is taken; otherwise a single character.
    """
    position = 0
    while position < len(input):
        length = _segment_length(input, position)
        yield Segment(input[position : position + length])
        position += length


_UPPER = "U"

# One class letter per code point: U ordinary, L small, P punctuation/marks,
# X unassigned.
_HIRA_BASE = 0x3040
_HIRA_CLASSES = (
    "XUUUUUUUUUUUUUUU"  # U+304x
    "UUUUUUUUUUUUUUUU"  # U+305x
    "UUUUUUUUUUUUUUUU"  # U+306x
    "UUUUUUUUUUUUUUUU"  # U+307x
    "UUULULULUUUUUUUU"  # U+308x
    "UUUUUUUXXPPPPPPP"  # U+309x
)

_KATA_BASE = 0x30A0
_KATA_CLASSES = (
    "PLULULULULUUUUUU"  # U+30Ax
    "UUUUUUUUUUUUUUUU"  # U+30Bx
    "UUULUUUUUUUUUUUU"  # U+30Cx
    "UUUUUUUUUUUUUUUU"  # U+30Dx
    "UUULULULUUUUUULU"  # U+30Ex
    "UUUUUUUUUUUPPPPP"  # U+30Fx
)


def _has_class(c: str, base: int, classes: str, wanted: str) -> bool:
    offset = ord(c) - base
    return 0 <= offset < len(classes) and classes[offset] == wanted


def is_hiragana(c: str) -> bool:
    """Whether ``c`` is an ordinary (not small) hiragana character."""
    return _has_class(c, _HIRA_BASE, _HIRA_CLASSES, _UPPER)


def is_katakana(c: str) -> bool:
    """Whether ``c`` is an ordinary (not small) katakana character."""
    return _has_class(c, _KATA_BASE, _KATA_CLASSES, _UPPER)
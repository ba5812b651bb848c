"""Composite KANJIDIC2 elements: header, misc data, readings and characters."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import partial

from kotoba.kanjidic2.events import (
    ArrayBuilder,
    ChildSpec,
    CompositeBuilder,
    Kanjidic2Error,
    TextBuilder,
)
from kotoba.kanjidic2.leaves import (
    CodePoint,
    CodePointBuilder,
    DictionaryReference,
    DictionaryReferenceBuilder,
    Meaning,
    MeaningBuilder,
    QueryCode,
    QueryCodeBuilder,
    Radical,
    RadicalBuilder,
    Reading,
    ReadingBuilder,
    Variant,
    VariantBuilder,
)

_U8_MAX = 0xFF
_U32_MAX = 0xFFFF_FFFF
_NUMBER = re.compile(r"\+?[0-9]+")


def _parse_number(value: str, maximum: int, element: str) -> int:
    if _NUMBER.fullmatch(value) is None or int(value) > maximum:
        raise Kanjidic2Error(f"invalid number {value!r} in `{element}`")
    return int(value)


@dataclass(frozen=True)
class Header:
    """Version information about the dictionary file."""

    file_version: str
    database_version: str
    date_of_creation: str


@dataclass(frozen=True)
class Misc:
    """Miscellaneous information about a character."""

    grade: int | None = None
    stroke_count: int | None = None
    variant: Variant | None = None
    freq: int | None = None
    jlpt: int | None = None
    radical_names: tuple[str, ...] = ()


@dataclass(frozen=True)
class ReadingMeaning:
    """Readings, meanings and name readings of a character."""

    readings: tuple[Reading, ...] = ()
    meanings: tuple[Meaning, ...] = ()
    nanori: tuple[str, ...] = ()


@dataclass(frozen=True)
class Character:
    """One kanji entry."""

    literal: str
    misc: Misc
    code_point: tuple[CodePoint, ...] = ()
    radical: tuple[Radical, ...] = ()
    dictionary_references: tuple[DictionaryReference, ...] = ()
    query_codes: tuple[QueryCode, ...] = ()
    reading_meaning: ReadingMeaning = field(default_factory=ReadingMeaning)


_HEADER_FIELDS = ("file_version", "database_version", "date_of_creation")


class HeaderBuilder(CompositeBuilder):
    """Builds a :class:`Header` from the ``header`` element."""

    def __init__(self) -> None:
        super().__init__()
        self._values: dict[str, str] = {}
        self._spec: dict[str, ChildSpec] = {
            name: (TextBuilder, partial(self._values.__setitem__, name))
            for name in _HEADER_FIELDS
        }

    def _children(self) -> Mapping[str, ChildSpec]:
        return self._spec

    def build(self) -> Header:
        for name in _HEADER_FIELDS:
            if name not in self._values:
                raise Kanjidic2Error(f"missing `{name}`")
        return Header(**self._values)


class MiscBuilder(CompositeBuilder):
    """Builds a :class:`Misc` from the ``misc`` element."""

    def __init__(self) -> None:
        super().__init__()
        self._numbers: dict[str, int] = {}
        self._variant: Variant | None = None
        self._radical_names: list[str] = []
        self._spec: dict[str, ChildSpec] = {
            "grade": (TextBuilder, partial(self._set_number, "grade", _U8_MAX)),
            "stroke_count": (
                TextBuilder,
                partial(self._set_number, "stroke_count", _U8_MAX),
            ),
            "variant": (VariantBuilder, partial(setattr, self, "_variant")),
            "freq": (TextBuilder, partial(self._set_number, "freq", _U32_MAX)),
            "jlpt": (TextBuilder, partial(self._set_number, "jlpt", _U8_MAX)),
            "rad_name": (TextBuilder, self._radical_names.append),
        }

    def _set_number(self, name: str, maximum: int, value: str) -> None:
        self._numbers[name] = _parse_number(value, maximum, name)

    def _children(self) -> Mapping[str, ChildSpec]:
        return self._spec

    def build(self) -> Misc:
        return Misc(
            variant=self._variant,
            radical_names=tuple(self._radical_names),
            **self._numbers,
        )


class RmGroupBuilder(CompositeBuilder):
    """Collects the readings and meanings of an ``rmgroup`` element."""

    def __init__(self) -> None:
        super().__init__()
        self._readings: list[Reading] = []
        self._meanings: list[Meaning] = []
        self._spec: dict[str, ChildSpec] = {
            "reading": (ReadingBuilder, self._readings.append),
            "meaning": (MeaningBuilder, self._meanings.append),
        }

    def _children(self) -> Mapping[str, ChildSpec]:
        return self._spec

    def build(self) -> tuple[list[Reading], list[Meaning]]:
        return list(self._readings), list(self._meanings)


class ReadingMeaningBuilder(CompositeBuilder):
    """Builds a :class:`ReadingMeaning` from the ``reading_meaning`` element."""

    def __init__(self) -> None:
        super().__init__()
        self._readings: list[Reading] = []
        self._meanings: list[Meaning] = []
        self._nanori: list[str] = []
        self._spec: dict[str, ChildSpec] = {
            "rmgroup": (RmGroupBuilder, self._add_group),
            "nanori": (TextBuilder, self._nanori.append),
        }

    def _add_group(self, group: tuple[list[Reading], list[Meaning]]) -> None:
        readings, meanings = group
        self._readings.extend(readings)
        self._meanings.extend(meanings)

    def _children(self) -> Mapping[str, ChildSpec]:
        return self._spec

    def build(self) -> ReadingMeaning:
        return ReadingMeaning(
            readings=tuple(self._readings),
            meanings=tuple(self._meanings),
            nanori=tuple(self._nanori),
        )


class CharacterBuilder(CompositeBuilder):
    """Builds a :class:`Character` from the ``character`` element."""

    def __init__(self) -> None:
        super().__init__()
        self._literal: str | None = None
        self._misc: Misc | None = None
        self._reading_meaning: ReadingMeaning | None = None
        self._code_points: list[CodePoint] = []
        self._radicals: list[Radical] = []
        self._references: list[DictionaryReference] = []
        self._query_codes: list[QueryCode] = []
        self._spec: dict[str, ChildSpec] = {
            "literal": (TextBuilder, partial(setattr, self, "_literal")),
            "codepoint": (
                partial(ArrayBuilder, CodePointBuilder.ELEMENT, CodePointBuilder),
                self._code_points.extend,
            ),
            "radical": (
                partial(ArrayBuilder, RadicalBuilder.ELEMENT, RadicalBuilder),
                self._radicals.extend,
            ),
            "misc": (MiscBuilder, partial(setattr, self, "_misc")),
            "dic_number": (
                partial(
                    ArrayBuilder,
                    DictionaryReferenceBuilder.ELEMENT,
                    DictionaryReferenceBuilder,
                ),
                self._references.extend,
            ),
            "query_code": (
                partial(ArrayBuilder, QueryCodeBuilder.ELEMENT, QueryCodeBuilder),
                self._query_codes.extend,
            ),
            "reading_meaning": (
                ReadingMeaningBuilder,
                partial(setattr, self, "_reading_meaning"),
            ),
        }

    def _children(self) -> Mapping[str, ChildSpec]:
        return self._spec

    def build(self) -> Character:
        if self._literal is None:
            raise Kanjidic2Error("missing `literal`")
        if self._misc is None:
            raise Kanjidic2Error("missing `misc`")
        return Character(
            literal=self._literal,
            misc=self._misc,
            code_point=tuple(self._code_points),
            radical=tuple(self._radicals),
            dictionary_references=tuple(self._references),
            query_codes=tuple(self._query_codes),
            reading_meaning=self._reading_meaning or ReadingMeaning(),
        )
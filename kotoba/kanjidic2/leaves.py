"""Leaf elements: text content plus a few attributes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

from kotoba.kanjidic2.events import (
    PENDING,
    Attribute,
    Builder,
    Close,
    Kanjidic2Error,
    Output,
    Text,
)


@dataclass(frozen=True)
class CodePoint:
    """A code point of the character in some encoding."""

    text: str
    ty: str


@dataclass(frozen=True)
class DictionaryReference:
    """A reference to the character in a printed dictionary."""

    text: str
    ty: str
    volume: str | None = None
    page: str | None = None


@dataclass(frozen=True)
class Meaning:
    """A meaning, in English unless a language is given."""

    text: str
    lang: str | None = None


@dataclass(frozen=True)
class QueryCode:
    """A lookup code such as a SKIP or four-corner code."""

    text: str
    ty: str
    skip_misclass: str | None = None


@dataclass(frozen=True)
class Radical:
    """A radical number under some classification."""

    text: str
    ty: str


@dataclass(frozen=True)
class Reading:
    """A reading of the character, such as an on or kun reading."""

    text: str
    ty: str


@dataclass(frozen=True)
class Variant:
    """A cross-reference to a variant form of the character."""

    text: str
    ty: str


class LeafBuilder(Builder):
    """Builds a value from an element's text and known attributes.

    Each attribute may appear once, and text only once; anything else is
    an error. Subclasses name the value type, the attributes they accept
    and which of them are required.
    """

    _VALUE: ClassVar[type]
    _ATTRIBUTES: ClassVar[Mapping[str, str]] = {}
    _REQUIRED: ClassVar[Mapping[str, str]] = {}

    def __init__(self) -> None:
        self._text: str | None = None
        self._fields: dict[str, str] = {}

    def wants_text(self) -> bool:
        return True

    def poll(self, output: Output) -> Any:
        if isinstance(output, Text) and self._text is None:
            self._text = output.text
            return PENDING
        if isinstance(output, Attribute):
            field = self._ATTRIBUTES.get(output.name)
            if field is not None and field not in self._fields:
                self._fields[field] = output.value
                return PENDING
        if isinstance(output, Close):
            return self._finish()
        raise Kanjidic2Error(f"Unsupported {output!r}")

    def _finish(self) -> Any:
        if self._text is None:
            raise Kanjidic2Error("missing text")
        for field, message in self._REQUIRED.items():
            if field not in self._fields:
                raise Kanjidic2Error(message)
        return self._VALUE(self._text, **self._fields)


class CodePointBuilder(LeafBuilder):
    ELEMENT: ClassVar[str] = "cp_value"
    _VALUE = CodePoint
    _ATTRIBUTES = {"cp_type": "ty"}
    _REQUIRED = {"ty": "missing `cp_type`"}


class DictionaryReferenceBuilder(LeafBuilder):
    ELEMENT: ClassVar[str] = "dic_ref"
    _VALUE = DictionaryReference
    _ATTRIBUTES = {"dr_type": "ty", "m_vol": "volume", "m_page": "page"}
    _REQUIRED = {"ty": "missing `dr_type`"}


class MeaningBuilder(LeafBuilder):
    _VALUE = Meaning
    _ATTRIBUTES = {"m_lang": "lang"}


class QueryCodeBuilder(LeafBuilder):
    ELEMENT: ClassVar[str] = "q_code"
    _VALUE = QueryCode
    _ATTRIBUTES = {"qc_type": "ty", "skip_misclass": "skip_misclass"}
    _REQUIRED = {"ty": "missing `qc_type`"}


class RadicalBuilder(LeafBuilder):
    ELEMENT: ClassVar[str] = "rad_value"
    _VALUE = Radical
    _ATTRIBUTES = {"rad_type": "ty"}
    _REQUIRED = {"ty": "missing `rad_type`"}


class ReadingBuilder(LeafBuilder):
    _VALUE = Reading
    _ATTRIBUTES = {"r_type": "ty"}
    _REQUIRED = {"ty": "missing `r_type`"}


class VariantBuilder(LeafBuilder):
    _VALUE = Variant
    _ATTRIBUTES = {"var_type": "ty"}
    _REQUIRED = {"ty": "missing `var_type`"}
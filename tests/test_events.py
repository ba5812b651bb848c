from collections.abc import Mapping

import pytest

from kotoba.kanjidic2.events import (
    PENDING,
    ArrayBuilder,
    Attribute,
    Close,
    CompositeBuilder,
    Eof,
    Kanjidic2Error,
    Open,
    Text,
    TextBuilder,
)


class _Pair(CompositeBuilder):
    def __init__(self):
        super().__init__()
        self.first = None
        self.second = []

    def _children(self) -> Mapping:
        return {
            "first": (TextBuilder, self._set_first),
            "second": (TextBuilder, self.second.append),
        }

    def _set_first(self, value):
        self.first = value

    def build(self):
        return (self.first, list(self.second))


def _feed(builder, events):
    result = PENDING
    for event in events:
        result = builder.poll(event)
    return result


def test_text_builder_returns_text():
    builder = TextBuilder()
    assert builder.wants_text() is True
    assert builder.poll(Text("hello")) is PENDING
    assert builder.poll(Close()) == "hello"


def test_text_builder_keeps_latest_text():
    assert _feed(TextBuilder(), [Text("a"), Text("b"), Close()]) == "b"


def test_text_builder_missing_text():
    with pytest.raises(Kanjidic2Error, match="missing text"):
        TextBuilder().poll(Close())


@pytest.mark.parametrize("event", [Open("x"), Attribute("k", "v"), Eof()])
def test_text_builder_rejects_other_events(event):
    with pytest.raises(Kanjidic2Error):
        TextBuilder().poll(event)


def test_array_builder_collects_values():
    builder = ArrayBuilder("item", TextBuilder)
    events = [
        Open("item"), Text("one"), Close(),
        Open("item"), Text("two"), Close(),
        Close(),
    ]
    assert _feed(builder, events) == ["one", "two"]


def test_array_builder_empty():
    assert ArrayBuilder("item", TextBuilder).poll(Close()) == []


def test_array_builder_build_takes_values():
    builder = ArrayBuilder("item", TextBuilder)
    _feed(builder, [Open("item"), Text("one"), Close()])
    assert builder.build() == ["one"]
    assert builder.build() == []


def test_array_builder_rejects_other_names():
    builder = ArrayBuilder("item", TextBuilder)
    with pytest.raises(Kanjidic2Error, match="Unsupported"):
        builder.poll(Open("other"))


def test_wants_text_follows_child():
    builder = ArrayBuilder("item", TextBuilder)
    assert builder.wants_text() is False
    builder.poll(Open("item"))
    assert builder.wants_text() is True
    builder.poll(Text("x"))
    builder.poll(Close())
    assert builder.wants_text() is False


def test_composite_dispatches_children():
    events = [
        Open("second"), Text("b1"), Close(),
        Open("first"), Text("a"), Close(),
        Open("second"), Text("b2"), Close(),
        Close(),
    ]
    assert _feed(_Pair(), events) == ("a", ["b1", "b2"])


def test_composite_rejects_root_text_and_attributes():
    with pytest.raises(Kanjidic2Error):
        _Pair().poll(Text("stray"))
    with pytest.raises(Kanjidic2Error):
        _Pair().poll(Attribute("k", "v"))


def test_composite_propagates_child_errors():
    builder = _Pair()
    builder.poll(Open("first"))
    with pytest.raises(Kanjidic2Error, match="missing text"):
        builder.poll(Close())


def test_events_compare_by_value():
    assert Open("a") == Open("a")
    assert Close() == Close()
    assert Attribute("k", "v") != Attribute("k", "w")
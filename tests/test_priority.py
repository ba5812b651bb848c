import pytest

from kotoba.priority import Priority, PriorityKind


@pytest.mark.parametrize(
    "text, kind, level",
    [
        ("ichi1", PriorityKind.ICHI, 1),
        ("news2", PriorityKind.NEWS, 2),
        ("gai1", PriorityKind.GAI, 1),
        ("spec2", PriorityKind.SPEC, 2),
        ("nf12", PriorityKind.WORD_FREQUENCY, 12),
    ],
)
def test_parse_known_markers(text, kind, level):
    priority = Priority.parse(text)
    assert priority == Priority(level, kind)


@pytest.mark.parametrize("text", ["ichi", "foo1", "", "1", "nf256", "nf1x", "Ichi1"])
def test_parse_rejects_invalid(text):
    assert Priority.parse(text) is None


def test_parse_accepts_maximum_level():
    assert Priority.parse("nf255") == Priority(255, PriorityKind.WORD_FREQUENCY)


@pytest.mark.parametrize("text", ["ichi1", "news2", "gai1", "spec2", "nf48"])
def test_str_round_trip(text):
    priority = Priority.parse(text)
    assert str(priority) == text
    assert Priority.parse(str(priority)) == priority


def test_category_matches_prefix():
    assert Priority.parse("nf3").category() == "nf"
    assert Priority.parse("spec1").category() == "spec"


def test_titles():
    assert Priority.parse("news1").title() == "frequently used in news"
    assert Priority.parse("gai1").title() == "common loanwords"
    assert Priority.parse("nf1").title() == "word frequency, lower means more frequent"


def test_weight_of_most_frequent_markers():
    assert Priority.parse("ichi1").weight() == pytest.approx(4.0)
    assert Priority.parse("nf1").weight() == pytest.approx(4.0)


def test_weight_levels_zero_and_one_are_equal():
    for kind in PriorityKind:
        assert Priority(0, kind).weight() == Priority(1, kind).weight()


def test_weight_decreases_with_level():
    weights = [Priority(level, PriorityKind.WORD_FREQUENCY).weight() for level in range(1, 52)]
    assert weights == sorted(weights, reverse=True)
    assert weights[0] > weights[-1]


def test_weight_saturates():
    assert Priority(51, PriorityKind.WORD_FREQUENCY).weight() == Priority(
        200, PriorityKind.WORD_FREQUENCY
    ).weight()
    assert Priority(3, PriorityKind.NEWS).weight() == Priority(9, PriorityKind.NEWS).weight()


def test_weight_multipliers_relative_to_news():
    for level in (1, 2, 3):
        news = Priority(level, PriorityKind.NEWS).weight()
        assert Priority(level, PriorityKind.GAI).weight() == pytest.approx(news)
        assert Priority(level, PriorityKind.ICHI).weight() == pytest.approx(news * 2.0)
        assert Priority(level, PriorityKind.SPEC).weight() == pytest.approx(news * 2.2)
"""Dictionary priority markers such as ``ichi1`` or ``nf12``."""

from __future__ import annotations

import enum
import unicodedata
from dataclasses import dataclass

_MAX_LEVEL = 255
_NUMERIC_CATEGORIES = frozenset({"Nd", "Nl", "No"})


class PriorityKind(enum.Enum):
    """The category a priority marker belongs to."""

    ICHI = "ichi"
    """Common words."""
    NEWS = "news"
    """News."""
    GAI = "gai"
    """Common loan words."""
    SPEC = "spec"
    """Especially marked common words."""
    WORD_FREQUENCY = "nf"
    """Word frequency category."""


_TITLES = {
    PriorityKind.ICHI: (
        'appears in "Ichimango goi bunruishuu", ichi2 are less frequently used online'
    ),
    PriorityKind.NEWS: "frequently used in news",
    PriorityKind.GAI: "common loanwords",
    PriorityKind.SPEC: "special words",
    PriorityKind.WORD_FREQUENCY: "word frequency, lower means more frequent",
}


def _range_weight(level: float, maximum: float) -> float:
    return 1.0 + (maximum - min(level, maximum)) / maximum


@dataclass(frozen=True)
class Priority:
    """A priority marker: a category together with a level."""

    level: int
    kind: PriorityKind

    @classmethod
    def parse(cls, string: str) -> Priority | None:
        """Parse a marker like ``news2``; return ``None`` if it is not one."""
        start = next(
            (
                index
                for index, char in enumerate(string)
                if unicodedata.category(char) in _NUMERIC_CATEGORIES
            ),
            None,
        )
        if start is None:
            return None

        digits = string[start:]
        if not (digits.isascii() and digits.isdigit()):
            return None
        level = int(digits)
        if level > _MAX_LEVEL:
            return None

        try:
            kind = PriorityKind(string[:start])
        except ValueError:
            return None
        return cls(level, kind)

    def category(self) -> str:
        """The category name as it appears in the marker."""
        return self.kind.value

    def title(self) -> str:
        """A human readable explanation of the category."""
        return _TITLES[self.kind]

    def weight(self) -> float:
        """Ranking weight for this priority; more frequent words weigh more."""
        level = float(max(self.level - 1, 0))
        kind = self.kind
        if kind is PriorityKind.ICHI:
            return _range_weight(level, 2.0) * 2.0
        if kind is PriorityKind.SPEC:
            return _range_weight(level, 2.0) * 2.2
        if kind is PriorityKind.WORD_FREQUENCY:
            return _range_weight(level, 50.0) * 2.0
        return _range_weight(level, 2.0)

    def __str__(self) -> str:
        return f"{self.category()}{self.level}"
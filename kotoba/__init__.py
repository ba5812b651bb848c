"""Japanese text utilities: kana and romaji conversion, priority tags, prompt queries and KANJIDIC2 parsing."""

__version__ = "0.1.0"
"""Streaming parser and data types for the KANJIDIC2 kanji dictionary."""
# kotoba

Tools for working with Japanese text and dictionary data:

- conversion between romaji, hiragana and katakana (`kotoba.romaji`),
- parsing of dictionary priority tags such as `ichi1` or `nf12`
  (`kotoba.priority`),
- a streaming parser for the KANJIDIC2 kanji dictionary
  (`kotoba.kanjidic2`),
- the state of a search prompt and its URL query-string encoding
  (`kotoba.query`).

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Kana and romaji

`kotoba.romaji.analyze` splits text into `Segment`s. At each position it
takes the table spelling with the highest priority that starts there, or
else a single character. Each segment converts with `hiragana()`,
`katakana()` or `romanize()`, or with `transform()` and a `Transform`
member. Text that is not in the table is left as it is.

```python
from kotoba.romaji import analyze

[s.hiragana() for s in analyze("kyouto")]                # ["きょ", "う", "と"]
"".join(s.katakana() for s in analyze("ひらがな"))       # "ヒラガナ"
"".join(s.romanize() for s in analyze("ひゃくりょく"))   # "hyakuryoku"
```

A segment compares equal to its text, so
`list(analyze("ひゃくりょく")) == ["ひゃ", "く", "りょ", "く"]`.

`is_hiragana(c)` and `is_katakana(c)` tell whether a character is an
ordinary (not small) kana. The table itself is available from
`kotoba.romaji_table.rows()` and `kana_rows()`.

## Priority tags

```python
from kotoba.priority import Priority

p = Priority.parse("nf12")
p.category()   # "nf"
p.level        # 12
p.title()      # "word frequency, lower means more frequent"
p.weight()     # ranking weight, higher for more frequent words
```

`Priority.parse` returns `None` for strings it does not recognise, including
levels above 255.

## Search prompt queries

`kotoba.query.Query` holds the typed text (`q`), an optional translation
(`t`), the substrings of the last analysis (`a`), the selected one (`i`) and
the input `Mode`. `Query.deserialize` reads key/value pairs and
`serialize()` writes them back, leaving out default values.
`decode_query(pairs)` returns the query together with the text that should
be searched.

`process_query` applies a mode to a whole string:

```python
from kotoba.query import Mode, process_query

process_query("sakura", Mode.HIRAGANA)   # "さくら"
```

## KANJIDIC2

`kotoba.kanjidic2.parser.Parser` reads an uncompressed KANJIDIC2 document
and returns one `Character` per `<character>` element from each call to
`parse()`, or `None` when the root element closes; iterating over the
parser yields the characters in turn. Once the `<header>` element has been
read it is available as `Parser.header`. `parse_characters(text)` returns
all characters as a list.

Each `Character` carries its literal, code points, radicals, miscellaneous
data (`Misc`: grade, stroke count, variant, frequency, JLPT level, radical
names), dictionary references, query codes and readings and meanings
(`ReadingMeaning`).

```python
from kotoba.kanjidic2.parser import parse_characters

with open("kanjidic2.xml", encoding="utf-8") as fh:
    for character in parse_characters(fh.read()):
        print(character.literal, [m.text for m in character.reading_meaning.meanings])
```

Malformed XML or unexpected content raises
`kotoba.kanjidic2.events.Kanjidic2Error`.

## What this package does not do

It has no command-line tools, no web interface and no storage. It does not
read compressed files, does not parse JMdict entries and does not build or
search a dictionary database: it provides the conversion, tag-parsing and
KANJIDIC2-parsing pieces that such a program would use.
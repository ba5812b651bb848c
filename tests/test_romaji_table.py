from kotoba.romaji_table import TableRow, kana_rows, rows


def test_first_row_is_long_vowel_syllable():
    first = rows()[0]
    assert first == TableRow(3, "ちょう", "チョウ", ("tyô", "chou"))
    assert first.canonical == "tyô"


def test_lengths_match_spellings():
    for row in rows():
        assert len(row.hiragana) == row.length
        assert len(row.katakana) == row.length


def test_every_row_has_romaji():
    for row in rows():
        assert row.romaji
        assert all(form for form in row.romaji)
        assert row.canonical == row.romaji[0]


def test_rows_sorted_by_length_descending():
    lengths = [row.length for row in rows()]
    assert lengths == sorted(lengths, reverse=True)


def test_katakana_is_shifted_hiragana():
    for row in rows():
        shifted = "".join(chr(ord(c) + 0x60) for c in row.hiragana)
        assert shifted == row.katakana


def test_hiragana_spellings_are_unique():
    spellings = [row.hiragana for row in rows()]
    assert len(spellings) == len(set(spellings))


def test_kana_rows():
    assert kana_rows() == (
        ("ヵ", ("xka",)),
        ("ヶ", ("xke",)),
        ("ー", ("-", "^")),
    )


def test_specific_alternatives_present():
    by_hira = {row.hiragana: row for row in rows()}
    assert by_hira["ん"].romaji == ("n'", "nn")
    assert by_hira["じゃ"].romaji == ("ja", "jya", "zya")
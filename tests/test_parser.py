import pytest

from kotoba.kanjidic2.elements import Character, Header, Misc, ReadingMeaning
from kotoba.kanjidic2.events import Kanjidic2Error
from kotoba.kanjidic2.leaves import (
    CodePoint,
    DictionaryReference,
    Meaning,
    QueryCode,
    Radical,
    Reading,
    Variant,
)
from kotoba.kanjidic2.parser import Parser, parse_characters

DOCUMENT = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE kanjidic2 [
<!ELEMENT kanjidic2 (header,character*)>
]>
<kanjidic2>
<header>
<file_version>4</file_version>
<database_version>2023-001</database_version>
<date_of_creation>2023-01-01</date_of_creation>
</header>
<!-- Entry for Kanji: 亜 -->
<character>
<literal>亜</literal>
<codepoint>
<cp_value cp_type="ucs">4e9c</cp_value>
<cp_value cp_type="jis208">1-16-01</cp_value>
</codepoint>
<radical>
<rad_value rad_type="classical">7</rad_value>
</radical>
<misc>
<grade>8</grade>
<stroke_count>7</stroke_count>
<variant var_type="jis208">1-48-19</variant>
<freq>1509</freq>
<jlpt>1</jlpt>
</misc>
<dic_number>
<dic_ref dr_type="nelson_c">43</dic_ref>
<dic_ref dr_type="moro" m_vol="1" m_page="0525">272</dic_ref>
</dic_number>
<query_code>
<q_code qc_type="skip">4-7-1</q_code>
</query_code>
<reading_meaning>
<rmgroup>
<reading r_type="ja_on">ア</reading>
<reading r_type="ja_kun">つ.ぐ</reading>
<meaning>Asia</meaning>
<meaning m_lang="fr">Asie</meaning>
</rmgroup>
<nanori>や</nanori>
</reading_meaning>
</character>
<character>
<literal>唖</literal>
<misc><stroke_count>10</stroke_count></misc>
</character>
</kanjidic2>
"""


def test_parse_characters_reads_all_entries():
    characters = parse_characters(DOCUMENT)
    assert [c.literal for c in characters] == ["亜", "唖"]


def test_first_character_fields():
    first = parse_characters(DOCUMENT)[0]
    assert first == Character(
        literal="亜",
        misc=Misc(
            grade=8,
            stroke_count=7,
            variant=Variant("1-48-19", "jis208"),
            freq=1509,
            jlpt=1,
        ),
        code_point=(CodePoint("4e9c", "ucs"), CodePoint("1-16-01", "jis208")),
        radical=(Radical("7", "classical"),),
        dictionary_references=(
            DictionaryReference("43", "nelson_c"),
            DictionaryReference("272", "moro", "1", "0525"),
        ),
        query_codes=(QueryCode("4-7-1", "skip"),),
        reading_meaning=ReadingMeaning(
            readings=(Reading("ア", "ja_on"), Reading("つ.ぐ", "ja_kun")),
            meanings=(Meaning("Asia"), Meaning("Asie", "fr")),
            nanori=("や",),
        ),
    )


def test_second_character_has_defaults():
    second = parse_characters(DOCUMENT)[1]
    assert second.reading_meaning == ReadingMeaning()
    assert second.misc == Misc(stroke_count=10)
    assert second.code_point == ()


def test_header_is_recorded():
    parser = Parser(DOCUMENT)
    list(parser)
    assert parser.header == Header("4", "2023-001", "2023-01-01")


def test_parse_returns_none_at_end_then_errors():
    parser = Parser(DOCUMENT)
    assert parser.parse().literal == "亜"
    assert parser.parse().literal == "唖"
    assert parser.parse() is None
    with pytest.raises(Kanjidic2Error, match="kanjidic2"):
        parser.parse()


def test_wrong_root_element():
    with pytest.raises(Kanjidic2Error, match="kanjidic2"):
        Parser("<other/>").parse()


def test_empty_input_is_an_error():
    with pytest.raises(Kanjidic2Error):
        parse_characters("")


def test_truncated_document_is_an_error():
    with pytest.raises(Kanjidic2Error):
        parse_characters("<kanjidic2><character><literal>亜</literal>")


def test_unexpected_root_child():
    with pytest.raises(Kanjidic2Error, match="header"):
        parse_characters("<kanjidic2><bogus/></kanjidic2>")


def test_builder_error_carries_path():
    document = "<kanjidic2><character><literal>亜</literal></character></kanjidic2>"
    with pytest.raises(Kanjidic2Error, match="missing `misc`") as info:
        parse_characters(document)
    assert "kanjidic2/character" in str(info.value)


def test_stray_text_between_elements_is_ignored():
    document = (
        "<kanjidic2><character>junk<literal>亜</literal>more<misc/></character></kanjidic2>"
    )
    characters = parse_characters(document)
    assert characters == [Character(literal="亜", misc=Misc())]


def test_entities_and_cdata_are_decoded():
    document = (
        "<kanjidic2><character><literal><![CDATA[亜]]></literal><misc/>"
        "<reading_meaning><rmgroup><meaning>R&amp;D</meaning></rmgroup></reading_meaning>"
        "</character></kanjidic2>"
    )
    (character,) = parse_characters(document)
    assert character.literal == "亜"
    assert character.reading_meaning.meanings == (Meaning("R&D"),)


def test_empty_document_root_yields_nothing():
    assert parse_characters("<kanjidic2></kanjidic2>") == []
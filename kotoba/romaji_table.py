"""The kana/romaji conversion table.

Rows are listed in matching priority: earlier rows win when several
spellings match at the same position.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TableRow:
    """One syllable: its hiragana and katakana spellings and romaji forms.

    The first romaji form is the canonical romanization; the remaining
    ones are accepted alternative spellings.
    """

    length: int
    hiragana: str
    katakana: str
    romaji: tuple[str, ...]

    @property
    def canonical(self) -> str:
        """The romanization used when converting kana to romaji."""
        return self.romaji[0]


def _row(length: int, hiragana: str, katakana: str, *romaji: str) -> TableRow:
    return TableRow(length, hiragana, katakana, tuple(romaji))


_ROWS: tuple[TableRow, ...] = (
    _row(3, "ちょう", "チョウ", "tyô", "chou"),
    _row(3, "りょう", "リョウ", "ryô", "ryou"),
    # Sokuon
    _row(2, "っか", "ッカ", "kka"),
    _row(2, "っが", "ッガ", "gga"),
    _row(2, "っく", "ック", "kku"),
    _row(2, "っぐ", "ッグ", "ggu"),
    _row(2, "っき", "ッキ", "kki"),
    _row(2, "っぎ", "ッギ", "ggi"),
    _row(2, "っけ", "ッケ", "kke"),
    _row(2, "っげ", "ッゲ", "gge"),
    _row(2, "っこ", "ッコ", "kko"),
    _row(2, "っご", "ッゴ", "ggo"),
    _row(2, "っさ", "ッサ", "ssa"),
    _row(2, "っざ", "ッザ", "zza"),
    _row(2, "っし", "ッシ", "ssi", "sshi"),
    _row(2, "っじ", "ッジ", "jji"),
    _row(2, "っす", "ッス", "ssu"),
    _row(2, "っず", "ッズ", "zzu"),
    _row(2, "っせ", "ッセ", "sse"),
    _row(2, "っぜ", "ッゼ", "zze"),
    _row(2, "っそ", "ッソ", "sso"),
    _row(2, "っぞ", "ッゾ", "zzo"),
    _row(2, "った", "ッタ", "tta"),
    _row(2, "っだ", "ッダ", "dda"),
    _row(2, "っち", "ッチ", "tti"),
    _row(2, "っぢ", "ッヂ", "ddi"),
    _row(2, "っつ", "ッツ", "ttu", "ttsu"),
    _row(2, "っづ", "ッヅ", "ddu"),
    _row(2, "って", "ッテ", "tte"),
    _row(2, "っで", "ッデ", "dde"),
    _row(2, "っと", "ット", "tto"),
    _row(2, "っど", "ッド", "ddo"),
    _row(2, "っは", "ッハ", "hha"),
    _row(2, "っば", "ッバ", "bba"),
    _row(2, "っぱ", "ッパ", "ppa"),
    _row(2, "っひ", "ッヒ", "hhi"),
    _row(2, "っび", "ッビ", "bbi"),
    _row(2, "っぴ", "ッピ", "ppi"),
    _row(2, "っふ", "ッフ", "ffu"),
    _row(2, "っぶ", "ッブ", "bbu"),
    _row(2, "っぷ", "ップ", "ppu"),
    _row(2, "っへ", "ッヘ", "hhe"),
    _row(2, "っべ", "ッベ", "bbe"),
    _row(2, "っぺ", "ッペ", "ppe"),
    _row(2, "っほ", "ッホ", "hho"),
    _row(2, "っぼ", "ッボ", "bbo"),
    _row(2, "っら", "ッラ", "rra"),
    _row(2, "っり", "ッリ", "rri"),
    _row(2, "っる", "ッル", "rru"),
    _row(2, "っれ", "ッレ", "rre"),
    _row(2, "っろ", "ッロ", "rro"),
    # Yōon
    _row(2, "うう", "ウウ", "û", "uu"),
    _row(2, "おう", "オウ", "ô", "ou"),
    _row(2, "ぎゃ", "ギャ", "gya"),
    _row(2, "きゃ", "キャ", "kya"),
    _row(2, "ぎゅ", "ギュ", "gyu"),
    _row(2, "きゅ", "キュ", "kyu"),
    _row(2, "ぎょ", "ギョ", "gyo"),
    _row(2, "きょ", "キョ", "kyo"),
    _row(2, "しゃ", "シャ", "sha", "sya"),
    _row(2, "じゃ", "ジャ", "ja", "jya", "zya"),
    _row(2, "しゅ", "シュ", "shu", "syu"),
    _row(2, "じゅ", "ジュ", "ju", "jyu", "zyu"),
    _row(2, "しょ", "ショ", "sho", "syo"),
    _row(2, "じょ", "ジョ", "jo", "jyo", "zyo"),
    _row(2, "ぢゃ", "ヂャ", "dha", "dya"),
    _row(2, "ちゃ", "チャ", "cha", "cya", "tya"),
    _row(2, "ぢゅ", "ヂュ", "dhu", "dyu"),
    _row(2, "ちゅ", "チュ", "chu", "cyu", "tyu"),
    _row(2, "ぢょ", "ヂョ", "dho", "dyo"),
    _row(2, "ちょ", "チョ", "cho", "cyo", "tyo"),
    _row(2, "にゃ", "ニャ", "nya"),
    _row(2, "にゅ", "ニュ", "nyu"),
    _row(2, "にょ", "ニョ", "nyo"),
    _row(2, "びゃ", "ビャ", "bya"),
    _row(2, "ひゃ", "ヒャ", "hya"),
    _row(2, "ぴゃ", "ピャ", "pya"),
    _row(2, "びゅ", "ビュ", "byu"),
    _row(2, "ひゅ", "ヒュ", "hyu"),
    _row(2, "ぴゅ", "ピュ", "pyu"),
    _row(2, "びょ", "ビョ", "byo"),
    _row(2, "ひょ", "ヒョ", "hyo"),
    _row(2, "ぴょ", "ピョ", "pyo"),
    _row(2, "みゃ", "ミャ", "mya"),
    _row(2, "みゅ", "ミュ", "myu"),
    _row(2, "みょ", "ミョ", "myo"),
    _row(2, "りゃ", "リャ", "rya"),
    _row(2, "りゅ", "リュ", "ryu"),
    _row(2, "りょ", "リョ", "ryo"),
    # Foreign words
    _row(2, "いぇ", "イェ", "ye"),
    _row(2, "ゔぁ", "ヴァ", "va"),
    _row(2, "ゔぃ", "ヴィ", "vi"),
    _row(2, "うぃ", "ウィ", "whi"),
    _row(2, "ゔぇ", "ヴェ", "ve"),
    _row(2, "うぇ", "ウェ", "whe"),
    _row(2, "ゔぉ", "ヴォ", "vo"),
    _row(2, "うぉ", "ウォ", "who"),
    _row(2, "ゔゅ", "ヴュ", "vyu"),
    _row(2, "きぃ", "キィ", "kyi"),
    _row(2, "きぇ", "キェ", "kye"),
    _row(2, "ぐぁ", "グァ", "gwa"),
    _row(2, "くぁ", "クァ", "kwa", "qa"),
    _row(2, "くぃ", "クィ", "kwi", "qi"),
    _row(2, "くぅ", "クゥ", "kwu"),
    _row(2, "くぇ", "クェ", "kwe", "qe"),
    _row(2, "くぉ", "クォ", "kwo", "qo"),
    _row(2, "じぃ", "ジィ", "jyi"),
    _row(2, "じぇ", "ジェ", "je", "jye", "zye"),
    _row(2, "しぇ", "シェ", "she", "sye"),
    _row(2, "ぢぃ", "ヂィ", "dyi"),
    _row(2, "ちぇ", "チェ", "che", "tye"),
    _row(2, "ぢぇ", "ヂェ", "dhe", "dye"),
    _row(2, "つぁ", "ツァ", "tsa"),
    _row(2, "つぃ", "ツィ", "tsi"),
    _row(2, "つぇ", "ツェ", "tse"),
    _row(2, "つぉ", "ツォ", "tso"),
    _row(2, "でぃ", "ディ", "d'i"),
    _row(2, "てぃ", "ティ", "t'i", "thi"),
    _row(2, "でゅ", "デュ", "d'yu"),
    _row(2, "てゅ", "テュ", "t'yu", "thu"),
    _row(2, "どぅ", "ドゥ", "d'u", "dwu"),
    _row(2, "とぅ", "トゥ", "t'u", "twu"),
    _row(2, "にぃ", "ニィ", "nyi"),
    _row(2, "にぇ", "ニェ", "nye"),
    _row(2, "ひぃ", "ヒィ", "hyi"),
    _row(2, "ぴぃ", "ピィ", "pyi"),
    _row(2, "びぇ", "ビェ", "bye"),
    _row(2, "ひぇ", "ヒェ", "hye"),
    _row(2, "ぴぇ", "ピェ", "pye"),
    _row(2, "ふぁ", "ファ", "fa", "hwa"),
    _row(2, "ふぃ", "フィ", "fi", "fyi", "hwi"),
    _row(2, "ふぇ", "フェ", "fe", "fye", "hwe"),
    _row(2, "ふぉ", "フォ", "fo", "hwo"),
    _row(2, "ふゃ", "フャ", "fya"),
    _row(2, "ふゅ", "フュ", "fyu", "hwyu"),
    _row(2, "ふょ", "フョ", "fyo"),
    _row(2, "みぃ", "ミィ", "myi"),
    _row(2, "みぇ", "ミェ", "mye"),
    _row(2, "りぃ", "リィ", "ryi"),
    _row(2, "りぇ", "リェ", "rye"),
    # Plain syllables
    _row(1, "あ", "ア", "a"),
    _row(1, "い", "イ", "i", "yi"),
    _row(1, "う", "ウ", "u"),
    _row(1, "え", "エ", "e"),
    _row(1, "お", "オ", "o"),
    _row(1, "が", "ガ", "ga"),
    _row(1, "か", "カ", "ka"),
    _row(1, "ぎ", "ギ", "gi"),
    _row(1, "き", "キ", "ki"),
    _row(1, "ぐ", "グ", "gu"),
    _row(1, "く", "ク", "ku"),
    _row(1, "げ", "ゲ", "ge"),
    _row(1, "け", "ケ", "ke"),
    _row(1, "ご", "ゴ", "go"),
    _row(1, "こ", "コ", "ko"),
    _row(1, "さ", "サ", "sa"),
    _row(1, "ざ", "ザ", "za"),
    _row(1, "し", "シ", "shi", "si"),
    _row(1, "じ", "ジ", "ji", "zi"),
    _row(1, "す", "ス", "su"),
    _row(1, "ず", "ズ", "zu"),
    _row(1, "せ", "セ", "se"),
    _row(1, "ぜ", "ゼ", "ze"),
    _row(1, "そ", "ソ", "so"),
    _row(1, "ぞ", "ゾ", "zo"),
    _row(1, "だ", "ダ", "da"),
    _row(1, "た", "タ", "ta"),
    _row(1, "ぢ", "ヂ", "di", "dhi"),
    _row(1, "ち", "チ", "chi", "ti"),
    _row(1, "づ", "ヅ", "dzu", "du"),
    _row(1, "つ", "ツ", "tsu", "tu"),
    _row(1, "で", "デ", "de"),
    _row(1, "て", "テ", "te"),
    _row(1, "ど", "ド", "do"),
    _row(1, "と", "ト", "to"),
    _row(1, "な", "ナ", "na"),
    _row(1, "に", "ニ", "ni"),
    _row(1, "ぬ", "ヌ", "nu"),
    _row(1, "ね", "ネ", "ne"),
    _row(1, "の", "ノ", "no"),
    _row(1, "ば", "バ", "ba"),
    _row(1, "は", "ハ", "ha"),
    _row(1, "ぱ", "パ", "pa"),
    _row(1, "び", "ビ", "bi"),
    _row(1, "ひ", "ヒ", "hi"),
    _row(1, "ぴ", "ピ", "pi"),
    _row(1, "ぶ", "ブ", "bu"),
    _row(1, "ふ", "フ", "fu", "hu"),
    _row(1, "ぷ", "プ", "pu"),
    _row(1, "べ", "ベ", "be"),
    _row(1, "へ", "ヘ", "he"),
    _row(1, "ぺ", "ペ", "pe"),
    _row(1, "ぼ", "ボ", "bo"),
    _row(1, "ほ", "ホ", "ho"),
    _row(1, "ぽ", "ポ", "po"),
    _row(1, "ま", "マ", "ma"),
    _row(1, "み", "ミ", "mi"),
    _row(1, "む", "ム", "mu"),
    _row(1, "め", "メ", "me"),
    _row(1, "も", "モ", "mo"),
    _row(1, "や", "ヤ", "ya"),
    _row(1, "ゆ", "ユ", "yu"),
    _row(1, "よ", "ヨ", "yo"),
    _row(1, "ら", "ラ", "ra"),
    _row(1, "り", "リ", "ri"),
    _row(1, "る", "ル", "ru"),
    _row(1, "れ", "レ", "re"),
    _row(1, "ろ", "ロ", "ro"),
    _row(1, "わ", "ワ", "wa"),
    _row(1, "ゐ", "ヰ", "wi", "wyi"),
    _row(1, "を", "ヲ", "wo"),
    _row(1, "ん", "ン", "n'", "nn"),
    _row(1, "ぁ", "ァ", "la", "xa"),
    _row(1, "ぃ", "ィ", "li", "lyi", "xi"),
    _row(1, "ぅ", "ゥ", "lu", "xu"),
    _row(1, "ぇ", "ェ", "le", "lye", "xe"),
    _row(1, "ぉ", "ォ", "lo", "xo"),
    _row(1, "っ", "ッ", "xtu"),
    _row(1, "ゃ", "ャ", "lya", "xya"),
    _row(1, "ゅ", "ュ", "lyu", "xyu"),
    _row(1, "ょ", "ョ", "lyo", "xyo"),
    _row(1, "ゎ", "ヮ", "xwa"),
    _row(1, "ゔ", "ヴ", "vu"),
    # Archaic
    _row(1, "ゑ", "ヱ", "we", "wye"),
)

# Katakana-only characters with their romaji forms.
_KANA_ROWS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("ヵ", ("xka",)),
    ("ヶ", ("xke",)),
    ("ー", ("-", "^")),
)


def rows() -> tuple[TableRow, ...]:
    """All hiragana/katakana rows in matching priority order."""
    return _ROWS


def kana_rows() -> tuple[tuple[str, tuple[str, ...]], ...]:
    """Katakana-only entries as ``(kana, romaji_forms)`` pairs."""
    return _KANA_ROWS
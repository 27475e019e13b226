"""Static transliteration dataset and the rule tables built from it."""
from __future__ import annotations

from functools import lru_cache

from .register import Register, fold_ascii
from .rules import RuleTable
from .script import hiragana_to_katakana_text

# Wapuro-Hepburn spellings accepted as input, lowercase, hiragana side.
ROMAJI_HIRAGANA: tuple[tuple[str, str], ...] = (
    ("a", "あ"), ("i", "い"), ("u", "う"), ("e", "え"), ("o", "お"),
    ("ka", "か"), ("ki", "き"), ("ku", "く"), ("ke", "け"), ("ko", "こ"),
    ("sa", "さ"), ("shi", "し"), ("su", "す"), ("se", "せ"), ("so", "そ"),
    ("ta", "た"), ("chi", "ち"), ("tsu", "つ"), ("te", "て"), ("to", "と"),
    ("na", "な"), ("ni", "に"), ("nu", "ぬ"), ("ne", "ね"), ("no", "の"),
    ("ha", "は"), ("hi", "ひ"), ("fu", "ふ"), ("he", "へ"), ("ho", "ほ"),
    ("ma", "ま"), ("mi", "み"), ("mu", "む"), ("me", "め"), ("mo", "も"),
    ("ya", "や"), ("yu", "ゆ"), ("yo", "よ"),
    ("ra", "ら"), ("ri", "り"), ("ru", "る"), ("re", "れ"), ("ro", "ろ"),
    ("la", "ら"), ("li", "り"), ("lu", "る"), ("le", "れ"), ("lo", "ろ"),
    ("wa", "わ"), ("wi", "ゐ"), ("wo", "を"),
    ("n", "ん"),
    ("ga", "が"), ("gi", "ぎ"), ("gu", "ぐ"), ("ge", "げ"), ("go", "ご"),
    ("za", "ざ"), ("ji", "じ"), ("zu", "ず"), ("ze", "ぜ"), ("zo", "ぞ"),
    ("da", "だ"), ("di", "ぢ"), ("du", "づ"), ("de", "で"), ("do", "ど"),
    ("ba", "ば"), ("bi", "び"), ("bu", "ぶ"), ("be", "べ"), ("bo", "ぼ"),
    ("pa", "ぱ"), ("pi", "ぴ"), ("pu", "ぷ"), ("pe", "ぺ"), ("po", "ぽ"),
    ("kya", "きゃ"), ("kyu", "きゅ"), ("kyo", "きょ"), ("kye", "きぇ"),
    ("sha", "しゃ"), ("shu", "しゅ"), ("sho", "しょ"), ("she", "しぇ"),
    ("cha", "ちゃ"), ("chu", "ちゅ"), ("cho", "ちょ"), ("che", "ちぇ"),
    ("nya", "にゃ"), ("nyu", "にゅ"), ("nyo", "にょ"), ("nye", "にぇ"),
    ("hya", "ひゃ"), ("hyu", "ひゅ"), ("hyo", "ひょ"), ("hye", "ひぇ"),
    ("mya", "みゃ"), ("myu", "みゅ"), ("myo", "みょ"), ("mye", "みぇ"),
    ("rya", "りゃ"), ("ryu", "りゅ"), ("ryo", "りょ"), ("rye", "りぇ"),
    ("gya", "ぎゃ"), ("gyu", "ぎゅ"), ("gyo", "ぎょ"), ("gye", "ぎぇ"),
    ("ja", "じゃ"), ("ju", "じゅ"), ("jo", "じょ"), ("je", "じぇ"),
    ("jya", "じゃ"), ("jyu", "じゅ"), ("jyo", "じょ"),
    ("dya", "ぢゃ"), ("dyu", "ぢゅ"), ("dyo", "ぢょ"),
    ("bya", "びゃ"), ("byu", "びゅ"), ("byo", "びょ"), ("bye", "びぇ"),
    ("pya", "ぴゃ"), ("pyu", "ぴゅ"), ("pyo", "ぴょ"), ("pye", "ぴぇ"),
    ("yi", "いぃ"), ("ye", "いぇ"),
    ("wu", "うぅ"), ("we", "うぇ"), ("wyu", "うゅ"),
    ("va", "ゔぁ"), ("vi", "ゔぃ"), ("vu", "ゔ"), ("ve", "ゔぇ"), ("vo", "ゔぉ"),
    ("vya", "ゔゃ"), ("vyu", "ゔゅ"), ("vye", "ゔぃぇ"), ("vyo", "ゔょ"),
    ("kwa", "くぁ"), ("kwi", "くぃ"), ("kwu", "くぅ"), ("kwe", "くぇ"), ("kwo", "くぉ"),
    ("gwa", "ぐぁ"), ("gwi", "ぐぃ"), ("gwu", "ぐぅ"), ("gwe", "ぐぇ"), ("gwo", "ぐぉ"),
    ("qa", "くぁ"), ("qi", "くぃ"), ("qu", "くぅ"), ("qe", "くぇ"), ("qo", "くぉ"),
    ("si", "すぃ"), ("zi", "ずぃ"),
    ("tsa", "つぁ"), ("tsi", "つぃ"), ("tse", "つぇ"), ("tso", "つぉ"), ("tsyu", "つゅ"),
    ("ti", "てぃ"), ("tu", "とぅ"), ("tyu", "ちゅ"),
    ("fa", "ふぁ"), ("fi", "ふぃ"), ("fe", "ふぇ"), ("fo", "ふぉ"),
    ("fya", "ふゃ"), ("fyu", "ふゅ"), ("fye", "ふぇ"), ("fyo", "ふょ"),
    ("hu", "ふぅ"),
    ("xa", "ぁ"), ("xi", "ぃ"), ("xu", "ぅ"), ("xe", "ぇ"), ("xo", "ぉ"),
    ("xya", "ゃ"), ("xyu", "ゅ"), ("xyo", "ょ"),
    ("xwa", "ゎ"), ("xka", "ゕ"), ("xke", "ゖ"),
    ("xtsu", "っ"), ("xtu", "っ"), ("x", "っ"),
)

# Katakana-register spellings that do not follow from swapping the hiragana.
ROMAJI_KATAKANA_OVERRIDES: dict[str, str] = {
    "WI": "ウィ",
    "TYU": "テュ",
    "FYE": "フィェ",
    "HU": "ホゥ",
    "QU": "クヮ",
}

# Output spellings, hiragana side. ぢ/づ are resolved by the phonetic stage.
HIRAGANA_ROMAJI: tuple[tuple[str, str], ...] = (
    ("あ", "a"), ("い", "i"), ("う", "u"), ("え", "e"), ("お", "o"),
    ("か", "ka"), ("き", "ki"), ("く", "ku"), ("け", "ke"), ("こ", "ko"),
    ("さ", "sa"), ("し", "shi"), ("す", "su"), ("せ", "se"), ("そ", "so"),
    ("た", "ta"), ("ち", "chi"), ("つ", "tsu"), ("て", "te"), ("と", "to"),
    ("な", "na"), ("に", "ni"), ("ぬ", "nu"), ("ね", "ne"), ("の", "no"),
    ("は", "ha"), ("ひ", "hi"), ("ふ", "fu"), ("へ", "he"), ("ほ", "ho"),
    ("ま", "ma"), ("み", "mi"), ("む", "mu"), ("め", "me"), ("も", "mo"),
    ("や", "ya"), ("ゆ", "yu"), ("よ", "yo"),
    ("ら", "ra"), ("り", "ri"), ("る", "ru"), ("れ", "re"), ("ろ", "ro"),
    ("わ", "wa"), ("ゐ", "wi"), ("ゑ", "we"), ("を", "wo"),
    ("ん", "n"),
    ("が", "ga"), ("ぎ", "gi"), ("ぐ", "gu"), ("げ", "ge"), ("ご", "go"),
    ("ざ", "za"), ("じ", "ji"), ("ず", "zu"), ("ぜ", "ze"), ("ぞ", "zo"),
    ("だ", "da"), ("で", "de"), ("ど", "do"),
    ("ば", "ba"), ("び", "bi"), ("ぶ", "bu"), ("べ", "be"), ("ぼ", "bo"),
    ("ぱ", "pa"), ("ぴ", "pi"), ("ぷ", "pu"), ("ぺ", "pe"), ("ぽ", "po"),
    ("きゃ", "kya"), ("きゅ", "kyu"), ("きょ", "kyo"), ("きぇ", "kye"),
    ("しゃ", "sha"), ("しゅ", "shu"), ("しょ", "sho"), ("しぇ", "she"),
    ("ちゃ", "cha"), ("ちゅ", "chu"), ("ちょ", "cho"), ("ちぇ", "che"),
    ("にゃ", "nya"), ("にゅ", "nyu"), ("にょ", "nyo"), ("にぇ", "nye"),
    ("ひゃ", "hya"), ("ひゅ", "hyu"), ("ひょ", "hyo"), ("ひぇ", "hye"),
    ("みゃ", "mya"), ("みゅ", "myu"), ("みょ", "myo"), ("みぇ", "mye"),
    ("りゃ", "rya"), ("りゅ", "ryu"), ("りょ", "ryo"), ("りぇ", "rye"),
    ("ぎゃ", "gya"), ("ぎゅ", "gyu"), ("ぎょ", "gyo"), ("ぎぇ", "gye"),
    ("じゃ", "ja"), ("じゅ", "ju"), ("じょ", "jo"), ("じぇ", "je"),
    ("びゃ", "bya"), ("びゅ", "byu"), ("びょ", "byo"), ("びぇ", "bye"),
    ("ぴゃ", "pya"), ("ぴゅ", "pyu"), ("ぴょ", "pyo"), ("ぴぇ", "pye"),
    ("いぃ", "yi"), ("いぇ", "ye"),
    ("うぃ", "wi"), ("うぅ", "wu"), ("うぇ", "we"), ("うゅ", "wyu"),
    ("ゔ", "vu"), ("ゔぁ", "va"), ("ゔぃ", "vi"), ("ゔぇ", "ve"), ("ゔぉ", "vo"),
    ("ゔゃ", "vya"), ("ゔゅ", "vyu"), ("ゔょ", "vyo"), ("ゔぃぇ", "vye"),
    ("くぁ", "kwa"), ("くぃ", "kwi"), ("くぅ", "kwu"), ("くぇ", "kwe"), ("くぉ", "kwo"),
    ("ぐぁ", "gwa"), ("ぐぃ", "gwi"), ("ぐぅ", "gwu"), ("ぐぇ", "gwe"), ("ぐぉ", "gwo"),
    ("すぃ", "si"), ("ずぃ", "zi"),
    ("つぁ", "tsa"), ("つぃ", "tsi"), ("つぇ", "tse"), ("つぉ", "tso"), ("つゅ", "tsyu"),
    ("てぃ", "ti"), ("とぅ", "tu"),
    ("ふぁ", "fa"), ("ふぃ", "fi"), ("ふぇ", "fe"), ("ふぉ", "fo"),
    ("ふゃ", "fya"), ("ふゅ", "fyu"), ("ふょ", "fyo"), ("ふぃぇ", "fye"),
    ("ふぅ", "hu"),
    ("ぁ", "xa"), ("ぃ", "xi"), ("ぅ", "xu"), ("ぇ", "xe"), ("ぉ", "xo"),
    ("ゃ", "xya"), ("ゅ", "xyu"), ("ょ", "xyo"),
    ("ゎ", "xwa"), ("ゕ", "xka"), ("ゖ", "xke"),
)

KATAKANA_ROMAJI_EXTRAS: dict[str, str] = {
    "テュ": "TYU",
    "ホゥ": "HU",
    "クヮ": "QU",
}

# (kana, literal, phonetic) for the two irregular syllables and their digraphs.
IRREGULAR_SPELLINGS: tuple[tuple[str, str, str], ...] = (
    ("ぢ", "di", "ji"),
    ("づ", "du", "zu"),
    ("ぢゃ", "dya", "ja"),
    ("ぢゅ", "dyu", "ju"),
    ("ぢょ", "dyo", "jo"),
    ("ぢぇ", "dye", "je"),
)

LONG_VOWEL_MARK = "ー"
ROMAJI_LONG_VOWEL = "-"
HALFWIDTH_LONG_VOWEL_MARK = "ｰ"
DASH_VARIANTS = ("-", "‐", "‑", "‒", "–", "—", "―", "−")
APOSTROPHES = ("'", "’")


def _katakana_pairs() -> list[tuple[str, str]]:
    pairs = [(hiragana_to_katakana_text(kana), romaji.upper()) for kana, romaji in HIRAGANA_ROMAJI]
    pairs.extend(KATAKANA_ROMAJI_EXTRAS.items())
    return pairs


@lru_cache(maxsize=None)
def romaji_to_kana_table(register: Register) -> RuleTable:
    """Main romaji→kana table for one register (lowercase keys for hiragana)."""

    if register is Register.HIRAGANA:
        return RuleTable(ROMAJI_HIRAGANA, name="romaji_to_hiragana")

    entries = {romaji.upper(): hiragana_to_katakana_text(kana) for romaji, kana in ROMAJI_HIRAGANA}
    entries.update(ROMAJI_KATAKANA_OVERRIDES)
    return RuleTable(entries, name="romaji_to_katakana")


@lru_cache(maxsize=1)
def kana_to_romaji_table() -> RuleTable:
    """Main kana→romaji table over both scripts.

    Hiragana spells lowercase and katakana uppercase. Irregular syllables map
    to themselves so that the phonetic stage sees them whole.
    """

    entries: list[tuple[str, str]] = list(HIRAGANA_ROMAJI)
    entries.extend(_katakana_pairs())
    for kana, _, _ in IRREGULAR_SPELLINGS:
        entries.append((kana, kana))
        katakana = hiragana_to_katakana_text(kana)
        entries.append((katakana, katakana))
    return RuleTable(entries, name="kana_to_romaji")


@lru_cache(maxsize=None)
def irregular_spelling_table(phonetic: bool) -> RuleTable:
    entries: list[tuple[str, str]] = []
    for kana, literal, pronounced in IRREGULAR_SPELLINGS:
        romaji = pronounced if phonetic else literal
        entries.append((kana, romaji))
        entries.append((hiragana_to_katakana_text(kana), romaji.upper()))
    return RuleTable(entries, name="phonetic" if phonetic else "literal")


@lru_cache(maxsize=1)
def romaji_special_table() -> RuleTable:
    return RuleTable(
        {LONG_VOWEL_MARK: ROMAJI_LONG_VOWEL, HALFWIDTH_LONG_VOWEL_MARK: ROMAJI_LONG_VOWEL},
        name="romaji_special",
    )


@lru_cache(maxsize=1)
def kana_special_table() -> RuleTable:
    entries = {dash: LONG_VOWEL_MARK for dash in DASH_VARIANTS}
    entries.update({mark: "" for mark in APOSTROPHES})
    return RuleTable(entries, name="kana_special")


def kana_initials(register: Register) -> dict[str, frozenset[str]]:
    """Map each romaji initial letter to the first kana of the morae it starts.

    ``t`` also claims every mora spelled with ``ch`` so that ``tch`` geminates.
    """

    initials: dict[str, set[str]] = {}
    for romaji, kana in romaji_to_kana_table(register).items():
        letter = fold_ascii(romaji[0], Register.HIRAGANA)
        if letter in "aeiou" or letter == "n":
            continue
        initials.setdefault(letter, set()).add(kana[0])
        if romaji[:2].lower() == "ch":
            initials.setdefault("t", set()).add(kana[0])
    return {letter: frozenset(chars) for letter, chars in initials.items()}

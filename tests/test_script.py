"""文字種判定・漢字抽出・かな入れ替えのテスト。"""
from __future__ import annotations

from kana import (
    contains_hiragana,
    contains_kanji,
    contains_katakana,
    extract_kanji,
    hiragana_to_katakana,
    is_hiragana,
    is_kanji,
    is_katakana,
    katakana_to_hiragana,
)
from kana.script import hiragana_to_katakana_text, katakana_to_hiragana_text


def test_is_hiragana() -> None:
    cases = [
        ("ひらがな", True),
        ("ひら　がな", True),
        ("ひら がな", True),
        ("ひらーがな", True),
        ("カタカナ", False),
        ("水カタひら", False),
        ("水abcひらがな", False),
        ("水abcカタカナ", False),
        ("ひらがな一", False),
        ("", False),
        (" 　 ", False),
    ]
    for text, expected in cases:
        assert is_hiragana(text) is expected, text


def test_is_katakana() -> None:
    cases = [
        ("カタカナ", True),
        ("カタ　カナ", True),
        ("カタ カナ", True),
        ("カターカナ", True),
        ("ひらがな", False),
        ("水カタひら", False),
        ("水abcひらがな", False),
        ("水abcカタカナ", False),
        ("カタカナ一", False),
        ("", False),
        (" 　 ", False),
    ]
    for text, expected in cases:
        assert is_katakana(text) is expected, text


def test_is_kanji() -> None:
    cases = [
        ("水", True),
        ("。", False),
        ("、", False),
        ("「」", False),
        ("カタカナ", False),
        ("ひらがな", False),
        ("一", True),
        ("水　食", True),
        ("水 食", True),
        ("水カタひら", False),
        ("水abcひらがな", False),
        ("水abcカタカナ", False),
        ("", False),
        (" 　 ", False),
    ]
    for text, expected in cases:
        assert is_kanji(text) is expected, text


def test_contains_hiragana() -> None:
    cases = [
        ("ひらがな", True),
        ("ひら　がな", True),
        ("ひらーがな", True),
        ("カタカナ", False),
        ("水カタひら", True),
        ("水abcひらがな", True),
        ("水abcカタカナ", False),
        ("ひらがな一", True),
        ("", False),
        (" 　 ", False),
    ]
    for text, expected in cases:
        assert contains_hiragana(text) is expected, text


def test_contains_katakana() -> None:
    cases = [
        ("カタカナ", True),
        ("カターカナ", True),
        ("ひらがな", False),
        ("水カタひら", True),
        ("水abcひらがな", False),
        ("水abcカタカナ", True),
        ("カタカナ一", True),
        ("", False),
        (" 　 ", False),
        ("ー", False),
    ]
    for text, expected in cases:
        assert contains_katakana(text) is expected, text


def test_contains_kanji() -> None:
    cases = [
        ("水", True),
        ("カタカナ", False),
        ("ひらがな", False),
        ("一", True),
        ("水　食", True),
        ("水カタひら", True),
        ("水abcひらがな", True),
        ("水abcカタカナ", True),
        ("", False),
        (" 　 ", False),
    ]
    for text, expected in cases:
        assert contains_kanji(text) is expected, text


def test_readme_classification_examples() -> None:
    assert is_hiragana("たべる")
    assert not is_hiragana("食べる")
    assert contains_hiragana("食べる")
    assert not contains_hiragana("カタカナ")
    assert is_katakana("バナナ")
    assert not is_katakana("バナナ茶")
    assert contains_katakana("バナナ茶")
    assert not contains_katakana("ひらがな")
    assert is_kanji("水")
    assert not is_kanji("also 茶")
    assert contains_kanji("also 茶")
    assert not contains_kanji("ひらがな + カタカナ")


def test_iteration_mark_is_kanji() -> None:
    assert is_kanji("人々")
    assert extract_kanji("時々") == ["時", "々"]


def test_extract_kanji() -> None:
    cases = [
        ("食べる", ["食"]),
        ("鉛筆削り", ["鉛", "筆", "削"]),
        ("wakareru 分かれる ", ["分"]),
        (
            "また、平易な日本語で伝える週刊ニュースも放送します。日本語",
            ["平", "易", "日", "本", "語", "伝", "週", "刊", "放", "送", "日", "本", "語"],
        ),
        ("ひらがな", []),
    ]
    for text, expected in cases:
        assert extract_kanji(text) == expected, text


SWAP_PAIRS = [
    ("か", "カ"), ("き", "キ"), ("く", "ク"), ("け", "ケ"), ("こ", "コ"),
    ("さ", "サ"), ("し", "シ"), ("す", "ス"), ("せ", "セ"), ("そ", "ソ"),
    ("た", "タ"), ("ち", "チ"), ("つ", "ツ"), ("て", "テ"), ("と", "ト"),
    ("な", "ナ"), ("に", "ニ"), ("ぬ", "ヌ"), ("ね", "ネ"), ("の", "ノ"),
    ("は", "ハ"), ("ひ", "ヒ"), ("ふ", "フ"), ("へ", "ヘ"), ("ほ", "ホ"),
    ("ま", "マ"), ("み", "ミ"), ("む", "ム"), ("め", "メ"), ("も", "モ"),
    ("や", "ヤ"), ("ゆ", "ユ"), ("よ", "ヨ"),
    ("ら", "ラ"), ("り", "リ"), ("る", "ル"), ("れ", "レ"), ("ろ", "ロ"),
    ("わ", "ワ"), ("を", "ヲ"), ("ゐ", "ヰ"), ("ゑ", "ヱ"), ("ん", "ン"),
    ("が", "ガ"), ("ぢ", "ヂ"), ("づ", "ヅ"), ("ぱ", "パ"), ("ゔ", "ヴ"),
    ("きゃ", "キャ"), ("ぢょ", "ヂョ"), ("ゔぃぇ", "ヴィェ"), ("くぉ", "クォ"),
    ("つゅ", "ツュ"), ("ふぅ", "フゥ"), ("っ", "ッ"), ("ゕ", "ヵ"), ("ゖ", "ヶ"),
    ("あ", "ア"), ("い", "イ"), ("う", "ウ"), ("え", "エ"), ("お", "オ"),
    ("ぁ", "ァ"), ("ぃ", "ィ"), ("ぅ", "ゥ"), ("ぇ", "ェ"), ("ぉ", "ォ"),
    ("ゝ", "ヽ"), ("ゞ", "ヾ"),
]


def test_swap_hiragana_katakana() -> None:
    for hiragana, katakana in SWAP_PAIRS:
        assert "".join(hiragana_to_katakana(char) for char in hiragana) == katakana
        assert "".join(katakana_to_hiragana(char) for char in katakana) == hiragana
        assert hiragana_to_katakana_text(hiragana) == katakana
        assert katakana_to_hiragana_text(katakana) == hiragana


def test_swap_leaves_other_characters() -> None:
    for char in ("ー", "a", "水", "・", "ヷ", "ゟ", "ヿ"):
        assert hiragana_to_katakana(char) == char
        assert katakana_to_hiragana(char) == char


def test_swap_is_idempotent() -> None:
    text = "ひらがな カタカナ 漢字 abc"
    once = hiragana_to_katakana_text(text)
    assert hiragana_to_katakana_text(once) == once
    back = katakana_to_hiragana_text(once)
    assert katakana_to_hiragana_text(back) == back

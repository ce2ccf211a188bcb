from __future__ import annotations

import pytest

from releasekit.languages import (
    GLOBE_GLYPH,
    WHITE_FLAG_GLYPH,
    LanguageFlag,
    base_language,
    language_flag,
    language_flag_entry,
    normalize_language,
    region_to_flag,
    unique_language_flags,
)

US = "\U0001F1FA\U0001F1F8"
JP = "\U0001F1EF\U0001F1F5"
CN = "\U0001F1E8\U0001F1F3"
HK = "\U0001F1ED\U0001F1F0"
MX = "\U0001F1F2\U0001F1FD"
BR = "\U0001F1E7\U0001F1F7"
PT = "\U0001F1F5\U0001F1F9"
ES = "\U0001F1EA\U0001F1F8"


def test_unique_language_flags_absorbs_sdh_variant() -> None:
    flags = unique_language_flags(["English", "English (SDH)", "Japanese"])

    assert flags == [
        LanguageFlag(language="english", flag=US),
        LanguageFlag(language="japanese", flag=JP),
    ]


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("English (SDH)", "english"),
        ("English SDH", "english"),
        ("English Forced", "english"),
        ("French (Hearing Impaired)", "french"),
        ("German Commentary", "german"),
        ("  Japanese  ", "japanese"),
        ("Chinese (Simplified)", "chinese"),
        ("Chinese (Traditional)", "chinese"),
        ("Traditional Chinese", "chinese"),
        ("Cantonese", "cantonese"),
        ("Spanish (Latin America)", "spanish (latin america)"),
        ("Spanish", "spanish"),
        ("Portuguese (Brazil)", "portuguese (brazil)"),
        ("Portuguese (Portugal)", "portuguese"),
        ("", ""),
        (None, ""),
    ],
)
def test_normalize_language(label, expected) -> None:
    assert normalize_language(label) == expected


def test_marker_words_only_match_whole_words() -> None:
    assert normalize_language("Moroccan Arabic") == "moroccan arabic"


def test_base_language_keeps_case() -> None:
    assert base_language("English (SDH)") == "English"
    assert base_language("Chinese") == "Chinese"
    assert base_language(None) == ""


def test_region_to_flag_uses_regional_indicator_offset() -> None:
    assert region_to_flag("US") == US
    assert region_to_flag("jp") == JP
    assert region_to_flag("GB-WLS") == GLOBE_GLYPH
    assert region_to_flag("") == GLOBE_GLYPH


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("English", US),
        ("en", US),
        ("ja", JP),
        ("Chinese (Simplified)", CN),
        ("Cantonese", HK),
        ("Spanish (Latin America)", MX),
        ("Portuguese (Brazil)", BR),
        ("Portuguese", PT),
        ("en-US", US),
        ("pt_BR", BR),
        ("pt-BR", BR),
        ("pt-PT", PT),
        ("es-419", MX),
        ("es_ES", ES),
        ("Japanese Signs & Songs", JP),
        ("Engl", US),
    ],
)
def test_language_flag_lookup(label, expected) -> None:
    assert language_flag(label) == expected


def test_language_flag_never_fails() -> None:
    assert language_flag("Klingon") == GLOBE_GLYPH
    assert language_flag("zz") == GLOBE_GLYPH
    assert language_flag("") == WHITE_FLAG_GLYPH
    assert language_flag(None) == WHITE_FLAG_GLYPH


def test_chinese_variants_share_one_entry_cantonese_stays_separate() -> None:
    flags = unique_language_flags(
        ["Chinese (Simplified)", "Chinese (Traditional)", "Cantonese", "", None, "chinese"]
    )

    assert [f.language for f in flags] == ["chinese", "cantonese"]
    assert [f.flag for f in flags] == [CN, HK]


def test_language_flag_entry() -> None:
    assert language_flag_entry("Japanese (Forced)") == LanguageFlag(language="japanese", flag=JP)

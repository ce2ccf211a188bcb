"""Language label canonicalization and regional-indicator flag lookup."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from releasekit import logger

GLOBE_GLYPH = "\U0001F310"
WHITE_FLAG_GLYPH = "\U0001F3F3\uFE0F"
_REGIONAL_INDICATOR_A = 0x1F1E6

# Language names and ISO 639-1 codes -> region code
LANGUAGE_REGIONS: dict[str, str] = {
    "afrikaans": "ZA", "af": "ZA",
    "albanian": "AL", "sq": "AL",
    "amharic": "ET", "am": "ET",
    "arabic": "SA", "ar": "SA",
    "armenian": "AM", "hy": "AM",
    "azerbaijani": "AZ", "az": "AZ",
    "basque": "ES", "eu": "ES",
    "belarusian": "BY", "be": "BY",
    "bengali": "BD", "bn": "BD",
    "bosnian": "BA", "bs": "BA",
    "bulgarian": "BG", "bg": "BG",
    "burmese": "MM", "my": "MM",
    "cambodian": "KH", "km": "KH",
    "catalan": "ES", "ca": "ES",
    "cebuano": "PH",
    "chinese": "CN", "zh": "CN",
    "cantonese": "HK",
    "croatian": "HR", "hr": "HR",
    "czech": "CZ", "cs": "CZ",
    "danish": "DK", "da": "DK",
    "dutch": "NL", "nl": "NL",
    "english": "US", "en": "US",
    "esperanto": "PL", "eo": "PL",
    "estonian": "EE", "et": "EE",
    "filipino": "PH", "fil": "PH",
    "finnish": "FI", "fi": "FI",
    "french": "FR", "fr": "FR",
    "galician": "ES", "gl": "ES",
    "georgian": "GE", "ka": "GE",
    "german": "DE", "de": "DE",
    "greek": "GR", "el": "GR",
    "gujarati": "IN", "gu": "IN",
    "haitian creole": "HT", "ht": "HT",
    "hebrew": "IL", "he": "IL",
    "hindi": "IN", "hi": "IN",
    "hungarian": "HU", "hu": "HU",
    "icelandic": "IS", "is": "IS",
    "indonesian": "ID", "id": "ID",
    "irish": "IE", "ga": "IE",
    "italian": "IT", "it": "IT",
    "japanese": "JP", "ja": "JP",
    "javanese": "ID", "jv": "ID",
    "kannada": "IN", "kn": "IN",
    "kazakh": "KZ", "kk": "KZ",
    "khmer": "KH",
    "korean": "KR", "ko": "KR",
    "kurdish": "TR", "ku": "TR",
    "kyrgyz": "KG", "ky": "KG",
    "lao": "LA", "lo": "LA",
    "latin": "VA", "la": "VA",
    "latvian": "LV", "lv": "LV",
    "lithuanian": "LT", "lt": "LT",
    "luxembourgish": "LU", "lb": "LU",
    "macedonian": "MK", "mk": "MK",
    "malay": "MY", "ms": "MY",
    "malayalam": "IN", "ml": "IN",
    "maltese": "MT", "mt": "MT",
    "maori": "NZ", "mi": "NZ",
    "marathi": "IN", "mr": "IN",
    "mongolian": "MN", "mn": "MN",
    "nepali": "NP", "ne": "NP",
    "norwegian": "NO", "no": "NO",
    "pashto": "AF", "ps": "AF",
    "persian": "IR", "fa": "IR",
    "polish": "PL", "pl": "PL",
    "portuguese": "PT", "pt": "PT",
    "portuguese (brazil)": "BR",
    "punjabi": "PK", "pa": "PK",
    "romanian": "RO", "ro": "RO",
    "russian": "RU", "ru": "RU",
    "serbian": "RS", "sr": "RS",
    "sinhala": "LK", "si": "LK",
    "slovak": "SK", "sk": "SK",
    "slovenian": "SI", "sl": "SI",
    "somali": "SO", "so": "SO",
    "spanish": "ES", "es": "ES",
    "spanish (latin america)": "MX",
    "sundanese": "ID", "su": "ID",
    "swahili": "KE", "sw": "KE",
    "swedish": "SE", "sv": "SE",
    "tagalog": "PH", "tl": "PH",
    "tajik": "TJ", "tg": "TJ",
    "tamil": "IN", "ta": "IN",
    "tatar": "RU", "tt": "RU",
    "telugu": "IN", "te": "IN",
    "thai": "TH", "th": "TH",
    "turkish": "TR", "tr": "TR",
    "turkmen": "TM", "tk": "TM",
    "ukrainian": "UA", "uk": "UA",
    "urdu": "PK", "ur": "PK",
    "uyghur": "CN", "ug": "CN",
    "uzbek": "UZ", "uz": "UZ",
    "vietnamese": "VN", "vi": "VN",
    "welsh": "GB-WLS", "cy": "GB-WLS",
    "xhosa": "ZA", "xh": "ZA",
    "yiddish": "IL", "yi": "IL",
    "yoruba": "NG", "yo": "NG",
    "zulu": "ZA", "zu": "ZA",
}

# Prefix matching considers full language names only, never ISO codes.
_PREFIX_KEYS: tuple[str, ...] = tuple(key for key in LANGUAGE_REGIONS if len(key) > 3)

# canonical -> (language word, region word); both must appear in the label
REGIONAL_VARIANTS: dict[str, tuple[str, str]] = {
    "spanish (latin america)": ("spanish", "latin america"),
    "portuguese (brazil)": ("portuguese", "brazil"),
}

# language-region tags naming a regional variant
REGIONAL_TAGS: dict[str, str] = {
    "pt-br": "portuguese (brazil)",
    "es-mx": "spanish (latin america)",
    "es-419": "spanish (latin america)",
}

_MARKER_WORDS = re.compile(r"\b(?:sdh|cc|forced|commentary|descriptive|hearing impaired)\b", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class LanguageFlag:
    language: str
    flag: str


def base_language(label: str | None) -> str:
    """Return the label without any parenthetical qualifier, case preserved."""
    if not label:
        return ""
    return label.split("(", 1)[0].strip()


def normalize_language(label: str | None) -> str:
    """
    Canonical, lowercase language used as a deduplication key.

    "English (SDH)" -> "english", "Chinese (Traditional)" -> "chinese",
    "Spanish (Latin America)" -> "spanish (latin america)".
    """
    if not label:
        return ""
    lowered = label.lower().strip()

    base = lowered.split("(", 1)[0]
    base = _WHITESPACE.sub(" ", _MARKER_WORDS.sub(" ", base)).strip()

    if "chinese" in base:
        return "chinese"
    if "cantonese" in base:
        return "cantonese"

    for canonical, (language, region) in REGIONAL_VARIANTS.items():
        if language in lowered and region in lowered:
            return canonical

    return base


def region_to_flag(region_code: str) -> str:
    """Convert a two-letter region code into its regional-indicator flag glyph."""
    code = (region_code or "").strip().upper()
    if len(code) != 2 or not all("A" <= ch <= "Z" for ch in code):
        return GLOBE_GLYPH
    return "".join(chr(_REGIONAL_INDICATOR_A + ord(ch) - ord("A")) for ch in code)


def _lookup_region(canonical: str) -> str | None:
    region = LANGUAGE_REGIONS.get(canonical)
    if region is not None:
        return region

    # "en-US", "pt_BR" style tags
    variant = REGIONAL_TAGS.get(canonical.replace("_", "-"))
    if variant is not None:
        return LANGUAGE_REGIONS[variant]
    for separator in ("-", "_"):
        if separator in canonical:
            region = LANGUAGE_REGIONS.get(canonical.split(separator, 1)[0])
            if region is not None:
                return region

    for key in _PREFIX_KEYS:
        if canonical.startswith(key) or key.startswith(canonical):
            return LANGUAGE_REGIONS[key]
    return None


def language_flag(label: str | None) -> str:
    """Flag glyph for a language label; never fails."""
    canonical = normalize_language(label)
    if not canonical:
        return WHITE_FLAG_GLYPH

    region = _lookup_region(canonical)
    if region is None:
        logger.debug(f"No flag for language '{label}', using globe")
        return GLOBE_GLYPH
    return region_to_flag(region)


def language_flag_entry(label: str | None) -> LanguageFlag:
    return LanguageFlag(language=normalize_language(label), flag=language_flag(label))


def unique_language_flags(labels: Iterable[str | None]) -> list[LanguageFlag]:
    """Deduplicate labels by canonical language, keeping the first flag seen for each."""
    seen: set[str] = set()
    result: list[LanguageFlag] = []
    for label in labels:
        canonical = normalize_language(label)
        if not canonical or canonical in seen:
            continue
        seen.add(canonical)
        result.append(LanguageFlag(language=canonical, flag=language_flag(canonical)))
    return result

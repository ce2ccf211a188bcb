"""One-line release summaries derived from structured MediaInfo.

Format: "HEVC 10-bit 1080p HDR10+ | Atmos 7.1 + FLAC 2.0 | 18 Subs (Chinese, English, Japanese...)"
"""

from __future__ import annotations

import re
from typing import List, Optional

from releasekit.config import SummaryConfig
from releasekit.languages import base_language
from releasekit.mediainfo.parser import parse_mediainfo
from releasekit.mediainfo.structurer import to_structured
from releasekit.mediainfo.types import AudioTrack, MediaInfoReport, MediaInfoStructured, TextTrack, VideoTrack

_FIRST_NUMBER = re.compile(r"\d+")

RESOLUTION_BUCKETS: tuple[tuple[int, str], ...] = (
    (2160, "4K"),
    (1080, "1080p"),
    (720, "720p"),
    (576, "576p"),
    (480, "480p"),
)

HDR_FORMAT_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("dolby vision", "DV"),
    ("hdr10+", "HDR10+"),
    ("hdr10", "HDR10"),
    ("hlg", "HLG"),
)

TRANSFER_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("pq", "HDR10"),
    ("smpte st 2084", "HDR10"),
    ("hlg", "HLG"),
)

# Checked in order against the upper-cased format code
AUDIO_FORMAT_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("E-AC-3", "EAC3"), "DD+"),
    (("AC-3", "AC3"), "DD"),
    (("AAC",), "AAC"),
    (("FLAC",), "FLAC"),
    (("OPUS",), "Opus"),
    (("TRUEHD",), "TrueHD"),
    (("DTS",), "DTS"),
)

CHANNEL_LAYOUTS: dict[int, str] = {1: "1.0", 2: "2.0", 6: "5.1", 7: "6.1", 8: "7.1"}


def _number(value: Optional[str]) -> Optional[int]:
    """Digits of a MediaInfo value, ignoring unit text and thousands spaces ('1 080 pixels' -> 1080)."""
    if not value:
        return None
    digits = re.sub(r"[^\d]", "", value)
    return int(digits) if digits else None


def resolution_label(height: Optional[str]) -> str:
    h = _number(height)
    if h is None:
        return ""
    for threshold, label in RESOLUTION_BUCKETS:
        if h >= threshold:
            return label
    return f"{h}p"


def bit_depth_label(bit_depth: Optional[str]) -> str:
    """'10 bits' -> '10-bit'; empty for 8-bit or missing depth."""
    if not bit_depth:
        return ""
    match = _FIRST_NUMBER.search(bit_depth)
    if match is None:
        return bit_depth.replace(" bits", "-bit").replace(" bit", "-bit")
    depth = int(match.group())
    return "" if depth == 8 else f"{depth}-bit"


def hdr_label(video: VideoTrack) -> str:
    if video.hdr_format:
        hdr_format = video.hdr_format.lower()
        for keyword, label in HDR_FORMAT_KEYWORDS:
            if keyword in hdr_format:
                return label
        return "HDR"

    transfer = (video.transfer_characteristics or "").lower()
    for keyword, label in TRANSFER_KEYWORDS:
        if keyword in transfer:
            return label
    return ""


def channel_layout(channels: Optional[str]) -> str:
    """'6 channels' -> '5.1'."""
    if not channels:
        return ""
    match = _FIRST_NUMBER.search(channels)
    if match is None:
        return channels
    count = int(match.group())
    return CHANNEL_LAYOUTS.get(count, f"{count}ch")


def audio_codec_label(audio: AudioTrack) -> str:
    commercial = (audio.commercial_name or "").lower()
    if "atmos" in commercial:
        return "Atmos"
    if "truehd" in commercial:
        return "TrueHD"
    if "dts" in commercial:
        return "DTS-HD MA" if "HD" in (audio.commercial_name or "") else "DTS"

    if not audio.format:
        return ""
    code = audio.format.upper()
    for needles, label in AUDIO_FORMAT_RULES:
        if any(needle in code for needle in needles):
            return label
    return audio.format


def describe_audio(audio: AudioTrack) -> str:
    label = audio_codec_label(audio)
    if not label:
        return ""
    layout = channel_layout(audio.channels)
    return f"{label} {layout}" if layout else label


def video_segment(video: VideoTrack) -> str:
    parts = [
        video.format or "",
        bit_depth_label(video.bit_depth),
        resolution_label(video.height),
        hdr_label(video),
    ]
    return " ".join(part for part in parts if part)


def audio_segment(tracks: tuple[AudioTrack, ...], limit: int = 2) -> str:
    descriptors: List[str] = []
    for track in tracks:
        descriptor = describe_audio(track)
        if descriptor and descriptor not in descriptors:
            descriptors.append(descriptor)
    return " + ".join(descriptors[:limit])


def subtitle_segment(tracks: tuple[TextTrack, ...], config: SummaryConfig) -> str:
    if not tracks:
        return ""
    count = len(tracks)
    languages: List[str] = []
    for track in tracks:
        language = base_language(track.language)
        if language and language not in languages:
            languages.append(language)

    segment = f"{count} Sub{'s' if count != 1 else ''}"
    if 0 < len(languages) <= config.max_listed_subtitle_languages:
        segment += f" ({', '.join(languages)})"
    elif len(languages) > config.max_listed_subtitle_languages:
        segment += f" ({', '.join(languages[:config.subtitle_preview_count])}...)"
    return segment


def generate_summary(structured: MediaInfoStructured, config: SummaryConfig | None = None) -> str:
    """Pipe-separated video | audio | subtitle line; segments without data are omitted."""
    config = config or SummaryConfig()
    segments = [
        video_segment(structured.video[0]) if structured.video else "",
        audio_segment(structured.audio, config.max_audio_formats),
        subtitle_segment(structured.text, config),
    ]
    return " | ".join(segment for segment in segments if segment)


def summarize_mediainfo(text: str, config: SummaryConfig | None = None) -> MediaInfoReport:
    """Parse, structure and summarize a raw MediaInfo report in one go."""
    parsed = parse_mediainfo(text)
    structured = to_structured(parsed)
    return MediaInfoReport(parsed=parsed, structured=structured, summary=generate_summary(structured, config))

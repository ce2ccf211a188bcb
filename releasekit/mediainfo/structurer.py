"""Project parsed MediaInfo sections onto the fixed general/video/audio/text shape."""

from __future__ import annotations

from typing import List

from releasekit.mediainfo.types import (
    AudioTrack,
    GeneralInfo,
    MediaInfoParsed,
    MediaInfoSection,
    MediaInfoStructured,
    TextTrack,
    VideoTrack,
)


def sections_for(parsed: MediaInfoParsed, base: str) -> List[MediaInfoSection]:
    """Sections stored under ``base``, then any stored under '<base> #N' keys in key order."""
    sections = list(parsed.get(base, []))
    prefix = f"{base} #"
    for key, extra in parsed.items():
        if key.startswith(prefix):
            sections.extend(extra)
    return sections


def _general(section: MediaInfoSection) -> GeneralInfo:
    return GeneralInfo(
        file_name=section.get("Complete name"),
        format=section.get("Format"),
        duration=section.get("Duration"),
        file_size=section.get("File size"),
        bit_rate=section.get("Overall bit rate"),
    )


def _video(section: MediaInfoSection) -> VideoTrack:
    return VideoTrack(
        format=section.get("Format"),
        format_profile=section.get("Format profile"),
        codec=section.get("Codec ID"),
        width=section.get("Width"),
        height=section.get("Height"),
        bit_depth=section.get("Bit depth"),
        hdr_format=section.get("HDR format"),
        transfer_characteristics=section.get("Transfer characteristics"),
        frame_rate=section.get("Frame rate"),
        bit_rate=section.get("Bit rate"),
    )


def _audio(section: MediaInfoSection) -> AudioTrack:
    return AudioTrack(
        format=section.get("Format"),
        format_profile=section.get("Format profile"),
        channels=section.get("Channel(s)"),
        bit_rate=section.get("Bit rate"),
        title=section.get("Title"),
        language=section.get("Language"),
        commercial_name=section.get("Commercial name"),
    )


def _text(section: MediaInfoSection) -> TextTrack:
    return TextTrack(
        format=section.get("Format"),
        title=section.get("Title"),
        language=section.get("Language"),
    )


def to_structured(parsed: MediaInfoParsed) -> MediaInfoStructured:
    """
    Build the structured view of a parsed report.

    Repeated fields contribute their first value. Missing stream kinds leave
    ``general`` as None and the stream tuples empty.
    """
    general_sections = parsed.get("General") or []
    return MediaInfoStructured(
        general=_general(general_sections[0]) if general_sections else None,
        video=tuple(_video(s) for s in sections_for(parsed, "Video")),
        audio=tuple(_audio(s) for s in sections_for(parsed, "Audio")),
        text=tuple(_text(s) for s in sections_for(parsed, "Text")),
    )

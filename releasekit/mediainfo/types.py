"""Shared data structures for MediaInfo parsing."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class SingleValue:
    """A field reported once within a section."""
    value: str

    @property
    def first(self) -> str:
        return self.value

    @property
    def values(self) -> Tuple[str, ...]:
        return (self.value,)


@dataclass(frozen=True)
class MultiValue:
    """A field repeated within a section, in first-seen order."""
    values: Tuple[str, ...]

    @property
    def first(self) -> str:
        return self.values[0]


FieldValue = Union[SingleValue, MultiValue]


def append_value(existing: Optional[FieldValue], value: str) -> FieldValue:
    """Aggregate a repeated key; a repeat never overwrites the earlier value."""
    if existing is None:
        return SingleValue(value)
    return MultiValue(existing.values + (value,))


def first_value(value: Optional[FieldValue]) -> Optional[str]:
    if value is None:
        return None
    return value.first or None


@dataclass(frozen=True)
class MediaInfoSection:
    """One blank-line separated block of a MediaInfo text report."""

    header: str
    base: str
    index: Optional[int] = None
    data: Mapping[str, FieldValue] = field(default_factory=dict)

    def get(self, key: str) -> Optional[str]:
        return first_value(self.data.get(key))


MediaInfoParsed = Dict[str, List[MediaInfoSection]]


@dataclass(frozen=True)
class GeneralInfo:
    file_name: Optional[str] = None
    format: Optional[str] = None
    duration: Optional[str] = None
    file_size: Optional[str] = None
    bit_rate: Optional[str] = None


@dataclass(frozen=True)
class VideoTrack:
    format: Optional[str] = None
    format_profile: Optional[str] = None
    codec: Optional[str] = None
    width: Optional[str] = None
    height: Optional[str] = None
    bit_depth: Optional[str] = None
    hdr_format: Optional[str] = None
    transfer_characteristics: Optional[str] = None
    frame_rate: Optional[str] = None
    bit_rate: Optional[str] = None


@dataclass(frozen=True)
class AudioTrack:
    format: Optional[str] = None
    format_profile: Optional[str] = None
    channels: Optional[str] = None
    bit_rate: Optional[str] = None
    title: Optional[str] = None
    language: Optional[str] = None
    commercial_name: Optional[str] = None


@dataclass(frozen=True)
class TextTrack:
    format: Optional[str] = None
    title: Optional[str] = None
    language: Optional[str] = None


@dataclass(frozen=True)
class MediaInfoStructured:
    """Fixed-shape projection of a parsed report."""

    general: Optional[GeneralInfo] = None
    video: Tuple[VideoTrack, ...] = ()
    audio: Tuple[AudioTrack, ...] = ()
    text: Tuple[TextTrack, ...] = ()

    def audio_languages(self) -> List[str]:
        return [track.language for track in self.audio if track.language]

    def subtitle_languages(self) -> List[str]:
        return [track.language for track in self.text if track.language]

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict form; absent stream kinds become None."""
        return {
            "general": asdict(self.general) if self.general else None,
            "video": [asdict(track) for track in self.video] or None,
            "audio": [asdict(track) for track in self.audio] or None,
            "text": [asdict(track) for track in self.text] or None,
        }


@dataclass(frozen=True)
class MediaInfoReport:
    """Every stage of the MediaInfo pipeline for one raw report."""

    parsed: MediaInfoParsed
    structured: MediaInfoStructured
    summary: str

"""MediaInfo text report parsing, structuring and summarizing."""

from .parser import parse_mediainfo
from .structurer import to_structured
from .summary import generate_summary, summarize_mediainfo
from .types import (
    AudioTrack,
    GeneralInfo,
    MediaInfoParsed,
    MediaInfoReport,
    MediaInfoSection,
    MediaInfoStructured,
    MultiValue,
    SingleValue,
    TextTrack,
    VideoTrack,
    first_value,
)

__all__ = [
    "AudioTrack",
    "GeneralInfo",
    "MediaInfoParsed",
    "MediaInfoReport",
    "MediaInfoSection",
    "MediaInfoStructured",
    "MultiValue",
    "SingleValue",
    "TextTrack",
    "VideoTrack",
    "first_value",
    "generate_summary",
    "parse_mediainfo",
    "summarize_mediainfo",
    "to_structured",
]

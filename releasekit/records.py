"""
records.py - Release-entry records handed to the persistence layer
"""

from __future__ import annotations

import re
import secrets
import string
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Literal, Optional

from pydantic import BaseModel, Field

from releasekit.specs.types import SpecEntry
from releasekit.torrent.types import TorrentEntry

HASH_ALPHABET = string.ascii_lowercase + string.digits
SLUG_ALPHABET = "abcdefghijkmnopqrstuvwxyz23456789"  # no l, o, 0, 1
SLUG_MAX_LENGTH = 50
UNKNOWN_FILENAME = "unknown.mkv"
_COMPLETE_NAME = re.compile(r"Complete name\s*:\s*(.+)", re.IGNORECASE)
_NON_SLUG = re.compile(r"[^a-z0-9]+")

MediaType = Literal["movie", "tv", "tva", "ova", "ona", "special"]
SpecialType = Literal["tva", "ova", "ona", "special"]


class MediaInfoRecord(BaseModel):
    filename: str = Field(description="Video filename the report describes")
    raw_hash: str = Field(description="Storage key of the raw MediaInfo text")


class TorrentFileRecord(BaseModel):
    name: str
    size: int | None = None


class TorrentRecord(BaseModel):
    name: str = Field(description="Torrent top-level name")
    display_name: str = Field(description="Short display name, e.g. '**GRP** BD 1080p FLAC x265'")
    files: List[TorrentFileRecord] = Field(default_factory=list)
    mediainfo: List[MediaInfoRecord] = Field(default_factory=list)


class SpecRecord(BaseModel):
    title: str
    content: str = ""

    @classmethod
    def from_entry(cls, entry: SpecEntry) -> "SpecRecord":
        return cls(title=entry.title, content=entry.content)


class ReleaseRecord(BaseModel):
    """One published release: its torrents and spec blocks plus catalogue metadata."""

    slug: str = Field(description="Random URL slug")
    title: str = Field(description="Primary display title")
    title_en: Optional[str] = None
    title_zh: Optional[str] = None
    date: str = Field(description="Publication date in ISO format")
    tmdb_id: Optional[int] = None
    media_type: MediaType = "movie"
    special_type: Optional[SpecialType] = None
    season: Optional[int] = Field(default=None, ge=0)
    badge_label: Optional[str] = Field(default=None, description="Badge override, e.g. 'S01 Part1'")
    is_complete: Optional[bool] = None
    year: Optional[int] = None
    poster: str = ""
    torrents: List[TorrentRecord] = Field(default_factory=list)
    specs: List[SpecRecord] = Field(default_factory=list)
    links: Dict[str, str] = Field(default_factory=dict)


def _random_key(alphabet: str, length: int) -> str:
    if length < 1:
        raise ValueError("Key length must be positive")
    return "".join(secrets.choice(alphabet) for _ in range(length))


def generate_hash(length: int = 8) -> str:
    """Random lowercase alphanumeric key for storing a raw MediaInfo report."""
    return _random_key(HASH_ALPHABET, length)


def generate_slug(length: int = 8) -> str:
    """Random release slug without the look-alike characters l, o, 0 and 1."""
    return _random_key(SLUG_ALPHABET, length)


def slugify(title: str) -> str:
    """'Show: Part 2!' -> 'show-part-2', at most 50 characters."""
    slug = _NON_SLUG.sub("-", (title or "").lower()).strip("-")
    return slug[:SLUG_MAX_LENGTH]


def mediainfo_filename(raw_text: str) -> str:
    """Basename of the report's 'Complete name', or 'unknown.mkv'."""
    match = _COMPLETE_NAME.search((raw_text or "").replace("\r\n", "\n"))
    if not match:
        return UNKNOWN_FILENAME
    return re.split(r"[/\\]", match.group(1).strip())[-1] or UNKNOWN_FILENAME


def build_torrent_record(
    entry: TorrentEntry,
    display_name: str,
    mediainfo_texts: Iterable[str] = (),
) -> TorrentRecord:
    """
    Pair a decoded torrent with its MediaInfo reports.

    Each non-blank report gets a fresh storage key; the caller stores the raw
    text under the returned record's ``raw_hash``.
    """
    mediainfo = [
        MediaInfoRecord(filename=mediainfo_filename(text), raw_hash=generate_hash())
        for text in mediainfo_texts
        if text and text.strip()
    ]
    return TorrentRecord(
        name=entry.name,
        display_name=display_name or entry.name,
        files=[TorrentFileRecord(name=f.path, size=f.size) for f in entry.files],
        mediainfo=mediainfo,
    )


def build_release_record(
    title: str,
    torrents: Iterable[TorrentRecord] = (),
    specs: Iterable[SpecEntry] = (),
    slug: Optional[str] = None,
    date: Optional[str] = None,
    **metadata,
) -> ReleaseRecord:
    """
    Combine torrent records and extracted spec blocks into one release entry.

    A random slug and the current UTC time are filled in when not given; any
    other ``ReleaseRecord`` field may be passed through ``metadata``.
    """
    return ReleaseRecord(
        slug=slug or generate_slug(),
        title=title,
        date=date or datetime.now(timezone.utc).isoformat(timespec="seconds"),
        torrents=list(torrents),
        specs=[SpecRecord.from_entry(spec) for spec in specs],
        **metadata,
    )

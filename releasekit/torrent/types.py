"""Torrent records handed to the persistence layer."""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class TorrentFile:
    """A file inside a torrent; path components joined with '/'."""
    path: str
    size: int


@dataclass(frozen=True)
class TorrentEntry:
    """Torrent name plus its file list, in declaration order."""
    name: str
    files: Tuple[TorrentFile, ...] = field(default_factory=tuple)

    @property
    def total_size(self) -> int:
        return sum(f.size for f in self.files)

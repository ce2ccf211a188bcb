"""Decoding of .torrent metadata into name and file list."""

from .decoder import TorrentDecodeError, decode_torrent, format_size, read_torrent
from .types import TorrentEntry, TorrentFile

__all__ = [
    "TorrentDecodeError",
    "TorrentEntry",
    "TorrentFile",
    "decode_torrent",
    "format_size",
    "read_torrent",
]

"""Torrent metadata decoding using bencodepy."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import bencodepy

from releasekit import logger
from releasekit.torrent.types import TorrentEntry, TorrentFile

SIZE_UNITS = ("B", "KiB", "MiB", "GiB", "TiB")


class TorrentDecodeError(ValueError):
    """Raised when torrent bytes cannot yield a name and a file list."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid torrent: {reason}")


def _text(value: Any, context: str) -> str:
    if not isinstance(value, (bytes, bytearray)):
        raise TorrentDecodeError(f"{context} must be a byte string, got '{type(value).__name__}'")
    try:
        return bytes(value).decode("utf-8")
    except UnicodeDecodeError:
        logger.debug(f"{context} is not valid UTF-8; replacing undecodable bytes")
        return bytes(value).decode("utf-8", errors="replace")


def _length(value: Any, context: str) -> int:
    if not isinstance(value, int) or value < 0:
        raise TorrentDecodeError(f"{context} must be a non-negative integer")
    return value


def _parse_files(entries: Any, name: str) -> list[TorrentFile]:
    if not isinstance(entries, list):
        raise TorrentDecodeError("info.files must be a list")

    files: list[TorrentFile] = []
    for idx, entry in enumerate(entries):
        context = f"info.files[{idx}]"
        if not isinstance(entry, dict):
            raise TorrentDecodeError(f"{context} must be a dictionary")
        parts = entry.get(b"path")
        if not isinstance(parts, list) or not parts:
            raise TorrentDecodeError(f"{context}.path must be a non-empty list")
        path = "/".join(_text(part, f"{context}.path") for part in parts)
        files.append(TorrentFile(path=path, size=_length(entry.get(b"length"), f"{context}.length")))
    logger.debug(f"Decoded multi-file torrent '{name}' with {len(files)} file(s)")
    return files


def decode_torrent(data: bytes) -> TorrentEntry:
    """
    Decode raw .torrent bytes into the torrent name and its file list.

    Multi-file torrents yield one entry per ``info.files`` item; single-file
    torrents yield one entry named after the torrent. Anything else raises
    TorrentDecodeError, never an empty list.
    """
    try:
        root = bencodepy.decode(data)
    except Exception as exc:
        raise TorrentDecodeError(f"malformed bencode ({exc})") from exc

    if not isinstance(root, dict):
        raise TorrentDecodeError("root must be a dictionary")
    info = root.get(b"info")
    if not isinstance(info, dict):
        raise TorrentDecodeError("missing or invalid 'info' dictionary")
    if b"name" not in info:
        raise TorrentDecodeError("info.name is missing")
    name = _text(info[b"name"], "info.name")

    if b"files" in info:
        files = _parse_files(info[b"files"], name)
    elif b"length" in info:
        files = [TorrentFile(path=name, size=_length(info[b"length"], "info.length"))]
    else:
        raise TorrentDecodeError("info has neither 'files' nor 'length'")

    return TorrentEntry(name=name, files=tuple(files))


def read_torrent(torrent_path: Path) -> TorrentEntry:
    """Read a .torrent file from disk and decode it."""
    return decode_torrent(Path(torrent_path).read_bytes())


def format_size(size: int | None) -> str:
    """Human readable size in binary units, e.g. 1536 -> '1.50 KiB'."""
    if size is None:
        return "unknown"
    value = float(size)
    unit_index = 0
    while value >= 1024 and unit_index < len(SIZE_UNITS) - 1:
        value /= 1024
        unit_index += 1
    return f"{value:.2f} {SIZE_UNITS[unit_index]}"

"""Parse MediaInfo ``--Output=Text`` reports into named sections."""

from __future__ import annotations

import re
from typing import Dict, Optional

from releasekit import logger
from releasekit.mediainfo.types import FieldValue, MediaInfoParsed, MediaInfoSection, append_value

_BLOCK_SEPARATOR = re.compile(r"\n\s*\n+")
_HEADER = re.compile(r"^(.+?)\s*(?:#(\d+))?$")


def normalize_report(text: str) -> str:
    """Undo escaped newlines, line-ending differences and no-break-space artifacts."""
    # Only single-line reports are unescaped; otherwise a backslash-n is path text
    if "\n" not in text and "\\n" in text:
        text = text.replace("\\r\\n", "\n").replace("\\n", "\n")
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = text.replace("\u00c2\u00a0", " ").replace("\u00a0", " ")
    return text.strip()


def split_header(header: str) -> tuple[str, Optional[int]]:
    """'Audio #2' -> ('Audio', 2); 'General' -> ('General', None)."""
    match = _HEADER.match(header)
    if not match:
        return header, None
    index = match.group(2)
    return match.group(1).strip(), int(index) if index else None


def parse_section(block: str) -> Optional[MediaInfoSection]:
    lines = [line.strip() for line in block.split("\n")]
    lines = [line for line in lines if line]
    if not lines:
        return None

    header = lines[0]
    base, index = split_header(header)
    data: Dict[str, FieldValue] = {}
    for line in lines[1:]:
        if ":" not in line:
            continue
        raw_key, _, raw_value = line.partition(":")
        key = raw_key.strip()
        if not key:
            continue
        data[key] = append_value(data.get(key), raw_value.strip())

    return MediaInfoSection(header=header, base=base, index=index, data=data)


def parse_mediainfo(text: str | None) -> MediaInfoParsed:
    """
    Parse a MediaInfo text report.

    Sections are grouped by base name ('Audio #2' lands under 'Audio') in
    document order. Malformed input degrades to fewer or emptier sections,
    never an error.
    """
    if not text:
        return {}

    result: MediaInfoParsed = {}
    for block in _BLOCK_SEPARATOR.split(normalize_report(text)):
        section = parse_section(block)
        if section is None:
            continue
        result.setdefault(section.base, []).append(section)

    logger.debug(
        "Parsed MediaInfo sections: "
        + ", ".join(f"{base} x{len(sections)}" for base, sections in result.items())
    )
    return result

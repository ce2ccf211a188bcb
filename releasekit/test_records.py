from __future__ import annotations

import pytest

from releasekit.records import (
    HASH_ALPHABET,
    SLUG_ALPHABET,
    UNKNOWN_FILENAME,
    ReleaseRecord,
    SpecRecord,
    TorrentRecord,
    build_release_record,
    build_torrent_record,
    generate_hash,
    generate_slug,
    mediainfo_filename,
    slugify,
)
from releasekit.specs.types import SpecEntry
from releasekit.torrent.types import TorrentEntry, TorrentFile

REPORT = "General\nComplete name                            : D:\\Rips\\Show\\Show.S01E01.mkv\nFormat : Matroska\n"


def test_mediainfo_filename_takes_basename_from_either_separator() -> None:
    assert mediainfo_filename(REPORT) == "Show.S01E01.mkv"
    assert mediainfo_filename("General\nComplete name : /data/movie.mkv") == "movie.mkv"


def test_mediainfo_filename_keeps_backslash_n_path_segments() -> None:
    report = "General\r\nComplete name : D:\\Anime\\naruto\\Naruto.S01E01.mkv\r\nFormat : Matroska\r\n"

    assert mediainfo_filename(report) == "Naruto.S01E01.mkv"
    assert mediainfo_filename(report.replace("\r\n", "\n")) == "Naruto.S01E01.mkv"


def test_mediainfo_filename_defaults_when_missing() -> None:
    assert mediainfo_filename("General\nFormat : Matroska") == UNKNOWN_FILENAME
    assert mediainfo_filename("") == UNKNOWN_FILENAME


def test_generate_hash_shape() -> None:
    value = generate_hash()

    assert len(value) == 8
    assert set(value) <= set(HASH_ALPHABET)
    assert len(generate_hash(12)) == 12
    with pytest.raises(ValueError):
        generate_hash(0)


def test_build_torrent_record_pairs_files_and_reports(monkeypatch: pytest.MonkeyPatch) -> None:
    keys = iter(["aaaa1111", "bbbb2222"])
    monkeypatch.setattr("releasekit.records.generate_hash", lambda length=8: next(keys))
    entry = TorrentEntry(name="Show", files=(TorrentFile("S01/e1.mkv", 100), TorrentFile("S01/e2.mkv", 200)))

    record = build_torrent_record(entry, "**GRP** WEB 1080p", [REPORT, "   ", "General\nFormat : MPEG-4"])

    assert isinstance(record, TorrentRecord)
    assert record.model_dump() == {
        "name": "Show",
        "display_name": "**GRP** WEB 1080p",
        "files": [{"name": "S01/e1.mkv", "size": 100}, {"name": "S01/e2.mkv", "size": 200}],
        "mediainfo": [
            {"filename": "Show.S01E01.mkv", "raw_hash": "aaaa1111"},
            {"filename": UNKNOWN_FILENAME, "raw_hash": "bbbb2222"},
        ],
    }


def test_build_torrent_record_defaults_display_name() -> None:
    record = build_torrent_record(TorrentEntry(name="Album", files=(TorrentFile("Album.flac", 1),)), "")

    assert record.display_name == "Album"
    assert record.mediainfo == []


def test_spec_record_from_entry() -> None:
    assert SpecRecord.from_entry(SpecEntry(title="Info", content="<strong>x</strong>")).model_dump() == {
        "title": "Info",
        "content": "<strong>x</strong>",
    }


def test_generate_slug_avoids_look_alike_characters() -> None:
    slug = generate_slug()

    assert len(slug) == 8
    assert set(slug) <= set(SLUG_ALPHABET)
    assert not set("lo01") & set(SLUG_ALPHABET)
    with pytest.raises(ValueError):
        generate_slug(-1)


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("Show: Part 2!", "show-part-2"),
        ("  --Already-Slugged--  ", "already-slugged"),
        ("進撃の巨人", ""),
        ("a" * 60, "a" * 50),
    ],
)
def test_slugify(title, expected) -> None:
    assert slugify(title) == expected


def test_build_release_record_combines_torrents_and_specs(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("releasekit.records.generate_slug", lambda length=8: "k3v9xq2m")
    torrent = build_torrent_record(TorrentEntry(name="Show", files=(TorrentFile("e1.mkv", 1),)), "**GRP** WEB")

    release = build_release_record(
        "Show",
        [torrent],
        [SpecEntry(title="Info", content="x")],
        media_type="tv",
        season=1,
        links={"tmdb": "https://www.themoviedb.org/tv/1"},
    )

    assert isinstance(release, ReleaseRecord)
    assert release.slug == "k3v9xq2m"
    assert release.date
    assert release.media_type == "tv"
    assert release.torrents == [torrent]
    assert release.specs == [SpecRecord(title="Info", content="x")]
    assert release.model_dump()["links"] == {"tmdb": "https://www.themoviedb.org/tv/1"}


def test_build_release_record_keeps_given_slug_and_rejects_unknown_media_type() -> None:
    release = build_release_record("Film", slug="fixed123", date="2024-05-01T00:00:00Z")

    assert (release.slug, release.date, release.torrents, release.specs) == ("fixed123", "2024-05-01T00:00:00Z", [], [])
    with pytest.raises(ValueError):
        build_release_record("Film", media_type="podcast")

#!/usr/bin/env python3
"""
cli.py - Inspect release artifacts with releasekit
Decode a .torrent, summarize a MediaInfo report or extract BBCode spec blocks.
"""

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

import releasekit as pkg
from .config import ReleaseKitConfig, load_config
from .languages import unique_language_flags
from .logger import ReleaseKitLogger, set_logger
from .mediainfo.summary import summarize_mediainfo
from .records import SpecRecord, mediainfo_filename
from .specs.extractor import parse_bbcode_specs
from .torrent.decoder import TorrentDecodeError, format_size, read_torrent

console = Console()
COMMANDS = ("torrent", "mediainfo", "specs")


def _ui_info(message: str) -> None:
    console.print(f"[cyan][INFO][/cyan] {escape(message)}")


def _ui_warn(message: str) -> None:
    console.print(f"[yellow][WARNING][/yellow] {escape(message)}")


def _ui_error(message: str) -> None:
    console.print(f"[red][ERROR][/red] {escape(message)}")


def _print_json(payload: object) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).expanduser().read_text(encoding="utf-8", errors="replace")


def run_torrent(path: str, as_json: bool) -> int:
    try:
        entry = read_torrent(Path(path).expanduser())
    except TorrentDecodeError as exc:
        _ui_error(str(exc))
        return 1

    if as_json:
        _print_json(asdict(entry))
        return 0

    table = Table(title=entry.name)
    table.add_column("Path")
    table.add_column("Size", justify="right")
    for f in entry.files:
        table.add_row(f.path, format_size(f.size))
    console.print(table)
    _ui_info(f"{len(entry.files)} file(s), {format_size(entry.total_size)} total")
    return 0


def run_mediainfo(path: str, as_json: bool, config: ReleaseKitConfig) -> int:
    raw_text = _read_text(path)
    if not raw_text.strip():
        _ui_warn("Empty MediaInfo content")
        return 1

    report = summarize_mediainfo(raw_text, config.summary)
    structured = report.structured
    audio_flags = unique_language_flags(structured.audio_languages())
    subtitle_flags = unique_language_flags(structured.subtitle_languages())

    if as_json:
        _print_json(
            {
                "filename": mediainfo_filename(raw_text),
                "summary": report.summary,
                "structured": structured.to_dict(),
                "audio_languages": [asdict(flag) for flag in audio_flags],
                "subtitle_languages": [asdict(flag) for flag in subtitle_flags],
            }
        )
        return 0

    console.print(mediainfo_filename(raw_text), style="bold", markup=False)
    console.print(report.summary or "(no stream information found)", markup=False)
    table = Table(show_header=True)
    table.add_column("Stream")
    table.add_column("Count", justify="right")
    table.add_column("Languages")
    table.add_row("Video", str(len(structured.video)), "")
    table.add_row("Audio", str(len(structured.audio)), " ".join(f"{f.flag} {f.language}" for f in audio_flags))
    table.add_row("Text", str(len(structured.text)), " ".join(f"{f.flag} {f.language}" for f in subtitle_flags))
    console.print(table)
    return 0


def run_specs(path: str, as_json: bool) -> int:
    specs = parse_bbcode_specs(_read_text(path))
    if not specs:
        _ui_warn("No [quote=Title] or [spoiler=Title] blocks found")
        return 1

    if as_json:
        _print_json([SpecRecord.from_entry(spec).model_dump() for spec in specs])
        return 0

    for spec in specs:
        _ui_info(f"Extracted: {spec.title}")
        console.print(spec.content, markup=False, highlight=False)
    return 0


def show_help(parser: argparse.ArgumentParser) -> None:
    print(f"RELEASEKIT v{getattr(pkg, '__version__', '0.0.0')} - Parse release artifacts into records")
    print()
    parser.print_help()


def main(argv: Optional[list[str]] = None):
    """Entry point"""
    parser = argparse.ArgumentParser(prog="releasekit", add_help=False)
    for args, kwargs in (
        (("-h", "--help"), {"action": "store_true", "help": "Show help"}),
        (("-c", "--config"), {"metavar": "PATH", "help": "Path to config.toml (file or directory)"}),
        (("-d", "--debug"), {"action": "store_true", "help": "Debug output with parser details"}),
        (("--json",), {"action": "store_true", "help": "Print results as JSON"}),
    ):
        parser.add_argument(*args, **kwargs)
    parser.add_argument("command", nargs="?", choices=COMMANDS, help="Artifact type to parse")
    parser.add_argument("path", nargs="?", help="Input file ('-' reads stdin for mediainfo/specs)")

    try:
        args = parser.parse_args(argv)
        if args.help or not args.command or not args.path:
            show_help(parser)
            sys.exit(0 if args.help else 2)

        config_path: Optional[Path] = None
        if args.config:
            config_path = Path(args.config).expanduser()
            if config_path.is_dir():
                config_path = config_path / "config.toml"
        elif (Path.cwd() / "config.toml").exists():
            config_path = Path.cwd() / "config.toml"
        config = load_config(config_path)

        with ReleaseKitLogger(
            log_file=config.logging.log_file,
            debug=args.debug or config.logging.debug,
        ) as run_logger:
            set_logger(run_logger)
            if args.command == "torrent":
                code = run_torrent(args.path, args.json)
            elif args.command == "mediainfo":
                code = run_mediainfo(args.path, args.json, config)
            else:
                code = run_specs(args.path, args.json)
        sys.exit(code)
    except KeyboardInterrupt:
        sys.exit(130)
    except OSError as e:
        _ui_error(f"Cannot read input: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

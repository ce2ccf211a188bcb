"""
Minimal logging context for releasekit.
Single place to control all output: screen + file, with flush.
"""
from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.text import Text

_PREFIX_STYLES: tuple[tuple[str, str], ...] = (
    ("[WARNING]", "yellow"),
    ("[ERROR]", "red"),
    ("[INFO]", "cyan"),
    ("[DEBUG]", "grey50"),
)


class ReleaseKitLogger:
    """Minimal logger: print to screen + file, always flush"""

    def __init__(self, log_file: Optional[Path] = None, debug: bool = False, console: Console | None = None):
        self.log_file = log_file
        self._file_handle = None
        self._start_time = datetime.now()
        self.debug_mode = debug
        self._console = console or Console(highlight=False)

        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            self._file_handle = open(log_file, 'w', buffering=1, encoding='utf-8')  # Line buffered, UTF-8
            from releasekit import __version__
            self._write_file(f"({self._start_time.strftime('%H:%M:%S')}  Started releasekit {__version__})")

    def _screen_text(self, output: str) -> Text:
        """Build styled screen text; brackets in messages stay literal."""
        text = Text(output)
        for marker, style in _PREFIX_STYLES:
            start = output.find(marker)
            if start != -1:
                text.stylize(style, start, start + len(marker))
        return text

    def _write_file(self, output: str) -> None:
        if self._file_handle:
            self._file_handle.write(output + "\n")
            self._file_handle.flush()
            os.fsync(self._file_handle.fileno())

    def log(self, msg: str, prefix: str = ""):
        """Log to screen and file"""
        output = f"{prefix}{msg}" if prefix else msg
        self._console.print(self._screen_text(output))
        self._write_file(output)

    def info(self, msg: str):
        """Info message"""
        self.log(msg)

    def warning(self, msg: str):
        """Warning message"""
        self.log(msg, "[WARNING] ")

    def error(self, msg: str):
        """Error message"""
        self.log(msg, "[ERROR] ")

    def debug(self, msg: str):
        """Debug message (only shown in debug mode)"""
        if self.debug_mode:
            timestamp = datetime.now().strftime('%H:%M:%S.%f')[:-3]
            self.log(msg, f"[{timestamp}] [DEBUG] ")

    def close(self):
        """Close file handle with goodbye message"""
        if self._file_handle:
            end_time = datetime.now()
            elapsed = end_time - self._start_time
            self._write_file(
                f"({end_time.strftime('%H:%M:%S')}  Ended session, elapsed {elapsed.total_seconds():.1f}s)"
            )
            self._file_handle.close()
            self._file_handle = None

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


# Global instance (set by the CLI)
_logger: Optional[ReleaseKitLogger] = None

def set_logger(logger: ReleaseKitLogger):
    """Set global logger instance"""
    global _logger
    _logger = logger

def get_logger() -> ReleaseKitLogger:
    """Get global logger instance"""
    global _logger
    if _logger is None:
        # Fallback: create stdout-only logger
        _logger = ReleaseKitLogger()
    return _logger

# Convenience functions
def log(msg: str):
    get_logger().log(msg)

def info(msg: str):
    get_logger().info(msg)

def warning(msg: str):
    get_logger().warning(msg)

def error(msg: str):
    get_logger().error(msg)

def debug(msg: str):
    get_logger().debug(msg)

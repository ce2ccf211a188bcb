"""
config.py - Configuration model for releasekit
"""

from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field
from rich.console import Console
import sys

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib

console = Console()


class SummaryConfig(BaseModel):
    """Limits applied when condensing a MediaInfo report into one line."""

    max_audio_formats: int = Field(
        default=2,
        ge=1,
        description="How many distinct audio descriptors the summary lists"
    )
    max_listed_subtitle_languages: int = Field(
        default=4,
        ge=0,
        description="Subtitle languages are listed in full up to this many"
    )
    subtitle_preview_count: int = Field(
        default=3,
        ge=0,
        description="Languages shown before the ellipsis when the full list is too long"
    )


class LoggingConfig(BaseModel):
    log_file: Optional[Path] = None
    debug: bool = False


class ReleaseKitConfig(BaseModel):
    summary: SummaryConfig = Field(default_factory=SummaryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    config_path: Optional[Path] = None


def load_config(config_path: Optional[Path]) -> ReleaseKitConfig:
    """Load configuration from TOML file, falling back to defaults when absent"""

    if config_path is None or not config_path.exists():
        return ReleaseKitConfig()

    try:
        with open(config_path, "rb") as f:
            config_data = tomllib.load(f)

        return ReleaseKitConfig(
            summary=SummaryConfig(**config_data.get("summary", {})),
            logging=LoggingConfig(**config_data.get("logging", {})),
            config_path=config_path,
        )

    except Exception as e:
        console.print(f"[red][ERROR][/red] Error loading configuration: {e}")
        sys.exit(1)

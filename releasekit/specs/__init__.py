"""BBCode spec blocks: outermost block extraction and HTML rendering."""

from .extractor import extract_outermost_blocks, parse_bbcode_specs
from .renderer import render_bbcode, tokenize
from .types import SpecEntry, Token

__all__ = [
    "SpecEntry",
    "Token",
    "extract_outermost_blocks",
    "parse_bbcode_specs",
    "render_bbcode",
    "tokenize",
]

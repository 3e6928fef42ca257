"""Text documents module - songs, readings and announcements split into slides."""

from src.texts.formatter import format_text_to_pages, split_into_lines, split_lines_into_pages
from src.texts.parser import TextParseError, make_text_reference, parse_text_file
from src.texts.registry import TextRegistry, get_text_registry
from src.texts.schemas import TextDoc, TextMeta, TextSummary

__all__ = [
    "TextDoc",
    "TextMeta",
    "TextParseError",
    "TextRegistry",
    "TextSummary",
    "format_text_to_pages",
    "get_text_registry",
    "make_text_reference",
    "parse_text_file",
    "split_into_lines",
    "split_lines_into_pages",
]

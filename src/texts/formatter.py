"""Prompter-style text formatting.

Reflows a single slide of text into screen-sized pages. Each page respects
the display's max_chars_per_line and max_lines_per_page limits. The
functions here are pure: identical inputs always give identical pages, so
the player can recompute pages from scratch on every navigation step.
"""

import re

from src.settings.schemas import DisplayConstraints

_WHITESPACE = re.compile(r"\s+")


def format_text_to_pages(slide_content: str, constraints: DisplayConstraints) -> list[str]:
    """Format slide content into pages based on display constraints.

    Args:
        slide_content: Raw slide content (may contain newlines)
        constraints: Line and page limits from the display settings

    Returns:
        Formatted pages, each a newline-joined string. Never empty.
    """
    if not slide_content or not slide_content.strip():
        return [""]

    lines = split_into_lines(slide_content, constraints.max_chars_per_line)
    return split_lines_into_pages(lines, constraints.max_lines_per_page)


def split_into_lines(text: str, max_chars: int) -> list[str]:
    """Split text into lines no longer than max_chars.

    Existing newlines are kept as hard breaks and blank lines survive as
    empty lines. Words are packed greedily; a word longer than max_chars is
    cut into max_chars-wide chunks.
    """
    if max_chars <= 0:
        return [text]

    lines: list[str] = []

    for input_line in text.split("\n"):
        if not input_line.strip():
            lines.append("")
            continue

        current_line = ""
        for word in _WHITESPACE.split(input_line.strip()):
            if len(word) > max_chars:
                if current_line:
                    lines.append(current_line)
                    current_line = ""

                # Remainder of an overflowing word starts the next line
                remaining = word
                while len(remaining) > max_chars:
                    lines.append(remaining[:max_chars])
                    remaining = remaining[max_chars:]
                current_line = remaining
                continue

            candidate = f"{current_line} {word}" if current_line else word
            if len(candidate) <= max_chars:
                current_line = candidate
            else:
                if current_line:
                    lines.append(current_line)
                current_line = word

        if current_line:
            lines.append(current_line)

    return lines or [""]


def split_lines_into_pages(lines: list[str], max_lines: int) -> list[str]:
    """Group lines into pages of at most max_lines lines."""
    if max_lines <= 0:
        return ["\n".join(lines)]

    if not lines:
        return [""]

    pages: list[str] = []
    current_page: list[str] = []

    for line in lines:
        current_page.append(line)
        if len(current_page) >= max_lines:
            pages.append("\n".join(current_page))
            current_page = []

    if current_page:
        pages.append("\n".join(current_page))

    return pages

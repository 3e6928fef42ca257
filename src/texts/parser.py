"""Text file parsing.

Text files are markdown with YAML front matter:

    ---
    schemaVersion: 1
    id: 01HXZ3R8E7Q2V4VJ6T9G2J8N1P
    title: Barka
    description: ""
    categories: [songs]
    ---

    First verse...

    Second verse...
"""

import re
import unicodedata

import yaml
from pydantic import ValidationError

from src.texts.schemas import TextDoc, TextMeta

_FRONT_MATTER = re.compile(
    r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)(.*)\Z",
    re.DOTALL,
)
_BLANK_LINES = re.compile(r"\n\s*\n+")
_NON_SLUG = re.compile(r"[^a-z0-9]+")
# Letters NFD does not decompose into base + combining mark
_TRANSLITERATE = str.maketrans(
    {"ł": "l", "ß": "ss", "ø": "o", "æ": "ae", "œ": "oe", "đ": "d", "ð": "d", "þ": "th", "ı": "i"}
)


class TextParseError(ValueError):
    """Raised when a text file cannot be parsed."""


def split_by_blank_lines(content: str) -> list[str]:
    """Split content into slides on blank lines, dropping empty slides."""
    slides = (slide.strip() for slide in _BLANK_LINES.split(content))
    return [slide for slide in slides if slide]


def parse_text_file(content: str, domain: str = "") -> TextDoc:
    """Parse a text file into a TextDoc."""
    match = _FRONT_MATTER.match(content.replace("\r\n", "\n"))
    if match is None:
        raise TextParseError("Missing YAML front matter")

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        raise TextParseError(f"YAML parse error: {e}") from e

    if not isinstance(data, dict):
        raise TextParseError("Invalid YAML front matter")
    if data.get("schemaVersion") != 1:
        raise TextParseError("Invalid or missing schemaVersion")

    try:
        meta = TextMeta(
            id=str(data.get("id") or ""),
            title=str(data.get("title") or ""),
            description=data.get("description") or "",
            categories=data.get("categories") or [],
            domain=domain,
        )
    except ValidationError as e:
        raise TextParseError(f"Invalid front matter: {e}") from e

    content_raw = match.group(2).strip()
    return TextDoc(
        meta=meta,
        content_raw=content_raw,
        slides=split_by_blank_lines(content_raw),
    )


def build_text_file(meta: TextMeta, content: str) -> str:
    """Serialize a text back to front matter + body."""
    front = yaml.safe_dump(
        {
            "schemaVersion": meta.schema_version,
            "id": meta.id,
            "title": meta.title,
            "description": meta.description,
            "categories": meta.categories,
        },
        sort_keys=False,
        allow_unicode=True,
    )
    return f"---\n{front}---\n\n{content.strip()}\n"


def slugify(title: str) -> str:
    """ASCII slug for filenames: 'Pan jest moim pasterzem' -> 'pan-jest-moim-pasterzem'."""
    normalized = unicodedata.normalize("NFD", title.lower().translate(_TRANSLITERATE))
    ascii_only = "".join(c for c in normalized if not unicodedata.combining(c))
    return _NON_SLUG.sub("-", ascii_only).strip("-")


def text_slug(title: str) -> str:
    """Filename slug for a text; titles with nothing sluggable fall back to "text"."""
    return slugify(title) or "text"


def make_text_reference(doc: TextDoc) -> str:
    """Build the domain/slug__id reference scenarios use to point at a text."""
    return f"{doc.meta.domain}/{text_slug(doc.meta.title)}__{doc.meta.id}"

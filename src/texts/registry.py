"""Text registry - loads and serves text documents from markdown files.

Texts are stored as <texts_dir>/<domain>/<slug>__<id>.md. Everything is
loaded into memory on first access; writes go to disk first and then
update the in-memory map.
"""

import logging
import uuid
from pathlib import Path
from typing import Optional

from src.data_paths import TEXTS_DIR
from src.texts.parser import (
    TextParseError,
    build_text_file,
    make_text_reference,
    parse_text_file,
    text_slug,
)
from src.texts.schemas import TextDoc, TextMeta, TextSummary

logger = logging.getLogger(__name__)


class TextRegistry:
    """Registry of text documents loaded from domain folders."""

    def __init__(self, texts_dir: Optional[Path] = None):
        if texts_dir is None:
            texts_dir = TEXTS_DIR
        self.texts_dir = texts_dir
        self._texts: dict[str, TextDoc] = {}
        self._file_map: dict[str, Path] = {}  # text id -> source file path
        self._loaded = False

    def load(self) -> None:
        """Load all texts from all domain folders."""
        if self._loaded:
            return

        self.texts_dir.mkdir(parents=True, exist_ok=True)

        for domain in self.list_domains():
            for md_file in sorted((self.texts_dir / domain).glob("*.md")):
                try:
                    doc = parse_text_file(md_file.read_text(encoding="utf-8"), domain)
                    self._texts[doc.meta.id] = doc
                    self._file_map[doc.meta.id] = md_file
                    logger.debug(f"Loaded text: {doc.meta.id} ({doc.meta.title})")
                except (OSError, TextParseError) as e:
                    logger.error(f"Failed to load text from {md_file}: {e}")

        self._loaded = True
        logger.info(f"Loaded {len(self._texts)} texts")

    def find_by_id(self, text_id: str) -> Optional[TextDoc]:
        """Get text by id."""
        self.load()
        return self._texts.get(text_id)

    def find_by_reference(self, reference: str) -> Optional[TextDoc]:
        """Get text by 'domain/slug__id' reference or bare id."""
        self.load()
        if "/" in reference:
            domain, filename = reference.split("/", 1)
            if not filename.endswith(".md"):
                filename = f"{filename}.md"
            path = self.texts_dir / domain / filename
            for text_id, file_path in self._file_map.items():
                if file_path == path:
                    return self._texts[text_id]
            return None
        return self._texts.get(reference)

    def list_all(self) -> list[TextDoc]:
        """List all texts."""
        self.load()
        return list(self._texts.values())

    def list_summaries(self, domain: Optional[str] = None) -> list[TextSummary]:
        """List lightweight text summaries, optionally for one domain."""
        self.load()
        return [
            TextSummary(
                id=t.meta.id,
                title=t.meta.title,
                domain=t.meta.domain,
                categories=t.meta.categories,
                slide_count=len(t.slides),
                reference=make_text_reference(t),
            )
            for t in self._texts.values()
            if domain is None or t.meta.domain == domain
        ]

    def list_domains(self) -> list[str]:
        """List domain folders on disk."""
        if not self.texts_dir.exists():
            return []
        return sorted(p.name for p in self.texts_dir.iterdir() if p.is_dir())

    def create_domain(self, name: str) -> None:
        """Create a domain folder."""
        _validate_domain(name)
        (self.texts_dir / name).mkdir(parents=True, exist_ok=True)
        logger.info(f"Created domain: {name}")

    def create(
        self,
        domain: str,
        title: str,
        content: str,
        description: str = "",
        categories: Optional[list[str]] = None,
    ) -> TextDoc:
        """Create a new text file and register it."""
        self.load()
        _validate_domain(domain)

        meta = TextMeta(
            id=uuid.uuid4().hex.upper(),
            title=title,
            description=description,
            categories=categories or [],
            domain=domain,
        )
        path = self.texts_dir / domain / f"{text_slug(title)}__{meta.id}.md"
        return self._write(meta, content, path)

    def update(
        self,
        text_id: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
        description: Optional[str] = None,
        categories: Optional[list[str]] = None,
    ) -> Optional[TextDoc]:
        """Update an existing text. Renames the file when the title changes."""
        existing = self.find_by_id(text_id)
        if existing is None:
            return None

        meta = existing.meta.model_copy(
            update={
                k: v
                for k, v in {
                    "title": title,
                    "description": description,
                    "categories": categories,
                }.items()
                if v is not None
            }
        )
        old_path = self._file_map[text_id]
        new_path = old_path.with_name(f"{text_slug(meta.title)}__{text_id}.md")

        doc = self._write(meta, existing.content_raw if content is None else content, new_path)
        if new_path != old_path and old_path.exists():
            old_path.unlink()
            logger.info(f"Renamed text file: {old_path.name} -> {new_path.name}")
        return doc

    def delete(self, text_id: str) -> bool:
        """Delete a text file."""
        self.load()
        path = self._file_map.pop(text_id, None)
        if path is None:
            return False
        self._texts.pop(text_id, None)
        if path.exists():
            path.unlink()
        logger.info(f"Deleted text: {text_id}")
        return True

    def count(self) -> int:
        """Get total number of texts."""
        self.load()
        return len(self._texts)

    def reload(self) -> None:
        """Force reload all texts from disk."""
        self._loaded = False
        self._texts.clear()
        self._file_map.clear()
        self.load()

    def _write(self, meta: TextMeta, content: str, path: Path) -> TextDoc:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(build_text_file(meta, content), encoding="utf-8")

        doc = parse_text_file(path.read_text(encoding="utf-8"), meta.domain)
        self._texts[meta.id] = doc
        self._file_map[meta.id] = path
        logger.info(f"Saved text: {meta.title} in domain {meta.domain} ({meta.id})")
        return doc


def _validate_domain(name: str) -> None:
    if not name or "/" in name or "\\" in name or name.startswith("."):
        raise ValueError(f"Invalid domain name: {name!r}")


# Global registry instance
_registry: Optional[TextRegistry] = None


def get_text_registry() -> TextRegistry:
    """Get the global text registry instance."""
    global _registry
    if _registry is None:
        _registry = TextRegistry()
        _registry.load()
    return _registry

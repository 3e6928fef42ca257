#!/usr/bin/env python3
"""Import plain-text files (lyrics, readings) as projector texts.

Each .txt file becomes one text in the given domain. The title is taken
from the first line when it is followed by a blank line, otherwise from the
filename. Verses must be separated by blank lines; they become slides.

Usage:
    cd ~/projects/projector-v2
    python scripts/import_texts.py /path/to/lyrics songs [--category worship]
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.texts.parser import make_text_reference
from src.texts.registry import get_text_registry


def split_title(path: Path, content: str) -> tuple[str, str]:
    """Return (title, body) for a plain-text file."""
    lines = content.strip().split("\n")
    if len(lines) > 2 and lines[0].strip() and not lines[1].strip():
        return lines[0].strip(), "\n".join(lines[2:])
    return path.stem.replace("_", " ").replace("-", " ").strip(), content


def main():
    parser = argparse.ArgumentParser(description="Import plain-text files as projector texts")
    parser.add_argument("source_dir", type=Path, help="Directory with .txt files")
    parser.add_argument("domain", help="Target domain (e.g. songs)")
    parser.add_argument("--category", action="append", default=[], help="Category to tag (repeatable)")
    parser.add_argument("--dry-run", action="store_true", help="Show what would be imported")
    args = parser.parse_args()

    if not args.source_dir.is_dir():
        print(f"Not a directory: {args.source_dir}")
        sys.exit(1)

    registry = get_text_registry()
    existing_titles = {
        t.meta.title.lower() for t in registry.list_all() if t.meta.domain == args.domain
    }

    imported = 0
    skipped = 0
    for txt_file in sorted(args.source_dir.glob("*.txt")):
        title, body = split_title(txt_file, txt_file.read_text(encoding="utf-8"))
        if title.lower() in existing_titles:
            print(f"  SKIP {txt_file.name}: '{title}' already exists in {args.domain}")
            skipped += 1
            continue

        if args.dry_run:
            print(f"  WOULD IMPORT {txt_file.name} as '{title}'")
            continue

        doc = registry.create(
            domain=args.domain,
            title=title,
            content=body,
            categories=args.category,
        )
        existing_titles.add(title.lower())
        imported += 1
        print(f"  OK {txt_file.name} -> {make_text_reference(doc)} ({len(doc.slides)} slides)")

    print(f"\nImported {imported}, skipped {skipped}")


if __name__ == "__main__":
    main()

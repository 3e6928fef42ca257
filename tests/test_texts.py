"""
Tests for text parsing and the text registry
"""

import pytest

from src.texts.parser import (
    TextParseError,
    build_text_file,
    make_text_reference,
    parse_text_file,
    slugify,
    split_by_blank_lines,
    text_slug,
)
from src.texts.registry import TextRegistry
from src.texts.schemas import TextMeta

SAMPLE = """---
schemaVersion: 1
id: ABC
title: Pan jest moim Pasterzem
description: Psalm 23
categories: [psalms, worship]
---

Pan jest moim pasterzem,
niczego mi nie braknie.


Pozwala mi leżeć
na zielonych pastwiskach.
"""


class TestParseTextFile:
    """Tests for front matter + slide parsing."""

    def test_parses_meta_and_slides(self):
        doc = parse_text_file(SAMPLE, domain="psalms")
        assert doc.meta.id == "ABC"
        assert doc.meta.title == "Pan jest moim Pasterzem"
        assert doc.meta.description == "Psalm 23"
        assert doc.meta.categories == ["psalms", "worship"]
        assert doc.meta.domain == "psalms"
        assert doc.slides == [
            "Pan jest moim pasterzem,\nniczego mi nie braknie.",
            "Pozwala mi leżeć\nna zielonych pastwiskach.",
        ]

    def test_windows_line_endings(self):
        doc = parse_text_file(SAMPLE.replace("\n", "\r\n"))
        assert len(doc.slides) == 2

    def test_empty_body(self):
        doc = parse_text_file("---\nschemaVersion: 1\nid: X\ntitle: Empty\n---\n")
        assert doc.slides == []
        assert doc.meta.description == ""
        assert doc.meta.categories == []

    def test_missing_front_matter(self):
        with pytest.raises(TextParseError):
            parse_text_file("Just a verse\n\nAnd another")

    def test_wrong_schema_version(self):
        with pytest.raises(TextParseError):
            parse_text_file("---\nschemaVersion: 2\nid: X\ntitle: T\n---\nbody")

    def test_missing_title(self):
        with pytest.raises(TextParseError):
            parse_text_file("---\nschemaVersion: 1\nid: X\n---\nbody")

    def test_round_trip_through_builder(self):
        doc = parse_text_file(SAMPLE, domain="psalms")
        rebuilt = parse_text_file(build_text_file(doc.meta, doc.content_raw), domain="psalms")
        assert rebuilt == doc


class TestSlides:
    """Tests for slide splitting."""

    def test_whitespace_only_lines_separate_slides(self):
        assert split_by_blank_lines("a\n   \nb") == ["a", "b"]

    def test_empty_slides_dropped(self):
        assert split_by_blank_lines("\n\n\na\n\n\n\n") == ["a"]

    def test_single_newlines_stay_inside_slide(self):
        assert split_by_blank_lines("a\nb") == ["a\nb"]


class TestReferences:
    """Tests for slugs and text references."""

    @pytest.mark.parametrize(
        "title, slug",
        [
            ("Pan jest moim Pasterzem!", "pan-jest-moim-pasterzem"),
            ("Święty Boże", "swiety-boze"),
            ("  Barka  ", "barka"),
            ("Psalm 23 (refren)", "psalm-23-refren"),
            ("Łódź", "lodz"),
            ("Pieśń o łasce", "piesn-o-lasce"),
            ("Große Straße", "grosse-strasse"),
        ],
    )
    def test_slugify(self, title, slug):
        assert slugify(title) == slug

    def test_unsluggable_title_falls_back(self):
        assert slugify("Молитва") == ""
        assert text_slug("Молитва") == "text"
        assert text_slug("!!!") == "text"

    def test_make_text_reference(self):
        doc = parse_text_file(SAMPLE, domain="psalms")
        assert make_text_reference(doc) == "psalms/pan-jest-moim-pasterzem__ABC"


class TestTextRegistry:
    """Tests for the file-backed registry."""

    @pytest.fixture
    def registry(self, data_dir):
        return TextRegistry(texts_dir=data_dir / "texts")

    def test_loads_domains(self, registry):
        assert registry.count() == 1
        assert registry.list_domains() == ["songs"]
        doc = registry.find_by_id("T1")
        assert doc.meta.domain == "songs"
        assert doc.slides == ["one two three four", "five six", "seven"]

    def test_find_by_reference(self, registry):
        assert registry.find_by_reference("songs/barka__T1").meta.id == "T1"
        assert registry.find_by_reference("T1").meta.id == "T1"
        assert registry.find_by_reference("songs/other__T1") is None

    def test_summaries(self, registry):
        [summary] = registry.list_summaries()
        assert summary.reference == "songs/barka__T1"
        assert summary.slide_count == 3
        assert summary.categories == ["worship"]
        assert registry.list_summaries(domain="readings") == []

    def test_broken_file_is_skipped(self, data_dir):
        (data_dir / "texts" / "songs" / "broken__X.md").write_text("no front matter")
        registry = TextRegistry(texts_dir=data_dir / "texts")
        assert registry.count() == 1

    def test_create_writes_file(self, registry, data_dir):
        doc = registry.create("readings", "Święty Boże", "verse one\n\nverse two", categories=["lent"])
        path = data_dir / "texts" / "readings" / f"swiety-boze__{doc.meta.id}.md"
        assert path.exists()
        assert doc.slides == ["verse one", "verse two"]
        assert doc.meta.domain == "readings"

        fresh = TextRegistry(texts_dir=data_dir / "texts")
        assert fresh.find_by_id(doc.meta.id).meta.categories == ["lent"]

    def test_create_rejects_bad_domain(self, registry):
        with pytest.raises(ValueError):
            registry.create("../outside", "Title", "body")

    def test_update_renames_on_title_change(self, registry, data_dir):
        doc = registry.update("T1", title="Barka (wersja 2)")
        assert doc.meta.title == "Barka (wersja 2)"
        assert doc.slides == ["one two three four", "five six", "seven"]

        songs = data_dir / "texts" / "songs"
        assert not (songs / "barka__T1.md").exists()
        assert (songs / "barka-wersja-2__T1.md").exists()

    def test_update_content(self, registry):
        doc = registry.update("T1", content="only one slide")
        assert doc.slides == ["only one slide"]
        assert doc.meta.title == "Barka"

    def test_update_unknown(self, registry):
        assert registry.update("NOPE", title="x") is None

    def test_delete(self, registry, data_dir):
        assert registry.delete("T1") is True
        assert registry.find_by_id("T1") is None
        assert not (data_dir / "texts" / "songs" / "barka__T1.md").exists()
        assert registry.delete("T1") is False

    def test_create_domain(self, registry):
        registry.create_domain("readings")
        assert registry.list_domains() == ["readings", "songs"]

    @pytest.mark.parametrize("name", ["", ".hidden", "a/b"])
    def test_create_domain_rejects_invalid(self, registry, name):
        with pytest.raises(ValueError):
            registry.create_domain(name)

    def test_reload_picks_up_new_files(self, registry, data_dir):
        assert registry.count() == 1
        meta = TextMeta(id="T2", title="Nowa", domain="songs")
        (data_dir / "texts" / "songs" / "nowa__T2.md").write_text(
            build_text_file(meta, "verse"), encoding="utf-8"
        )
        assert registry.count() == 1
        registry.reload()
        assert registry.count() == 2

    def test_create_with_unsluggable_title(self, registry, data_dir):
        doc = registry.create("songs", "Молитва", "verse")
        assert (data_dir / "texts" / "songs" / f"text__{doc.meta.id}.md").exists()

        reference = make_text_reference(doc)
        assert reference == f"songs/text__{doc.meta.id}"
        assert registry.find_by_reference(reference).meta.title == "Молитва"

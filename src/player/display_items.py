"""Building display items from texts and scenario steps."""

from typing import Callable, Optional

from src.player.schemas import (
    BlankDisplayItem,
    DisplayItem,
    HeadingDisplayItem,
    MediaDisplayItem,
    TextDisplayItem,
)
from src.scenarios.schemas import (
    AudioStep,
    BlankStep,
    HeadingStep,
    ImageStep,
    ScenarioStep,
    TextStep,
    VideoStep,
)
from src.settings.schemas import DisplayConstraints
from src.texts.formatter import format_text_to_pages
from src.texts.schemas import TextDoc


def extract_text_id(text_ref: str) -> str:
    """Text id from a reference.

    References look like "domain/slug__id" or just "id"; only the part after
    the last "__" identifies the text.
    """
    return text_ref.split("__")[-1]


def clamp(value: int, lowest: int, highest: int) -> int:
    return max(lowest, min(value, highest))


def slide_pages(
    doc: Optional[TextDoc],
    slide_index: int,
    constraints: DisplayConstraints,
) -> list[str]:
    """Pages of one slide; a missing text or slide gives a single empty page."""
    if doc is None or not 0 <= slide_index < len(doc.slides):
        return [""]
    return format_text_to_pages(doc.slides[slide_index], constraints)


def build_text_item(
    text_ref: str,
    doc: Optional[TextDoc],
    constraints: DisplayConstraints,
    slide_index: int = 0,
    page_index: int = 0,
) -> TextDisplayItem:
    """Text item for a slide and page, with both indices clamped into range."""
    total_slides = len(doc.slides) if doc is not None else 0
    slide_index = clamp(slide_index, 0, max(total_slides - 1, 0))

    pages = slide_pages(doc, slide_index, constraints)
    page_index = clamp(page_index, 0, len(pages) - 1)

    return TextDisplayItem(
        text_ref=text_ref,
        slide_index=slide_index,
        total_slides=total_slides,
        page_index=page_index,
        total_pages=len(pages),
        slide_content=pages[page_index],
    )


def item_from_step(
    step: ScenarioStep,
    doc_for_ref: Callable[[str], Optional[TextDoc]],
    constraints: DisplayConstraints,
) -> DisplayItem:
    """Resolve a scenario step into a display item.

    doc_for_ref maps a text id to its TextDoc (or None). A dangling text
    reference yields an empty text item instead of an error, so one bad
    step does not break the rest of the scenario.
    """
    if isinstance(step, TextStep):
        doc = doc_for_ref(extract_text_id(step.text))
        return build_text_item(step.text, doc, constraints)
    if isinstance(step, ImageStep):
        return MediaDisplayItem(type="image", path=step.image)
    if isinstance(step, VideoStep):
        return MediaDisplayItem(type="video", path=step.video)
    if isinstance(step, AudioStep):
        return MediaDisplayItem(type="audio", path=step.audio)
    if isinstance(step, HeadingStep):
        return HeadingDisplayItem(content=step.heading)
    if isinstance(step, BlankStep):
        return BlankDisplayItem()
    return BlankDisplayItem()

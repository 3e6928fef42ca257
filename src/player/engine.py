"""Player engine - the only way the screen state changes.

Every mutating operation resolves what it needs first (texts, scenarios,
pages) and only then replaces the whole state in the store; the store's
commit hook broadcasts the change. Operations that make no sense in the
current mode return the state unchanged and do not notify.

Operations are synchronous. Called from async routes they run to
completion without yielding to the event loop, so two requests never
interleave inside one operation; concurrent requests are last-write-wins.
"""

import logging
from typing import Optional, Protocol

from src.player.display_items import (
    build_text_item,
    clamp,
    extract_text_id,
    item_from_step,
    slide_pages,
)
from src.player.schemas import (
    Direction,
    DisplayItem,
    EmptyScreenState,
    MediaDisplayItem,
    MediaType,
    QRCodeDisplayItem,
    ScenarioScreenState,
    ScreenState,
    SingleScreenState,
    TextDisplayItem,
    current_text_item,
    is_visible,
)
from src.player.state_store import ScreenStateStore
from src.scenarios.schemas import ScenarioDoc
from src.settings.schemas import DisplayConstraints
from src.texts.schemas import TextDoc

logger = logging.getLogger(__name__)


# --- Collaborators ---


class TextRepository(Protocol):
    def find_by_id(self, text_id: str) -> Optional[TextDoc]: ...


class ScenarioRepository(Protocol):
    def find_by_id(self, scenario_id: str) -> Optional[ScenarioDoc]: ...


class SettingsProvider(Protocol):
    def current(self) -> DisplayConstraints: ...


class ChangeNotifier(Protocol):
    def notify_screen_changed(self) -> None: ...


# --- Errors ---


class PlayerError(Exception):
    """Base class for player errors."""


class NotFoundError(PlayerError):
    """A text or scenario reference resolved to nothing."""


class PlayerEngine:
    """Presentation state engine."""

    def __init__(
        self,
        texts: TextRepository,
        scenarios: ScenarioRepository,
        settings: SettingsProvider,
        notifier: Optional[ChangeNotifier] = None,
        store: Optional[ScreenStateStore] = None,
    ):
        self.texts = texts
        self.scenarios = scenarios
        self.settings = settings
        self.store = store or ScreenStateStore()
        if notifier is not None:
            self.store.add_commit_hook(lambda _state: notifier.notify_screen_changed())

    # --- Direct state control ---

    def get_state(self) -> ScreenState:
        """Current screen state (a copy)."""
        return self.store.get()

    def set_state(self, state: ScreenState) -> ScreenState:
        """Install a state verbatim."""
        logger.info(f"Screen state set directly (mode={state.mode})")
        return self.store.set(state)

    def clear(self) -> ScreenState:
        """Show nothing."""
        logger.info("Screen cleared")
        return self.store.set(EmptyScreenState())

    # --- Visibility ---

    def toggle_visibility(self) -> ScreenState:
        state = self.store.get()
        if isinstance(state, EmptyScreenState):
            return state
        return self.set_visibility(not is_visible(state))

    def set_visibility(self, visible: bool) -> ScreenState:
        state = self.store.get()
        if isinstance(state, EmptyScreenState):
            return state
        logger.info(f"Screen visibility -> {visible}")
        return self.store.set(state.model_copy(update={"visible": visible}))

    # --- Single items ---

    def set_text(self, text_ref: str, slide_index: int = 0) -> ScreenState:
        """Show one slide of a text, hidden until the operator reveals it.

        Raises:
            NotFoundError: If the reference does not resolve to a text
        """
        text_id = extract_text_id(text_ref)
        doc = self.texts.find_by_id(text_id)
        if doc is None:
            raise NotFoundError(f"Text not found: {text_id}")

        item = build_text_item(text_ref, doc, self.settings.current(), slide_index=slide_index)
        logger.info(f"Showing text {text_id} slide {item.slide_index}/{item.total_slides}")
        return self.store.set(SingleScreenState(visible=False, item=item))

    def set_media(self, media_type: MediaType, path: str) -> ScreenState:
        """Show a media file. Existence is checked by whoever serves the file."""
        logger.info(f"Showing {media_type}: {path}")
        return self.store.set(
            SingleScreenState(visible=False, item=MediaDisplayItem(type=media_type, path=path))
        )

    def set_qrcode(self, value: str, label: Optional[str] = None) -> ScreenState:
        logger.info("Showing QR code")
        return self.store.set(
            SingleScreenState(visible=False, item=QRCodeDisplayItem(value=value, label=label))
        )

    # --- Scenarios ---

    def set_scenario(self, scenario_id: str, step_index: int = 0) -> ScreenState:
        """Start a scenario at a step, hidden until the operator reveals it.

        An empty scenario clears the screen.

        Raises:
            NotFoundError: If the scenario does not exist
        """
        scenario = self.scenarios.find_by_id(scenario_id)
        if scenario is None:
            raise NotFoundError(f"Scenario not found: {scenario_id}")

        if not scenario.steps:
            logger.info(f"Scenario {scenario_id} has no steps, clearing screen")
            return self.store.set(EmptyScreenState())

        step_index = clamp(step_index, 0, len(scenario.steps) - 1)
        current_item = self._resolve_step(scenario, step_index)

        logger.info(f"Starting scenario {scenario_id} at step {step_index}/{len(scenario.steps)}")
        return self.store.set(
            ScenarioScreenState(
                visible=False,
                scenario_id=scenario_id,
                scenario_title=scenario.meta.title,
                step_index=step_index,
                total_steps=len(scenario.steps),
                current_item=current_item,
            )
        )

    def navigate_step(self, direction: Direction) -> ScreenState:
        """Move to the previous/next scenario step (saturating at both ends)."""
        state = self.store.get()
        if not isinstance(state, ScenarioScreenState):
            return state

        scenario = self.scenarios.find_by_id(state.scenario_id)
        if scenario is None or not scenario.steps:
            logger.warning(f"Scenario {state.scenario_id} is gone or empty, step navigation ignored")
            return state

        delta = 1 if direction == "next" else -1
        step_index = clamp(state.step_index + delta, 0, len(scenario.steps) - 1)

        return self.store.set(
            state.model_copy(
                update={
                    "step_index": step_index,
                    "total_steps": len(scenario.steps),
                    "current_item": self._resolve_step(scenario, step_index),
                }
            )
        )

    # --- Slides and pages ---

    def navigate_slide(self, direction: Direction) -> ScreenState:
        """Move one page through the current text, crossing slide boundaries.

        Going back from the first page of a slide lands on the last page of
        the previous slide. At either end of the text this is a no-op.
        """
        state = self.store.get()
        item = current_text_item(state)
        if item is None:
            return state

        doc = self.texts.find_by_id(extract_text_id(item.text_ref))
        if doc is None:
            logger.warning(f"Text {item.text_ref} is gone, slide navigation ignored")
            return state

        constraints = self.settings.current()
        total_slides = len(doc.slides)

        # The text may have been edited since it was put on screen
        slide_index = clamp(item.slide_index, 0, max(total_slides - 1, 0))
        total_pages = len(slide_pages(doc, slide_index, constraints))
        page_index = clamp(item.page_index, 0, total_pages - 1)

        if direction == "next":
            if page_index < total_pages - 1:
                page_index += 1
            elif slide_index < total_slides - 1:
                slide_index += 1
                page_index = 0
            else:
                return state
        else:
            if page_index > 0:
                page_index -= 1
            elif slide_index > 0:
                slide_index -= 1
                page_index = len(slide_pages(doc, slide_index, constraints)) - 1
            else:
                return state

        new_item = build_text_item(
            item.text_ref,
            doc,
            constraints,
            slide_index=slide_index,
            page_index=page_index,
        )
        return self.store.set(_replace_item(state, new_item))

    # --- Helpers ---

    def _resolve_step(self, scenario: ScenarioDoc, step_index: int) -> DisplayItem:
        return item_from_step(
            scenario.steps[step_index],
            self.texts.find_by_id,
            self.settings.current(),
        )


def _replace_item(state: ScreenState, item: TextDisplayItem) -> ScreenState:
    """Swap the on-screen item, keeping every other field."""
    if isinstance(state, SingleScreenState):
        return state.model_copy(update={"item": item})
    if isinstance(state, ScenarioScreenState):
        return state.model_copy(update={"current_item": item})
    return state


# Global engine instance
_engine: Optional[PlayerEngine] = None


def get_player_engine() -> PlayerEngine:
    """Get the global player engine, wired to the file-backed registries."""
    global _engine
    if _engine is None:
        from src.notifications.hub import get_notification_hub
        from src.scenarios.registry import get_scenario_registry
        from src.settings.store import get_settings_store
        from src.texts.registry import get_text_registry

        _engine = PlayerEngine(
            texts=get_text_registry(),
            scenarios=get_scenario_registry(),
            settings=get_settings_store(),
            notifier=get_notification_hub(),
        )
    return _engine

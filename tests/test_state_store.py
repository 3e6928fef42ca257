"""
Tests for the screen state store
"""

from src.player.schemas import (
    EmptyScreenState,
    HeadingDisplayItem,
    SingleScreenState,
    is_visible,
)
from src.player.state_store import ScreenStateStore


def heading_state(text: str = "Welcome") -> SingleScreenState:
    return SingleScreenState(visible=False, item=HeadingDisplayItem(content=text))


class TestScreenStateStore:
    """Tests for copy-on-read and commit hooks."""

    def test_defaults_to_empty(self):
        assert ScreenStateStore().get() == EmptyScreenState()

    def test_initial_state_is_copied(self):
        initial = heading_state()
        store = ScreenStateStore(initial)
        initial.item.content = "changed"
        assert store.get().item.content == "Welcome"

    def test_set_stores_a_copy(self):
        store = ScreenStateStore()
        state = heading_state()
        store.set(state)
        state.visible = True
        assert store.get().visible is False

    def test_readers_cannot_mutate(self):
        store = ScreenStateStore(heading_state())
        snapshot = store.get()
        snapshot.item.content = "changed"
        assert store.get().item.content == "Welcome"

    def test_hooks_receive_new_state(self):
        store = ScreenStateStore()
        seen = []
        store.add_commit_hook(seen.append)
        store.set(heading_state("One"))
        store.set(EmptyScreenState())
        assert [s.mode for s in seen] == ["single", "empty"]
        assert seen[0].item.content == "One"

    def test_failing_hook_does_not_block_others(self):
        store = ScreenStateStore()
        calls = []

        def broken(_state):
            raise RuntimeError("listener down")

        store.add_commit_hook(broken)
        store.add_commit_hook(calls.append)

        result = store.set(heading_state())
        assert result.mode == "single"
        assert len(calls) == 1
        assert store.get() == result


class TestIsVisible:
    """Tests for the visibility helper."""

    def test_empty_is_never_visible(self):
        assert is_visible(EmptyScreenState()) is False

    def test_missing_visible_means_visible(self):
        state = SingleScreenState.model_validate(
            {"mode": "single", "item": {"type": "blank"}}
        )
        assert is_visible(state) is True

    def test_hidden(self):
        assert is_visible(heading_state()) is False

"""Screen state holder.

Owns the single ScreenState of a player. State is only ever replaced as a
whole; readers get deep copies, so nothing handed out aliases the stored
value. Commit hooks run after every replacement (the player uses one to
broadcast screen changes).
"""

import logging
from typing import Callable, Optional

from src.player.schemas import EmptyScreenState, ScreenState

logger = logging.getLogger(__name__)

CommitHook = Callable[[ScreenState], None]


class ScreenStateStore:
    """Copy-on-read, replace-on-write holder for one ScreenState."""

    def __init__(self, initial: Optional[ScreenState] = None):
        self._state: ScreenState = (
            initial.model_copy(deep=True) if initial is not None else EmptyScreenState()
        )
        self._hooks: list[CommitHook] = []

    def add_commit_hook(self, hook: CommitHook) -> None:
        self._hooks.append(hook)

    def get(self) -> ScreenState:
        """Snapshot of the current state."""
        return self._state.model_copy(deep=True)

    def set(self, state: ScreenState) -> ScreenState:
        """Replace the state, run commit hooks and return a snapshot."""
        self._state = state.model_copy(deep=True)
        for hook in self._hooks:
            # A failing listener must not undo a committed state
            try:
                hook(self.get())
            except Exception as e:
                logger.error(f"Screen state commit hook failed: {e}", exc_info=True)
        return self.get()

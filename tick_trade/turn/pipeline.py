"""UpdatePipeline - ordered state -> state systems run once per turn."""
from __future__ import annotations

from typing import Callable

from tick_trade.types import GameState

UpdateSystem = Callable[[GameState], GameState]


class UpdatePipeline:
    """Systems run in registration order, each fed the previous one's output."""

    def __init__(self) -> None:
        self._systems: list[UpdateSystem] = []

    def register(self, system: UpdateSystem) -> None:
        self._systems.append(system)

    @property
    def system_count(self) -> int:
        return len(self._systems)

    def run(self, state: GameState) -> GameState:
        """Fold every system over *state*. No systems returns *state* itself."""
        for system in self._systems:
            state = system(state)
        return state

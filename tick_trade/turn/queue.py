"""PlayerActionQueue - FIFO of player actions, drained one per turn."""
from __future__ import annotations

from collections import deque
from typing import Optional

from tick_trade.turn.types import PlayerAction


class PlayerActionQueue:
    """Holds actions submitted between turns.

    The turn controller takes exactly one action per turn; an empty queue
    means the player passes.
    """

    def __init__(self) -> None:
        self._pending: deque[PlayerAction] = deque()

    def enqueue(self, action: PlayerAction) -> None:
        self._pending.append(action)

    def dequeue(self) -> Optional[PlayerAction]:
        """Remove and return the oldest action, or None when empty."""
        if not self._pending:
            return None
        return self._pending.popleft()

    def clear(self) -> None:
        self._pending.clear()

    def __len__(self) -> int:
        return len(self._pending)

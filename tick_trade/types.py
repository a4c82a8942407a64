"""Core value types for the trading economy: goods, towns, and game state."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

GoodId = str


class MilitaryTier(Enum):
    """Revealed military band, weakest first."""

    MILITIA = "militia"
    GARRISON = "garrison"
    FORMIDABLE = "formidable"
    HOST = "host"


class ProsperityTier(Enum):
    """Revealed prosperity band, poorest first."""

    STRUGGLING = "struggling"
    MODEST = "modest"
    PROSPEROUS = "prosperous"
    OPULENT = "opulent"


@dataclass(frozen=True)
class GoodEffects:
    prosperity_delta: int = 0
    military_delta: int = 0


@dataclass(frozen=True)
class GoodConfig:
    """Immutable definition of a tradable good.

    Attributes:
        id: Unique good identifier (e.g. ``"fish"``).
        name: Display name.
        effects: Stat deltas applied to towns when the good changes hands.
    """

    id: GoodId
    name: str
    effects: GoodEffects = field(default_factory=GoodEffects)


@dataclass(frozen=True)
class Revealed:
    """Tiers currently shown for a town. ``last_updated_turn == -1`` means never revealed."""

    military_tier: MilitaryTier
    prosperity_tier: ProsperityTier
    last_updated_turn: int = -1


@dataclass(frozen=True)
class Town:
    """A trading town. Never mutated; see ``tick_trade.state`` for updates.

    ``resources`` and ``prices`` hold an entry for every configured good.
    Raw stats may go negative between passes; the stats system clamps them.
    """

    id: str
    name: str
    resources: dict[GoodId, int]
    prices: dict[GoodId, int]
    military_raw: int
    prosperity_raw: int
    treasury: int
    revealed: Revealed
    ai_profile_id: Optional[str] = None


@dataclass(frozen=True)
class GameState:
    """Complete game state. Every turn phase returns a new instance."""

    turn: int
    version: int
    rng_seed: str
    towns: tuple[Town, ...]
    goods: dict[GoodId, GoodConfig]

    def __post_init__(self) -> None:
        if not isinstance(self.towns, tuple):
            object.__setattr__(self, "towns", tuple(self.towns))


class TownNotFoundError(KeyError):
    """Raised when a town id does not resolve against the current state."""

    def __init__(self, town_id: str, message: str | None = None) -> None:
        self.town_id = town_id
        super().__init__(message or f"Town with ID '{town_id}' not found")


class UnknownGoodError(KeyError):
    """Raised when a good id is not present in a town's resource/price maps."""

    def __init__(self, good_id: str, message: str | None = None) -> None:
        self.good_id = good_id
        super().__init__(message or f"Unknown good ID: '{good_id}'")

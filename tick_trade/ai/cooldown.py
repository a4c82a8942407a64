"""Per (town, good) trade cooldowns.

A cooldown blocks the same town from trading the same good again until its
expiry turn has passed, so one turn's trade cannot be mirrored the next.
The state is a plain ``{"town:good": expiry_turn}`` dict owned by the caller.
"""
from __future__ import annotations

CooldownState = dict[str, int]


def cooldown_key(town_id: str, good_id: str) -> str:
    return f"{town_id}:{good_id}"


def should_skip_cooldown(cd: CooldownState, key: str, current_turn: int) -> bool:
    expiry = cd.get(key)
    return expiry is not None and current_turn <= expiry


def mark_cooldown(cd: CooldownState, key: str, current_turn: int, interval: int = 1) -> None:
    cd[key] = current_turn + interval


def clear_expired_cooldowns(cd: CooldownState, current_turn: int) -> None:
    """Drop entries whose expiry is at or before *current_turn*."""
    for key in [k for k, expiry in cd.items() if expiry <= current_turn]:
        del cd[key]

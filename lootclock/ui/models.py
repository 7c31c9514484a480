"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from lootclock.core.rewards import Reward, normalize_color


@dataclass
class InventoryTile:
    """UI state for one inventory square: the reward and whether it is selected."""

    reward: Reward
    selected: bool = False


def build_inventory_tiles(rewards: Iterable[Reward], selected_color: Optional[str]) -> list[InventoryTile]:
    selected = normalize_color(selected_color) if selected_color else None
    return [
        InventoryTile(reward=reward, selected=selected is not None and normalize_color(reward.color) == selected)
        for reward in rewards
    ]

from __future__ import annotations

import logging
import random
import re
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

import yaml

from lootclock.core.observable import Observable

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "rewards.yaml"

_HEX_COLOR = re.compile(r"^#[0-9A-F]{6}$")


def normalize_color(value: str) -> str:
    """Return ``value`` as upper-case ``#RRGGBB`` text (no validation)."""
    return str(value).strip().upper()


@dataclass(frozen=True)
class Reward:
    color: str
    name: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex, compare=False)


class RewardCatalog:
    """Fixed, ordered pool of colour rewards loaded from YAML."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = Path(path) if path is not None else DEFAULT_CATALOG_PATH
        self._rewards = self._load_rewards()

    def all(self) -> List[Reward]:
        return list(self._rewards)

    def find(self, color: str) -> Optional[Reward]:
        key = normalize_color(color)
        for reward in self._rewards:
            if reward.color == key:
                return reward
        return None

    def __len__(self) -> int:
        return len(self._rewards)

    def _load_rewards(self) -> List[Reward]:
        if not self._path.exists():
            raise FileNotFoundError(f"Reward catalog not found: {self._path}")

        raw = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict):
            raise ValueError(f"{self._path.name}: expected YAML with a 'rewards' list")
        entries = raw.get("rewards")
        if not isinstance(entries, list) or not entries:
            raise ValueError(f"{self._path.name}: 'rewards' must be a non-empty list")

        rewards: List[Reward] = []
        seen: set[str] = set()
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise ValueError(f"{self._path.name}: reward #{index} is not a mapping")
            name = entry.get("name")
            if not name or not isinstance(name, str):
                raise ValueError(f"{self._path.name}: reward #{index} has a missing or invalid 'name'")
            color = normalize_color(entry.get("color", ""))
            if not _HEX_COLOR.match(color):
                raise ValueError(f"{self._path.name}: reward '{name}' has invalid color {entry.get('color')!r}")
            if color in seen:
                raise ValueError(f"{self._path.name}: duplicate color {color}")
            seen.add(color)
            rewards.append(Reward(color=color, name=name.strip()))

        logger.debug("Loaded %d rewards from %s", len(rewards), self._path)
        return rewards


class RewardDispenser:
    """The loot box: hands out a random catalog reward the player does not own yet."""

    def __init__(self, catalog: RewardCatalog, rng: Optional[random.Random] = None) -> None:
        self._catalog = catalog
        self._rng = rng or random.Random()

    def candidates(self, owned: Sequence[Reward]) -> List[Reward]:
        owned_colors = {normalize_color(r.color) for r in owned}
        return [r for r in self._catalog.all() if r.color not in owned_colors]

    def draw_reward(self, owned: Sequence[Reward]) -> Optional[Reward]:
        """Pick uniformly among unowned rewards; ``None`` once everything is owned.

        Does not touch ``owned``; inserting the result is up to the caller.
        """
        candidates = self.candidates(owned)
        if not candidates:
            logger.info("All %d rewards already owned, nothing to draw", len(self._catalog))
            return None
        reward = self._rng.choice(candidates)
        logger.info("Drew reward %s (%s) from %d candidates", reward.name, reward.color, len(candidates))
        return reward


class Inventory(Observable):
    """Acquired rewards, most recently acquired first."""

    def __init__(self, items: Optional[Sequence[Reward]] = None) -> None:
        super().__init__()
        self._items: List[Reward] = list(items or [])

    def items(self) -> List[Reward]:
        return list(self._items)

    def find(self, color: str) -> Optional[Reward]:
        """First owned entry with ``color``, or ``None``."""
        key = normalize_color(color)
        return next((r for r in self._items if normalize_color(r.color) == key), None)

    def add(self, reward: Reward) -> None:
        self._items.insert(0, reward)
        self._notify()

    def promote(self, color: str) -> None:
        """Move ``color`` to the front, adding a nameless entry if it is not owned."""
        key = normalize_color(color)
        existing = self.find(key)
        self._items = [r for r in self._items if normalize_color(r.color) != key]
        self._items.insert(0, existing if existing is not None else Reward(color=key, name=""))
        self._notify()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Reward]:
        return iter(list(self._items))

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_TICK_MS = 1000
DEFAULT_USERNAME = "@TheWizardProfessor"


@dataclass(frozen=True)
class AppConfig:
    """Runtime settings taken from ``LOOTCLOCK_*`` environment variables."""

    tick_interval_ms: int = DEFAULT_TICK_MS
    username: str = DEFAULT_USERNAME
    rewards_path: Optional[Path] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        env = os.environ if environ is None else environ

        tick_ms = DEFAULT_TICK_MS
        raw_tick = env.get("LOOTCLOCK_TICK_MS", "").strip()
        if raw_tick:
            try:
                tick_ms = int(raw_tick)
            except ValueError:
                logger.warning("Invalid LOOTCLOCK_TICK_MS %r, using %d", raw_tick, DEFAULT_TICK_MS)
                tick_ms = DEFAULT_TICK_MS
            if tick_ms <= 0:
                logger.warning("LOOTCLOCK_TICK_MS must be positive, using %d", DEFAULT_TICK_MS)
                tick_ms = DEFAULT_TICK_MS

        username = env.get("LOOTCLOCK_USERNAME", "").strip() or DEFAULT_USERNAME

        raw_rewards = env.get("LOOTCLOCK_REWARDS", "").strip()
        rewards_path = Path(raw_rewards).expanduser() if raw_rewards else None

        return cls(tick_interval_ms=tick_ms, username=username, rewards_path=rewards_path)

from __future__ import annotations

import logging
import math
from typing import Optional

from lootclock.core.observable import Observable

logger = logging.getLogger(__name__)

XP_PER_LEVEL = 20


def required_experience(level: int) -> float:
    """Experience needed to leave ``level`` (linear, no cap)."""
    return float(level * XP_PER_LEVEL)


class ProgressTracker(Observable):
    """Selected reward colour, experience and level for the current app run.

    Nothing is persisted; a new tracker starts at level 1 with no experience.
    """

    def __init__(self) -> None:
        super().__init__()
        self._experience: float = 0.0
        self._level: int = 1
        self._selected_color: Optional[str] = None

    @property
    def experience(self) -> float:
        return self._experience

    @property
    def level(self) -> int:
        return self._level

    @property
    def selected_color(self) -> Optional[str]:
        return self._selected_color

    def add_experience(self, amount: float) -> None:
        try:
            value = float(amount)
        except (TypeError, ValueError):
            logger.warning("Ignoring non-numeric experience %r", amount)
            value = 0.0
        if not math.isfinite(value) or value < 0:
            logger.warning("Ignoring negative or non-finite experience %r", amount)
            value = 0.0
        self._experience += value
        self.check_level_up()
        self._notify()

    def check_level_up(self) -> bool:
        """Raise the level by one if the threshold is met.

        Only one level per call, even if the experience covers several
        thresholds. Experience is not reset on level-up.
        """
        if self._experience >= required_experience(self._level):
            self._level += 1
            logger.info("Level up: now level %d (%.2f xp)", self._level, self._experience)
            self._notify()
            return True
        return False

    def select_reward(self, color: Optional[str]) -> None:
        self._selected_color = color
        self._notify()

    def level_fraction(self) -> float:
        """Progress toward the next level in [0, 1], for the experience bar."""
        required = required_experience(self._level)
        if required <= 0:
            return 0.0
        return max(0.0, min(1.0, self._experience / required))

from __future__ import annotations

import logging
import random
from typing import Optional

from lootclock.core.progress import ProgressTracker
from lootclock.core.rewards import Inventory, Reward, RewardCatalog, RewardDispenser
from lootclock.core.timer import IntervalTimer, Ticker, experience_reward

logger = logging.getLogger(__name__)


class AppSession:
    """State shared by every tab for one run of the app.

    Created once at start-up and passed to the views that need it; nothing
    here outlives the process.
    """

    def __init__(self, catalog: RewardCatalog, rng: Optional[random.Random] = None) -> None:
        self.catalog = catalog
        self.dispenser = RewardDispenser(catalog, rng=rng)
        self.inventory = Inventory()
        self.progress = ProgressTracker()

    def open_loot_box(self) -> Optional[Reward]:
        """Draw an unowned reward and put it at the front of the inventory."""
        reward = self.dispenser.draw_reward(self.inventory.items())
        if reward is not None:
            self.inventory.add(reward)
        return reward

    def select_reward(self, color: Optional[str]) -> None:
        self.progress.select_reward(color)

    def active_reward(self) -> Optional[Reward]:
        """The selected reward, preferring the owned entry over the catalog one."""
        color = self.progress.selected_color
        if color is None:
            return None
        return self.inventory.find(color) or self.catalog.find(color)

    def promote_selected(self) -> None:
        """Mark the selected reward as active by moving it to the inventory front."""
        color = self.progress.selected_color
        if color is not None:
            self.inventory.promote(color)

    def create_timer(self, ticker: Ticker) -> IntervalTimer:
        """Build a timer that pays out experience when it finishes."""
        timer = IntervalTimer(ticker)
        timer.subscribe_finished(lambda: self.award_timer(timer))
        return timer

    def award_timer(self, timer: IntervalTimer) -> float:
        gained = experience_reward(timer.durations())
        self.progress.add_experience(gained)
        logger.info("Timer finished: +%.2f xp (level %d)", gained, self.progress.level)
        return gained

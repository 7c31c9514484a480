from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Mapping, Optional, Protocol, Union

from lootclock.core.observable import Listener, Observable

logger = logging.getLogger(__name__)


class Phase(Enum):
    INITIAL = "initial"
    BREAK = "break"
    FINAL = "final"
    FINISHED = "finished"


TIMED_PHASES = (Phase.INITIAL, Phase.BREAK, Phase.FINAL)

_NEXT_PHASE = {
    Phase.INITIAL: Phase.BREAK,
    Phase.BREAK: Phase.FINAL,
    Phase.FINAL: Phase.FINISHED,
}

# experience per configured second
EXPERIENCE_WEIGHTS = {
    Phase.INITIAL: 0.15,
    Phase.BREAK: 0.1,
    Phase.FINAL: 0.15,
}


@dataclass(frozen=True)
class PhaseDuration:
    minutes: int = 0
    seconds: int = 0

    @property
    def total_seconds(self) -> int:
        return self.minutes * 60 + self.seconds


class TickHandle(Protocol):
    def cancel(self) -> None: ...


class Ticker(Protocol):
    """Source of the repeating one-second callback."""

    def schedule(self, callback: Callable[[], None]) -> TickHandle: ...


def coerce_field(value: Union[int, str, None]) -> int:
    """Turn user input into a non-negative int; anything unusable becomes 0."""
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        number = value
    else:
        text = str(value).strip()
        if not text:
            return 0
        try:
            number = int(text)
        except ValueError:
            logger.warning("Non-numeric duration input %r treated as 0", value)
            return 0
    return max(0, number)


def experience_reward(durations: Mapping[Phase, PhaseDuration]) -> float:
    """Experience earned by finishing a timer with the given configuration."""
    return sum(
        durations.get(phase, PhaseDuration()).total_seconds * weight
        for phase, weight in EXPERIENCE_WEIGHTS.items()
    )


class IntervalTimer(Observable):
    """Three-phase countdown: INITIAL, then BREAK, then FINAL, then FINISHED.

    ``tick()`` is driven by a handle obtained from ``ticker.schedule``. The
    handle is cancelled on stop, reset, phase change and ``dispose()``, so no
    tick runs once the owner is gone.

    ``stop()`` is a pause in name only: the next ``start()`` counts the
    phase's configured duration from the top again.
    """

    def __init__(self, ticker: Ticker) -> None:
        super().__init__()
        self._ticker = ticker
        self._handle: Optional[TickHandle] = None
        self._finished_listeners: list[Listener] = []
        self._durations: Dict[Phase, PhaseDuration] = {}
        self._phase = Phase.INITIAL
        self._remaining = 0
        self._running = False
        self._finished = False
        self._clear_durations()

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def remaining_seconds(self) -> int:
        return self._remaining

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def timer_finished(self) -> bool:
        return self._finished

    def durations(self) -> Dict[Phase, PhaseDuration]:
        return dict(self._durations)

    def duration(self, phase: Phase) -> PhaseDuration:
        return self._durations.get(phase, PhaseDuration())

    def subscribe_finished(self, listener: Listener) -> None:
        self._finished_listeners.append(listener)

    def configure(self, phase: Phase, minutes: Union[int, str, None], seconds: Union[int, str, None]) -> None:
        if phase not in TIMED_PHASES:
            logger.debug("Ignoring duration for %s", phase.value)
            return
        self._durations[phase] = PhaseDuration(minutes=coerce_field(minutes), seconds=coerce_field(seconds))
        self._notify()

    def start(self) -> None:
        if self._running:
            return
        total = self.duration(self._phase).total_seconds
        if total <= 0:
            logger.debug("Not starting %s phase: no duration configured", self._phase.value)
            return
        self._remaining = total
        self._running = True
        self._handle = self._ticker.schedule(self.tick)
        logger.info("Started %s phase (%d s)", self._phase.value, total)
        self._notify()

    def tick(self) -> None:
        if not self._running:
            return
        if self._remaining > 0:
            self._remaining -= 1
            logger.debug("%s phase: %d s left", self._phase.value, self._remaining)
        if self._remaining <= 0:
            self._cancel_tick()
            self._advance()
        self._notify()

    def stop(self) -> None:
        self._cancel_tick()
        self._running = False
        self._notify()

    def reset(self) -> None:
        self._cancel_tick()
        self._clear_durations()
        self._phase = Phase.INITIAL
        self._remaining = 0
        self._running = False
        self._finished = False
        logger.info("Timer reset")
        self._notify()

    def dispose(self) -> None:
        """Release the tick source; call when the owning view goes away."""
        self._cancel_tick()
        self._running = False

    def __enter__(self) -> "IntervalTimer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    def _advance(self) -> None:
        self._running = False
        next_phase = _NEXT_PHASE.get(self._phase)
        if next_phase is None:
            return
        logger.info("Phase %s -> %s", self._phase.value, next_phase.value)
        self._phase = next_phase
        if next_phase is Phase.FINISHED:
            self._remaining = 0
            self._finished = True
            for listener in list(self._finished_listeners):
                listener()
            return
        self.start()

    def _cancel_tick(self) -> None:
        handle, self._handle = self._handle, None
        if handle is not None:
            handle.cancel()

    def _clear_durations(self) -> None:
        self._durations = {phase: PhaseDuration() for phase in TIMED_PHASES}

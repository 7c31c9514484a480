"""Shared fixtures: a hand-cranked tick source for timer tests."""

from __future__ import annotations

from typing import Callable, List, Optional

import pytest


class ManualHandle:
    def __init__(self) -> None:
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualTicker:
    """Records scheduled callbacks; ``fire()`` runs the live one once."""

    def __init__(self) -> None:
        self.handles: List[ManualHandle] = []
        self._callback: Optional[Callable[[], None]] = None
        self._handle: Optional[ManualHandle] = None

    def schedule(self, callback: Callable[[], None]) -> ManualHandle:
        self._callback = callback
        self._handle = ManualHandle()
        self.handles.append(self._handle)
        return self._handle

    @property
    def active(self) -> bool:
        return self._handle is not None and not self._handle.cancelled

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            if not self.active or self._callback is None:
                return
            self._callback()


@pytest.fixture()
def ticker() -> ManualTicker:
    return ManualTicker()

from __future__ import annotations

from typing import Callable, List

Listener = Callable[[], None]


class Observable:
    """Minimal change notification for state objects read by the UI."""

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns a function that unregisters it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        # copy: listeners may unsubscribe while being called
        for listener in list(self._listeners):
            listener()

"""QTimer-backed tick source for the interval timer."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer


class QtTickHandle:
    """Owns one running QTimer; ``cancel()`` stops it and is safe to repeat."""

    def __init__(self, timer: QTimer) -> None:
        self._timer: Optional[QTimer] = timer

    def cancel(self) -> None:
        timer, self._timer = self._timer, None
        if timer is None:
            return
        timer.stop()
        timer.deleteLater()


class QtTicker:
    def __init__(self, parent: Optional[QObject] = None, interval_ms: int = 1000) -> None:
        self._parent = parent
        self._interval_ms = interval_ms

    def schedule(self, callback: Callable[[], None]) -> QtTickHandle:
        timer = QTimer(self._parent)
        timer.setInterval(self._interval_ms)
        timer.timeout.connect(callback)
        timer.start()
        return QtTickHandle(timer)

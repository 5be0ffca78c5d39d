from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, QTimer


class DebouncedAction:
    """
    Cancellable deferred callback backed by one single-shot QTimer.

    `schedule()` while a call is pending restarts the countdown, so at most one
    call of a given kind is ever pending.
    """

    def __init__(self, interval_ms: int, callback: Callable[[], None], parent: QObject | None = None):
        self._timer = QTimer(parent)
        self._timer.setSingleShot(True)
        self._timer.setInterval(int(interval_ms))
        self._timer.timeout.connect(callback)

    @property
    def interval_ms(self) -> int:
        return self._timer.interval()

    def schedule(self, interval_ms: int | None = None) -> None:
        if interval_ms is not None:
            self._timer.setInterval(int(interval_ms))
        self._timer.start()

    def cancel(self) -> None:
        self._timer.stop()

    def is_pending(self) -> bool:
        return self._timer.isActive()

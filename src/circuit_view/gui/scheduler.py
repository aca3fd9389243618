"""QTimer-based scheduler for the animation driver."""

from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer


class QtScheduledCall:
    """Single-shot QTimer that can be cancelled before it fires."""

    def __init__(self, timer: QTimer):
        self.timer = timer
        self._done = False
        timer.timeout.connect(self._release)

    def cancel(self) -> None:
        if self._done:
            return
        self.timer.stop()
        self._release()

    def is_active(self) -> bool:
        return not self._done and self.timer.isActive()

    def _release(self) -> None:
        self._done = True
        self.timer.deleteLater()


class QtScheduler:
    """Runs delayed callbacks on the Qt event loop of the owning thread."""

    def __init__(self, parent: Optional[QObject] = None):
        """Initialize the scheduler.

        Args:
            parent: QObject that owns the timers created by this scheduler
        """
        self.parent = parent

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> QtScheduledCall:
        """Run ``callback`` once after ``delay_ms`` milliseconds."""
        timer = QTimer(self.parent)
        timer.setSingleShot(True)
        timer.timeout.connect(callback)
        call = QtScheduledCall(timer)
        timer.start(delay_ms)
        return call

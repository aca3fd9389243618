"""Shared fixtures for circuit_view tests."""

import os
from typing import Callable, Iterator, List

import pytest

# Qt must not need a display during tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class ManualCall:
    """Pending call recorded by ManualScheduler."""

    def __init__(self, delay_ms: int, callback: Callable[[], None]):
        self.delay_ms = delay_ms
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler that only runs callbacks when the test asks it to."""

    def __init__(self) -> None:
        self.calls: List[ManualCall] = []

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ManualCall:
        call = ManualCall(delay_ms, callback)
        self.calls.append(call)
        return call

    def pending(self) -> List[ManualCall]:
        return [c for c in self.calls if not c.cancelled and not c.fired]

    def run_pending(self) -> int:
        """Fire every pending call once; returns how many fired."""
        due = self.pending()
        for call in due:
            call.fired = True
            call.callback()
        return len(due)


class RecordingSurface:
    """DrawingSurface that records every call it receives."""

    def __init__(self) -> None:
        self.ops: List[tuple] = []
        self.depth = 0
        self.max_depth = 0

    def fill(self, color: str) -> None:
        self.ops.append(("fill", color))

    def save(self) -> None:
        self.depth += 1
        self.max_depth = max(self.max_depth, self.depth)
        self.ops.append(("save",))

    def restore(self) -> None:
        self.depth -= 1
        self.ops.append(("restore",))

    def translate(self, dx: float, dy: float) -> None:
        self.ops.append(("translate", dx, dy))

    def rotate(self, degrees: float) -> None:
        self.ops.append(("rotate", degrees))

    def draw_line(self, x1, y1, x2, y2, paint) -> None:  # type: ignore[no-untyped-def]
        self.ops.append(("line", x1, y1, x2, y2, paint))

    def of_kind(self, kind: str) -> List[tuple]:
        return [op for op in self.ops if op[0] == kind]


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Session-wide QApplication for widget tests."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def isolated_settings(tmp_path, monkeypatch) -> Iterator[object]:
    """AppSettings backed by an ini file under tmp_path."""
    from PySide6.QtCore import QSettings
    from circuit_view.settings import AppSettings

    QSettings.setDefaultFormat(QSettings.Format.IniFormat)
    QSettings.setPath(
        QSettings.Format.IniFormat, QSettings.Scope.UserScope, str(tmp_path)
    )
    QSettings.setPath(
        QSettings.Format.NativeFormat, QSettings.Scope.UserScope, str(tmp_path)
    )
    monkeypatch.chdir(tmp_path)
    yield AppSettings(profile="test")

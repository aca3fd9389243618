"""
Qt host for the circuit animation.
"""

from .circuit_view import CircuitView
from .main_window import MainWindow
from .painter_surface import QPainterSurface
from .scheduler import QtScheduler, QtScheduledCall

__all__ = [
    "CircuitView",
    "MainWindow",
    "QPainterSurface",
    "QtScheduler",
    "QtScheduledCall",
]

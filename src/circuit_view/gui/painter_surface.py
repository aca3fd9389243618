"""QPainter-backed drawing surface.

Implements the core DrawingSurface protocol on top of a QPainter so the
animation core can draw into any Qt paint device.
"""

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QColor, QPainter, QPen

from circuit_view.core.surface import Paint


class QPainterSurface:
    """Adapts an active QPainter to the DrawingSurface protocol."""

    def __init__(self, painter: QPainter):
        """Initialize the surface.

        Args:
            painter: QPainter that is already active on a paint device
        """
        self.painter = painter
        self.painter.setRenderHint(QPainter.RenderHint.Antialiasing)

    def fill(self, color: str) -> None:
        """Fill the whole device, ignoring the current transform."""
        self.painter.save()
        self.painter.resetTransform()
        self.painter.fillRect(self.painter.viewport(), QColor(color))
        self.painter.restore()

    def save(self) -> None:
        self.painter.save()

    def restore(self) -> None:
        self.painter.restore()

    def translate(self, dx: float, dy: float) -> None:
        self.painter.translate(dx, dy)

    def rotate(self, degrees: float) -> None:
        self.painter.rotate(degrees)

    def draw_line(
        self, x1: float, y1: float, x2: float, y2: float, paint: Paint
    ) -> None:
        pen = QPen(QColor(paint.color))
        pen.setWidthF(paint.stroke_width)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        self.painter.setPen(pen)
        self.painter.drawLine(QPointF(x1, y1), QPointF(x2, y2))

"""Widget hosting the circuit animation.

The widget forwards paint events and primary taps to the Renderer and
serves as its redraw target.
"""

import logging
from typing import Optional

from PySide6.QtCore import Qt, QSize
from PySide6.QtGui import QHideEvent, QMouseEvent, QPainter, QPaintEvent
from PySide6.QtWidgets import QWidget

from circuit_view.core import CircuitConfig, DEFAULT_CONFIG, Renderer

from .painter_surface import QPainterSurface
from .scheduler import QtScheduler


class CircuitView(QWidget):
    """Draws the node chain and animates one step per left click."""

    def __init__(
        self,
        config: CircuitConfig = DEFAULT_CONFIG,
        parent: Optional[QWidget] = None,
    ):
        """Initialize the view.

        Args:
            config: Animation constants
            parent: Parent widget
        """
        super().__init__(parent)

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.setObjectName("circuit_view")

        self.scheduler = QtScheduler(self)
        # QWidget.update() coalesces repeated requests into one repaint
        self.renderer = Renderer(self.update, self.scheduler, config)

        self.setMinimumSize(240, 120)
        self.logger.debug("Circuit view initialized")

    def sizeHint(self) -> QSize:
        return QSize(720, 360)

    def paintEvent(self, event: QPaintEvent) -> None:
        """Render one frame and run one animation tick."""
        painter = QPainter(self)
        try:
            self.renderer.render(
                QPainterSurface(painter), float(self.width()), float(self.height())
            )
        except Exception as e:
            self.logger.error(f"Error during circuit render: {e}", exc_info=True)
        finally:
            painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        """Treat a left button press as a tap."""
        if event.button() == Qt.MouseButton.LeftButton:
            self.renderer.handle_tap()
            event.accept()
        else:
            super().mousePressEvent(event)

    def hideEvent(self, event: QHideEvent) -> None:
        """Drop the paced redraw while hidden; the next paint resumes ticking."""
        self.renderer.animator.cancel_pending()
        super().hideEvent(event)

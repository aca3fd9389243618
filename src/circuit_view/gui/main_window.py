"""
Main application window for circuit_view.
"""

import logging
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QWidget

from ..core import CircuitConfig, DEFAULT_CONFIG
from ..resources import get_app_icon
from ..settings import AppSettings
from .circuit_view import CircuitView


class MainWindow(QMainWindow):
    """Main application window with a single circuit view."""

    def __init__(
        self,
        settings: AppSettings,
        config: CircuitConfig = DEFAULT_CONFIG,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self.setObjectName("main_window")
        self.settings = settings

        self.circuit_view = CircuitView(config, self)
        self.setCentralWidget(self.circuit_view)

        self.setWindowTitle("Circuit View")
        self.setWindowIcon(get_app_icon())
        self.setup_status_bar()

        self.logger.info("Main window initialized")

    def setup_status_bar(self) -> None:
        """Setup the status bar."""
        self.status_bar = self.statusBar()
        if self.settings.is_first_run:
            self.status_bar.showMessage("Click the view to animate the next node", 10000)
            self.settings.set_first_run_complete()
        self.logger.debug("Status bar created")

"""
Main entry point for circuit_view.
Usage: python -m circuit_view
"""

import sys
import logging
from typing import Optional

from PySide6.QtWidgets import QApplication, QMessageBox

from . import __version__
from .settings import AppSettings
from .gui.main_window import MainWindow
from .utils.logging_config import setup_logging


def show_error_dialog(title: str, message: str, details: Optional[str] = None) -> None:
    """Show error dialog to user."""
    app = QApplication.instance()
    if not app:
        app = QApplication(sys.argv)

    msg_box = QMessageBox()
    msg_box.setIcon(QMessageBox.Icon.Critical)
    msg_box.setWindowTitle(title)
    msg_box.setText(message)

    if details:
        msg_box.setDetailedText(details)

    msg_box.exec()


def main() -> int:
    """Main application entry point."""
    logger = logging.getLogger(f"{__name__}.main")
    try:
        settings = AppSettings()
        setup_logging(settings)

        app = QApplication(sys.argv)
        app.setApplicationName("circuit_view")
        app.setApplicationVersion(__version__)

        logger.info("Starting circuit_view")
        logger.info(f"Configuration loaded from {settings.get_settings_file_path()}")

        validation = settings.validate()
        if validation.warnings:
            logger.warning("Configuration warnings detected:")
            for warning in validation.warnings:
                logger.warning(f"  {warning}")

        if not validation.is_valid:
            logger.error("Configuration validation failed:")
            for error in validation.errors:
                logger.error(f"  {error}")
            show_error_dialog(
                "Configuration Error",
                "Configuration validation failed. Please check your settings.",
                "\n".join(validation.errors),
            )
            return 1

        window = MainWindow(settings)
        window.show()

        logger.info("Application started successfully")
        return app.exec()

    except Exception as e:
        logger.exception("Unhandled exception in main")
        show_error_dialog("Application Error", "An unexpected error occurred.", str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""
Settings versioning for circuit_view.
"""

import logging
from typing import TYPE_CHECKING

from .types import ConfigVersion

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)


class SettingsMigrator:
    """Stamps the configuration version and flags the first run."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def ensure_version(self) -> None:
        """Ensure configuration version is set."""
        current_version = str(self.settings.value("app/version", ""))

        if not current_version:
            self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
            self.settings.setValue("app/first_run", True)
            self.settings.sync()
            logger.info("First run detected, initializing configuration")
        elif current_version != ConfigVersion.CURRENT.value:
            # Only one version exists so far; unknown versions are restamped
            logger.warning(
                f"Unknown configuration version {current_version}, "
                f"resetting to {ConfigVersion.CURRENT.value}"
            )
            self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
            self.settings.sync()

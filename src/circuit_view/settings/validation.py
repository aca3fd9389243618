"""
Settings validation system for circuit_view.
"""

import logging
import os
from typing import List, TYPE_CHECKING

from .logging import VALID_LEVELS
from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        level = self.settings.console_log_level
        if level.upper() not in VALID_LEVELS:
            errors.append(f"Unknown console log level: {level}")

        if self.settings.file_logging:
            log_dir = self.settings.logging.log_file_absolute_path.parent
            # The directory is created on demand, so only an existing one can be unwritable
            if log_dir.exists() and not os.access(log_dir, os.W_OK):
                warnings.append(f"Log directory is not writable: {log_dir}")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )

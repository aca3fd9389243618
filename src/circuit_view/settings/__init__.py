"""
Settings package for circuit_view.

Configuration management built on Qt's QSettings for cross-platform storage.

Usage:
    from circuit_view.settings import AppSettings, ValidationResult

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigVersion, ConfigError, ValidationResult
from .logging import LoggingSettings

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ConfigError",
    "ValidationResult",
    "LoggingSettings",
]

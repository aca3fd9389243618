"""
Resources for circuit_view.

Provides the application icon, drawn from the qtawesome icon fonts.
"""

from functools import lru_cache

import qtawesome as qta  # type: ignore
from PySide6.QtGui import QIcon

from ..core.config import DEFAULT_CONFIG

APP_ICON_NAME = "fa5s.microchip"


@lru_cache(maxsize=1)
def get_app_icon() -> QIcon:
    """Return the shared application icon.

    Requires a running QGuiApplication, since qtawesome loads its fonts
    through Qt.
    """
    return qta.icon(APP_ICON_NAME, color=DEFAULT_CONFIG.fore_color)

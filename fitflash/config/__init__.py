"""
Configuration package for the FitFlash application.
"""

from .config import (
    APP_NAME,
    BASE_URL,
    DEFAULT_UNIT_SYSTEM,
    SNAP_TOLERANCE_LBS,
    THEME_COLOR,
)

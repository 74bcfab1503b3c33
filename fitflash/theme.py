"""
Theme configuration for the FitFlash application.

Auth pages (sign in, sign up, password reset) render without the app
theme; every other route gets it.
"""

from typing import Optional

from fitflash.config import THEME_COLOR

AUTH_PATHS = ("/sign-in", "/sign-up", "/forgot-password")


def is_auth_page(pathname: Optional[str]) -> bool:
    """Check if a route is one of the auth pages."""
    if not pathname:
        return False
    return pathname.startswith(AUTH_PATHS)


def should_apply_theme(pathname: Optional[str]) -> bool:
    """Theme applies everywhere except auth pages."""
    return not is_auth_page(pathname)


def get_theme_color(pathname: Optional[str]) -> Optional[str]:
    """Browser theme color for a route, None where the theme is not applied."""
    return THEME_COLOR if should_apply_theme(pathname) else None

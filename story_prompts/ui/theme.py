"""
Theme controller.

Resolves the light/dark mode at boot (stored preference, else OS
preference, else light) and persists it; toggling flips and persists.
"""

from enum import Enum
from typing import Dict, Optional, Protocol


class Theme(str, Enum):
    """The two mutually exclusive visual modes."""

    LIGHT = "light"
    DARK = "dark"

    def flipped(self) -> "Theme":
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK


class PreferenceStore(Protocol):
    """One-key storage for the theme preference."""

    def get(self) -> Optional[str]:
        ...

    def set(self, value: str) -> None:
        ...


class MemoryPreferenceStore:
    """In-process preference store."""

    def __init__(self, value: Optional[str] = None):
        self.value = value

    def get(self) -> Optional[str]:
        return self.value

    def set(self, value: str) -> None:
        self.value = value


class CookiePreferenceStore:
    """
    Preference store backed by the browser's theme cookie.

    Reads come from the request cookies; a write is held until the
    router copies it onto the response with apply_to().
    """

    def __init__(self, cookies: Dict[str, str], cookie_name: str):
        self.cookie_name = cookie_name
        self._stored = cookies.get(cookie_name)
        self.pending: Optional[str] = None

    def get(self) -> Optional[str]:
        return self.pending if self.pending is not None else self._stored

    def set(self, value: str) -> None:
        self.pending = value

    def apply_to(self, response, max_age: int) -> None:
        if self.pending is not None:
            response.set_cookie(self.cookie_name, self.pending, max_age=max_age, samesite="lax")


def resolve_theme(stored: Optional[str], prefers_dark: bool) -> Theme:
    """Stored preference if valid, else OS dark preference, else light."""
    if stored in (Theme.LIGHT.value, Theme.DARK.value):
        return Theme(stored)
    return Theme.DARK if prefers_dark else Theme.LIGHT


def prefers_dark_scheme(value: Optional[str]) -> bool:
    """Interpret a Sec-CH-Prefers-Color-Scheme style value ('"dark"', 'dark', ...)."""
    if not value:
        return False
    return value.strip().strip('"').lower() == Theme.DARK.value


class ThemeController:
    """Applies and persists the theme through a PreferenceStore."""

    def __init__(self, store: PreferenceStore):
        self.store = store

    def boot(self, prefers_dark: bool) -> Theme:
        theme = resolve_theme(self.store.get(), prefers_dark)
        self.store.set(theme.value)
        return theme

    def toggle(self, current: Theme) -> Theme:
        theme = current.flipped()
        self.store.set(theme.value)
        return theme

"""
Tests for the theme controller.
"""

from unittest.mock import MagicMock

from story_prompts.ui.theme import (
    CookiePreferenceStore,
    MemoryPreferenceStore,
    Theme,
    ThemeController,
    prefers_dark_scheme,
    resolve_theme,
)


class TestResolveTheme:
    """Tests for resolve_theme function."""

    def test_stored_preference_wins(self):
        assert resolve_theme("light", prefers_dark=True) is Theme.LIGHT
        assert resolve_theme("dark", prefers_dark=False) is Theme.DARK

    def test_os_preference_when_nothing_stored(self):
        assert resolve_theme(None, prefers_dark=True) is Theme.DARK

    def test_light_by_default(self):
        assert resolve_theme(None, prefers_dark=False) is Theme.LIGHT

    def test_unknown_stored_value_ignored(self):
        assert resolve_theme("sepia", prefers_dark=True) is Theme.DARK


class TestPrefersDarkScheme:
    """Tests for prefers_dark_scheme function."""

    def test_quoted_client_hint(self):
        assert prefers_dark_scheme('"dark"') is True

    def test_plain_value(self):
        assert prefers_dark_scheme("Dark") is True

    def test_light_or_missing(self):
        assert prefers_dark_scheme('"light"') is False
        assert prefers_dark_scheme(None) is False
        assert prefers_dark_scheme("") is False


class TestThemeController:
    """Tests for ThemeController boot and toggle."""

    def test_boot_with_dark_os_preference_then_toggle(self):
        """No stored preference + OS dark -> dark persisted; toggle -> light persisted."""
        store = MemoryPreferenceStore()
        controller = ThemeController(store)

        theme = controller.boot(prefers_dark=True)
        assert theme is Theme.DARK
        assert store.get() == "dark"

        theme = controller.toggle(theme)
        assert theme is Theme.LIGHT
        assert store.get() == "light"

    def test_boot_is_idempotent(self):
        store = MemoryPreferenceStore("light")
        controller = ThemeController(store)

        assert controller.boot(prefers_dark=True) is Theme.LIGHT
        assert controller.boot(prefers_dark=True) is Theme.LIGHT
        assert store.get() == "light"

    def test_toggle_twice_returns_to_start(self):
        controller = ThemeController(MemoryPreferenceStore())
        assert controller.toggle(controller.toggle(Theme.DARK)) is Theme.DARK


class TestCookiePreferenceStore:
    """Tests for CookiePreferenceStore."""

    def test_reads_request_cookie(self):
        store = CookiePreferenceStore({"theme": "dark"}, "theme")
        assert store.get() == "dark"

    def test_write_applied_to_response(self):
        store = CookiePreferenceStore({}, "theme")
        store.set("light")
        response = MagicMock()

        store.apply_to(response, max_age=60)

        assert store.get() == "light"
        response.set_cookie.assert_called_once_with("theme", "light", max_age=60, samesite="lax")

    def test_nothing_applied_without_write(self):
        store = CookiePreferenceStore({"theme": "dark"}, "theme")
        response = MagicMock()

        store.apply_to(response, max_age=60)

        response.set_cookie.assert_not_called()

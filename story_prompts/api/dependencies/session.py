"""
Browser session dependency.

Looks up the caller's SessionUIState by the session cookie. A new session
boots its theme from the theme cookie, else the OS color-scheme preference
(`prefers` query parameter sent by the page, or the
Sec-CH-Prefers-Color-Scheme client hint), else light, and persists it.
"""

import logging

from fastapi import Request, Response

from ...infra.config import SESSION_COOKIE, THEME_COOKIE, THEME_COOKIE_MAX_AGE
from ...ui.session import SessionUIState, get_session_registry
from ...ui.theme import CookiePreferenceStore, ThemeController, prefers_dark_scheme

logger = logging.getLogger("story_prompts")


async def current_session(request: Request, response: Response) -> SessionUIState:
    """Return the session state for this browser, creating it on first use."""
    registry = get_session_registry()
    state = registry.get(request.cookies.get(SESSION_COOKIE))
    if state is not None:
        return state

    store = CookiePreferenceStore(request.cookies, THEME_COOKIE)
    prefers_dark = prefers_dark_scheme(
        request.query_params.get("prefers")
        or request.headers.get("Sec-CH-Prefers-Color-Scheme")
    )
    theme = ThemeController(store).boot(prefers_dark)

    session_id, state = registry.create(theme)
    response.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
    store.apply_to(response, THEME_COOKIE_MAX_AGE)

    logger.info(f"[SessionAPI] New session with theme={theme.value}")
    return state

"""
Session router - transitions of the single-page form.

Each endpoint applies one transition to the caller's SessionUIState and
returns the resulting snapshot. The clipboard text itself is part of the
snapshot, so the page writes it first and reports the copy only once the
write succeeded.

Endpoints:
- GET /session/state - Current snapshot (boots the theme for a new session)
- PUT /session/input - Replace textarea contents
- POST /session/submit - Generate from the current input (no-op while pending)
- POST /session/theme/toggle - Flip and persist the theme
- POST /session/copy/{index} - Mark one prompt as copied (after the clipboard write)
- POST /session/copy-all - Mark the bulk copy as done (after the clipboard write)
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from ..dependencies.session import current_session
from ..schemas.session import (
    CopyResponse,
    InputUpdateRequest,
    SessionStateResponse,
    SubmitRequest,
)
from ..services.generation_service import get_generation_client
from ...infra.config import THEME_COOKIE, THEME_COOKIE_MAX_AGE
from ...story.generation_client import GenerationClient
from ...ui.session import InvalidTransitionError, SessionUIState, run_submission
from ...ui.theme import CookiePreferenceStore, ThemeController

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/state", response_model=SessionStateResponse)
async def get_state(state: SessionUIState = Depends(current_session)):
    """Current page state."""
    return state.snapshot()


@router.put("/input", response_model=SessionStateResponse)
async def update_input(
    request: InputUpdateRequest,
    state: SessionUIState = Depends(current_session),
):
    """Replace the textarea contents. Ignored while a request is pending."""
    state.set_input(request.text)
    return state.snapshot()


@router.post("/submit", response_model=SessionStateResponse)
async def submit(
    request: Optional[SubmitRequest] = None,
    state: SessionUIState = Depends(current_session),
    client: GenerationClient = Depends(get_generation_client),
):
    """
    Run one generation for this session.

    Waits for the model call to settle. A submit while another is pending,
    or with blank input, leaves the state unchanged.
    """
    if request is not None and request.text is not None:
        state.set_input(request.text)

    started = await run_submission(state, client)
    if not started:
        logger.info(f"[SessionAPI] Submit ignored in phase {state.phase.value}")

    return state.snapshot()


@router.post("/theme/toggle", response_model=SessionStateResponse)
async def toggle_theme(
    request: Request,
    response: Response,
    state: SessionUIState = Depends(current_session),
):
    """Flip the theme and persist it in the theme cookie."""
    store = CookiePreferenceStore(request.cookies, THEME_COOKIE)
    state.toggle_theme(ThemeController(store))
    store.apply_to(response, THEME_COOKIE_MAX_AGE)
    return state.snapshot()


@router.post("/copy/{index}", response_model=CopyResponse)
async def copy_prompt(index: int, state: SessionUIState = Depends(current_session)):
    """Text of one prompt (0-based index); marks it as copied for two seconds."""
    try:
        text = state.copy_prompt(index)
    except InvalidTransitionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except IndexError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return CopyResponse(text=text, state=state.snapshot())


@router.post("/copy-all", response_model=CopyResponse)
async def copy_all(state: SessionUIState = Depends(current_session)):
    """Hook plus all prompts; marks the bulk copy as done for two seconds."""
    try:
        text = state.copy_all()
    except InvalidTransitionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return CopyResponse(text=text, state=state.snapshot())

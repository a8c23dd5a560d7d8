# mentorconnect/api/app_views.py
"""
Client Workspace API

Every endpoint applies one user intent to the caller's workspace and
returns the screen that is rendered afterwards.

Endpoints:
- GET  /app - Current shell and screen
- POST /app/navigate - Switch the sidebar view
- PUT  /app/mentors/filters - Search and expertise filter
- POST /app/mentors/{mentor_id}/select - Open a mentor profile
- POST /app/profile/back - Back to the directory
- POST /app/profile/booking/open - Reveal the booking form
- POST /app/profile/booking/cancel - Hide the booking form
- POST /app/profile/book - Book a session with the mentor
- PUT  /app/sessions/filter - Status filter
- POST /app/sessions/{session_id}/feedback - Leave feedback for a completed session
- PUT  /app/feedback/form - Rating and comment
- POST /app/feedback/submit - Submit feedback
- POST /app/feedback/skip - Skip feedback
"""

from fastapi import APIRouter, Depends, HTTPException, status

from mentorconnect.api.deps import get_identity, get_registry, get_workspace
from mentorconnect.identity import SHELL_WORKSPACE, IdentityContext, resolve_shell
from mentorconnect.schemas.feedback import FeedbackFormUpdate
from mentorconnect.schemas.mentor import MentorFilters
from mentorconnect.schemas.session import BookingRequest, SessionFilter
from mentorconnect.schemas.view import NavigateRequest, ScreenResponse
from mentorconnect.views.base import ViewActionError
from mentorconnect.views.directory import MentorDirectoryView
from mentorconnect.views.feedback import FeedbackView
from mentorconnect.views.profile import MentorProfileView
from mentorconnect.views.sessions import SessionListView
from mentorconnect.views.workspace import Workspace, WorkspaceRegistry

router = APIRouter(prefix="/app", tags=["app"])


# ======================
# HELPERS
# ======================

def _conflict(e: ViewActionError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


async def _screen(workspace: Workspace) -> ScreenResponse:
    snapshot = await workspace.snapshot()
    return ScreenResponse(shell=SHELL_WORKSPACE, user=workspace.user, **snapshot)


async def _mounted(workspace: Workspace, view_type: type):
    try:
        view = workspace.expect(view_type)
    except ViewActionError as e:
        raise _conflict(e)
    await view.mount()
    return view


# ======================
# SHELL
# ======================

@router.get("", response_model=ScreenResponse)
async def get_screen(
    identity: IdentityContext = Depends(get_identity),
    workspaces: WorkspaceRegistry = Depends(get_registry),
):
    """Loading and landing shells perform no data fetches."""
    shell = resolve_shell(identity)
    if shell != SHELL_WORKSPACE:
        return ScreenResponse(shell=shell)
    return await _screen(workspaces.get_or_create(identity.user))


@router.post("/navigate", response_model=ScreenResponse)
async def navigate(request: NavigateRequest, workspace: Workspace = Depends(get_workspace)):
    workspace.navigation.navigate(request.view)
    return await _screen(workspace)


# ======================
# MENTOR DIRECTORY
# ======================

@router.put("/mentors/filters", response_model=ScreenResponse)
async def set_mentor_filters(filters: MentorFilters, workspace: Workspace = Depends(get_workspace)):
    view = await _mounted(workspace, MentorDirectoryView)
    view.set_filters(filters.query, filters.expertise)
    return await _screen(workspace)


@router.post("/mentors/{mentor_id}/select", response_model=ScreenResponse)
async def select_mentor(mentor_id: int, workspace: Workspace = Depends(get_workspace)):
    view = await _mounted(workspace, MentorDirectoryView)
    try:
        view.select(mentor_id)
    except ViewActionError as e:
        raise _conflict(e)
    return await _screen(workspace)


# ======================
# MENTOR PROFILE & BOOKING
# ======================

@router.post("/profile/back", response_model=ScreenResponse)
async def back_from_profile(workspace: Workspace = Depends(get_workspace)):
    await _mounted(workspace, MentorProfileView)
    workspace.navigation.back_from_profile()
    return await _screen(workspace)


@router.post("/profile/booking/open", response_model=ScreenResponse)
async def open_booking_form(workspace: Workspace = Depends(get_workspace)):
    view = await _mounted(workspace, MentorProfileView)
    view.open_booking_form()
    return await _screen(workspace)


@router.post("/profile/booking/cancel", response_model=ScreenResponse)
async def cancel_booking_form(workspace: Workspace = Depends(get_workspace)):
    view = await _mounted(workspace, MentorProfileView)
    view.cancel_booking_form()
    return await _screen(workspace)


@router.post("/profile/book", response_model=ScreenResponse)
async def book_session(request: BookingRequest, workspace: Workspace = Depends(get_workspace)):
    """
    On success the profile shows its confirmation and returns to the
    directory after the confirmation delay. On failure the alert is set
    and the form stays open.
    """
    view = await _mounted(workspace, MentorProfileView)
    try:
        await view.book(request.topic, request.date, request.time, request.notes)
    except ViewActionError as e:
        raise _conflict(e)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return await _screen(workspace)


# ======================
# SESSIONS
# ======================

@router.put("/sessions/filter", response_model=ScreenResponse)
async def set_session_filter(request: SessionFilter, workspace: Workspace = Depends(get_workspace)):
    view = await _mounted(workspace, SessionListView)
    view.set_filter(request.status)
    return await _screen(workspace)


@router.post("/sessions/{session_id}/feedback", response_model=ScreenResponse)
async def leave_feedback(session_id: int, workspace: Workspace = Depends(get_workspace)):
    view = await _mounted(workspace, SessionListView)
    try:
        view.leave_feedback(session_id)
    except ViewActionError as e:
        raise _conflict(e)
    return await _screen(workspace)


# ======================
# FEEDBACK
# ======================

@router.put("/feedback/form", response_model=ScreenResponse)
async def update_feedback_form(request: FeedbackFormUpdate, workspace: Workspace = Depends(get_workspace)):
    view = await _mounted(workspace, FeedbackView)
    if request.rating is not None:
        view.set_rating(request.rating)
    if request.comment is not None:
        view.set_comment(request.comment)
    return await _screen(workspace)


@router.post("/feedback/submit", response_model=ScreenResponse)
async def submit_feedback(workspace: Workspace = Depends(get_workspace)):
    """An unset rating returns the form with the rating prompt as its alert."""
    view = await _mounted(workspace, FeedbackView)
    try:
        await view.submit()
    except ViewActionError as e:
        raise _conflict(e)
    return await _screen(workspace)


@router.post("/feedback/skip", response_model=ScreenResponse)
async def skip_feedback(workspace: Workspace = Depends(get_workspace)):
    view = await _mounted(workspace, FeedbackView)
    view.skip()
    return await _screen(workspace)

# mentorconnect/views/navigation.py
"""
Top-level view state for a signed-in user.

The nominal view (``current_view``) is what the sidebar shows as active.
On top of it sits at most one overlay: a selected mentor (profile screen)
or a pending feedback target (feedback form). A feedback overlay always
wins over a mentor selection, and either overlay wins over the nominal
view.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, List, Optional, Union

from pydantic import BaseModel, ConfigDict

from mentorconnect.schemas.mentor import MentorCard

logger = logging.getLogger(__name__)


class View(str, Enum):
    HOME = "home"
    MENTORS = "mentors"
    SESSIONS = "sessions"
    FEEDBACK = "feedback"

    @classmethod
    def coerce(cls, value: Union["View", str]) -> "View":
        """Unknown names fall back to the dashboard."""
        try:
            return cls(value)
        except ValueError:
            logger.warning("Unknown view %r, showing dashboard", value)
            return cls.HOME


class Screen(str, Enum):
    DASHBOARD = "dashboard"
    MENTOR_DIRECTORY = "mentor_directory"
    MENTOR_PROFILE = "mentor_profile"
    SESSION_LIST = "session_list"
    FEEDBACK_FORM = "feedback_form"
    FEEDBACK_PROMPT = "feedback_prompt"


VIEW_SCREENS = {
    View.HOME: Screen.DASHBOARD,
    View.MENTORS: Screen.MENTOR_DIRECTORY,
    View.SESSIONS: Screen.SESSION_LIST,
    View.FEEDBACK: Screen.FEEDBACK_PROMPT,
}


class MentorOverlay(BaseModel):
    model_config = ConfigDict(frozen=True)

    mentor: MentorCard


class FeedbackOverlay(BaseModel):
    model_config = ConfigDict(frozen=True)

    session_id: int
    mentor_id: int


Overlay = Union[MentorOverlay, FeedbackOverlay]


class Rendered(BaseModel):
    """The screen to draw and the parameters it is drawn with."""
    model_config = ConfigDict(frozen=True)

    screen: Screen
    mentor: Optional[MentorCard] = None
    session_id: Optional[int] = None
    mentor_id: Optional[int] = None


class NavigationController:
    def __init__(self) -> None:
        self.current_view: View = View.HOME
        self.overlay: Optional[Overlay] = None
        self._listeners: List[Callable[[Rendered], None]] = []

    # ======================
    # STATE
    # ======================

    @property
    def selected_mentor(self) -> Optional[MentorCard]:
        if isinstance(self.overlay, MentorOverlay):
            return self.overlay.mentor
        return None

    @property
    def pending_feedback(self) -> Optional[FeedbackOverlay]:
        if isinstance(self.overlay, FeedbackOverlay):
            return self.overlay
        return None

    def render(self) -> Rendered:
        if isinstance(self.overlay, FeedbackOverlay):
            return Rendered(
                screen=Screen.FEEDBACK_FORM,
                session_id=self.overlay.session_id,
                mentor_id=self.overlay.mentor_id,
            )
        if isinstance(self.overlay, MentorOverlay):
            return Rendered(screen=Screen.MENTOR_PROFILE, mentor=self.overlay.mentor)
        return Rendered(screen=VIEW_SCREENS.get(self.current_view, Screen.DASHBOARD))

    def subscribe(self, listener: Callable[[Rendered], None]) -> None:
        """Call ``listener`` with the rendered screen after every transition."""
        self._listeners.append(listener)

    def _changed(self, event: str) -> None:
        rendered = self.render()
        logger.debug("%s -> view=%s screen=%s", event, self.current_view.value, rendered.screen.value)
        for listener in self._listeners:
            listener(rendered)

    # ======================
    # TRANSITIONS
    # ======================

    def navigate(self, view: Union[View, str]) -> None:
        self.current_view = View.coerce(view)
        self.overlay = None
        self._changed("navigate")

    def select_mentor(self, mentor: MentorCard) -> None:
        if isinstance(self.overlay, FeedbackOverlay):
            logger.debug("Mentor %s selected while feedback is pending, ignored", mentor.id)
            return
        self.overlay = MentorOverlay(mentor=mentor)
        self._changed("select_mentor")

    def back_from_profile(self) -> None:
        if isinstance(self.overlay, MentorOverlay):
            self.overlay = None
        self._changed("back_from_profile")

    def leave_feedback(self, session_id: int, mentor_id: int) -> None:
        self.overlay = FeedbackOverlay(session_id=session_id, mentor_id=mentor_id)
        # Where the student lands once the feedback is done
        self.current_view = View.SESSIONS
        self._changed("leave_feedback")

    def feedback_complete(self) -> None:
        self.overlay = None
        self.current_view = View.SESSIONS
        self._changed("feedback_complete")

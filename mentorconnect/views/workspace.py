# mentorconnect/views/workspace.py
"""
Per-user workspace: the navigation controller plus the one view mounted
for the screen it currently renders.
"""

import logging
from typing import Any, Dict, Optional

from mentorconnect.gateway import DataGateway
from mentorconnect.schemas.auth import UserOut
from mentorconnect.views.base import BaseView, ViewActionError
from mentorconnect.views.dashboard import DashboardView
from mentorconnect.views.directory import MentorDirectoryView
from mentorconnect.views.feedback import FeedbackPromptView, FeedbackView
from mentorconnect.views.navigation import NavigationController, Rendered, Screen
from mentorconnect.views.profile import MentorProfileView
from mentorconnect.views.sessions import SessionListView

logger = logging.getLogger(__name__)


class Workspace:
    def __init__(
        self,
        user: UserOut,
        gateway: DataGateway,
        confirmation_delay: Optional[float] = None,
    ) -> None:
        self.user = user
        self.gateway = gateway
        self.confirmation_delay = confirmation_delay
        self.navigation = NavigationController()
        self.rendered: Optional[Rendered] = None
        self.view: Optional[BaseView] = None
        self._on_transition(self.navigation.render())
        self.navigation.subscribe(self._on_transition)

    def _on_transition(self, rendered: Rendered) -> None:
        # Same screen with the same parameters keeps the mounted view
        if rendered == self.rendered:
            return
        self.rendered = rendered
        if self.view is not None:
            self.view.close()
        self.view = self._build_view(rendered)

    def _build_view(self, rendered: Rendered) -> BaseView:
        nav = self.navigation
        if rendered.screen == Screen.FEEDBACK_FORM:
            return FeedbackView(
                self.gateway,
                self.user.id,
                rendered.session_id,
                rendered.mentor_id,
                on_complete=nav.feedback_complete,
                confirmation_delay=self.confirmation_delay,
            )
        if rendered.screen == Screen.MENTOR_PROFILE:
            return MentorProfileView(
                self.gateway,
                self.user.id,
                rendered.mentor,
                on_back=nav.back_from_profile,
                confirmation_delay=self.confirmation_delay,
            )
        if rendered.screen == Screen.MENTOR_DIRECTORY:
            return MentorDirectoryView(self.gateway, on_select_mentor=nav.select_mentor)
        if rendered.screen == Screen.SESSION_LIST:
            return SessionListView(self.gateway, self.user.id, on_leave_feedback=nav.leave_feedback)
        if rendered.screen == Screen.FEEDBACK_PROMPT:
            return FeedbackPromptView()
        return DashboardView(self.gateway, self.user)

    def expect(self, view_type: type) -> Any:
        """The mounted view, if it is of the given type."""
        if not isinstance(self.view, view_type):
            raise ViewActionError(
                f"Action not available on the {self.rendered.screen.value} screen"
            )
        return self.view

    async def snapshot(self) -> Dict[str, Any]:
        """Mount the current view if needed and describe it."""
        view = self.view
        await view.mount()
        return {
            "current_view": self.navigation.current_view.value,
            "screen": view.screen.value,
            "data": view.to_payload(),
        }


class WorkspaceRegistry:
    """In-memory workspaces keyed by user id; nothing is persisted."""

    def __init__(self, gateway: DataGateway, confirmation_delay: Optional[float] = None) -> None:
        self.gateway = gateway
        self.confirmation_delay = confirmation_delay
        self._workspaces: Dict[int, Workspace] = {}

    def get_or_create(self, user: UserOut) -> Workspace:
        workspace = self._workspaces.get(user.id)
        if workspace is None:
            workspace = Workspace(user, self.gateway, self.confirmation_delay)
            self._workspaces[user.id] = workspace
            logger.info("Workspace opened for user %s", user.id)
        return workspace

    def discard(self, user_id: int) -> bool:
        workspace = self._workspaces.pop(user_id, None)
        removed = workspace is not None
        if removed:
            workspace.view.close()
            logger.info("Workspace closed for user %s", user_id)
        return removed

    def __contains__(self, user_id: int) -> bool:
        return user_id in self._workspaces

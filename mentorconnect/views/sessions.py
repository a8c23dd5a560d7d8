# mentorconnect/views/sessions.py
import logging
from typing import Any, Callable, Dict, List

from starlette.concurrency import run_in_threadpool

from mentorconnect.gateway import DataGateway, GatewayError
from mentorconnect.schemas.session import SessionCard
from mentorconnect.services import session_list
from mentorconnect.views.base import BaseView, ViewActionError
from mentorconnect.views.navigation import Screen

logger = logging.getLogger(__name__)


class SessionListView(BaseView):
    screen = Screen.SESSION_LIST

    def __init__(
        self,
        gateway: DataGateway,
        student_id: int,
        on_leave_feedback: Callable[[int, int], None],
    ) -> None:
        super().__init__()
        self.gateway = gateway
        self.student_id = student_id
        self.on_leave_feedback = on_leave_feedback
        self.sessions: List[SessionCard] = []
        self.loading = True
        self.status_filter = session_list.ALL_STATUSES

    async def on_mount(self) -> None:
        await self.load()

    async def load(self) -> None:
        try:
            self.sessions = await run_in_threadpool(session_list.load_sessions, self.gateway, self.student_id)
        except GatewayError:
            logger.exception("Error loading sessions for student %s", self.student_id)
            self.sessions = []
        finally:
            self.loading = False

    @property
    def filtered_sessions(self) -> List[SessionCard]:
        return session_list.filter_sessions(self.sessions, self.status_filter)

    def set_filter(self, status: str) -> None:
        self.status_filter = status

    def leave_feedback(self, session_id: int) -> None:
        """Report the feedback target upward; navigation is the caller's job."""
        for session in self.sessions:
            if session.id == session_id:
                if not session_list.can_leave_feedback(session):
                    raise ViewActionError("Feedback is only available for completed sessions")
                self.on_leave_feedback(session.id, session.mentor_id)
                return
        raise ViewActionError(f"Session {session_id} is not in the list")

    def to_payload(self) -> Dict[str, Any]:
        items = []
        for session in self.filtered_sessions:
            item = session.model_dump(mode="json")
            item["badge"] = session_list.status_badge(session.status).model_dump()
            item["can_leave_feedback"] = session_list.can_leave_feedback(session)
            items.append(item)
        return {
            "loading": self.loading,
            "status_filter": self.status_filter,
            "sessions": items,
        }

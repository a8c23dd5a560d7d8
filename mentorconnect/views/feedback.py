# mentorconnect/views/feedback.py
import logging
from typing import Any, Callable, Dict, Optional

from starlette.concurrency import run_in_threadpool

from mentorconnect.gateway import DataGateway, GatewayError
from mentorconnect.services import feedback as feedback_service
from mentorconnect.views.base import BaseView, ConfirmingView, ViewActionError
from mentorconnect.views.navigation import Screen

logger = logging.getLogger(__name__)

FEEDBACK_FAILED_ALERT = "Failed to submit feedback. Please try again."


class FeedbackView(ConfirmingView):
    screen = Screen.FEEDBACK_FORM

    def __init__(
        self,
        gateway: DataGateway,
        student_id: int,
        session_id: int,
        mentor_id: int,
        on_complete: Callable[[], None],
        confirmation_delay: Optional[float] = None,
    ) -> None:
        super().__init__(confirmation_delay)
        self.gateway = gateway
        self.student_id = student_id
        self.session_id = session_id
        self.mentor_id = mentor_id
        self.on_complete = on_complete
        self.rating = 0
        self.comment = ""

    def set_rating(self, rating: int) -> None:
        if not (0 <= rating <= 5):
            raise ValueError("Rating must be between 1 and 5")
        self.rating = rating

    def set_comment(self, comment: Optional[str]) -> None:
        self.comment = comment or ""

    @property
    def can_submit(self) -> bool:
        return not self.loading and not self.success and self.rating != 0

    async def submit(self) -> bool:
        if self.success or self.loading:
            raise ViewActionError("Feedback is already being submitted")
        if not feedback_service.is_valid_rating(self.rating):
            self.alert = feedback_service.SELECT_RATING_PROMPT
            return False

        self.alert = None
        self.loading = True
        try:
            await run_in_threadpool(
                feedback_service.submit_feedback,
                self.gateway,
                self.session_id,
                self.student_id,
                self.mentor_id,
                self.rating,
                self.comment,
            )
        except GatewayError:
            logger.exception("Error submitting feedback for session %s", self.session_id)
            self.alert = FEEDBACK_FAILED_ALERT
            return False
        finally:
            self.loading = False

        self.success = True
        self._after_confirmation(self.on_complete)
        return True

    def skip(self) -> None:
        self.on_complete()

    def to_payload(self) -> Dict[str, Any]:
        return {
            "session_id": self.session_id,
            "mentor_id": self.mentor_id,
            "rating": self.rating,
            "rating_label": feedback_service.rating_label(self.rating),
            "comment": self.comment,
            "can_submit": self.can_submit,
            "loading": self.loading,
            "success": self.success,
            "alert": self.alert,
        }


class FeedbackPromptView(BaseView):
    """Feedback tab with nothing picked yet."""

    screen = Screen.FEEDBACK_PROMPT

    def to_payload(self) -> Dict[str, Any]:
        return {"message": "Leave feedback from a completed session in My Sessions."}

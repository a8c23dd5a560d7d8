# mentorconnect/views/profile.py
import logging
from datetime import date
from typing import Any, Callable, Dict, Optional

from starlette.concurrency import run_in_threadpool

from mentorconnect.gateway import DataGateway, GatewayError
from mentorconnect.schemas.mentor import MentorCard
from mentorconnect.services import booking
from mentorconnect.views.base import ConfirmingView, ViewActionError
from mentorconnect.views.navigation import Screen

logger = logging.getLogger(__name__)

BOOKING_FAILED_ALERT = "Failed to book session. Please try again."


class MentorProfileView(ConfirmingView):
    """Detail of the mentor picked in the directory, plus the booking form."""

    screen = Screen.MENTOR_PROFILE

    def __init__(
        self,
        gateway: DataGateway,
        student_id: int,
        mentor: MentorCard,
        on_back: Callable[[], None],
        confirmation_delay: Optional[float] = None,
    ) -> None:
        super().__init__(confirmation_delay)
        self.gateway = gateway
        self.student_id = student_id
        self.mentor = mentor
        self.on_back = on_back
        self.show_booking_form = False

    @property
    def min_date(self) -> date:
        return booking.min_booking_date()

    def open_booking_form(self) -> None:
        self.show_booking_form = True

    def cancel_booking_form(self) -> None:
        self.show_booking_form = False
        self.alert = None

    async def book(self, topic: str, scheduled_date: date, scheduled_time: str, notes: Optional[str] = None) -> bool:
        if not self.show_booking_form:
            raise ViewActionError("Booking form is not open")
        if self.success or self.loading:
            raise ViewActionError("A booking is already in progress")

        self.alert = None
        self.loading = True
        try:
            await run_in_threadpool(
                booking.book_session,
                self.gateway,
                self.student_id,
                self.mentor,
                topic,
                scheduled_date,
                scheduled_time,
                notes,
            )
        except GatewayError:
            logger.exception("Error booking session with mentor %s", self.mentor.id)
            self.alert = BOOKING_FAILED_ALERT
            return False
        finally:
            self.loading = False

        self.success = True
        self._after_confirmation(self.on_back)
        return True

    def to_payload(self) -> Dict[str, Any]:
        return {
            "mentor": self.mentor.model_dump(mode="json"),
            "show_booking_form": self.show_booking_form,
            "min_date": self.min_date.isoformat(),
            "loading": self.loading,
            "success": self.success,
            "alert": self.alert,
        }

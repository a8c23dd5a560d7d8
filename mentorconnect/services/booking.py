# mentorconnect/services/booking.py
"""
Session booking from a mentor profile.
"""

from datetime import date
from typing import Optional

from mentorconnect.config import settings
from mentorconnect.gateway import DataGateway, Row
from mentorconnect.schemas.mentor import MentorCard


def min_booking_date() -> date:
    """Earliest date the booking form offers."""
    return date.today()


def book_session(
    gateway: DataGateway,
    student_id: int,
    mentor: MentorCard,
    topic: str,
    scheduled_date: date,
    scheduled_time: str,
    notes: Optional[str] = None,
) -> Row:
    """
    Create a scheduled session between the student and the mentor.

    Raises:
        ValueError: If the topic is blank
        GatewayError: If the insert fails
    """
    topic = (topic or "").strip()
    if not topic:
        raise ValueError("Topic is required")

    return gateway.create_session(
        student_id=student_id,
        mentor_id=mentor.id,
        topic=topic,
        scheduled_date=scheduled_date,
        scheduled_time=scheduled_time,
        duration_minutes=settings.DEFAULT_SESSION_DURATION_MINUTES,
        additional_notes=notes or None,
    )

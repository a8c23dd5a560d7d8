# mentorconnect/services/session_list.py
"""
Session list: loading, status filtering and status badges.
"""

from typing import Iterable, List

from mentorconnect.gateway import DataGateway, Row
from mentorconnect.schemas.session import SessionCard, StatusBadge

ALL_STATUSES = "all"

STATUS_TONES = {
    "scheduled": "informational",
    "completed": "positive",
    "cancelled": "negative",
}


def to_session_card(row: Row) -> SessionCard:
    mentor_profile = row.get("mentor_profile") or {}
    return SessionCard(
        id=row["id"],
        student_id=row["student_id"],
        mentor_id=row["mentor_id"],
        mentor_name=mentor_profile.get("full_name") or "",
        mentor_avatar=mentor_profile.get("avatar_url"),
        topic=row["topic"],
        scheduled_date=row["scheduled_date"],
        scheduled_time=row["scheduled_time"],
        duration_minutes=row.get("duration_minutes") or 60,
        status=row["status"],
        additional_notes=row.get("additional_notes"),
        created_at=row.get("created_at"),
    )


def load_sessions(gateway: DataGateway, student_id: int) -> List[SessionCard]:
    """
    Fetch a student's sessions, latest scheduled date first.

    Raises:
        GatewayError: If the fetch fails
    """
    rows = gateway.list_student_sessions(student_id, ascending=False)
    return [to_session_card(row) for row in rows]


def filter_sessions(sessions: Iterable[SessionCard], status: str = ALL_STATUSES) -> List[SessionCard]:
    if status == ALL_STATUSES:
        return list(sessions)
    return [s for s in sessions if s.status == status]


def can_leave_feedback(session: SessionCard) -> bool:
    return session.status == "completed"


def status_badge(status: str) -> StatusBadge:
    tone = STATUS_TONES.get(status, "neutral")
    label = status[:1].upper() + status[1:]
    return StatusBadge(label=label, tone=tone)

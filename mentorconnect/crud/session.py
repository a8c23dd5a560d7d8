# mentorconnect/crud/session.py
"""
Session CRUD Operations
"""

from datetime import date
from sqlalchemy.orm import Session, contains_eager
from typing import List, Optional

from mentorconnect.models.mentor import Mentor
from mentorconnect.models.session import Session as SessionModel


def list_sessions_for_student(
    db: Session,
    student_id: int,
    ascending: bool = False,
    limit: Optional[int] = None,
) -> List[SessionModel]:
    """
    Sessions booked by a student, inner-joined with the mentor's profile.

    Args:
        db: Database session
        student_id: Student profile ID
        ascending: Order by scheduled date ascending instead of descending
        limit: Maximum sessions to return

    Returns:
        List of Session objects with ``mentor.profile`` loaded
    """
    order = SessionModel.scheduled_date.asc() if ascending else SessionModel.scheduled_date.desc()
    query = (
        db.query(SessionModel)
        .join(SessionModel.mentor)
        .join(Mentor.profile)
        .options(contains_eager(SessionModel.mentor).contains_eager(Mentor.profile))
        .filter(SessionModel.student_id == student_id)
        .order_by(order, SessionModel.id.asc())
    )
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def create_session(
    db: Session,
    student_id: int,
    mentor_id: int,
    topic: str,
    scheduled_date: date,
    scheduled_time: str,
    duration_minutes: int = 60,
    additional_notes: Optional[str] = None,
    status: str = "scheduled",
) -> SessionModel:
    """
    Insert a session row. The caller commits.
    """
    session = SessionModel(
        student_id=student_id,
        mentor_id=mentor_id,
        topic=topic,
        scheduled_date=scheduled_date,
        scheduled_time=scheduled_time,
        duration_minutes=duration_minutes,
        additional_notes=additional_notes,
        status=status,
    )
    db.add(session)
    db.flush()
    return session

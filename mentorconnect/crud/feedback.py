# mentorconnect/crud/feedback.py
"""
Feedback CRUD Operations
"""

from sqlalchemy.orm import Session
from sqlalchemy import func
from typing import List

from mentorconnect.models.feedback import Feedback
from mentorconnect.models.mentor import Mentor


def create_feedback(
    db: Session,
    session_id: int,
    student_id: int,
    mentor_id: int,
    rating: int,
    comment: str = "",
) -> Feedback:
    """
    Create a feedback row for a session.

    Raises:
        ValueError: If rating is out of range
    """
    if not (1 <= rating <= 5):
        raise ValueError("Rating must be between 1 and 5")

    feedback = Feedback(
        session_id=session_id,
        student_id=student_id,
        mentor_id=mentor_id,
        rating=rating,
        comment=comment or "",
    )
    db.add(feedback)
    db.flush()
    return feedback


def list_feedback_for_session(db: Session, session_id: int) -> List[Feedback]:
    return (
        db.query(Feedback)
        .filter(Feedback.session_id == session_id)
        .order_by(Feedback.created_at.asc(), Feedback.id.asc())
        .all()
    )


def refresh_mentor_rating(db: Session, mentor_id: int) -> float:
    """
    Recompute a mentor's average rating from all of their feedback.

    Returns:
        The new average rounded to 2 decimals (0.0 without feedback)
    """
    average = db.query(func.avg(Feedback.rating)).filter(
        Feedback.mentor_id == mentor_id
    ).scalar()
    average = round(float(average), 2) if average is not None else 0.0

    mentor = db.query(Mentor).filter(Mentor.id == mentor_id).first()
    if mentor:
        mentor.average_rating = average
        db.flush()
    return average

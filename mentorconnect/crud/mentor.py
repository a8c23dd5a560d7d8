# mentorconnect/crud/mentor.py
"""
Mentor read queries backing the directory and dashboard.
"""

from sqlalchemy.orm import Session, contains_eager
from typing import List

from mentorconnect.models.mentor import Mentor
from mentorconnect.models.profile import Profile


def list_mentors_with_profiles(db: Session) -> List[Mentor]:
    """
    All mentors inner-joined with their profile, best rated first.

    Mentors whose profile row is missing are dropped by the join.
    """
    return (
        db.query(Mentor)
        .join(Mentor.profile)
        .options(contains_eager(Mentor.profile))
        .order_by(Mentor.average_rating.desc(), Profile.full_name.asc())
        .all()
    )


def count_mentors(db: Session) -> int:
    return db.query(Mentor.id).count()

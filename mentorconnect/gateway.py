# mentorconnect/gateway.py
"""
Data gateway used by the client views.

Every call opens its own ORM session, so concurrent fetches never share
state. Results come back as plain row dictionaries (the shape a remote
store returns), never as live ORM objects. Any database failure is raised
as ``GatewayError``.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import date
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from mentorconnect.crud import feedback as feedback_crud
from mentorconnect.crud import mentor as mentor_crud
from mentorconnect.crud import session as session_crud
from mentorconnect.database import SessionLocal
from mentorconnect.models.mentor import Mentor
from mentorconnect.models.session import Session as SessionModel

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


class GatewayError(Exception):
    """A read or write against the data store failed."""


def _mentor_row(mentor: Mentor) -> Row:
    profile = mentor.profile
    return {
        "id": mentor.id,
        "bio": mentor.bio,
        "expertise": mentor.expertise,
        "languages": mentor.languages,
        "experience_years": mentor.experience_years,
        "hourly_rate": mentor.hourly_rate,
        "average_rating": mentor.average_rating,
        "total_sessions": mentor.total_sessions,
        "profile": {
            "full_name": profile.full_name,
            "email": profile.email,
            "avatar_url": profile.avatar_url,
        },
    }


def _session_row(session: SessionModel) -> Row:
    row = {
        "id": session.id,
        "student_id": session.student_id,
        "mentor_id": session.mentor_id,
        "topic": session.topic,
        "scheduled_date": session.scheduled_date,
        "scheduled_time": session.scheduled_time,
        "duration_minutes": session.duration_minutes,
        "status": session.status,
        "additional_notes": session.additional_notes,
        "created_at": session.created_at,
    }
    mentor = session.mentor
    if mentor is not None and mentor.profile is not None:
        row["mentor_profile"] = {
            "full_name": mentor.profile.full_name,
            "avatar_url": mentor.profile.avatar_url,
        }
    return row


class DataGateway:
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    @contextmanager
    def _session(self, write: bool = False) -> Iterator[Session]:
        db = self._session_factory()
        try:
            yield db
            if write:
                db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            raise GatewayError(str(exc)) from exc
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    # ======================
    # MENTORS
    # ======================

    def list_mentors(self) -> List[Row]:
        with self._session() as db:
            return [_mentor_row(m) for m in mentor_crud.list_mentors_with_profiles(db)]

    def count_mentors(self) -> int:
        with self._session() as db:
            return mentor_crud.count_mentors(db)

    # ======================
    # SESSIONS
    # ======================

    def list_student_sessions(
        self,
        student_id: int,
        ascending: bool = False,
        limit: Optional[int] = None,
    ) -> List[Row]:
        with self._session() as db:
            sessions = session_crud.list_sessions_for_student(
                db, student_id, ascending=ascending, limit=limit
            )
            return [_session_row(s) for s in sessions]

    def create_session(
        self,
        *,
        student_id: int,
        mentor_id: int,
        topic: str,
        scheduled_date: date,
        scheduled_time: str,
        duration_minutes: int = 60,
        additional_notes: Optional[str] = None,
    ) -> Row:
        with self._session(write=True) as db:
            session = session_crud.create_session(
                db,
                student_id=student_id,
                mentor_id=mentor_id,
                topic=topic,
                scheduled_date=scheduled_date,
                scheduled_time=scheduled_time,
                duration_minutes=duration_minutes,
                additional_notes=additional_notes,
                status="scheduled",
            )
            row = _session_row(session)
        logger.info("Session %s booked with mentor %s", row["id"], mentor_id)
        return row

    # ======================
    # FEEDBACK
    # ======================

    def create_feedback(
        self,
        *,
        session_id: int,
        student_id: int,
        mentor_id: int,
        rating: int,
        comment: str = "",
    ) -> Row:
        with self._session(write=True) as db:
            feedback = feedback_crud.create_feedback(
                db,
                session_id=session_id,
                student_id=student_id,
                mentor_id=mentor_id,
                rating=rating,
                comment=comment,
            )
            # Stored aggregate; recomputed on every insert
            feedback_crud.refresh_mentor_rating(db, mentor_id)
            row = {
                "id": feedback.id,
                "session_id": feedback.session_id,
                "student_id": feedback.student_id,
                "mentor_id": feedback.mentor_id,
                "rating": feedback.rating,
                "comment": feedback.comment,
            }
        logger.info("Feedback %s stored for session %s", row["id"], session_id)
        return row


gateway = DataGateway(SessionLocal)


def get_gateway() -> DataGateway:
    return gateway

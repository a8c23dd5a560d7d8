"""Pytest bootstrap and shared fixtures."""

from datetime import date, timedelta
from pathlib import Path
import sys

import pytest
from sqlalchemy.orm import sessionmaker

# Ensure project root is on sys.path so `import mentorconnect` works
PROJECT_ROOT = Path(__file__).resolve().parents[1]
project_root_str = str(PROJECT_ROOT)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

from mentorconnect import models  # noqa: E402
from mentorconnect.database import Base, create_db_engine  # noqa: E402
from mentorconnect.gateway import DataGateway, GatewayError  # noqa: E402
from mentorconnect.schemas.auth import UserOut  # noqa: E402


# ======================
# TEST DATABASE SETUP
# ======================

@pytest.fixture
def session_factory(tmp_path):
    """File-backed SQLite so threadpool fetches see the same data."""
    engine = create_db_engine(f"sqlite:///{tmp_path / 'mentorconnect-test.db'}")
    Base.metadata.create_all(engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    yield factory

    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    session = session_factory()

    yield session

    session.close()


@pytest.fixture
def gateway(session_factory):
    return DataGateway(session_factory)


@pytest.fixture
def broken():
    """Stand-in for a gateway call against an unreachable store."""
    def _broken(*args, **kwargs):
        raise GatewayError("connection refused")
    return _broken


# ======================
# SEED DATA
# ======================

def add_profile(db, email, full_name, role="student"):
    profile = models.Profile(
        email=email,
        full_name=full_name,
        password_hash="hash",
        role=role,
    )
    db.add(profile)
    db.flush()
    return profile


def add_mentor(db, email, full_name, **fields):
    profile = add_profile(db, email, full_name, role="mentor")
    mentor = models.Mentor(id=profile.id, **fields)
    db.add(mentor)
    db.flush()
    return mentor


def add_session(db, student_id, mentor_id, days_from_today, status="scheduled", topic="Mentoring"):
    session = models.Session(
        student_id=student_id,
        mentor_id=mentor_id,
        topic=topic,
        scheduled_date=date.today() + timedelta(days=days_from_today),
        scheduled_time="10:00",
        duration_minutes=60,
        status=status,
    )
    db.add(session)
    db.flush()
    return session


@pytest.fixture
def seeded(db_session):
    """One student, three mentors and a handful of sessions."""
    student = add_profile(db_session, "sam@student.edu", "Sam Student")
    other_student = add_profile(db_session, "olive@student.edu", "Olive Other")

    ada = add_mentor(
        db_session,
        "ada@mentors.io",
        "Ada Lovelace",
        bio="Loves algorithms and analytical engines.",
        expertise=["Python", "Data Science"],
        languages=["English"],
        experience_years=10,
        hourly_rate=75.0,
        average_rating=4.8,
        total_sessions=12,
    )
    grace = add_mentor(
        db_session,
        "grace@mentors.io",
        "Grace Hopper",
        bio="Compiler pioneer, happy to talk careers.",
        expertise=["Compilers", "Career Advice"],
        languages=["English", "Spanish"],
        experience_years=30,
        average_rating=4.9,
        total_sessions=40,
    )
    # Sparse mentor row: every optional field left empty
    alan = add_mentor(
        db_session,
        "alan@mentors.io",
        "Alan Turing",
        bio=None,
        expertise=None,
        languages=None,
        experience_years=None,
        hourly_rate=None,
        average_rating=None,
        total_sessions=None,
    )

    past_completed = add_session(db_session, student.id, ada.id, -10, "completed", "Resume review")
    past_cancelled = add_session(db_session, student.id, grace.id, -5, "cancelled", "Mock interview")
    upcoming = add_session(db_session, student.id, grace.id, 7, "scheduled", "Career planning")
    add_session(db_session, other_student.id, ada.id, 3, "scheduled", "Not Sam's session")
    db_session.commit()

    return {
        "student": UserOut.model_validate(student),
        "mentors": {"ada": ada.id, "grace": grace.id, "alan": alan.id},
        "sessions": {
            "completed": past_completed.id,
            "cancelled": past_cancelled.id,
            "scheduled": upcoming.id,
        },
    }

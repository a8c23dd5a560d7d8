"""
Dashboard aggregates: concurrent fetch join and derived stats.
"""

import asyncio

from conftest import add_mentor, add_profile, add_session
from mentorconnect.schemas.auth import UserOut
from mentorconnect.schemas.dashboard import DashboardStats
from mentorconnect.services.dashboard import load_dashboard
from mentorconnect.views.dashboard import DashboardView


def _populate(db, mentor_count, statuses):
    student = add_profile(db, "dash@student.edu", "Dana Dashboard")
    mentor_ids = [
        add_mentor(db, f"mentor{i}@mentors.io", f"Mentor {i}", average_rating=4.0).id
        for i in range(mentor_count)
    ]
    for offset, status in enumerate(statuses):
        add_session(db, student.id, mentor_ids[0], offset + 1, status, f"Topic {offset}")
    db.commit()
    return UserOut.model_validate(student)


def test_dashboard_stats_from_counts(gateway, db_session):
    user = _populate(
        db_session,
        42,
        ["scheduled", "completed", "scheduled", "completed", "scheduled"],
    )

    stats, upcoming = asyncio.run(load_dashboard(gateway, user.id))

    assert stats.total_mentors == 42
    assert stats.upcoming_sessions == 3
    assert stats.completed_sessions == 2
    assert stats.average_rating == 0.0
    assert [s.topic for s in upcoming] == ["Topic 0", "Topic 2", "Topic 4"]


def test_dashboard_counts_only_the_nearest_five(gateway, db_session):
    # Sixth session is scheduled but falls outside the fetched window
    user = _populate(
        db_session,
        1,
        ["completed", "completed", "completed", "completed", "scheduled", "scheduled"],
    )

    stats, upcoming = asyncio.run(load_dashboard(gateway, user.id))

    assert stats.completed_sessions == 4
    assert stats.upcoming_sessions == 1
    assert len(upcoming) == 1


def test_dashboard_view_greets_and_loads(gateway, db_session):
    user = _populate(db_session, 2, ["scheduled"])
    view = DashboardView(gateway, user)

    asyncio.run(view.mount())

    payload = view.to_payload()
    assert payload["greeting"] == "Welcome back, Dana Dashboard!"
    assert payload["loading"] is False
    assert payload["stats"]["total_mentors"] == 2
    assert payload["stats"]["upcoming_sessions"] == 1
    assert payload["upcoming_sessions"][0]["mentor_name"] == "Mentor 0"


def test_dashboard_join_failure_keeps_defaults(gateway, db_session, broken, monkeypatch):
    user = _populate(db_session, 3, ["scheduled", "completed"])
    # Session fetch alone fails: the mentor count must not be applied either
    monkeypatch.setattr(gateway, "list_student_sessions", broken)
    view = DashboardView(gateway, user)

    asyncio.run(view.mount())

    assert view.loading is False
    assert view.stats == DashboardStats()
    assert view.upcoming_sessions == []

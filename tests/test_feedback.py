"""
Feedback submission: rating gate, insert, confirmation and skip.
"""

import asyncio

import pytest

from mentorconnect import models
from mentorconnect.crud import feedback as feedback_crud
from mentorconnect.services.feedback import (
    SELECT_RATING_PROMPT,
    rating_label,
    submit_feedback,
)
from mentorconnect.views.feedback import FEEDBACK_FAILED_ALERT, FeedbackView


def _feedback_count(db):
    db.expire_all()
    return db.query(models.Feedback).count()


@pytest.fixture
def target(seeded):
    return {
        "student_id": seeded["student"].id,
        "session_id": seeded["sessions"]["completed"],
        "mentor_id": seeded["mentors"]["ada"],
    }


def _view(gateway, target, on_complete, delay=0):
    return FeedbackView(
        gateway,
        target["student_id"],
        target["session_id"],
        target["mentor_id"],
        on_complete=on_complete,
        confirmation_delay=delay,
    )


def test_rating_labels():
    assert [rating_label(r) for r in range(1, 6)] == ["Poor", "Fair", "Good", "Very Good", "Excellent"]
    assert rating_label(0) is None


def test_service_blocks_unset_rating(gateway, target, db_session):
    with pytest.raises(ValueError, match=SELECT_RATING_PROMPT):
        submit_feedback(gateway, target["session_id"], target["student_id"], target["mentor_id"], 0)
    assert _feedback_count(db_session) == 0


@pytest.mark.parametrize("rating", [1, 2, 3, 4, 5])
def test_service_accepts_ratings_one_to_five(gateway, target, db_session, rating):
    row = submit_feedback(gateway, target["session_id"], target["student_id"], target["mentor_id"], rating, "ok")
    assert row["rating"] == rating
    assert _feedback_count(db_session) == 1


def test_view_unset_rating_prompts_without_insert(gateway, target, db_session):
    completed = []
    view = _view(gateway, target, lambda: completed.append(True))
    assert view.can_submit is False

    ok = asyncio.run(view.submit())

    assert ok is False
    assert view.alert == SELECT_RATING_PROMPT
    assert completed == []
    assert _feedback_count(db_session) == 0


def test_view_submit_confirms_then_completes(gateway, target, db_session):
    completed = []
    view = _view(gateway, target, lambda: completed.append(True), delay=0.05)
    view.set_rating(4)
    view.set_comment("Very helpful")
    assert view.can_submit is True

    async def scenario():
        ok = await view.submit()
        assert ok is True
        assert view.success is True
        assert completed == []
        await asyncio.sleep(0.2)

    asyncio.run(scenario())

    assert completed == [True]
    db_session.expire_all()
    stored = db_session.query(models.Feedback).one()
    assert (stored.rating, stored.comment) == (4, "Very helpful")
    assert stored.session_id == target["session_id"]
    assert stored.mentor_id == target["mentor_id"]
    # Stored aggregate follows the new feedback
    mentor = db_session.get(models.Mentor, target["mentor_id"])
    assert mentor.average_rating == 4.0


def test_view_submit_failure_alerts_and_allows_retry(gateway, target, db_session, broken, monkeypatch):
    completed = []
    view = _view(gateway, target, lambda: completed.append(True))
    view.set_rating(5)

    monkeypatch.setattr(gateway, "create_feedback", broken)
    assert asyncio.run(view.submit()) is False
    assert view.alert == FEEDBACK_FAILED_ALERT
    assert view.rating == 5
    assert completed == []

    monkeypatch.undo()

    async def retry():
        ok = await view.submit()
        await asyncio.sleep(0.05)
        return ok

    assert asyncio.run(retry()) is True
    assert view.alert is None
    assert completed == [True]
    assert _feedback_count(db_session) == 1


def test_skip_completes_immediately_without_insert(gateway, target, db_session):
    completed = []
    view = _view(gateway, target, lambda: completed.append(True), delay=10)
    view.skip()
    assert completed == [True]
    assert _feedback_count(db_session) == 0


def test_set_rating_out_of_range(gateway, target):
    view = _view(gateway, target, lambda: None)
    with pytest.raises(ValueError):
        view.set_rating(6)


def test_duplicate_feedback_for_same_session_is_stored(gateway, target, db_session):
    for rating in (5, 3):
        submit_feedback(gateway, target["session_id"], target["student_id"], target["mentor_id"], rating)

    rows = feedback_crud.list_feedback_for_session(db_session, target["session_id"])
    assert [r.rating for r in rows] == [5, 3]
    db_session.expire_all()
    assert db_session.get(models.Mentor, target["mentor_id"]).average_rating == 4.0

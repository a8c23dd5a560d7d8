"""
Mentor profile booking: scheduled session insert, confirmation, and
return to the directory after the confirmation delay.
"""

import asyncio
from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from mentorconnect import models
from mentorconnect.schemas.session import BookingRequest
from mentorconnect.services.booking import book_session, min_booking_date
from mentorconnect.services.directory import load_mentors
from mentorconnect.views.base import ViewActionError
from mentorconnect.views.profile import BOOKING_FAILED_ALERT, MentorProfileView


def _mentor(gateway, name):
    return next(m for m in load_mentors(gateway) if m.full_name == name)


def _sessions_for(db, student_id):
    db.expire_all()
    return db.query(models.Session).filter(models.Session.student_id == student_id).all()


def test_book_session_creates_scheduled_session(gateway, seeded, db_session):
    mentor = _mentor(gateway, "Ada Lovelace")
    student_id = seeded["student"].id
    before = len(_sessions_for(db_session, student_id))

    row = book_session(gateway, student_id, mentor, "Resume review", date(2099, 1, 1), "10:00", "Bring CV")

    assert row["status"] == "scheduled"
    assert row["mentor_id"] == mentor.id
    sessions = _sessions_for(db_session, student_id)
    assert len(sessions) == before + 1
    created = next(s for s in sessions if s.id == row["id"])
    assert created.topic == "Resume review"
    assert created.scheduled_date == date(2099, 1, 1)
    assert created.scheduled_time == "10:00"
    assert created.additional_notes == "Bring CV"
    assert created.duration_minutes == 60


def test_book_session_requires_topic(gateway, seeded):
    mentor = _mentor(gateway, "Ada Lovelace")
    with pytest.raises(ValueError, match="Topic"):
        book_session(gateway, seeded["student"].id, mentor, "   ", date(2099, 1, 1), "10:00")


def test_min_booking_date_is_today():
    assert min_booking_date() == date.today()


def test_booking_request_restricts_date_to_today_or_later():
    BookingRequest(topic="Resume review", date=date.today(), time="10:00")
    with pytest.raises(ValidationError):
        BookingRequest(topic="Resume review", date=date.today() - timedelta(days=1), time="10:00")
    with pytest.raises(ValidationError):
        BookingRequest(topic="Resume review", date=date.today(), time="25:00")
    with pytest.raises(ValidationError):
        BookingRequest(topic="", date=date.today(), time="10:00")


def test_profile_books_then_returns_after_delay(gateway, seeded, db_session):
    mentor = _mentor(gateway, "Grace Hopper")
    backs = []
    view = MentorProfileView(gateway, seeded["student"].id, mentor, on_back=lambda: backs.append(True),
                             confirmation_delay=0.05)

    async def scenario():
        await view.mount()
        view.open_booking_form()
        ok = await view.book("Resume review", date(2099, 1, 1), "10:00")
        assert ok is True
        # Confirmation is visible before control returns
        assert view.success is True
        assert view.loading is False
        assert backs == []
        await asyncio.sleep(0.2)

    asyncio.run(scenario())

    assert backs == [True]
    topics = [s.topic for s in _sessions_for(db_session, seeded["student"].id)]
    assert "Resume review" in topics


def test_profile_booking_failure_alerts_and_keeps_form(gateway, seeded, broken, monkeypatch):
    mentor = _mentor(gateway, "Grace Hopper")
    monkeypatch.setattr(gateway, "create_session", broken)
    backs = []
    view = MentorProfileView(gateway, seeded["student"].id, mentor, on_back=lambda: backs.append(True),
                             confirmation_delay=0)

    async def scenario():
        view.open_booking_form()
        ok = await view.book("Resume review", date(2099, 1, 1), "10:00")
        await asyncio.sleep(0.05)
        return ok

    assert asyncio.run(scenario()) is False
    assert view.alert == BOOKING_FAILED_ALERT
    assert view.show_booking_form is True
    assert view.success is False
    assert view.loading is False
    assert backs == []


def test_profile_booking_needs_open_form(gateway, seeded):
    mentor = _mentor(gateway, "Grace Hopper")
    view = MentorProfileView(gateway, seeded["student"].id, mentor, on_back=lambda: None)

    with pytest.raises(ViewActionError):
        asyncio.run(view.book("Resume review", date(2099, 1, 1), "10:00"))


def test_cancel_booking_form_hides_it(gateway, seeded):
    mentor = _mentor(gateway, "Grace Hopper")
    view = MentorProfileView(gateway, seeded["student"].id, mentor, on_back=lambda: None)
    view.open_booking_form()
    view.cancel_booking_form()
    payload = view.to_payload()
    assert payload["show_booking_form"] is False
    assert payload["min_date"] == date.today().isoformat()
    assert payload["mentor"]["full_name"] == "Grace Hopper"

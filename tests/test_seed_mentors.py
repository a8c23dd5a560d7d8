from mentorconnect import models
from mentorconnect.scripts import seed_mentors as seed_script


def _point_at_test_db(monkeypatch, session_factory):
    monkeypatch.setattr(seed_script, "SessionLocal", session_factory)
    monkeypatch.setattr(seed_script, "engine", session_factory.kw["bind"])


def test_seed_requires_opt_in(monkeypatch, session_factory):
    _point_at_test_db(monkeypatch, session_factory)
    monkeypatch.delenv("ENABLE_DEMO_SEED", raising=False)

    assert seed_script.seed_mentors() == 1


def test_seed_requires_password(monkeypatch, session_factory):
    _point_at_test_db(monkeypatch, session_factory)
    monkeypatch.setenv("ENABLE_DEMO_SEED", "true")
    monkeypatch.setenv("DEMO_MENTOR_PASSWORD", "abc")

    assert seed_script.seed_mentors() == 1


def test_seed_is_idempotent(monkeypatch, session_factory, db_session):
    _point_at_test_db(monkeypatch, session_factory)
    monkeypatch.setenv("ENABLE_DEMO_SEED", "yes")
    monkeypatch.setenv("DEMO_MENTOR_PASSWORD", "Password@123")

    assert seed_script.seed_mentors() == 0
    assert seed_script.seed_mentors() == 0

    mentors = db_session.query(models.Mentor).all()
    assert len(mentors) == len(seed_script.DEMO_MENTORS)
    assert all(m.profile.role == "mentor" for m in mentors)

"""
Identity gating, sign-out and password reset.
"""

import pytest

from mentorconnect import identity as identity_module
from mentorconnect.identity import (
    SHELL_LANDING,
    SHELL_LOADING,
    SHELL_WORKSPACE,
    IdentityContext,
    resolve_shell,
)
from mentorconnect.utils.security import (
    create_access_token,
    create_reset_token,
    get_password_hash,
    reset_token_is_current,
    verify_password,
    verify_reset_token,
)
from mentorconnect.views.navigation import View
from mentorconnect.views.workspace import WorkspaceRegistry


def test_pending_identity_renders_loading(seeded):
    assert resolve_shell(IdentityContext(None, loading=True)) == SHELL_LOADING
    # Loading wins even once a user object is present
    assert resolve_shell(IdentityContext(seeded["student"], loading=True)) == SHELL_LOADING


def test_resolved_identity_routes_to_landing_or_workspace(seeded):
    assert resolve_shell(IdentityContext(None)) == SHELL_LANDING
    assert resolve_shell(IdentityContext(seeded["student"])) == SHELL_WORKSPACE


def test_sign_out_discards_workspace(gateway, seeded):
    registry = WorkspaceRegistry(gateway)
    user = seeded["student"]
    workspace = registry.get_or_create(user)
    workspace.navigation.navigate(View.SESSIONS)

    identity = IdentityContext(user, registry=registry)
    identity.sign_out()

    assert identity.user is None
    assert user.id not in registry
    assert resolve_shell(identity) == SHELL_LANDING
    # Signing back in starts over on the dashboard
    assert registry.get_or_create(user).navigation.current_view == View.HOME


def test_reset_password_without_email_configured(db_session, monkeypatch):
    monkeypatch.setattr(identity_module, "is_email_enabled", lambda: False)
    result = IdentityContext(None, db=db_session).reset_password("sam@student.edu")
    assert result.ok is False
    assert result.error


def test_reset_password_sends_link_for_known_address(db_session, seeded, monkeypatch):
    sent = []
    monkeypatch.setattr(identity_module, "is_email_enabled", lambda: True)
    monkeypatch.setattr(
        identity_module,
        "send_password_reset_email",
        lambda to_email, token: sent.append((to_email, token)) or True,
    )

    result = IdentityContext(None, db=db_session).reset_password("  SAM@student.edu ")

    assert result.ok is True
    assert sent[0][0] == "sam@student.edu"
    assert verify_reset_token(sent[0][1]).email == "sam@student.edu"


def test_reset_password_unknown_address_looks_the_same(db_session, seeded, monkeypatch):
    sent = []
    monkeypatch.setattr(identity_module, "is_email_enabled", lambda: True)
    monkeypatch.setattr(
        identity_module,
        "send_password_reset_email",
        lambda to_email, token: sent.append(to_email) or True,
    )

    result = IdentityContext(None, db=db_session).reset_password("nobody@student.edu")

    assert result.ok is True
    assert sent == []


def test_reset_password_send_failure(db_session, seeded, monkeypatch):
    monkeypatch.setattr(identity_module, "is_email_enabled", lambda: True)
    monkeypatch.setattr(identity_module, "send_password_reset_email", lambda to_email, token: False)

    result = IdentityContext(None, db=db_session).reset_password("sam@student.edu")

    assert result.ok is False


def test_access_token_is_not_a_reset_token():
    access = create_access_token(data={"sub": "sam@student.edu", "role": "student"})
    assert verify_reset_token(access) is None
    assert verify_reset_token("not-a-jwt") is None
    assert verify_reset_token(create_reset_token("sam@student.edu", "hash")).email == "sam@student.edu"


def test_reset_token_is_bound_to_the_password_hash():
    token_data = verify_reset_token(create_reset_token("sam@student.edu", "old-hash"))

    assert reset_token_is_current(token_data, "old-hash") is True
    assert reset_token_is_current(token_data, "new-hash") is False


@pytest.mark.parametrize("password", ["secret123", "p" * 80])
def test_password_hash_roundtrip(password):
    hashed = get_password_hash(password)
    assert verify_password(password[:72], hashed)
    assert not verify_password("wrong-password", hashed)

# mentorconnect/identity.py
"""
Identity handle passed to the client layer.

The views never reach for the current user on their own; the API resolves
an ``IdentityContext`` per request and hands it down.
"""

import logging
from typing import Optional

from pydantic import BaseModel
from sqlalchemy.orm import Session

from mentorconnect.crud import profile as profile_crud
from mentorconnect.schemas.auth import UserOut
from mentorconnect.utils.email import is_email_enabled, send_password_reset_email
from mentorconnect.utils.security import create_reset_token
from mentorconnect.views.workspace import WorkspaceRegistry

logger = logging.getLogger(__name__)

SHELL_LOADING = "loading"
SHELL_LANDING = "landing"
SHELL_WORKSPACE = "workspace"


class ActionResult(BaseModel):
    ok: bool
    error: Optional[str] = None


class IdentityContext:
    def __init__(
        self,
        user: Optional[UserOut],
        loading: bool = False,
        *,
        db: Optional[Session] = None,
        registry: Optional[WorkspaceRegistry] = None,
    ) -> None:
        self.user = user
        self.loading = loading
        self._db = db
        self._registry = registry

    def sign_out(self) -> None:
        """Forget the user; their workspace and all view state go with them."""
        if self.user is not None and self._registry is not None:
            self._registry.discard(self.user.id)
        self.user = None

    def reset_password(self, email: str) -> ActionResult:
        if not is_email_enabled():
            logger.warning("Password reset requested but email is not configured")
            return ActionResult(ok=False, error="Password reset email is not available right now")

        normalized = email.strip().lower()
        profile = profile_crud.get_profile_by_email(self._db, normalized) if self._db is not None else None
        if profile is None:
            # Same answer either way, so addresses cannot be probed
            logger.info("Password reset requested for unknown address")
            return ActionResult(ok=True)

        token = create_reset_token(profile.email, profile.password_hash)
        if not send_password_reset_email(profile.email, token):
            return ActionResult(ok=False, error="Could not send the reset email. Please try again.")
        return ActionResult(ok=True)


def resolve_shell(identity: IdentityContext) -> str:
    """Which top-level surface to draw for this identity."""
    if identity.loading:
        return SHELL_LOADING
    if identity.user is None:
        return SHELL_LANDING
    return SHELL_WORKSPACE

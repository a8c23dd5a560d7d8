# mentorconnect/api/deps.py
from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from mentorconnect.database import get_db
from mentorconnect.gateway import get_gateway
from mentorconnect.identity import IdentityContext
from mentorconnect.schemas.auth import UserOut
from mentorconnect.utils.security import get_current_user, get_optional_user
from mentorconnect.views.workspace import Workspace, WorkspaceRegistry

registry = WorkspaceRegistry(get_gateway())


def get_registry() -> WorkspaceRegistry:
    return registry


def get_identity(
    user=Depends(get_optional_user),
    db: Session = Depends(get_db),
    workspaces: WorkspaceRegistry = Depends(get_registry),
) -> IdentityContext:
    return IdentityContext(
        UserOut.model_validate(user) if user is not None else None,
        loading=False,
        db=db,
        registry=workspaces,
    )


def get_signed_in_identity(identity: IdentityContext = Depends(get_identity)) -> IdentityContext:
    if identity.user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return identity


def get_workspace(
    current_user=Depends(get_current_user),
    workspaces: WorkspaceRegistry = Depends(get_registry),
) -> Workspace:
    return workspaces.get_or_create(UserOut.model_validate(current_user))

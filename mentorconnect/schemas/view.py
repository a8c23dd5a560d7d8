from pydantic import BaseModel
from typing import Any, Dict, Literal, Optional

from mentorconnect.schemas.auth import UserOut

ViewName = Literal["home", "mentors", "sessions", "feedback"]

# ======================
# NAVIGATION MODELS
# ======================

class NavigateRequest(BaseModel):
    view: str


class ScreenResponse(BaseModel):
    """What the shell should draw right now."""
    shell: Literal["loading", "landing", "workspace"]
    user: Optional[UserOut] = None
    current_view: Optional[ViewName] = None
    screen: Optional[str] = None
    data: Dict[str, Any] = {}

# mentorconnect/models/__init__.py
# Import models in dependency order
from .profile import Profile
from .mentor import Mentor
from .session import Session, SESSION_STATUSES
from .feedback import Feedback

__all__ = ["Profile", "Mentor", "Session", "SESSION_STATUSES", "Feedback"]

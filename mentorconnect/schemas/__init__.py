# mentorconnect/schemas/__init__.py

# Auth schemas
from .auth import (
    Token,
    TokenData,
    LoginRequest,
    RegisterRequest,
    PasswordResetRequest,
    PasswordResetConfirm,
    UserOut,
)

# Directory and session schemas
from .mentor import MentorCard, MentorFilters
from .session import SessionCard, StatusBadge, SessionFilter, BookingRequest
from .feedback import FeedbackFormUpdate
from .dashboard import DashboardStats
from .view import NavigateRequest, ScreenResponse

__all__ = [
    "Token",
    "TokenData",
    "LoginRequest",
    "RegisterRequest",
    "PasswordResetRequest",
    "PasswordResetConfirm",
    "UserOut",
    "MentorCard",
    "MentorFilters",
    "SessionCard",
    "StatusBadge",
    "SessionFilter",
    "BookingRequest",
    "FeedbackFormUpdate",
    "DashboardStats",
    "NavigateRequest",
    "ScreenResponse",
]

from datetime import date, datetime
from pydantic import BaseModel, Field, field_validator
from typing import Literal, Optional

SessionStatusFilter = Literal["all", "scheduled", "completed", "cancelled"]

# ======================
# SESSION DISPLAY MODELS
# ======================

class SessionCard(BaseModel):
    id: int
    student_id: int
    mentor_id: int
    mentor_name: str = ""
    mentor_avatar: Optional[str] = None
    topic: str
    scheduled_date: date
    scheduled_time: str
    duration_minutes: int = 60
    status: str
    additional_notes: Optional[str] = None
    created_at: Optional[datetime] = None


class StatusBadge(BaseModel):
    label: str
    tone: Literal["informational", "positive", "negative", "neutral"]


class SessionFilter(BaseModel):
    status: SessionStatusFilter = "all"

# ======================
# BOOKING REQUEST MODELS
# ======================

class BookingRequest(BaseModel):
    topic: str = Field(..., min_length=1, max_length=255)
    date: date
    time: str = Field(..., pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    notes: Optional[str] = None

    @field_validator("topic")
    @classmethod
    def validate_topic(cls, v):
        if v.strip() == "":
            raise ValueError("Topic cannot be empty")
        return v.strip()

    @field_validator("date")
    @classmethod
    def validate_date(cls, v):
        # Mirrors the date input's min attribute
        if v < date.today():
            raise ValueError("Date must be today or later")
        return v

from pydantic import BaseModel, Field
from typing import List, Optional

# ======================
# MENTOR DIRECTORY MODELS
# ======================

class MentorCard(BaseModel):
    """Mentor record joined with its profile, as shown in the directory."""
    id: int
    full_name: str
    email: str
    avatar_url: Optional[str] = None
    expertise: List[str] = Field(default_factory=list)
    bio: str = ""
    experience_years: int = 0
    languages: List[str] = Field(default_factory=list)
    hourly_rate: Optional[float] = None
    average_rating: float = 0.0
    total_sessions: int = 0


class MentorFilters(BaseModel):
    query: str = ""
    expertise: str = "all"

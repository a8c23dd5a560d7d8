from pydantic import BaseModel


class DashboardStats(BaseModel):
    total_mentors: int = 0
    upcoming_sessions: int = 0
    completed_sessions: int = 0
    # Not computed from any data yet
    average_rating: float = 0.0

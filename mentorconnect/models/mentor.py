# mentorconnect/models/mentor.py
from sqlalchemy import Column, Integer, Text, Float, ForeignKey, TIMESTAMP, JSON, func
from sqlalchemy.orm import relationship
from mentorconnect.database import Base


class Mentor(Base):
    __tablename__ = "mentors"

    # Shares its primary key with the profile it extends
    id = Column(Integer, ForeignKey("profiles.id", ondelete="CASCADE"), primary_key=True)
    bio = Column(Text)
    expertise = Column(JSON)
    languages = Column(JSON)
    experience_years = Column(Integer, default=0)
    hourly_rate = Column(Float)
    # Recomputed server-side from feedback, read-only for the client
    average_rating = Column(Float, default=0.0)
    total_sessions = Column(Integer, default=0)
    created_at = Column(TIMESTAMP, server_default=func.now())

    profile = relationship("Profile", back_populates="mentor")
    sessions = relationship("Session", back_populates="mentor")

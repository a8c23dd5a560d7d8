# mentorconnect/models/session.py
from sqlalchemy import Column, Integer, String, Text, Date, ForeignKey, TIMESTAMP, CheckConstraint, func
from sqlalchemy.orm import relationship
from mentorconnect.database import Base

SESSION_STATUSES = ("scheduled", "completed", "cancelled")


class Session(Base):
    __tablename__ = "sessions"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    mentor_id = Column(Integer, ForeignKey("mentors.id", ondelete="CASCADE"), nullable=False)
    topic = Column(String(255), nullable=False)
    scheduled_date = Column(Date, nullable=False)
    scheduled_time = Column(String(5), nullable=False)  # HH:MM
    duration_minutes = Column(Integer, default=60, nullable=False)
    status = Column(String(20), default="scheduled", nullable=False)
    additional_notes = Column(Text)
    created_at = Column(TIMESTAMP, server_default=func.now())

    __table_args__ = (
        CheckConstraint(
            "status IN ('scheduled', 'completed', 'cancelled')",
            name="check_session_status",
        ),
    )

    # Relationships
    student = relationship("Profile", foreign_keys=[student_id], back_populates="student_sessions")
    mentor = relationship("Mentor", back_populates="sessions")
    feedback = relationship("Feedback", back_populates="session")

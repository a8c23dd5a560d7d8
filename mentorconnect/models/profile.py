# mentorconnect/models/profile.py
from sqlalchemy import Column, Integer, String, TIMESTAMP, CheckConstraint, func
from sqlalchemy.orm import relationship
from mentorconnect.database import Base


# ---------------- PROFILE (AUTH TABLE) ----------------
class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    full_name = Column(String(100), nullable=False)
    role = Column(String(20), nullable=False, default="student")
    avatar_url = Column(String(255))
    password_hash = Column(String(255), nullable=False)
    created_at = Column(TIMESTAMP, server_default=func.now())

    __table_args__ = (
        CheckConstraint("role IN ('student', 'mentor')", name="check_profile_role"),
    )

    mentor = relationship("Mentor", back_populates="profile", uselist=False, cascade="all, delete-orphan")
    student_sessions = relationship("Session", foreign_keys="Session.student_id", back_populates="student")

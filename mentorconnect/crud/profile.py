# mentorconnect/crud/profile.py
from sqlalchemy.orm import Session
from typing import List, Optional

from mentorconnect.models.mentor import Mentor
from mentorconnect.models.profile import Profile


def get_profile(db: Session, profile_id: int) -> Optional[Profile]:
    return db.query(Profile).filter(Profile.id == profile_id).first()


def get_profile_by_email(db: Session, email: str) -> Optional[Profile]:
    return db.query(Profile).filter(Profile.email == email).first()


def create_profile(
    db: Session,
    *,
    email: str,
    full_name: str,
    password_hash: str,
    role: str = "student",
    avatar_url: Optional[str] = None,
) -> Profile:
    profile = Profile(
        email=email,
        full_name=full_name,
        password_hash=password_hash,
        role=role,
        avatar_url=avatar_url,
    )
    db.add(profile)
    db.flush()
    return profile


def create_mentor(
    db: Session,
    *,
    profile_id: int,
    bio: Optional[str] = None,
    expertise: Optional[List[str]] = None,
    languages: Optional[List[str]] = None,
    experience_years: int = 0,
    hourly_rate: Optional[float] = None,
) -> Mentor:
    mentor = Mentor(
        id=profile_id,
        bio=bio,
        expertise=list(expertise or []),
        languages=list(languages or []),
        experience_years=experience_years,
        hourly_rate=hourly_rate,
        average_rating=0.0,
        total_sessions=0,
    )
    db.add(mentor)
    db.flush()
    return mentor


def update_password_hash(db: Session, profile_id: int, password_hash: str) -> Optional[Profile]:
    profile = get_profile(db, profile_id)
    if profile:
        profile.password_hash = password_hash
        db.flush()
    return profile

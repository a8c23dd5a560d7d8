import os
import sys
from typing import Optional

from mentorconnect import models
from mentorconnect.crud import profile as profile_crud
from mentorconnect.database import Base, SessionLocal, engine
from mentorconnect.utils.security import get_password_hash


DEMO_MENTORS = [
    {
        "full_name": "Priya Raman",
        "email": "priya.raman@example.com",
        "bio": "Staff engineer who has interviewed hundreds of backend candidates.",
        "expertise": ["Python", "System Design", "Career Advice"],
        "languages": ["English", "Tamil"],
        "experience_years": 12,
        "hourly_rate": 80.0,
    },
    {
        "full_name": "Marco Bellini",
        "email": "marco.bellini@example.com",
        "bio": "Product designer focused on research-led UX for early stage startups.",
        "expertise": ["UX Design", "Product Management"],
        "languages": ["English", "Italian"],
        "experience_years": 8,
        "hourly_rate": 60.0,
    },
    {
        "full_name": "Amara Okafor",
        "email": "amara.okafor@example.com",
        "bio": "Data scientist mentoring career switchers into analytics roles.",
        "expertise": ["Data Science", "Machine Learning", "Resume Review"],
        "languages": ["English", "French"],
        "experience_years": 6,
        "hourly_rate": None,
    },
]


def _is_truthy(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "y", "on"}


def seed_mentors() -> int:
    try:
        if not _is_truthy(os.getenv("ENABLE_DEMO_SEED")):
            raise ValueError("Seeding disabled. Set ENABLE_DEMO_SEED=true to run.")

        password = os.getenv("DEMO_MENTOR_PASSWORD", "").strip()
        if len(password) < 6:
            raise ValueError("DEMO_MENTOR_PASSWORD must be at least 6 characters.")

        Base.metadata.create_all(bind=engine)
        db = SessionLocal()
        try:
            created = 0
            for data in DEMO_MENTORS:
                if profile_crud.get_profile_by_email(db, data["email"]):
                    continue
                profile = profile_crud.create_profile(
                    db,
                    email=data["email"],
                    full_name=data["full_name"],
                    password_hash=get_password_hash(password),
                    role="mentor",
                )
                profile_crud.create_mentor(
                    db,
                    profile_id=profile.id,
                    bio=data["bio"],
                    expertise=data["expertise"],
                    languages=data["languages"],
                    experience_years=data["experience_years"],
                    hourly_rate=data["hourly_rate"],
                )
                created += 1

            db.commit()
            total = db.query(models.Mentor).count()
            print(f"Seeded {created} mentor(s); {total} in total.")
            return 0
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()
    except Exception as exc:
        print(f"Mentor seeding failed: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(seed_mentors())

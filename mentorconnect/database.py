# mentorconnect/database.py - Database Configuration
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from mentorconnect.config import settings

# Database URL loaded from .env via mentorconnect/config.py
DATABASE_URL = settings.DATABASE_URL


def create_db_engine(url: str, **kwargs):
    if str(url).startswith("sqlite"):
        # Gateway calls run in a threadpool
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, **kwargs)


engine = create_db_engine(DATABASE_URL)

# Session maker
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()

# Dependency to get database session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

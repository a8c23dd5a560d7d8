# mentorconnect/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mentorconnect import models  # noqa: F401 - register tables on Base.metadata
from mentorconnect.api import app_views, auth
from mentorconnect.config import settings
from mentorconnect.database import Base, engine

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create database tables
Base.metadata.create_all(bind=engine)

# Initialize FastAPI app
app = FastAPI(title="MentorConnect API")

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routers
app.include_router(auth.router)       # /auth/*
app.include_router(app_views.router)  # /app/*


@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "message": "MentorConnect API is running",
        "version": "0.1.0",
    }

# mentorconnect/api/__init__.py
# This file makes the api directory a Python package.

from . import app_views
from . import auth

__all__ = [
    "app_views",
    "auth",
]

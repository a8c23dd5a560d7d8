# mentorconnect/views/__init__.py
from .base import BaseView, ViewActionError
from .navigation import NavigationController, Rendered, Screen, View
from .workspace import Workspace, WorkspaceRegistry

__all__ = [
    "BaseView",
    "ViewActionError",
    "NavigationController",
    "Rendered",
    "Screen",
    "View",
    "Workspace",
    "WorkspaceRegistry",
]

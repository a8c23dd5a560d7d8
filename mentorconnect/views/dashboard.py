# mentorconnect/views/dashboard.py
import logging
from typing import Any, Dict, List

from mentorconnect.gateway import DataGateway, GatewayError
from mentorconnect.schemas.auth import UserOut
from mentorconnect.schemas.dashboard import DashboardStats
from mentorconnect.schemas.session import SessionCard
from mentorconnect.services.dashboard import load_dashboard
from mentorconnect.views.base import BaseView
from mentorconnect.views.navigation import Screen

logger = logging.getLogger(__name__)


class DashboardView(BaseView):
    screen = Screen.DASHBOARD

    def __init__(self, gateway: DataGateway, user: UserOut) -> None:
        super().__init__()
        self.gateway = gateway
        self.user = user
        self.stats = DashboardStats()
        self.upcoming_sessions: List[SessionCard] = []
        self.loading = True

    async def on_mount(self) -> None:
        await self.load()

    async def load(self) -> None:
        try:
            self.stats, self.upcoming_sessions = await load_dashboard(self.gateway, self.user.id)
        except GatewayError:
            logger.exception("Error loading dashboard data")
        finally:
            self.loading = False

    def to_payload(self) -> Dict[str, Any]:
        return {
            "greeting": f"Welcome back, {self.user.full_name}!",
            "loading": self.loading,
            "stats": self.stats.model_dump(),
            "upcoming_sessions": [s.model_dump(mode="json") for s in self.upcoming_sessions],
        }

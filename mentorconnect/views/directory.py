# mentorconnect/views/directory.py
import logging
from typing import Any, Callable, Dict, List

from starlette.concurrency import run_in_threadpool

from mentorconnect.gateway import DataGateway, GatewayError
from mentorconnect.schemas.mentor import MentorCard
from mentorconnect.services import directory
from mentorconnect.views.base import BaseView, ViewActionError
from mentorconnect.views.navigation import Screen

logger = logging.getLogger(__name__)


class MentorDirectoryView(BaseView):
    screen = Screen.MENTOR_DIRECTORY

    def __init__(self, gateway: DataGateway, on_select_mentor: Callable[[MentorCard], None]) -> None:
        super().__init__()
        self.gateway = gateway
        self.on_select_mentor = on_select_mentor
        self.mentors: List[MentorCard] = []
        self.loading = True
        self.search_query = ""
        self.selected_expertise = directory.ALL_EXPERTISE

    async def on_mount(self) -> None:
        await self.load()

    async def load(self) -> None:
        try:
            self.mentors = await run_in_threadpool(directory.load_mentors, self.gateway)
        except GatewayError:
            logger.exception("Error loading mentors")
            self.mentors = []
        finally:
            self.loading = False

    @property
    def filtered_mentors(self) -> List[MentorCard]:
        return directory.filter_mentors(self.mentors, self.search_query, self.selected_expertise)

    def set_filters(self, query: str = "", expertise: str = directory.ALL_EXPERTISE) -> None:
        self.search_query = query or ""
        self.selected_expertise = expertise or directory.ALL_EXPERTISE

    def select(self, mentor_id: int) -> None:
        for mentor in self.mentors:
            if mentor.id == mentor_id:
                self.on_select_mentor(mentor)
                return
        raise ViewActionError(f"Mentor {mentor_id} is not in the directory")

    def to_payload(self) -> Dict[str, Any]:
        return {
            "loading": self.loading,
            "search_query": self.search_query,
            "selected_expertise": self.selected_expertise,
            "expertise_options": directory.expertise_options(self.mentors),
            "mentors": [m.model_dump(mode="json") for m in self.filtered_mentors],
        }

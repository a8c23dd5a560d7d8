# mentorconnect/services/dashboard.py
"""
Dashboard aggregates for a student.
"""

import asyncio
from typing import Iterable, List, Tuple

from starlette.concurrency import run_in_threadpool

from mentorconnect.config import settings
from mentorconnect.gateway import DataGateway
from mentorconnect.schemas.dashboard import DashboardStats
from mentorconnect.schemas.session import SessionCard
from mentorconnect.services.session_list import to_session_card


def summarize(total_mentors: int, sessions: Iterable[SessionCard]) -> Tuple[DashboardStats, List[SessionCard]]:
    """
    Derive stats and the upcoming list from the fetched sessions.

    Only the sessions that were fetched are counted, so with more than
    ``DASHBOARD_SESSION_LIMIT`` sessions the upcoming figures are partial.
    """
    sessions = list(sessions)
    upcoming = [s for s in sessions if s.status == "scheduled"]
    completed = [s for s in sessions if s.status == "completed"]
    stats = DashboardStats(
        total_mentors=total_mentors or 0,
        upcoming_sessions=len(upcoming),
        completed_sessions=len(completed),
        average_rating=0.0,
    )
    return stats, upcoming


async def load_dashboard(gateway: DataGateway, student_id: int) -> Tuple[DashboardStats, List[SessionCard]]:
    """
    Fetch the mentor count and the student's nearest sessions concurrently.

    Raises:
        GatewayError: If either fetch fails; nothing is partially applied
    """
    total_mentors, rows = await asyncio.gather(
        run_in_threadpool(gateway.count_mentors),
        run_in_threadpool(
            gateway.list_student_sessions,
            student_id,
            ascending=True,
            limit=settings.DASHBOARD_SESSION_LIMIT,
        ),
    )
    return summarize(total_mentors, [to_session_card(row) for row in rows])

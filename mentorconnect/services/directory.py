# mentorconnect/services/directory.py
"""
Mentor directory: loading and client-side filtering of mentor cards.
"""

from typing import Iterable, List

from mentorconnect.gateway import DataGateway, Row
from mentorconnect.schemas.mentor import MentorCard

ALL_EXPERTISE = "all"


def to_mentor_card(row: Row) -> MentorCard:
    """Flatten a mentor row joined with its profile, defaulting empty fields."""
    profile = row.get("profile") or {}
    return MentorCard(
        id=row["id"],
        full_name=profile.get("full_name") or "",
        email=profile.get("email") or "",
        avatar_url=profile.get("avatar_url"),
        expertise=row.get("expertise") or [],
        bio=row.get("bio") or "",
        experience_years=row.get("experience_years") or 0,
        languages=row.get("languages") or [],
        hourly_rate=row.get("hourly_rate"),
        average_rating=row.get("average_rating") or 0.0,
        total_sessions=row.get("total_sessions") or 0,
    )


def load_mentors(gateway: DataGateway) -> List[MentorCard]:
    """
    Fetch every mentor, best rated first.

    Raises:
        GatewayError: If the fetch fails
    """
    return [to_mentor_card(row) for row in gateway.list_mentors()]


def _matches_query(mentor: MentorCard, needle: str) -> bool:
    return (
        needle in mentor.full_name.lower()
        or any(needle in tag.lower() for tag in mentor.expertise)
        or needle in mentor.bio.lower()
    )


def filter_mentors(
    mentors: Iterable[MentorCard],
    query: str = "",
    expertise: str = ALL_EXPERTISE,
) -> List[MentorCard]:
    """
    Narrow a mentor list by free text and expertise tag.

    The query matches name, any expertise tag or bio, case-insensitively.
    ``expertise`` must be an exact tag unless it is ``"all"``. Both filters
    must hold. Order is preserved.
    """
    filtered = list(mentors)

    if query:
        needle = query.lower()
        filtered = [m for m in filtered if _matches_query(m, needle)]

    if expertise != ALL_EXPERTISE:
        filtered = [m for m in filtered if expertise in m.expertise]

    return filtered


def expertise_options(mentors: Iterable[MentorCard]) -> List[str]:
    """Sorted distinct expertise tags, for the category selector."""
    return sorted({tag for m in mentors for tag in m.expertise})

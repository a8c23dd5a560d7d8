# mentorconnect/services/feedback.py
"""
Post-session feedback submission.
"""

from typing import Optional

from mentorconnect.gateway import DataGateway, Row

RATING_LABELS = {
    1: "Poor",
    2: "Fair",
    3: "Good",
    4: "Very Good",
    5: "Excellent",
}

SELECT_RATING_PROMPT = "Please select a rating"


def rating_label(rating: int) -> Optional[str]:
    return RATING_LABELS.get(rating)


def is_valid_rating(rating: int) -> bool:
    return 1 <= rating <= 5


def submit_feedback(
    gateway: DataGateway,
    session_id: int,
    student_id: int,
    mentor_id: int,
    rating: int,
    comment: str = "",
) -> Row:
    """
    Store one feedback row for a session.

    Duplicate feedback for the same session is not checked.

    Raises:
        ValueError: If no valid rating was chosen
        GatewayError: If the insert fails
    """
    if not is_valid_rating(rating):
        raise ValueError(SELECT_RATING_PROMPT)

    return gateway.create_feedback(
        session_id=session_id,
        student_id=student_id,
        mentor_id=mentor_id,
        rating=rating,
        comment=comment or "",
    )

from __future__ import annotations

import logging
import smtplib
from email.message import EmailMessage
from typing import Optional

from mentorconnect.config import settings

logger = logging.getLogger(__name__)


def is_email_enabled() -> bool:
    """Password reset mail needs a server and a sender address."""
    return bool(
        settings.EMAIL_NOTIFICATIONS_ENABLED
        and settings.SMTP_SERVER
        and settings.EMAIL_FROM
    )


def _build_message(to_email: str, subject: str, body_text: str, body_html: Optional[str]) -> EmailMessage:
    message = EmailMessage()
    message["From"] = settings.EMAIL_FROM
    message["To"] = to_email
    message["Subject"] = subject
    message.set_content(body_text)
    if body_html:
        message.add_alternative(body_html, subtype="html")
    return message


def _open_connection() -> smtplib.SMTP:
    smtp_class = smtplib.SMTP_SSL if settings.SMTP_USE_SSL else smtplib.SMTP
    return smtp_class(settings.SMTP_SERVER, settings.SMTP_PORT, timeout=settings.SMTP_TIMEOUT_SECONDS)


def _authenticate(server: smtplib.SMTP) -> None:
    if settings.SMTP_USE_TLS and not settings.SMTP_USE_SSL:
        server.starttls()
    if settings.EMAIL_PASSWORD:
        server.login(settings.SMTP_USERNAME or settings.EMAIL_FROM, settings.EMAIL_PASSWORD)


def send_email(
    *,
    to_email: str,
    subject: str,
    body_text: str,
    body_html: Optional[str] = None,
) -> bool:
    """
    Send one message over SMTP.

    Returns False when email is disabled or delivery fails; failures are
    logged, never raised.
    """
    if not is_email_enabled():
        return False

    message = _build_message(to_email, subject, body_text, body_html)
    try:
        with _open_connection() as server:
            _authenticate(server)
            server.send_message(message)
    except (smtplib.SMTPException, OSError) as exc:
        logger.warning("Email send failed for '%s': %s", to_email, exc)
        return False

    logger.info("Email '%s' sent to '%s'", subject, to_email)
    return True


def send_password_reset_email(to_email: str, reset_token: str) -> bool:
    link = f"{settings.FRONTEND_URL.rstrip('/')}/reset-password?token={reset_token}"
    return send_email(
        to_email=to_email,
        subject="Reset your MentorConnect password",
        body_text=(
            "We received a request to reset your password.\n\n"
            f"Open this link to choose a new one: {link}\n\n"
            f"The link expires in {settings.RESET_TOKEN_EXPIRE_MINUTES} minutes. "
            "If you did not ask for this, you can ignore this email."
        ),
        body_html=(
            "<p>We received a request to reset your password.</p>"
            f'<p><a href="{link}">Choose a new password</a></p>'
            f"<p>The link expires in {settings.RESET_TOKEN_EXPIRE_MINUTES} minutes.</p>"
        ),
    )

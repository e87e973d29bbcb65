"""Notification dispatch used from request handlers and background tasks.

Dispatch makes at most one attempt. Failures are logged with the collaborator
name and reported in the return value; they never reach the HTTP response.
"""

import logging

from ...platform.config import settings
from ..scoring.errors import CollaboratorFailure
from .email_client import EmailService

logger = logging.getLogger(__name__)


def email_skip_reason() -> str | None:
    if settings.mvp_flags.disable_email:
        return "Email disabled"
    if not settings.email_configured:
        return "Email not configured"
    return None


def build_email_service() -> EmailService:
    return EmailService(
        api_key=settings.RESEND_API_KEY,
        notification_email=settings.NOTIFICATION_EMAIL,
        from_email=settings.EMAIL_FROM,
    )


def _dispatch(kind: str, method_name: str, payload: dict) -> dict:
    reason = email_skip_reason()
    if reason:
        logger.info("Skipping %s notification: %s", kind, reason)
        return {"sent": False, "reason": reason}
    try:
        email_svc = build_email_service()
        return getattr(email_svc, method_name)(payload)
    except CollaboratorFailure as exc:
        logger.error("Collaborator failure (%s): %s", exc.collaborator, exc.message, extra={"collaborator": exc.collaborator})
        return {"sent": False, "error": exc.message}
    except Exception:
        logger.exception("Unexpected error building %s notification", kind, extra={"collaborator": "email"})
        return {"sent": False, "error": f"Unexpected error building {kind} notification"}


def send_assessment_notification_sync(result: dict) -> dict:
    return _dispatch("assessment", "send_assessment_notification", result)


def send_scenario_notification_sync(result: dict) -> dict:
    return _dispatch("scenario", "send_scenario_notification", result)


def send_interview_notification_sync(report: dict) -> dict:
    return _dispatch("interview", "send_interview_notification", report)


def send_review_notification_sync(review: dict) -> dict:
    return _dispatch("review", "send_review_notification", review)

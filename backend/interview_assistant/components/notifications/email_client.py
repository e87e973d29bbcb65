"""
Resend email service for hiring-team notifications.

Each send raises ``CollaboratorFailure`` when Resend rejects or cannot be
reached; callers on the background path catch and log it.
"""

import logging

import resend

from ...platform.brand import brand_email_from
from ..scoring.errors import CollaboratorFailure
from .templates import (
    RECOMMENDATION_EMOJIS,
    assessment_notification_html,
    interview_notification_html,
    recommendation_display,
    recommendation_key,
    review_notification_html,
    scenario_notification_html,
)

logger = logging.getLogger(__name__)


class EmailService:
    """Service for sending submission notifications through Resend."""

    def __init__(self, api_key: str, notification_email: str, from_email: str = brand_email_from()):
        resend.api_key = api_key
        self.from_email = from_email
        self.notification_email = notification_email
        logger.info("EmailService initialised (from=%s)", self.from_email)

    def _send(self, kind: str, subject: str, html_body: str) -> dict:
        try:
            email = resend.Emails.send({
                "from": self.from_email,
                "to": [self.notification_email],
                "subject": subject,
                "html": html_body,
            })
        except Exception as exc:
            raise CollaboratorFailure("email", f"Failed to send {kind} notification: {exc}") from exc
        email_id = email.get("id", "") if isinstance(email, dict) else str(email)
        logger.info("%s notification sent (email_id=%s, to=%s)", kind.capitalize(), email_id, self.notification_email)
        return {"sent": True, "email_id": email_id}

    def send_assessment_notification(self, result: dict) -> dict:
        candidate_name = (result.get("candidate") or {}).get("name") or "Anonymous"
        primary = result["candidateResults"]["primaryColor"]["name"]
        return self._send(
            "assessment",
            f"🎨 True Colors Assessment: {candidate_name} - Primary {primary}",
            assessment_notification_html(result),
        )

    def send_scenario_notification(self, result: dict) -> dict:
        candidate_name = (result.get("candidate") or {}).get("name") or "Anonymous"
        return self._send(
            "scenario",
            f"📋 Scenario Submission: {candidate_name}",
            scenario_notification_html(result),
        )

    def send_interview_notification(self, report: dict) -> dict:
        candidate_name = (report.get("candidateInfo") or {}).get("name") or "Unknown candidate"
        recommendation = report.get("interviewerRecommendation") or report["calculatedRecommendation"]["recommendation"]
        emoji = RECOMMENDATION_EMOJIS.get(recommendation_key(recommendation), "")
        return self._send(
            "interview",
            f"📝 Interview: {candidate_name} - {emoji} {recommendation_display(recommendation)} "
            f"({report.get('interviewScore')}/10)",
            interview_notification_html(report),
        )

    def send_review_notification(self, review: dict) -> dict:
        review_type = (review.get("reviewType") or {}).get("label") or "Review"
        return self._send(
            "review",
            f"📊 {review_type}: {review.get('employeeName')} (Supervisor: {review.get('supervisor')})",
            review_notification_html(review),
        )

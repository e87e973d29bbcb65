"""Tests for Resend notifications and their dispatch."""

import pytest
import resend

from interview_assistant.components.notifications import service as notification_service
from interview_assistant.components.notifications.email_client import EmailService
from interview_assistant.components.notifications.templates import (
    interview_notification_html,
    recommendation_display,
    recommendation_key,
    review_notification_html,
)
from interview_assistant.components.scoring.errors import CollaboratorFailure
from interview_assistant.platform.config import settings

INTERVIEW_REPORT = {
    "evaluationId": "EVAL-1",
    "candidateInfo": {"name": "<b>Jordan</b>"},
    "interviewerInfo": {"name": "Pat"},
    "interviewScore": 8,
    "interviewerRecommendation": "strong_yes",
    "calculatedRecommendation": {"recommendation": "STRONG YES", "confidence": "high", "rationale": "r"},
    "sectionScores": {},
    "sectionsWithoutData": [],
    "flags": {"green": [], "red": []},
    "nextSteps": [],
}


@pytest.fixture
def sent(monkeypatch):
    calls = []

    def fake_send(params):
        calls.append(params)
        return {"id": "email_123"}

    monkeypatch.setattr(resend.Emails, "send", fake_send)
    return calls


@pytest.fixture
def email_enabled(monkeypatch):
    monkeypatch.setattr(settings, "MVP_DISABLE_EMAIL", False)
    monkeypatch.setattr(settings, "RESEND_API_KEY", "re_test")
    monkeypatch.setattr(settings, "NOTIFICATION_EMAIL", "hiring@example.org")


class TestEmailService:
    def test_send_interview_notification(self, sent):
        svc = EmailService(api_key="re_test", notification_email="hiring@example.org", from_email="noreply@example.org")
        result = svc.send_interview_notification(INTERVIEW_REPORT)
        assert result == {"sent": True, "email_id": "email_123"}
        assert sent[0]["to"] == ["hiring@example.org"]
        assert sent[0]["from"] == "noreply@example.org"
        assert "STRONG YES" in sent[0]["subject"]
        assert "(8/10)" in sent[0]["subject"]

    def test_provider_error_becomes_collaborator_failure(self, monkeypatch):
        def boom(params):
            raise RuntimeError("provider down")

        monkeypatch.setattr(resend.Emails, "send", boom)
        svc = EmailService(api_key="re_test", notification_email="hiring@example.org")
        with pytest.raises(CollaboratorFailure) as exc_info:
            svc.send_interview_notification(INTERVIEW_REPORT)
        assert exc_info.value.collaborator == "email"
        assert "provider down" in exc_info.value.message


class TestTemplates:
    def test_user_content_is_escaped(self):
        html = interview_notification_html(INTERVIEW_REPORT)
        assert "<b>Jordan</b>" not in html
        assert "&lt;b&gt;Jordan&lt;/b&gt;" in html

    def test_recommendation_normalisation(self):
        assert recommendation_key("STRONG YES") == "strong_yes"
        assert recommendation_display("strong_no") == "STRONG NO"
        assert recommendation_display(None) == "NOT PROVIDED"

    def test_review_without_bonus(self):
        html = review_notification_html(
            {"employeeName": "Robin", "reviewType": {"label": "Annual Review"}, "categoryScores": {}, "bonus": None}
        )
        assert "Not applicable for this review type" in html


class TestDispatch:
    def test_disabled_flag_skips_send(self, sent):
        result = notification_service.send_interview_notification_sync(INTERVIEW_REPORT)
        assert result == {"sent": False, "reason": "Email disabled"}
        assert sent == []

    def test_unconfigured_skips_send(self, monkeypatch, sent):
        monkeypatch.setattr(settings, "MVP_DISABLE_EMAIL", False)
        result = notification_service.send_interview_notification_sync(INTERVIEW_REPORT)
        assert result == {"sent": False, "reason": "Email not configured"}

    def test_configured_sends(self, email_enabled, sent):
        result = notification_service.send_interview_notification_sync(INTERVIEW_REPORT)
        assert result["sent"] is True
        assert len(sent) == 1

    def test_failure_is_logged_not_raised(self, email_enabled, monkeypatch, caplog):
        def boom(params):
            raise RuntimeError("timeout")

        monkeypatch.setattr(resend.Emails, "send", boom)
        with caplog.at_level("ERROR"):
            result = notification_service.send_interview_notification_sync(INTERVIEW_REPORT)
        assert result["sent"] is False
        assert "timeout" in result["error"]
        assert any(getattr(record, "collaborator", None) == "email" for record in caplog.records)

    def test_malformed_payload_is_logged_not_raised(self, email_enabled, sent):
        result = notification_service.send_assessment_notification_sync({"candidate": {"name": "A"}})
        assert result["sent"] is False
        assert sent == []

"""Tests for candidate/interviewer report composition and the assessment service."""

from datetime import datetime, timezone

import pytest

from interview_assistant.components.assessment.classifier import classify
from interview_assistant.components.assessment.colors import TEAM_DYNAMICS, TRUE_COLORS, Color, find_profile, lookup
from interview_assistant.components.assessment.reports import (
    build_candidate_report,
    build_interviewer_report,
    color_scores,
)
from interview_assistant.components.assessment.service import build_assessment_result, score_assessment
from interview_assistant.components.scoring.errors import IncompleteSubmission, UnknownCategory
from tests.conftest import balanced_answers, make_answers

FIXED_NOW = datetime(2024, 6, 10, 12, 0, 0, tzinfo=timezone.utc)

def _ranking(colors):
    return classify(make_answers(colors)).ranking

class TestCandidateReport:
    def test_headline_colors_follow_ranking(self):
        report = build_candidate_report(_ranking(["blue"] * 10 + ["green"] * 6 + ["gold"] * 4))
        assert report["primaryColor"]["name"] == "Blue"
        assert report["primaryColor"]["percentage"] == 50
        assert report["secondaryColor"]["name"] == "Green"
        assert report["secondaryColor"]["percentage"] == 30
        assert report["primaryColor"]["tagline"] == TRUE_COLORS[Color.BLUE].tagline

    def test_spectrum_lists_every_color_once(self):
        report = build_candidate_report(_ranking(["orange"] * 20))
        names = [entry["name"] for entry in report["colorSpectrum"]]
        assert sorted(names) == ["Blue", "Gold", "Green", "Orange"]
        assert report["colorSpectrum"][0] == {
            "name": "Orange",
            "color": TRUE_COLORS[Color.ORANGE].color,
            "percentage": 100,
        }

class TestInterviewerReport:
    def test_summary_and_profile(self):
        report = build_interviewer_report(classify(balanced_answers()).ranking)
        assert report["summary"]["primaryColor"] == "Gold"
        assert report["summary"]["secondaryColor"] == "Green"
        assert [row["count"] for row in report["colorProfile"]] == [5, 5, 5, 5]
        assert report["primaryDetails"]["name"] == "Gold"
        assert report["secondaryDetails"]["name"] == "Green"

    def test_guidance_comes_from_primary_color(self):
        report = build_interviewer_report(_ranking(["green"] * 12 + ["orange"] * 8))
        assert report["teamDynamics"] == TEAM_DYNAMICS[Color.GREEN].to_dict()
        assert "Green" in report["supervisionRecommendations"]["blendedApproach"]
        assert "Orange" in report["supervisionRecommendations"]["blendedApproach"]
        assert report["supervisionRecommendations"]["primaryRecommendations"]


class TestReferenceLookup:
    def test_missing_table_entry_is_an_invariant_error(self):
        with pytest.raises(UnknownCategory) as exc_info:
            lookup({}, Color.GOLD, "trait profile")
        assert exc_info.value.category == "gold"
        assert exc_info.value.table == "trait profile"

    def test_find_profile_by_id_or_name(self):
        assert find_profile("blue").name == "Blue"
        assert find_profile("  GOLD ").name == "Gold"
        assert find_profile("purple") is None

class TestAssessmentService:
    def test_color_scores_keyed_by_color_id(self):
        scores = color_scores(_ranking(["gold"] * 15 + ["blue"] * 5))
        assert scores == {"gold": 75, "green": 0, "orange": 0, "blue": 25}

    def test_scoring_is_deterministic(self):
        responses = make_answers(["gold", "blue", "green", "orange"] * 4 + ["blue"] * 4)
        assert score_assessment(responses) == score_assessment(responses)

    def test_result_is_stamped(self):
        result = build_assessment_result(
            candidate_name="  Jordan Lee ",
            candidate_email="",
            responses=balanced_answers(),
            now=FIXED_NOW,
        )
        assert result["success"] is True
        assert result["assessmentId"] == f"TC-{int(FIXED_NOW.timestamp() * 1000)}"
        assert result["timestamp"] == "2024-06-10T12:00:00.000Z"
        assert result["candidate"] == {"name": "Jordan Lee", "email": None}
        assert result["responsesReceived"] == 20
        assert result["totalQuestions"] == 20

    def test_blank_name_is_anonymous(self):
        result = build_assessment_result(
            candidate_name=None, candidate_email=None, responses=balanced_answers(), now=FIXED_NOW
        )
        assert result["candidate"]["name"] == "Anonymous"

    def test_incomplete_submission_propagates(self):
        with pytest.raises(IncompleteSubmission):
            build_assessment_result(
                candidate_name="A", candidate_email=None, responses=make_answers(["gold"] * 3), now=FIXED_NOW
            )

"""Tests for scenario submissions and interviewer scoring."""

from datetime import datetime, timezone

import pytest

from interview_assistant.components.scenarios.catalog import (
    ASSESSMENT_CATEGORIES,
    SCENARIOS,
    TOTAL_SCENARIO_QUESTIONS,
    find_scenario,
    rubric_payload,
)
from interview_assistant.components.scenarios.schemas import ScenarioScore, ScenarioSubmit
from interview_assistant.components.scenarios.service import (
    build_scenario_score,
    build_scenario_submission,
    completion_percentage,
)
from interview_assistant.components.scoring.errors import ValidationError

FIXED_NOW = datetime(2024, 5, 2, 15, 45, tzinfo=timezone.utc)


def _answers(count, text="I would check on the child's safety first."):
    question_ids = [question.id for scenario in SCENARIOS for question in scenario.questions]
    return [{"questionId": qid, "response": text} for qid in question_ids[:count]]


def _submit(responses, name="Casey Doe"):
    return ScenarioSubmit.model_validate({"candidateName": name, "responses": responses})


class TestCatalog:
    def test_six_scenarios_with_thirty_questions(self):
        assert [scenario.id for scenario in SCENARIOS] == ["SC1", "SC2", "SC3", "SC4", "SC5", "SC6"]
        assert TOTAL_SCENARIO_QUESTIONS == 30

    def test_question_ids_are_prefixed_by_scenario(self):
        scenario = find_scenario("SC3")
        assert all(question.id.startswith("SC3_Q") for question in scenario.questions)
        assert scenario.owns("SC3_Q2")
        assert not scenario.owns("SC1_Q2")

    def test_rubric_payload(self):
        payload = rubric_payload()
        assert len(payload["categories"]) == len(ASSESSMENT_CATEGORIES) == 7
        assert payload["rubric"][3]["label"] == "Strong"

    def test_unknown_scenario(self):
        assert find_scenario("SC9") is None


class TestSubmission:
    def test_completion_percentage_rounds_half_up(self):
        assert completion_percentage(15) == 50
        assert completion_percentage(1, total=8) == 13

    def test_half_complete_is_accepted(self):
        result = build_scenario_submission(_submit(_answers(15)), now=FIXED_NOW)
        assert result["submissionId"] == f"SCEN-{int(FIXED_NOW.timestamp() * 1000)}"
        assert result["completionPercentage"] == 50
        assert result["totalResponses"] == 15
        assert result["totalQuestions"] == 30
        assert result["submittedAt"] == result["timestamp"] == "2024-05-02T15:45:00.000Z"
        assert len(result["scoringTemplate"]) == 7
        assert all(entry["score"] is None for entry in result["scoringTemplate"])

    def test_responses_are_grouped_by_scenario(self):
        result = build_scenario_submission(_submit(_answers(30)), now=FIXED_NOW)
        grouped = result["scenarioResponses"]
        assert list(grouped) == ["SC1", "SC2", "SC3", "SC4", "SC5", "SC6"]
        assert len(grouped["SC1"]["responses"]) == 5
        first = grouped["SC1"]["responses"][0]
        assert first["questionId"] == "SC1_Q1"
        assert first["questionText"] == SCENARIOS[0].questions[0].text

    def test_below_threshold_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            build_scenario_submission(_submit(_answers(14)), now=FIXED_NOW)
        assert exc_info.value.message == "Please complete at least 50% of the scenario questions"

    def test_blank_responses_do_not_count(self):
        responses = _answers(14) + _answers(30, text="   ")[14:20]
        with pytest.raises(ValidationError):
            build_scenario_submission(_submit(responses), now=FIXED_NOW)

    def test_custom_threshold(self):
        result = build_scenario_submission(_submit(_answers(6)), min_completion_percent=20, now=FIXED_NOW)
        assert result["completionPercentage"] == 20

    def test_name_required(self):
        with pytest.raises(ValidationError, match="Candidate name is required"):
            build_scenario_submission(_submit(_answers(30), name=" "), now=FIXED_NOW)

    def test_responses_required(self):
        with pytest.raises(ValidationError, match="Scenario responses are required"):
            build_scenario_submission(_submit([]), now=FIXED_NOW)


class TestScoring:
    def _score(self, category_scores, **extra):
        return ScenarioScore.model_validate(
            {"submissionId": "SCEN-1", "interviewerName": "Pat", "categoryScores": category_scores, **extra}
        )

    def test_average_and_rating(self):
        result = build_scenario_score(
            self._score(
                [
                    {"category": "Safety Assessment", "score": 3},
                    {"category": "Self-Awareness", "score": 2},
                    {"category": "Boundaries", "score": 2},
                    {"category": "Communication", "score": None},
                ],
                recommendation="yes",
            ),
            now=FIXED_NOW,
        )
        assert result["scoringId"].startswith("SCORE-")
        assert result["scoredCategories"] == 3
        assert result["averageScore"] == 2.33
        assert result["overallRating"] == "Adequate"
        assert result["recommendation"] == "yes"

    def test_no_rated_categories(self):
        result = build_scenario_score(self._score([{"category": "Self-Awareness", "score": "n/a"}]), now=FIXED_NOW)
        assert result["averageScore"] is None
        assert result["overallRating"] is None

    def test_identity_required(self):
        with pytest.raises(ValidationError, match="Submission ID and interviewer name are required"):
            build_scenario_score(ScenarioScore.model_validate({"categoryScores": []}))

    def test_category_scores_required(self):
        with pytest.raises(ValidationError, match="Category scores are required"):
            build_scenario_score(ScenarioScore.model_validate({"submissionId": "SCEN-1", "interviewerName": "Pat"}))

"""Tests for interview evaluation, decision preview and questionnaire orchestration."""

from datetime import datetime, timezone

import pytest

from interview_assistant.components.interview.schemas import (
    CalculateDecisionRequest,
    InterviewSubmit,
    QuestionnaireSubmit,
)
from interview_assistant.components.interview.service import (
    build_interview_evaluation,
    build_questionnaire_result,
    calculate_decision,
    questionnaire_score,
)
from interview_assistant.components.scoring.errors import ValidationError

FIXED_NOW = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


def _submission(**overrides):
    payload = {
        "candidateInfo": {"name": "Jordan Lee", "position": "Family Specialist"},
        "interviewerInfo": {"name": "Pat Morgan"},
        "responses": [
            {"questionId": "OPN1", "value": 3},
            {"questionId": "OPN2", "value": 2},
            {"questionId": "OPN4", "value": 3},
            {"questionId": "VAL1", "value": 3},
            {"questionId": "OPN3", "value": "Warm and prepared"},
        ],
        "decision": {
            "overallScore": 8,
            "greenFlags": ["GF1", "GF3", "GF4", "GF8"],
            "redFlags": ["RF2"],
            "recommendation": "strong_yes",
            "rationale": "Clear mission fit",
        },
    }
    payload.update(overrides)
    return InterviewSubmit.model_validate(payload)


class TestInterviewEvaluation:
    def test_report_merges_sections_flags_and_decision(self):
        result = build_interview_evaluation(_submission(), now=FIXED_NOW)
        assert result["success"] is True
        assert result["message"] == "Evaluation submitted successfully"
        report = result["report"]
        assert report["evaluationId"] == f"EVAL-{int(FIXED_NOW.timestamp() * 1000)}"
        assert report["timestamp"] == "2024-03-01T09:30:00.000Z"
        assert report["candidateInfo"] == {"name": "Jordan Lee", "position": "Family Specialist"}
        assert report["sectionScores"]["OPENING"]["average"] == 2.67
        assert report["sectionScores"]["OPENING"]["rating"] == "Strong"
        assert report["sectionScores"]["VALUES"]["questionsAnswered"] == 1
        assert set(report["sectionsWithoutData"]) == {"EXPERIENCE", "CLOSING"}
        assert report["overallSectionAverage"] == 2.75
        assert report["calculatedRecommendation"]["recommendation"] == "STRONG YES"
        assert report["interviewerRecommendation"] == "strong_yes"
        assert [flag["id"] for flag in report["flags"]["green"]] == ["GF1", "GF3", "GF4", "GF8"]
        assert report["flags"]["red"][0]["label"] == "Lack of self-awareness"
        assert report["nextSteps"] == []

    def test_engine_next_steps_fill_in_when_interviewer_gives_none(self):
        result = build_interview_evaluation(
            _submission(decision={"overallScore": 6, "redFlags": [], "greenFlags": []}), now=FIXED_NOW
        )
        assert result["report"]["nextSteps"] == [
            "Complete reference checks",
            "Discuss with team",
            "Consider second interview",
        ]

    def test_interviewer_next_steps_take_precedence(self):
        result = build_interview_evaluation(
            _submission(decision={"overallScore": 6, "nextSteps": ["Call references"]}), now=FIXED_NOW
        )
        assert result["report"]["nextSteps"] == ["Call references"]

    def test_unknown_flag_ids_are_dropped(self):
        result = build_interview_evaluation(
            _submission(decision={"overallScore": 7, "greenFlags": ["GF1", "GF99"]}), now=FIXED_NOW
        )
        assert [flag["id"] for flag in result["report"]["flags"]["green"]] == ["GF1"]

    def test_empty_responses_are_allowed(self):
        result = build_interview_evaluation(_submission(responses=[]), now=FIXED_NOW)
        assert result["report"]["sectionScores"] == {}
        assert result["report"]["overallSectionAverage"] is None

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"candidateInfo": None}, "Candidate information is required"),
            ({"candidateInfo": {"name": "  "}}, "Candidate information is required"),
            ({"interviewerInfo": None}, "Interviewer information is required"),
            ({"responses": None}, "Evaluation responses are required"),
            ({"decision": None}, "Decision with overall score is required"),
            ({"decision": {"greenFlags": ["GF1"]}}, "Decision with overall score is required"),
        ],
    )
    def test_missing_parts_are_rejected(self, overrides, message):
        with pytest.raises(ValidationError) as exc_info:
            build_interview_evaluation(_submission(**overrides), now=FIXED_NOW)
        assert exc_info.value.message == message


class TestCalculateDecision:
    def test_preview(self):
        result = calculate_decision(
            CalculateDecisionRequest.model_validate({"overallScore": 7.5, "greenFlags": ["a", "b", "c"]})
        )
        assert result["input"] == {"overallScore": 7.5, "redFlagsCount": 0, "greenFlagsCount": 3}
        assert result["decision"]["recommendation"] == "YES"

    def test_missing_score(self):
        with pytest.raises(ValidationError, match="Overall score is required"):
            calculate_decision(CalculateDecisionRequest.model_validate({"redFlags": []}))


class TestQuestionnaire:
    def _payload(self, responses, **extra):
        return QuestionnaireSubmit.model_validate(
            {"candidateName": "Sam Rivera", "interviewerName": "Alex Kim", "responses": responses, **extra}
        )

    def test_score_scales_average_to_ten(self):
        assert questionnaire_score(3.0) == 10
        assert questionnaire_score(2.0) == 7

    def test_score_is_rounded_once_from_the_unrounded_average(self):
        # 23/17 = 1.3529... scales to 4.505 and rounds to 5; the 2-place 1.35 would give 4.
        question_ids = (
            [f"opening-{n}" for n in range(1, 7)]
            + [f"experience-{n}" for n in range(1, 11)]
            + ["values-1"]
        )
        responses = [
            {"questionId": question_id, "value": 1 if i < 11 else 2}
            for i, question_id in enumerate(question_ids)
        ]
        result = build_questionnaire_result(self._payload(responses), now=FIXED_NOW)
        assert result["overallAverage"] == 1.35
        assert result["questionsRated"] == 17
        assert result["overallScore"] == 5
        assert result["recommendation"]["recommendation"] == "MAYBE"
        assert result["recommendation"]["confidence"] == "low"

    def test_repeated_question_counts_once(self):
        responses = [{"questionId": "closing-1", "value": 1}] * 5 + [{"questionId": "closing-1", "value": 3}]
        result = build_questionnaire_result(self._payload(responses), now=FIXED_NOW)
        assert result["questionsRated"] == 1
        assert result["sectionScores"]["closing"]["questionsAnswered"] == 1
        assert result["overallAverage"] == 3.0

    def test_result(self):
        responses = [
            {"questionId": "opening-1", "value": 3},
            {"questionId": "opening-2", "value": 3},
            {"questionId": "values-4", "value": 3},
        ]
        result = build_questionnaire_result(
            self._payload(responses, greenFlags=["GF1", "GF2", "GF3", "GF4"], position="Family Specialist"),
            now=FIXED_NOW,
        )
        assert result["questionnaireId"].startswith("QST-")
        assert result["overallAverage"] == 3.0
        assert result["overallScore"] == 10
        assert result["questionsRated"] == 3
        assert result["recommendation"]["recommendation"] == "OFFER"
        assert result["sectionScores"]["values"]["totalScaleQuestions"] == 10
        assert set(result["sectionsWithoutData"]) == {"experience", "closing"}

    def test_nothing_rated_is_rejected(self):
        with pytest.raises(ValidationError, match="Please rate at least one question"):
            build_questionnaire_result(self._payload([{"questionId": "opening-1", "value": None}]))

    def test_names_are_required(self):
        with pytest.raises(ValidationError, match="Candidate name is required"):
            build_questionnaire_result(QuestionnaireSubmit.model_validate({"interviewerName": "Alex"}))
        with pytest.raises(ValidationError, match="Interviewer name is required"):
            build_questionnaire_result(QuestionnaireSubmit.model_validate({"candidateName": "Sam"}))

"""Scenario submission and interviewer scoring."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from ...shared.utils import isoformat_z, new_submission_id, utcnow
from ..scoring.errors import ValidationError
from ..scoring.ratings import coerce_rating, rating_label, round_half_up
from .catalog import SCENARIOS, TOTAL_SCENARIO_QUESTIONS, scoring_template
from .schemas import ScenarioAnswer, ScenarioScore, ScenarioSubmit

DEFAULT_MIN_COMPLETION_PERCENT = 50


def _is_answered(answer: ScenarioAnswer) -> bool:
    return bool(answer.question_id) and bool((answer.response or "").strip())


def completion_percentage(answered: int, total: int = TOTAL_SCENARIO_QUESTIONS) -> int:
    return int(round_half_up(100 * answered / total))


def organize_responses(responses: List[ScenarioAnswer]) -> Dict[str, Dict[str, Any]]:
    organized: Dict[str, Dict[str, Any]] = {}
    for scenario in SCENARIOS:
        entries = []
        for answer in responses:
            if not answer.question_id or not scenario.owns(answer.question_id):
                continue
            question = scenario.question(answer.question_id)
            entries.append(
                {
                    "questionId": answer.question_id,
                    "questionText": question.text if question else "Unknown question",
                    "response": answer.response,
                }
            )
        organized[scenario.id] = {
            "scenarioTitle": scenario.title,
            "category": scenario.category,
            "responses": entries,
            "scoringCriteria": list(scenario.scoring_criteria),
        }
    return organized


def build_scenario_submission(
    payload: ScenarioSubmit,
    *,
    min_completion_percent: int = DEFAULT_MIN_COMPLETION_PERCENT,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    candidate_name = (payload.candidate_name or "").strip()
    if not candidate_name:
        raise ValidationError("Candidate name is required")
    if not payload.responses:
        raise ValidationError("Scenario responses are required")

    answered = [answer for answer in payload.responses if _is_answered(answer)]
    completion = completion_percentage(len(answered))
    if completion < min_completion_percent:
        raise ValidationError(
            f"Please complete at least {min_completion_percent}% of the scenario questions"
        )

    stamp = now or utcnow()
    submitted_at = isoformat_z(stamp)
    return {
        "success": True,
        "submissionId": new_submission_id("SCEN", stamp),
        "submittedAt": submitted_at,
        "timestamp": submitted_at,
        "candidate": {"name": candidate_name, "email": (payload.candidate_email or "").strip() or None},
        "completionPercentage": completion,
        "totalResponses": len(answered),
        "totalQuestions": TOTAL_SCENARIO_QUESTIONS,
        "scenarioResponses": organize_responses(payload.responses),
        "scoringTemplate": scoring_template(),
    }


def build_scenario_score(payload: ScenarioScore, *, now: Optional[datetime] = None) -> Dict[str, Any]:
    if not (payload.submission_id or "").strip() or not (payload.interviewer_name or "").strip():
        raise ValidationError("Submission ID and interviewer name are required")
    if payload.category_scores is None:
        raise ValidationError("Category scores are required")

    ratings = [coerce_rating(entry.score) for entry in payload.category_scores]
    ratings = [rating for rating in ratings if rating is not None]
    average = sum(ratings) / len(ratings) if ratings else None

    stamp = now or utcnow()
    return {
        "success": True,
        "scoringId": new_submission_id("SCORE", stamp),
        "submissionId": payload.submission_id,
        "interviewerName": payload.interviewer_name,
        "timestamp": isoformat_z(stamp),
        "categoryScores": [entry.model_dump(exclude_none=True) for entry in payload.category_scores],
        "scoredCategories": len(ratings),
        "averageScore": round_half_up(average, 2) if average is not None else None,
        "overallRating": rating_label(average) if average is not None else None,
        "overallNotes": payload.overall_notes,
        "recommendation": payload.recommendation,
    }

"""Assessment submission orchestration: classify, compose, stamp."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Iterable, Optional

from ...shared.utils import isoformat_z, new_submission_id, utcnow
from .classifier import DEFAULT_MIN_COMPLETION, classify
from .questions import TOTAL_QUESTIONS
from .reports import build_candidate_report, build_interviewer_report, color_scores


def score_assessment(
    responses: Iterable[Any],
    *,
    expected_count: int = TOTAL_QUESTIONS,
    min_completion: float = DEFAULT_MIN_COMPLETION,
) -> Dict[str, Any]:
    """Pure scoring result: identical input always yields identical output."""
    classification = classify(responses, expected_count=expected_count, min_completion=min_completion)
    ranking = classification.ranking
    return {
        "responsesReceived": classification.valid_count,
        "totalQuestions": classification.expected_count,
        "candidateResults": build_candidate_report(ranking),
        "interviewerReport": build_interviewer_report(ranking),
        "colorScores": color_scores(ranking),
    }


def build_assessment_result(
    *,
    candidate_name: Optional[str],
    candidate_email: Optional[str],
    responses: Iterable[Any],
    min_completion: float = DEFAULT_MIN_COMPLETION,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    scored = score_assessment(responses, min_completion=min_completion)
    stamp = now or utcnow()
    return {
        "success": True,
        "assessmentId": new_submission_id("TC", stamp),
        "timestamp": isoformat_z(stamp),
        "candidate": {
            "name": (candidate_name or "").strip() or "Anonymous",
            "email": (candidate_email or "").strip() or None,
        },
        **scored,
    }

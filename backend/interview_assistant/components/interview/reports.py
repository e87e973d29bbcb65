"""Interview report composition: section scores, flags and recommendations."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from .decision import DecisionOutcome
from .form import GREEN_FLAGS_BY_ID, RED_FLAGS_BY_ID, resolve_flags
from .sections import SectionSummary


def resolved_flags(green_ids: Optional[Sequence[str]], red_ids: Optional[Sequence[str]]) -> Dict[str, List[Dict[str, str]]]:
    return {
        "green": [flag.to_dict() for flag in resolve_flags(green_ids, GREEN_FLAGS_BY_ID)],
        "red": [flag.to_dict() for flag in resolve_flags(red_ids, RED_FLAGS_BY_ID)],
    }


def build_interview_report(
    *,
    summary: SectionSummary,
    outcome: DecisionOutcome,
    interview_score: float,
    green_flag_ids: Optional[Sequence[str]] = None,
    red_flag_ids: Optional[Sequence[str]] = None,
    interviewer_recommendation: Optional[str] = None,
    rationale: Optional[str] = None,
    next_steps: Optional[Sequence[str]] = None,
) -> Dict[str, Any]:
    """Merge aggregator and engine output into the interviewer-facing report.

    The interviewer's own next steps take precedence over the engine's.
    """
    return {
        "sectionScores": summary.scores_dict(),
        "sectionsWithoutData": list(summary.sections_without_data),
        "overallSectionAverage": summary.overall_average,
        "overallSectionRating": summary.overall_rating,
        "interviewScore": interview_score,
        "flags": resolved_flags(green_flag_ids, red_flag_ids),
        "calculatedRecommendation": outcome.to_dict(),
        "interviewerRecommendation": interviewer_recommendation,
        "rationale": rationale,
        "nextSteps": list(next_steps or outcome.next_steps or ()),
    }


def build_questionnaire_report(
    *,
    summary: SectionSummary,
    overall_score: int,
    outcome: DecisionOutcome,
) -> Dict[str, Any]:
    return {
        "sectionScores": summary.scores_dict(),
        "sectionsWithoutData": list(summary.sections_without_data),
        "overallAverage": summary.overall_average,
        "overallRating": summary.overall_rating,
        "questionsRated": summary.rated_count,
        "overallScore": overall_score,
        "recommendation": outcome.to_dict(),
    }

"""Employee review scoring: criterion averages, overall average and bonus tier."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from ...shared.utils import isoformat_z, new_submission_id, utcnow
from ..scoring.errors import ValidationError
from ..scoring.ratings import coerce_rating, mean
from .config import (
    RATING_SCALE,
    REVIEW_CATEGORIES,
    REVIEW_SCALE_MAX,
    REVIEW_SCALE_MIN,
    REVIEW_TYPES_BY_VALUE,
    bonus_tier,
)
from .schemas import ReviewSubmit

REQUIRED_FIELDS = ("employeeName", "reviewDate", "supervisor", "reviewType")


def validate_review(payload: ReviewSubmit) -> None:
    values = (payload.employee_name, payload.review_date, payload.supervisor, payload.review_type)
    if not all((value or "").strip() for value in values):
        raise ValidationError(f"Missing required fields: {', '.join(REQUIRED_FIELDS)}")
    if payload.review_type not in REVIEW_TYPES_BY_VALUE:
        raise ValidationError(
            f"Unknown review type '{payload.review_type}'. Expected one of: {', '.join(REVIEW_TYPES_BY_VALUE)}"
        )


def score_categories(ratings: Dict[str, Dict[str, Any]]) -> Dict[str, Any]:
    """Average each review category over its rated criteria; unknown criteria are ignored."""
    category_scores: Dict[str, Dict[str, Any]] = {}
    pooled: List[int] = []
    for category in REVIEW_CATEGORIES:
        submitted = ratings.get(category.id) or {}
        criteria: Dict[str, Optional[int]] = {}
        for criterion in category.criteria:
            criteria[criterion] = coerce_rating(
                submitted.get(criterion), low=REVIEW_SCALE_MIN, high=REVIEW_SCALE_MAX
            )
        rated = [value for value in criteria.values() if value is not None]
        pooled.extend(rated)
        category_scores[category.id] = {
            "name": category.name,
            "ratings": {
                name: {"value": value, "label": RATING_SCALE[value]} if value is not None else None
                for name, value in criteria.items()
            },
            "average": mean(rated),
            "criteriaRated": len(rated),
            "totalCriteria": len(category.criteria),
        }
    return {"categoryScores": category_scores, "overallAverage": mean(pooled), "criteriaRated": len(pooled)}


def build_review_result(payload: ReviewSubmit, *, now: Optional[datetime] = None) -> Dict[str, Any]:
    validate_review(payload)
    review_type = REVIEW_TYPES_BY_VALUE[payload.review_type]
    scores = score_categories(payload.ratings)

    bonus = None
    if review_type.bonus_eligible:
        tier = bonus_tier(scores["overallAverage"])
        bonus = {"eligible": tier is not None, "amount": tier.amount if tier else None}

    stamp = now or utcnow()
    return {
        "reviewId": new_submission_id("REV", stamp, suffix_length=6),
        "submittedAt": payload.submitted_at or isoformat_z(stamp),
        "employeeName": payload.employee_name.strip(),
        "employeeTitle": payload.employee_title,
        "reviewDate": payload.review_date,
        "supervisor": payload.supervisor.strip(),
        "reviewType": review_type.to_dict(),
        **scores,
        "bonus": bonus,
        "comments": dict(payload.comments),
        "strengths": payload.strengths,
        "developmentAreas": payload.development_areas,
        "goals": payload.goals,
    }

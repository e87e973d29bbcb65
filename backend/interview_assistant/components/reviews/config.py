"""Employee review form configuration: categories, scale, review types, bonus tiers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

REVIEW_SCALE_MIN = 1
REVIEW_SCALE_MAX = 5


@dataclass(frozen=True)
class ReviewCategory:
    id: str
    name: str
    criteria: Tuple[str, ...]

    def to_dict(self) -> Dict[str, object]:
        return {"id": self.id, "name": self.name, "criteria": list(self.criteria)}


@dataclass(frozen=True)
class ReviewType:
    value: str
    label: str
    bonus_eligible: bool

    def to_dict(self) -> Dict[str, object]:
        return {"value": self.value, "label": self.label, "bonusEligible": self.bonus_eligible}


@dataclass(frozen=True)
class BonusTier:
    min_average: float
    amount: str

    def to_dict(self) -> Dict[str, object]:
        return {"minAverage": self.min_average, "amount": self.amount}


REVIEW_CATEGORIES: Tuple[ReviewCategory, ...] = (
    ReviewCategory(
        "performance",
        "Job Performance",
        ("Accountability", "Problem Solving", "Quality of Work", "Time Management", "Professionalism"),
    ),
    ReviewCategory("relationship", "Relationship", ("Clients", "Coworkers", "Consumers", "Public")),
    ReviewCategory(
        "governance",
        "Governance & Compliance",
        ("Policies & Procedures", "Certifications", "Licensures", "Safety", "Reporting", "Documentation"),
    ),
)
CATEGORIES_BY_ID: Dict[str, ReviewCategory] = {category.id: category for category in REVIEW_CATEGORIES}

RATING_SCALE: Dict[int, str] = {
    5: "Significant Strength",
    4: "Strength",
    3: "Acceptable",
    2: "Needs Development",
    1: "Needs Significant Development",
}

REVIEW_TYPES: Tuple[ReviewType, ...] = (
    ReviewType("6-month", "6 Month Initial Review", False),
    ReviewType("12-month", "12 Month Evaluation", True),
    ReviewType("annual", "Annual Review", False),
)
REVIEW_TYPES_BY_VALUE: Dict[str, ReviewType] = {review_type.value: review_type for review_type in REVIEW_TYPES}

# Highest tier first; the first tier whose minimum is met applies.
BONUS_TIERS: Tuple[BonusTier, ...] = (
    BonusTier(5.0, "$100"),
    BonusTier(4.0, "$80"),
    BonusTier(3.0, "$60"),
)


def bonus_tier(average: Optional[float]) -> Optional[BonusTier]:
    if average is None:
        return None
    for tier in BONUS_TIERS:
        if average >= tier.min_average:
            return tier
    return None


def review_config_payload() -> Dict[str, List[Dict[str, object]]]:
    return {
        "categories": [category.to_dict() for category in REVIEW_CATEGORIES],
        "ratingScale": [{"value": value, "label": label} for value, label in RATING_SCALE.items()],
        "reviewTypes": [review_type.to_dict() for review_type in REVIEW_TYPES],
        "bonusTiers": [tier.to_dict() for tier in BONUS_TIERS],
    }

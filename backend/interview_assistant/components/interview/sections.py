"""Section aggregator for rated interview items.

Groups (question id, rating) pairs by a static section membership table and
averages the rated ones. A section with nothing rated is reported as having no
data; it never contributes a zero average.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..scoring.ratings import coerce_rating, mean, rating_label
from .form import section_membership, section_names


@dataclass(frozen=True)
class RatedItem:
    question_id: str
    value: Optional[int]


@dataclass(frozen=True)
class SectionScore:
    key: str
    section_name: str
    average: float
    rating: str
    questions_answered: int
    total_scale_questions: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sectionName": self.section_name,
            "average": self.average,
            "rating": self.rating,
            "questionsAnswered": self.questions_answered,
            "totalScaleQuestions": self.total_scale_questions,
        }


@dataclass(frozen=True)
class SectionSummary:
    scores: Tuple[SectionScore, ...]
    sections_without_data: Tuple[str, ...]
    overall_average: Optional[float]
    rated_count: int
    overall_rating: Optional[str] = None
    # Unrounded pooled mean; overall_average is its 2-place display value.
    overall_mean: Optional[float] = None

    def scores_dict(self) -> Dict[str, Dict[str, Any]]:
        return {score.key: score.to_dict() for score in self.scores}


def _field(response: Any, *names: str) -> Any:
    for name in names:
        if isinstance(response, Mapping):
            if name in response:
                return response[name]
        elif hasattr(response, name):
            return getattr(response, name)
    return None


def rated_items(responses: Iterable[Any]) -> List[RatedItem]:
    """Normalise raw responses; ratings outside the scale become None.

    A question rated more than once keeps its last rating.
    """
    items: Dict[str, RatedItem] = {}
    for response in responses or []:
        question_id = _field(response, "questionId", "question_id")
        if not question_id:
            continue
        value = _field(response, "value", "rating")
        items[str(question_id)] = RatedItem(question_id=str(question_id), value=coerce_rating(value))
    return list(items.values())


def aggregate_sections(
    responses: Iterable[Any],
    membership: Optional[Mapping[str, Sequence[str]]] = None,
    names: Optional[Mapping[str, str]] = None,
) -> SectionSummary:
    membership = membership if membership is not None else section_membership()
    names = names if names is not None else section_names()
    items = rated_items(responses)

    scores: List[SectionScore] = []
    without_data: List[str] = []
    pooled: List[int] = []
    for key, question_ids in membership.items():
        members = set(question_ids)
        ratings = [item.value for item in items if item.question_id in members and item.value is not None]
        if not ratings:
            without_data.append(key)
            continue
        pooled.extend(ratings)
        raw_average = sum(ratings) / len(ratings)
        average = mean(ratings)
        scores.append(
            SectionScore(
                key=key,
                section_name=names.get(key, key),
                average=average,
                rating=rating_label(raw_average),
                questions_answered=len(ratings),
                total_scale_questions=len(question_ids),
            )
        )

    overall_mean = sum(pooled) / len(pooled) if pooled else None
    return SectionSummary(
        scores=tuple(scores),
        sections_without_data=tuple(without_data),
        overall_average=mean(pooled),
        rated_count=len(pooled),
        overall_rating=rating_label(overall_mean) if overall_mean is not None else None,
        overall_mean=overall_mean,
    )

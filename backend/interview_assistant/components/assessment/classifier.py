"""True Colors trait classifier.

Tallies forced-choice answers per color, ranks the colors by frequency and
assigns the primary/secondary/tertiary/quaternary roles. Pure functions only:
no clock, no randomness, no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Tuple

from ..scoring.errors import IncompleteSubmission
from ..scoring.ratings import round_half_up
from .colors import COLOR_ORDER, TRUE_COLORS, Color, TraitProfile, lookup
from .questions import TOTAL_QUESTIONS

DEFAULT_MIN_COMPLETION = 0.75
ROLES = ("primary", "secondary", "tertiary", "quaternary")


@dataclass(frozen=True)
class ColorTally:
    count: int
    percentage: int


@dataclass(frozen=True)
class RankedColor:
    color: Color
    count: int
    percentage: int
    profile: TraitProfile


@dataclass(frozen=True)
class ColorRanking:
    all: Tuple[RankedColor, ...]

    @property
    def primary(self) -> RankedColor:
        return self.all[0]

    @property
    def secondary(self) -> RankedColor:
        return self.all[1]

    @property
    def tertiary(self) -> RankedColor:
        return self.all[2]

    @property
    def quaternary(self) -> RankedColor:
        return self.all[3]

    def by_role(self) -> Dict[str, RankedColor]:
        return dict(zip(ROLES, self.all))


@dataclass(frozen=True)
class Classification:
    valid_count: int
    expected_count: int
    tallies: Dict[Color, ColorTally]
    ranking: ColorRanking


def _field(response: Any, *names: str) -> Any:
    if isinstance(response, Mapping):
        for name in names:
            if name in response:
                return response[name]
        return None
    for name in names:
        if hasattr(response, name):
            return getattr(response, name)
    return None


def valid_answers(responses: Iterable[Any]) -> List[Tuple[str, Color]]:
    """Keep answers that carry a question id and one of the four colors.

    A question answered more than once counts once, with its last valid color.
    """
    answers: Dict[str, Color] = {}
    for response in responses or []:
        question_id = _field(response, "questionId", "question_id")
        if not isinstance(question_id, str) or not question_id.strip():
            continue
        color = Color.parse(_field(response, "color"))
        if color is None:
            continue
        answers[question_id.strip()] = color
    return list(answers.items())


def tally_colors(colors: Iterable[Color]) -> Dict[Color, ColorTally]:
    """Count answers per color; percentages are independently rounded half-up."""
    counts = {color: 0 for color in COLOR_ORDER}
    for color in colors:
        counts[color] += 1
    total = sum(counts.values())
    return {
        color: ColorTally(
            count=count,
            percentage=int(round_half_up(100 * count / total)) if total else 0,
        )
        for color, count in counts.items()
    }


def rank_colors(tallies: Mapping[Color, ColorTally]) -> ColorRanking:
    # sorted() is stable, so equal counts keep declaration order.
    ordered = sorted(COLOR_ORDER, key=lambda color: -tallies[color].count)
    return ColorRanking(
        all=tuple(
            RankedColor(
                color=color,
                count=tallies[color].count,
                percentage=tallies[color].percentage,
                profile=lookup(TRUE_COLORS, color, "trait profile"),
            )
            for color in ordered
        )
    )


def minimum_valid_responses(expected_count: int, min_completion: float = DEFAULT_MIN_COMPLETION) -> float:
    return expected_count * min_completion


def classify(
    responses: Iterable[Any],
    expected_count: int = TOTAL_QUESTIONS,
    min_completion: float = DEFAULT_MIN_COMPLETION,
) -> Classification:
    """Validate, tally and rank one candidate's answers.

    Raises ``IncompleteSubmission`` when fewer than ``min_completion`` of the
    expected questions carry a valid answer.
    """
    answers = valid_answers(responses)
    required = minimum_valid_responses(expected_count, min_completion)
    if not answers or len(answers) < required:
        raise IncompleteSubmission(
            f"Incomplete assessment. Please answer at least {round(min_completion * 100)}% of questions.",
            valid_count=len(answers),
            required_count=required,
        )
    tallies = tally_colors(color for _, color in answers)
    return Classification(
        valid_count=len(answers),
        expected_count=expected_count,
        tallies=tallies,
        ranking=rank_colors(tallies),
    )

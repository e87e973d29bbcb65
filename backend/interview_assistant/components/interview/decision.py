"""Hiring decision engine.

Maps an interviewer's overall score and flag counts to a recommendation tier
through an ordered rule table. The first matching rule wins; the final rule
always matches, so every input yields exactly one outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from ..scoring.errors import DefensiveInvariantError

STRONG_YES = "STRONG YES"
YES = "YES"
MAYBE = "MAYBE"
NO = "NO"
STRONG_NO = "STRONG NO"
OFFER = "OFFER"

# Ordinal tiers of the full interview flow, best first. STRONG NO is only ever
# chosen by the interviewer; the rule table never produces it.
INTERVIEW_TIERS = (STRONG_YES, YES, MAYBE, NO, STRONG_NO)
QUICK_SCREEN_TIERS = (OFFER, MAYBE, NO)


@dataclass(frozen=True)
class DecisionInput:
    overall_score: float
    red_flags_count: int = 0
    green_flags_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overallScore": self.overall_score,
            "redFlagsCount": self.red_flags_count,
            "greenFlagsCount": self.green_flags_count,
        }


@dataclass(frozen=True)
class DecisionOutcome:
    recommendation: str
    confidence: str
    rationale: str
    next_steps: Optional[Tuple[str, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "recommendation": self.recommendation,
            "confidence": self.confidence,
            "rationale": self.rationale,
        }
        if self.next_steps is not None:
            payload["nextSteps"] = list(self.next_steps)
        return payload


@dataclass(frozen=True)
class DecisionRule:
    name: str
    matches: Callable[[DecisionInput], bool]
    outcome: DecisionOutcome


def _always(_: DecisionInput) -> bool:
    return True


INTERVIEW_RULES: Tuple[DecisionRule, ...] = (
    DecisionRule(
        name="strong_yes",
        matches=lambda d: d.overall_score >= 8 and d.green_flags_count >= 4 and d.red_flags_count <= 1,
        outcome=DecisionOutcome(
            STRONG_YES, "high", "Excellent interview with strong alignment and minimal concerns"
        ),
    ),
    DecisionRule(
        name="yes",
        matches=lambda d: d.overall_score >= 7 and d.green_flags_count >= 3 and d.red_flags_count <= 2,
        outcome=DecisionOutcome(YES, "high", "Strong interview showing good fit and potential"),
    ),
    DecisionRule(
        name="maybe_reference_check",
        matches=lambda d: d.overall_score >= 6 and d.red_flags_count <= 2,
        outcome=DecisionOutcome(
            MAYBE,
            "medium",
            "Moderate interview - reference check and team discussion recommended",
            ("Complete reference checks", "Discuss with team", "Consider second interview"),
        ),
    ),
    DecisionRule(
        name="no",
        matches=lambda d: d.overall_score < 5 or d.red_flags_count >= 4,
        outcome=DecisionOutcome(NO, "high", "Significant concerns identified during interview"),
    ),
    DecisionRule(
        name="maybe_mixed",
        matches=_always,
        outcome=DecisionOutcome(
            MAYBE,
            "low",
            "Mixed results - additional evaluation needed",
            ("Gather additional input", "Review with supervisor"),
        ),
    ),
)

# Reduced table used by the spreadsheet automation and the questionnaire quick screen.
QUICK_SCREEN_RULES: Tuple[DecisionRule, ...] = (
    DecisionRule(
        name="offer",
        matches=lambda d: d.overall_score >= 8 and d.green_flags_count >= 4 and d.red_flags_count <= 1,
        outcome=DecisionOutcome(OFFER, "high", "Strong score with multiple green flags"),
    ),
    DecisionRule(
        name="maybe_reference_check",
        matches=lambda d: 6 <= d.overall_score <= 7,
        outcome=DecisionOutcome(MAYBE, "medium", "Moderate score - reference check needed"),
    ),
    DecisionRule(
        name="no",
        matches=lambda d: d.overall_score < 5 or d.red_flags_count >= 3,
        outcome=DecisionOutcome(NO, "high", "Low score or significant concerns"),
    ),
    DecisionRule(
        name="maybe_mixed",
        matches=_always,
        outcome=DecisionOutcome(MAYBE, "low", "Mixed results - additional review needed"),
    ),
)


def first_matching_rule(
    decision_input: DecisionInput, rules: Sequence[DecisionRule] = INTERVIEW_RULES
) -> DecisionRule:
    for rule in rules:
        if rule.matches(decision_input):
            return rule
    raise DefensiveInvariantError("Decision rule table has no catch-all rule")


def decide(decision_input: DecisionInput, rules: Sequence[DecisionRule] = INTERVIEW_RULES) -> DecisionOutcome:
    return first_matching_rule(decision_input, rules).outcome


def decision_input_from_flags(
    overall_score: float,
    red_flags: Optional[Sequence[Any]] = None,
    green_flags: Optional[Sequence[Any]] = None,
) -> DecisionInput:
    return DecisionInput(
        overall_score=overall_score,
        red_flags_count=len(red_flags or []),
        green_flags_count=len(green_flags or []),
    )

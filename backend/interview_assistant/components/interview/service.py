"""Interview evaluation orchestration.

Validates the parts of a submission the scoring core depends on, then runs the
section aggregator and the decision engine and stamps the composed report.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Optional

from ...shared.utils import isoformat_z, new_submission_id, utcnow
from ..scoring.errors import ValidationError
from ..scoring.ratings import round_half_up
from .decision import (
    INTERVIEW_RULES,
    QUICK_SCREEN_RULES,
    DecisionInput,
    decision_input_from_flags,
    first_matching_rule,
)
from .form import template_membership, template_section_names
from .reports import build_interview_report, build_questionnaire_report
from .schemas import CalculateDecisionRequest, InterviewSubmit, QuestionnaireSubmit
from .sections import aggregate_sections

logger = logging.getLogger(__name__)

# Questionnaire averages are on the 1-3 scale; the quick screen expects 1-10.
QUESTIONNAIRE_SCORE_FACTOR = 3.33


def _person(info) -> Dict[str, Any]:
    return info.model_dump(exclude_none=True)


def validate_interview_submission(payload: InterviewSubmit) -> None:
    if payload.candidate_info is None or not (payload.candidate_info.name or "").strip():
        raise ValidationError("Candidate information is required")
    if payload.interviewer_info is None or not (payload.interviewer_info.name or "").strip():
        raise ValidationError("Interviewer information is required")
    if payload.responses is None:
        raise ValidationError("Evaluation responses are required")
    if payload.decision is None or payload.decision.overall_score is None:
        raise ValidationError("Decision with overall score is required")


def build_interview_evaluation(payload: InterviewSubmit, *, now: Optional[datetime] = None) -> Dict[str, Any]:
    validate_interview_submission(payload)
    decision = payload.decision
    summary = aggregate_sections(payload.responses)
    decision_input = decision_input_from_flags(decision.overall_score, decision.red_flags, decision.green_flags)
    rule = first_matching_rule(decision_input, INTERVIEW_RULES)
    logger.info(
        "Interview evaluated",
        extra={
            "rule": rule.name,
            "overall_score": decision.overall_score,
            "sections_rated": len(summary.scores),
        },
    )

    stamp = now or utcnow()
    report = {
        "evaluationId": new_submission_id("EVAL", stamp),
        "timestamp": isoformat_z(stamp),
        "candidateInfo": _person(payload.candidate_info),
        "interviewerInfo": _person(payload.interviewer_info),
        **build_interview_report(
            summary=summary,
            outcome=rule.outcome,
            interview_score=decision.overall_score,
            green_flag_ids=decision.green_flags,
            red_flag_ids=decision.red_flags,
            interviewer_recommendation=decision.recommendation,
            rationale=decision.rationale,
            next_steps=decision.next_steps,
        ),
    }
    return {"success": True, "message": "Evaluation submitted successfully", "report": report}


def calculate_decision(payload: CalculateDecisionRequest) -> Dict[str, Any]:
    if payload.overall_score is None:
        raise ValidationError("Overall score is required")
    decision_input: DecisionInput = decision_input_from_flags(
        payload.overall_score, payload.red_flags, payload.green_flags
    )
    outcome = first_matching_rule(decision_input, INTERVIEW_RULES).outcome
    return {"success": True, "input": decision_input.to_dict(), "decision": outcome.to_dict()}


def questionnaire_score(overall_mean: float) -> int:
    """Scale the unrounded 1-3 mean to the 10-point screen, rounding once."""
    return int(round_half_up(overall_mean * QUESTIONNAIRE_SCORE_FACTOR))


def build_questionnaire_result(payload: QuestionnaireSubmit, *, now: Optional[datetime] = None) -> Dict[str, Any]:
    if not (payload.candidate_name or "").strip():
        raise ValidationError("Candidate name is required")
    if not (payload.interviewer_name or "").strip():
        raise ValidationError("Interviewer name is required")

    summary = aggregate_sections(
        payload.responses,
        membership=template_membership(),
        names=template_section_names(),
    )
    if summary.overall_average is None:
        raise ValidationError("Please rate at least one question")

    overall_score = questionnaire_score(summary.overall_mean)
    decision_input = decision_input_from_flags(overall_score, payload.red_flags, payload.green_flags)
    outcome = first_matching_rule(decision_input, QUICK_SCREEN_RULES).outcome

    stamp = now or utcnow()
    return {
        "success": True,
        "questionnaireId": new_submission_id("QST", stamp),
        "timestamp": isoformat_z(stamp),
        "candidateName": payload.candidate_name.strip(),
        "interviewerName": payload.interviewer_name.strip(),
        "position": payload.position,
        **build_questionnaire_report(summary=summary, overall_score=overall_score, outcome=outcome),
    }

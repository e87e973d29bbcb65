"""Request models for the interview evaluation endpoints."""

from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt

Score = Union[StrictInt, StrictFloat]


class PersonInfo(BaseModel):
    name: Optional[str] = Field(default=None, max_length=200)

    # Position, email, date and similar details are echoed back untouched.
    model_config = {"extra": "allow"}


class EvaluationAnswer(BaseModel):
    question_id: Optional[str] = Field(default=None, alias="questionId")
    value: Any = None

    model_config = {"populate_by_name": True, "extra": "allow"}


class InterviewDecision(BaseModel):
    overall_score: Optional[Score] = Field(default=None, alias="overallScore")
    green_flags: List[str] = Field(default_factory=list, alias="greenFlags")
    red_flags: List[str] = Field(default_factory=list, alias="redFlags")
    recommendation: Optional[str] = None
    rationale: Optional[str] = None
    next_steps: Optional[List[str]] = Field(default=None, alias="nextSteps")

    model_config = {"populate_by_name": True, "extra": "ignore"}


class InterviewSubmit(BaseModel):
    candidate_info: Optional[PersonInfo] = Field(default=None, alias="candidateInfo")
    interviewer_info: Optional[PersonInfo] = Field(default=None, alias="interviewerInfo")
    responses: Optional[List[EvaluationAnswer]] = None
    decision: Optional[InterviewDecision] = None

    model_config = {"populate_by_name": True}


class CalculateDecisionRequest(BaseModel):
    overall_score: Optional[Score] = Field(default=None, alias="overallScore")
    red_flags: Optional[List[Any]] = Field(default=None, alias="redFlags")
    green_flags: Optional[List[Any]] = Field(default=None, alias="greenFlags")

    model_config = {"populate_by_name": True}


class QuestionnaireSubmit(BaseModel):
    candidate_name: Optional[str] = Field(default=None, alias="candidateName", max_length=200)
    interviewer_name: Optional[str] = Field(default=None, alias="interviewerName", max_length=200)
    position: Optional[str] = Field(default=None, max_length=200)
    responses: List[EvaluationAnswer] = Field(default_factory=list)
    green_flags: List[str] = Field(default_factory=list, alias="greenFlags")
    red_flags: List[str] = Field(default_factory=list, alias="redFlags")

    model_config = {"populate_by_name": True}

"""Request models for scenario submissions and interviewer scoring."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class ScenarioAnswer(BaseModel):
    question_id: Optional[str] = Field(default=None, alias="questionId")
    response: Optional[str] = None

    model_config = {"populate_by_name": True, "extra": "ignore"}


class ScenarioSubmit(BaseModel):
    candidate_name: Optional[str] = Field(default=None, alias="candidateName", max_length=200)
    candidate_email: Optional[str] = Field(default=None, alias="candidateEmail", max_length=320)
    responses: Optional[List[ScenarioAnswer]] = None

    model_config = {"populate_by_name": True}


class CategoryScore(BaseModel):
    category: Optional[str] = None
    score: Any = None
    notes: Optional[str] = None

    model_config = {"extra": "allow"}


class ScenarioScore(BaseModel):
    submission_id: Optional[str] = Field(default=None, alias="submissionId")
    interviewer_name: Optional[str] = Field(default=None, alias="interviewerName", max_length=200)
    category_scores: Optional[List[CategoryScore]] = Field(default=None, alias="categoryScores")
    overall_notes: Optional[str] = Field(default=None, alias="overallNotes")
    recommendation: Optional[str] = None

    model_config = {"populate_by_name": True}

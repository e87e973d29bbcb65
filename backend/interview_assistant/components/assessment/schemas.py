"""Request models for the True Colors assessment endpoints."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class AssessmentAnswer(BaseModel):
    # Both fields stay loosely typed: unknown colors and missing ids are
    # filtered by the classifier, not rejected by request validation.
    question_id: Optional[str] = Field(default=None, alias="questionId")
    color: Optional[str] = None

    model_config = {"populate_by_name": True, "extra": "ignore"}


class AssessmentSubmit(BaseModel):
    candidate_name: Optional[str] = Field(default=None, alias="candidateName", max_length=200)
    candidate_email: Optional[str] = Field(default=None, alias="candidateEmail", max_length=320)
    responses: List[AssessmentAnswer]

    model_config = {"populate_by_name": True}

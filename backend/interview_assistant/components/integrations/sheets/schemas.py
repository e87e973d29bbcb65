"""Request models for direct spreadsheet writes."""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, Field


class CandidateCreate(BaseModel):
    name: Optional[str] = Field(default=None, max_length=200)
    email: Optional[str] = Field(default=None, max_length=320)
    phone: Optional[str] = Field(default=None, max_length=50)
    position: Optional[str] = Field(default=None, max_length=200)
    source: Optional[str] = Field(default=None, max_length=200)
    notes: Optional[str] = None


class HiringDecisionCreate(BaseModel):
    candidate_id: Optional[str] = Field(default=None, alias="candidateId")
    candidate_name: Optional[str] = Field(default=None, alias="candidateName", max_length=200)
    position: Optional[str] = Field(default=None, max_length=200)
    decision: Optional[str] = Field(default=None, max_length=100)
    start_date: Optional[str] = Field(default=None, alias="startDate")
    salary: Optional[Union[str, float]] = None
    notes: Optional[str] = None
    decided_by: Optional[str] = Field(default=None, alias="decidedBy", max_length=200)

    model_config = {"populate_by_name": True}

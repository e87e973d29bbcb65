"""Request model for employee review submissions."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ReviewSubmit(BaseModel):
    employee_name: Optional[str] = Field(default=None, alias="employeeName", max_length=200)
    employee_title: Optional[str] = Field(default=None, alias="employeeTitle", max_length=200)
    review_date: Optional[str] = Field(default=None, alias="reviewDate")
    supervisor: Optional[str] = Field(default=None, max_length=200)
    review_type: Optional[str] = Field(default=None, alias="reviewType")
    # category id -> criterion name -> rating (1..5)
    ratings: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    comments: Dict[str, str] = Field(default_factory=dict)
    strengths: Optional[str] = None
    development_areas: Optional[str] = Field(default=None, alias="developmentAreas")
    goals: Optional[str] = None
    submitted_at: Optional[str] = Field(default=None, alias="submittedAt")

    model_config = {"populate_by_name": True, "extra": "ignore"}

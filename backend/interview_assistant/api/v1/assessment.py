"""True Colors assessment routes: thin handlers over the classifier and report composer."""

from fastapi import APIRouter, BackgroundTasks, HTTPException

from ...components.assessment.colors import TRUE_COLORS, find_profile
from ...components.assessment.questions import TOTAL_QUESTIONS, questions_payload
from ...components.assessment.schemas import AssessmentSubmit
from ...components.assessment.service import build_assessment_result
from ...components.integrations.sheets.service import record_assessment_sync
from ...components.notifications.service import send_assessment_notification_sync
from ...platform.config import settings

router = APIRouter(prefix="/assessment", tags=["Assessment"])


@router.get("/questions")
def get_questions():
    return {
        "success": True,
        "totalQuestions": TOTAL_QUESTIONS,
        "colors": [profile.summary() for profile in TRUE_COLORS.values()],
        "questions": questions_payload(),
    }


@router.get("/colors")
def get_colors():
    return {"success": True, "data": [profile.overview() for profile in TRUE_COLORS.values()]}


@router.get("/color/{color_id}")
def get_color(color_id: str):
    profile = find_profile(color_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Color not found")
    return {"success": True, "data": profile.to_dict()}


@router.post("/submit")
def submit_assessment(data: AssessmentSubmit, background_tasks: BackgroundTasks):
    result = build_assessment_result(
        candidate_name=data.candidate_name,
        candidate_email=data.candidate_email,
        responses=data.responses,
        min_completion=settings.ASSESSMENT_MIN_COMPLETION,
    )
    background_tasks.add_task(send_assessment_notification_sync, result)
    background_tasks.add_task(record_assessment_sync, result)
    return result

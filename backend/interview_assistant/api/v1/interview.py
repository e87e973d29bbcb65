"""Interview routes: evaluation form, decision engine and questionnaire quick screen."""

from fastapi import APIRouter, BackgroundTasks, HTTPException

from ...components.integrations.sheets.service import record_interview_sync, record_questionnaire_sync
from ...components.interview.form import (
    EVALUATION_SCALE,
    EVALUATION_SECTIONS,
    QUESTION_TEMPLATES,
    SECTIONS_BY_ID,
    flags_payload,
)
from ...components.interview.schemas import CalculateDecisionRequest, InterviewSubmit, QuestionnaireSubmit
from ...components.interview.service import (
    build_interview_evaluation,
    build_questionnaire_result,
    calculate_decision,
)
from ...components.notifications.service import send_interview_notification_sync

router = APIRouter(prefix="/interview", tags=["Interview"])


@router.get("/form")
def get_form():
    return {
        "success": True,
        "sections": [section.to_dict() for section in EVALUATION_SECTIONS],
        "evaluationScale": EVALUATION_SCALE,
        **flags_payload(),
    }


@router.get("/templates/questions")
def get_question_templates():
    return {"success": True, "templates": {key: list(questions) for key, questions in QUESTION_TEMPLATES.items()}}


@router.get("/section/{section_id}")
def get_section(section_id: str):
    section = SECTIONS_BY_ID.get(section_id)
    if section is None:
        raise HTTPException(status_code=404, detail="Section not found")
    return {
        "success": True,
        "data": section.to_dict(),
        "relatedQuestions": list(QUESTION_TEMPLATES.get(section_id, ())),
    }


@router.get("/scale")
def get_scale():
    return {"success": True, "scale": EVALUATION_SCALE, **flags_payload()}


@router.post("/submit")
def submit_evaluation(data: InterviewSubmit, background_tasks: BackgroundTasks):
    result = build_interview_evaluation(data)
    background_tasks.add_task(send_interview_notification_sync, result["report"])
    background_tasks.add_task(record_interview_sync, result["report"])
    return result


@router.post("/calculate-decision")
def calculate_decision_preview(data: CalculateDecisionRequest):
    return calculate_decision(data)


@router.post("/questionnaire")
def submit_questionnaire(data: QuestionnaireSubmit, background_tasks: BackgroundTasks):
    result = build_questionnaire_result(data)
    background_tasks.add_task(record_questionnaire_sync, result)
    return result

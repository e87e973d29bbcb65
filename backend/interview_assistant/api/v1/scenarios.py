"""Scenario routes: candidate-facing scenarios and interviewer scoring."""

from fastapi import APIRouter, BackgroundTasks, HTTPException

from ...components.integrations.sheets.service import record_scenario_sync
from ...components.notifications.service import send_scenario_notification_sync
from ...components.scenarios.catalog import ESTIMATED_TIME, INSTRUCTIONS, SCENARIOS, find_scenario, rubric_payload
from ...components.scenarios.schemas import ScenarioScore, ScenarioSubmit
from ...components.scenarios.service import build_scenario_score, build_scenario_submission
from ...platform.config import settings

router = APIRouter(prefix="/scenarios", tags=["Scenarios"])


@router.get("")
def list_scenarios():
    return {"success": True, "scenarios": [scenario.summary() for scenario in SCENARIOS]}


@router.get("/all")
def get_all_scenarios():
    return {
        "success": True,
        "count": len(SCENARIOS),
        "instructions": INSTRUCTIONS,
        "estimatedTime": ESTIMATED_TIME,
        "scenarios": [scenario.to_dict() for scenario in SCENARIOS],
    }


@router.get("/scoring/rubric")
def get_scoring_rubric():
    return {"success": True, **rubric_payload()}


@router.get("/{scenario_id}")
def get_scenario(scenario_id: str):
    scenario = find_scenario(scenario_id)
    if scenario is None:
        raise HTTPException(status_code=404, detail="Scenario not found")
    return {"success": True, "data": scenario.to_dict()}


@router.post("/submit")
def submit_scenarios(data: ScenarioSubmit, background_tasks: BackgroundTasks):
    result = build_scenario_submission(
        data,
        min_completion_percent=settings.SCENARIO_MIN_COMPLETION_PERCENT,
    )
    background_tasks.add_task(send_scenario_notification_sync, result)
    background_tasks.add_task(record_scenario_sync, result)
    return result


@router.post("/score")
def score_scenarios(data: ScenarioScore):
    return build_scenario_score(data)

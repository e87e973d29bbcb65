"""API tests for the scenario endpoints (/api/scenarios/)."""

from interview_assistant.api.v1 import scenarios as scenarios_api
from interview_assistant.components.scenarios.catalog import SCENARIOS


def _responses(count):
    question_ids = [question.id for scenario in SCENARIOS for question in scenario.questions]
    return [{"questionId": qid, "response": "I would start by listening."} for qid in question_ids[:count]]


def test_list_scenarios(client):
    resp = client.get("/api/scenarios")
    assert resp.status_code == 200
    assert [s["id"] for s in resp.json()["scenarios"]] == ["SC1", "SC2", "SC3", "SC4", "SC5", "SC6"]


def test_all_scenarios_include_questions(client):
    resp = client.get("/api/scenarios/all")
    assert resp.status_code == 200
    data = resp.json()
    assert data["count"] == 6
    assert data["estimatedTime"] == "45-60 minutes"
    assert sum(len(s["questions"]) for s in data["scenarios"]) == 30


def test_scoring_rubric_is_not_shadowed_by_scenario_lookup(client):
    resp = client.get("/api/scenarios/scoring/rubric")
    assert resp.status_code == 200
    assert len(resp.json()["categories"]) == 7


def test_single_scenario(client):
    resp = client.get("/api/scenarios/SC2")
    assert resp.status_code == 200
    assert resp.json()["data"]["id"] == "SC2"


def test_unknown_scenario_is_404(client):
    resp = client.get("/api/scenarios/SC42")
    assert resp.status_code == 404
    assert resp.json()["message"] == "Scenario not found"


def test_submit(client, monkeypatch):
    sent = []
    monkeypatch.setattr(scenarios_api, "send_scenario_notification_sync", lambda result: sent.append(result))
    resp = client.post("/api/scenarios/submit", json={"candidateName": "Casey", "responses": _responses(20)})
    assert resp.status_code == 200
    data = resp.json()
    assert data["submissionId"].startswith("SCEN-")
    assert data["completionPercentage"] == 67
    assert len(sent) == 1


def test_submit_below_threshold_is_400(client):
    resp = client.post("/api/scenarios/submit", json={"candidateName": "Casey", "responses": _responses(10)})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Please complete at least 50% of the scenario questions"


def test_submit_without_name_is_400(client):
    resp = client.post("/api/scenarios/submit", json={"responses": _responses(30)})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Candidate name is required"


def test_score(client):
    resp = client.post(
        "/api/scenarios/score",
        json={
            "submissionId": "SCEN-1",
            "interviewerName": "Pat",
            "categoryScores": [{"category": "Safety Assessment", "score": 3}, {"category": "Boundaries", "score": 3}],
            "recommendation": "advance",
        },
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["averageScore"] == 3.0
    assert data["overallRating"] == "Strong"


def test_score_without_identity_is_400(client):
    resp = client.post("/api/scenarios/score", json={"categoryScores": []})
    assert resp.status_code == 400

"""Direct spreadsheet routes: status, candidate rows, hiring decisions and read-back."""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ...components.integrations.sheets import rows
from ...components.integrations.sheets.schemas import CandidateCreate, HiringDecisionCreate
from ...components.integrations.sheets.service import build_sheets_service, sheets_skip_reason
from ...components.scoring.errors import CollaboratorFailure, ValidationError
from ...shared.utils import isoformat_z, new_submission_id, utcnow

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sheets", tags=["Sheets"])


def _require_sheets() -> None:
    reason = sheets_skip_reason()
    if reason:
        raise HTTPException(status_code=503, detail=reason)


def _require_known_sheet(sheet_name: str) -> None:
    if sheet_name not in rows.SHEET_HEADERS:
        raise HTTPException(status_code=404, detail=f"Unknown sheet '{sheet_name}'")


@router.get("/status")
def sheets_status():
    reason = sheets_skip_reason()
    if reason:
        return {"success": False, "connected": False, "message": reason}
    try:
        return {"success": True, **build_sheets_service().status()}
    except CollaboratorFailure as exc:
        logger.error("Collaborator failure (%s): %s", exc.collaborator, exc.message)
        return {"success": False, "connected": False, "message": "Failed to connect to Google Sheets"}


@router.post("/candidates")
def add_candidate(data: CandidateCreate):
    if not (data.name or "").strip():
        raise ValidationError("Candidate name is required")
    _require_sheets()
    stamp = utcnow()
    candidate_id = new_submission_id("CAN", stamp)
    timestamp = isoformat_z(stamp)
    row = rows.candidate_row(
        candidate_id=candidate_id,
        timestamp=timestamp,
        name=data.name.strip(),
        email=data.email,
        phone=data.phone,
        position=data.position,
        source=data.source,
        notes=data.notes,
    )
    try:
        build_sheets_service().append_row(rows.CANDIDATES, row)
    except CollaboratorFailure as exc:
        logger.error("Collaborator failure (%s): %s", exc.collaborator, exc.message)
        raise HTTPException(status_code=502, detail="Failed to add candidate") from exc
    return {
        "success": True,
        "message": "Candidate added successfully",
        "candidateId": candidate_id,
        "timestamp": timestamp,
    }


@router.post("/decisions")
def record_decision(data: HiringDecisionCreate):
    if not (data.candidate_name or "").strip() or not (data.decision or "").strip():
        raise ValidationError("Candidate name and decision are required")
    _require_sheets()
    stamp = utcnow()
    decision_id = new_submission_id("DEC", stamp)
    timestamp = isoformat_z(stamp)
    row = rows.decision_row(
        decision_id=decision_id,
        timestamp=timestamp,
        candidate_id=data.candidate_id,
        candidate_name=data.candidate_name.strip(),
        position=data.position,
        decision=data.decision.strip(),
        start_date=data.start_date,
        salary=data.salary,
        notes=data.notes,
        decided_by=data.decided_by,
    )
    try:
        build_sheets_service().append_row(rows.DECISIONS, row)
    except CollaboratorFailure as exc:
        logger.error("Collaborator failure (%s): %s", exc.collaborator, exc.message)
        raise HTTPException(status_code=502, detail="Failed to record decision") from exc
    return {
        "success": True,
        "message": "Hiring decision recorded successfully",
        "decisionId": decision_id,
        "timestamp": timestamp,
    }


@router.post("/initialize")
def initialize_sheets():
    _require_sheets()
    try:
        result = build_sheets_service().initialize()
    except CollaboratorFailure as exc:
        logger.error("Collaborator failure (%s): %s", exc.collaborator, exc.message)
        raise HTTPException(status_code=502, detail="Failed to initialize sheets") from exc
    return {"success": True, "message": "Sheets initialized successfully", **result}


@router.get("/data/{sheet_name}")
def sheet_data(sheet_name: str):
    _require_known_sheet(sheet_name)
    _require_sheets()
    try:
        data = build_sheets_service().read_rows(sheet_name)
    except CollaboratorFailure as exc:
        logger.error("Collaborator failure (%s): %s", exc.collaborator, exc.message)
        raise HTTPException(status_code=502, detail="Failed to retrieve data") from exc
    return {"success": True, "sheet": sheet_name, "rowCount": len(data), "data": data}


@router.get("/search")
def search_sheets(q: Optional[str] = None, sheet: Optional[str] = None):
    query = (q or "").strip()
    if not query:
        raise ValidationError("Search query is required")
    if sheet is not None:
        _require_known_sheet(sheet)
    _require_sheets()
    try:
        results = build_sheets_service().search(query, sheet)
    except CollaboratorFailure as exc:
        logger.error("Collaborator failure (%s): %s", exc.collaborator, exc.message)
        raise HTTPException(status_code=502, detail="Search failed") from exc
    return {"success": True, "query": query, "resultCount": len(results), "results": results}


@router.get("/export/{sheet_name}")
def export_sheet(sheet_name: str):
    """Download one tab as a dated JSON backup."""
    _require_known_sheet(sheet_name)
    _require_sheets()
    try:
        data = build_sheets_service().read_rows(sheet_name)
    except CollaboratorFailure as exc:
        logger.error("Collaborator failure (%s): %s", exc.collaborator, exc.message)
        raise HTTPException(status_code=502, detail="Export failed") from exc
    stamp = utcnow()
    return JSONResponse(
        content={"exportDate": isoformat_z(stamp), "sheet": sheet_name, "rowCount": len(data), "data": data},
        headers={"Content-Disposition": f'attachment; filename="{sheet_name}-{stamp.date().isoformat()}.json"'},
    )

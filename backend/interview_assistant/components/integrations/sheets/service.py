"""Google Sheets adapter for the hiring spreadsheet.

Talks to the Sheets API through gspread, authenticated as a service account
that has been shared on the spreadsheet. Writes are row appends; reads return
header-keyed records for a tab.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar

import gspread
from google.auth.exceptions import GoogleAuthError
from google.oauth2.service_account import Credentials
from gspread.exceptions import GSpreadException, WorksheetNotFound

from ....platform.config import settings
from ...scoring.errors import CollaboratorFailure
from . import rows

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
TOKEN_URI = "https://oauth2.googleapis.com/token"

# Transport errors from google-auth's requests session are OSError subclasses;
# a malformed private key surfaces as ValueError.
_SHEETS_ERRORS = (GSpreadException, GoogleAuthError, OSError, ValueError)

T = TypeVar("T")


def service_account_credentials(client_email: str, private_key: str) -> Credentials:
    """Build credentials from the env-style key, which stores newlines as ``\\n``."""
    info = {
        "type": "service_account",
        "client_email": client_email,
        "private_key": private_key.replace("\\n", "\n"),
        "token_uri": TOKEN_URI,
    }
    return Credentials.from_service_account_info(info, scopes=SCOPES)


class SheetsService:
    """Client for one spreadsheet, opened lazily on first use."""

    def __init__(
        self,
        spreadsheet_id: str,
        client_email: str = "",
        private_key: str = "",
        timeout: float = 10.0,
        client: Optional[gspread.Client] = None,
    ):
        self.spreadsheet_id = spreadsheet_id
        self.client_email = client_email
        self.private_key = private_key
        self.timeout = timeout
        self._client = client
        self._spreadsheet = None

    def _open(self):
        if self._spreadsheet is None:
            if self._client is None:
                self._client = gspread.authorize(service_account_credentials(self.client_email, self.private_key))
                self._client.set_timeout(self.timeout)
            self._spreadsheet = self._client.open_by_key(self.spreadsheet_id)
        return self._spreadsheet

    def _call(self, action: str, fn: Callable[[Any], T]) -> T:
        try:
            return fn(self._open())
        except _SHEETS_ERRORS as exc:
            raise CollaboratorFailure("sheets", f"{action} request failed: {exc}") from exc

    @staticmethod
    def _check_sheet(sheet: str) -> None:
        if sheet not in rows.SHEET_HEADERS:
            raise ValueError(f"Unknown sheet '{sheet}'")

    def append_row(self, sheet: str, values: List[Any]) -> dict:
        self._check_sheet(sheet)
        self._call("append", lambda book: book.worksheet(sheet).append_row(values, value_input_option="RAW"))
        logger.info("Appended row to sheet '%s'", sheet)
        return {"saved": True, "sheet": sheet}

    def initialize(self) -> dict:
        """Create missing tabs and write header rows."""

        def run(book) -> List[str]:
            existing = {worksheet.title: worksheet for worksheet in book.worksheets()}
            created = []
            for name, headers in rows.SHEET_HEADERS.items():
                worksheet = existing.get(name)
                if worksheet is None:
                    worksheet = book.add_worksheet(title=name, rows=1000, cols=max(26, len(headers)))
                    created.append(name)
                worksheet.update(range_name="A1", values=[headers])
            return created

        created = self._call("initialize", run)
        if created:
            logger.info("Created sheets: %s", ", ".join(created))
        return {"initialized": True, "sheets": list(rows.SHEET_HEADERS), "created": created}

    def status(self) -> dict:
        def run(book) -> dict:
            return {
                "connected": True,
                "spreadsheetTitle": book.title,
                "sheets": [worksheet.title for worksheet in book.worksheets()],
            }

        return self._call("status", run)

    def read_rows(self, sheet: str) -> List[Dict[str, Any]]:
        self._check_sheet(sheet)
        values = self._call("read", lambda book: book.worksheet(sheet).get_all_values())
        return rows.records_from_values(values)

    def search(self, query: str, sheet: Optional[str] = None) -> List[Dict[str, Any]]:
        """Search one tab, or every known tab in declaration order; missing tabs are skipped."""
        if sheet is not None:
            self._check_sheet(sheet)
        names = [sheet] if sheet is not None else list(rows.SHEET_HEADERS)

        def run(book) -> List[Dict[str, Any]]:
            hits: List[Dict[str, Any]] = []
            for name in names:
                try:
                    values = book.worksheet(name).get_all_values()
                except WorksheetNotFound:
                    logger.info("Sheet '%s' not found; skipping in search", name)
                    continue
                hits.extend(rows.matching_records(name, values, query))
            return hits

        return self._call("search", run)


def sheets_skip_reason() -> str | None:
    if settings.mvp_flags.disable_sheets:
        return "Spreadsheet integration disabled"
    if not settings.sheets_configured:
        return "Spreadsheet integration not configured"
    return None


def build_sheets_service() -> SheetsService:
    return SheetsService(
        spreadsheet_id=settings.GOOGLE_SHEETS_ID,
        client_email=settings.GOOGLE_SERVICE_ACCOUNT_EMAIL,
        private_key=settings.GOOGLE_PRIVATE_KEY,
        timeout=settings.SHEETS_TIMEOUT_SECONDS,
    )


def _record(sheet: str, build_row: Callable[[Mapping[str, Any]], List[Any]], payload: Mapping[str, Any]) -> dict:
    """Background entry point: one attempt, failures logged and returned."""
    reason = sheets_skip_reason()
    if reason:
        logger.info("Skipping '%s' row: %s", sheet, reason)
        return {"saved": False, "reason": reason}
    try:
        return build_sheets_service().append_row(sheet, build_row(payload))
    except CollaboratorFailure as exc:
        logger.error("Collaborator failure (%s): %s", exc.collaborator, exc.message, extra={"collaborator": exc.collaborator})
        return {"saved": False, "error": exc.message}
    except Exception:
        logger.exception("Unexpected error recording '%s' row", sheet, extra={"collaborator": "sheets"})
        return {"saved": False, "error": f"Unexpected error recording '{sheet}' row"}


def record_assessment_sync(result: Mapping[str, Any]) -> dict:
    return _record(rows.ASSESSMENTS, rows.assessment_row, result)


def record_interview_sync(report: Mapping[str, Any]) -> dict:
    return _record(rows.INTERVIEWS, rows.interview_row, report)


def record_questionnaire_sync(result: Mapping[str, Any]) -> dict:
    return _record(rows.INTERVIEWS, rows.questionnaire_row, result)


def record_scenario_sync(result: Mapping[str, Any]) -> dict:
    return _record(rows.SCENARIOS, rows.scenario_row, result)


def record_review_sync(review: Mapping[str, Any]) -> dict:
    return _record(rows.REVIEWS, rows.review_row, review)

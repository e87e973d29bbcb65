from __future__ import annotations

import re
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parents[1]
PACKAGE_DIR = PROJECT_ROOT / "interview_assistant"
API_V1_DIR = PACKAGE_DIR / "api" / "v1"
COMPONENTS_DIR = PACKAGE_DIR / "components"
SCORING_CORE = ("assessment", "interview", "scenarios", "reviews", "scoring")


def _python_files(root: Path) -> list[Path]:
    return sorted(path for path in root.rglob("*.py") if path.is_file())


def test_scoring_core_does_no_io() -> None:
    disallowed = re.compile(r"^\s*(?:from|import)\s+(fastapi|starlette|httpx|gspread|resend|sentry_sdk)\b", re.MULTILINE)
    violations: list[str] = []
    for component in SCORING_CORE:
        for path in _python_files(COMPONENTS_DIR / component):
            match = disallowed.search(path.read_text(encoding="utf-8"))
            if match:
                violations.append(f"{path.relative_to(PACKAGE_DIR)} imports {match.group(1)}")
    assert not violations, f"Scoring core modules must stay free of transport and I/O: {violations}"


def test_scoring_core_does_not_import_collaborators() -> None:
    pattern = re.compile(r"(?:from|import)\s+\.\.(?:\.components\.)?(notifications|integrations)\b")
    violations: list[str] = []
    for component in SCORING_CORE:
        for path in _python_files(COMPONENTS_DIR / component):
            if pattern.search(path.read_text(encoding="utf-8")):
                violations.append(str(path.relative_to(PACKAGE_DIR)))
    assert not violations, f"Scoring core must not reach outbound adapters: {violations}"


def test_api_v1_is_transport_only() -> None:
    disallowed = re.compile(r"^\s*(?:from|import)\s+(httpx|gspread|google|resend)\b", re.MULTILINE)
    violations = [
        str(path.relative_to(PACKAGE_DIR))
        for path in _python_files(API_V1_DIR)
        if disallowed.search(path.read_text(encoding="utf-8"))
    ]
    assert not violations, f"api/v1 must delegate outbound calls to components: {violations}"

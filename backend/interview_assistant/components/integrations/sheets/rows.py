"""Pure row builders and readers for the hiring spreadsheet.

Column order matches ``SHEET_HEADERS``; every cell is a plain string or number.
Read-back turns a tab's cell grid into header-keyed records.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

CANDIDATES = "Candidates"
ASSESSMENTS = "Personality Assessments"
INTERVIEWS = "Interview Evaluations"
SCENARIOS = "Scenario Submissions"
REVIEWS = "Employee Reviews"
DECISIONS = "Hiring Decisions"
RESOURCES = "Resource Directory"

SHEET_HEADERS: Dict[str, List[str]] = {
    CANDIDATES: ["Candidate ID", "Timestamp", "Name", "Email", "Phone", "Position", "Source", "Notes"],
    ASSESSMENTS: [
        "Assessment ID", "Timestamp", "Name", "Email", "Primary", "Primary %", "Secondary", "Secondary %",
        "Gold %", "Green %", "Orange %", "Blue %",
    ],
    INTERVIEWS: [
        "Evaluation ID", "Timestamp", "Candidate", "Interviewer", "Score", "Recommendation",
        "Interviewer Recommendation", "Sections", "Red Flags", "Green Flags", "Notes", "Date",
    ],
    SCENARIOS: ["Submission ID", "Timestamp", "Name", "Email", "Completion %", "Responses", "Total Questions"],
    REVIEWS: [
        "Review ID", "Submitted", "Employee", "Supervisor", "Review Type", "Review Date",
        "Performance", "Relationship", "Governance", "Overall", "Bonus",
    ],
    DECISIONS: [
        "Decision ID", "Timestamp", "Candidate ID", "Candidate", "Position", "Decision",
        "Start Date", "Salary", "Notes", "Decided By",
    ],
    RESOURCES: [
        "Resource ID", "Name", "Phone", "Address", "Category", "Specialty", "Counties", "Hours", "Website",
        "Description",
    ],
}


def _cell(value: Any) -> Any:
    if value is None:
        return ""
    return value


def format_section_scores(section_scores: Mapping[str, Mapping[str, Any]]) -> str:
    return "; ".join(f"{key}:{score.get('average')}" for key, score in (section_scores or {}).items())


def _flag_labels(flags: Optional[List[Mapping[str, str]]]) -> str:
    return ", ".join(flag.get("label", "") for flag in flags or [])


def candidate_row(
    *,
    candidate_id: str,
    timestamp: str,
    name: str,
    email: Optional[str] = None,
    phone: Optional[str] = None,
    position: Optional[str] = None,
    source: Optional[str] = None,
    notes: Optional[str] = None,
) -> List[Any]:
    return [candidate_id, timestamp, name, _cell(email), _cell(phone), _cell(position), _cell(source), _cell(notes)]


def assessment_row(result: Mapping[str, Any]) -> List[Any]:
    candidate = result.get("candidate") or {}
    headline = result["candidateResults"]
    scores = result.get("colorScores") or {}
    return [
        result["assessmentId"],
        result["timestamp"],
        _cell(candidate.get("name")),
        _cell(candidate.get("email")),
        headline["primaryColor"]["name"],
        headline["primaryColor"]["percentage"],
        headline["secondaryColor"]["name"],
        headline["secondaryColor"]["percentage"],
        scores.get("gold", 0),
        scores.get("green", 0),
        scores.get("orange", 0),
        scores.get("blue", 0),
    ]


def interview_row(report: Mapping[str, Any]) -> List[Any]:
    flags = report.get("flags") or {}
    return [
        report["evaluationId"],
        report["timestamp"],
        _cell((report.get("candidateInfo") or {}).get("name")),
        _cell((report.get("interviewerInfo") or {}).get("name")),
        _cell(report.get("interviewScore")),
        report["calculatedRecommendation"]["recommendation"],
        _cell(report.get("interviewerRecommendation")),
        format_section_scores(report.get("sectionScores")),
        _flag_labels(flags.get("red")),
        _flag_labels(flags.get("green")),
        _cell(report.get("rationale")),
        report["timestamp"][:10],
    ]


def questionnaire_row(result: Mapping[str, Any]) -> List[Any]:
    return [
        result["questionnaireId"],
        result["timestamp"],
        _cell(result.get("candidateName")),
        _cell(result.get("interviewerName")),
        result["overallScore"],
        result["recommendation"]["recommendation"],
        "",
        format_section_scores(result.get("sectionScores")),
        "",
        "",
        f"Interview questionnaire completed. Overall average: {result['overallAverage']:.2f}/3",
        result["timestamp"][:10],
    ]


def scenario_row(result: Mapping[str, Any]) -> List[Any]:
    candidate = result.get("candidate") or {}
    return [
        result["submissionId"],
        result["submittedAt"],
        _cell(candidate.get("name")),
        _cell(candidate.get("email")),
        result["completionPercentage"],
        result["totalResponses"],
        result["totalQuestions"],
    ]


def review_row(review: Mapping[str, Any]) -> List[Any]:
    categories = review.get("categoryScores") or {}
    bonus = review.get("bonus") or {}
    return [
        review["reviewId"],
        review["submittedAt"],
        review["employeeName"],
        review["supervisor"],
        (review.get("reviewType") or {}).get("label", ""),
        _cell(review.get("reviewDate")),
        _cell((categories.get("performance") or {}).get("average")),
        _cell((categories.get("relationship") or {}).get("average")),
        _cell((categories.get("governance") or {}).get("average")),
        _cell(review.get("overallAverage")),
        _cell(bonus.get("amount")),
    ]


def decision_row(
    *,
    decision_id: str,
    timestamp: str,
    candidate_name: str,
    decision: str,
    candidate_id: Optional[str] = None,
    position: Optional[str] = None,
    start_date: Optional[str] = None,
    salary: Optional[str] = None,
    notes: Optional[str] = None,
    decided_by: Optional[str] = None,
) -> List[Any]:
    return [
        decision_id,
        timestamp,
        _cell(candidate_id),
        candidate_name,
        _cell(position),
        decision,
        _cell(start_date),
        _cell(salary),
        _cell(notes),
        _cell(decided_by),
    ]


def records_from_values(values: List[List[Any]]) -> List[Dict[str, Any]]:
    """Key each data row by the header row; short rows are padded with blanks."""
    if not values:
        return []
    headers = values[0]
    return [
        {header: (row[i] if i < len(row) and row[i] is not None else "") for i, header in enumerate(headers)}
        for row in values[1:]
    ]


def matching_records(sheet: str, values: List[List[Any]], query: str) -> List[Dict[str, Any]]:
    """Case-insensitive substring search over whole rows.

    Each hit carries ``_sheet`` and its 1-based spreadsheet ``_row`` (the header is row 1).
    """
    needle = query.lower()
    records = records_from_values(values)
    hits = []
    for index, (row, record) in enumerate(zip(values[1:], records)):
        if needle in " ".join(str(cell) for cell in row).lower():
            hits.append({"_sheet": sheet, "_row": index + 2, **record})
    return hits

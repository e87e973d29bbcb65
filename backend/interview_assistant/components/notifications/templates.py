"""HTML email templates for hiring-team notifications."""

from html import escape

from ...platform.brand import BRAND_NAME, BRAND_PRODUCT_NAME
from ..assessment.colors import COLOR_EMOJI, Color

_ACCENT = "#6b46c1"

RECOMMENDATION_COLOURS = {
    "strong_yes": "#38a169",
    "yes": "#68d391",
    "maybe": "#d69e2e",
    "no": "#e53e3e",
    "strong_no": "#c53030",
}

RECOMMENDATION_EMOJIS = {
    "strong_yes": "✅",
    "yes": "👍",
    "maybe": "🤔",
    "no": "👎",
    "strong_no": "❌",
}


def _e(value) -> str:
    if value is None or value == "":
        return "Not provided"
    return escape(str(value))


def color_emoji(name: str) -> str:
    return COLOR_EMOJI.get(Color.parse(name), "⚪")


def _list_items(items) -> str:
    rendered = "".join(f"<li>{escape(str(item))}</li>" for item in items or [])
    return rendered or "<li>None noted</li>"


def recommendation_key(recommendation: str | None) -> str:
    """Normalise ``STRONG YES`` / ``strong_yes`` style values to ``strong_yes``."""
    return (recommendation or "").strip().lower().replace(" ", "_")


def recommendation_display(recommendation: str | None) -> str:
    return recommendation_key(recommendation).replace("_", " ").upper() or "NOT PROVIDED"


def _layout(title: str, subtitle: str, body: str, footer: str) -> str:
    return f"""\
<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
</head>
<body style="margin:0;padding:0;background-color:#f4f4f7;font-family:Arial,Helvetica,sans-serif;color:#333333;">
  <table width="100%" cellpadding="0" cellspacing="0" style="background-color:#f4f4f7;padding:40px 20px;">
    <tr>
      <td align="center">
        <table width="640" cellpadding="0" cellspacing="0" style="background-color:#ffffff;border-radius:8px;overflow:hidden;">
          <tr>
            <td style="background-color:{_ACCENT};padding:24px 32px;">
              <h1 style="margin:0;color:#ffffff;font-size:24px;">{title}</h1>
              <p style="margin:4px 0 0;color:#e9d8fd;font-size:14px;">{subtitle}</p>
            </td>
          </tr>
          <tr>
            <td style="padding:32px;line-height:1.6;">
{body}
            </td>
          </tr>
          <tr>
            <td style="padding:16px 32px;text-align:center;color:#718096;font-size:12px;">
              <p style="margin:0;">{BRAND_NAME} {BRAND_PRODUCT_NAME}</p>
              <p style="margin:4px 0 0;">{footer}</p>
            </td>
          </tr>
        </table>
      </td>
    </tr>
  </table>
</body>
</html>"""


def _section(heading: str, inner: str, border: str = "#e2e8f0") -> str:
    return (
        f'<div style="background:#f7fafc;padding:16px;border-radius:8px;margin:16px 0;'
        f'border-left:4px solid {border};">'
        f'<h3 style="margin:0 0 8px;color:{_ACCENT};">{heading}</h3>{inner}</div>'
    )


def assessment_notification_html(result: dict) -> str:
    candidate = result.get("candidate") or {}
    candidate_results = result["candidateResults"]
    report = result["interviewerReport"]
    primary = candidate_results["primaryColor"]
    secondary = candidate_results["secondaryColor"]

    spectrum = "".join(
        f'<tr><td style="padding:4px 0;">{color_emoji(c["name"])} {escape(c["name"])}</td>'
        f'<td style="padding:4px 0;width:60%;"><div style="background:#e2e8f0;border-radius:4px;height:16px;">'
        f'<div style="width:{int(c["percentage"])}%;height:16px;border-radius:4px;background:{c["color"]};"></div>'
        f'</div></td><td style="padding:4px 0 4px 8px;"><strong>{int(c["percentage"])}%</strong></td></tr>'
        for c in candidate_results["colorSpectrum"]
    )
    family = report["familyServicesProfile"]
    supervision = report["supervisionRecommendations"]
    team = report["teamDynamics"]

    body = f"""\
              <h2 style="color:{_ACCENT};margin:0 0 8px;">Candidate Information</h2>
              <p style="margin:0;"><strong>Name:</strong> {_e(candidate.get("name"))}</p>
              <p style="margin:0;"><strong>Email:</strong> {_e(candidate.get("email"))}</p>
              <p style="margin:0;"><strong>Submitted:</strong> {_e(result.get("timestamp"))}</p>
              <p style="margin:0;"><strong>Assessment ID:</strong> {_e(result.get("assessmentId"))}</p>
              {_section(f"{color_emoji(primary['name'])} Primary: {escape(primary['name'])}", f"<p><strong>{escape(primary['tagline'])}</strong></p><p>{escape(primary['description'])}</p>", primary["color"])}
              {_section(f"{color_emoji(secondary['name'])} Secondary: {escape(secondary['name'])}", f"<p><strong>{escape(secondary['tagline'])}</strong></p>", secondary["color"])}
              {_section("Color Distribution", f'<table width="100%" cellpadding="0" cellspacing="0">{spectrum}</table>')}
              {_section("Family Services Fit", f"<h4>Strengths:</h4><ul>{_list_items(family['strengths'])}</ul><h4>Growth Areas:</h4><ul>{_list_items(family['growthAreas'])}</ul>")}
              {_section("Supervision Recommendations", f"<ul>{_list_items(supervision['primaryRecommendations'])}</ul><p><em>{escape(supervision['blendedApproach'])}</em></p>")}
              {_section("Team Dynamics", f"<p><strong>Works well with:</strong> {escape(team['worksWellWith'])}</p><p><strong>Potential friction:</strong> {escape(team['potentialFriction'])}</p><p><strong>Team contribution:</strong> {escape(team['contribution'])}</p>")}"""
    return _layout(
        "🎨 New True Colors Assessment",
        "A candidate has completed the personality assessment",
        body,
        "This is an automated notification. View full details in your Google Sheet.",
    )


def scenario_notification_html(result: dict) -> str:
    candidate = result.get("candidate") or {}
    blocks = []
    for scenario_id, block in (result.get("scenarioResponses") or {}).items():
        answers = "".join(
            f'<div style="margin:12px 0;"><p style="margin:0;"><strong>{escape(entry["questionId"])}:</strong> '
            f'{escape(entry["questionText"])}</p><p style="white-space:pre-wrap;background:#ffffff;padding:10px;'
            f'border:1px solid #e2e8f0;border-radius:4px;">{_e(entry.get("response"))}</p></div>'
            for entry in block["responses"]
        ) or "<p><em>No responses</em></p>"
        blocks.append(
            _section(
                escape(block["scenarioTitle"]),
                f"<p><em>{escape(block['category'])}</em></p>{answers}",
                "#9f7aea",
            )
        )

    body = f"""\
              <h2 style="color:{_ACCENT};margin:0 0 8px;">Candidate Information</h2>
              <p style="margin:0;"><strong>Name:</strong> {_e(candidate.get("name"))}</p>
              <p style="margin:0;"><strong>Email:</strong> {_e(candidate.get("email"))}</p>
              <p style="margin:0;"><strong>Submitted:</strong> {_e(result.get("submittedAt"))}</p>
              <p style="margin:0;"><strong>Submission ID:</strong> {_e(result.get("submissionId"))}</p>
              <p style="margin:0;"><strong>Completion:</strong> {_e(result.get("completionPercentage"))}%</p>
              <h2 style="color:{_ACCENT};margin:24px 0 8px;">Scenario Responses</h2>
              {"".join(blocks)}"""
    return _layout(
        "📋 New Scenario Submission",
        "A candidate has completed the in-home scenarios",
        body,
        "Review responses during the interview to discuss their thinking.",
    )


def interview_notification_html(report: dict) -> str:
    candidate = report.get("candidateInfo") or {}
    interviewer = report.get("interviewerInfo") or {}
    key = recommendation_key(report.get("interviewerRecommendation"))
    colour = RECOMMENDATION_COLOURS.get(key, "#718096")
    emoji = RECOMMENDATION_EMOJIS.get(key, "❓")
    flags = report.get("flags") or {}
    calculated = report.get("calculatedRecommendation") or {}

    sections = "".join(
        f'<tr><td style="padding:4px 0;">{escape(score["sectionName"])}</td>'
        f'<td style="padding:4px 0;">{score["average"]:.2f}</td>'
        f'<td style="padding:4px 0;">{escape(score["rating"])}</td></tr>'
        for score in (report.get("sectionScores") or {}).values()
    )

    body = f"""\
              <h2 style="color:{_ACCENT};margin:0 0 8px;">Interview Details</h2>
              <p style="margin:0;"><strong>Candidate:</strong> {_e(candidate.get("name"))}</p>
              <p style="margin:0;"><strong>Position:</strong> {_e(candidate.get("position"))}</p>
              <p style="margin:0;"><strong>Interviewer:</strong> {_e(interviewer.get("name"))}</p>
              <div style="padding:20px;border-radius:8px;text-align:center;margin:16px 0;border:2px solid {colour};">
                <h2 style="margin:0;color:{colour};">{emoji} {escape(recommendation_display(report.get("interviewerRecommendation")))}</h2>
                <p style="font-size:28px;margin:8px 0;"><strong>{_e(report.get("interviewScore"))}/10</strong></p>
              </div>
              {_section("Rationale", f"<p>{_e(report.get('rationale'))}</p>")}
              {_section("Section Scores", f'<table width="100%" cellpadding="0" cellspacing="0">{sections}</table>' if sections else "<p>No rated sections</p>")}
              {_section("Green Flags", f"<ul>{_list_items(f['label'] for f in flags.get('green', []))}</ul>", "#38a169")}
              {_section("Red Flags", f"<ul>{_list_items(f['label'] for f in flags.get('red', []))}</ul>", "#e53e3e")}
              {_section("System Analysis", f"<p><strong>Recommendation:</strong> {_e(calculated.get('recommendation'))}</p><p><strong>Confidence:</strong> {_e(calculated.get('confidence'))}</p><p>{_e(calculated.get('rationale'))}</p>")}"""
    return _layout(
        "📝 Interview Evaluation Complete",
        "An interviewer has submitted their evaluation",
        body,
        "View full details in your Google Sheet.",
    )


def review_notification_html(review: dict) -> str:
    review_type = review.get("reviewType") or {}
    rows = []
    for category in (review.get("categoryScores") or {}).values():
        average = category.get("average")
        rows.append(
            f'<tr><td style="padding:4px 0;">{escape(category["name"])}</td>'
            f'<td style="padding:4px 0;">{f"{average:.2f}" if average is not None else "Not rated"}</td>'
            f'<td style="padding:4px 0;">{category["criteriaRated"]}/{category["totalCriteria"]}</td></tr>'
        )
    bonus = review.get("bonus")
    if bonus is None:
        bonus_text = "Not applicable for this review type"
    elif bonus.get("eligible"):
        bonus_text = f"Eligible: {escape(bonus['amount'])}"
    else:
        bonus_text = "Not eligible"
    overall = review.get("overallAverage")

    body = f"""\
              <h2 style="color:{_ACCENT};margin:0 0 8px;">Review Details</h2>
              <p style="margin:0;"><strong>Employee:</strong> {_e(review.get("employeeName"))}</p>
              <p style="margin:0;"><strong>Title:</strong> {_e(review.get("employeeTitle"))}</p>
              <p style="margin:0;"><strong>Supervisor:</strong> {_e(review.get("supervisor"))}</p>
              <p style="margin:0;"><strong>Review Type:</strong> {_e(review_type.get("label"))}</p>
              <p style="margin:0;"><strong>Review Date:</strong> {_e(review.get("reviewDate"))}</p>
              <p style="margin:0;"><strong>Review ID:</strong> {_e(review.get("reviewId"))}</p>
              {_section("Category Averages", f'<table width="100%" cellpadding="0" cellspacing="0">{"".join(rows)}</table>')}
              {_section("Overall", f"<p><strong>Average:</strong> {f'{overall:.2f}' if overall is not None else 'Not rated'}</p><p><strong>Bonus:</strong> {bonus_text}</p>")}
              {_section("Strengths", f"<p>{_e(review.get('strengths'))}</p>")}
              {_section("Development Areas", f"<p>{_e(review.get('developmentAreas'))}</p>")}
              {_section("Goals", f"<p>{_e(review.get('goals'))}</p>")}"""
    return _layout(
        "📊 Employee Review Submitted",
        "A supervisor has submitted a performance review",
        body,
        "This is an automated notification.",
    )

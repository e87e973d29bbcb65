"""Interviewer evaluation form: scale, question templates, flag catalogs and sections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple

EVALUATION_SCALE: Dict[int, Dict[str, str]] = {
    3: {"label": "Strong", "description": "Exceeds expectations, clear competency demonstrated"},
    2: {"label": "Adequate", "description": "Meets expectations, shows potential"},
    1: {"label": "Concern", "description": "Below expectations, raises questions"},
}

QUESTION_TEMPLATES: Dict[str, Tuple[str, ...]] = {
    "opening": (
        "Tell me about yourself and what brought you to apply for this position.",
        "What do you know about Epworth Family Resources and our mission?",
        "Why are you interested in in-home family services specifically?",
        'What does "family preservation" mean to you?',
        "Tell me about your journey to this type of work.",
        "What are you hoping to find in your next role?",
    ),
    "experience": (
        "Describe your experience working with families in crisis.",
        "Tell me about a time you worked with someone struggling with addiction. What did you learn?",
        "Describe a situation where you had to build trust with someone who was initially resistant.",
        "Tell me about a time you had to make a difficult decision about child safety.",
        "How have you handled a situation where you disagreed with a supervisor or policy?",
        "Describe your experience with documentation and case notes.",
        "Tell me about a time you had to de-escalate a tense situation.",
        "What experience do you have coordinating with other agencies (courts, schools, mental health)?",
        "Describe a time you received difficult feedback. How did you respond?",
        "Tell me about a family you worked with that had a positive outcome. What contributed to that?",
    ),
    "values": (
        "What does trauma-informed care mean to you? Give an example of how you practice it.",
        "How do you balance child safety with keeping families together?",
        'What does it mean to be "non-judgmental" in this work? Give a specific example.',
        "How do you maintain professional boundaries while building genuine relationships?",
        "Describe your self-care practices. How do you manage the emotional weight of this work?",
        "What role does accountability play in your work with families?",
        "How do you approach working with families whose values differ from your own?",
        "What does recovery and healing look like to you?",
        "How do you handle situations where a parent is not making progress?",
        "What is your understanding of generational trauma and how it affects families?",
    ),
    "closing": (
        "What questions do you have for us about the role or organization?",
        "Is there anything about your experience or qualifications we haven't covered that you'd like to share?",
        "What does your ideal supervision and support look like?",
        "What would success look like for you in the first 90 days?",
        "Do you have any concerns about the role that we could address?",
        "What are you most excited about regarding this opportunity?",
    ),
}


@dataclass(frozen=True)
class Flag:
    id: str
    label: str
    description: str

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "label": self.label, "description": self.description}


RED_FLAGS: Tuple[Flag, ...] = (
    Flag("RF1", "Vague answers", "Unable to provide specific examples or details"),
    Flag("RF2", "Lack of self-awareness", "Cannot identify areas for growth or improvement"),
    Flag("RF3", "External motivation only", "Focused solely on pay/schedule without mission connection"),
    Flag("RF4", "Defensive responses", "Becomes defensive when asked follow-up questions"),
    Flag("RF5", "Blaming others", "Consistently attributes problems to others without self-reflection"),
    Flag("RF6", "Inconsistent stories", "Details change or contradict throughout interview"),
    Flag("RF7", "Poor boundaries", "Shares inappropriate personal information or demonstrates boundary issues"),
    Flag("RF8", "Lack of trauma awareness", "Shows no understanding of trauma-informed principles"),
    Flag("RF9", "Judgmental language", "Uses stigmatizing or blaming language about families"),
    Flag("RF10", "Rigid thinking", "Unable to consider multiple perspectives or adapt approach"),
)

GREEN_FLAGS: Tuple[Flag, ...] = (
    Flag("GF1", "Growth mindset", "Shows genuine willingness to learn and develop"),
    Flag("GF2", "Appropriate vulnerability", "Shares challenges and lessons learned authentically"),
    Flag("GF3", "Specific examples", "Provides detailed, relevant examples from experience"),
    Flag("GF4", "Mission connection", "Demonstrates genuine alignment with family preservation values"),
    Flag("GF5", "Self-awareness", "Accurately assesses own strengths and growth areas"),
    Flag("GF6", "Empathy with boundaries", "Shows compassion while maintaining professional stance"),
    Flag("GF7", "Team orientation", "Values collaboration and supporting colleagues"),
    Flag("GF8", "Accountability", "Takes responsibility for actions and outcomes"),
    Flag("GF9", "Curiosity", "Asks thoughtful questions, wants to understand"),
    Flag("GF10", "Realistic expectations", "Understands challenges of the work without being deterred"),
)

RED_FLAGS_BY_ID: Dict[str, Flag] = {flag.id: flag for flag in RED_FLAGS}
GREEN_FLAGS_BY_ID: Dict[str, Flag] = {flag.id: flag for flag in GREEN_FLAGS}


def resolve_flags(flag_ids, catalog: Mapping[str, Flag]) -> List[Flag]:
    """Map submitted ids onto the catalog; unknown ids are dropped."""
    return [catalog[flag_id] for flag_id in flag_ids or [] if flag_id in catalog]


@dataclass(frozen=True)
class FormQuestion:
    id: str
    text: str
    type: str
    required: bool = True
    rubric: Optional[Mapping[int, str]] = None
    options: Optional[Tuple[Mapping[str, str], ...]] = None
    min: Optional[int] = None
    max: Optional[int] = None

    @property
    def is_scale(self) -> bool:
        return self.type == "scale"

    def to_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {
            "id": self.id,
            "text": self.text,
            "type": self.type,
            "required": self.required,
        }
        if self.rubric is not None:
            payload["rubric"] = dict(self.rubric)
        if self.options is not None:
            payload["options"] = [dict(option) for option in self.options]
        if self.min is not None:
            payload["min"] = self.min
        if self.max is not None:
            payload["max"] = self.max
        return payload


@dataclass(frozen=True)
class EvaluationSection:
    key: str
    id: str
    name: str
    description: str
    questions: Tuple[FormQuestion, ...] = field(default_factory=tuple)

    @property
    def scale_question_ids(self) -> Tuple[str, ...]:
        return tuple(q.id for q in self.questions if q.is_scale)

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "questions": [q.to_dict() for q in self.questions],
        }


def _scale(qid: str, text: str, rubric: Optional[Mapping[int, str]] = None) -> FormQuestion:
    return FormQuestion(id=qid, text=text, type="scale", rubric=rubric)


def _rubric(strong: str, adequate: str, concern: str) -> Dict[int, str]:
    return {3: strong, 2: adequate, 1: concern}


def _textarea(qid: str, text: str, required: bool = True) -> FormQuestion:
    return FormQuestion(id=qid, text=text, type="textarea", required=required)


def _flag_options(flags: Tuple[Flag, ...]) -> Tuple[Dict[str, str], ...]:
    return tuple(flag.to_dict() for flag in flags)


EVALUATION_SECTIONS: Tuple[EvaluationSection, ...] = (
    EvaluationSection(
        key="OPENING",
        id="opening",
        name="Opening & First Impressions",
        description="Initial assessment of candidate presentation and motivation",
        questions=(
            _scale("OPN1", "How did the candidate present themselves? (professionalism, communication, demeanor)"),
            _scale("OPN2", "How well did they articulate their interest in this specific role?"),
            _textarea("OPN3", "What was your overall first impression?"),
            _scale("OPN4", "Did they demonstrate knowledge of Epworth and our mission?"),
        ),
    ),
    EvaluationSection(
        key="EXPERIENCE",
        id="experience",
        name="Experience & Background",
        description="Assessment of relevant experience and skills",
        questions=(
            _scale("EXP1", "Quality of examples from previous experience", _rubric(
                "Provided specific, detailed, relevant examples",
                "Examples were adequate but lacked depth",
                "Vague or no relevant examples provided",
            )),
            _scale("EXP2", "Experience with families in crisis or trauma", _rubric(
                "Significant relevant experience, demonstrated learning",
                "Some experience, shows potential",
                "Limited or no relevant experience",
            )),
            _scale("EXP3", "Experience with addiction/substance use issues", _rubric(
                "Strong understanding, direct experience, non-judgmental approach",
                "Basic understanding, some exposure",
                "Limited understanding or concerning attitudes",
            )),
            _scale("EXP4", "Crisis response and de-escalation skills", _rubric(
                "Demonstrated clear crisis intervention skills",
                "Basic skills, would need development",
                "Concerning gaps in crisis response",
            )),
            _scale("EXP5", "Documentation and case management experience"),
            _textarea("EXP6", "Notes on experience discussion:", required=False),
        ),
    ),
    EvaluationSection(
        key="VALUES",
        id="values",
        name="Values & Alignment",
        description="Alignment with Epworth core values and trauma-informed practice",
        questions=(
            _scale("VAL1", "Trauma-Informed Care understanding", _rubric(
                "Strong understanding, can articulate and apply principles",
                "Basic understanding, open to learning",
                "Limited understanding or concerning attitudes",
            )),
            _scale("VAL2", "Family Preservation philosophy alignment", _rubric(
                "Strong belief in family-centered approach",
                "Generally aligned with some development needed",
                "Misaligned with family preservation values",
            )),
            _scale("VAL3", "Non-judgmental approach with families", _rubric(
                "Demonstrated non-judgmental language and perspective",
                "Generally non-judgmental with occasional slips",
                "Concerning judgmental or stigmatizing attitudes",
            )),
            _scale("VAL4", "Professional boundaries understanding", _rubric(
                "Clear understanding of appropriate boundaries",
                "Basic understanding, some areas need development",
                "Boundary concerns identified",
            )),
            _scale("VAL5", "Self-care and burnout awareness", _rubric(
                "Has concrete self-care practices and insight",
                "Awareness but practices are vague",
                "Limited awareness or concerning lack of self-care",
            )),
            _scale("VAL6", "Accountability and growth orientation", _rubric(
                "Demonstrates accountability and eagerness to grow",
                "Generally accountable, open to feedback",
                "Defensive or avoids responsibility",
            )),
            _textarea("VAL7", "Notes on values alignment:", required=False),
        ),
    ),
    EvaluationSection(
        key="CLOSING",
        id="closing",
        name="Closing Assessment",
        description="Final impressions and readiness evaluation",
        questions=(
            _scale("CLS1", "Quality of questions the candidate asked", _rubric(
                "Thoughtful, insightful questions showing genuine interest",
                "Basic questions, adequate interest",
                "No questions or only logistical concerns",
            )),
            _scale("CLS2", "Realistic expectations about the role", _rubric(
                "Clear-eyed about challenges, still committed",
                "Somewhat realistic, minor concerns",
                "Unrealistic expectations or major gaps",
            )),
            _scale("CLS3", "Motivation and commitment level", _rubric(
                "Genuine intrinsic motivation, mission-driven",
                "Mixed motivation, adequate interest",
                "Primarily external motivation",
            )),
            _scale("CLS4", "How well would this candidate fit with the current team?"),
            FormQuestion(
                id="CLS5",
                text="What level of supervision/support would this candidate need?",
                type="select",
                options=(
                    {"value": "minimal", "label": "Minimal - Can work independently quickly"},
                    {"value": "standard", "label": "Standard - Normal onboarding and supervision"},
                    {"value": "intensive", "label": "Intensive - Will need significant support and mentoring"},
                ),
            ),
            _textarea("CLS6", "What stood out most positively about this candidate?"),
            _textarea("CLS7", "What concerns, if any, arose during the interview?"),
            _textarea("CLS8", "Specific training or development needs identified:", required=False),
        ),
    ),
    EvaluationSection(
        key="DECISION",
        id="decision",
        name="Final Decision",
        description="Hiring recommendation and rationale",
        questions=(
            FormQuestion(id="DEC1", text="Overall Interview Score (1-10)", type="number", min=1, max=10),
            FormQuestion(
                id="DEC2",
                text="Green flags observed (select all that apply)",
                type="multiselect",
                required=False,
                options=_flag_options(GREEN_FLAGS),
            ),
            FormQuestion(
                id="DEC3",
                text="Red flags observed (select all that apply)",
                type="multiselect",
                required=False,
                options=_flag_options(RED_FLAGS),
            ),
            FormQuestion(
                id="DEC4",
                text="Hiring Recommendation",
                type="select",
                options=(
                    {"value": "strong_yes", "label": "Strong Yes - Highly recommend hiring"},
                    {"value": "yes", "label": "Yes - Recommend hiring"},
                    {"value": "maybe", "label": "Maybe - Need reference check or second opinion"},
                    {"value": "no", "label": "No - Do not recommend hiring"},
                    {"value": "strong_no", "label": "Strong No - Significant concerns"},
                ),
            ),
            _textarea("DEC5", "Detailed rationale for your recommendation:"),
            _textarea("DEC6", "Next steps or follow-up items:", required=False),
        ),
    ),
)

SECTIONS_BY_ID: Dict[str, EvaluationSection] = {section.id: section for section in EVALUATION_SECTIONS}


def section_membership(sections=EVALUATION_SECTIONS) -> Dict[str, Tuple[str, ...]]:
    """Section key -> ids of its scale questions; sections with no scale questions are skipped."""
    return {
        section.key: section.scale_question_ids
        for section in sections
        if section.scale_question_ids
    }


def section_names(sections=EVALUATION_SECTIONS) -> Dict[str, str]:
    return {section.key: section.name for section in sections}


def flags_payload() -> Dict[str, List[Dict[str, str]]]:
    return {
        "redFlags": [flag.to_dict() for flag in RED_FLAGS],
        "greenFlags": [flag.to_dict() for flag in GREEN_FLAGS],
    }


def template_question_id(section_id: str, number: int) -> str:
    """Questionnaire items are addressed as ``<section>-<1-based number>``."""
    return f"{section_id}-{number}"


def template_membership() -> Dict[str, Tuple[str, ...]]:
    return {
        section_id: tuple(template_question_id(section_id, n) for n in range(1, len(questions) + 1))
        for section_id, questions in QUESTION_TEMPLATES.items()
    }


def template_section_names() -> Dict[str, str]:
    return {section_id: SECTIONS_BY_ID[section_id].name for section_id in QUESTION_TEMPLATES}

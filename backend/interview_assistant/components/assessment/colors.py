"""True Colors reference data: the four color profiles and per-color guidance.

Every table here is keyed by ``Color`` and checked for exhaustiveness at import
time, so a missing entry fails at startup instead of in the middle of a request.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple

from ..scoring.errors import UnknownCategory


class Color(str, Enum):
    """Declaration order is the ranking tie-break order."""

    GOLD = "gold"
    GREEN = "green"
    ORANGE = "orange"
    BLUE = "blue"

    @classmethod
    def parse(cls, raw: object) -> Optional["Color"]:
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


COLOR_ORDER: Tuple[Color, ...] = tuple(Color)


@dataclass(frozen=True)
class Communication:
    style: str
    prefers: str
    avoids: str


@dataclass(frozen=True)
class TraitProfile:
    id: str
    name: str
    color: str
    tagline: str
    description: str
    core_values: Tuple[str, ...]
    strengths: Tuple[str, ...]
    challenges: Tuple[str, ...]
    family_services_strengths: Tuple[str, ...]
    family_services_growth_areas: Tuple[str, ...]
    communication: Communication
    stress_response: str

    def summary(self) -> dict:
        return {"id": self.id, "name": self.name, "color": self.color, "tagline": self.tagline}

    def overview(self) -> dict:
        return {
            **self.summary(),
            "description": self.description,
            "coreValues": list(self.core_values),
            "strengths": list(self.strengths),
        }

    def to_dict(self) -> dict:
        return {
            **self.overview(),
            "challenges": list(self.challenges),
            "inFamilyServices": {
                "strengths": list(self.family_services_strengths),
                "growthAreas": list(self.family_services_growth_areas),
            },
            "communication": {
                "style": self.communication.style,
                "prefers": self.communication.prefers,
                "avoids": self.communication.avoids,
            },
            "stressResponse": self.stress_response,
        }


@dataclass(frozen=True)
class TeamDynamics:
    works_well_with: str
    potential_friction: str
    contribution: str

    def to_dict(self) -> dict:
        return {
            "worksWellWith": self.works_well_with,
            "potentialFriction": self.potential_friction,
            "contribution": self.contribution,
        }


TRUE_COLORS: Dict[Color, TraitProfile] = {
    Color.GOLD: TraitProfile(
        id="gold",
        name="Gold",
        color="#D4AF37",
        tagline="The Responsible Planner",
        description=(
            "You are organized, dependable, and value structure. "
            "You bring stability and reliability to any team."
        ),
        core_values=("Responsibility", "Organization", "Tradition", "Security", "Punctuality"),
        strengths=(
            "Highly organized and detail-oriented",
            "Dependable and follows through on commitments",
            "Creates and maintains efficient systems",
            "Thorough documentation and record-keeping",
            "Respects policies and procedures",
        ),
        challenges=(
            "May struggle with ambiguity or rapid change",
            "Can appear rigid or inflexible",
            "May focus too much on rules over relationships",
            "Can be overly critical of those who seem disorganized",
        ),
        family_services_strengths=(
            "Excellent at documentation and case notes",
            "Reliable with appointments and follow-through",
            "Creates consistent structure for families",
            "Follows agency protocols carefully",
        ),
        family_services_growth_areas=(
            "Developing flexibility with unpredictable family situations",
            "Balancing procedures with relationship-building",
            "Adapting when plans change unexpectedly",
        ),
        communication=Communication(
            style="Direct, organized, and factual",
            prefers="Clear agendas, timelines, and written plans",
            avoids="Ambiguity, last-minute changes, disorganization",
        ),
        stress_response="May become more rigid, critical, or controlling under stress",
    ),
    Color.GREEN: TraitProfile(
        id="green",
        name="Green",
        color="#2E8B57",
        tagline="The Analytical Thinker",
        description=(
            "You are logical, curious, and value knowledge. You bring innovative "
            "problem-solving and strategic thinking to any team."
        ),
        core_values=("Knowledge", "Competence", "Logic", "Independence", "Innovation"),
        strengths=(
            "Strong analytical and problem-solving skills",
            "Sees the big picture and connections",
            "Innovative and creative solutions",
            "Calm under pressure",
            "Objective and fair-minded",
        ),
        challenges=(
            "May appear detached or unemotional",
            "Can over-analyze and delay action",
            "May struggle with emotional conversations",
            "Can seem arrogant or dismissive of others' ideas",
        ),
        family_services_strengths=(
            "Excellent at assessing complex family dynamics",
            "Develops creative intervention strategies",
            "Stays calm during crises",
            "Identifies patterns and root causes",
        ),
        family_services_growth_areas=(
            "Developing emotional attunement with families",
            "Balancing analysis with action",
            "Showing warmth and connection alongside competence",
        ),
        communication=Communication(
            style="Logical, questioning, and conceptual",
            prefers="Data, rationale, and time to think",
            avoids="Small talk, emotional appeals, being rushed",
        ),
        stress_response="May withdraw, become sarcastic, or over-intellectualize under stress",
    ),
    Color.ORANGE: TraitProfile(
        id="orange",
        name="Orange",
        color="#FF8C00",
        tagline="The Adventurous Doer",
        description=(
            "You are energetic, adaptable, and action-oriented. You bring "
            "spontaneity and resourcefulness to any team."
        ),
        core_values=("Freedom", "Action", "Excitement", "Flexibility", "Skill"),
        strengths=(
            "Highly adaptable and flexible",
            "Thrives in crisis situations",
            "Energetic and enthusiastic",
            "Resourceful problem-solver",
            "Excellent at building rapport quickly",
        ),
        challenges=(
            "May struggle with routine and documentation",
            "Can be impulsive or take unnecessary risks",
            "May get bored with long-term planning",
            "Can appear scattered or unfocused",
        ),
        family_services_strengths=(
            "Excellent at de-escalation and crisis response",
            "Builds rapport with resistant families quickly",
            "Adapts to unpredictable home visit situations",
            "Brings energy and optimism to difficult cases",
        ),
        family_services_growth_areas=(
            "Developing consistency in documentation",
            "Following through on long-term case plans",
            "Slowing down to ensure thoroughness",
        ),
        communication=Communication(
            style="Informal, energetic, and action-focused",
            prefers="Variety, hands-on activities, immediate results",
            avoids="Lengthy meetings, excessive paperwork, rigid schedules",
        ),
        stress_response="May become impulsive, scattered, or escape-seeking under stress",
    ),
    Color.BLUE: TraitProfile(
        id="blue",
        name="Blue",
        color="#4169E1",
        tagline="The Compassionate Connector",
        description=(
            "You are empathetic, sincere, and relationship-focused. You bring "
            "warmth and genuine connection to any team."
        ),
        core_values=("Relationships", "Authenticity", "Harmony", "Compassion", "Connection"),
        strengths=(
            "Deeply empathetic and understanding",
            "Excellent at building trust and rapport",
            "Creates safe, supportive environments",
            "Strong communication and listening skills",
            "Inspires and motivates others",
        ),
        challenges=(
            "May take things too personally",
            "Can struggle with conflict or tough conversations",
            "May over-invest emotionally in cases",
            "Can have difficulty with boundaries",
        ),
        family_services_strengths=(
            "Builds deep trust with families",
            "Creates safe space for vulnerable conversations",
            "Advocates passionately for children and families",
            "Naturally trauma-informed in approach",
        ),
        family_services_growth_areas=(
            "Developing professional boundaries",
            "Having difficult accountability conversations",
            "Managing emotional investment and self-care",
        ),
        communication=Communication(
            style="Warm, personal, and encouraging",
            prefers="Personal connection, meaningful conversations, appreciation",
            avoids="Conflict, criticism, impersonal interactions",
        ),
        stress_response="May become emotional, withdraw, or seek excessive reassurance under stress",
    ),
}

SUPERVISION_RECOMMENDATIONS: Dict[Color, Tuple[str, ...]] = {
    Color.GOLD: (
        "Provide clear expectations and written guidelines",
        "Give regular feedback on performance",
        "Respect their need for organization and planning",
        "Help them develop flexibility for unpredictable situations",
    ),
    Color.GREEN: (
        "Allow time for independent thinking and analysis",
        'Explain the "why" behind decisions and policies',
        "Value their innovative ideas and problem-solving",
        "Support development of emotional connection skills",
    ),
    Color.ORANGE: (
        "Provide variety and new challenges",
        "Give freedom with clear accountability",
        "Support with documentation and follow-through",
        "Channel their energy toward positive outcomes",
    ),
    Color.BLUE: (
        "Build a personal, supportive relationship",
        "Provide regular appreciation and recognition",
        "Help establish healthy boundaries",
        "Support self-care and emotional processing",
    ),
}

TEAM_DYNAMICS: Dict[Color, TeamDynamics] = {
    Color.GOLD: TeamDynamics(
        works_well_with="Blues (both value commitment) and Greens (both appreciate competence)",
        potential_friction="Oranges (different pace and structure preferences)",
        contribution="Brings organization, reliability, and follow-through to the team",
    ),
    Color.GREEN: TeamDynamics(
        works_well_with="Golds (both value competence) and other Greens (intellectual stimulation)",
        potential_friction="Blues (different decision-making styles)",
        contribution="Brings analysis, innovation, and objective perspective to the team",
    ),
    Color.ORANGE: TeamDynamics(
        works_well_with="Blues (both are people-oriented) and other Oranges (energy match)",
        potential_friction="Golds (different structure preferences)",
        contribution="Brings energy, adaptability, and crisis management to the team",
    ),
    Color.BLUE: TeamDynamics(
        works_well_with="Oranges (both are people-focused) and Golds (complementary strengths)",
        potential_friction="Greens (different communication styles)",
        contribution="Brings empathy, connection, and team harmony",
    ),
}

# Used by the email template only.
COLOR_EMOJI: Dict[Color, str] = {
    Color.GOLD: "\U0001F7E1",
    Color.GREEN: "\U0001F7E2",
    Color.ORANGE: "\U0001F7E0",
    Color.BLUE: "\U0001F535",
}


def _assert_exhaustive(name: str, table: Mapping[Color, object]) -> None:
    missing = [c.value for c in Color if c not in table]
    if missing:
        raise RuntimeError(f"{name} is missing entries for: {', '.join(missing)}")


for _name, _table in (
    ("TRUE_COLORS", TRUE_COLORS),
    ("SUPERVISION_RECOMMENDATIONS", SUPERVISION_RECOMMENDATIONS),
    ("TEAM_DYNAMICS", TEAM_DYNAMICS),
    ("COLOR_EMOJI", COLOR_EMOJI),
):
    _assert_exhaustive(_name, _table)


def find_profile(identifier: str) -> Optional[TraitProfile]:
    """Look up a profile by id or display name, case-insensitively."""
    needle = (identifier or "").strip().lower()
    for profile in TRUE_COLORS.values():
        if profile.id == needle or profile.name.lower() == needle:
            return profile
    return None


def lookup(table: Mapping[Color, object], color: Color, table_name: str):
    """Fetch ``table[color]``; a miss means broken reference data, not bad input."""
    try:
        return table[color]
    except KeyError:
        raise UnknownCategory(getattr(color, "value", str(color)), table_name) from None

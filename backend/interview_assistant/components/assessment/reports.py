"""Candidate-facing and interviewer-facing views of a color ranking."""

from __future__ import annotations

from typing import Any, Dict

from .classifier import ColorRanking, RankedColor
from .colors import SUPERVISION_RECOMMENDATIONS, TEAM_DYNAMICS, TRUE_COLORS, TraitProfile, lookup


def _profile(entry: RankedColor) -> TraitProfile:
    # Re-resolve against the reference table so a ranking built elsewhere
    # cannot smuggle in a color the tables do not describe.
    return lookup(TRUE_COLORS, entry.color, "trait profile")


def _headline(entry: RankedColor) -> Dict[str, Any]:
    profile = _profile(entry)
    return {
        "name": profile.name,
        "color": profile.color,
        "tagline": profile.tagline,
        "description": profile.description,
        "percentage": entry.percentage,
    }


def build_candidate_report(ranking: ColorRanking) -> Dict[str, Any]:
    return {
        "primaryColor": _headline(ranking.primary),
        "secondaryColor": _headline(ranking.secondary),
        "colorSpectrum": [
            {
                "name": _profile(entry).name,
                "color": _profile(entry).color,
                "percentage": entry.percentage,
            }
            for entry in ranking.all
        ],
    }


def build_supervision_recommendations(ranking: ColorRanking) -> Dict[str, Any]:
    primary = _profile(ranking.primary)
    secondary = _profile(ranking.secondary)
    recommendations = lookup(SUPERVISION_RECOMMENDATIONS, ranking.primary.color, "supervision recommendations")
    return {
        "primaryRecommendations": list(recommendations),
        "blendedApproach": (
            f"This candidate blends {primary.name} and {secondary.name} - balance "
            f"{primary.name}'s need for {primary.core_values[0].lower()} with "
            f"{secondary.name}'s value of {secondary.core_values[0].lower()}."
        ),
    }


def build_team_dynamics(ranking: ColorRanking) -> Dict[str, str]:
    return lookup(TEAM_DYNAMICS, ranking.primary.color, "team dynamics").to_dict()


def build_interviewer_report(ranking: ColorRanking) -> Dict[str, Any]:
    primary = _profile(ranking.primary)
    secondary = _profile(ranking.secondary)
    return {
        "summary": {
            "primaryColor": primary.name,
            "primaryPercentage": ranking.primary.percentage,
            "secondaryColor": secondary.name,
            "secondaryPercentage": ranking.secondary.percentage,
            "description": primary.description,
        },
        "colorProfile": [
            {
                "color": _profile(entry).name,
                "hexColor": _profile(entry).color,
                "percentage": entry.percentage,
                "count": entry.count,
            }
            for entry in ranking.all
        ],
        "primaryDetails": {
            "name": primary.name,
            "tagline": primary.tagline,
            "coreValues": list(primary.core_values),
            "strengths": list(primary.strengths),
            "challenges": list(primary.challenges),
            "communication": {
                "style": primary.communication.style,
                "prefers": primary.communication.prefers,
                "avoids": primary.communication.avoids,
            },
            "stressResponse": primary.stress_response,
        },
        "secondaryDetails": {
            "name": secondary.name,
            "tagline": secondary.tagline,
            "coreValues": list(secondary.core_values),
            "strengths": list(secondary.strengths),
        },
        "familyServicesProfile": {
            "strengths": list(primary.family_services_strengths),
            "growthAreas": list(primary.family_services_growth_areas),
            "secondaryStrengths": list(secondary.family_services_strengths),
        },
        "supervisionRecommendations": build_supervision_recommendations(ranking),
        "teamDynamics": build_team_dynamics(ranking),
    }


def color_scores(ranking: ColorRanking) -> Dict[str, int]:
    """Percentage per color id, in declaration order, for the spreadsheet row."""
    by_color = {entry.color: entry.percentage for entry in ranking.all}
    return {color.value: by_color.get(color, 0) for color in TRUE_COLORS}

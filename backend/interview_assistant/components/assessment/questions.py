"""Forced-choice question bank for the True Colors assessment.

Each question offers exactly one option per color, in color declaration order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .colors import COLOR_ORDER, Color


@dataclass(frozen=True)
class AssessmentQuestion:
    id: str
    text: str
    options: Tuple[str, str, str, str]

    def option_for(self, color: Color) -> str:
        return self.options[COLOR_ORDER.index(color)]

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "text": self.text,
            "options": [
                {"value": color.value, "label": label}
                for color, label in zip(COLOR_ORDER, self.options)
            ],
        }


QUESTIONS: Tuple[AssessmentQuestion, ...] = (
    AssessmentQuestion("Q1", "When starting a new project, I prefer to:", (
        "Create a detailed plan with clear steps and timeline",
        "Research and understand all aspects before beginning",
        "Jump in and figure it out as I go",
        "Discuss with others and get everyone aligned",
    )),
    AssessmentQuestion("Q2", "In meetings, I typically:", (
        "Follow the agenda and keep things on track",
        "Ask questions and challenge assumptions",
        "Look for opportunities to take action",
        "Make sure everyone feels heard and included",
    )),
    AssessmentQuestion("Q3", "When plans change unexpectedly, I:", (
        "Feel stressed and want to reorganize quickly",
        "Analyze why the change happened and what it means",
        "Adapt easily and see it as an opportunity",
        "Check in on how others are handling the change",
    )),
    AssessmentQuestion("Q4", "I feel most satisfied at work when I:", (
        "Complete tasks on time with high quality",
        "Solve a complex problem or learn something new",
        "Take on exciting challenges and see immediate results",
        "Make a real difference in someone's life",
    )),
    AssessmentQuestion("Q5", "When working with a difficult person, I:", (
        "Focus on the task and set clear expectations",
        "Try to understand their perspective logically",
        "Use humor and charm to break the tension",
        "Try to connect with them on a personal level",
    )),
    AssessmentQuestion("Q6", "My ideal work environment is:", (
        "Structured with clear expectations and procedures",
        "Intellectually stimulating with room for innovation",
        "Fast-paced with variety and freedom",
        "Collaborative with supportive relationships",
    )),
    AssessmentQuestion("Q7", "When making decisions, I rely most on:", (
        "Policies, precedent, and proven methods",
        "Logic, data, and careful analysis",
        "Instinct, experience, and quick assessment",
        "Values, feelings, and impact on people",
    )),
    AssessmentQuestion("Q8", "When stressed, I tend to:", (
        "Become more controlling or critical",
        "Withdraw and need time alone to think",
        "Become restless and look for escape or distraction",
        "Become emotional and need reassurance",
    )),
    AssessmentQuestion("Q9", "I am most frustrated by people who:", (
        "Are disorganized or unreliable",
        "Are illogical or don't think things through",
        "Are rigid or slow to act",
        "Are cold or don't value relationships",
    )),
    AssessmentQuestion("Q10", "When giving feedback, I:", (
        "Focus on specific behaviors and expectations",
        "Explain the rationale and provide objective assessment",
        "Keep it brief and action-oriented",
        "Balance honesty with encouragement and support",
    )),
    AssessmentQuestion("Q11", "When a family is struggling, my first instinct is to:", (
        "Create a structured plan with clear steps",
        "Assess the situation and identify root causes",
        "Take immediate action to address urgent needs",
        "Build trust and understand their experience",
    )),
    AssessmentQuestion("Q12", "In documentation and paperwork, I am:", (
        "Thorough and detailed - I enjoy getting it right",
        "Analytical - I focus on accurate assessment",
        "Efficient - I get it done but prefer fieldwork",
        "Thoughtful - I focus on capturing the human story",
    )),
    AssessmentQuestion("Q13", "When I disagree with a decision, I:", (
        "Follow the decision but document my concerns",
        "Present my logical case and evidence",
        "Speak up directly and advocate for change",
        "Consider the impact on relationships before responding",
    )),
    AssessmentQuestion("Q14", "I build trust with families by:", (
        "Being reliable, consistent, and following through",
        "Demonstrating competence and giving good advice",
        "Being authentic, flexible, and non-judgmental",
        "Showing genuine care and really listening",
    )),
    AssessmentQuestion("Q15", "When working with a crisis situation, I:", (
        "Follow established protocols and procedures",
        "Quickly assess the situation and determine priorities",
        "Stay calm, adapt, and take decisive action",
        "Focus on the emotional needs of those involved",
    )),
    AssessmentQuestion("Q16", "I believe the best teams:", (
        "Have clear roles, responsibilities, and accountability",
        "Challenge each other and value diverse perspectives",
        "Are flexible, energetic, and get things done",
        "Support each other and work together harmoniously",
    )),
    AssessmentQuestion("Q17", "When I receive criticism, I:", (
        "Consider if I failed to meet expectations and how to improve",
        "Evaluate if the criticism is logical and valid",
        "Take what's useful and move on quickly",
        "Feel hurt but try to understand the intent behind it",
    )),
    AssessmentQuestion("Q18", "I recharge and recover by:", (
        "Getting organized and accomplishing small tasks",
        "Having quiet time to think, read, or learn",
        "Doing something active, fun, or adventurous",
        "Spending quality time with people I care about",
    )),
    AssessmentQuestion("Q19", "When a parent is resistant to services, I:", (
        "Explain requirements and consequences clearly",
        "Try to understand their reasoning and address concerns",
        "Try a different approach and stay persistent",
        "Build relationship first and find what matters to them",
    )),
    AssessmentQuestion("Q20", "At the end of a difficult day, I feel best when I:", (
        "Know I did my job correctly and nothing fell through cracks",
        "Learned something valuable from the experience",
        "Handled whatever came up and made it through",
        "Made a meaningful connection with someone",
    )),
)

TOTAL_QUESTIONS = len(QUESTIONS)


def questions_payload() -> List[Dict[str, object]]:
    return [question.to_dict() for question in QUESTIONS]

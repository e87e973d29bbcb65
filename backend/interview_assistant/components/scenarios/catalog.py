"""In-home family services scenarios completed by candidates before interview."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

INSTRUCTIONS = (
    "Please read each scenario carefully and provide thoughtful, detailed responses. "
    'There are no "right" answers - we want to understand how you think through complex situations.'
)
ESTIMATED_TIME = "45-60 minutes"


@dataclass(frozen=True)
class ScenarioQuestion:
    id: str
    text: str
    guidance: str
    type: str = "textarea"

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "text": self.text, "type": self.type, "guidance": self.guidance}


@dataclass(frozen=True)
class Scenario:
    id: str
    title: str
    category: str
    difficulty: str
    situation: str
    questions: Tuple[ScenarioQuestion, ...]
    scoring_criteria: Tuple[str, ...]

    def question(self, question_id: str) -> Optional[ScenarioQuestion]:
        for question in self.questions:
            if question.id == question_id:
                return question
        return None

    def owns(self, question_id: str) -> bool:
        return question_id.startswith(f"{self.id}_")

    def summary(self) -> Dict[str, str]:
        return {
            "id": self.id,
            "title": self.title,
            "category": self.category,
            "difficulty": self.difficulty,
        }

    def to_dict(self) -> Dict[str, object]:
        return {
            **self.summary(),
            "situation": self.situation,
            "questions": [q.to_dict() for q in self.questions],
        }


@dataclass(frozen=True)
class AssessmentCategory:
    id: str
    name: str
    description: str

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "name": self.name, "description": self.description}


def _questions(scenario_id: str, *pairs: Tuple[str, str]) -> Tuple[ScenarioQuestion, ...]:
    return tuple(
        ScenarioQuestion(id=f"{scenario_id}_Q{n}", text=text, guidance=guidance)
        for n, (text, guidance) in enumerate(pairs, start=1)
    )


SCENARIOS: Tuple[Scenario, ...] = (
    Scenario(
        id="SC1",
        title="Parent in Recovery - Signs of Relapse",
        category="Addiction & Safety",
        difficulty="Complex",
        situation="""You arrive for a scheduled home visit with Maria (32) and her son Carlos (8). Maria has been in recovery from opioid addiction for 6 months and making good progress. Today, you notice:

• Several empty beer bottles in the kitchen sink
• Maria seems slightly unsteady and her speech is slower than usual
• Carlos quietly tells you "Mom was sad last night and had some beers"
• When you check in with Maria, she says "It's just beer, not the hard stuff. I can handle it."
• Your next check-in with the DHHS caseworker is scheduled for tomorrow""",
        questions=_questions(
            "SC1",
            ("What are you noticing in this situation, and what concerns you most?",
             "Consider both immediate safety and longer-term recovery implications"),
            ("How would you approach talking to Maria about what you observed? What would you say?",
             "Think about non-judgmental, trauma-informed communication"),
            ("What is your responsibility here regarding safety, reporting, and maintaining your relationship with Maria?",
             "Consider mandatory reporting obligations vs. collaborative problem-solving"),
            ("If Maria becomes defensive or angry, how would you respond?",
             "Think about de-escalation and maintaining professional boundaries"),
            ("How would you document this visit? What specific language would you use?",
             "Focus on objective, behavioral documentation"),
        ),
        scoring_criteria=(
            "Recognizes alcohol use as potential relapse behavior",
            "Uses non-judgmental, curious communication",
            "Balances accountability with compassion",
            "Understands mandatory reporting requirements",
            "Documents objectively without judgment",
        ),
    ),
    Scenario(
        id="SC2",
        title="Trauma Response in a Child",
        category="Trauma & Family Dynamics",
        difficulty="Complex",
        situation="""You're working with the Rodriguez family. Dad (Jorge) recently completed anger management after a domestic violence incident 8 months ago. During your home visit with Jorge and his daughter Sofia (14):

• Sofia won't make eye contact with her father
• When Jorge tries to talk to her, she gives one-word answers and looks away
• Jorge is frustrated: "She won't even try. I've done everything—took classes, got help, I'm sober. When is she going to forgive me?"
• Sofia leaves the room without explanation
• Jorge turns to you: "She's being disrespectful. Can you talk to her?"
• Later, Sofia privately tells you: "I'm still scared of him sometimes.\"""",
        questions=_questions(
            "SC2",
            ("What do you think is happening with Sofia? Why might she be responding this way?",
             "Consider trauma responses and the impact of witnessing domestic violence"),
            ("How would you help Jorge understand Sofia's behavior without shaming him for his past?",
             "Balance validating his efforts while educating about trauma"),
            ("Sofia told you privately that she's still scared of her dad. What do you do with this information?",
             "Consider confidentiality, safety, and the therapeutic relationship"),
            ("What would you say to Sofia (privately) to help her feel seen and heard?",
             "Think about validating without making promises you can't keep"),
            ("What would be your goals for the next 2-3 home visits with this family?",
             "Consider realistic, small-step interventions for rebuilding trust"),
        ),
        scoring_criteria=(
            "Understands trauma responses in children",
            "Can hold both perspectives without taking sides",
            "Navigates confidentiality appropriately",
            "Uses age-appropriate, validating language with the child",
            "Develops realistic intervention plans",
        ),
    ),
    Scenario(
        id="SC3",
        title="Crisis During Home Visit - Mental Health Emergency",
        category="Crisis Response",
        difficulty="High",
        situation="""You arrive for a home visit with the Thompson family. Mom (Angela, 38) has a history of depression and anxiety. When you arrive:

• Angela answers the door in pajamas, hasn't showered in days
• The house is unusually messy with dishes piled up
• Her two children (ages 6 and 9) are watching TV unsupervised
• Angela tells you she hasn't slept in three days
• She says: "I just can't do this anymore. Everyone would be better off without me."
• The children seem unaware of their mother's distress
• Angela's phone shows multiple missed calls from her sister""",
        questions=_questions(
            "SC3",
            ("What is your immediate assessment of this situation? What are your priorities?",
             "Consider safety assessment and triage"),
            ('How do you respond to Angela\'s statement that "everyone would be better off without me"?',
             "Think about suicide assessment and crisis intervention"),
            ("What steps do you take in the next 30 minutes? Be specific about actions and order.",
             "Consider immediate safety, support resources, and documentation"),
            ("How do you involve the children appropriately while managing this crisis?",
             "Balance child safety with not alarming them unnecessarily"),
            ("What are the limits of your role in this situation? When do you need to involve others?",
             "Understand professional boundaries and when to escalate"),
        ),
        scoring_criteria=(
            "Correctly identifies potential suicidal ideation",
            "Knows crisis intervention basics",
            "Prioritizes immediate safety appropriately",
            "Understands professional limits and when to escalate",
            "Considers impact on children while managing adult crisis",
        ),
    ),
    Scenario(
        id="SC4",
        title="Resistant Parent - Service Non-Compliance",
        category="Engagement & Boundaries",
        difficulty="Moderate",
        situation="""You've been assigned to work with the Mitchell family. Mom (Tanya, 29) has a 4-year-old son (Jayden) and is court-ordered to participate in in-home family services after neglect allegations. During your visits over the past month:

• Tanya has cancelled 3 of your 6 scheduled visits at the last minute
• When you do meet, she sits with arms crossed and gives minimal responses
• She says: "I don't need this. CPS is just out to get me because I'm poor."
• "Those other workers didn't help. Why should you be any different?"
• Jayden is clean and fed, but Tanya rarely interacts with him during your visits
• Your supervisor is asking for progress updates""",
        questions=_questions(
            "SC4",
            ("What do you think is driving Tanya's resistance? What might be underneath her anger?",
             "Consider her history and context"),
            ("How would you approach building a relationship with Tanya given her resistance?",
             "Think about engagement strategies for resistant clients"),
            ('She says "Why should you be any different?" How do you respond?',
             "Consider authenticity and managing expectations"),
            ("How do you balance respecting her autonomy with the court-ordered nature of services?",
             "Think about mandated vs. voluntary dynamics"),
            ("What would you report to your supervisor about progress with this family?",
             "Consider honest reporting while advocating for the family"),
        ),
        scoring_criteria=(
            "Shows empathy for client's perspective and history",
            "Has strategies for building trust with resistant clients",
            "Responds authentically without being defensive",
            "Understands mandated service dynamics",
            "Can report honestly while maintaining advocacy stance",
        ),
    ),
    Scenario(
        id="SC5",
        title="Suspected Child Abuse - Mandatory Reporting",
        category="Safety & Reporting",
        difficulty="High",
        situation="""You've been working with the Davis family for two months. Mom (Keisha) and her partner (Marcus) have two children: Destiny (7) and Marcus Jr. (4). Today during your home visit:

• You notice Destiny has a bruise on her upper arm that looks like finger marks
• When you ask casually, Destiny says "I fell" and looks at her mom
• Keisha quickly says "She's so clumsy, always falling"
• Marcus is in the other room but you notice Destiny keeps watching the doorway
• Keisha then says privately: "Please don't make a big deal of this. I'm afraid if you report, Marcus will leave and I can't afford rent alone."
• Keisha has disclosed to you previously that Marcus has a "temper" but insisted he's never hurt the kids""",
        questions=_questions(
            "SC5",
            ("What observations are concerning you, and why?",
             "Identify specific behavioral and physical indicators"),
            ("What is your legal and ethical obligation in this situation?",
             "Consider mandatory reporting requirements"),
            ("How do you talk to Keisha about your obligation to report, given her fear?",
             "Balance honesty about requirements with maintaining relationship"),
            ("What specific information would you include in your report?",
             "Focus on objective observations and statements"),
            ("How do you continue working with this family after making a report?",
             "Consider ongoing relationship and safety planning"),
        ),
        scoring_criteria=(
            "Correctly identifies indicators of potential abuse",
            "Understands mandatory reporting obligations",
            "Communicates honestly while maintaining compassion",
            "Documents objectively and completely",
            "Has plan for ongoing engagement after reporting",
        ),
    ),
    Scenario(
        id="SC6",
        title="Co-Occurring Addiction and Grief",
        category="Addiction & Trauma",
        difficulty="Complex",
        situation="""You're working with the Williams family. Mom (Patricia, 45) lost her adult son to overdose 18 months ago. She has two remaining children at home: Devon (16) and Alicia (12). Patricia is 9 months sober from alcohol and prescription pills.

During today's home visit:

• Patricia tells you the anniversary of her son's death is next week
• She admits: "I almost used last weekend. I had the bottle in my hand. But I called my sponsor instead."
• Devon is angry: "She acts like he was the only one who died. We're still here, but she's always sad."
• Alicia is anxious and keeps asking you: "Is my mom going to be okay? Is she going to drink again?"
• Patricia looks exhausted and says: "I don't know how to be there for them when I can barely get through the day.\"""",
        questions=_questions(
            "SC6",
            ("What is Patricia dealing with beyond just staying sober?",
             "Consider complicated grief and parenting while in recovery"),
            ('Patricia tells you she "almost used" but didn\'t. How do you respond to this disclosure?',
             "Think about supporting recovery without shaming"),
            ("How do you support Devon's anger without dismissing Patricia's grief?",
             "Consider holding space for multiple family members' experiences"),
            ("What would you say to 12-year-old Alicia about her concerns?",
             "Think about age-appropriate reassurance without false promises"),
            ("What resources or supports might help this family, and how would you introduce them?",
             "Consider grief support, family counseling, recovery resources"),
        ),
        scoring_criteria=(
            "Understands complicated grief and recovery intersection",
            "Validates recovery efforts and normalizes urges",
            "Can hold space for multiple perspectives",
            "Uses age-appropriate communication with children",
            "Knows community resources and how to connect families",
        ),
    ),
)

SCENARIOS_BY_ID: Dict[str, Scenario] = {scenario.id: scenario for scenario in SCENARIOS}
TOTAL_SCENARIO_QUESTIONS = sum(len(scenario.questions) for scenario in SCENARIOS)

SCORING_RUBRIC: Dict[int, Dict[str, str]] = {
    3: {
        "label": "Strong",
        "description": "Demonstrates clear understanding, uses trauma-informed approach, provides specific and appropriate responses",
    },
    2: {
        "label": "Adequate",
        "description": "Shows basic understanding, generally appropriate responses with some areas needing development",
    },
    1: {
        "label": "Concern",
        "description": "Missing key elements, concerning approach, or significantly incomplete understanding",
    },
}

ASSESSMENT_CATEGORIES: Tuple[AssessmentCategory, ...] = (
    AssessmentCategory("trauma_informed", "Trauma-Informed Thinking",
                       "Understands how trauma shapes behavior and responds accordingly"),
    AssessmentCategory("problem_solving", "Problem-Solving Approach",
                       "Practical, creative, and appropriate solutions to complex situations"),
    AssessmentCategory("non_judgment", "Non-Judgment & Compassion",
                       "Sees humanity in families while maintaining appropriate accountability"),
    AssessmentCategory("boundaries", "Boundaries & Professional Limits",
                       "Knows when to act, when to refer, and when to involve others"),
    AssessmentCategory("communication", "Communication & Language",
                       "Uses respectful, clear, non-blaming language appropriate to the audience"),
    AssessmentCategory("self_awareness", "Self-Awareness",
                       "Recognizes own reactions, biases, and limitations"),
    AssessmentCategory("safety_assessment", "Safety Assessment",
                       "Correctly identifies and prioritizes safety concerns"),
)


def find_scenario(scenario_id: str) -> Optional[Scenario]:
    return SCENARIOS_BY_ID.get(scenario_id)


def scoring_template() -> List[Dict[str, object]]:
    return [
        {"category": category.name, "description": category.description, "score": None, "notes": ""}
        for category in ASSESSMENT_CATEGORIES
    ]


def rubric_payload() -> Dict[str, object]:
    return {
        "rubric": SCORING_RUBRIC,
        "categories": [category.to_dict() for category in ASSESSMENT_CATEGORIES],
        "scenarios": [
            {"id": s.id, "title": s.title, "scoringCriteria": list(s.scoring_criteria)} for s in SCENARIOS
        ],
    }

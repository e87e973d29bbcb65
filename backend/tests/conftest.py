import os
# Keep outbound collaborators disabled by default for unit/API tests. Individual
# tests opt in by monkeypatching settings or the dispatch functions.
os.environ["MVP_DISABLE_EMAIL"] = "true"
os.environ["MVP_DISABLE_SHEETS"] = "true"
os.environ["RESEND_API_KEY"] = ""
os.environ["NOTIFICATION_EMAIL"] = ""
os.environ["GOOGLE_SHEETS_ID"] = ""
os.environ["GOOGLE_SERVICE_ACCOUNT_EMAIL"] = ""
os.environ["GOOGLE_PRIVATE_KEY"] = ""
os.environ["DEPLOYMENT_ENV"] = "test"

import pytest
from fastapi.testclient import TestClient
from interview_assistant.components.assessment.colors import COLOR_ORDER
from interview_assistant.components.assessment.questions import QUESTIONS
from interview_assistant.main import app


@pytest.fixture(scope="function")
def client():
    with TestClient(app) as c:
        yield c


# ---------------------------------------------------------------------------
# Factory helpers
# ---------------------------------------------------------------------------

def make_answers(colors):
    """One answer per color, addressed to Q1, Q2, ... in order."""
    return [
        {"questionId": question.id, "color": color}
        for question, color in zip(QUESTIONS, colors)
    ]


def balanced_answers(per_color=5):
    """``per_color`` answers for each color, cycling gold/green/orange/blue."""
    colors = [COLOR_ORDER[i % len(COLOR_ORDER)].value for i in range(per_color * len(COLOR_ORDER))]
    return make_answers(colors)

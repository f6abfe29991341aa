import json

import pytest
from fastapi.testclient import TestClient

from careercoach.agents.llm.base import LLMClient
from careercoach.deps import get_llm
from careercoach.main import app
from careercoach.settings import settings


class FakeLLM(LLMClient):
    """Returns queued responses in order, or raises `error` on every call."""

    def __init__(self, responses=None, error=None, on_call=None):
        self.responses = list(responses or [])
        self.error = error
        self.on_call = on_call
        self.calls = []

    def generate_text(self, *, system, user, temperature=0.2):
        self.calls.append({"system": system, "user": user, "temperature": temperature})
        if self.on_call:
            self.on_call()
        if self.error:
            raise self.error
        return self.responses.pop(0)


@pytest.fixture
def analysis_payload():
    return {
        "overallScore": 82,
        "contactScore": 90,
        "experienceScore": 78,
        "improvements": [
            "Quantify the impact of the migration project",
            "Add a skills section near the top",
            "Shorten the summary to two sentences",
        ],
        "strengths": [
            "Clear job titles and dates",
            "Strong action verbs",
            "Relevant cloud certifications",
        ],
        "summary": "A solid backend resume that would benefit from more measurable outcomes.",
    }


@pytest.fixture
def roadmap_payload():
    categories = ["foundation", "foundation", "intermediate", "intermediate", "advanced", "specialization"]
    return {
        "title": "Mobile App Developer Roadmap",
        "description": "From Kotlin basics to shipping production apps.",
        "duration": "8-10 Months",
        "totalNodes": len(categories),
        "nodes": [
            {
                "id": str(i + 1),
                "title": f"Step {i + 1}",
                "description": f"What to learn in step {i + 1}",
                "duration": "2-3 weeks",
                "completed": False,
                "category": category,
            }
            for i, category in enumerate(categories)
        ],
    }


@pytest.fixture
def analysis_json(analysis_payload):
    return json.dumps(analysis_payload)


@pytest.fixture
def roadmap_json(roadmap_payload):
    return json.dumps(roadmap_payload)


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def pro_headers(monkeypatch):
    monkeypatch.setattr(settings, "subscription_overrides", {"user-pro": "pro", "user-free": "free"})
    return {settings.user_id_header: "user-pro"}


@pytest.fixture
def client(fake_llm):
    app.dependency_overrides[get_llm] = lambda: fake_llm
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_llm():
    return FakeLLM

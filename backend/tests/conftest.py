import asyncio
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure backend package is importable
backend_root = Path(__file__).resolve().parents[1]
if str(backend_root) not in sys.path:
    sys.path.insert(0, str(backend_root))


class FakeProvider:
    """Deterministic SuggestionProvider; records every call it gets."""

    def __init__(self, order_reply=None, ats_reply=None, error=None):
        self.order_reply = order_reply if order_reply is not None else {
            "orderedSections": ["Experience", "Education", "projects"],
            "reasoning": "Experience is the strongest signal for this profile.",
        }
        self.ats_reply = ats_reply if ats_reply is not None else {
            "suggestions": "- Add **Kubernetes** to skills\n\nEstimated ATS improvement: 15%",
        }
        self.error = error
        self.order_calls = []
        self.ats_calls = []

    async def suggest_section_order(self, education, skills, experience, projects):
        self.order_calls.append(
            {"education": education, "skills": skills, "experience": experience, "projects": projects}
        )
        if self.error:
            raise self.error
        return self.order_reply

    async def suggest_ats_improvements(self, resume, job_description):
        self.ats_calls.append({"resume": resume, "job_description": job_description})
        if self.error:
            raise self.error
        return self.ats_reply


class BlockingProvider(FakeProvider):
    """Holds the section-order call open until ``release`` is set."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def suggest_section_order(self, education, skills, experience, projects):
        self.started.set()
        await self.release.wait()
        return await super().suggest_section_order(education, skills, experience, projects)


@pytest.fixture
def client(monkeypatch):
    """Provide a FastAPI TestClient with a fresh session store and no real API keys."""
    monkeypatch.setenv("CORS_ORIGINS", "*")
    # Avoid accidental usage of real API keys during tests
    monkeypatch.setenv("OPENAI_API_KEY", "")

    from resumeforge.main import app
    from resumeforge.sessions import SessionStore, get_session_store

    store = SessionStore()
    app.dependency_overrides[get_session_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()

"""
Shared test fixtures for AngloLingua tests.

Provides an in-memory session context, test client, and common lesson
data used across all test modules.
"""

import pytest
from fastapi.testclient import TestClient

from anglolingua.models import Lesson


@pytest.fixture(autouse=True)
def mock_mode_env(monkeypatch):
    """Ensure MOCK_MODE=true and no real credentials for all tests."""
    monkeypatch.setenv("MOCK_MODE", "true")
    monkeypatch.setenv("OPENAI_API_KEY", "")
    monkeypatch.setenv("OPENAI_ORG_ID", "")


@pytest.fixture
def storage():
    """Fresh in-memory key/value storage."""
    from anglolingua.services.storage import MemoryStorage
    return MemoryStorage()


@pytest.fixture
def chat_service():
    """Mock-mode AI chat service."""
    from anglolingua.services.ai_chat_service import AIChatService
    return AIChatService(mock_mode=True, timeout=5)


@pytest.fixture
def catalog():
    """Catalog store with the simulated latency switched off."""
    from anglolingua.services.catalog_service import CatalogStore
    return CatalogStore(catalog_latency=0, lesson_latency=0)


@pytest.fixture
def context(storage, catalog, chat_service):
    """Session context over in-memory storage; not yet started."""
    from anglolingua.context import SessionContext
    return SessionContext(storage=storage, catalog=catalog, chat_service=chat_service)


@pytest.fixture
def test_client(context):
    """Create a FastAPI TestClient for route testing.

    Used as a context manager so the app lifespan (rehydrate + catalog load)
    runs before the first request.
    """
    from anglolingua.main import create_app
    with TestClient(create_app(context)) as client:
        yield client


@pytest.fixture
def logged_in_client(test_client):
    """TestClient with a FREE learner already signed in."""
    resp = test_client.post(
        "/api/session/login",
        json={"email": "anna@example.com", "password": "secret"},
    )
    assert resp.status_code == 200
    return test_client


@pytest.fixture
def premium_client(logged_in_client):
    """TestClient with a PREMIUM learner signed in."""
    resp = logged_in_client.post("/api/paywall/upgrade")
    assert resp.status_code == 200
    return logged_in_client


def make_lesson(lesson_id: str = "lesson-x", order: int = 1, homework: list[dict] | None = None) -> Lesson:
    """Build a minimal lesson around the given homework definitions."""
    return Lesson(
        id=lesson_id,
        title=f"Test lesson {lesson_id}",
        level="A1",
        order=order,
        estimated_time_minutes=10,
        content={"introduction": "Test introduction"},
        homework=homework or [],
    )


def blank_exercise(exercise_id: str, answer: str = "is") -> dict:
    return {
        "id": exercise_id,
        "type": "FILL_IN_THE_BLANKS",
        "question": "My name ___ Maria.",
        "correct_answer": {"kind": "single", "text": answer},
    }


def choice_exercise(exercise_id: str, correct: str = "opt2") -> dict:
    return {
        "id": exercise_id,
        "type": "MULTIPLE_CHOICE",
        "question": "Pick one",
        "options": [
            {"id": "opt1", "text": "Good evening"},
            {"id": "opt2", "text": "Good morning"},
        ],
        "correct_answer": correct,
    }


@pytest.fixture
def sample_lesson():
    """Two-exercise lesson: one multiple choice, one single blank."""
    return make_lesson(homework=[choice_exercise("ex-1"), blank_exercise("ex-2")])

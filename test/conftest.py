"""
Shared pytest fixtures and configuration for the entire test suite.
Applies to all subdirectories: unit/, api/
"""

import sys
import os
import json
from unittest.mock import AsyncMock, MagicMock
import pytest

# ── Ensure backend is importable from every pytest session ──────────────────
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "backend"))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

# Minimal env so that Pydantic Settings can validate on import
os.environ.setdefault("SEGMIND_API_KEY", "test-segmind-key")


# ── Question fixtures ────────────────────────────────────────────────────────

def _make_question(n, correct=0):
    return {
        "question": f"What does Celo feature #{n} do?",
        "options": [f"Q{n} option {c}" for c in "ABCD"],
        "correctAnswer": correct,
        "explanation": f"Explanation for question {n}.",
    }


@pytest.fixture
def make_question():
    """Factory building one raw (wire-format) question dict."""
    return _make_question


@pytest.fixture
def raw_questions():
    """Ten valid raw questions with a balanced [3, 2, 3, 2] distribution."""
    answers = [0, 1, 2, 3, 0, 1, 2, 3, 0, 2]
    return [_make_question(i, a) for i, a in enumerate(answers, start=1)]


@pytest.fixture
def skewed_raw_questions():
    """Ten valid raw questions, every correct answer at index 0."""
    return [_make_question(i, 0) for i in range(1, 11)]


# ── Store fixture ────────────────────────────────────────────────────────────

@pytest.fixture
def store():
    from quizelo.services.quiz.store import InMemoryQuestionStore
    return InMemoryQuestionStore(capacity=100)


# ── Fake Segmind LLM ─────────────────────────────────────────────────────────

@pytest.fixture
def fake_llm():
    """Factory: an LLM stand-in whose ``ainvoke`` returns *text*."""
    def _build(text=None, questions=None, side_effect=None):
        llm = MagicMock()
        if questions is not None:
            text = json.dumps(questions)
        llm.ainvoke = AsyncMock(return_value=text, side_effect=side_effect)
        return llm
    return _build


# ── FastAPI TestClient fixture ────────────────────────────────────────────────

@pytest.fixture
def app_client(store):
    """TestClient for the full application with an isolated question store."""
    from fastapi.testclient import TestClient
    from quizelo.main import app
    from quizelo.services.quiz.store import get_question_store

    app.dependency_overrides[get_question_store] = lambda: store
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
    app.dependency_overrides.clear()

"""Health check endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from quizelo.core.config import settings
from quizelo.services.quiz.store import QuestionStore, get_question_store

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/health")
async def health_check(store: QuestionStore = Depends(get_question_store)):
    """Report generation readiness and question store usage.

    Segmind is not called; a configured key counts as ``ok``.
    """
    llm_status = "ok" if settings.SEGMIND_API_KEY else "unconfigured"
    if llm_status != "ok":
        logger.debug("Health check: SEGMIND_API_KEY missing")

    return JSONResponse(
        content={
            "llm": llm_status,
            "cached_topics": store.topic_count(),
            "overall": "healthy" if llm_status == "ok" else "degraded",
        },
        status_code=200,
    )


@router.get("/health/simple")
async def simple_health_check():
    """Simple health check - just returns 200 OK."""
    return {"status": "ok"}

"""Quiz routes: question generation, topic catalog, answer marking and scoring."""

import json
import logging

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError as PydanticValidationError

from quizelo.core.errors import InputError, NotFoundError
from quizelo.services.quiz.generator import generate_questions
from quizelo.services.quiz.schemas import AnswerRequest, ScoreRequest, Topic
from quizelo.services.quiz.scoring import calculate_score, mark_answer
from quizelo.services.quiz.store import QuestionStore, get_question_store
from quizelo.services.quiz.topics import TOPICS, get_topic

logger = logging.getLogger(__name__)
router = APIRouter()


async def _read_json(request: Request) -> dict:
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        body = None
    return body if isinstance(body, dict) else {}


def _parse_topic(raw) -> Topic:
    try:
        return Topic.model_validate(raw)
    except PydanticValidationError as e:
        fields = {err["loc"][0] for err in e.errors() if err["loc"]}
        if fields == {"description"}:
            raise InputError("Topic description must be a string")
        raise InputError("Topic is required")


@router.post("/api/generate-questions")
async def create_questions(
    request: Request,
    store: QuestionStore = Depends(get_question_store),
):
    body = await _read_json(request)
    topic = _parse_topic(body.get("topic"))

    questions = await generate_questions(topic, store)
    return {"questions": [q.to_wire() for q in questions]}


@router.get("/api/topics")
async def list_topics():
    return {"topics": [t.model_dump() for t in TOPICS]}


@router.get("/api/topics/{topic_id}")
async def read_topic(topic_id: str):
    topic = get_topic(topic_id)
    if topic is None:
        raise NotFoundError(f"Unknown topic: {topic_id}")
    return topic.model_dump()


@router.post("/api/answer")
async def answer_question(request: Request):
    body = await _read_json(request)
    try:
        payload = AnswerRequest.model_validate(body)
    except PydanticValidationError as e:
        logger.info("Rejected answer request: %s", e.error_count())
        raise InputError("Body must contain a question and an answer")

    return mark_answer(payload.question, payload.answer).model_dump(by_alias=True)


@router.post("/api/score")
async def score_quiz(request: Request):
    body = await _read_json(request)
    try:
        payload = ScoreRequest.model_validate(body)
    except PydanticValidationError as e:
        logger.info("Rejected score request: %s", e.error_count())
        raise InputError("Body must contain questions and answers")

    result = calculate_score(payload.questions, payload.answers)
    return result.model_dump()

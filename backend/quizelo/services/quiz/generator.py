"""Celo quiz question generation pipeline."""

from __future__ import annotations

import logging
import time
from typing import List

from quizelo.core.config import settings
from quizelo.prompts import get_quiz_prompt, get_quiz_system_prompt
from quizelo.services.llm_service.llm import get_segmind_llm
from quizelo.services.quiz.balancer import (
    answer_distribution,
    is_distribution_acceptable,
    redistribute_answers,
)
from quizelo.services.quiz.parser import parse_questions_text
from quizelo.services.quiz.schemas import QuizQuestion, Topic
from quizelo.services.quiz.store import QuestionStore
from quizelo.services.quiz.validator import validate_questions

logger = logging.getLogger(__name__)


async def generate_questions(topic: Topic, store: QuestionStore) -> List[QuizQuestion]:
    """Generate a balanced set of quiz questions for *topic*.

    Pipeline: build prompt (with recently seen questions for the topic),
    call Segmind, parse, validate, rebalance correct answers, remember the
    new question text.

    Raises:
        ConfigurationError: No Segmind key configured.
        UpstreamError: Segmind failed or returned no recognisable text.
        ParseError: No JSON array in the model output.
        ValidationError: One or more questions have the wrong shape.
    """
    llm = get_segmind_llm(instruction=get_quiz_system_prompt())

    previous = store.recent(topic.title, settings.QUESTION_CACHE_RECALL)
    prompt = get_quiz_prompt(topic.title, topic.description, previous)

    start = time.time()
    text = await llm.ainvoke(prompt)
    logger.info("Segmind generation for %r completed in %.2fs", topic.title, time.time() - start)

    candidates = parse_questions_text(text)
    questions = validate_questions(candidates, expected_count=settings.QUIZ_QUESTION_COUNT)

    if not is_distribution_acceptable(questions, settings.QUIZ_MAX_ANSWER_SHARE):
        logger.warning("Poor answer distribution detected %s, redistributing...",
                       answer_distribution(questions))
        questions = redistribute_answers(questions)

    store.remember(topic.title, (q.question for q in questions))

    logger.info("Answer distribution (A, B, C, D): %s", answer_distribution(questions))
    return questions

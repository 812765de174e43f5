"""Answer marking and quiz scoring."""

from __future__ import annotations

import math
from typing import Sequence

from quizelo.services.quiz.schemas import AnswerResult, QuizQuestion, ScoreResult


def mark_answer(question: QuizQuestion, user_answer: int) -> AnswerResult:
    return AnswerResult(
        is_correct=user_answer == question.correct_answer,
        correct_answer=question.correct_answer,
        explanation=question.explanation,
        user_answer=user_answer,
    )


def calculate_score(questions: Sequence[QuizQuestion], user_answers: Sequence[int]) -> ScoreResult:
    """Score *user_answers* against *questions* position by position.

    Unanswered trailing questions count as wrong; extra answers are ignored.
    """
    if not questions or not user_answers:
        return ScoreResult(correct=0, total=0, percentage=0)

    correct = sum(
        1 for q, answer in zip(questions, user_answers) if answer == q.correct_answer
    )
    total = len(questions)
    # half-up rounding
    percentage = math.floor(correct * 100 / total + 0.5)
    return ScoreResult(correct=correct, total=total, percentage=percentage)

"""Correct-answer distribution checks and rebalancing.

All functions are pure: question objects are never mutated, rebalanced
questions are fresh copies.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from quizelo.services.quiz.schemas import OPTION_COUNT, QuizQuestion

logger = logging.getLogger(__name__)

# Positions that receive the remainder when the count is not a multiple of 4
_REMAINDER_ORDER = (1, 3, 0, 2)


def answer_distribution(questions: Sequence[QuizQuestion]) -> List[int]:
    """Count correct answers per option index."""
    counts = [0] * OPTION_COUNT
    for q in questions:
        counts[q.correct_answer] += 1
    return counts


def is_distribution_acceptable(questions: Sequence[QuizQuestion], max_share: float = 0.4) -> bool:
    """No single position may hold more than ``ceil(max_share * n)`` answers."""
    max_allowed = math.ceil(len(questions) * max_share)
    return all(count <= max_allowed for count in answer_distribution(questions))


def target_distribution(count: int) -> List[int]:
    """Split *count* answers across the four positions (10 -> [2, 3, 2, 3])."""
    base, remainder = divmod(count, OPTION_COUNT)
    targets = [base] * OPTION_COUNT
    for pos in _REMAINDER_ORDER[:remainder]:
        targets[pos] += 1
    return targets


def _swap_correct(question: QuizQuestion, target: int) -> QuizQuestion:
    options = list(question.options)
    src = question.correct_answer
    options[src], options[target] = options[target], options[src]
    return question.model_copy(update={"options": options, "correct_answer": target})


def redistribute_answers(
    questions: Sequence[QuizQuestion],
    target_counts: Optional[Sequence[int]] = None,
) -> List[QuizQuestion]:
    """Move correct answers toward *target_counts* without touching any text.

    Walks the questions in order with a target slot that advances once its
    allocation is used up. A question whose current position is
    over-allocated has its correct option swapped into the target slot.
    Best effort: the result is not guaranteed to hit the target exactly.
    """
    result = list(questions)
    remaining = list(target_counts) if target_counts is not None else target_distribution(len(result))
    current = answer_distribution(result)

    if all(abs(c - t) <= 1 for c, t in zip(current, remaining)):
        return result

    slot = 0
    for i, question in enumerate(result):
        if not any(r > 0 for r in remaining):
            break
        while remaining[slot] <= 0:
            slot = (slot + 1) % OPTION_COUNT

        src = question.correct_answer
        if current[src] > remaining[src]:
            result[i] = _swap_correct(question, slot)
            current[src] -= 1
            current[slot] += 1

        remaining[slot] -= 1
        if remaining[slot] <= 0:
            slot = (slot + 1) % OPTION_COUNT

    logger.debug("Redistributed answers: %s", current)
    return result

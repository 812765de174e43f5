"""Per-item structural validation of generated questions."""

from __future__ import annotations

import logging
from typing import Any, List, Sequence

from pydantic import ValidationError as PydanticValidationError

from quizelo.core.errors import ValidationError
from quizelo.services.quiz.schemas import QuizQuestion

logger = logging.getLogger(__name__)


def is_valid_question(item: Any) -> bool:
    """True iff *item* has a non-empty question, four non-empty options,
    an integer answer in [0, 3] and a non-empty explanation."""
    try:
        QuizQuestion.model_validate(item)
    except PydanticValidationError:
        return False
    return True


def find_invalid_questions(items: Sequence[Any]) -> List[int]:
    """Return the 1-based positions of every item that fails validation."""
    return [i for i, item in enumerate(items, start=1) if not is_valid_question(item)]


def validate_questions(items: Sequence[Any], expected_count: int = 10) -> List[QuizQuestion]:
    """Validate every candidate; all-or-nothing.

    A count other than *expected_count* is only logged.

    Raises:
        ValidationError: Listing the positions of all failing items.
    """
    if len(items) != expected_count:
        logger.warning("AI generated %d questions, expected %d", len(items), expected_count)

    invalid = find_invalid_questions(items)
    if invalid:
        raise ValidationError(invalid)
    return [QuizQuestion.model_validate(item) for item in items]

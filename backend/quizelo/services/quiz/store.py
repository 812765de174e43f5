"""Per-topic store of recently generated question text.

Used to steer the model away from repeating itself. The in-memory
implementation is process-local; swap in another ``QuestionStore`` for a
multi-instance deployment.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Dict, Iterable, List

from quizelo.core.config import settings

logger = logging.getLogger(__name__)


def topic_key(title: str) -> str:
    return title.casefold()


class QuestionStore(ABC):
    """Capacity-bounded, insertion-ordered question memory keyed by topic."""

    @abstractmethod
    def recent(self, title: str, limit: int) -> List[str]:
        """Return up to *limit* most recently stored questions, oldest first."""

    @abstractmethod
    def remember(self, title: str, questions: Iterable[str]) -> None:
        """Add question texts for *title*, evicting the oldest past capacity."""

    @abstractmethod
    def size(self, title: str) -> int: ...

    @abstractmethod
    def topic_count(self) -> int: ...

    @abstractmethod
    def clear(self) -> None: ...


class InMemoryQuestionStore(QuestionStore):
    def __init__(self, capacity: int = 100):
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.capacity = capacity
        self._topics: Dict[str, "OrderedDict[str, None]"] = {}

    def recent(self, title: str, limit: int) -> List[str]:
        entries = self._topics.get(topic_key(title))
        if not entries or limit <= 0:
            return []
        return list(entries)[-limit:]

    def remember(self, title: str, questions: Iterable[str]) -> None:
        key = topic_key(title)
        entries = self._topics.setdefault(key, OrderedDict())
        for q in questions:
            # existing entries keep their original position
            entries.setdefault(q, None)

        overflow = len(entries) - self.capacity
        for _ in range(max(overflow, 0)):
            entries.popitem(last=False)
        if overflow > 0:
            logger.debug("Evicted %d cached questions for topic %r", overflow, key)

    def size(self, title: str) -> int:
        return len(self._topics.get(topic_key(title), ()))

    def topic_count(self) -> int:
        return len(self._topics)

    def clear(self) -> None:
        self._topics.clear()


_store: QuestionStore = InMemoryQuestionStore(capacity=settings.QUESTION_CACHE_CAPACITY)


def get_question_store() -> QuestionStore:
    """FastAPI dependency returning the process-wide store."""
    return _store

"""Prompt template loader.

Each ``get_*_prompt`` function loads a ``.txt`` template from this
package directory and substitutes ``{{PLACEHOLDER}}`` markers.
"""

from __future__ import annotations

import os
import re
from functools import lru_cache
from typing import Dict, Optional, Sequence

from quizelo.core.config import settings

_DIR = os.path.dirname(__file__)
_PLACEHOLDER_RE = re.compile(r"\{\{[A-Z_]+\}\}")


@lru_cache(maxsize=32)
def _load(filename: str) -> str:
    """Read a template file, caching the result."""
    with open(os.path.join(_DIR, filename), encoding="utf-8") as f:
        return f.read()


def _render(filename: str, subs: Dict[str, str]) -> str:
    """Load *filename* and apply all substitutions in a single pass.

    Substituted values are never rescanned, so user text containing
    ``{{...}}`` is left as-is.
    """
    text = _load(filename)
    return _PLACEHOLDER_RE.sub(lambda m: subs.get(m.group(0), m.group(0)), text)


# ── Public helpers ────────────────────────────────────────


def get_celo_context() -> str:
    return _load("celo_context.txt").strip()


def get_quiz_system_prompt() -> str:
    return _load("quiz_system_prompt.txt").strip()


def get_quiz_prompt(
    title: str,
    description: str,
    previous_questions: Optional[Sequence[str]] = None,
    question_count: Optional[int] = None,
) -> str:
    """Build the user prompt asking for a set of Celo quiz questions.

    Only the first ``PROMPT_PREVIOUS_QUESTIONS`` entries of
    *previous_questions* are echoed back as a do-not-repeat list; with
    no previous questions the variety clause is omitted entirely.
    """
    variety = ""
    shown = list(previous_questions or ())[: settings.PROMPT_PREVIOUS_QUESTIONS]
    if shown:
        numbered = "\n".join(f"  {i}. {q}" for i, q in enumerate(shown, start=1))
        variety = _render("quiz_variety.txt", {
            "{{TOPIC_TITLE}}": title,
            "{{PREVIOUS_QUESTIONS}}": numbered,
        }).rstrip("\n")

    return _render("quiz_prompt.txt", {
        "{{CELO_CONTEXT}}": get_celo_context(),
        "{{QUESTION_COUNT}}": str(question_count or settings.QUIZ_QUESTION_COUNT),
        "{{TOPIC_TITLE}}": title,
        "{{TOPIC_DESCRIPTION}}": description,
        "{{VARIETY_INSTRUCTIONS}}": variety,
    }).strip()

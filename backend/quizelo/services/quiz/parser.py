"""Recover the candidate question array from raw model output."""

from __future__ import annotations

import json
import logging
import re
from typing import Any, List

from quizelo.core.errors import ParseError

logger = logging.getLogger(__name__)

# ── JSON Extraction Patterns ──────────────────────────────────

_CODE_FENCE_RE = re.compile(r"```json\n?|\n?```|```\n?")
# Greedy: first "[" to last "]", so nested option arrays stay intact
_ARRAY_SPAN_RE = re.compile(r"\[.*\]", re.DOTALL)


def strip_code_fences(text: str) -> str:
    """Remove Markdown ```json / ``` markers."""
    return _CODE_FENCE_RE.sub("", text).strip()


def parse_questions_text(text: str) -> List[Any]:
    """Parse model output into a list of untyped question candidates.

    Tries the fence-stripped text as JSON first, then the first
    bracketed span found in the raw text.

    Raises:
        ParseError: If no JSON array can be recovered.
    """
    try:
        data = json.loads(strip_code_fences(text))
    except json.JSONDecodeError:
        match = _ARRAY_SPAN_RE.search(text)
        if not match:
            raise ParseError("No valid JSON array found in AI response")
        try:
            data = json.loads(match.group(0))
        except json.JSONDecodeError as exc:
            logger.warning("Bracketed span is not valid JSON: %s", exc)
            raise ParseError("Failed to parse AI response") from exc

    if not isinstance(data, list):
        raise ParseError("AI response is not a valid array")
    return data

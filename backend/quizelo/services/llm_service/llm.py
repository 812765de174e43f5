"""Segmind text-generation client as a LangChain LLM.

Usage:
    from quizelo.services.llm_service.llm import get_segmind_llm

    llm = get_segmind_llm(instruction="You are a Celo educator.")
    text = await llm.ainvoke(prompt)

One network attempt per call, no retries. Failures surface as
``UpstreamError``; a missing key surfaces as ``ConfigurationError``
before any request is made.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import requests
from langchain_core.language_models.llms import LLM

from quizelo.core.config import settings
from quizelo.core.errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

NO_TEXT_MESSAGE = "No response received from AI. Please check the API response format."


# ── Response text extractors ──────────────────────────────────
# Each returns None when its shape is absent and the (possibly empty) text
# when it is present. The first shape present decides the result.


def _from_content_blocks(payload: Dict[str, Any]) -> Optional[str]:
    content = payload.get("content")
    if not isinstance(content, list):
        return None
    for item in content:
        if isinstance(item, dict) and item.get("type") == "text":
            text = item.get("text")
            return text if isinstance(text, str) else ""
    return ""


def _from_content_string(payload: Dict[str, Any]) -> Optional[str]:
    content = payload.get("content")
    return content if isinstance(content, str) else None


def _from_text(payload: Dict[str, Any]) -> Optional[str]:
    text = payload.get("text")
    return text if isinstance(text, str) else None


def _from_choices(payload: Dict[str, Any]) -> Optional[str]:
    choices = payload.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    message = choices[0].get("message") if isinstance(choices[0], dict) else None
    if isinstance(message, dict) and isinstance(message.get("content"), str):
        return message["content"]
    return ""


def _from_message(payload: Dict[str, Any]) -> Optional[str]:
    # an empty string counts as absent here
    message = payload.get("message")
    return message if isinstance(message, str) and message else None


def _from_response(payload: Dict[str, Any]) -> Optional[str]:
    response = payload.get("response")
    return response if isinstance(response, str) and response else None


TEXT_EXTRACTORS: Tuple[Callable[[Dict[str, Any]], Optional[str]], ...] = (
    _from_content_blocks,
    _from_content_string,
    _from_text,
    _from_choices,
    _from_message,
    _from_response,
)


def extract_text(payload: Any) -> Optional[str]:
    """Pull the generated text out of a Segmind response payload.

    Returns None when no known shape is present or the matched text is blank.
    """
    if not isinstance(payload, dict):
        return None
    for extractor in TEXT_EXTRACTORS:
        text = extractor(payload)
        if text is not None:
            return text.strip() or None
    return None


def _error_message(body: Any, status_code: int) -> str:
    err = body.get("error") if isinstance(body, dict) else None
    if isinstance(err, dict):
        err = err.get("message")
    return str(err) if err else f"Segmind API error: {status_code}"


# ── LangChain wrapper ─────────────────────────────────────────


class SegmindLLM(LLM):
    """Custom LangChain wrapper for the Segmind chat REST API."""

    api_key: str
    api_url: str = settings.SEGMIND_API_URL
    instruction: str = ""
    temperature: float = 0.9
    max_tokens: int = 4000
    timeout: float = 120

    @property
    def _llm_type(self) -> str:
        return "segmind"

    @property
    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def _build_payload(self, prompt: str) -> dict:
        return {
            "instruction": self.instruction,
            "messages": [
                {"role": "user", "content": [{"type": "text", "text": prompt}]},
            ],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

    def _handle_response(self, status_code: int, body: Any) -> str:
        if not 200 <= status_code < 300:
            message = _error_message(body, status_code)
            logger.error("Segmind returned %d: %s", status_code, message)
            raise UpstreamError(message, upstream_status=status_code)

        text = extract_text(body)
        if not text:
            logger.error("Segmind API response format: %s", json.dumps(body, indent=2, default=str))
            raise UpstreamError(NO_TEXT_MESSAGE)
        return text

    def _call(
        self, prompt: str, stop: Optional[List[str]] = None, *args: Any, **kwargs: Any
    ) -> str:
        try:
            resp = requests.post(
                self.api_url,
                json=self._build_payload(prompt),
                headers=self._headers,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as exc:
            logger.error("Segmind request failed: %s", exc)
            raise UpstreamError(f"Segmind request failed: {exc}") from exc

        try:
            body = resp.json()
        except ValueError:
            body = None
        return self._handle_response(resp.status_code, body)

    async def _acall(
        self, prompt: str, stop: Optional[List[str]] = None, *args: Any, **kwargs: Any
    ) -> str:
        """Async version using httpx for non-blocking IO."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.post(
                    self.api_url,
                    json=self._build_payload(prompt),
                    headers=self._headers,
                )
        except httpx.RequestError as exc:
            logger.error("Segmind request failed: %s", exc)
            raise UpstreamError(f"Segmind request failed: {exc}") from exc

        try:
            body = resp.json()
        except ValueError:
            body = None
        return self._handle_response(resp.status_code, body)


# ── Public API ────────────────────────────────────────────────


def get_segmind_llm(
    instruction: str = "",
    temperature: Optional[float] = None,
    max_tokens: Optional[int] = None,
) -> SegmindLLM:
    """Return a configured Segmind LLM.

    Raises:
        ConfigurationError: If ``SEGMIND_API_KEY`` is not set.
    """
    if not settings.SEGMIND_API_KEY:
        raise ConfigurationError("Segmind API key not configured")

    return SegmindLLM(
        api_key=settings.SEGMIND_API_KEY,
        api_url=settings.SEGMIND_API_URL,
        instruction=instruction,
        temperature=temperature if temperature is not None else settings.LLM_TEMPERATURE_CREATIVE,
        max_tokens=max_tokens if max_tokens is not None else settings.LLM_MAX_TOKENS,
        timeout=settings.LLM_TIMEOUT,
    )

"""Error taxonomy for the question generation pipeline.

Every error carries the HTTP status it maps to; ``main.py`` turns them
into ``{"error": ...}`` JSON responses.
"""

from __future__ import annotations

from typing import List, Optional


class QuizeloError(Exception):
    """Base class for request-scoped failures."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message}


class InputError(QuizeloError):
    """Missing or malformed request body."""

    status_code = 400


class NotFoundError(QuizeloError):
    """The requested resource does not exist."""

    status_code = 404


class ConfigurationError(QuizeloError):
    """A required credential or setting is absent."""


class UpstreamError(QuizeloError):
    """The generation service failed or answered in an unknown shape."""

    def __init__(self, message: str, upstream_status: Optional[int] = None):
        super().__init__(message)
        self.upstream_status = upstream_status

    def to_dict(self) -> dict:
        body = super().to_dict()
        if self.upstream_status is not None:
            body["upstream_status"] = self.upstream_status
        return body


class ParseError(QuizeloError):
    """No JSON array could be recovered from the model output."""


class ValidationError(QuizeloError):
    """One or more generated questions have the wrong shape.

    Args:
        positions: 1-based indices of the failing items.
    """

    def __init__(self, positions: List[int]):
        self.positions = list(positions)
        joined = ", ".join(str(p) for p in self.positions)
        super().__init__(f"Questions {joined} have invalid format")

"""Base exception for Ally.

Every error raised by the project carries a stable string code and an HTTP
status so the API layer can render it without knowing the concrete class.

Codes follow the ``E_<WHAT>`` pattern, e.g. ``E_MISSING_PARAMETER``. The
rendered message always reads ``<code>: <reason>``.
"""

from __future__ import annotations

from typing import Any


class AllyException(Exception):
    """Base exception for all Ally errors."""

    def __init__(
        self,
        reason: str,
        code: str,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
    ):
        """Initialize exception with a reason and metadata.

        Args:
            reason: Human readable explanation, without the code prefix
            code: Stable error code (e.g. "E_MISSING_PARAMETER")
            status_code: HTTP status code used by the API layer
            details: Optional additional context
        """
        self.reason = reason
        self.code = code
        self.message = f"{code}: {reason}"
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    @property
    def name(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response format."""
        return {
            "error": {
                "name": self.name,
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }

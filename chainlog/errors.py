"""Exception hierarchy for chainlog.

Log services never raise; these exceptions come from building services,
either directly with an invalid level or from a configuration file.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__ = [
    "ChainLogError",
    "ConfigurationError",
]


class ChainLogError(Exception):
    """Base exception for all chainlog errors.

    Provides structured error information for debugging.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        self.details = details or {}
        self.suggestion = suggestion

        parts = [message]

        if details:
            detail_lines = [f"  {k}: {v}" for k, v in details.items()]
            parts.append("\nDetails:")
            parts.extend(detail_lines)

        if suggestion:
            parts.append(f"\nSuggestion: {suggestion}")

        super().__init__("\n".join(parts) if len(parts) > 1 else message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
            "suggestion": self.suggestion,
        }


class ConfigurationError(ChainLogError):
    """Invalid log service configuration.

    Raised for unknown level names and malformed configuration files.
    """

    def __init__(
        self,
        message: str,
        *,
        service: Optional[str] = None,
        field: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        self.service = service
        self.field = field

        details = kwargs.pop("details", None) or {}
        if service:
            details["service"] = service
        if field:
            details["field"] = field

        super().__init__(message, details=details, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["service"] = self.service
        result["field"] = self.field
        return result

"""
Custom Exception Hierarchy

Specific exception types for the tutor service, each carrying a stable
error code and structured details for API responses.
"""
from typing import Optional, Dict, Any


class ToothTutorError(Exception):
    """Base exception for all tutor errors."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details
        }


class InvalidRemedyError(ToothTutorError):
    """A remedy submission that cannot be resolved (e.g. blank free text)."""

    status_code = 400

    def __init__(
        self,
        message: str,
        remedy: str = "",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="INVALID_REMEDY",
            details={"remedy": remedy, **(details or {})}
        )
        self.remedy = remedy


class SessionNotFoundError(ToothTutorError):
    """Lookup of a session id that is not in the store."""

    status_code = 404

    def __init__(self, session_id: str):
        super().__init__(
            message=f"Session not found: {session_id}",
            code="SESSION_NOT_FOUND",
            details={"session_id": session_id}
        )
        self.session_id = session_id


class ReactionDecodeError(ToothTutorError):
    """Gemini returned text that is not a valid reaction payload."""

    status_code = 502

    def __init__(
        self,
        message: str,
        raw_text: str = "",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="REACTION_DECODE_ERROR",
            details={"raw_text": raw_text[:200], **(details or {})}
        )
        self.raw_text = raw_text


class GeminiUnavailableError(ToothTutorError):
    """The Gemini client is not configured or the request failed in transport."""

    status_code = 503

    def __init__(
        self,
        message: str,
        model: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="GEMINI_UNAVAILABLE",
            details={"model": model, **(details or {})}
        )
        self.model = model

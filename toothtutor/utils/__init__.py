"""
Utilities Package - Logging and Exception Handling
"""
from .logging import get_logger, setup_logging
from .exceptions import (
    ToothTutorError,
    InvalidRemedyError,
    SessionNotFoundError,
    ReactionDecodeError,
    GeminiUnavailableError,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "ToothTutorError",
    "InvalidRemedyError",
    "SessionNotFoundError",
    "ReactionDecodeError",
    "GeminiUnavailableError",
]

"""
Gemini API Client

Thin wrapper over LangChain's ChatGoogleGenerativeAI for single structured
request/response exchanges. One call per request: no retries, no caching.
"""
from dataclasses import dataclass, field
from typing import Dict, Any, Optional
from enum import Enum
from datetime import datetime

from langchain_google_genai import ChatGoogleGenerativeAI

from toothtutor.config import settings
from toothtutor.utils import get_logger, GeminiUnavailableError

logger = get_logger(__name__)


class GeminiModel(str, Enum):
    """Gemini models known to support JSON schema output."""
    FLASH_2_5 = "gemini-2.5-flash"
    FLASH_2_5_LITE = "gemini-2.5-flash-lite"
    PRO_2_5 = "gemini-2.5-pro"
    FLASH_2_0 = "gemini-2.0-flash"


@dataclass
class GeminiConfig:
    """Configuration for Gemini client."""
    api_key: Optional[str] = field(default_factory=lambda: settings.gemini_api_key)
    model: str = field(default_factory=lambda: settings.gemini_model)
    temperature: float = field(default_factory=lambda: settings.gemini_temperature)

    # Structured output
    response_mime_type: Optional[str] = None
    response_schema: Optional[Dict[str, Any]] = None

    # None leaves the transport default in place
    request_timeout_seconds: Optional[float] = None
    max_retries: int = 0


@dataclass
class GeminiResponse:
    """Text payload returned by Gemini."""
    text: str
    model: str
    prompt_tokens: int = 0
    completion_tokens: int = 0
    latency_ms: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "model": self.model,
            "prompt_tokens": self.prompt_tokens,
            "completion_tokens": self.completion_tokens,
            "latency_ms": round(self.latency_ms, 2),
        }


def _content_text(content: Any) -> str:
    """Flatten a LangChain message content (str or list of parts) to text."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(part.get("text", ""))
        return "".join(parts)
    return str(content)


class GeminiClient:
    """
    Client for Google Gemini API.

    A client without an API key is constructed but reports itself as
    unavailable; every request then raises GeminiUnavailableError.
    """

    def __init__(self, config: Optional[GeminiConfig] = None):
        self.config = config or GeminiConfig()
        self._llm: Optional[ChatGoogleGenerativeAI] = None
        self._request_count = 0
        self._error_count = 0
        self._last_request_time: Optional[datetime] = None

        self._initialize()

    def _initialize(self):
        """Build the LangChain chat model."""
        if not self.config.api_key:
            logger.warning("No Gemini API key provided - reactions will use the fallback result")
            return

        try:
            self._llm = ChatGoogleGenerativeAI(
                model=self._model_name,
                temperature=self.config.temperature,
                timeout=self.config.request_timeout_seconds,
                max_retries=self.config.max_retries,
                google_api_key=self.config.api_key,
                response_mime_type=self.config.response_mime_type,
                response_schema=self.config.response_schema,
            )
            logger.info(f"LangChain Gemini client initialized with model: {self._model_name}")
        except Exception as e:
            logger.error(f"Failed to initialize LangChain Gemini: {e}")
            self._llm = None

    @property
    def is_available(self) -> bool:
        """Check if Gemini is available for use."""
        return self._llm is not None

    @property
    def _model_name(self) -> str:
        """Resolve model name whether config.model is an enum or a plain string."""
        m = self.config.model
        return m.value if hasattr(m, "value") else str(m)

    async def generate_async(self, prompt: str) -> GeminiResponse:
        """
        Send one prompt and return the text payload.

        Raises:
            GeminiUnavailableError: client not configured or the request failed
        """
        if not self.is_available:
            raise GeminiUnavailableError("Gemini client is not configured", model=self._model_name)

        start_time = datetime.now()
        try:
            response = await self._llm.ainvoke(prompt)
        except Exception as e:
            self._error_count += 1
            raise GeminiUnavailableError(
                f"Gemini request failed: {e}",
                model=self._model_name,
                details={"exception": type(e).__name__},
            ) from e

        latency = (datetime.now() - start_time).total_seconds() * 1000
        text = _content_text(response.content if hasattr(response, "content") else response)

        prompt_tokens = 0
        completion_tokens = 0
        usage = getattr(response, "usage_metadata", None)
        if usage:
            prompt_tokens = usage.get("input_tokens", 0)
            completion_tokens = usage.get("output_tokens", 0)

        self._request_count += 1
        self._last_request_time = datetime.now()

        return GeminiResponse(
            text=text,
            model=self._model_name,
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            latency_ms=latency,
        )

    def get_stats(self) -> Dict[str, Any]:
        """Get client statistics."""
        return {
            "is_available": self.is_available,
            "model": self._model_name,
            "request_count": self._request_count,
            "error_count": self._error_count,
            "last_request": self._last_request_time.isoformat() if self._last_request_time else None
        }

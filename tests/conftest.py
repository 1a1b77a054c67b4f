"""
Pytest Configuration and Fixtures

Shared fixtures for the reaction pipeline tests. Gemini is never called:
tests use a mocked client whose generate_async is an AsyncMock.
"""
import json
from typing import Dict, Any
from unittest.mock import AsyncMock, Mock

import pytest

from toothtutor.core.llm.gemini_client import GeminiClient, GeminiResponse
from toothtutor.core.reactions import ReactionResolver
from toothtutor.services import ReactionService


def make_response(payload: Any, model: str = "gemini-2.5-flash") -> GeminiResponse:
    """GeminiResponse carrying a dict as JSON text, or a raw string as-is."""
    text = payload if isinstance(payload, str) else json.dumps(payload)
    return GeminiResponse(text=text, model=model)


@pytest.fixture
def relief_payload() -> Dict[str, Any]:
    return {
        "painLevel": 2,
        "sensationDescription": "A gentle, cooling calm spreads over the nerve.",
        "scientificEffect": "Isotonic saline reduces bacterial load and soothes inflamed tissue.",
        "verdict": "Safe",
        "mood": "relief",
    }


@pytest.fixture
def agony_payload() -> Dict[str, Any]:
    return {
        "painLevel": 9,
        "sensationDescription": "A searing, electric burn shoots through the root.",
        "scientificEffect": "Low pH citric acid stimulates exposed nerve fibres directly.",
        "verdict": "Unsafe",
        "mood": "agony",
    }


@pytest.fixture
def mock_client(relief_payload) -> Mock:
    """Available Gemini client returning the relief payload."""
    client = Mock(spec=GeminiClient)
    client.is_available = True
    client.generate_async = AsyncMock(return_value=make_response(relief_payload))
    client.get_stats.return_value = {"is_available": True, "model": "mock", "request_count": 0}
    return client


@pytest.fixture
def resolver(mock_client) -> ReactionResolver:
    return ReactionResolver(client=mock_client)


@pytest.fixture
def service(resolver) -> ReactionService:
    return ReactionService(resolver=resolver)

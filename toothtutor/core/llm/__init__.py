"""
LLM Module

Gemini transport used by the reaction resolver.
"""
from .gemini_client import GeminiClient, GeminiConfig, GeminiResponse, GeminiModel

__all__ = [
    "GeminiClient",
    "GeminiConfig",
    "GeminiResponse",
    "GeminiModel",
]

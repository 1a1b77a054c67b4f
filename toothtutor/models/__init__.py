from .reaction import (
    ReactionRequest,
    ReactionResponse,
    VisualStateResponse,
    SessionCreateRequest,
    ConditionRequest,
    RemedyRequest,
    SessionResponse,
    RemedyListResponse,
    ConditionInfo,
    ConditionListResponse,
    HealthResponse,
)

__all__ = [
    "ReactionRequest",
    "ReactionResponse",
    "VisualStateResponse",
    "SessionCreateRequest",
    "ConditionRequest",
    "RemedyRequest",
    "SessionResponse",
    "RemedyListResponse",
    "ConditionInfo",
    "ConditionListResponse",
    "HealthResponse",
]

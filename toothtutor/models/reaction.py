"""
API request and response models.
"""
from typing import Dict, Any, List, Optional

from pydantic import BaseModel, Field

from toothtutor.core.domain import Condition


class ReactionRequest(BaseModel):
    """Stateless reaction lookup."""
    remedy: str = Field(..., description="Preset remedy name or free-text substance")
    condition: Condition = Condition.BROKEN


class ReactionResponse(BaseModel):
    painLevel: int = Field(..., ge=0, le=10)
    sensationDescription: str
    scientificEffect: str
    verdict: str
    mood: str


class VisualStateResponse(BaseModel):
    painLevel: int
    mood: str
    animation: str
    visualEffect: str


class SessionCreateRequest(BaseModel):
    condition: Condition = Condition.BROKEN


class ConditionRequest(BaseModel):
    condition: Condition


class RemedyRequest(BaseModel):
    remedy: str


class SessionResponse(BaseModel):
    """Presentation inputs for one session plus the derived view model."""
    session_id: str
    condition: str
    selected_remedy: str
    visual_state: VisualStateResponse
    reaction: Optional[ReactionResponse] = None
    loading: bool
    view: Dict[str, Any] = Field(default_factory=dict)


class RemedyListResponse(BaseModel):
    remedies: List[str]
    query: str = ""


class ConditionInfo(BaseModel):
    value: str
    label: str
    description: str


class ConditionListResponse(BaseModel):
    conditions: List[ConditionInfo]


class HealthResponse(BaseModel):
    status: str
    version: str
    timestamp: str
    uptime_seconds: float
    gemini_available: bool
    stats: Dict[str, Any] = Field(default_factory=dict)

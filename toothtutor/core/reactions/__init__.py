"""
Reaction pipeline: optimistic state, resolver, reconciler.
"""
from .optimistic import optimistic_state, visuals_for_mood, PROVISIONAL_PAIN_LEVEL
from .resolver import (
    ReactionResolver,
    ReactionPayload,
    REACTION_SCHEMA,
    build_prompt,
    canned_reaction,
    decode_reaction,
    fallback_reaction,
    reaction_client_config,
)
from .reconciler import reconcile

__all__ = [
    "optimistic_state",
    "visuals_for_mood",
    "PROVISIONAL_PAIN_LEVEL",
    "ReactionResolver",
    "ReactionPayload",
    "REACTION_SCHEMA",
    "build_prompt",
    "canned_reaction",
    "decode_reaction",
    "fallback_reaction",
    "reaction_client_config",
    "reconcile",
]

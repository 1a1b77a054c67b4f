"""
Optimistic visual state.

Two static tables: the immediate reaction shown for a remedy while Gemini is
still thinking, and the mood-driven visuals used when a custom remedy's
reaction arrives.
"""
from typing import Dict, Tuple

from toothtutor.core.domain import (
    Animation,
    Mood,
    RemedyType,
    VisualEffect,
    VisualState,
)

PROVISIONAL_PAIN_LEVEL = 5

_PRESET_REACTIONS: Dict[str, Tuple[Mood, Animation, VisualEffect]] = {
    # Burning, dehydrating
    RemedyType.RUBBING_ALCOHOL.value: (Mood.AGONY, Animation.SHIVER, VisualEffect.SWEAT),
    RemedyType.MOUTHWASH.value: (Mood.AGONY, Animation.SHIVER, VisualEffect.SWEAT),
    # Acid
    RemedyType.VINEGAR.value: (Mood.AGONY, Animation.SHIVER, VisualEffect.ACID_FUMES),
    # Fizzing
    RemedyType.HYDROGEN_PEROXIDE.value: (Mood.SHOCK, Animation.JOLT, VisualEffect.BUBBLES),
    # Numbing
    RemedyType.ORAJEL.value: (Mood.NUMB, Animation.SWAY, VisualEffect.NONE),
    # Soothing
    RemedyType.SALT_WATER.value: (Mood.RELIEF, Animation.FLOAT, VisualEffect.SPARKLES),
    RemedyType.BAKING_SODA.value: (Mood.RELIEF, Animation.FLOAT, VisualEffect.SPARKLES),
    # Cleaning
    RemedyType.TOOTHPASTE.value: (Mood.NEUTRAL, Animation.IDLE, VisualEffect.SPARKLES),
    RemedyType.NONE.value: (Mood.NEUTRAL, Animation.THROB, VisualEffect.NONE),
}

# Placeholder for free-text input: "something is happening".
_CUSTOM_REACTION = (Mood.SHOCK, Animation.SHIVER, VisualEffect.SWEAT)

_MOOD_VISUALS: Dict[Mood, Tuple[Animation, VisualEffect]] = {
    Mood.RELIEF: (Animation.FLOAT, VisualEffect.SPARKLES),
    Mood.NEUTRAL: (Animation.IDLE, VisualEffect.NONE),
    Mood.AGONY: (Animation.SHIVER, VisualEffect.SWEAT),
    Mood.SHOCK: (Animation.JOLT, VisualEffect.ELECTRIC),
    Mood.NUMB: (Animation.SWAY, VisualEffect.NONE),
}


def optimistic_state(remedy: str) -> VisualState:
    """Provisional visual state for a remedy, computed without I/O."""
    mood, animation, effect = _PRESET_REACTIONS.get(remedy, _CUSTOM_REACTION)
    return VisualState(
        pain_level=PROVISIONAL_PAIN_LEVEL,
        mood=mood,
        animation=animation,
        visual_effect=effect,
    )


def visuals_for_mood(mood: Mood) -> Tuple[Animation, VisualEffect]:
    """Animation and effect implied by a mood alone."""
    return _MOOD_VISUALS[mood]

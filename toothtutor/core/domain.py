"""
Domain Model

Fixed vocabulary of conditions, remedies, moods, animations and visual
effects, plus the two value objects the rest of the service passes around:
ReactionResult (what the tooth feels) and VisualState (how it is drawn).
"""
from dataclasses import dataclass
from typing import Dict, Any
from enum import Enum


class Condition(str, Enum):
    """Simulated dental injury."""
    BROKEN = "BROKEN"
    CAVITY = "CAVITY"

    @property
    def label(self) -> str:
        return "Broken Tooth" if self is Condition.BROKEN else "Cavity"

    @property
    def description(self) -> str:
        """Framing used when describing the tooth to Gemini."""
        if self is Condition.BROKEN:
            return "hurt broken tooth with fully exposed raw nerve endings (pulp exposure)"
        return "tooth with a deep, decay-ridden cavity (caries) affecting the dentin and irritating the pulp"


class RemedyType(str, Enum):
    """Preset substances. The value is the remedy's identity."""
    NONE = "None"
    HYDROGEN_PEROXIDE = "Hydrogen Peroxide"
    RUBBING_ALCOHOL = "Rubbing Alcohol"
    ORAJEL = "Orajel (Benzocaine)"
    VINEGAR = "Vinegar"
    SALT_WATER = "Warm Salt Water"
    TOOTHPASTE = "Toothpaste"
    MOUTHWASH = "Mouthwash (Alcohol-based)"
    BAKING_SODA = "Baking Soda Paste"


class Mood(str, Enum):
    NEUTRAL = "neutral"
    AGONY = "agony"
    RELIEF = "relief"
    SHOCK = "shock"
    NUMB = "numb"


class Animation(str, Enum):
    IDLE = "idle"
    SHAKE = "shake"
    THROB = "throb"
    FLOAT = "float"
    SHIVER = "shiver"
    SWAY = "sway"
    JOLT = "jolt"


class VisualEffect(str, Enum):
    NONE = "none"
    BUBBLES = "bubbles"
    SPARKLES = "sparkles"
    ACID_FUMES = "acid-fumes"
    ELECTRIC = "electric"
    SWEAT = "sweat"


class Verdict(str, Enum):
    """Safety verdict for a remedy on a given condition."""
    SAFE = "Safe"
    UNSAFE = "Unsafe"
    USE_WITH_CAUTION = "Use with Caution"
    HIGHLY_RECOMMENDED = "Highly Recommended"


PAIN_MIN = 0
PAIN_MAX = 10

_KNOWN_REMEDIES = frozenset(r.value for r in RemedyType)


def is_known_remedy(remedy: str) -> bool:
    """True if the string is exactly one of the preset remedy values."""
    return remedy in _KNOWN_REMEDIES


@dataclass(frozen=True)
class ReactionResult:
    """How the tooth reacts to one remedy application."""
    pain_level: int
    sensation_description: str
    scientific_effect: str
    verdict: Verdict
    mood: Mood
    is_fallback: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "painLevel": self.pain_level,
            "sensationDescription": self.sensation_description,
            "scientificEffect": self.scientific_effect,
            "verdict": self.verdict.value,
            "mood": self.mood.value,
        }


@dataclass(frozen=True)
class VisualState:
    """Rendering-facing projection of the tooth character."""
    pain_level: int
    mood: Mood
    animation: Animation
    visual_effect: VisualEffect

    def to_dict(self) -> Dict[str, Any]:
        return {
            "painLevel": self.pain_level,
            "mood": self.mood.value,
            "animation": self.animation.value,
            "visualEffect": self.visual_effect.value,
        }


INITIAL_VISUAL_STATE = VisualState(
    pain_level=5,
    mood=Mood.NEUTRAL,
    animation=Animation.THROB,
    visual_effect=VisualEffect.NONE,
)

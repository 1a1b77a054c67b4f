"""
Presentation view model.

Pure functions from session state to what the page draws: the tooth
character (eyes, mouth, colours, animation, overlay effect) and the
reaction panel (pain meter, descriptions, verdict badge). Nothing here
touches state or performs I/O.
"""
from dataclasses import dataclass, asdict
from typing import Dict, Any, List, Optional

from toothtutor.core.domain import (
    Animation,
    Condition,
    Mood,
    ReactionResult,
    RemedyType,
    Verdict,
)
from toothtutor.core.state import SessionSnapshot


EYE_TYPES = {
    Mood.AGONY: "XX",
    Mood.SHOCK: "OO",
    Mood.RELIEF: "UU",
    Mood.NUMB: "UU",
}

ANIMATION_CLASSES = {
    Animation.SHAKE: "animate-shake origin-center",
    Animation.THROB: "animate-pulse origin-center",
    Animation.FLOAT: "animate-bounce origin-center",
    Animation.SHIVER: "animate-shiver origin-center",
    Animation.SWAY: "animate-sway origin-bottom",
    Animation.JOLT: "animate-jolt origin-center",
}

VERDICT_TONES = {
    Verdict.SAFE: "safe",
    Verdict.HIGHLY_RECOMMENDED: "recommended",
    Verdict.USE_WITH_CAUTION: "caution",
    Verdict.UNSAFE: "unsafe",
}

NO_REMEDY_LABEL = "Select a Remedy..."
EMPTY_PANEL_TEXT = "Select a substance to see how the tooth reacts."


def pain_color(level: int) -> str:
    if level > 7:
        return "red"
    if level > 4:
        return "yellow"
    return "green"


def pain_bar_width(level: int) -> int:
    """Percentage width of the pain meter; never fully empty."""
    return max(5, level * 10)


def pain_description(level: int) -> str:
    if level == 0:
        return "No pain. Perfectly comfortable."
    if level <= 3:
        return "Mild discomfort. Noticeable but easy to ignore."
    if level <= 6:
        return "Moderate pain. Distracting ache, throbbing."
    if level <= 8:
        return "Severe pain. Intense, sharp, difficult to focus."
    return "Agonizing. Unbearable, immediate emergency."


def verdict_tone(verdict: Verdict) -> str:
    return VERDICT_TONES[verdict]


def eye_type(mood: Mood) -> str:
    return EYE_TYPES.get(mood, "II")


def body_color(mood: Mood) -> str:
    if mood is Mood.AGONY:
        return "#ffe4e1"
    if mood is Mood.NUMB:
        return "#e0f2fe"
    return "#ffffff"


def nerve_color(mood: Mood) -> str:
    return "#94a3b8" if mood is Mood.NUMB else "#ef4444"


def animation_class(animation: Animation) -> str:
    return ANIMATION_CLASSES.get(animation, "")


def exposed_part_label(condition: Condition) -> str:
    return "Exposed Pulp" if condition is Condition.BROKEN else "Decayed Dentin"


def selected_remedy_label(remedy: str) -> str:
    return NO_REMEDY_LABEL if remedy == RemedyType.NONE.value else remedy


def filter_remedies(query: str = "") -> List[str]:
    """Preset remedies matching a search string, excluding the no-remedy sentinel."""
    needle = query.lower()
    return [
        r.value for r in RemedyType
        if r is not RemedyType.NONE and needle in r.value.lower()
    ]


@dataclass
class CharacterView:
    condition: str
    mood: str
    eyes: str
    body_color: str
    nerve_color: str
    nerve_throbs: bool
    pain_lines: bool
    animation_class: str
    visual_effect: str
    exposed_part: str


@dataclass
class PanelView:
    state: str  # "loading", "empty" or "reaction"
    message: str = ""
    pain_level: Optional[int] = None
    pain_color: Optional[str] = None
    pain_bar_width: Optional[int] = None
    pain_description: Optional[str] = None
    sensation: Optional[str] = None
    science: Optional[str] = None
    verdict: Optional[str] = None
    verdict_tone: Optional[str] = None


def character_view(snapshot: SessionSnapshot) -> CharacterView:
    visual = snapshot.visual_state
    mood = visual.mood
    return CharacterView(
        condition=snapshot.condition.value,
        mood=mood.value,
        eyes=eye_type(mood),
        body_color=body_color(mood),
        nerve_color=nerve_color(mood),
        nerve_throbs=mood is not Mood.NUMB,
        pain_lines=mood not in (Mood.NUMB, Mood.RELIEF),
        animation_class=animation_class(visual.animation),
        visual_effect=visual.visual_effect.value,
        exposed_part=exposed_part_label(snapshot.condition),
    )


def panel_view(reaction: Optional[ReactionResult], loading: bool) -> PanelView:
    if loading:
        return PanelView(state="loading")
    if reaction is None:
        return PanelView(state="empty", message=EMPTY_PANEL_TEXT)
    return PanelView(
        state="reaction",
        pain_level=reaction.pain_level,
        pain_color=pain_color(reaction.pain_level),
        pain_bar_width=pain_bar_width(reaction.pain_level),
        pain_description=pain_description(reaction.pain_level),
        sensation=reaction.sensation_description,
        science=reaction.scientific_effect,
        verdict=reaction.verdict.value,
        verdict_tone=verdict_tone(reaction.verdict),
    )


def build_view(snapshot: SessionSnapshot, query: str = "") -> Dict[str, Any]:
    """Everything the page template needs for one render."""
    return {
        "session_id": snapshot.session_id,
        "condition": snapshot.condition.value,
        "condition_label": snapshot.condition.label,
        "conditions": [{"value": c.value, "label": c.label} for c in Condition],
        "selected_remedy": snapshot.selected_remedy,
        "selected_label": selected_remedy_label(snapshot.selected_remedy),
        "remedies": filter_remedies(query),
        "loading": snapshot.loading,
        "character": asdict(character_view(snapshot)),
        "panel": asdict(panel_view(snapshot.reaction, snapshot.loading)),
    }

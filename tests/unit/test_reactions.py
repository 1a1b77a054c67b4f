"""
Unit Tests for the optimistic table and the state reconciler.
"""
import pytest

from toothtutor.core.domain import (
    Animation,
    Mood,
    ReactionResult,
    RemedyType,
    Verdict,
    VisualEffect,
    VisualState,
    is_known_remedy,
)
from toothtutor.core.reactions import (
    PROVISIONAL_PAIN_LEVEL,
    optimistic_state,
    reconcile,
    visuals_for_mood,
)


def _reaction(mood: Mood, pain: int = 4) -> ReactionResult:
    return ReactionResult(
        pain_level=pain,
        sensation_description="test sensation",
        scientific_effect="test effect",
        verdict=Verdict.SAFE,
        mood=mood,
    )


class TestKnownRemedies:

    def test_every_preset_is_known(self):
        for remedy in RemedyType:
            assert is_known_remedy(remedy.value)

    def test_free_text_is_not_known(self):
        assert not is_known_remedy("Lemon Juice")
        assert not is_known_remedy("hydrogen peroxide")  # identity is exact


class TestOptimisticState:

    @pytest.mark.parametrize("remedy", list(RemedyType))
    def test_total_over_presets(self, remedy):
        state = optimistic_state(remedy.value)
        assert isinstance(state, VisualState)
        assert state.pain_level == PROVISIONAL_PAIN_LEVEL

    @pytest.mark.parametrize("remedy, expected", [
        (RemedyType.RUBBING_ALCOHOL, (Mood.AGONY, Animation.SHIVER, VisualEffect.SWEAT)),
        (RemedyType.MOUTHWASH, (Mood.AGONY, Animation.SHIVER, VisualEffect.SWEAT)),
        (RemedyType.VINEGAR, (Mood.AGONY, Animation.SHIVER, VisualEffect.ACID_FUMES)),
        (RemedyType.HYDROGEN_PEROXIDE, (Mood.SHOCK, Animation.JOLT, VisualEffect.BUBBLES)),
        (RemedyType.ORAJEL, (Mood.NUMB, Animation.SWAY, VisualEffect.NONE)),
        (RemedyType.SALT_WATER, (Mood.RELIEF, Animation.FLOAT, VisualEffect.SPARKLES)),
        (RemedyType.BAKING_SODA, (Mood.RELIEF, Animation.FLOAT, VisualEffect.SPARKLES)),
        (RemedyType.TOOTHPASTE, (Mood.NEUTRAL, Animation.IDLE, VisualEffect.SPARKLES)),
        (RemedyType.NONE, (Mood.NEUTRAL, Animation.THROB, VisualEffect.NONE)),
    ])
    def test_preset_table(self, remedy, expected):
        state = optimistic_state(remedy.value)
        assert (state.mood, state.animation, state.visual_effect) == expected

    def test_custom_remedy_placeholder(self):
        state = optimistic_state("Hot Sauce")
        assert state.mood == Mood.SHOCK
        assert state.animation == Animation.SHIVER
        assert state.visual_effect == VisualEffect.SWEAT

    def test_empty_string_gets_placeholder(self):
        assert optimistic_state("").mood == Mood.SHOCK


class TestMoodVisuals:

    @pytest.mark.parametrize("mood, expected", [
        (Mood.RELIEF, (Animation.FLOAT, VisualEffect.SPARKLES)),
        (Mood.NEUTRAL, (Animation.IDLE, VisualEffect.NONE)),
        (Mood.AGONY, (Animation.SHIVER, VisualEffect.SWEAT)),
        (Mood.SHOCK, (Animation.JOLT, VisualEffect.ELECTRIC)),
        (Mood.NUMB, (Animation.SWAY, VisualEffect.NONE)),
    ])
    def test_table(self, mood, expected):
        assert visuals_for_mood(mood) == expected


class TestReconcile:

    def test_known_remedy_keeps_optimistic_visuals(self):
        remedy = RemedyType.HYDROGEN_PEROXIDE.value
        optimistic = optimistic_state(remedy)

        final = reconcile(optimistic, remedy, _reaction(Mood.AGONY, pain=8))

        assert final.animation == Animation.JOLT
        assert final.visual_effect == VisualEffect.BUBBLES
        assert final.mood == Mood.AGONY
        assert final.pain_level == 8

    def test_custom_remedy_relief_floats(self):
        remedy = "Chamomile Tea"
        optimistic = optimistic_state(remedy)
        assert optimistic.animation == Animation.SHIVER

        final = reconcile(optimistic, remedy, _reaction(Mood.RELIEF, pain=1))

        assert final.animation == Animation.FLOAT
        assert final.visual_effect == VisualEffect.SPARKLES
        assert final.mood == Mood.RELIEF
        assert final.pain_level == 1

    def test_custom_remedy_shock_is_electric(self):
        final = reconcile(optimistic_state("A Battery"), "A Battery", _reaction(Mood.SHOCK))
        assert final.animation == Animation.JOLT
        assert final.visual_effect == VisualEffect.ELECTRIC

    def test_no_remedy_keeps_throb(self):
        remedy = RemedyType.NONE.value
        final = reconcile(optimistic_state(remedy), remedy, _reaction(Mood.NEUTRAL, pain=3))
        assert final.animation == Animation.THROB
        assert final.visual_effect == VisualEffect.NONE
        assert final.pain_level == 3

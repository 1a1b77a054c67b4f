"""
Unit Tests for session state and the reaction service.
"""
import asyncio
from unittest.mock import AsyncMock

import pytest

from toothtutor.core.domain import (
    Animation,
    Condition,
    INITIAL_VISUAL_STATE,
    Mood,
    ReactionResult,
    RemedyType,
    Verdict,
    VisualEffect,
)
from toothtutor.core.reactions import canned_reaction
from toothtutor.core.state import SessionStore, ToothSession
from toothtutor.services import normalize_remedy
from toothtutor.utils import InvalidRemedyError, SessionNotFoundError
from tests.conftest import make_response


def _reaction(mood: Mood, pain: int) -> ReactionResult:
    return ReactionResult(
        pain_level=pain,
        sensation_description="s",
        scientific_effect="e",
        verdict=Verdict.SAFE,
        mood=mood,
    )


class TestToothSession:

    def test_initial_state(self):
        session = ToothSession()
        snap = session.snapshot()
        assert snap.condition == Condition.BROKEN
        assert snap.selected_remedy == RemedyType.NONE.value
        assert snap.visual_state == INITIAL_VISUAL_STATE
        assert snap.reaction is None
        assert not snap.loading

    def test_begin_selection_is_optimistic(self):
        session = ToothSession()
        token = session.begin_selection(RemedyType.VINEGAR.value)

        assert token == 1
        assert session.loading
        assert session.visual_state.visual_effect == VisualEffect.ACID_FUMES
        assert session.visual_state.pain_level == 5

    def test_apply_current_reaction(self):
        session = ToothSession()
        token = session.begin_selection(RemedyType.VINEGAR.value)

        assert session.apply_reaction(token, _reaction(Mood.AGONY, 8))
        assert not session.loading
        assert session.reaction.pain_level == 8
        assert session.visual_state.visual_effect == VisualEffect.ACID_FUMES

    def test_stale_reaction_is_dropped(self):
        session = ToothSession()
        old = session.begin_selection("Lemon Juice")
        new = session.begin_selection(RemedyType.ORAJEL.value)

        assert not session.apply_reaction(old, _reaction(Mood.AGONY, 9))
        assert session.loading
        assert session.reaction is None
        assert session.visual_state.mood == Mood.NUMB

        assert session.apply_reaction(new, _reaction(Mood.NUMB, 1))
        assert session.reaction.pain_level == 1
        assert session.visual_state.animation == Animation.SWAY

    def test_change_condition(self):
        session = ToothSession()
        assert not session.change_condition(Condition.BROKEN)
        assert session.change_condition(Condition.CAVITY)
        assert session.condition == Condition.CAVITY

    def test_snapshot_to_dict(self):
        session = ToothSession()
        token = session.begin_selection(RemedyType.NONE.value)
        session.apply_reaction(token, canned_reaction(Condition.BROKEN))

        data = session.snapshot().to_dict()
        assert data["reaction"]["painLevel"] == 5
        assert data["visual_state"] == {
            "painLevel": 5, "mood": "neutral", "animation": "throb", "visualEffect": "none"
        }


class TestSessionStore:

    def test_create_and_get(self):
        store = SessionStore()
        session = store.create(Condition.CAVITY)
        assert store.get(session.session_id) is session
        assert len(store) == 1

    def test_missing_session(self):
        store = SessionStore()
        with pytest.raises(SessionNotFoundError) as exc:
            store.get("nope")
        assert exc.value.to_dict()["error"] == "SESSION_NOT_FOUND"


class TestNormalizeRemedy:

    def test_trims(self):
        assert normalize_remedy("  Lemon Juice ") == "Lemon Juice"

    @pytest.mark.parametrize("remedy", ["", "   ", "\n\t"])
    def test_rejects_blank(self, remedy):
        with pytest.raises(InvalidRemedyError):
            normalize_remedy(remedy)


class TestReactionService:

    async def test_create_session_settles_no_remedy(self, service, mock_client):
        snap = await service.create_session(Condition.CAVITY)

        assert snap.reaction.pain_level == 3
        assert snap.visual_state.animation == Animation.THROB
        assert not snap.loading
        mock_client.generate_async.assert_not_called()

    async def test_known_remedy(self, service, agony_payload, mock_client):
        mock_client.generate_async.return_value = make_response(agony_payload)
        snap = await service.create_session()

        snap = await service.select_remedy(snap.session_id, RemedyType.HYDROGEN_PEROXIDE.value)

        assert snap.visual_state.animation == Animation.JOLT
        assert snap.visual_state.visual_effect == VisualEffect.BUBBLES
        assert snap.visual_state.mood == Mood.AGONY
        assert snap.visual_state.pain_level == 9

    async def test_custom_remedy_relief(self, service):
        snap = await service.create_session()

        snap = await service.select_remedy(snap.session_id, "  Chamomile Tea  ")

        assert snap.selected_remedy == "Chamomile Tea"
        assert snap.visual_state.animation == Animation.FLOAT
        assert snap.visual_state.visual_effect == VisualEffect.SPARKLES

    async def test_blank_remedy_rejected(self, service):
        snap = await service.create_session()
        with pytest.raises(InvalidRemedyError):
            await service.select_remedy(snap.session_id, "  ")

    async def test_condition_change_resets(self, service):
        snap = await service.create_session()
        await service.select_remedy(snap.session_id, RemedyType.VINEGAR.value)

        snap = await service.change_condition(snap.session_id, Condition.CAVITY)

        assert snap.condition == Condition.CAVITY
        assert snap.selected_remedy == RemedyType.NONE.value
        assert snap.reaction == canned_reaction(Condition.CAVITY)

    async def test_same_condition_is_noop(self, service, mock_client):
        snap = await service.create_session()
        await service.select_remedy(snap.session_id, "Soda")

        after = await service.change_condition(snap.session_id, Condition.BROKEN)
        assert after.selected_remedy == "Soda"

    async def test_out_of_order_completion(self, service, mock_client, relief_payload, agony_payload):
        """A slow first request must not overwrite the later selection."""
        release_first = asyncio.Event()

        async def generate(prompt):
            if 'applied the substance "Chili Oil"' in prompt:
                await release_first.wait()
                return make_response(agony_payload)
            return make_response(relief_payload)

        mock_client.generate_async = AsyncMock(side_effect=generate)
        snap = await service.create_session()
        sid = snap.session_id

        first = asyncio.create_task(service.select_remedy(sid, "Chili Oil"))
        await asyncio.sleep(0)
        assert service.get_session(sid).selected_remedy == "Chili Oil"

        await asyncio.wait_for(service.select_remedy(sid, "Chamomile Tea"), timeout=5)
        assert not first.done()
        release_first.set()
        stale = await asyncio.wait_for(first, timeout=5)

        assert stale.selected_remedy == "Chamomile Tea"
        assert mock_client.generate_async.await_count == 2

        final = service.get_session(sid)
        assert final.selected_remedy == "Chamomile Tea"
        assert final.visual_state.mood == Mood.RELIEF
        assert final.reaction.pain_level == 2

    async def test_unknown_session(self, service):
        with pytest.raises(SessionNotFoundError):
            await service.reset("missing")

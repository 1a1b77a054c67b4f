"""
Reaction Service

Runs the user-facing actions against a session: optimistic update, one
resolver call, then reconciliation if the answer is still current.
"""
from typing import Dict, Any, Optional

from toothtutor.core.domain import Condition, ReactionResult, RemedyType
from toothtutor.core.reactions import ReactionResolver
from toothtutor.core.state import SessionStore, SessionSnapshot, ToothSession
from toothtutor.utils import get_logger, InvalidRemedyError

logger = get_logger(__name__)


def normalize_remedy(remedy: str) -> str:
    """
    Trim a submitted remedy.

    Raises:
        InvalidRemedyError: the remedy is empty after trimming
    """
    cleaned = (remedy or "").strip()
    if not cleaned:
        raise InvalidRemedyError("Remedy must not be empty", remedy=remedy or "")
    return cleaned


class ReactionService:
    """Orchestrates sessions and the reaction pipeline."""

    def __init__(self, resolver: ReactionResolver, store: Optional[SessionStore] = None):
        self.resolver = resolver
        self.store = store or SessionStore()

    async def create_session(self, condition: Condition = Condition.BROKEN) -> SessionSnapshot:
        """New session, settled on the untreated tooth."""
        session = self.store.create(condition)
        return await self._run_selection(session, RemedyType.NONE.value)

    def get_session(self, session_id: str) -> SessionSnapshot:
        return self.store.get(session_id).snapshot()

    async def select_remedy(self, session_id: str, remedy: str) -> SessionSnapshot:
        """Apply a preset or free-text remedy."""
        session = self.store.get(session_id)
        return await self._run_selection(session, normalize_remedy(remedy))

    async def reset(self, session_id: str) -> SessionSnapshot:
        session = self.store.get(session_id)
        return await self._run_selection(session, RemedyType.NONE.value)

    async def change_condition(self, session_id: str, condition: Condition) -> SessionSnapshot:
        """Toggle condition; a change resets the tooth to no remedy."""
        session = self.store.get(session_id)
        if not session.change_condition(condition):
            return session.snapshot()
        logger.info(f"Session {session_id}: condition -> {condition.value}")
        return await self._run_selection(session, RemedyType.NONE.value)

    async def resolve(self, remedy: str, condition: Condition) -> ReactionResult:
        """Stateless resolution, no session involved."""
        return await self.resolver.resolve(normalize_remedy(remedy), condition)

    async def _run_selection(self, session: ToothSession, remedy: str) -> SessionSnapshot:
        token = session.begin_selection(remedy)
        reaction = await self.resolver.resolve(remedy, session.condition)
        session.apply_reaction(token, reaction)
        return session.snapshot()

    def get_stats(self) -> Dict[str, Any]:
        return {
            "sessions": len(self.store),
            "resolver": self.resolver.get_stats(),
        }

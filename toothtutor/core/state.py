"""
Tooth session state.

One ToothSession per user holds everything the page renders from. All
mutation goes through the transition methods below; responses are matched
to their selection by a request token so a slow, outdated answer cannot
overwrite a newer one.
"""
from dataclasses import dataclass, field
from typing import Dict, Any, Optional
import uuid

from toothtutor.core.domain import (
    Condition,
    INITIAL_VISUAL_STATE,
    ReactionResult,
    RemedyType,
    VisualState,
)
from toothtutor.core.reactions import optimistic_state, reconcile
from toothtutor.utils import get_logger, SessionNotFoundError

logger = get_logger(__name__)


@dataclass
class SessionSnapshot:
    """Read-only view of a session handed to the presentation layer."""
    session_id: str
    condition: Condition
    selected_remedy: str
    visual_state: VisualState
    reaction: Optional[ReactionResult]
    loading: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "session_id": self.session_id,
            "condition": self.condition.value,
            "selected_remedy": self.selected_remedy,
            "visual_state": self.visual_state.to_dict(),
            "reaction": self.reaction.to_dict() if self.reaction else None,
            "loading": self.loading,
        }


@dataclass
class ToothSession:
    """State container for one simulation."""
    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    condition: Condition = Condition.BROKEN
    selected_remedy: str = RemedyType.NONE.value
    visual_state: VisualState = INITIAL_VISUAL_STATE
    reaction: Optional[ReactionResult] = None
    loading: bool = False
    _token: int = 0

    def begin_selection(self, remedy: str) -> int:
        """Show the optimistic state for a remedy and issue a new request token."""
        self._token += 1
        self.selected_remedy = remedy
        self.visual_state = optimistic_state(remedy)
        self.loading = True
        return self._token

    def apply_reaction(self, token: int, reaction: ReactionResult) -> bool:
        """
        Reconcile an arrived reaction into the session.

        Returns:
            False if the token was superseded and the reaction was dropped
        """
        if token != self._token:
            logger.info(
                f"Session {self.session_id}: dropping stale reaction "
                f"(token {token}, current {self._token})"
            )
            return False

        self.reaction = reaction
        self.visual_state = reconcile(self.visual_state, self.selected_remedy, reaction)
        self.loading = False
        return True

    def change_condition(self, condition: Condition) -> bool:
        """Switch condition. Returns False when it was already set."""
        if condition == self.condition:
            return False
        self.condition = condition
        return True

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            session_id=self.session_id,
            condition=self.condition,
            selected_remedy=self.selected_remedy,
            visual_state=self.visual_state,
            reaction=self.reaction,
            loading=self.loading,
        )


class SessionStore:
    """In-memory session registry."""

    def __init__(self):
        self._sessions: Dict[str, ToothSession] = {}

    def create(self, condition: Condition = Condition.BROKEN) -> ToothSession:
        session = ToothSession(condition=condition)
        self._sessions[session.session_id] = session
        logger.info(f"Created session {session.session_id} ({condition.value})")
        return session

    def get(self, session_id: str) -> ToothSession:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None

    def __len__(self) -> int:
        return len(self._sessions)

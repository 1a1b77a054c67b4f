from .reaction_service import ReactionService, normalize_remedy

__all__ = ["ReactionService", "normalize_remedy"]

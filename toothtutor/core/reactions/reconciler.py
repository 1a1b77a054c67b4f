"""
State reconciliation.

Merges the optimistic visual state with the reaction that arrived for it.
"""
from toothtutor.core.domain import ReactionResult, VisualState, is_known_remedy
from toothtutor.core.reactions.optimistic import visuals_for_mood


def reconcile(previous: VisualState, remedy: str, reaction: ReactionResult) -> VisualState:
    """
    Final visual state once the reaction is known.

    Pain and mood always come from the reaction. Preset remedies keep the
    animation and effect already on screen; custom remedies take them from
    the reaction's mood.
    """
    if is_known_remedy(remedy):
        animation, effect = previous.animation, previous.visual_effect
    else:
        animation, effect = visuals_for_mood(reaction.mood)

    return VisualState(
        pain_level=reaction.pain_level,
        mood=reaction.mood,
        animation=animation,
        visual_effect=effect,
    )

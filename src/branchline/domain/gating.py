"""Choice eligibility checks against the live player state.

Everything here is read-only: gating may run once per render without
changing the outcome of the next call.
"""
from __future__ import annotations

from typing import List

from branchline.domain.defs import StoryChoiceDef
from branchline.domain.state import PlayerState

REQUIREMENT_SYMBOL = "≥"


def meets_affinity_requirements(choice: StoryChoiceDef, state: PlayerState) -> bool:
    """Return True when every affinity minimum in ``choice`` holds."""
    for char_id, required in choice.affinity_req.items():
        character = state.characters.get(char_id)
        if character is None:
            return False
        if character.affinity < required:
            return False
    return True


def meets_skill_requirements(choice: StoryChoiceDef, state: PlayerState) -> bool:
    """Return True when every stat minimum in ``choice`` holds."""
    for stat_id, required in choice.skill_req.items():
        stat = state.stats.get(stat_id)
        if stat is None:
            return False
        if stat.value < required:
            return False
    return True


def can_choose(choice: StoryChoiceDef, state: PlayerState) -> bool:
    """Return True when the choice may be selected.

    References to characters or stats missing from the roster count as
    unmet requirements.
    """
    if not choice.has_requirements:
        return True
    return meets_affinity_requirements(choice, state) and meets_skill_requirements(choice, state)


def requirement_labels(choice: StoryChoiceDef, state: PlayerState) -> List[str]:
    """Return one ``"<name> ≥ <minimum>"`` label per requirement."""
    labels: List[str] = []
    for char_id, required in choice.affinity_req.items():
        character = state.characters.get(char_id)
        name = character.name if character is not None else char_id
        labels.append(f"{name} {REQUIREMENT_SYMBOL} {required}")
    for stat_id, required in choice.skill_req.items():
        stat = state.stats.get(stat_id)
        name = stat.name if stat is not None else stat_id
        labels.append(f"{name} {REQUIREMENT_SYMBOL} {required}")
    return labels


def requirement_hint(choice: StoryChoiceDef, state: PlayerState) -> str:
    """Compose the requirement labels into a single display string."""
    return ", ".join(requirement_labels(choice, state))

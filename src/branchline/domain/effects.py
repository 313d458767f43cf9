"""Apply choice deltas to the player state with saturating clamps."""
from __future__ import annotations

import logging
from typing import Mapping

from branchline.domain.bounds import clamp_affinity, clamp_stat
from branchline.domain.state import PlayerState

logger = logging.getLogger(__name__)


def apply_affinity_change(deltas: Mapping[str, int] | None, state: PlayerState) -> None:
    """Add signed affinity deltas, clamping each result into [0, 100]."""
    if not deltas:
        return
    for char_id, delta in deltas.items():
        character = state.characters.get(char_id)
        if character is None:
            logger.debug("Ignoring affinity change for unknown character '%s'", char_id)
            continue
        character.affinity = clamp_affinity(character.affinity + delta)


def apply_stat_change(deltas: Mapping[str, int] | None, state: PlayerState) -> None:
    """Add signed stat deltas, clamping each result into [0, 20]."""
    if not deltas:
        return
    for stat_id, delta in deltas.items():
        stat = state.stats.get(stat_id)
        if stat is None:
            logger.debug("Ignoring stat change for unknown stat '%s'", stat_id)
            continue
        stat.value = clamp_stat(stat.value + delta)

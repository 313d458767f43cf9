"""Story definition structures used by the runtime."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

NARRATOR_IDS = frozenset({"", "system"})


@dataclass(slots=True)
class StoryLineDef:
    """Single line of dialogue; ``character`` is None for the narrator."""

    text: str
    character: str | None = None

    @property
    def is_narration(self) -> bool:
        return self.character is None or self.character in NARRATOR_IDS


@dataclass(slots=True)
class StoryChoiceDef:
    """Represents a selectable choice on a story node."""

    text: str
    next_target: str = ""
    affinity_req: Dict[str, int] = field(default_factory=dict)
    skill_req: Dict[str, int] = field(default_factory=dict)
    affinity_change: Dict[str, int] = field(default_factory=dict)
    skill_change: Dict[str, int] = field(default_factory=dict)

    @property
    def has_requirements(self) -> bool:
        return bool(self.affinity_req or self.skill_req)


@dataclass(slots=True)
class StoryNodeDef:
    """Fully parsed story node."""

    id: str
    lines: List[StoryLineDef]
    choices: List[StoryChoiceDef] = field(default_factory=list)

    @property
    def last_line(self) -> StoryLineDef:
        return self.lines[-1]


@dataclass(slots=True)
class StoryGraphDef:
    """All nodes of one story file, keyed by node id."""

    source: str
    nodes: Dict[str, StoryNodeDef] = field(default_factory=dict)

    def find(self, node_id: str) -> StoryNodeDef | None:
        """Return the node with ``node_id`` or None when the graph lacks it."""
        return self.nodes.get(node_id)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

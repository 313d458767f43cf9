"""Repository for story node definitions."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from branchline.data.errors import DataValidationError
from branchline.data.paths import DEFAULT_STORY_FILE
from branchline.data.repositories.base import RepositoryBase
from branchline.domain.defs import StoryChoiceDef, StoryGraphDef, StoryLineDef, StoryNodeDef


class StoryRepository(RepositoryBase[StoryNodeDef]):
    """Loads the nodes of one story file and validates their structure."""

    def __init__(self, filename: str = DEFAULT_STORY_FILE, base_path: Path | str | None = None) -> None:
        super().__init__(filename, base_path)

    def graph(self) -> StoryGraphDef:
        """Return the parsed story graph for this file."""
        return StoryGraphDef(source=self._filename, nodes=dict(self._ensure_loaded()))

    def _build(self, raw: dict[str, object]) -> Dict[str, StoryNodeDef]:
        nodes: Dict[str, StoryNodeDef] = {}
        for node_id, node_payload in raw.items():
            node_data = self._require_mapping(node_payload, f"story node '{node_id}'")
            lines = self._parse_lines(node_data.get("lines"), node_id)
            choices = self._parse_choices(node_data.get("choices"), node_id)
            nodes[node_id] = StoryNodeDef(id=node_id, lines=lines, choices=choices)
        return nodes

    def _parse_lines(self, raw_lines: object, node_id: str) -> List[StoryLineDef]:
        if not isinstance(raw_lines, list) or not raw_lines:
            raise DataValidationError(f"story node '{node_id}' lines must be a non-empty list.")
        lines: List[StoryLineDef] = []
        for index, entry in enumerate(raw_lines):
            line_ctx = f"story node '{node_id}' lines[{index}]"
            line_data = self._require_mapping(entry, line_ctx)
            lines.append(
                StoryLineDef(
                    text=self._require_str(line_data.get("text"), f"{line_ctx} text"),
                    character=self._require_optional_str(line_data.get("character"), f"{line_ctx} character"),
                )
            )
        return lines

    def _parse_choices(self, raw_choices: object, node_id: str) -> List[StoryChoiceDef]:
        if raw_choices is None:
            return []
        if not isinstance(raw_choices, list):
            raise DataValidationError(f"story node '{node_id}' choices must be a list if provided.")
        choices: List[StoryChoiceDef] = []
        for index, entry in enumerate(raw_choices):
            choice_ctx = f"story node '{node_id}' choices[{index}]"
            choice_data = self._require_mapping(entry, choice_ctx)
            next_target = self._require_optional_str(choice_data.get("next"), f"{choice_ctx} next")
            choices.append(
                StoryChoiceDef(
                    text=self._require_str(choice_data.get("text"), f"{choice_ctx} text"),
                    next_target=next_target or "",
                    affinity_req=self._require_int_map(choice_data.get("affinityReq"), f"{choice_ctx} affinityReq"),
                    skill_req=self._require_int_map(choice_data.get("skillReq"), f"{choice_ctx} skillReq"),
                    affinity_change=self._require_int_map(
                        choice_data.get("affinityChange"), f"{choice_ctx} affinityChange"
                    ),
                    skill_change=self._require_int_map(choice_data.get("skillChange"), f"{choice_ctx} skillChange"),
                )
            )
        return choices

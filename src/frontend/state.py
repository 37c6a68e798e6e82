"""State container for the select-mode session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from core.groups import GroupKind
from core.models import MatchResult, MatchValue


@dataclass
class SelectModeState:
    active: bool = False
    query: str = ""
    selected: Optional[MatchValue] = None
    matches: dict[GroupKind, list[MatchResult]] = field(default_factory=dict)

    def matches_for(self, kind: GroupKind) -> Sequence[MatchResult]:
        return self.matches.get(kind, [])

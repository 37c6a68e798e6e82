"""Ports (interfaces) used by the sidebar core.

Ports define the minimal contracts for the chat-state store and the
select-mode session so that the core can be reused with different backends.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

from core.models import MatchResult, MatchValue, UserInfo

if TYPE_CHECKING:
    from core.groups import GroupKind


class ChatSnapshotPort(Protocol):
    """Read-only chat state required for one render pass."""

    def channel_names(self) -> Sequence[str]:
        ...

    def channel_id_by_name(self, name: str) -> Optional[str]:
        ...

    def channel_id_by_username(self, username: str) -> Optional[str]:
        ...

    def has_unread(self, channel_id: str) -> bool:
        ...

    def mention_count(self, channel_id: str) -> int:
        ...

    def is_recent_channel(self, channel_id: str) -> bool:
        ...

    def is_current_channel(self, channel_id: str) -> bool:
        ...

    def draft_for(self, channel_id: str) -> Optional[str]:
        ...

    def sorted_users(self) -> Sequence[UserInfo]:
        ...


class SelectSessionPort(Protocol):
    """Select-mode session state read by the list assembler."""

    active: bool
    query: str
    selected: Optional[MatchValue]

    def matches_for(self, kind: "GroupKind") -> Sequence[MatchResult]:
        ...

"""Core domain models.

These dataclasses are shared across the core, adapters and frontend so none
of them depend on snapshot storage or terminal rendering types.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union


class UserStatus(Enum):
    """Presence of a user as reported by the chat-state store."""

    ONLINE = "online"
    AWAY = "away"
    DND = "dnd"
    OFFLINE = "offline"
    OTHER = "other"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "UserStatus":
        try:
            return cls(str(raw).lower())
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class ChannelInfo:
    """Snapshot record for an ordinary channel."""

    channel_id: str
    name: str


@dataclass(frozen=True)
class UserInfo:
    """Snapshot record for a user that can be messaged directly."""

    username: str
    nickname: Optional[str]
    status: UserStatus


@dataclass(frozen=True)
class Entry:
    """One sidebar row before decoration."""

    sigil: str
    label: str
    has_unread: bool
    mentions: int
    is_recent: bool
    is_current: bool
    user_status: Optional[UserStatus] = None


@dataclass(frozen=True)
class MatchResult:
    """A candidate split around the first occurrence of the select query."""

    prefix: str
    matched: str
    suffix: str
    full: str


@dataclass(frozen=True)
class MatchedEntry:
    entry: Entry
    match: MatchResult


@dataclass(frozen=True)
class ChannelMatch:
    name: str


@dataclass(frozen=True)
class UserMatch:
    name: str


# Identifies the highlighted select-mode match independent of its group.
MatchValue = Union[ChannelMatch, UserMatch]


@dataclass(frozen=True)
class Group:
    name: str
    entries: Sequence[Union[Entry, MatchedEntry]]


class Emphasis(Enum):
    """Row emphasis, listed in decreasing precedence."""

    CURRENT = "current"
    MENTIONS = "mentions"
    UNREAD = "unread"
    NONE = "none"


@dataclass(frozen=True)
class Decoration:
    """Renderer-independent visual attributes of an entry row."""

    emphasis: Emphasis
    recent: bool
    visible: bool
    mention_suffix: str


@dataclass(frozen=True)
class HeaderRow:
    name: str


@dataclass(frozen=True)
class EntryRow:
    """A decorated entry; ``match`` is only set in select mode."""

    entry: Entry
    decoration: Decoration
    match: Optional[MatchResult] = None


Row = Union[HeaderRow, EntryRow]

"""In-memory snapshot adapter.

Implements the core ChatSnapshotPort over plain dictionaries, loaded from a
JSON file. Mutations (switching channel) happen between render passes only.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Sequence, Union

from core.models import ChannelInfo, UserInfo, UserStatus

LOGGER = logging.getLogger(__name__)


class MemorySnapshot:
    """Dictionary-backed chat state that satisfies the ChatSnapshotPort contract."""

    def __init__(
        self,
        channels: Sequence[ChannelInfo],
        users: Sequence[UserInfo],
        dm_channels: Optional[dict[str, str]] = None,
        unread: Optional[set[str]] = None,
        mentions: Optional[dict[str, int]] = None,
        drafts: Optional[dict[str, str]] = None,
        current_channel: Optional[str] = None,
        recent_channel: Optional[str] = None,
        orphan_names: Sequence[str] = (),
    ) -> None:
        # Orphan names are listed without a backing channel record, the way
        # an inconsistent store would report them.
        self._channel_names = [channel.name for channel in channels] + list(orphan_names)
        self._channel_ids = {channel.name: channel.channel_id for channel in channels}
        self._users = sorted(users, key=lambda user: user.username.lower())
        self._dm_channels = dict(dm_channels or {})
        self._unread = set(unread or set())
        self._mentions = dict(mentions or {})
        self._drafts = dict(drafts or {})
        self.current_channel = current_channel
        self.recent_channel = recent_channel

    def channel_names(self) -> Sequence[str]:
        return list(self._channel_names)

    def channel_id_by_name(self, name: str) -> Optional[str]:
        return self._channel_ids.get(name)

    def channel_id_by_username(self, username: str) -> Optional[str]:
        return self._dm_channels.get(username)

    def has_unread(self, channel_id: str) -> bool:
        return channel_id in self._unread

    def mention_count(self, channel_id: str) -> int:
        return self._mentions.get(channel_id, 0)

    def is_recent_channel(self, channel_id: str) -> bool:
        return channel_id == self.recent_channel

    def is_current_channel(self, channel_id: str) -> bool:
        return channel_id == self.current_channel

    def draft_for(self, channel_id: str) -> Optional[str]:
        return self._drafts.get(channel_id)

    def sorted_users(self) -> Sequence[UserInfo]:
        return list(self._users)

    def switch_channel(self, channel_id: str) -> None:
        """Make ``channel_id`` current; the previous one becomes recent.

        Viewing a channel clears its unread flag and mention count.
        """

        if channel_id == self.current_channel:
            return
        self.recent_channel = self.current_channel
        self.current_channel = channel_id
        self._unread.discard(channel_id)
        self._mentions.pop(channel_id, None)
        LOGGER.info("Switched to channel %s", channel_id)

    def set_draft(self, channel_id: str, text: str) -> None:
        if text:
            self._drafts[channel_id] = text
        else:
            self._drafts.pop(channel_id, None)


def _require(record: dict[str, Any], key: str, kind: str) -> Any:
    if not isinstance(record, dict):
        raise ValueError(f"{kind} record must be an object: {record!r}")
    value = record.get(key)
    if value in (None, ""):
        raise ValueError(f"{kind} record is missing '{key}': {record!r}")
    return value


def snapshot_from_dict(data: dict[str, Any]) -> MemorySnapshot:
    """Build a snapshot from the parsed snapshot JSON structure."""

    if not isinstance(data, dict):
        raise ValueError("snapshot root must be an object")

    channels: list[ChannelInfo] = []
    orphan_names: list[str] = []
    dm_channels: dict[str, str] = {}
    unread: set[str] = set()
    mentions: dict[str, int] = {}
    drafts: dict[str, str] = {}

    def _collect_state(record: dict[str, Any], channel_id: str) -> None:
        if record.get("unread", False):
            unread.add(channel_id)
        try:
            count = max(0, int(record.get("mentions", 0) or 0))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"mentions must be a number: {record!r}") from exc
        if count:
            mentions[channel_id] = count
        draft = record.get("draft")
        if draft:
            drafts[channel_id] = str(draft)

    for record in data.get("channels", []):
        name = str(_require(record, "name", "channel"))
        channel_id = record.get("id")
        if channel_id is None:
            LOGGER.warning("Channel %s has no id in snapshot", name)
            orphan_names.append(name)
            continue
        channel_id = str(channel_id)
        channels.append(ChannelInfo(channel_id=channel_id, name=name))
        _collect_state(record, channel_id)

    users: list[UserInfo] = []
    for record in data.get("users", []):
        username = str(_require(record, "username", "user"))
        users.append(
            UserInfo(
                username=username,
                nickname=record.get("nickname") or None,
                status=UserStatus.parse(record.get("status")),
            )
        )
        channel_id = record.get("channel_id")
        if channel_id is not None:
            dm_channels[username] = str(channel_id)
            _collect_state(record, str(channel_id))

    return MemorySnapshot(
        channels=channels,
        users=users,
        dm_channels=dm_channels,
        unread=unread,
        mentions=mentions,
        drafts=drafts,
        current_channel=data.get("current_channel"),
        recent_channel=data.get("recent_channel"),
        orphan_names=orphan_names,
    )


def load_snapshot(path: Union[str, Path]) -> MemorySnapshot:
    """Load a snapshot JSON file."""

    with open(path, "r", encoding="utf-8") as handle:
        data = json.load(handle)
    return snapshot_from_dict(data)

"""Sidebar groups and their entry providers.

The sidebar is divided vertically into a fixed, ordered set of groups. Each
group knows how to list its entries from a snapshot, which labels it offers
to select mode, and how to tag one of its labels as a select-mode match.

Providers receive an optional height. When given, only enough entries to
fill the viewport around the current entry are returned (see
``window_entries``). Select mode passes no height, since every entry has to be
checked against the query before we know what is visible.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, List, Optional

from core.config import SidebarConfig
from core.entries import channel_entry, user_entry, user_label
from core.models import ChannelInfo, ChannelMatch, Entry, MatchValue, UserMatch
from core.ports import ChatSnapshotPort
from core.windowing import window_entries

LOGGER = logging.getLogger(__name__)

EntryFilter = Callable[[Entry], bool]


def include_all(_entry: Entry) -> bool:
    return True


def ordinary_channels(
    snapshot: ChatSnapshotPort,
    height: Optional[int],
    include: EntryFilter = include_all,
    config: SidebarConfig = SidebarConfig(),
) -> List[Entry]:
    """Entries for ordinary channels, in snapshot order."""

    entries: List[Entry] = []
    for name in snapshot.channel_names():
        channel_id = snapshot.channel_id_by_name(name)
        if channel_id is None:
            LOGGER.debug("Skipping channel %s: no backing channel record", name)
            continue
        entry = channel_entry(snapshot, ChannelInfo(channel_id=channel_id, name=name), config)
        if include(entry):
            entries.append(entry)
    return window_entries(entries, height)


def direct_message_users(
    snapshot: ChatSnapshotPort,
    height: Optional[int],
    include: EntryFilter = include_all,
    config: SidebarConfig = SidebarConfig(),
) -> List[Entry]:
    """Entries for direct-message users, in snapshot user order.

    Servers can have thousands of users, so windowing here keeps each render
    pass proportional to the viewport rather than the user count.
    """

    entries = [user_entry(snapshot, user, config) for user in snapshot.sorted_users()]
    return window_entries([entry for entry in entries if include(entry)], height)


class GroupKind(Enum):
    """The sidebar groups, in display order."""

    CHANNELS = "Channels"
    USERS = "Users"

    @property
    def title(self) -> str:
        return self.value

    def entries(
        self,
        snapshot: ChatSnapshotPort,
        height: Optional[int],
        include: EntryFilter = include_all,
        config: SidebarConfig = SidebarConfig(),
    ) -> List[Entry]:
        if self is GroupKind.CHANNELS:
            return ordinary_channels(snapshot, height, include, config)
        return direct_message_users(snapshot, height, include, config)

    def candidate_labels(
        self, snapshot: ChatSnapshotPort, config: SidebarConfig = SidebarConfig()
    ) -> List[str]:
        """Every label this group could show, unbounded."""

        if self is GroupKind.CHANNELS:
            return list(snapshot.channel_names())
        return [user_label(user, config) for user in snapshot.sorted_users()]

    def match_value(self, label: str) -> MatchValue:
        if self is GroupKind.CHANNELS:
            return ChannelMatch(label)
        return UserMatch(label)


GROUP_ORDER = (GroupKind.CHANNELS, GroupKind.USERS)


def resolve_channel_id(
    value: MatchValue,
    snapshot: ChatSnapshotPort,
    config: SidebarConfig = SidebarConfig(),
) -> Optional[str]:
    """Return the channel id a select-mode match refers to, if any."""

    if isinstance(value, ChannelMatch):
        return snapshot.channel_id_by_name(value.name)
    for user in snapshot.sorted_users():
        if user_label(user, config) == value.name:
            return snapshot.channel_id_by_username(user.username)
    return None

from __future__ import annotations

from adapters.memory_snapshot import MemorySnapshot
from core.config import SidebarConfig
from core.groups import (
    GROUP_ORDER,
    GroupKind,
    direct_message_users,
    ordinary_channels,
    resolve_channel_id,
)
from core.models import ChannelInfo, ChannelMatch, UserInfo, UserMatch, UserStatus


def _user(username: str, nickname: "str | None" = None) -> UserInfo:
    return UserInfo(username=username, nickname=nickname, status=UserStatus.ONLINE)


def test_group_order_is_fixed() -> None:
    assert [kind.title for kind in GROUP_ORDER] == ["Channels", "Users"]


def test_channels_with_missing_record_are_skipped() -> None:
    snapshot = MemorySnapshot(
        channels=[ChannelInfo("c1", "general"), ChannelInfo("c2", "dev")],
        users=[],
        orphan_names=["ghost"],
    )
    entries = ordinary_channels(snapshot, None)
    assert [entry.label for entry in entries] == ["general", "dev"]


def test_channel_provider_applies_predicate() -> None:
    snapshot = MemorySnapshot(
        channels=[ChannelInfo("c1", "general"), ChannelInfo("c2", "dev")],
        users=[],
    )
    entries = ordinary_channels(snapshot, None, lambda entry: entry.label == "dev")
    assert [entry.label for entry in entries] == ["dev"]


def test_users_are_windowed_around_current() -> None:
    users = [_user(f"user{index:05d}") for index in range(10_000)]
    snapshot = MemorySnapshot(
        channels=[],
        users=users,
        dm_channels={user.username: f"d{index}" for index, user in enumerate(users)},
        current_channel="d5000",
    )
    entries = direct_message_users(snapshot, 20)
    assert len(entries) == 40
    assert entries[0].label == "user04980"
    assert entries[-1].label == "user05019"
    assert [entry.label for entry in entries if entry.is_current] == ["user05000"]


def test_users_unbounded_without_height() -> None:
    users = [_user(f"user{index:03d}") for index in range(100)]
    snapshot = MemorySnapshot(channels=[], users=users)
    assert len(direct_message_users(snapshot, None)) == 100


def test_candidate_labels_use_display_names() -> None:
    snapshot = MemorySnapshot(
        channels=[ChannelInfo("c1", "general")],
        users=[_user("alice", "Al"), _user("bob")],
    )
    assert GroupKind.CHANNELS.candidate_labels(snapshot) == ["general"]
    assert GroupKind.USERS.candidate_labels(snapshot) == ["Al", "bob"]
    no_nicks = SidebarConfig(use_nickname=False)
    assert GroupKind.USERS.candidate_labels(snapshot, no_nicks) == ["alice", "bob"]


def test_match_values_are_tagged_by_group() -> None:
    assert GroupKind.CHANNELS.match_value("x") == ChannelMatch("x")
    assert GroupKind.USERS.match_value("x") == UserMatch("x")
    assert ChannelMatch("x") != UserMatch("x")


def test_resolve_channel_id() -> None:
    snapshot = MemorySnapshot(
        channels=[ChannelInfo("c1", "general")],
        users=[_user("alice", "Al"), _user("carol")],
        dm_channels={"alice": "d-alice"},
    )
    assert resolve_channel_id(ChannelMatch("general"), snapshot) == "c1"
    assert resolve_channel_id(UserMatch("Al"), snapshot) == "d-alice"
    assert resolve_channel_id(UserMatch("carol"), snapshot) is None
    assert resolve_channel_id(ChannelMatch("missing"), snapshot) is None

from __future__ import annotations

import json
from pathlib import Path

import pytest

from adapters.memory_snapshot import load_snapshot, snapshot_from_dict
from core.models import UserStatus

SAMPLE = Path(__file__).resolve().parents[1] / "sample_snapshot.json"


def _data() -> dict:
    return {
        "channels": [
            {"id": "c1", "name": "general", "unread": True, "mentions": 12},
            {"id": "c2", "name": "ops", "draft": "restart?"},
            {"name": "ghost"},
        ],
        "users": [
            {"username": "bob", "status": "offline", "channel_id": "d-bob"},
            {"username": "Alice", "nickname": "Al", "status": "ONLINE", "channel_id": "d-alice", "unread": True},
            {"username": "carol", "status": "busy"},
        ],
        "current_channel": "c1",
        "recent_channel": "d-alice",
    }


def test_snapshot_from_dict_exposes_state() -> None:
    snapshot = snapshot_from_dict(_data())
    assert snapshot.channel_names() == ["general", "ops", "ghost"]
    assert snapshot.channel_id_by_name("general") == "c1"
    assert snapshot.channel_id_by_name("ghost") is None
    assert snapshot.has_unread("c1")
    assert snapshot.mention_count("c1") == 12
    assert snapshot.draft_for("c2") == "restart?"
    assert snapshot.is_current_channel("c1")
    assert snapshot.is_recent_channel("d-alice")
    assert snapshot.has_unread("d-alice")
    assert snapshot.channel_id_by_username("carol") is None


def test_users_sorted_by_username_case_insensitively() -> None:
    snapshot = snapshot_from_dict(_data())
    users = snapshot.sorted_users()
    assert [user.username for user in users] == ["Alice", "bob", "carol"]
    assert users[0].status is UserStatus.ONLINE
    assert users[2].status is UserStatus.OTHER


def test_switch_channel_updates_recent_and_clears_unread() -> None:
    snapshot = snapshot_from_dict(_data())
    snapshot.switch_channel("d-alice")
    assert snapshot.is_current_channel("d-alice")
    assert snapshot.is_recent_channel("c1")
    assert not snapshot.has_unread("d-alice")


def test_set_draft_empty_removes_draft() -> None:
    snapshot = snapshot_from_dict(_data())
    snapshot.set_draft("c2", "")
    assert snapshot.draft_for("c2") is None


def test_rejects_non_object_root() -> None:
    with pytest.raises(ValueError):
        snapshot_from_dict([])  # type: ignore[arg-type]


def test_rejects_user_without_username() -> None:
    with pytest.raises(ValueError, match="username"):
        snapshot_from_dict({"users": [{"status": "online"}]})


def test_rejects_channel_record_that_is_not_an_object() -> None:
    with pytest.raises(ValueError, match="channel record must be an object: 'general'"):
        snapshot_from_dict({"channels": ["general"]})


def test_rejects_user_record_that_is_not_an_object() -> None:
    with pytest.raises(ValueError, match="user record must be an object"):
        snapshot_from_dict({"users": [["alice"]]})


def test_rejects_non_numeric_mentions() -> None:
    with pytest.raises(ValueError, match="mentions must be a number"):
        snapshot_from_dict({"channels": [{"id": "c1", "name": "general", "mentions": [1]}]})
    with pytest.raises(ValueError, match="mentions must be a number"):
        snapshot_from_dict(
            {"users": [{"username": "bob", "channel_id": "d1", "mentions": "lots"}]}
        )


def test_negative_mentions_are_clamped_to_zero() -> None:
    snapshot = snapshot_from_dict(
        {"channels": [{"id": "c1", "name": "general", "mentions": -4}]}
    )
    assert snapshot.mention_count("c1") == 0


def test_load_snapshot_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(_data()), encoding="utf-8")
    snapshot = load_snapshot(path)
    assert snapshot.channel_id_by_name("ops") == "c2"


def test_sample_snapshot_loads() -> None:
    snapshot = load_snapshot(SAMPLE)
    assert snapshot.current_channel == "c-general"
    assert "archived-announcements" in snapshot.channel_names()

"""Entry construction helpers (core domain)."""

from __future__ import annotations

from typing import Optional

from core.config import SidebarConfig
from core.models import ChannelInfo, Entry, UserInfo, UserStatus
from core.ports import ChatSnapshotPort

PRESENCE_SIGILS = {
    UserStatus.ONLINE: "+",
    UserStatus.AWAY: "-",
    UserStatus.DND: "×",
    UserStatus.OFFLINE: " ",
    UserStatus.OTHER: "?",
}


def has_draft(snapshot: ChatSnapshotPort, channel_id: Optional[str]) -> bool:
    """True when a non-empty message is being composed for the channel."""

    if channel_id is None:
        return False
    return bool(snapshot.draft_for(channel_id))


def user_sigil(status: UserStatus) -> str:
    return PRESENCE_SIGILS.get(status, PRESENCE_SIGILS[UserStatus.OTHER])


def user_label(user: UserInfo, config: SidebarConfig) -> str:
    if config.use_nickname and user.nickname:
        return user.nickname
    return user.username


def mention_suffix(mentions: int, cap: int = 9) -> str:
    """Return the display suffix for a mention count, clamped at ``cap``."""

    if mentions <= 0:
        return ""
    if mentions > cap:
        return f"({cap}+)"
    return f"({mentions})"


def channel_entry(
    snapshot: ChatSnapshotPort, channel: ChannelInfo, config: SidebarConfig
) -> Entry:
    """Build the entry for an ordinary channel."""

    cid = channel.channel_id
    sigil = config.draft_sigil if has_draft(snapshot, cid) else config.channel_sigil
    return Entry(
        sigil=sigil,
        label=channel.name,
        has_unread=snapshot.has_unread(cid),
        mentions=snapshot.mention_count(cid),
        is_recent=snapshot.is_recent_channel(cid),
        is_current=snapshot.is_current_channel(cid),
        user_status=None,
    )


def user_entry(snapshot: ChatSnapshotPort, user: UserInfo, config: SidebarConfig) -> Entry:
    """Build the entry for a direct-message user.

    Users without a DM channel yet are listed with neutral flags.
    """

    cid = snapshot.channel_id_by_username(user.username)
    # Draft marker replaces the presence sigil, keeping the column width.
    sigil = config.draft_sigil if has_draft(snapshot, cid) else user_sigil(user.status)
    return Entry(
        sigil=f"{sigil} ",
        label=user_label(user, config),
        has_unread=cid is not None and snapshot.has_unread(cid),
        mentions=snapshot.mention_count(cid) if cid is not None else 0,
        is_recent=cid is not None and snapshot.is_recent_channel(cid),
        is_current=cid is not None and snapshot.is_current_channel(cid),
        user_status=user.status,
    )

"""Decoration policy for sidebar entries."""

from __future__ import annotations

from core.config import SidebarConfig
from core.entries import mention_suffix
from core.models import Decoration, Emphasis, Entry


def emphasis_for(entry: Entry, selected: bool = False) -> Emphasis:
    """Pick the row emphasis; the first matching condition wins."""

    if entry.is_current or selected:
        return Emphasis.CURRENT
    if entry.mentions > 0:
        return Emphasis.MENTIONS
    if entry.has_unread:
        return Emphasis.UNREAD
    return Emphasis.NONE


def decorate(
    entry: Entry,
    *,
    selected: bool = False,
    select_mode: bool = False,
    show_mentions: bool = True,
    config: SidebarConfig = SidebarConfig(),
) -> Decoration:
    """Return the decoration for one entry.

    ``selected`` marks the highlighted select-mode match, which is drawn like
    the current entry. In ``select_mode`` only that match is kept on screen;
    the real current channel keeps its emphasis but not the viewport. The
    recency marker is independent of the emphasis.
    """

    emphasis = emphasis_for(entry, selected)
    return Decoration(
        emphasis=emphasis,
        recent=entry.is_recent,
        visible=selected if select_mode else emphasis is Emphasis.CURRENT,
        mention_suffix=mention_suffix(entry.mentions, config.mention_cap) if show_mentions else "",
    )

"""Sidebar list assembly.

Two display modes are handled here:

- Normal display of the groups, with markers for the current channel,
  unread channels, mentions, the recent channel and in-progress drafts.
- Select mode, where the user is typing into a prompt and each group only
  shows the entries matching the typed text, with the matching part
  highlighted.

Each call is a pure function of its inputs; nothing is cached between
render passes.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from core.config import SidebarConfig
from core.decoration import decorate
from core.groups import GROUP_ORDER, GroupKind
from core.models import Entry, EntryRow, Group, HeaderRow, MatchedEntry, MatchResult, Row
from core.ports import ChatSnapshotPort, SelectSessionPort

LOGGER = logging.getLogger(__name__)


def has_active_selection(session: Optional[SelectSessionPort]) -> bool:
    """True in select mode with some query text typed."""

    return session is not None and session.active and bool(session.query)


def _plain_group(
    kind: GroupKind,
    snapshot: ChatSnapshotPort,
    height: Optional[int],
    config: SidebarConfig,
) -> Group:
    return Group(name=kind.title, entries=kind.entries(snapshot, height, config=config))


def _matched_group(
    kind: GroupKind,
    snapshot: ChatSnapshotPort,
    session: SelectSessionPort,
    config: SidebarConfig,
) -> Group:
    lookup: Dict[str, MatchResult] = {match.full: match for match in session.matches_for(kind)}
    entries = kind.entries(snapshot, None, lambda entry: entry.label in lookup, config)
    return Group(
        name=kind.title,
        entries=[MatchedEntry(entry=entry, match=lookup[entry.label]) for entry in entries],
    )


def build_groups(
    snapshot: ChatSnapshotPort,
    session: Optional[SelectSessionPort],
    height: Optional[int],
    config: SidebarConfig = SidebarConfig(),
) -> List[Group]:
    """Return the sidebar groups in display order."""

    if has_active_selection(session):
        return [_matched_group(kind, snapshot, session, config) for kind in GROUP_ORDER]
    return [_plain_group(kind, snapshot, height, config) for kind in GROUP_ORDER]


def _entry_row(
    kind: GroupKind,
    item,
    session: Optional[SelectSessionPort],
    config: SidebarConfig,
) -> EntryRow:
    if isinstance(item, MatchedEntry):
        selected = session is not None and session.selected == kind.match_value(item.entry.label)
        return EntryRow(
            entry=item.entry,
            decoration=decorate(
                item.entry,
                selected=selected,
                select_mode=True,
                show_mentions=False,
                config=config,
            ),
            match=item.match,
        )
    entry: Entry = item
    return EntryRow(entry=entry, decoration=decorate(entry, config=config))


def assemble(
    snapshot: ChatSnapshotPort,
    session: Optional[SelectSessionPort],
    height: Optional[int],
    config: SidebarConfig = SidebarConfig(),
) -> List[Row]:
    """Flatten the groups into header and entry rows for the renderer."""

    rows: List[Row] = []
    for kind, group in zip(GROUP_ORDER, build_groups(snapshot, session, height, config)):
        rows.append(HeaderRow(name=group.name))
        rows.extend(_entry_row(kind, item, session, config) for item in group.entries)
    LOGGER.debug(
        "Assembled %s sidebar rows (select mode: %s)",
        len(rows),
        has_active_selection(session),
    )
    return rows

"""Select-mode session operations.

The user types into the sidebar prompt; every keystroke recomputes the
per-group match lists and keeps one match highlighted so that Enter can
switch to it.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from core.config import SidebarConfig
from core.groups import GROUP_ORDER, resolve_channel_id
from core.matching import compute_matches
from core.models import MatchValue
from core.ports import ChatSnapshotPort

from .state import SelectModeState

LOGGER = logging.getLogger(__name__)


def _reset(state: SelectModeState, active: bool) -> None:
    state.active = active
    state.query = ""
    state.selected = None
    state.matches = {}


def begin_select_mode(state: SelectModeState) -> None:
    _reset(state, active=True)


def cancel_select_mode(state: SelectModeState) -> None:
    _reset(state, active=False)


def all_match_values(state: SelectModeState) -> List[MatchValue]:
    """Every current match, in display order."""

    return [
        kind.match_value(match.full)
        for kind in GROUP_ORDER
        for match in state.matches_for(kind)
    ]


def update_query(
    state: SelectModeState,
    snapshot: ChatSnapshotPort,
    query: str,
    config: SidebarConfig = SidebarConfig(),
) -> None:
    """Store the query, recompute matches and keep the selection valid."""

    state.query = query
    if not query:
        state.matches = {}
        state.selected = None
        return

    state.matches = {
        kind: compute_matches(query, kind.candidate_labels(snapshot, config))
        for kind in GROUP_ORDER
    }
    values = all_match_values(state)
    if state.selected not in values:
        state.selected = values[0] if values else None
    LOGGER.debug("Select query %r matched %s entries", query, len(values))


def _step(state: SelectModeState, offset: int) -> None:
    values = all_match_values(state)
    if not values:
        state.selected = None
        return
    if state.selected not in values:
        state.selected = values[0]
        return
    index = values.index(state.selected)
    state.selected = values[(index + offset) % len(values)]


def select_next(state: SelectModeState) -> None:
    _step(state, 1)


def select_previous(state: SelectModeState) -> None:
    _step(state, -1)


def confirm_selection(
    state: SelectModeState,
    snapshot: ChatSnapshotPort,
    config: SidebarConfig = SidebarConfig(),
) -> Optional[str]:
    """Leave select mode and return the channel id of the selected match."""

    selected = state.selected if state.selected in all_match_values(state) else None
    cancel_select_mode(state)
    if selected is None:
        return None
    channel_id = resolve_channel_id(selected, snapshot, config)
    if channel_id is None:
        LOGGER.info("No channel to switch to for %s", selected)
    return channel_id

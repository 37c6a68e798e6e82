"""Scrollable channel list sidebar widget."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from rich.text import Text
from textual import events
from textual.containers import VerticalScroll
from textual.geometry import Size
from textual.widgets import Static

from adapters.row_formatting import format_rows
from core.assembler import assemble
from core.config import SidebarConfig
from core.models import EntryRow, Row
from core.ports import ChatSnapshotPort, SelectSessionPort


def visible_row_index(rows: list[Row]) -> Optional[int]:
    """Index of the first row the viewport has to keep on screen."""

    for index, row in enumerate(rows):
        if isinstance(row, EntryRow) and row.decoration.visible:
            return index
    return None


class ChannelListPanel(VerticalScroll):
    """Sidebar viewport; every refresh reassembles the rows from scratch."""

    def __init__(
        self,
        snapshot: ChatSnapshotPort,
        session: SelectSessionPort,
        config: SidebarConfig,
        theme: Optional[Mapping[str, str]] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.snapshot = snapshot
        self.session = session
        self.sidebar_config = config
        self.row_theme = theme
        self.rows: list[Row] = []
        self._viewport_size: Optional[Size] = None

    def compose(self):
        yield Static("", id="channel-list-rows")

    def on_mount(self) -> None:
        self.refresh_rows()

    def on_resize(self, event: events.Resize) -> None:
        # Content updates also resize the virtual area; only a new viewport
        # size needs the rows rebuilt and recentred.
        if event.size == self._viewport_size:
            return
        self._viewport_size = event.size
        self.refresh_rows()

    def refresh_rows(self) -> None:
        height = self.size.height or None
        width = self.scrollable_content_region.width or None
        self.rows = assemble(self.snapshot, self.session, height, self.sidebar_config)
        lines = format_rows(self.rows, "rich", width, self.row_theme, self.sidebar_config)
        self.query_one("#channel-list-rows", Static).update(Text("\n").join(lines))
        self.call_after_refresh(self.scroll_to_current)

    def scroll_to_current(self) -> None:
        index = visible_row_index(self.rows)
        if index is None:
            return
        self.scroll_to(y=max(index - self.size.height // 2, 0), animate=False)

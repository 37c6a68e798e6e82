"""Main Textual app hosting the channel list sidebar."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Footer, Input, Static

from adapters.memory_snapshot import MemorySnapshot, load_snapshot
from core.config import SidebarConfig

from .constants import ACCENT_BLUE, SAMPLE_SNAPSHOT_PATH
from .select_mode import (
    begin_select_mode,
    cancel_select_mode,
    confirm_selection,
    select_next,
    select_previous,
    update_query,
)
from .sidebar import ChannelListPanel
from .state import SelectModeState

LOGGER = logging.getLogger(__name__)


class ChannelListApp(App):
    """Sidebar with select mode and a status pane for the current channel."""

    BINDINGS = [
        ("ctrl+g", "enter_select", "Select channel"),
        Binding("escape", "cancel", "Cancel", priority=True),
        ("up", "select_previous", "Previous match"),
        ("down", "select_next", "Next match"),
        ("pageup", "page_up", "Page up"),
        ("pagedown", "page_down", "Page down"),
        ("ctrl+home", "scroll_top", "Top"),
        ("ctrl+end", "scroll_bottom", "Bottom"),
        ("ctrl+q", "quit", "Quit"),
    ]

    CSS = """
    Screen {
        background: #0f1a21;
        color: #e8eef5;
    }

    #channel-list {
        width: 32;
        border-right: solid #2a3a46;
        overflow-x: hidden;
    }

    #main {
        width: 1fr;
        padding: 1 2;
    }

    #title {
        text-style: bold;
        height: 2;
    }

    #current-channel {
        height: 1fr;
        color: #c6d2dd;
    }

    #prompt {
        height: auto;
    }

    #select-input {
        display: none;
    }

    #select-input.visible {
        display: block;
    }

    #status {
        height: 1;
        color: #c6d2dd;
    }

    #status.status-error {
        color: #ff5f87;
    }
    """

    def __init__(
        self,
        snapshot_path: Union[str, Path, None] = None,
        config: Optional[SidebarConfig] = None,
        theme: Optional[Mapping[str, str]] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.sidebar_config = config or SidebarConfig()
        self.theme_styles = theme
        self.select_state = SelectModeState()
        self.load_error: Optional[str] = None
        self.snapshot = self._load_snapshot(Path(snapshot_path or SAMPLE_SNAPSHOT_PATH))

    def _load_snapshot(self, path: Path) -> MemorySnapshot:
        try:
            return load_snapshot(path)
        except FileNotFoundError:
            self.load_error = f"{path.name} missing"
        except json.JSONDecodeError as exc:
            self.load_error = f"{path.name} error: {exc.msg}"
        except ValueError as exc:
            self.load_error = str(exc)
        LOGGER.error("Snapshot not loaded: %s", self.load_error)
        return MemorySnapshot(channels=[], users=[])

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield ChannelListPanel(
                self.snapshot,
                self.select_state,
                self.sidebar_config,
                self.theme_styles,
                id="channel-list",
            )
            with Vertical(id="main"):
                yield Static(self._title_text(), id="title")
                yield Static("", id="current-channel")
                with Container(id="prompt"):
                    yield Input(placeholder="Switch to channel", id="select-input")
                yield Static("", id="status")
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_main()

    @property
    def panel(self) -> ChannelListPanel:
        return self.query_one("#channel-list", ChannelListPanel)

    def action_enter_select(self) -> None:
        begin_select_mode(self.select_state)
        select_input = self.query_one("#select-input", Input)
        select_input.value = ""
        select_input.add_class("visible")
        select_input.focus()
        self.panel.refresh_rows()

    def action_cancel(self) -> None:
        if self.select_state.active:
            cancel_select_mode(self.select_state)
            self._hide_prompt()
        self.panel.refresh_rows()

    def action_select_next(self) -> None:
        if self.select_state.active:
            select_next(self.select_state)
            self.panel.refresh_rows()
        else:
            self.panel.scroll_down(animate=False)

    def action_select_previous(self) -> None:
        if self.select_state.active:
            select_previous(self.select_state)
            self.panel.refresh_rows()
        else:
            self.panel.scroll_up(animate=False)

    def action_page_up(self) -> None:
        self.panel.scroll_page_up(animate=False)

    def action_page_down(self) -> None:
        self.panel.scroll_page_down(animate=False)

    def action_scroll_top(self) -> None:
        self.panel.scroll_home(animate=False)

    def action_scroll_bottom(self) -> None:
        self.panel.scroll_end(animate=False)

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "select-input" or not self.select_state.active:
            return
        update_query(self.select_state, self.snapshot, event.value, self.sidebar_config)
        self.panel.refresh_rows()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id != "select-input":
            return
        channel_id = confirm_selection(self.select_state, self.snapshot, self.sidebar_config)
        if channel_id is not None:
            self.snapshot.switch_channel(channel_id)
        self._hide_prompt()
        self.panel.refresh_rows()
        self._refresh_main()

    def _hide_prompt(self) -> None:
        select_input = self.query_one("#select-input", Input)
        select_input.value = ""
        select_input.remove_class("visible")
        self.panel.focus()

    def _refresh_main(self) -> None:
        current = self.query_one("#current-channel", Static)
        status = self.query_one("#status", Static)
        current.update(f"current channel: {self.snapshot.current_channel or '-'}")
        status.remove_class("status-error")
        if self.load_error:
            status.update(f"snapshot: {self.load_error}")
            status.add_class("status-error")
        else:
            status.update("snapshot: loaded")

    @staticmethod
    def _title_text() -> Text:
        return Text.assemble(
            ("CHAN", ACCENT_BLUE),
            ("LIST > Sidebar", "bold"),
        )

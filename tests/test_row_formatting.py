from __future__ import annotations

import pytest
from rich.text import Text

from adapters.row_formatting import DEFAULT_THEME, format_row, format_rows, username_style
from core.decoration import decorate
from core.matching import match
from core.models import Entry, EntryRow, HeaderRow, UserStatus


def _row(**overrides) -> EntryRow:
    values = dict(
        sigil="~",
        label="general",
        has_unread=False,
        mentions=0,
        is_recent=False,
        is_current=False,
        user_status=None,
    )
    values.update(overrides)
    entry = Entry(**values)
    return EntryRow(entry=entry, decoration=decorate(entry))


def test_header_is_centered_in_border() -> None:
    line = format_row(HeaderRow("Users"), mode="plain", width=15)
    assert line == "──── Users ────"
    assert len(line) == 15


def test_plain_row_with_mentions_and_recent_marker() -> None:
    row = _row(mentions=12, is_recent=True)
    assert format_row(row, mode="plain") == "~general(9+)<"


def test_plain_row_pads_to_width() -> None:
    line = format_row(_row(mentions=2), mode="plain", width=14)
    assert line == "~general   (2)"


def test_rich_and_plain_agree_on_text() -> None:
    rows = [HeaderRow("Channels"), _row(mentions=3, is_recent=True), _row(label="dev")]
    rich_lines = format_rows(rows, mode="rich", width=20)
    plain_lines = format_rows(rows, mode="plain", width=20)
    assert [line.plain for line in rich_lines] == plain_lines


def test_current_row_is_fully_emphasized() -> None:
    text = format_row(_row(is_current=True))
    assert isinstance(text, Text)
    styles = [str(span.style) for span in text.spans]
    assert DEFAULT_THEME["current_channel"] in styles


def test_select_row_highlights_match() -> None:
    entry = Entry("~", "release", False, 0, False, False)
    row = EntryRow(entry=entry, decoration=decorate(entry), match=match("lea", "release"))
    text = format_row(row)
    assert text.plain == "~release"
    highlighted = [
        text.plain[span.start:span.end]
        for span in text.spans
        if str(span.style) == DEFAULT_THEME["channel_select_match"]
    ]
    assert highlighted == ["lea"]


def test_offline_user_is_dimmed() -> None:
    text = format_row(_row(sigil="  ", label="bob", user_status=UserStatus.OFFLINE))
    assert any(str(span.style) == DEFAULT_THEME["offline_user"] for span in text.spans)


def test_username_style_is_stable() -> None:
    assert username_style("alice") == username_style("alice")


def test_unknown_mode_rejected() -> None:
    with pytest.raises(ValueError, match="Unsupported row format"):
        format_row(HeaderRow("Channels"), mode="html")

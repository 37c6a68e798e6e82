"""Shared sidebar row formatting helpers.

Keeping formatting here prevents drift between the Textual sidebar and the
one-shot CLI renderer, whatever the output mode.
"""

from __future__ import annotations

import hashlib
from typing import Iterable, Mapping, Optional, Union

from rich.text import Text

from core.config import SidebarConfig
from core.models import Emphasis, EntryRow, HeaderRow, Row, UserStatus

BORDER = "─"

DEFAULT_THEME: dict[str, str] = {
    "channel_list_header": "bold #2AABEE",
    "current_channel": "bold reverse",
    "mentions_channel": "bold #ff5f87",
    "unread_channel": "bold #ffffff",
    "recent_marker": "#ffaf00",
    "channel_select_match": "bold underline #2AABEE",
    "offline_user": "dim",
}

USERNAME_COLORS = (
    "#5fafff",
    "#87d787",
    "#d7af5f",
    "#d787d7",
    "#5fd7d7",
    "#ff8787",
    "#afafff",
    "#d7d75f",
)

_EMPHASIS_ATTRS = {
    Emphasis.CURRENT: "current_channel",
    Emphasis.MENTIONS: "mentions_channel",
    Emphasis.UNREAD: "unread_channel",
}


def username_style(username: str) -> str:
    """Return a stable colour for a username."""

    digest = hashlib.md5(username.encode("utf-8")).digest()
    return USERNAME_COLORS[digest[0] % len(USERNAME_COLORS)]


def _theme_style(theme: Mapping[str, str], attr: str) -> str:
    return theme.get(attr) or DEFAULT_THEME[attr]


def _header_fill(name: str, width: Optional[int]) -> tuple[str, str, str]:
    label = f" {name} "
    total = width if width is not None else len(label) + 4
    fill = max(total - len(label), 0)
    left = fill // 2
    return BORDER * left, label, BORDER * (fill - left)


def _padding(used: int, trailing: int, width: Optional[int]) -> str:
    # Right-aligns the mention suffix and recency marker, like a padded cell.
    if width is None:
        return ""
    return " " * max(width - used - trailing, 0)


def _format_plain(row: Row, width: Optional[int], config: SidebarConfig) -> str:
    """Create the plain text line used by ``render --plain``."""

    if isinstance(row, HeaderRow):
        return "".join(_header_fill(row.name, width))

    entry = row.entry
    body = f"{entry.sigil}{entry.label}"
    trailing = row.decoration.mention_suffix
    if row.decoration.recent:
        trailing += config.recent_marker
    return f"{body}{_padding(len(body), len(trailing), width)}{trailing}"


def _label_style(row: EntryRow, theme: Mapping[str, str]) -> Optional[str]:
    status = row.entry.user_status
    if status is None:
        return None
    if status is UserStatus.OFFLINE:
        return _theme_style(theme, "offline_user")
    return username_style(row.entry.label)


def _format_rich(
    row: Row,
    width: Optional[int],
    theme: Mapping[str, str],
    config: SidebarConfig,
) -> Text:
    """Create the styled line drawn by the sidebar widget."""

    if isinstance(row, HeaderRow):
        left, label, right = _header_fill(row.name, width)
        return Text.assemble(left, (label, _theme_style(theme, "channel_list_header")), right)

    entry = row.entry
    decoration = row.decoration
    text = Text()
    text.append(entry.sigil)
    if row.match is None:
        text.append(entry.label, style=_label_style(row, theme))
    else:
        text.append(row.match.prefix)
        text.append(row.match.matched, style=_theme_style(theme, "channel_select_match"))
        text.append(row.match.suffix)

    trailing = Text(decoration.mention_suffix)
    if decoration.recent:
        trailing.append(config.recent_marker, style=_theme_style(theme, "recent_marker"))
    text.append(_padding(len(text), len(trailing), width))
    text.append_text(trailing)

    attr = _EMPHASIS_ATTRS.get(decoration.emphasis)
    if attr is None:
        return text
    if row.match is None:
        # Emphasis overrides every inner style in normal display.
        text.stylize(_theme_style(theme, attr))
    else:
        # In select mode the match highlight must stay readable.
        text.style = _theme_style(theme, attr)
    return text


def format_row(
    row: Row,
    mode: str = "rich",
    width: Optional[int] = None,
    theme: Optional[Mapping[str, str]] = None,
    config: SidebarConfig = SidebarConfig(),
) -> Union[Text, str]:
    """Return the row formatted for the requested mode."""

    if mode == "rich":
        return _format_rich(row, width, theme or DEFAULT_THEME, config)
    if mode == "plain":
        return _format_plain(row, width, config)
    raise ValueError(f"Unsupported row format: {mode}")


def format_rows(
    rows: Iterable[Row],
    mode: str = "rich",
    width: Optional[int] = None,
    theme: Optional[Mapping[str, str]] = None,
    config: SidebarConfig = SidebarConfig(),
) -> list[Union[Text, str]]:
    return [format_row(row, mode, width, theme, config) for row in rows]

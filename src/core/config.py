"""Core configuration dataclasses.

We keep config parsing outside the core, but these dataclasses define the
shape the core expects so the app layer can build them safely.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class SidebarConfig:
    """Display settings consumed by the entry model and decoration policy."""

    use_nickname: bool = True
    channel_sigil: str = "~"
    draft_sigil: str = "»"
    recent_marker: str = "<"
    mention_cap: int = 9

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "SidebarConfig":
        """Build a config from the ``sidebar`` section of config.json."""

        defaults = cls()
        return cls(
            use_nickname=bool(raw.get("use_nickname", defaults.use_nickname)),
            channel_sigil=str(raw.get("channel_sigil", defaults.channel_sigil)),
            draft_sigil=str(raw.get("draft_sigil", defaults.draft_sigil)),
            recent_marker=str(raw.get("recent_marker", defaults.recent_marker)),
            mention_cap=int(raw.get("mention_cap", defaults.mention_cap)),
        )

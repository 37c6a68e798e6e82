"""Bounded window selection around the current entry."""

from __future__ import annotations

from typing import List, Optional, Sequence

from core.models import Entry


def window_entries(entries: Sequence[Entry], height: Optional[int]) -> List[Entry]:
    """Return at most ``2 * height`` contiguous entries around the current one.

    The sidebar only needs enough rows to fill the viewport, but the viewport
    positions itself relative to the current entry, so ``height`` rows are
    kept on each side of it. With no height every entry is returned; with no
    current entry the last ``height`` entries are kept.
    """

    if height is None:
        return list(entries)
    if height <= 0:
        return []

    split = next(
        (index for index, entry in enumerate(entries) if entry.is_current),
        len(entries),
    )
    before = entries[max(0, split - height):split]
    after = entries[split:split + height]
    return list(before) + list(after)

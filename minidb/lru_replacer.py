"""Least-recently-used choice of which buffer frame to evict."""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Optional


class LRUReplacer:
    """Tracks unpinned frames and evicts the one unpinned longest ago."""

    def __init__(self, num_pages: int) -> None:
        self.max_size = num_pages
        # Oldest entry first, most recently unpinned last.
        self._frames: OrderedDict[int, None] = OrderedDict()
        self._latch = threading.Lock()

    def victim(self) -> Optional[int]:
        """Remove and return the least recently unpinned frame, or None."""
        with self._latch:
            if not self._frames:
                return None
            frame_id, _ = self._frames.popitem(last=False)
            return frame_id

    def pin(self, frame_id: int) -> None:
        """Stop frame_id from being chosen as a victim."""
        with self._latch:
            self._frames.pop(frame_id, None)

    def unpin(self, frame_id: int) -> None:
        """Make frame_id available as a victim.

        A frame already tracked keeps its place; a full replacer ignores
        the request.
        """
        with self._latch:
            if frame_id in self._frames or len(self._frames) >= self.max_size:
                return
            self._frames[frame_id] = None

    def __len__(self) -> int:
        return len(self._frames)

    def __contains__(self, frame_id: object) -> bool:
        return frame_id in self._frames
"""
Per-item load state for progressive image reveal.

Every rendered gallery item owns one tracker. Trackers are kept in a registry
keyed by position and URL so sibling items never share state.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterator, Sequence

from ..manifest.parser import ImageRecord

logger = logging.getLogger(__name__)


class ItemLoadState(str, Enum):
    PENDING = 'pending'
    LOADED = 'loaded'
    ERRORED = 'errored'


class ItemLoadTracker:
    """Readiness of a single visual asset: pending, then loaded or errored."""

    def __init__(self, index: int, record: ImageRecord):
        self.index = index
        self.record = record
        self._state = ItemLoadState.PENDING
        self._revealed = False

    @property
    def state(self) -> ItemLoadState:
        return self._state

    @property
    def key(self) -> tuple[int, str]:
        return self.index, self.record.url

    @property
    def is_settled(self) -> bool:
        return self._state is not ItemLoadState.PENDING

    @property
    def show_placeholder(self) -> bool:
        return self._state is ItemLoadState.PENDING

    @property
    def show_error(self) -> bool:
        return self._state is ItemLoadState.ERRORED

    @property
    def show_content(self) -> bool:
        return self._state is ItemLoadState.LOADED

    def mark_loaded(self) -> bool:
        """
        Record a successful load.

        Returns:
            True if this call moved the tracker out of ``pending``
        """
        return self._settle(ItemLoadState.LOADED)

    def mark_errored(self) -> bool:
        """
        Record a failed load. The asset is not retried.

        Returns:
            True if this call moved the tracker out of ``pending``
        """
        return self._settle(ItemLoadState.ERRORED)

    def consume_reveal(self) -> bool:
        """Return True exactly once, the first time it is asked after loading."""
        if self._state is not ItemLoadState.LOADED or self._revealed:
            return False
        self._revealed = True
        return True

    def _settle(self, state: ItemLoadState) -> bool:
        if self.is_settled:
            logger.debug("Ignoring %s signal for item %d, already %s", state.value, self.index, self._state.value)
            return False
        self._state = state
        return True


class ItemLoadRegistry:
    """Arena of trackers for an immutable, settled image sequence."""

    def __init__(self, records: Sequence[ImageRecord]):
        self._trackers = [ItemLoadTracker(index, record) for index, record in enumerate(records)]

    def __len__(self) -> int:
        return len(self._trackers)

    def __iter__(self) -> Iterator[ItemLoadTracker]:
        return iter(self._trackers)

    def __getitem__(self, index: int) -> ItemLoadTracker:
        return self._trackers[index]

    def get(self, key: tuple[int, str]) -> ItemLoadTracker | None:
        index, url = key
        if not 0 <= index < len(self._trackers):
            return None
        tracker = self._trackers[index]
        return tracker if tracker.record.url == url else None

    def count(self, state: ItemLoadState) -> int:
        return sum(1 for tracker in self._trackers if tracker.state is state)

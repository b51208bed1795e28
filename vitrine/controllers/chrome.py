"""Window chrome synchronisation and scroll-derived toggles."""
from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)


class ChromeSync:
    """Apply window title and description once per distinct value."""

    def __init__(self, apply: Callable[[str, str], None]) -> None:
        self._apply = apply
        self._current: tuple[str, str] | None = None

    def sync(self, title: str, description: str) -> bool:
        identity = (title, description)
        if identity == self._current:
            return False
        self._apply(title, description)
        self._current = identity
        logger.debug("Window chrome set to %r", title)
        return True


class ScrollThresholdToggle:
    """Visibility flag derived from a scroll offset crossing a threshold."""

    def __init__(self, threshold: float) -> None:
        self.threshold = threshold
        self.visible = False

    def update(self, offset: float) -> bool:
        """Feed a new offset; return True when visibility flipped."""
        visible = offset > self.threshold
        if visible == self.visible:
            return False
        self.visible = visible
        return True

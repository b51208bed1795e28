"""Fault boundary around gallery rendering."""
from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)


class RenderBoundary:
    """Catch unexpected faults raised while rendering the gallery.

    A fault abandons the render pass and latches ``has_error`` until
    ``reset`` is called by a full reload.
    """

    def __init__(self, on_error: Callable[[Exception], None] | None = None) -> None:
        self._on_error = on_error
        self.has_error = False
        self.error: Exception | None = None

    def run(self, render: Callable[[], None]) -> bool:
        """Run ``render`` and return True if it completed without a fault."""
        if self.has_error:
            return False
        try:
            render()
        except Exception as exc:
            logger.exception("Uncaught error while rendering the gallery")
            self.has_error = True
            self.error = exc
            if self._on_error:
                self._on_error(exc)
            return False
        return True

    def reset(self) -> None:
        self.has_error = False
        self.error = None

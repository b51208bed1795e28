"""Scoped keyboard handler registration.

The window forwards every key press to a single dispatcher. Components bind a
handler for as long as they are active and unbind it when they go away, so a
closed lightbox can never react to keys meant for a later one.
"""
from __future__ import annotations

import itertools
import logging
from typing import Callable

logger = logging.getLogger(__name__)

KeyHandler = Callable[[str], bool]

ESCAPE = 'Escape'
ARROW_LEFT = 'ArrowLeft'
ARROW_RIGHT = 'ArrowRight'
ENTER = 'Enter'
SPACE = ' '


class KeyDispatcher:
    """Route key names to the currently bound handlers, newest first."""

    def __init__(self) -> None:
        self._handlers: dict[int, KeyHandler] = {}
        self._tokens = itertools.count(1)

    @property
    def handler_count(self) -> int:
        return len(self._handlers)

    def bind(self, handler: KeyHandler) -> int:
        token = next(self._tokens)
        self._handlers[token] = handler
        return token

    def unbind(self, token: int) -> None:
        if self._handlers.pop(token, None) is None:
            logger.debug("Key handler %d was not bound", token)

    def dispatch(self, key: str) -> bool:
        """Offer ``key`` to bound handlers until one of them handles it."""
        for token in sorted(self._handlers, reverse=True):
            handler = self._handlers.get(token)
            if handler is not None and handler(key):
                return True
        return False

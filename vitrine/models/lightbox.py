"""
Lightbox session model.

This module holds the navigable full-screen viewing session: the current
index with circular navigation, keyboard and pointer dispatch, and the load
state of the image being shown.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional, Sequence

from ..manifest.parser import ImageRecord
from .keyboard import ARROW_LEFT, ARROW_RIGHT, ENTER, ESCAPE, SPACE, KeyDispatcher

logger = logging.getLogger(__name__)


class ClickTarget(str, Enum):
    """Pointer targets inside the lightbox overlay."""

    BACKDROP = 'backdrop'
    CLOSE_BUTTON = 'close'
    PREV = 'prev'
    NEXT = 'next'
    IMAGE = 'image'
    CAPTION = 'caption'


class LightboxController:
    """Navigation session over the full image sequence.

    A controller starts closed. ``open`` seeds it with the sequence and a start
    index; ``close`` ends it for good. Mutators called while closed do nothing.
    """

    def __init__(self, keyboard: Optional[KeyDispatcher] = None,
                 on_closed: Optional[Callable[[], None]] = None):
        """
        Initialize a closed lightbox.

        Args:
            keyboard: Dispatcher to bind key handling to while the session is open
            on_closed: Callback invoked once when the session closes
        """
        self._keyboard = keyboard
        self._on_closed = on_closed
        self._on_index_changed: Optional[Callable[[int], None]] = None
        self._images: tuple[ImageRecord, ...] = ()
        self._current_index = 0
        self._image_loaded = False
        self._image_failed = False
        self._key_token: Optional[int] = None
        self._is_open = False

    # Lifecycle
    def open(self, images: Sequence[ImageRecord], start_index: int) -> None:
        """
        Begin the session at ``start_index``.

        Raises:
            ValueError: If the session is already open, the sequence is empty
                or the index is out of range
        """
        if self._is_open:
            raise ValueError("Lightbox session is already open")
        if not images:
            raise ValueError("Cannot open the lightbox without images")
        if not 0 <= start_index < len(images):
            raise ValueError(f"Start index {start_index} out of range for {len(images)} images")

        self._images = tuple(images)
        self._current_index = start_index
        self._reset_asset_state()
        self._is_open = True
        if self._keyboard is not None:
            self._key_token = self._keyboard.bind(self.handle_key)
        logger.debug("Lightbox opened at %d of %d", start_index, len(self._images))

    def close(self) -> None:
        """End the session and release the keyboard binding."""
        if not self._is_open:
            return
        self._is_open = False
        if self._keyboard is not None and self._key_token is not None:
            self._keyboard.unbind(self._key_token)
        self._key_token = None
        logger.debug("Lightbox closed")
        if self._on_closed:
            self._on_closed()

    # Navigation
    def next(self) -> None:
        if not self._is_open:
            return
        self._move_to((self._current_index + 1) % len(self._images))

    def prev(self) -> None:
        if not self._is_open:
            return
        count = len(self._images)
        self._move_to((self._current_index - 1 + count) % count)

    def _move_to(self, index: int) -> None:
        self._current_index = index
        self._reset_asset_state()
        if self._on_index_changed:
            self._on_index_changed(index)

    def _reset_asset_state(self) -> None:
        self._image_loaded = False
        self._image_failed = False

    # Asset signals
    def on_asset_ready(self, index: Optional[int] = None) -> bool:
        """
        Mark the current image as loaded.

        Args:
            index: Index the signal belongs to; stale signals are ignored

        Returns:
            True if the reveal transition should run for this signal
        """
        if not self._accepts_signal(index) or self._image_loaded or self._image_failed:
            return False
        self._image_loaded = True
        return True

    def on_asset_failed(self, index: Optional[int] = None) -> bool:
        """Mark the current image as failed; navigation keeps working."""
        if not self._accepts_signal(index) or self._image_loaded:
            return False
        self._image_failed = True
        logger.debug("Lightbox image %d failed to load", self._current_index)
        return True

    def _accepts_signal(self, index: Optional[int]) -> bool:
        if not self._is_open:
            return False
        return index is None or index == self._current_index

    # Input
    def handle_key(self, key: str) -> bool:
        """
        Handle a key press while open.

        Args:
            key: DOM-style key name

        Returns:
            True if the key was handled, False otherwise
        """
        if not self._is_open:
            return False
        if key == ESCAPE:
            self.close()
            return True
        elif key == ARROW_RIGHT:
            self.next()
            return True
        elif key == ARROW_LEFT:
            self.prev()
            return True
        elif key in (ENTER, SPACE):
            # Swallowed so the grid item under the overlay is not re-activated
            return True
        return False

    def handle_click(self, target: ClickTarget) -> None:
        """Apply a pointer click; clicks on the image or caption never reach the backdrop."""
        if not self._is_open:
            return
        if target in (ClickTarget.BACKDROP, ClickTarget.CLOSE_BUTTON):
            self.close()
        elif target is ClickTarget.NEXT:
            self.next()
        elif target is ClickTarget.PREV:
            self.prev()

    def set_index_changed_callback(self, callback: Callable[[int], None]) -> None:
        """Set callback for when the current index changes."""
        self._on_index_changed = callback

    # Derived state
    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def images(self) -> tuple[ImageRecord, ...]:
        return self._images

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_image(self) -> Optional[ImageRecord]:
        if not self._is_open:
            return None
        return self._images[self._current_index]

    @property
    def image_loaded(self) -> bool:
        return self._image_loaded

    @property
    def image_failed(self) -> bool:
        return self._image_failed

    @property
    def show_spinner(self) -> bool:
        return self._is_open and not self._image_loaded and not self._image_failed

    @property
    def caption(self) -> Optional[str]:
        """Description of the current image, only once it has loaded."""
        image = self.current_image
        if image is None or not self._image_loaded:
            return None
        return image.description

    @property
    def position_label(self) -> str:
        return f"{self._current_index + 1} / {len(self._images)}"

    @property
    def hint_label(self) -> str:
        return f"{self.position_label} • ESC TO CLOSE"

"""
Gallery controller for the Vitrine viewer.

This module is the composition root of the gallery: it owns the settled image
sequence, the per-item load trackers and the lifecycle of the lightbox.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from ..manifest.loader import ManifestLoader
from ..manifest.parser import ImageRecord
from ..models.gallery_state import FallbackReason, GalleryState
from ..models.item_load import ItemLoadRegistry, ItemLoadTracker
from ..models.keyboard import KeyDispatcher
from ..models.lightbox import LightboxController
from ..utils.tasks import BackgroundRunner

logger = logging.getLogger(__name__)

DEMO_SUMMARY = "Viewing demo gallery."


class GalleryController:
    """Coordinates manifest loading, gallery items and the lightbox."""

    def __init__(self, loader: ManifestLoader, keyboard: Optional[KeyDispatcher] = None):
        """
        Initialize the gallery controller.

        Args:
            loader: Loader used for the single manifest load
            keyboard: Dispatcher shared with the window for key handling
        """
        self.loader = loader
        self.keyboard = keyboard or KeyDispatcher()

        self._state = GalleryState.initial()
        self._registry: Optional[ItemLoadRegistry] = None
        self._lightbox: Optional[LightboxController] = None
        self._mounted = False
        self._unmounted = False

        # Event callbacks
        self._on_state_changed: Optional[Callable[[GalleryState], None]] = None
        self._on_lightbox_changed: Optional[Callable[[Optional[LightboxController]], None]] = None

    def _begin_mount(self) -> bool:
        if self._mounted:
            logger.debug("Gallery already mounted, ignoring")
            return False
        self._mounted = True
        return True

    async def mount(self) -> None:
        """Run the manifest load once and publish the settled state."""
        if not self._begin_mount():
            return
        self.settle(await self.loader.load())

    def mount_in_background(self, runner: BackgroundRunner) -> None:
        """Start the single manifest load on ``runner``; the result is settled on dispatch."""
        if not self._begin_mount():
            return
        runner.submit(self.loader.load, self.settle, self._on_load_failed)

    def _on_load_failed(self, error: Exception) -> None:
        """Settle on the demo images when the load itself raised."""
        self.settle(GalleryState.fallback(self.loader.fallback, FallbackReason.UNAVAILABLE))

    def settle(self, state: GalleryState) -> None:
        """Publish the settled state unless the gallery was torn down meanwhile."""
        if self._unmounted:
            logger.debug("Gallery unmounted before the manifest settled, discarding result")
            return
        if state.loading or not self._state.loading:
            raise ValueError("Gallery state can only settle once")
        self._publish(state)

    def unmount(self) -> None:
        """Tear the gallery down; a load still in flight is discarded."""
        self._unmounted = True
        self.close_lightbox()

    def _publish(self, state: GalleryState) -> None:
        self._registry = ItemLoadRegistry(state.images)
        self._state = state
        if self._on_state_changed:
            self._on_state_changed(state)

    @property
    def state(self) -> GalleryState:
        return self._state

    @property
    def images(self) -> Tuple[ImageRecord, ...]:
        return self._state.images

    @property
    def registry(self) -> Optional[ItemLoadRegistry]:
        return self._registry

    def items(self) -> List[Tuple[int, ImageRecord, ItemLoadTracker]]:
        """Return (index, record, tracker) for every item; empty until settled."""
        if self._state.loading or self._registry is None:
            return []
        return [(tracker.index, tracker.record, tracker) for tracker in self._registry]

    @property
    def summary(self) -> Optional[str]:
        if self._state.loading:
            return None
        if self._state.using_fallback:
            return DEMO_SUMMARY
        return f"Loaded {self._state.count} photographs from external source."

    # Lightbox lifecycle
    @property
    def lightbox(self) -> Optional[LightboxController]:
        return self._lightbox

    def open_lightbox(self, index: int) -> LightboxController:
        """
        Open a lightbox session on the gallery's own image sequence.

        Args:
            index: Index of the activated gallery item

        Returns:
            The open lightbox controller
        """
        if self._state.loading:
            raise ValueError("Cannot open the lightbox before the gallery has loaded")
        if self._lightbox is not None:
            self._lightbox.close()

        lightbox = LightboxController(keyboard=self.keyboard, on_closed=self._on_lightbox_closed)
        lightbox.open(self._state.images, index)
        self._lightbox = lightbox
        if self._on_lightbox_changed:
            self._on_lightbox_changed(lightbox)
        return lightbox

    def close_lightbox(self) -> None:
        if self._lightbox is not None:
            self._lightbox.close()

    def _on_lightbox_closed(self) -> None:
        self._lightbox = None
        if self._on_lightbox_changed:
            self._on_lightbox_changed(None)

    def set_state_changed_callback(self, callback: Callable[[GalleryState], None]) -> None:
        """Set callback for when the gallery state settles."""
        self._on_state_changed = callback

    def set_lightbox_changed_callback(self, callback: Callable[[Optional[LightboxController]], None]) -> None:
        """Set callback for when a lightbox session opens or closes."""
        self._on_lightbox_changed = callback

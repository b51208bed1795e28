"""
Lazy-loading gallery item widget.

This module contains the button shown for each image in the grid. It fetches
its image on demand and renders the placeholder, error or revealed picture
according to its load tracker.
"""

from typing import Callable, Optional

import gi
gi.require_version('Gtk', '4.0')
from gi.repository import Gdk, GLib, Gtk, Pango

from ..models.item_load import ItemLoadTracker
from ..utils.assets import AssetFetcher, DecodedImage
from ..utils.constants import ERROR_HEIGHT, PLACEHOLDER_HEIGHT, REVEAL_DURATION, THUMBNAIL_WIDTH


class GalleryItemButton(Gtk.Button):
    """A button that lazy-loads one gallery image and reveals it once."""

    def __init__(self, tracker: ItemLoadTracker, fetcher: AssetFetcher,
                 on_activated: Optional[Callable[[int], None]] = None):
        """
        Initialize the gallery item.

        Args:
            tracker: Load tracker owned by this item
            fetcher: Fetcher used to download the image
            on_activated: Callback with the item index when clicked or activated with Enter
        """
        super().__init__()

        self.tracker = tracker
        self._fetcher = fetcher
        self._on_activated = on_activated
        self._requested = False

        self.add_css_class("gallery-item")
        self.set_tooltip_text(tracker.record.alt_text(tracker.index))
        self.set_child(self._create_content())
        self.refresh()

        self.connect('clicked', self._on_button_clicked)

    @property
    def index(self) -> int:
        return self.tracker.index

    def _create_content(self) -> Gtk.Overlay:
        """Create the stack of load affordances and the hover caption."""
        self._stack = Gtk.Stack()
        self._stack.set_transition_type(Gtk.StackTransitionType.NONE)

        placeholder = Gtk.Box()
        placeholder.set_size_request(THUMBNAIL_WIDTH, PLACEHOLDER_HEIGHT)
        placeholder.add_css_class("item-placeholder")
        spinner = Gtk.Spinner(spinning=True, halign=Gtk.Align.CENTER, valign=Gtk.Align.CENTER, hexpand=True)
        placeholder.append(spinner)
        self._stack.add_named(placeholder, "placeholder")

        error_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=8, valign=Gtk.Align.CENTER)
        error_box.set_size_request(THUMBNAIL_WIDTH, ERROR_HEIGHT)
        error_box.add_css_class("item-error")
        error_box.append(Gtk.Image.new_from_icon_name("image-missing-symbolic"))
        error_box.append(Gtk.Label(label="Failed to load"))
        self._stack.add_named(error_box, "error")

        self._picture = Gtk.Picture()
        self._picture.set_can_shrink(True)
        self._picture.set_alternative_text(self.tracker.record.alt_text(self.tracker.index))
        self._revealer = Gtk.Revealer()
        self._revealer.set_transition_type(Gtk.RevealerTransitionType.CROSSFADE)
        self._revealer.set_transition_duration(REVEAL_DURATION)
        self._revealer.set_child(self._picture)
        self._stack.add_named(self._revealer, "content")

        overlay = Gtk.Overlay()
        overlay.set_child(self._stack)

        description = self.tracker.record.description
        caption = Gtk.Label(label=description or "VIEW PHOTOGRAPH", xalign=0)
        caption.set_ellipsize(Pango.EllipsizeMode.END)
        caption.set_valign(Gtk.Align.END)
        caption.set_hexpand(True)
        caption.add_css_class("item-caption")
        overlay.add_overlay(caption)
        return overlay

    def _on_button_clicked(self, button: Gtk.Button) -> None:
        """Handle click and Enter activation."""
        if self._on_activated:
            self._on_activated(self.index)

    def load(self) -> None:
        """Request the image if it has not been requested yet."""
        if self._requested or self.tracker.is_settled:
            return
        self._requested = True
        self._fetcher.fetch(
            self.tracker.record.url,
            self._on_image_ready,
            self._on_image_failed,
            max_dimension=THUMBNAIL_WIDTH * 2,
        )

    def _on_image_ready(self, image: DecodedImage) -> None:
        if self.tracker.mark_loaded():
            texture = Gdk.Texture.new_from_bytes(GLib.Bytes.new(image.data))
            self._picture.set_paintable(texture)
        self.refresh()

    def _on_image_failed(self, error: Exception) -> None:
        self.tracker.mark_errored()
        self.refresh()

    def refresh(self) -> None:
        """Sync the visible affordance with the tracker state."""
        if self.tracker.show_error:
            self._stack.set_visible_child_name("error")
        elif self.tracker.show_content:
            self._stack.set_visible_child_name("content")
            if self.tracker.consume_reveal():
                self._revealer.set_reveal_child(True)
        else:
            self._stack.set_visible_child_name("placeholder")

    @property
    def is_requested(self) -> bool:
        """Check if the image has been requested."""
        return self._requested

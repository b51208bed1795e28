"""
Lightbox view component.

This module contains the full-screen overlay that renders an open
LightboxController: the image with a reveal transition, navigation controls,
the gated caption and the position hint.
"""

from typing import Optional

import gi
gi.require_version('Gtk', '4.0')
from gi.repository import Gdk, GLib, Gtk

from ..models.lightbox import ClickTarget, LightboxController
from ..utils.assets import AssetFetcher, DecodedImage
from ..utils.constants import LIGHTBOX_MAX_DIMENSION, LIGHTBOX_REVEAL_DURATION


class LightboxView:
    """Full-screen overlay bound to one lightbox session."""

    def __init__(self, controller: LightboxController, fetcher: AssetFetcher):
        """
        Initialize the lightbox view.

        Args:
            controller: The open lightbox session to render
            fetcher: Fetcher used to download full-size images
        """
        self.controller = controller
        self._fetcher = fetcher
        self.widget = self._create_overlay()

        controller.set_index_changed_callback(self._on_index_changed)
        self._display_current()

    def _create_overlay(self) -> Gtk.Overlay:
        """Create the backdrop, image and controls."""
        overlay = Gtk.Overlay()
        overlay.set_hexpand(True)
        overlay.set_vexpand(True)
        overlay.set_focusable(True)

        backdrop = Gtk.Box(orientation=Gtk.Orientation.VERTICAL)
        backdrop.add_css_class("lightbox-backdrop")
        backdrop.set_hexpand(True)
        backdrop.set_vexpand(True)
        self._connect_click(backdrop, ClickTarget.BACKDROP)
        overlay.set_child(backdrop)

        # Image with reveal transition
        self._picture = Gtk.Picture()
        self._picture.set_can_shrink(True)
        self._picture.set_content_fit(Gtk.ContentFit.CONTAIN)
        self._connect_click(self._picture, ClickTarget.IMAGE)

        self._revealer = Gtk.Revealer()
        self._revealer.set_transition_type(Gtk.RevealerTransitionType.CROSSFADE)
        self._revealer.set_transition_duration(LIGHTBOX_REVEAL_DURATION)
        self._revealer.set_child(self._picture)
        self._revealer.set_halign(Gtk.Align.CENTER)
        self._revealer.set_valign(Gtk.Align.CENTER)
        self._revealer.set_margin_top(80)
        self._revealer.set_margin_bottom(80)
        self._revealer.set_margin_start(80)
        self._revealer.set_margin_end(80)
        overlay.add_overlay(self._revealer)

        # Loading indicator
        self._spinner = Gtk.Spinner(halign=Gtk.Align.CENTER, valign=Gtk.Align.CENTER)
        self._spinner.set_can_target(False)
        overlay.add_overlay(self._spinner)

        # Failure affordance
        self._error_label = Gtk.Label(label="Failed to load", halign=Gtk.Align.CENTER, valign=Gtk.Align.CENTER)
        self._error_label.add_css_class("lightbox-error")
        self._error_label.set_can_target(False)
        overlay.add_overlay(self._error_label)

        # Controls
        close_button = self._create_control("window-close-symbolic", "Close lightbox", ClickTarget.CLOSE_BUTTON)
        close_button.set_halign(Gtk.Align.END)
        close_button.set_valign(Gtk.Align.START)
        overlay.add_overlay(close_button)

        prev_button = self._create_control("go-previous-symbolic", "Previous image", ClickTarget.PREV)
        prev_button.set_halign(Gtk.Align.START)
        prev_button.set_valign(Gtk.Align.CENTER)
        overlay.add_overlay(prev_button)

        next_button = self._create_control("go-next-symbolic", "Next image", ClickTarget.NEXT)
        next_button.set_halign(Gtk.Align.END)
        next_button.set_valign(Gtk.Align.CENTER)
        overlay.add_overlay(next_button)

        # Caption and position hint
        self._caption = Gtk.Label(wrap=True, justify=Gtk.Justification.CENTER)
        self._caption.add_css_class("lightbox-caption")
        self._caption.set_halign(Gtk.Align.CENTER)
        self._caption.set_valign(Gtk.Align.END)
        self._caption.set_margin_bottom(40)
        self._connect_click(self._caption, ClickTarget.CAPTION)
        overlay.add_overlay(self._caption)

        self._hint = Gtk.Label()
        self._hint.add_css_class("lightbox-hint")
        self._hint.set_halign(Gtk.Align.CENTER)
        self._hint.set_valign(Gtk.Align.END)
        self._hint.set_margin_bottom(16)
        self._hint.set_can_target(False)
        overlay.add_overlay(self._hint)

        return overlay

    def _create_control(self, icon_name: str, tooltip: str, target: ClickTarget) -> Gtk.Button:
        button = Gtk.Button()
        button.set_child(Gtk.Image.new_from_icon_name(icon_name))
        button.set_tooltip_text(tooltip)
        button.add_css_class("flat")
        button.add_css_class("lightbox-control")
        button.set_margin_top(24)
        button.set_margin_start(24)
        button.set_margin_end(24)
        button.connect('clicked', lambda _button: self.controller.handle_click(target))
        return button

    def _connect_click(self, widget: Gtk.Widget, target: ClickTarget) -> None:
        """Route a click on ``widget`` to the controller without letting it bubble further."""
        gesture = Gtk.GestureClick()

        def on_released(gesture: Gtk.GestureClick, n_press: int, x: float, y: float) -> None:
            gesture.set_state(Gtk.EventSequenceState.CLAIMED)
            self.controller.handle_click(target)

        gesture.connect('released', on_released)
        widget.add_controller(gesture)

    def _on_index_changed(self, index: int) -> None:
        """Handle index change events from the controller."""
        self._display_current()

    def _display_current(self) -> None:
        """Reset the view for the current index and request its image."""
        image = self.controller.current_image
        if image is None:
            return

        index = self.controller.current_index
        self._revealer.set_transition_duration(0)
        self._revealer.set_reveal_child(False)
        self._revealer.set_transition_duration(LIGHTBOX_REVEAL_DURATION)
        self._picture.set_paintable(None)
        self._picture.set_alternative_text(image.description or "Full screen view")
        self.refresh()

        self._fetcher.fetch(
            image.url,
            lambda decoded: self._on_image_ready(index, decoded),
            lambda error: self._on_image_failed(index, error),
            max_dimension=LIGHTBOX_MAX_DIMENSION,
        )

    def _on_image_ready(self, index: int, image: DecodedImage) -> None:
        if not self.controller.on_asset_ready(index):
            return
        texture = Gdk.Texture.new_from_bytes(GLib.Bytes.new(image.data))
        self._picture.set_paintable(texture)
        self._revealer.set_reveal_child(True)
        self.refresh()

    def _on_image_failed(self, index: int, error: Exception) -> None:
        if self.controller.on_asset_failed(index):
            self.refresh()

    def refresh(self) -> None:
        """Sync spinner, caption and hint with the controller state."""
        self._spinner.set_visible(self.controller.show_spinner)
        self._spinner.set_spinning(self.controller.show_spinner)
        self._error_label.set_visible(self.controller.image_failed)

        caption = self.controller.caption
        self._caption.set_visible(caption is not None)
        self._caption.set_label(caption or "")

        self._hint.set_label(self.controller.hint_label.upper())

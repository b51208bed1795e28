"""
Main window for the Vitrine viewer.

This module contains the application window: header, hero text, the gallery
region with its loading and failure states, the footer summary, the
back-to-top button and the lightbox overlay.
"""

import logging
from typing import Callable, Optional

import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Adw', '1')
from gi.repository import Adw, Gdk, GLib, Gtk

from ..controllers.chrome import ChromeSync, ScrollThresholdToggle
from ..controllers.gallery_controller import GalleryController
from ..controllers.render_boundary import RenderBoundary
from ..manifest.loader import ManifestLoader
from ..models.gallery_state import GalleryState
from ..models.keyboard import ARROW_LEFT, ARROW_RIGHT, ENTER, ESCAPE, SPACE, KeyDispatcher
from ..models.lightbox import LightboxController
from ..utils.assets import AssetFetcher
from ..utils.constants import APPLICATION_ICON, SCROLL_TOP_THRESHOLD, SITE_CONFIG
from ..utils.styling import load_application_css
from ..utils.tasks import BackgroundRunner
from .gallery_grid import GalleryGridView
from .lightbox import LightboxView

logger = logging.getLogger(__name__)

KEY_NAMES = {
    Gdk.KEY_Escape: ESCAPE,
    Gdk.KEY_Left: ARROW_LEFT,
    Gdk.KEY_Right: ARROW_RIGHT,
    Gdk.KEY_Return: ENTER,
    Gdk.KEY_KP_Enter: ENTER,
    Gdk.KEY_space: SPACE,
}


def _idle_dispatch(func: Callable, *args) -> None:
    GLib.idle_add(func, *args)


class MainWindow(Adw.ApplicationWindow):
    """Main window for the Vitrine viewer."""

    def __init__(self, application: Adw.Application, loader: ManifestLoader,
                 on_reload: Optional[Callable[[], None]] = None, **kwargs):
        """
        Initialize the main window.

        Args:
            application: The application instance
            loader: Loader for the gallery manifest
            on_reload: Callback performing a full reload after a render fault
        """
        super().__init__(application=application, **kwargs)
        self.add_css_class("vitrine")
        self.set_default_size(1280, 900)

        # Load CSS styling
        load_application_css()

        self._on_reload = on_reload
        self.keyboard = KeyDispatcher()
        self.controller = GalleryController(loader, keyboard=self.keyboard)
        self.fetcher = AssetFetcher(dispatch=_idle_dispatch)
        self.boundary = RenderBoundary(on_error=self._on_render_error)
        self.back_to_top = ScrollThresholdToggle(SCROLL_TOP_THRESHOLD)
        self.chrome = ChromeSync(self._apply_chrome)
        self.lightbox_view: Optional[LightboxView] = None

        self.grid = GalleryGridView(self.fetcher, on_item_activated=self._on_item_activated)

        # Set up UI
        self._create_header_bar()
        self._create_main_layout()
        self._setup_event_handlers()

        self.chrome.sync(SITE_CONFIG.meta_title, SITE_CONFIG.meta_description)

        self.controller.set_state_changed_callback(self._on_state_changed)
        self.controller.set_lightbox_changed_callback(self._on_lightbox_changed)
        self.controller.mount_in_background(BackgroundRunner(dispatch=_idle_dispatch))

    def _create_header_bar(self) -> None:
        """Create and configure the header bar."""
        self.header_bar = Adw.HeaderBar()
        self.window_title = Adw.WindowTitle(
            title=f"{SITE_CONFIG.title.split(' ')[0]} {SITE_CONFIG.subtitle}",
            subtitle="",
        )
        self.header_bar.set_title_widget(self.window_title)

        icon_button = Gtk.Button()
        icon_button.set_child(Gtk.Image.new_from_icon_name(APPLICATION_ICON))
        icon_button.add_css_class("flat")
        icon_button.set_tooltip_text("Back to top")
        icon_button.connect("clicked", lambda _: self.scroll_to_top())
        self.header_bar.pack_start(icon_button)

        for name, href in SITE_CONFIG.links:
            link = Gtk.LinkButton(uri=href, label=name)
            link.connect("activate-link", self._on_link_activated)
            self.header_bar.pack_end(link)

    def _create_main_layout(self) -> None:
        """Create the main window layout."""
        main_vbox = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=0)
        main_vbox.append(self.header_bar)

        self.overlay = Gtk.Overlay()
        self.overlay.set_vexpand(True)
        main_vbox.append(self.overlay)
        self.set_content(main_vbox)

        self.scroller = Gtk.ScrolledWindow()
        self.scroller.set_policy(Gtk.PolicyType.NEVER, Gtk.PolicyType.AUTOMATIC)
        self.overlay.set_child(self.scroller)

        page = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=0)
        self.scroller.set_child(page)

        clamp = Adw.Clamp(maximum_size=1280)
        content = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=48)
        content.set_margin_top(64)
        content.set_margin_bottom(48)
        content.set_margin_start(24)
        content.set_margin_end(24)
        clamp.set_child(content)
        page.append(clamp)

        content.append(self._create_hero())

        # Gallery region: loading, grid or render failure
        self.gallery_stack = Gtk.Stack()
        self.gallery_stack.set_transition_type(Gtk.StackTransitionType.CROSSFADE)
        loading = Gtk.Spinner(spinning=True, halign=Gtk.Align.CENTER)
        loading.set_size_request(40, 40)
        loading.set_margin_top(160)
        loading.set_margin_bottom(160)
        self.gallery_stack.add_named(loading, "loading")
        self.gallery_stack.add_named(self.grid.widget, "grid")
        self.gallery_stack.add_named(self._create_error_page(), "error")
        content.append(self.gallery_stack)

        page.append(self._create_footer())

        # Back-to-top button
        self.back_to_top_revealer = Gtk.Revealer()
        self.back_to_top_revealer.set_transition_type(Gtk.RevealerTransitionType.SLIDE_UP)
        self.back_to_top_revealer.set_halign(Gtk.Align.END)
        self.back_to_top_revealer.set_valign(Gtk.Align.END)
        self.back_to_top_revealer.set_margin_end(32)
        self.back_to_top_revealer.set_margin_bottom(32)
        top_button = Gtk.Button.new_from_icon_name("go-up-symbolic")
        top_button.add_css_class("back-to-top")
        top_button.set_tooltip_text("Scroll to top")
        top_button.connect("clicked", lambda _: self.scroll_to_top())
        self.back_to_top_revealer.set_child(top_button)
        self.overlay.add_overlay(self.back_to_top_revealer)

    def _create_hero(self) -> Gtk.Box:
        hero = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=24)
        hero.set_halign(Gtk.Align.START)

        badge = Gtk.Label(label="OPEN FOR SUBMISSIONS", halign=Gtk.Align.START)
        badge.add_css_class("hero-badge")
        hero.append(badge)

        title = Gtk.Label(label="Capturing moments\nsuspended in time.", xalign=0)
        title.add_css_class("hero-title")
        hero.append(title)

        description = Gtk.Label(label=SITE_CONFIG.description, xalign=0, wrap=True, max_width_chars=60)
        description.add_css_class("hero-description")
        hero.append(description)
        return hero

    def _create_error_page(self) -> Gtk.Box:
        """Create the generic failure affordance shown after a render fault."""
        box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=8)
        box.add_css_class("render-error")
        box.set_halign(Gtk.Align.CENTER)
        box.set_margin_top(120)

        icon = Gtk.Image.new_from_icon_name("dialog-error-symbolic")
        icon.set_pixel_size(48)
        icon.add_css_class("error-icon")
        box.append(icon)

        heading = Gtk.Label(label="Something went wrong.")
        heading.add_css_class("title-2")
        box.append(heading)

        refresh = Gtk.Button.new_with_label("Refresh Application")
        refresh.add_css_class("pill")
        refresh.set_margin_top(24)
        refresh.connect("clicked", self._on_refresh_clicked)
        box.append(refresh)
        return box

    def _create_footer(self) -> Gtk.Box:
        footer = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=16)
        footer.add_css_class("gallery-footer")
        footer.set_margin_top(80)

        footer.append(Gtk.Image.new_from_icon_name(APPLICATION_ICON))

        self.summary_label = Gtk.Label(label="")
        self.summary_label.add_css_class("summary")
        footer.append(self.summary_label)

        copyright_label = Gtk.Label(label=SITE_CONFIG.footer_text.upper())
        copyright_label.add_css_class("copyright")
        footer.append(copyright_label)
        return footer

    def _setup_event_handlers(self) -> None:
        """Set up global event handlers."""
        # Capture phase: the focused grid item would otherwise consume arrows and Enter
        key_controller = Gtk.EventControllerKey()
        key_controller.set_propagation_phase(Gtk.PropagationPhase.CAPTURE)
        key_controller.connect('key-pressed', self._on_key_press_event)
        self.add_controller(key_controller)

        vadjustment = self.scroller.get_vadjustment()
        vadjustment.connect('value-changed', self._on_scroll_changed)
        self.grid.attach_scroll(vadjustment)

        self.connect('close-request', self._on_close_request)

    # Rendering
    def _apply_chrome(self, title: str, description: str) -> None:
        self.set_title(title)
        self.set_icon_name(APPLICATION_ICON)
        self.window_title.set_tooltip_text(description)

    def _on_state_changed(self, state: GalleryState) -> None:
        """Render the settled gallery state."""
        self.summary_label.set_text(self.controller.summary or "")
        if self.boundary.run(self._render_gallery):
            self.gallery_stack.set_visible_child_name("grid")

    def _render_gallery(self) -> None:
        self.grid.populate(self.controller.items())

    def _on_render_error(self, error: Exception) -> None:
        self.grid.clear()
        self.gallery_stack.set_visible_child_name("error")

    def _on_lightbox_changed(self, lightbox: Optional[LightboxController]) -> None:
        """Show or discard the lightbox overlay."""
        if self.lightbox_view is not None:
            self.overlay.remove_overlay(self.lightbox_view.widget)
            self.lightbox_view = None

        if lightbox is not None:
            self.lightbox_view = LightboxView(lightbox, self.fetcher)
            self.overlay.add_overlay(self.lightbox_view.widget)
            self.lightbox_view.widget.grab_focus()

    def scroll_to_top(self) -> None:
        self.scroller.get_vadjustment().set_value(0)

    # Event handlers
    def _on_key_press_event(self, controller: Gtk.EventControllerKey, keyval: int,
                            keycode: int, state: Gdk.ModifierType) -> bool:
        """Handle keyboard events."""
        key = KEY_NAMES.get(keyval)
        if key is None:
            return False
        return self.keyboard.dispatch(key)

    def _on_item_activated(self, index: int) -> None:
        """Handle gallery item activation."""
        self.controller.open_lightbox(index)

    def _on_scroll_changed(self, adjustment: Gtk.Adjustment) -> None:
        if self.back_to_top.update(adjustment.get_value()):
            self.back_to_top_revealer.set_reveal_child(self.back_to_top.visible)

    def _on_link_activated(self, button: Gtk.LinkButton) -> bool:
        """Handle in-page anchors; other links open normally."""
        uri = button.get_uri()
        if not uri.startswith("#"):
            return False
        if uri == "#works":
            self.scroller.get_vadjustment().set_value(self.gallery_stack.get_allocation().y)
        else:
            adjustment = self.scroller.get_vadjustment()
            adjustment.set_value(adjustment.get_upper())
        return True

    def _on_refresh_clicked(self, button: Gtk.Button) -> None:
        """Handle refresh after a render fault."""
        logger.info("Reloading after render failure")
        self.boundary.reset()
        if self._on_reload:
            self._on_reload()

    def _on_close_request(self, window: Gtk.Window) -> bool:
        self.controller.unmount()
        self.fetcher.close()
        return False

"""
CSS styling utilities for the Vitrine viewer.

The gallery is drawn light-on-black, so the Adwaita dark scheme is forced
before the application stylesheet is layered on top of it.
"""

import logging
from pathlib import Path

import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Adw', '1')
from gi.repository import Adw, Gdk, Gtk

logger = logging.getLogger(__name__)

CSS_PATH = Path(__file__).parent.parent / "resources" / "style.css"


def load_application_css() -> bool:
    """
    Apply the dark color scheme and load the gallery stylesheet.

    Returns:
        True if the stylesheet was installed
    """
    Adw.StyleManager.get_default().set_color_scheme(Adw.ColorScheme.FORCE_DARK)

    if not CSS_PATH.exists():
        logger.warning("CSS file not found at %s", CSS_PATH)
        return False

    css_provider = Gtk.CssProvider()
    css_provider.load_from_path(str(CSS_PATH))

    Gtk.StyleContext.add_provider_for_display(
        Gdk.Display.get_default(),
        css_provider,
        Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION
    )
    return True

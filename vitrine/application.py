"""
Main application class for the Vitrine viewer.

This module contains the application class that manages the overall
application lifecycle and window creation.
"""

import logging
from typing import Callable, Optional

import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Adw', '1')
from gi.repository import Adw

from .manifest.loader import ManifestLoader
from .utils.constants import APPLICATION_ID
from .views.main_window import MainWindow

logger = logging.getLogger(__name__)


class GalleryApplication(Adw.Application):
    """Main application class for the Vitrine viewer."""

    def __init__(self, loader_factory: Callable[[], ManifestLoader]):
        """
        Initialize the application.

        Args:
            loader_factory: Builds a fresh manifest loader for each window
        """
        super().__init__(application_id=APPLICATION_ID)
        self.loader_factory = loader_factory
        self.main_window: Optional[MainWindow] = None

        self.connect('activate', self._on_activate)

    def _on_activate(self, app: Adw.Application) -> None:
        """Handle application activation by creating the main window."""
        if not self.main_window:
            self.main_window = self._create_window()

        self.main_window.present()

    def _create_window(self) -> MainWindow:
        return MainWindow(application=self, loader=self.loader_factory(), on_reload=self.reload)

    def reload(self) -> None:
        """Replace the main window with a fresh one, loading the manifest again."""
        old_window = self.main_window
        self.main_window = self._create_window()
        self.main_window.present()
        if old_window is not None:
            old_window.close()

    def run_app(self) -> int:
        """Run the application and return exit code."""
        return self.run(None)

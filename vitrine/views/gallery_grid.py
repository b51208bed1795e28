"""
Gallery grid view component.

This module contains the responsive grid of gallery items and loads the
images of items that are visible or about to become visible.
"""

from typing import Callable, List, Optional, Sequence, Tuple

import gi
gi.require_version('Gtk', '4.0')
from gi.repository import GLib, Gtk

from ..manifest.parser import ImageRecord
from ..models.item_load import ItemLoadTracker
from ..utils.assets import AssetFetcher
from ..utils.constants import GRID_MAX_COLUMNS, GRID_SPACING, LAZY_LOAD_BUFFER
from ..widgets.gallery_item import GalleryItemButton


class GalleryGridView:
    """Grid of lazily loaded gallery items."""

    def __init__(self, fetcher: AssetFetcher, on_item_activated: Optional[Callable[[int], None]] = None):
        """
        Initialize the grid view.

        Args:
            fetcher: Fetcher shared by all items
            on_item_activated: Callback with the index of an activated item
        """
        self._fetcher = fetcher
        self._on_item_activated = on_item_activated
        self._items: List[GalleryItemButton] = []
        self._vadjustment: Optional[Gtk.Adjustment] = None

        self.widget = self._create_grid()

    def _create_grid(self) -> Gtk.FlowBox:
        """Create the flow box holding the items."""
        flowbox = Gtk.FlowBox()
        flowbox.set_selection_mode(Gtk.SelectionMode.NONE)
        flowbox.set_homogeneous(False)
        flowbox.set_min_children_per_line(1)
        flowbox.set_max_children_per_line(GRID_MAX_COLUMNS)
        flowbox.set_column_spacing(GRID_SPACING)
        flowbox.set_row_spacing(GRID_SPACING)
        flowbox.set_valign(Gtk.Align.START)
        return flowbox

    def populate(self, items: Sequence[Tuple[int, ImageRecord, ItemLoadTracker]]) -> None:
        """
        Populate the grid with one item per record.

        Args:
            items: (index, record, tracker) triples in display order
        """
        self.clear()
        for _index, _record, tracker in items:
            button = GalleryItemButton(tracker, self._fetcher, on_activated=self._on_item_activated)
            self.widget.append(button)
            self._items.append(button)

        # Load visible items after the first allocation
        GLib.idle_add(self.load_visible_items)

    def clear(self) -> None:
        """Remove all items from the grid."""
        self.widget.remove_all()
        self._items = []

    def attach_scroll(self, vadjustment: Gtk.Adjustment) -> None:
        """Load items as the surrounding scrolled window moves."""
        self._vadjustment = vadjustment
        vadjustment.connect('value-changed', lambda _adj: GLib.idle_add(self.load_visible_items))
        vadjustment.connect('changed', lambda _adj: GLib.idle_add(self.load_visible_items))

    def load_visible_items(self) -> bool:
        """Load items that are currently visible or near-visible."""
        if self._vadjustment is None:
            for item in self._items:
                item.load()
            return False

        visible_start = self._vadjustment.get_value()
        visible_end = visible_start + self._vadjustment.get_page_size()
        load_start = visible_start - LAZY_LOAD_BUFFER
        load_end = visible_end + LAZY_LOAD_BUFFER

        origin = self.widget.get_allocation().y
        for item in self._items:
            if item.is_requested:
                continue
            child = item.get_parent() or item
            alloc = child.get_allocation()
            top = origin + alloc.y
            if top + alloc.height > load_start and top < load_end:
                item.load()

        return False

    @property
    def items(self) -> List[GalleryItemButton]:
        return list(self._items)

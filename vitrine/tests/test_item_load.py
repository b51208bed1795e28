from __future__ import annotations

from vitrine.manifest.parser import ImageRecord
from vitrine.models.item_load import ItemLoadRegistry, ItemLoadState, ItemLoadTracker

RECORDS = [
	ImageRecord("https://img.example/1.jpg", "One"),
	ImageRecord("https://img.example/2.jpg"),
	ImageRecord("https://img.example/1.jpg", "Same URL again"),
]


def test_tracker_starts_pending_with_placeholder() -> None:
	tracker = ItemLoadTracker(0, RECORDS[0])

	assert tracker.state is ItemLoadState.PENDING
	assert tracker.show_placeholder
	assert not tracker.show_content
	assert not tracker.show_error
	assert not tracker.consume_reveal()


def test_loaded_is_terminal() -> None:
	tracker = ItemLoadTracker(0, RECORDS[0])

	assert tracker.mark_loaded() is True
	assert tracker.mark_errored() is False
	assert tracker.mark_loaded() is False
	assert tracker.state is ItemLoadState.LOADED
	assert tracker.show_content and not tracker.show_placeholder


def test_errored_is_terminal() -> None:
	tracker = ItemLoadTracker(1, RECORDS[1])

	assert tracker.mark_errored() is True
	assert tracker.mark_loaded() is False
	assert tracker.state is ItemLoadState.ERRORED
	assert tracker.show_error
	assert not tracker.show_content
	assert not tracker.consume_reveal()


def test_reveal_fires_once() -> None:
	tracker = ItemLoadTracker(0, RECORDS[0])
	tracker.mark_loaded()

	assert tracker.consume_reveal() is True
	assert tracker.consume_reveal() is False
	assert tracker.consume_reveal() is False


def test_registry_isolates_items() -> None:
	registry = ItemLoadRegistry(RECORDS)

	registry[0].mark_loaded()
	registry[1].mark_errored()

	assert len(registry) == 3
	assert registry[2].state is ItemLoadState.PENDING
	assert registry.count(ItemLoadState.LOADED) == 1
	assert registry.count(ItemLoadState.ERRORED) == 1
	assert registry.count(ItemLoadState.PENDING) == 1


def test_registry_keys_by_position_and_url() -> None:
	registry = ItemLoadRegistry(RECORDS)

	assert registry.get((2, "https://img.example/1.jpg")) is registry[2]
	assert registry.get((0, "https://img.example/1.jpg")) is registry[0]
	assert registry.get((1, "https://img.example/1.jpg")) is None
	assert registry.get((7, "https://img.example/1.jpg")) is None
	assert [tracker.key for tracker in registry] == [
		(0, "https://img.example/1.jpg"),
		(1, "https://img.example/2.jpg"),
		(2, "https://img.example/1.jpg"),
	]

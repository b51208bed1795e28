"""Gallery-level state published by the manifest loader."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..manifest.parser import ImageRecord


class FallbackReason(str, Enum):
    """Why the bundled demo images replaced the manifest."""

    UNAVAILABLE = 'unavailable'
    BAD_STATUS = 'bad_status'
    EMPTY = 'empty'


@dataclass(slots=True, frozen=True)
class GalleryState:
    """Snapshot of the gallery data.

    Starts as ``loading`` with no images and is replaced exactly once by a
    settled snapshot.
    """

    images: tuple[ImageRecord, ...] = ()
    loading: bool = True
    using_fallback: bool = False
    fallback_reason: FallbackReason | None = None

    @classmethod
    def initial(cls) -> GalleryState:
        return cls()

    @classmethod
    def live(cls, images: list[ImageRecord] | tuple[ImageRecord, ...]) -> GalleryState:
        return cls(images=tuple(images), loading=False, using_fallback=False)

    @classmethod
    def fallback(cls, images: tuple[ImageRecord, ...], reason: FallbackReason) -> GalleryState:
        return cls(images=tuple(images), loading=False, using_fallback=True, fallback_reason=reason)

    @property
    def count(self) -> int:
        return len(self.images)

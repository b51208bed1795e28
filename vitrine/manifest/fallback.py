"""Bundled demo images shown when the manifest is unavailable or empty."""
from __future__ import annotations

from .parser import ImageRecord

_UNSPLASH_PARAMS = '?q=80&w=1000&auto=format&fit=crop'


def _unsplash(photo_id: str, description: str) -> ImageRecord:
    return ImageRecord(url=f"https://images.unsplash.com/{photo_id}{_UNSPLASH_PARAMS}", description=description)


FALLBACK_IMAGES: tuple[ImageRecord, ...] = (
    _unsplash('photo-1492691527719-9d1e07e534b4', "Mountain Peak at Dawn by Alex S."),
    _unsplash('photo-1470071459604-3b5ec3a7fe05', "Misty Forest • Captured in Oregon"),
    _unsplash('photo-1447752875215-b2761acb3c5d', "Silence of Nature"),
    _unsplash('photo-1469334031218-e382a71b716b', "The Long Road Home"),
    _unsplash('photo-1501854140884-074bf86ee91c', "Morning Light"),
    _unsplash('photo-1505144808419-1957a94ca61e', "Deep Woods • 2024"),
    _unsplash('photo-1510784722466-f2aa9c52fff6', "Winter Solstice"),
    _unsplash('photo-1507525428034-b723cf961d3e', "Coastal Dreams"),
    _unsplash('photo-1500964757637-c85e8a162699', "Golden Hour"),
    _unsplash('photo-1533201357341-8d79b10dd0f0', "Urban Reflections"),
    _unsplash('photo-1552083831-71f085340317', "The Boatman"),
    _unsplash('photo-1519681393784-d120267933ba', "Starry Night"),
)

"""Asynchronous manifest loading with demo-mode fallback."""
from __future__ import annotations

import logging
from pathlib import Path

import httpx

from ..models.gallery_state import FallbackReason, GalleryState
from .fallback import FALLBACK_IMAGES
from .parser import ImageRecord, parse_manifest

logger = logging.getLogger(__name__)


class ManifestUnavailable(Exception):
    """The manifest could not be retrieved."""

    def __init__(self, message: str, reason: FallbackReason = FallbackReason.UNAVAILABLE) -> None:
        super().__init__(message)
        self.reason = reason


def is_remote(source: str) -> bool:
    return source.startswith(('http://', 'https://'))


class ManifestLoader:
    """Fetch the manifest once and decide between live and demo data.

    ``source`` is either an ``http(s)`` URL or a path to a local text file.
    Every failure is absorbed into the returned state; ``load`` never raises
    for network, status, decoding or empty-manifest problems.
    """

    def __init__(
        self,
        source: str | Path,
        *,
        fallback: tuple[ImageRecord, ...] = FALLBACK_IMAGES,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ) -> None:
        self.source = str(source)
        self.fallback = tuple(fallback)
        self._client = client
        self._timeout = timeout

    async def load(self) -> GalleryState:
        """Run the single load attempt and return the settled gallery state."""
        try:
            text = await self._read()
        except ManifestUnavailable as exc:
            return self._fall_back(exc.reason, exc)

        images = parse_manifest(text)
        if not images:
            return self._fall_back(FallbackReason.EMPTY, "File empty")

        logger.info("Loaded %d images from %s", len(images), self.source)
        return GalleryState.live(images)

    async def _read(self) -> str:
        if is_remote(self.source):
            return await self._fetch()
        try:
            return Path(self.source).read_text(encoding='utf-8-sig')
        except (OSError, UnicodeDecodeError) as exc:
            raise ManifestUnavailable(str(exc)) from exc

    async def _fetch(self) -> str:
        try:
            if self._client is not None:
                response = await self._client.get(self.source)
            else:
                async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
                    response = await client.get(self.source)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ManifestUnavailable(str(exc)) from exc

        if not response.is_success:
            raise ManifestUnavailable(f"Status {response.status_code}", FallbackReason.BAD_STATUS)
        return response.text

    def _fall_back(self, reason: FallbackReason, error: object) -> GalleryState:
        logger.warning("Falling back to demo data (%s): %s", reason.value, error)
        return GalleryState.fallback(self.fallback, reason)

"""Remote image fetching and decoding."""
from __future__ import annotations

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from io import BytesIO
from typing import Callable, NamedTuple

import httpx
from PIL import Image, ImageOps, UnidentifiedImageError

from .constants import ASSET_WORKERS
from .tasks import Dispatch, call_now

logger = logging.getLogger(__name__)


class DecodedImage(NamedTuple):
    """PNG-encoded image data ready for a texture."""
    data: bytes
    width: int
    height: int


def decode_image(payload: bytes, max_dimension: int = 0) -> DecodedImage:
    """Decode raw image bytes, applying EXIF orientation and an optional size cap.

    Raises:
        UnidentifiedImageError: If the payload is not an image Pillow understands
    """
    with Image.open(BytesIO(payload)) as img:
        img = ImageOps.exif_transpose(img)
        if max_dimension > 0:
            img.thumbnail((max_dimension, max_dimension), Image.Resampling.LANCZOS)

        has_alpha = img.mode in ("LA", "RGBA") or (img.mode == "P" and "transparency" in img.info)
        if has_alpha:
            img = img.convert("RGBA")
        elif img.mode != "RGB":
            img = img.convert("RGB")

        buffer = BytesIO()
        img.save(buffer, "PNG")
        return DecodedImage(buffer.getvalue(), img.width, img.height)


class AssetFetcher:
    """Download and decode images on a worker pool.

    Exactly one of ``on_ready``/``on_error`` is dispatched per request.
    """

    def __init__(
        self,
        *,
        client: httpx.Client | None = None,
        executor: Executor | None = None,
        dispatch: Dispatch = call_now,
        timeout: float | None = 30.0,
    ) -> None:
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)
        self._owns_client = client is None
        self._executor = executor or ThreadPoolExecutor(max_workers=ASSET_WORKERS, thread_name_prefix="vitrine-asset")
        self._owns_executor = executor is None
        self._dispatch = dispatch

    def fetch(
        self,
        url: str,
        on_ready: Callable[[DecodedImage], None],
        on_error: Callable[[Exception], None],
        *,
        max_dimension: int = 0,
    ) -> Future:
        return self._executor.submit(self._run, url, on_ready, on_error, max_dimension)

    def _run(self, url: str, on_ready: Callable[[DecodedImage], None],
             on_error: Callable[[Exception], None], max_dimension: int) -> None:
        try:
            response = self._client.get(url)
            response.raise_for_status()
            image = decode_image(response.content, max_dimension)
        except (httpx.HTTPError, UnidentifiedImageError, OSError, Image.DecompressionBombError) as exc:
            logger.debug("Failed to load %s: %s", url, exc)
            self._dispatch(self._deliver, on_error, exc)
            return
        self._dispatch(self._deliver, on_ready, image)

    @staticmethod
    def _deliver(callback: Callable, value: object) -> bool:
        callback(value)
        return False

    def close(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=False, cancel_futures=True)
        if self._owns_client:
            self._client.close()

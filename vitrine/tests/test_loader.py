from __future__ import annotations

import logging
from pathlib import Path

import httpx
import pytest

from vitrine.manifest.fallback import FALLBACK_IMAGES
from vitrine.manifest.loader import ManifestLoader
from vitrine.manifest.parser import ImageRecord
from vitrine.models.gallery_state import FallbackReason, GalleryState

MANIFEST_URL = "https://gallery.example/images1.txt"

VALID_MANIFEST = """# Gallery
[https://img.example/1.jpg] | First
https://img.example/2.jpg

https://img.example/3.jpg | Third | with pipe
"""


def make_loader(handler, **kwargs) -> ManifestLoader:
	client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
	return ManifestLoader(MANIFEST_URL, client=client, **kwargs)


@pytest.mark.asyncio
async def test_load_returns_live_images_in_order() -> None:
	requests: list[httpx.Request] = []

	def handler(request: httpx.Request) -> httpx.Response:
		requests.append(request)
		return httpx.Response(200, text=VALID_MANIFEST)

	state = await make_loader(handler).load()

	assert len(requests) == 1
	assert str(requests[0].url) == MANIFEST_URL
	assert state.loading is False
	assert state.using_fallback is False
	assert state.fallback_reason is None
	assert state.images == (
		ImageRecord("https://img.example/1.jpg", "First"),
		ImageRecord("https://img.example/2.jpg", None),
		ImageRecord("https://img.example/3.jpg", "Third | with pipe"),
	)


@pytest.mark.asyncio
async def test_empty_manifest_falls_back(caplog: pytest.LogCaptureFixture) -> None:
	loader = make_loader(lambda request: httpx.Response(200, text="# only comments\n"))

	with caplog.at_level(logging.WARNING):
		state = await loader.load()

	assert state.using_fallback is True
	assert state.loading is False
	assert state.fallback_reason is FallbackReason.EMPTY
	assert state.images == FALLBACK_IMAGES
	assert "Falling back to demo data" in caplog.text


@pytest.mark.asyncio
async def test_network_failure_falls_back_like_empty_manifest() -> None:
	def handler(request: httpx.Request) -> httpx.Response:
		raise httpx.ConnectError("connection refused", request=request)

	failed = await make_loader(handler).load()
	empty = await make_loader(lambda request: httpx.Response(200, text="")).load()

	assert failed.using_fallback is True
	assert failed.fallback_reason is FallbackReason.UNAVAILABLE
	assert failed.images == empty.images == FALLBACK_IMAGES
	assert failed.loading == empty.loading is False


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [404, 500, 503])
async def test_unsuccessful_status_falls_back(status: int) -> None:
	state = await make_loader(lambda request: httpx.Response(status, text=VALID_MANIFEST)).load()

	assert state.using_fallback is True
	assert state.fallback_reason is FallbackReason.BAD_STATUS
	assert state.images == FALLBACK_IMAGES


@pytest.mark.asyncio
async def test_custom_fallback_sequence_is_used() -> None:
	fallback = (ImageRecord("https://demo.example/a.jpg", "A"),)
	loader = make_loader(lambda request: httpx.Response(404), fallback=fallback)

	state = await loader.load()

	assert state.images == fallback


@pytest.mark.asyncio
async def test_local_manifest_file(tmp_path: Path) -> None:
	manifest = tmp_path / "images1.txt"
	manifest.write_text(VALID_MANIFEST, encoding="utf-8")

	state = await ManifestLoader(manifest).load()

	assert state.using_fallback is False
	assert state.count == 3


@pytest.mark.asyncio
async def test_missing_local_manifest_falls_back(tmp_path: Path) -> None:
	state = await ManifestLoader(tmp_path / "absent.txt").load()

	assert state.using_fallback is True
	assert state.fallback_reason is FallbackReason.UNAVAILABLE


def test_initial_state_is_loading_and_empty() -> None:
	state = GalleryState.initial()

	assert state.loading is True
	assert state.images == ()
	assert state.using_fallback is False


def test_fallback_images_are_valid_records() -> None:
	assert len(FALLBACK_IMAGES) == 12
	assert all(record.url.startswith("https://images.unsplash.com/") for record in FALLBACK_IMAGES)
	assert all(record.description for record in FALLBACK_IMAGES)


@pytest.mark.asyncio
async def test_malformed_url_falls_back() -> None:
	state = await ManifestLoader("http://[::1/images1.txt", timeout=2).load()

	assert state.using_fallback is True
	assert state.fallback_reason is FallbackReason.UNAVAILABLE
	assert state.images == FALLBACK_IMAGES


@pytest.mark.asyncio
async def test_remote_manifest_with_byte_order_mark_is_live() -> None:
	body = "\ufeffhttps://img.example/1.jpg|One".encode("utf-8")
	loader = make_loader(lambda request: httpx.Response(200, content=body, headers={"content-type": "text/plain; charset=utf-8"}))

	state = await loader.load()

	assert state.using_fallback is False
	assert state.images == (ImageRecord("https://img.example/1.jpg", "One"),)


@pytest.mark.asyncio
async def test_local_manifest_with_byte_order_mark_is_live(tmp_path: Path) -> None:
	manifest = tmp_path / "images1.txt"
	manifest.write_text("https://img.example/1.jpg|One\n", encoding="utf-8-sig")

	state = await ManifestLoader(manifest).load()

	assert state.using_fallback is False
	assert state.images == (ImageRecord("https://img.example/1.jpg", "One"),)

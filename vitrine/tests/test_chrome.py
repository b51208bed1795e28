from __future__ import annotations

import pytest

from vitrine.controllers.chrome import ChromeSync, ScrollThresholdToggle
from vitrine.controllers.render_boundary import RenderBoundary


def test_chrome_sync_applies_once_per_identity() -> None:
	applied: list[tuple[str, str]] = []
	chrome = ChromeSync(lambda title, description: applied.append((title, description)))

	assert chrome.sync("Gallery", "Photos")
	assert not chrome.sync("Gallery", "Photos")
	assert chrome.sync("Gallery", "More photos")

	assert applied == [("Gallery", "Photos"), ("Gallery", "More photos")]


@pytest.mark.parametrize(
	"offsets, expected",
	[
		([0, 100, 400], [False, False, False]),
		([401, 800], [True, False]),
		([500, 200, 600], [True, True, True]),
	],
)
def test_scroll_toggle_reports_changes(offsets: list[float], expected: list[bool]) -> None:
	toggle = ScrollThresholdToggle(400)

	assert [toggle.update(offset) for offset in offsets] == expected


def test_scroll_toggle_visibility() -> None:
	toggle = ScrollThresholdToggle(400)

	toggle.update(450)
	assert toggle.visible
	toggle.update(0)
	assert not toggle.visible


def test_render_boundary_passes_through_successful_render() -> None:
	rendered: list[bool] = []
	boundary = RenderBoundary()

	assert boundary.run(lambda: rendered.append(True))
	assert rendered == [True]
	assert not boundary.has_error


def test_render_boundary_latches_faults(caplog: pytest.LogCaptureFixture) -> None:
	errors: list[Exception] = []
	boundary = RenderBoundary(on_error=errors.append)

	def broken() -> None:
		raise KeyError("url")

	assert boundary.run(broken) is False
	assert boundary.has_error
	assert isinstance(boundary.error, KeyError)
	assert errors == [boundary.error]
	assert "Uncaught error while rendering the gallery" in caplog.text

	# No partial recovery until a reload resets the boundary
	assert boundary.run(lambda: None) is False

	boundary.reset()

	assert boundary.run(lambda: None) is True
	assert boundary.error is None

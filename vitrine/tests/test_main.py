from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from vitrine.main import app

runner = CliRunner()


def test_parse_lists_manifest_records(tmp_path: Path) -> None:
	manifest = tmp_path / "images1.txt"
	manifest.write_text("# demo\n[https://img.example/1.jpg] | Dawn\nhttps://img.example/2.jpg\n", encoding="utf-8")

	result = runner.invoke(app, ["parse", str(manifest)])

	assert result.exit_code == 0
	assert "Dawn" in result.output
	assert "Loaded 2 photographs from external source." in result.output


def test_parse_reports_demo_mode(tmp_path: Path) -> None:
	manifest = tmp_path / "images1.txt"
	manifest.write_text("# nothing yet\n", encoding="utf-8")

	result = runner.invoke(app, ["parse", str(manifest)])

	assert result.exit_code == 0
	assert "Viewing demo gallery (empty)." in result.output
	assert "Starry" in result.output

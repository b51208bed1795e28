from __future__ import annotations

import pytest

from vitrine.manifest.parser import ImageRecord, parse_line, parse_manifest


def test_parse_manifest_preserves_line_order() -> None:
	text = "http://a.com/1.jpg|One\nhttps://a.com/2.jpg\nhttp://a.com/3.jpg | Three\n"

	records = parse_manifest(text)

	assert [record.url for record in records] == [
		"http://a.com/1.jpg",
		"https://a.com/2.jpg",
		"http://a.com/3.jpg",
	]
	assert [record.description for record in records] == ["One", None, "Three"]


def test_parse_manifest_handles_crlf_line_endings() -> None:
	records = parse_manifest("http://a.com/1.jpg|One\r\nhttp://a.com/2.jpg|Two\r\n")

	assert records == [
		ImageRecord("http://a.com/1.jpg", "One"),
		ImageRecord("http://a.com/2.jpg", "Two"),
	]


@pytest.mark.parametrize("line", ["", "   ", "\t", "# a comment", "   # indented comment", "#http://a.com/x.jpg"])
def test_blank_and_comment_lines_are_skipped(line: str) -> None:
	assert parse_line(line) is None
	assert parse_manifest(f"{line}\nhttp://a.com/x.jpg") == [ImageRecord("http://a.com/x.jpg")]


def test_bracketed_url_is_unwrapped() -> None:
	assert parse_manifest("[http://a.com/x.jpg] | Caption") == [
		ImageRecord(url="http://a.com/x.jpg", description="Caption"),
	]


def test_only_one_bracket_pair_is_stripped() -> None:
	record = parse_line("[http://a.com/x.jpg]]")

	assert record is not None
	assert record.url == "http://a.com/x.jpg]"


def test_pipes_inside_description_are_kept() -> None:
	records = parse_manifest("http://a.com/x.jpg|A | B")

	assert records[0].description == "A | B"


def test_empty_description_is_none() -> None:
	assert parse_manifest("http://a.com/x.jpg|") == [ImageRecord("http://a.com/x.jpg", None)]
	assert parse_manifest("http://a.com/x.jpg|    ") == [ImageRecord("http://a.com/x.jpg", None)]


@pytest.mark.parametrize("line", ["ftp://a.com/x.jpg|Caption", "a.com/x.jpg", "| just a caption", "[]|x"])
def test_invalid_urls_are_dropped(line: str) -> None:
	assert parse_manifest(line) == []


def test_invalid_line_does_not_affect_siblings() -> None:
	text = "http://a.com/1.jpg\nftp://a.com/2.jpg\nhttp://a.com/3.jpg"

	assert [record.url for record in parse_manifest(text)] == ["http://a.com/1.jpg", "http://a.com/3.jpg"]


def test_parse_manifest_without_valid_lines_returns_empty_list() -> None:
	assert parse_manifest("") == []
	assert parse_manifest("# only comments\n\n") == []


def test_parse_manifest_is_deterministic() -> None:
	text = "[http://a.com/1.jpg] | One | more\n# skip\nhttp://a.com/2.jpg|\n"

	assert parse_manifest(text) == parse_manifest(text)


def test_alt_text_falls_back_to_position() -> None:
	assert ImageRecord("http://a.com/x.jpg", "Dawn").alt_text(0) == "Dawn"
	assert ImageRecord("http://a.com/x.jpg").alt_text(4) == "Gallery item 5"


def test_byte_order_mark_does_not_drop_first_record() -> None:
	records = parse_manifest("\ufeffhttp://a.com/1.jpg|One\nhttp://a.com/2.jpg|Two\n")

	assert records == [
		ImageRecord("http://a.com/1.jpg", "One"),
		ImageRecord("http://a.com/2.jpg", "Two"),
	]


def test_byte_order_mark_before_comment_is_still_a_comment() -> None:
	assert parse_manifest("\ufeff# header\nhttp://a.com/1.jpg") == [ImageRecord("http://a.com/1.jpg")]

"""Line-oriented manifest parser.

Each non-blank, non-comment line has the shape::

    [https://example.com/photo.jpg] | Optional caption, may contain | pipes
"""
from __future__ import annotations

import re
from dataclasses import dataclass

COMMENT_PREFIX = '#'
DELIMITER = '|'
VALID_URL_PREFIX = 'http'

_LINE_BREAK = re.compile(r"\r?\n")
# Whitespace plus the byte order mark, which str.strip leaves alone
_TRIM = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


@dataclass(slots=True, frozen=True)
class ImageRecord:
    """A validated image reference taken from one manifest line."""

    url: str
    description: str | None = None

    def alt_text(self, index: int) -> str:
        return self.description or f"Gallery item {index + 1}"


def _trim(text: str) -> str:
    return _TRIM.sub("", text)


def _strip_brackets(segment: str) -> str:
    if segment.startswith('['):
        segment = segment[1:]
    if segment.endswith(']'):
        segment = segment[:-1]
    return segment


def parse_line(line: str) -> ImageRecord | None:
    """Parse a single manifest line, returning None when it yields no record."""
    line = _trim(line)
    if not line or line.startswith(COMMENT_PREFIX):
        return None

    url_segment, _, rest = line.partition(DELIMITER)
    url = _strip_brackets(_trim(url_segment))
    if not url.startswith(VALID_URL_PREFIX):
        return None

    description = _trim(rest)
    return ImageRecord(url=url, description=description or None)


def parse_manifest(text: str) -> list[ImageRecord]:
    """Parse manifest text into an ordered list of image records.

    Blank lines and ``#`` comments are skipped and lines whose URL does not
    start with ``http`` are dropped. Never raises.
    """
    records: list[ImageRecord] = []
    for line in _LINE_BREAK.split(text):
        record = parse_line(line)
        if record is not None:
            records.append(record)
    return records

"""Recognizers for the individual kinds of lines found in an m3u8 playlist."""

from __future__ import annotations

import re
from typing import Optional, Protocol

# A reference token ends in the extension and may carry a query, fragment or
# extra path characters after it, but never spaces or quotes.
_TOKEN_TAIL = r"(?=$|[?#&/;\s\"])[^\s\"]*"

PLAYLIST_TOKEN = re.compile(r"[^\s\"]+\.m3u8" + _TOKEN_TAIL, re.IGNORECASE)
SEGMENT_TOKEN = re.compile(r"[^\s\"]+\.(?:ts|aac)" + _TOKEN_TAIL, re.IGNORECASE)
TARGET_DURATION_TAG = re.compile(r"^\s*#EXT-X-TARGETDURATION:\s*(\d+)")
MEDIA_SEQUENCE_TAG = re.compile(r"^\s*#EXT-X-MEDIA-SEQUENCE:\s*(\d+)")


def _first_token(pattern: re.Pattern, line: str) -> Optional[str]:
    match = pattern.search(line)
    return match.group(0).strip() if match else None


class LineClassifier(Protocol):
    """Answers what a single playlist line represents."""

    def is_playlist_line(self, line: str) -> bool: ...

    def extract_playlist(self, line: str) -> Optional[str]: ...

    def is_segment_line(self, line: str) -> bool: ...

    def extract_segment(self, line: str) -> Optional[str]: ...

    def is_duration_line(self, line: str) -> bool: ...

    def parse_duration(self, line: str) -> Optional[str]: ...

    def is_media_sequence_line(self, line: str) -> bool: ...

    def parse_sequence(self, line: str) -> Optional[str]: ...


class M3U8LineClassifier:
    """Classifies lines using the tags of a plain HLS playlist."""

    def is_playlist_line(self, line: str) -> bool:
        return PLAYLIST_TOKEN.search(line) is not None

    def extract_playlist(self, line: str) -> Optional[str]:
        """Return the first nested ``.m3u8`` reference on the line, query included."""

        return _first_token(PLAYLIST_TOKEN, line)

    def is_segment_line(self, line: str) -> bool:
        return SEGMENT_TOKEN.search(line) is not None

    def extract_segment(self, line: str) -> Optional[str]:
        return _first_token(SEGMENT_TOKEN, line)

    def is_duration_line(self, line: str) -> bool:
        return TARGET_DURATION_TAG.match(line) is not None

    def parse_duration(self, line: str) -> Optional[str]:
        """Return the ``#EXT-X-TARGETDURATION`` value as text."""

        match = TARGET_DURATION_TAG.match(line)
        return match.group(1) if match else None

    def is_media_sequence_line(self, line: str) -> bool:
        return MEDIA_SEQUENCE_TAG.match(line) is not None

    def parse_sequence(self, line: str) -> Optional[str]:
        """Return the ``#EXT-X-MEDIA-SEQUENCE`` value as text."""

        match = MEDIA_SEQUENCE_TAG.match(line)
        return match.group(1) if match else None

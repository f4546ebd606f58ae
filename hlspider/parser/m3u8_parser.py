"""Tools for classifying m3u8 playlists and pulling out their references."""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from ..models import ParseResult, PlaylistKind
from .line_classifier import LineClassifier, M3U8LineClassifier

PLAYLIST_MARKER = re.compile(r"#EXTM3U")


class M3U8Parser:
    """Scans playlist text once and decides whether it is a variable or segment playlist.

    Line recognition and reference extraction are delegated to
    ``line_classifier`` so other tag sets can be plugged in without touching
    the branching below.
    """

    def __init__(self, line_classifier: Optional[LineClassifier] = None) -> None:
        self._lines = line_classifier or M3U8LineClassifier()

    def parse(self, text: str) -> ParseResult:
        text = text or ""
        result = ParseResult(has_marker=PLAYLIST_MARKER.search(text) is not None)
        lines = text.split("\n")

        has_playlists = any(self._lines.is_playlist_line(line) for line in lines)
        has_segments = any(self._lines.is_segment_line(line) for line in lines)

        if has_playlists and not has_segments:
            result.kind = PlaylistKind.VARIABLE
            result.playlist_refs = self._collect_playlists(lines)
        elif has_segments and not has_playlists:
            result.kind = PlaylistKind.SEGMENT
            self._collect_segments(lines, result)
            if not result.segment_refs:
                logging.warning("Segment playlist did not yield any segment references")
        else:
            logging.debug(
                "Unclassifiable playlist (nested playlists: %s, segments: %s)",
                has_playlists,
                has_segments,
            )
            return result

        if not result.has_marker:
            logging.debug("Playlist text is missing the #EXTM3U marker")
            result.kind = PlaylistKind.INVALID
        return result

    def _collect_playlists(self, lines: List[str]) -> List[str]:
        refs: List[str] = []
        for line in lines:
            if not self._lines.is_playlist_line(line):
                continue
            ref = self._lines.extract_playlist(line)
            if ref:
                refs.append(ref)
        return refs

    def _collect_segments(self, lines: List[str], result: ParseResult) -> None:
        for line in lines:
            if self._lines.is_segment_line(line):
                ref = self._lines.extract_segment(line)
                if ref:
                    result.segment_refs.append(ref)
            elif self._lines.is_duration_line(line):
                result.target_duration = self._lines.parse_duration(line.strip())
            elif self._lines.is_media_sequence_line(line):
                result.media_sequence = self._lines.parse_sequence(line.strip())

"""Parses out and exposes the parts of an m3u8 playlist.

Example::

    playlist = Playlist(text, "http://url.tld/where/playlist/was/downloaded/from.m3u8")
    if playlist.valid and playlist.is_segment_playlist:
        for url in playlist.segments:
            ...

Re-assigning :attr:`Playlist.text` parses the new text but keeps the raw
references collected by earlier parses: new references are appended to them.
"""

from __future__ import annotations

from typing import List, Optional

from .models import ParseResult, PlaylistKind, PlaylistSummary
from .parser.line_classifier import LineClassifier
from .parser.m3u8_parser import M3U8Parser
from .parser.resolver import extract_domain, resolve_reference


class Playlist:
    """A variable or segment m3u8 playlist and the references it points to."""

    def __init__(
        self,
        text: str,
        source: Optional[str] = None,
        line_classifier: Optional[LineClassifier] = None,
    ) -> None:
        self._source = source
        self._domain = extract_domain(source)
        self._parser = M3U8Parser(line_classifier)

        self._kind = PlaylistKind.INVALID
        self._valid = False
        self._raw_playlists: List[str] = []
        self._raw_segments: List[str] = []
        self._target_duration: Optional[str] = None
        self._media_sequence: Optional[str] = None

        self._text = ""
        self.text = text

    @property
    def text(self) -> str:
        """The raw m3u8 text."""

        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value or ""
        self._merge(self._parser.parse(self._text))

    @property
    def source(self) -> Optional[str]:
        """Where the playlist was downloaded from, used only to resolve references."""

        return self._source

    @property
    def domain(self) -> str:
        return self._domain

    @property
    def kind(self) -> PlaylistKind:
        return self._kind

    @property
    def valid(self) -> bool:
        return self._valid

    @property
    def is_variable_playlist(self) -> bool:
        return self._kind is PlaylistKind.VARIABLE

    @property
    def is_segment_playlist(self) -> bool:
        return self._kind is PlaylistKind.SEGMENT

    @property
    def raw_playlists(self) -> List[str]:
        return list(self._raw_playlists)

    @property
    def raw_segments(self) -> List[str]:
        return list(self._raw_segments)

    @property
    def playlists(self) -> List[Optional[str]]:
        """Nested playlist URLs; ``None`` marks a reference that could not be resolved."""

        return self._resolve_all(self._raw_playlists)

    @property
    def segments(self) -> List[Optional[str]]:
        """Segment URLs; ``None`` marks a reference that could not be resolved."""

        return self._resolve_all(self._raw_segments)

    @property
    def target_duration(self) -> Optional[str]:
        return self._target_duration

    @property
    def media_sequence(self) -> Optional[str]:
        return self._media_sequence

    def summary(self) -> PlaylistSummary:
        return PlaylistSummary(
            source=self._source,
            domain=self._domain,
            valid=self._valid,
            kind=self._kind,
            target_duration=self._target_duration,
            media_sequence=self._media_sequence,
            playlists=self.playlists,
            segments=self.segments,
        )

    def _merge(self, result: ParseResult) -> None:
        self._kind = result.kind
        self._valid = result.valid
        self._raw_playlists.extend(result.playlist_refs)
        self._raw_segments.extend(result.segment_refs)
        if result.target_duration is not None:
            self._target_duration = result.target_duration
        if result.media_sequence is not None:
            self._media_sequence = result.media_sequence

    def _resolve_all(self, refs: List[str]) -> List[Optional[str]]:
        return [resolve_reference(ref, self._domain, self._source) for ref in refs]

    def __str__(self) -> str:
        return self._text

    __repr__ = __str__

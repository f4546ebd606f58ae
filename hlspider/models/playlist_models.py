"""Pydantic models that describe parsed playlists and their summaries."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class PlaylistKind(str, Enum):
    """What a playlist turned out to be after classification."""

    INVALID = "invalid"
    VARIABLE = "variable"
    SEGMENT = "segment"


class ParseResult(BaseModel):
    """Outcome of a single pass over playlist text."""

    kind: PlaylistKind = PlaylistKind.INVALID
    has_marker: bool = False
    playlist_refs: List[str] = Field(default_factory=list)
    segment_refs: List[str] = Field(default_factory=list)
    target_duration: Optional[str] = None
    media_sequence: Optional[str] = None

    @property
    def valid(self) -> bool:
        return self.has_marker and self.kind is not PlaylistKind.INVALID


class PlaylistSummary(BaseModel):
    """Serializable snapshot of a playlist with its references resolved."""

    source: Optional[str] = None
    domain: str = ""
    valid: bool
    kind: PlaylistKind
    target_duration: Optional[str] = None
    media_sequence: Optional[str] = None
    playlists: List[Optional[str]]
    segments: List[Optional[str]]

"""Parse HLS (m3u8) playlists and resolve the playlists and segments they reference."""

from .models import ParseResult, PlaylistKind, PlaylistSummary
from .parser import LineClassifier, M3U8LineClassifier, M3U8Parser
from .playlist import Playlist

__all__ = [
    "Playlist",
    "PlaylistKind",
    "ParseResult",
    "PlaylistSummary",
    "LineClassifier",
    "M3U8LineClassifier",
    "M3U8Parser",
]

__version__ = "0.1.0"

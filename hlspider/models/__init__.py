"""Data models for parsed playlists."""

from .playlist_models import ParseResult, PlaylistKind, PlaylistSummary

__all__ = ["PlaylistKind", "ParseResult", "PlaylistSummary"]

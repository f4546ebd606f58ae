"""Utility helpers for filesystem operations."""

from .file_utils import PlaylistFileError, read_playlist_text

__all__ = ["PlaylistFileError", "read_playlist_text"]

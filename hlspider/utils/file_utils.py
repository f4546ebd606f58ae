"""Filesystem helpers for loading playlist text that was downloaded elsewhere."""

from __future__ import annotations

import logging
import sys

STDIN_PATH = "-"


class PlaylistFileError(Exception):
    """Raised when a playlist file cannot be read."""


def read_playlist_text(path: str, encoding: str = "utf-8") -> str:
    """Reads playlist text from ``path`` (or stdin when ``path`` is ``-``)."""

    if path == STDIN_PATH:
        return sys.stdin.read()
    try:
        with open(path, "r", encoding=encoding) as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        logging.debug("Reading %s failed: %s", path, exc)
        raise PlaylistFileError(f"Unable to read playlist {path}: {exc}") from exc

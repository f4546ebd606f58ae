"""Turns raw playlist references into absolute URLs."""

from __future__ import annotations

import logging
import re
from typing import Optional
from urllib.parse import urljoin, urlsplit

ABSOLUTE_URL = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")
# Only the last path segment of the source is treated as the playlist file name.
PLAYLIST_FILENAME = re.compile(r"[^/]*\.m3u8(?=[^/]*$)", re.IGNORECASE)


def extract_domain(source: Optional[str]) -> str:
    """Returns ``scheme://host[:port]`` of an http(s) ``source``, else an empty string."""

    if not source:
        return ""
    try:
        parts = urlsplit(source)
    except ValueError:
        logging.debug("Ignoring malformed playlist source %r", source)
        return ""
    if parts.scheme not in {"http", "https"} or not parts.netloc:
        return ""
    host_end = source.find(parts.netloc) + len(parts.netloc)
    return source[:host_end]


def is_absolute_url(value: str) -> bool:
    return ABSOLUTE_URL.match(value) is not None


def resolve_reference(raw: str, domain: str, source: Optional[str]) -> Optional[str]:
    """Resolves ``raw`` against the playlist's ``domain`` and ``source``.

    Absolute references are returned untouched, root-relative ones are
    prefixed with ``domain`` and anything else replaces the playlist file
    name inside ``source``. Returns ``None`` when there is nothing to resolve
    against.
    """

    if is_absolute_url(raw):
        return raw
    if raw.startswith("/"):
        return domain + raw
    if source:
        if PLAYLIST_FILENAME.search(source):
            return PLAYLIST_FILENAME.sub(lambda _match: raw, source, count=1)
        return urljoin(source, raw)
    logging.debug("Cannot resolve %s without a playlist source", raw)
    return None

"""Line classification, playlist parsing and reference resolution."""

from .line_classifier import LineClassifier, M3U8LineClassifier
from .m3u8_parser import M3U8Parser
from .resolver import extract_domain, is_absolute_url, resolve_reference

__all__ = [
    "LineClassifier",
    "M3U8LineClassifier",
    "M3U8Parser",
    "extract_domain",
    "is_absolute_url",
    "resolve_reference",
]

"""Shared playlist fixtures."""

import pytest

SEGMENT_PLAYLIST = (
    "#EXTM3U\n"
    "#EXT-X-TARGETDURATION:10\n"
    "#EXT-X-MEDIA-SEQUENCE:5\n"
    "#EXTINF:10,\n"
    "seg_0.ts\n"
    "#EXTINF:10,\n"
    "seg_1.ts"
)

VARIABLE_PLAYLIST = (
    "#EXTM3U\n"
    "#EXT-X-STREAM-INF:PROGRAM-ID=1,BANDWIDTH=713245\n"
    "low/index.m3u8\n"
    "#EXT-X-STREAM-INF:PROGRAM-ID=1,BANDWIDTH=1500000\n"
    "/hi/index.m3u8?session=42\n"
    "#EXT-X-STREAM-INF:PROGRAM-ID=1,BANDWIDTH=3000000\n"
    "http://other.tld/top/index.m3u8\n"
)


@pytest.fixture
def segment_text() -> str:
    return SEGMENT_PLAYLIST


@pytest.fixture
def variable_text() -> str:
    return VARIABLE_PLAYLIST

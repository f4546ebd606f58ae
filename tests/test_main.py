"""Tests for the command line wrapper."""

import io
import json
import logging

import pytest

from hlspider import main as cli


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, caplog) -> None:
    for name in ("HLSPIDER_SOURCE", "HLSPIDER_JSON", "HLSPIDER_VERBOSE"):
        monkeypatch.delenv(name, raising=False)
    caplog.set_level(logging.INFO)


def _write(tmp_path, text: str) -> str:
    path = tmp_path / "playlist.m3u8"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_report_lists_resolved_segments(tmp_path, caplog, segment_text) -> None:
    path = _write(tmp_path, segment_text)
    assert cli.main([path, "--source", "http://x.tld/a/p.m3u8"]) == cli.EXIT_OK
    assert "Kind: segment playlist" in caplog.text
    assert "Target duration: 10" in caplog.text
    assert "http://x.tld/a/seg_1.ts" in caplog.text


def test_report_flags_unresolved(tmp_path, caplog, variable_text) -> None:
    path = _write(tmp_path, variable_text)
    assert cli.main([path]) == cli.EXIT_OK
    assert "low/index.m3u8 (unresolved, pass --source)" in caplog.text


def test_json_output(tmp_path, capsys, segment_text) -> None:
    path = _write(tmp_path, segment_text)
    assert cli.main([path, "--json", "--source", "http://x.tld/a/p.m3u8"]) == cli.EXIT_OK
    payload = json.loads(capsys.readouterr().out)
    assert payload["kind"] == "segment"
    assert payload["valid"] is True
    assert payload["media_sequence"] == "5"
    assert payload["segments"] == ["http://x.tld/a/seg_0.ts", "http://x.tld/a/seg_1.ts"]


def test_source_from_environment(tmp_path, capsys, monkeypatch, segment_text) -> None:
    monkeypatch.setenv("HLSPIDER_SOURCE", "http://env.tld/live/p.m3u8")
    monkeypatch.setenv("HLSPIDER_JSON", "yes")
    path = _write(tmp_path, segment_text)
    assert cli.main([path]) == cli.EXIT_OK
    payload = json.loads(capsys.readouterr().out)
    assert payload["segments"][0] == "http://env.tld/live/seg_0.ts"


def test_invalid_playlist_exit_code(tmp_path, caplog) -> None:
    path = _write(tmp_path, "#EXTM3U\nlow/index.m3u8\nseg_0.ts\n")
    assert cli.main([path]) == cli.EXIT_INVALID
    assert "Not a valid variable or segment playlist." in caplog.text


def test_missing_file(tmp_path, caplog) -> None:
    assert cli.main([str(tmp_path / "missing.m3u8")]) == cli.EXIT_UNREADABLE
    assert "Unable to read playlist" in caplog.text


def test_reads_stdin(monkeypatch, caplog, segment_text) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(segment_text))
    assert cli.main(["-", "--source", "http://x.tld/a/p.m3u8"]) == cli.EXIT_OK
    assert "http://x.tld/a/seg_0.ts" in caplog.text

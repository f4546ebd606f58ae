from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from .models import PlaylistKind
from .playlist import Playlist
from .utils.file_utils import PlaylistFileError, read_playlist_text

load_dotenv()

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_UNREADABLE = 2


def _env_str(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    return value


def _env_bool(name: str) -> bool:
    value = _env_str(name)
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Classify an m3u8 playlist and resolve the URLs it references.")
    parser.add_argument("playlist", help="Path to a downloaded .m3u8 file, or - to read from stdin")
    parser.add_argument(
        "--source",
        default=_env_str("HLSPIDER_SOURCE"),
        help="URL the playlist was downloaded from, used to resolve relative references",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=_env_bool("HLSPIDER_JSON"),
        help="Print the playlist summary as JSON instead of a report",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=_env_bool("HLSPIDER_VERBOSE"),
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def print_report(playlist: Playlist) -> None:
    if not playlist.valid:
        logging.warning("Not a valid variable or segment playlist.")
        return

    logging.info("Kind: %s playlist", playlist.kind.value)
    if playlist.kind is PlaylistKind.SEGMENT:
        logging.info("Target duration: %s", playlist.target_duration or "-")
        logging.info("Media sequence: %s", playlist.media_sequence or "-")
        refs = zip(playlist.raw_segments, playlist.segments)
    else:
        refs = zip(playlist.raw_playlists, playlist.playlists)

    for index, (raw, resolved) in enumerate(refs, start=1):
        if resolved is None:
            logging.warning("  %4d %s (unresolved, pass --source)", index, raw)
        else:
            logging.info("  %4d %s", index, resolved)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        text = read_playlist_text(args.playlist)
    except PlaylistFileError as exc:
        logging.error("%s", exc)
        return EXIT_UNREADABLE

    playlist = Playlist(text, args.source)
    logging.debug("Parsed playlist from %s:\n%s", args.playlist, playlist)

    if args.json:
        print(playlist.summary().model_dump_json(indent=2))
    else:
        print_report(playlist)
    return EXIT_OK if playlist.valid else EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())

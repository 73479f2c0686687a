"""
Tapedeck CLI - entry point

Usage:
    tapedeck FILE [FILE ...]      interactive player over a queue of files
    tapedeck play FILE            play one file to the end, no UI
"""

import argparse
import sys
import time
from pathlib import Path
from typing import Optional

from loguru import logger

from tapedeck.core.config import Config, get_log_file_path, load_config
from tapedeck.core.console import get_console, print_error, safe_print
from tapedeck.core.errors import ConfigError, TapedeckError, TrackError
from tapedeck.core.output import setup_loguru
from tapedeck.domain.library.loader import load_queue, load_track
from tapedeck.domain.playback.queue import Queue
from tapedeck.domain.playback.transport import TransportController

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130

KEYS_HELP = """
keys:
  space        play / pause
  right        next track
  left         previous track (or restart after the first 2 seconds)
  up / down    volume
  escape       quit

Use 'tapedeck play FILE' to play a single file without the UI.
"""


def _percent(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid volume: {value!r}")
    if not 0 <= number <= 100:
        raise argparse.ArgumentTypeError("volume must be between 0 and 100")
    return number


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config.toml (default: ./config.toml or ~/.config/tapedeck/config.toml)",
    )
    parser.add_argument(
        "--volume",
        type=_percent,
        default=None,
        help="Initial volume in percent (0-100)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (DEBUG, INFO, WARNING, ERROR)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Parser for the interactive session."""
    parser = argparse.ArgumentParser(
        prog="tapedeck",
        description="Tapedeck - terminal audio player",
        epilog=KEYS_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="Audio files to queue, in order")
    _add_common_options(parser)
    return parser


def build_play_parser() -> argparse.ArgumentParser:
    """Parser for the non-interactive play command."""
    parser = argparse.ArgumentParser(
        prog="tapedeck play",
        description="Play a single file to the end without the UI",
    )
    parser.add_argument("file", metavar="FILE", help="File to play")
    _add_common_options(parser)
    return parser


def _stdout_is_terminal() -> bool:
    return sys.stdout.isatty()


def run_session(files: list[str], config: Config) -> int:
    """
    Run the interactive player over `files`.

    Returns:
        Exit code; 0 also when there is nothing to play
    """
    if not files:
        return EXIT_OK

    if not _stdout_is_terminal():
        logger.warning("stdout is not a terminal, not starting the interactive session")
        return EXIT_OK

    with get_console().status("Loading..."):
        entries = load_queue(files)

    if not entries:
        logger.warning("No playable tracks, exiting")
        return EXIT_OK

    # PortAudio is loaded only once there is something to play
    from tapedeck.domain.playback.sink import AudioSink, open_output_device

    device = open_output_device()
    transport = TransportController(
        Queue(entries),
        lambda: AudioSink(device),
        volume=config.player.volume,
        volume_step=config.player.volume_step,
        restart_threshold=config.player.restart_threshold,
    )

    # Imported here so the play command never pulls in the UI
    from tapedeck.ui.blessed.app import run_interactive_ui

    try:
        transport.start()
        run_interactive_ui(transport, config.ui)
    finally:
        transport.close()

    return EXIT_OK


def run_play(path: str, volume: int) -> int:
    """Play one file to the end at `volume` percent."""
    track = load_track(path)
    stream = track.source()
    duration = stream.total_duration
    if duration is None:
        raise TrackError(f"{path} has no known duration")

    safe_print(
        f"Now playing {track.display_title} by {track.display_artist} on {track.display_album}"
    )

    from tapedeck.domain.playback.sink import AudioSink, open_output_device

    sink = AudioSink(open_output_device())
    try:
        sink.set_volume(volume / 100)
        sink.append(stream)
        sink.play()
        time.sleep(duration)
    finally:
        sink.stop()

    return EXIT_OK


def load_settings(args: argparse.Namespace) -> Config:
    """
    Load the config file and apply command-line overrides.

    Raises:
        ConfigError: If an override is not a usable value
    """
    config = load_config(args.config)
    if args.volume is not None:
        config.player.volume = args.volume
    if args.log_level:
        config.logging.level = args.log_level.upper()

    try:
        config.logging.validate()
    except ValueError as e:
        raise ConfigError(f"invalid log level: {e}") from e
    return config


def run(argv: Optional[list[str]] = None) -> int:
    """
    Parse arguments, set up config and logging, dispatch.

    Returns:
        Process exit code
    """
    argv = sys.argv[1:] if argv is None else argv

    play_mode = bool(argv) and argv[0] == "play"
    if play_mode:
        args = build_play_parser().parse_args(argv[1:])
    else:
        args = build_parser().parse_args(argv)

    # Logging is not set up yet, so failures here are only printed
    try:
        config = load_settings(args)
        setup_loguru(
            get_log_file_path(config),
            level=config.logging.level,
            max_file_size_mb=config.logging.max_file_size_mb,
            backup_count=config.logging.backup_count,
        )
    except (TapedeckError, OSError) as e:
        print_error(str(e))
        return EXIT_ERROR

    try:
        if play_mode:
            return run_play(args.file, config.player.volume)
        return run_session(args.files, config)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return EXIT_INTERRUPTED
    except (TapedeckError, OSError) as e:
        logger.exception(f"Fatal error: {e}")
        print_error(str(e))
        return EXIT_ERROR


def main() -> None:
    """Main entry point for the tapedeck command."""
    sys.exit(run())


if __name__ == "__main__":
    main()

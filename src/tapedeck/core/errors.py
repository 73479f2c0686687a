"""Exception hierarchy for tapedeck."""

from typing import Optional


class TapedeckError(Exception):
    """Base exception for all tapedeck failures."""

    pass


class DecodeError(TapedeckError):
    """Raised when an input file cannot be decoded into a track."""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Could not decode {path}{detail}")


class ConfigError(TapedeckError):
    """Raised when command-line or environment settings are unusable."""

    pass


class TrackError(TapedeckError):
    """Raised when a track cannot be played (e.g. no known total duration)."""

    pass


class DeviceError(TapedeckError):
    """Raised when no output device exists or a sink command fails."""

    pass


class TerminalError(TapedeckError):
    """Raised when the terminal cannot host the interactive session."""

    pass


class ChannelError(TapedeckError):
    """Raised when the event channel is closed or its producer failed."""

    pass

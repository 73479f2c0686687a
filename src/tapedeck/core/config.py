"""
Configuration management for tapedeck
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from loguru import logger

from .console import safe_print

# Built-in loguru levels
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class PlayerConfig:
    """Configuration for transport behaviour."""

    volume: int = 100  # Initial volume (0-100)
    volume_step: int = 5  # Percent per up/down press
    restart_threshold: float = 2.0  # Seconds; below this, left arrow goes to previous track

    def validate(self) -> None:
        """Validate player configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if not 1 <= self.volume_step <= 100:
            raise ValueError(f"volume_step must be between 1 and 100, got {self.volume_step}")
        if self.restart_threshold < 0:
            raise ValueError(f"restart_threshold must not be negative, got {self.restart_threshold}")


@dataclass
class UIConfig:
    """Configuration for the terminal UI."""

    tick_interval: float = 0.1  # Seconds between progress refreshes
    use_colors: bool = True
    show_queue: bool = True

    def validate(self) -> None:
        """Validate UI configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if self.tick_interval <= 0:
            raise ValueError(f"tick_interval must be positive, got {self.tick_interval}")
        for name in ("use_colors", "show_queue"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(f"{name} must be true or false, got {value!r}")


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # One of LOG_LEVELS
    log_file: Optional[str] = None  # Default: ~/.local/share/tapedeck/tapedeck.log
    max_file_size_mb: int = 10
    backup_count: int = 5

    def validate(self) -> None:
        """Validate logging configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if self.level not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}, got {self.level!r}")
        if self.max_file_size_mb < 1:
            raise ValueError(f"max_file_size_mb must be at least 1, got {self.max_file_size_mb}")
        if self.backup_count < 0:
            raise ValueError(f"backup_count must not be negative, got {self.backup_count}")


@dataclass
class Config:
    """Main configuration object."""

    player: PlayerConfig = field(default_factory=PlayerConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "tapedeck"
    return Path.home() / ".config" / "tapedeck"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "tapedeck"
    return Path.home() / ".local" / "share" / "tapedeck"


def get_log_file_path(config: Config) -> Path:
    """Get the log file path, honouring the configured override."""
    if config.logging.log_file:
        return Path(config.logging.log_file).expanduser()
    return get_data_dir() / "tapedeck.log"


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Current working directory
    2. XDG_CONFIG_HOME/tapedeck (or ~/.config/tapedeck)
    """
    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# Tapedeck Configuration

[player]
# Initial volume (0-100)
volume = 100

# Volume change per up/down arrow press (1-100)
volume_step = 5

# Pressing left within this many seconds of a track start goes to the
# previous track; later presses restart the current track
restart_threshold = 2.0

[ui]
# Seconds between progress bar refreshes
tick_interval = 0.1

# Use colors in terminal output
use_colors = true

# Show the queue listing panel
show_queue = true

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/tapedeck/tapedeck.log)
# log_file = "/path/to/custom/tapedeck.log"

# Maximum log file size in MB before rotation
max_file_size_mb = 10

# Number of backup log files to keep
backup_count = 5
""".strip()


def _apply_env_overrides(config: Config) -> Config:
    """Override config values with TAPEDECK_* environment variables."""
    volume = os.environ.get("TAPEDECK_VOLUME")
    if volume:
        try:
            config.player.volume = int(volume)
        except ValueError:
            safe_print(f"Warning: ignoring invalid TAPEDECK_VOLUME={volume!r}", style="yellow")

    log_level = os.environ.get("TAPEDECK_LOG_LEVEL")
    if log_level:
        if log_level.upper() in LOG_LEVELS:
            config.logging.level = log_level.upper()
        else:
            safe_print(f"Warning: ignoring invalid TAPEDECK_LOG_LEVEL={log_level!r}", style="yellow")

    config.player.volume = max(0, min(100, config.player.volume))
    return config


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file or create default.

    Environment variables override TOML values:
    - TAPEDECK_VOLUME
    - TAPEDECK_LOG_LEVEL

    Args:
        config_path: Explicit config file; when given it is never created

    Returns:
        Loaded configuration (defaults on any parse error)
    """
    # Load .env file from config directory if it exists
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    explicit = config_path is not None
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        if not explicit:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w", encoding="utf-8") as f:
                f.write(create_default_config())
            logger.info(f"Created default configuration at: {config_path}")
        return _apply_env_overrides(Config())

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        safe_print(f"Error loading configuration from {config_path}: {e}", style="red")
        safe_print("Using default configuration.")
        return _apply_env_overrides(Config())

    config = Config()

    if "player" in toml_data:
        player_data = toml_data["player"]
        try:
            config.player = PlayerConfig(
                volume=int(player_data.get("volume", config.player.volume)),
                volume_step=int(player_data.get("volume_step", config.player.volume_step)),
                restart_threshold=float(
                    player_data.get("restart_threshold", config.player.restart_threshold)
                ),
            )
            config.player.validate()
        except (AttributeError, TypeError, ValueError) as e:
            safe_print(f"Warning: Invalid player configuration: {e}", style="yellow")
            safe_print("Using default player configuration.")
            config.player = PlayerConfig()

    if "ui" in toml_data:
        ui_data = toml_data["ui"]
        try:
            config.ui = UIConfig(
                tick_interval=float(ui_data.get("tick_interval", config.ui.tick_interval)),
                use_colors=ui_data.get("use_colors", config.ui.use_colors),
                show_queue=ui_data.get("show_queue", config.ui.show_queue),
            )
            config.ui.validate()
        except (AttributeError, TypeError, ValueError) as e:
            safe_print(f"Warning: Invalid ui configuration: {e}", style="yellow")
            safe_print("Using default ui configuration.")
            config.ui = UIConfig()

    if "logging" in toml_data:
        logging_data = toml_data["logging"]
        try:
            log_file = logging_data.get("log_file")
            if log_file:
                log_file = str(Path(log_file).expanduser())
            config.logging = LoggingConfig(
                level=str(logging_data.get("level", config.logging.level)).upper(),
                log_file=log_file,
                max_file_size_mb=int(
                    logging_data.get("max_file_size_mb", config.logging.max_file_size_mb)
                ),
                backup_count=int(logging_data.get("backup_count", config.logging.backup_count)),
            )
            config.logging.validate()
        except (AttributeError, TypeError, ValueError) as e:
            safe_print(f"Warning: Invalid logging configuration: {e}", style="yellow")
            safe_print("Using default logging configuration.")
            config.logging = LoggingConfig()

    return _apply_env_overrides(config)

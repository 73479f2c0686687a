"""Core infrastructure layer - no domain dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Logging setup (Loguru)
- Console management (Rich)
- Error taxonomy
"""

from .config import (
    Config,
    LoggingConfig,
    PlayerConfig,
    UIConfig,
    create_default_config,
    get_config_dir,
    get_config_path,
    get_data_dir,
    get_log_file_path,
    load_config,
)
from .console import get_console, get_error_console, print_error, safe_print
from .errors import (
    ChannelError,
    ConfigError,
    DecodeError,
    DeviceError,
    TapedeckError,
    TerminalError,
    TrackError,
)
from .output import setup_loguru

__all__ = [
    "Config",
    "LoggingConfig",
    "PlayerConfig",
    "UIConfig",
    "create_default_config",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "get_log_file_path",
    "load_config",
    "get_console",
    "get_error_console",
    "print_error",
    "safe_print",
    "ChannelError",
    "ConfigError",
    "DecodeError",
    "DeviceError",
    "TapedeckError",
    "TerminalError",
    "TrackError",
    "setup_loguru",
]

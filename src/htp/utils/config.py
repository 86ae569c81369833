"""
Configuration Management for the htp command line.

Loads configuration from environment variables with sensible defaults.
The parsing engine itself reads no configuration; these settings only shape
how the CLI builds its reference instant, whether it assumes the next day for
past times, and how it logs.
"""

import os
from datetime import tzinfo
from pathlib import Path
from typing import Optional

from dateutil import tz
from dotenv import load_dotenv

# Load .env file from project root (if it exists)
# This should run once when the module is imported
_project_root = Path(__file__).parent.parent.parent.parent  # htp/utils -> src/htp -> src -> root
_env_path = _project_root / ".env"
if _env_path.exists():
    load_dotenv(_env_path)

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def parse_bool(value: str, name: str) -> bool:
    """
    Parse a boolean environment value.

    Args:
        value: Raw value ("1", "true", "yes", "on" and their negatives)
        name: Variable name, used in the error message

    Raises:
        ValueError: If the value is not a recognized boolean
    """
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ValueError(f"Invalid boolean for {name}: '{value}'")


def resolve_timezone(name: Optional[str]) -> tzinfo:
    """
    Resolve an IANA timezone name, or the local zone when name is empty.

    Raises:
        ValueError: If the name is not a known timezone
    """
    if not name:
        return tz.tzlocal()
    zone = tz.gettz(name)
    if zone is None:
        raise ValueError(f"Unknown timezone: '{name}'")
    return zone


class HTPConfig:
    """
    Central configuration for the htp CLI.

    Loads settings from environment variables with fallback defaults.
    """

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        # Reference instant
        self.timezone_name: Optional[str] = os.getenv("HTP_TIMEZONE") or None
        self.timezone: tzinfo = resolve_timezone(self.timezone_name)

        # Interpretation
        self.assume_next_day: bool = parse_bool(
            os.getenv("HTP_ASSUME_NEXT_DAY", "false"), "HTP_ASSUME_NEXT_DAY"
        )

        # Logging
        self.log_level: str = os.getenv("HTP_LOG_LEVEL", "WARNING").upper()
        log_file = os.getenv("HTP_LOG_FILE")
        self.log_file: Optional[str] = os.path.expanduser(log_file) if log_file else None

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"<HTPConfig(\n"
            f"  timezone={self.timezone_name or 'local'},\n"
            f"  assume_next_day={self.assume_next_day},\n"
            f"  log_level={self.log_level},\n"
            f"  log_file={self.log_file}\n"
            f")>"
        )


# Global configuration instance
_config: Optional[HTPConfig] = None


def get_config() -> HTPConfig:
    """
    Get the global configuration instance (singleton pattern).

    Returns:
        The global HTPConfig instance

    Example:
        >>> from htp.utils.config import get_config
        >>> config = get_config()
        >>> print(config.log_level)
        WARNING
    """
    global _config
    if _config is None:
        _config = HTPConfig()
    return _config


def reload_config() -> HTPConfig:
    """
    Force reload of configuration from environment variables.

    Useful for testing or when environment changes at runtime.

    Returns:
        Newly created HTPConfig instance
    """
    global _config
    _config = HTPConfig()
    return _config

"""
Configuration management for the container classifier.
Reads settings from environment variables and an optional .env file
without exporting anything into the host process environment.
"""
import logging
import os
from typing import Optional
from dotenv import dotenv_values, find_dotenv

logger = logging.getLogger(__name__)


class Config:
    """Library configuration loaded from environment variables."""

    def __init__(self, env_file: Optional[str] = None):
        """
        Initialize configuration.

        Values already in the environment take precedence over the
        .env file. Invalid values are ignored with a warning.

        Args:
            env_file: Optional path to .env file
        """
        dotenv_path = env_file or find_dotenv(usecwd=True)
        settings = dict(dotenv_values(dotenv_path)) if dotenv_path else {}
        settings.update(os.environ)

        # Logging; None leaves the package logger alone
        self.log_level = _parse_log_level(settings.get('LOG_LEVEL'))

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(log_level={self.log_level})"


def _parse_log_level(value: Optional[str]) -> Optional[int]:
    """Accept a level name ("debug", "WARNING") or a number ("10")."""
    if not value or not value.strip():
        return None

    value = value.strip()
    if value.isdigit():
        return int(value)

    level = logging.getLevelName(value.upper())
    if isinstance(level, int):
        return level

    logger.warning("Ignoring invalid LOG_LEVEL %r", value)
    return None


# Global config instance
_config: Optional[Config] = None


def get_config(env_file: Optional[str] = None) -> Config:
    """
    Get or create global config instance (singleton).

    Args:
        env_file: Optional path to .env file

    Returns:
        Config instance
    """
    global _config
    if _config is None:
        _config = Config(env_file)
    return _config


def reset_config():
    """Reset global config instance (useful for testing)."""
    global _config
    _config = None

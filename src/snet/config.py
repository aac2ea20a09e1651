"""
Configuration management for snet4.

Loads output defaults from environment variables or a .env file.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from snet.ip.render import AddressFormat

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def env_locations() -> list[Path]:
    """Common locations for a .env file, in lookup order."""
    return [
        Path.home() / ".snet4" / ".env",
        Path.home() / ".config" / "snet4" / ".env",
        Path.cwd() / ".env",
    ]


def load_env_file() -> Path | None:
    """Load the first .env file found; existing variables are kept."""
    for env_path in env_locations():
        if env_path.exists():
            load_dotenv(env_path)
            return env_path
    return None


@dataclass
class SnetConfig:
    """Output and logging defaults for the command line."""

    # Listing format: dotted, binary or both
    address_format: AddressFormat = AddressFormat.DOTTED

    # Maximum entries per listing; None lists everything
    limit: int | None = None

    # Logging
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "SnetConfig":
        """Load configuration from environment variables."""
        config = cls()

        fmt = os.getenv("SNET4_FORMAT", "").strip().lower()
        if fmt:
            try:
                config.address_format = AddressFormat(fmt)
            except ValueError:
                logger.warning("Ignoring SNET4_FORMAT=%r, expected one of %s",
                               fmt, ", ".join(f.value for f in AddressFormat))

        limit = os.getenv("SNET4_LIMIT", "").strip()
        if limit:
            try:
                value = int(limit)
                if value < 0:
                    raise ValueError(limit)
                config.limit = value or None
            except ValueError:
                logger.warning("Ignoring SNET4_LIMIT=%r, expected a non-negative integer", limit)

        level = os.getenv("SNET4_LOG_LEVEL", "").strip().upper()
        if level:
            if level in LOG_LEVELS:
                config.log_level = level
            else:
                logger.warning("Ignoring SNET4_LOG_LEVEL=%r", level)

        return config


# Global config instance
_config: SnetConfig | None = None


def get_config() -> SnetConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        load_env_file()
        _config = SnetConfig.from_env()
    return _config


def set_config(config: SnetConfig | None) -> None:
    """Set the global configuration instance; None forces a reload."""
    global _config
    _config = config

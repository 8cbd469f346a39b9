"""
Configuration management for CIDR Manager.

Loads defaults from environment variables or a .env file.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Check common locations for .env
env_locations = [
    Path.home() / ".cidrmanager" / ".env",
    Path.home() / ".config" / "cidrmanager" / ".env",
    Path.cwd() / ".env",
]
for env_path in env_locations:
    if env_path.exists():
        load_dotenv(env_path)
        break

TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class CIDRConfig:
    """Runtime defaults for parsing and logging."""

    # Standardize non-standard input instead of rejecting it
    standardize: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: str = ""

    @classmethod
    def from_env(cls) -> "CIDRConfig":
        """Load configuration from environment variables."""
        return cls(
            standardize=os.getenv("CIDRMANAGER_STANDARDIZE", "").strip().lower() in TRUE_VALUES,
            log_level=os.getenv("CIDRMANAGER_LOG_LEVEL", "INFO"),
            log_file=os.getenv("CIDRMANAGER_LOG_FILE", ""),
        )


# Global config instance
_config: CIDRConfig | None = None


def get_config() -> CIDRConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = CIDRConfig.from_env()
    return _config


def set_config(config: CIDRConfig | None) -> None:
    """Set the global configuration instance (None reloads from env on next use)."""
    global _config
    _config = config

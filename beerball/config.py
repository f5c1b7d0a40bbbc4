"""
Tracker configuration.

Controls where the save file lives, how much undo history is kept and
how the API server is bound. All settings can be overridden via
environment variables.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


@dataclass
class BeerballConfig:
    """Configuration for the game tracker."""

    # Persistence
    storage_dir: Path = field(
        default_factory=lambda: Path(
            os.getenv("BEERBALL_STORAGE_DIR", "~/.beerball")
        ).expanduser()
    )
    autosave: bool = field(default_factory=lambda: _env_flag("BEERBALL_AUTOSAVE", "true"))

    # Undo depth
    history_limit: int = field(
        default_factory=lambda: int(os.getenv("BEERBALL_HISTORY_LIMIT", "20"))
    )

    # API server
    host: str = field(default_factory=lambda: os.getenv("BEERBALL_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("BEERBALL_PORT", "8000")))
    log_level: str = field(
        default_factory=lambda: os.getenv("BEERBALL_LOG_LEVEL", "INFO").upper()
    )

    @classmethod
    def from_env(cls) -> "BeerballConfig":
        """Create config from environment variables."""
        return cls()

    @property
    def log_level_value(self) -> int:
        """Numeric logging level."""
        return getattr(logging, self.log_level, logging.INFO)

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if self.history_limit < 1:
            errors.append("BEERBALL_HISTORY_LIMIT must be at least 1")
        if not 0 < self.port < 65536:
            errors.append("BEERBALL_PORT must be between 1 and 65535")
        if self.log_level not in LOG_LEVELS:
            errors.append(f"BEERBALL_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        if not self.host:
            errors.append("BEERBALL_HOST is required")
        return errors


# Singleton config instance
_config: Optional[BeerballConfig] = None


def get_config() -> BeerballConfig:
    """Get the global tracker configuration."""
    global _config
    if _config is None:
        _config = BeerballConfig.from_env()
    return _config


def set_config(config: Optional[BeerballConfig]) -> None:
    """
    Replace the global configuration.

    Used by the CLI after parsing arguments, and by tests (pass None to
    re-read the environment on next access).
    """
    global _config
    _config = config

"""Environment-level configuration.

Isolates the things that depend on the deployment environment (database location, log verbosity, starting board)
from the pure rule engine, which never reads any of it.
"""

import logging
import os
from dataclasses import dataclass

# 4x4 board: white on the first row, black on the last row.
DEFAULT_LAYOUT = "wwww/4/4/bbbb"


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Environment / deployment settings."""

    database_url: str = "sqlite:///captureboard.db"
    echo_sql: bool = False
    log_level: str = "INFO"
    default_layout: str = DEFAULT_LAYOUT

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables (unset variables keep the defaults)."""
        return cls(
            database_url=os.getenv("CAPTUREBOARD_DATABASE_URL", cls.database_url),
            echo_sql=_env_flag("CAPTUREBOARD_ECHO_SQL"),
            log_level=os.getenv("CAPTUREBOARD_LOG_LEVEL", cls.log_level).upper(),
            default_layout=os.getenv(
                "CAPTUREBOARD_DEFAULT_LAYOUT", cls.default_layout
            ),
        )


def get_settings() -> Settings:
    """Convenience accessor for environment settings."""
    return Settings.from_env()


def configure_logging(settings: Settings) -> None:
    """Set up the root logger once for an application entrypoint."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger().setLevel(settings.log_level)

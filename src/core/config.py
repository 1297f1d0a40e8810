"""Application configuration (read from the environment) and logging setup."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

REGISTRY_BACKENDS = ("memory", "sql")


@dataclass(frozen=True)
class Settings:
    registry_backend: str = "memory"
    database_url: str = "sqlite:///:memory:"
    sql_echo: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            registry_backend=os.environ.get("TICTACTOE_REGISTRY", "memory").lower(),
            database_url=os.environ.get("TICTACTOE_DATABASE_URL", "sqlite:///:memory:"),
            sql_echo=os.environ.get("TICTACTOE_SQL_ECHO", "0").lower()
            in ("1", "true", "yes"),
            log_level=os.environ.get("TICTACTOE_LOG_LEVEL", "INFO").upper(),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


def configure_logging(level: str = "INFO") -> None:
    """Unknown level names fall back to INFO."""
    numeric_level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)

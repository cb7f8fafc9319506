import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from logic.service_desk import DEFAULT_MAX_SIZE

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


@dataclass
class Settings:
    max_size: int = DEFAULT_MAX_SIZE
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Read settings from the environment, after loading a .env file if one exists."""
    load_dotenv(find_dotenv(usecwd=True))

    raw_size = os.getenv("SERVICE_DESK_MAX_SIZE")
    max_size = DEFAULT_MAX_SIZE
    if raw_size:
        try:
            max_size = int(raw_size)
        except ValueError:
            logging.warning(f"Invalid SERVICE_DESK_MAX_SIZE {raw_size!r}; using {DEFAULT_MAX_SIZE}")

    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    return Settings(max_size=max_size, log_level=log_level)


def configure_logging(level: str = "INFO") -> None:
    resolved = logging.getLevelName(level.upper())
    # Unknown names come back as "Level <name>"
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(level=resolved, format=LOG_FORMAT)

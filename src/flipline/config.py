import logging
import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def get_log_level() -> int:
    name = os.getenv("FLIPLINE_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)

    if not isinstance(level, int):
        raise ValueError(f'Invalid FLIPLINE_LOG_LEVEL "{name}"')

    return level


def get_log_format() -> str:
    return os.getenv("FLIPLINE_LOG_FORMAT", DEFAULT_LOG_FORMAT)


def setup_logging() -> None:
    logging.basicConfig(level=get_log_level(), format=get_log_format())

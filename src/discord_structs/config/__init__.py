"""Struct layer configuration"""

import logging
from dotenv import load_dotenv

from .loader import load_raw_config
from .core import Core

load_dotenv()

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Root logger setup belongs to the host; stay silent until it configures one.
logging.getLogger("discord_structs").addHandler(logging.NullHandler())


def configure_logging(level: int = logging.INFO) -> None:
    """Install the standard log format on the root logger for standalone use."""

    logging.basicConfig(format=LOG_FORMAT, datefmt=DATE_FORMAT, level=level)
    logging.getLogger("aiohttp").setLevel(logging.WARNING)


_RAW_CONFIG = load_raw_config()

core = Core(_RAW_CONFIG)


class Config:
    core = core


__all__ = ["core", "Config", "Core", "configure_logging", "load_raw_config", "LOG_FORMAT", "DATE_FORMAT"]

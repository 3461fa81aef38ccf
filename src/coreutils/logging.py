import logging
import os
from datetime import datetime

from .env import env_get

LOG_DIR = "logs"
DEFAULT_LEVEL = "INFO"


def resolve_level(level=None):
    """Return a usable logging level, falling back to INFO for unknown names"""
    if level is None:
        level = env_get("LOG_LEVEL", DEFAULT_LEVEL)
    if isinstance(level, int):
        return level
    level = str(level).strip().upper()
    if level not in logging.getLevelNamesMapping():
        return DEFAULT_LEVEL
    return level


def setup_logging(level=None):
    """Setup basic logging configuration"""
    level = resolve_level(level)

    os.makedirs(LOG_DIR, exist_ok=True)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        handlers=[
            logging.FileHandler(
                f"{LOG_DIR}/smws_{datetime.now().strftime('%Y-%m-%d')}.log"
            ),
            logging.StreamHandler(),
        ],
    )
    return logging.getLogger(__name__)

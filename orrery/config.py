"""Configuration: catalog override, logging and animation speed from environment."""

import logging
import os
from typing import Optional

from .constants import WALL_SECONDS_PER_EARTH_YEAR

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = 'INFO'


def get_catalog_path() -> Optional[str]:
    """Return path to an external body catalog CSV (ORRERY_CATALOG env var).

    Returns:
        Path string, or None to use the embedded table.
    """
    path = os.environ.get('ORRERY_CATALOG', '').strip()
    return path or None


def get_log_level() -> int:
    """Return logging level from ORRERY_LOG_LEVEL (name such as DEBUG, or a number).

    Returns:
        A logging level integer; INFO when unset or unknown.
    """
    raw = os.environ.get('ORRERY_LOG_LEVEL', DEFAULT_LOG_LEVEL).strip().upper()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw)
    if isinstance(level, int):
        return level
    logger.warning('Unknown ORRERY_LOG_LEVEL %r, using %s', raw, DEFAULT_LOG_LEVEL)
    return logging.INFO


def get_log_file() -> Optional[str]:
    """Return optional log file path (ORRERY_LOG_FILE env var)."""
    path = os.environ.get('ORRERY_LOG_FILE', '').strip()
    return path or None


def get_seconds_per_earth_year() -> float:
    """Return wall-clock seconds for one Earth orbit (ORRERY_SECONDS_PER_YEAR).

    Returns:
        A positive float; the default when unset, non-numeric or not positive.
    """
    raw = os.environ.get('ORRERY_SECONDS_PER_YEAR', '').strip()
    if not raw:
        return WALL_SECONDS_PER_EARTH_YEAR
    try:
        value = float(raw)
    except ValueError:
        value = 0.0
    if value <= 0.0:
        logger.warning(
            'Invalid ORRERY_SECONDS_PER_YEAR %r, using %.1f', raw, WALL_SECONDS_PER_EARTH_YEAR
        )
        return WALL_SECONDS_PER_EARTH_YEAR
    return value

"""Configuration: CLI log level and default time zone from environment."""

import logging
import os

logger = logging.getLogger(__name__)

# Env var overrides with sensible defaults.
LOG_LEVEL_NAMES = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
DEFAULT_ZONE_HOURS = 0.0


def get_log_level(default: int = logging.WARNING) -> int:
    """Return logging level (SOLAR_TOOLS_LOG env var or default).

    Parameters:
        default: Level used when the variable is unset or not a level name.

    Returns:
        A logging module level.
    """
    name = os.environ.get('SOLAR_TOOLS_LOG', '').strip().upper()
    if name in LOG_LEVEL_NAMES:
        return getattr(logging, name)
    return default


def get_default_zone() -> float:
    """Return default UTC offset in hours for local times (SOLAR_TOOLS_ZONE env var or 0).

    Returns:
        Offset in hours, east positive.
    """
    raw = os.environ.get('SOLAR_TOOLS_ZONE', '').strip()
    if not raw:
        return DEFAULT_ZONE_HOURS
    try:
        zone = float(raw)
    except ValueError:
        logger.warning('Ignoring invalid SOLAR_TOOLS_ZONE %r; using %s', raw, DEFAULT_ZONE_HOURS)
        return DEFAULT_ZONE_HOURS
    if not -14.0 <= zone <= 14.0:
        logger.warning('Ignoring out-of-range SOLAR_TOOLS_ZONE %r; using %s', raw, DEFAULT_ZONE_HOURS)
        return DEFAULT_ZONE_HOURS
    return zone

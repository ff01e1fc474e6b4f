"""Local mains frequency lookup from the system timezone."""

from functools import lru_cache

import pytz
from tzlocal import get_localzone_name

from . import config
from .logging_utils import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def _zone_countries() -> dict[str, str]:
    countries: dict[str, str] = {}
    for country, zones in pytz.country_timezones.items():
        for zone in zones:
            countries.setdefault(zone, country)
    return countries


def frequency_for_timezone(zone_name: str) -> float:
    """
    Get the mains frequency used in the country of an IANA timezone.

    Zones with no country (UTC, GMT, ``Etc/*``) and unknown zones fall back
    to 50 Hz. Japan is split between 50 and 60 Hz and reports 50 Hz.

    Args:
        zone_name: IANA timezone name, e.g. ``America/New_York``

    Returns:
        50.0 or 60.0
    """
    country = _zone_countries().get(zone_name)
    if country in config.MAINS_60HZ_COUNTRIES:
        return config.MAINS_60HZ_FREQUENCY
    return config.MAINS_DEFAULT_FREQUENCY


def detect_mains_frequency() -> float:
    """Get the mains frequency for the local timezone, 50 Hz if it is unknown."""
    try:
        zone_name = get_localzone_name()
    except (LookupError, OSError, ValueError) as e:
        logger.warning(f"Could not determine local timezone, assuming 50 Hz mains: {e}")
        return config.MAINS_DEFAULT_FREQUENCY

    if not zone_name:
        return config.MAINS_DEFAULT_FREQUENCY

    frequency = frequency_for_timezone(zone_name)
    logger.debug(f"Mains frequency {frequency:.0f} Hz for timezone {zone_name}")
    return frequency

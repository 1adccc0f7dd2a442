"""
Air quality at a point from the Open-Meteo Air Quality API.

Reports PM10 (fine dust) and PM2.5 (ultrafine dust) concentrations in µg/m³
with a status label for each:
  PM10:  0-30 Good, 31-80 Moderate, 81-150 Bad, 151+ Very Bad
  PM2.5: 0-15 Good, 16-35 Moderate, 36-75 Bad, 76+ Very Bad
"""
import logging

import requests

from config import settings
from services import http_session
from services.errors import ProviderError

logger = logging.getLogger(__name__)

# (upper bound inclusive, label)
PM10_LEVELS = [
    (30, 'Good'),
    (80, 'Moderate'),
    (150, 'Bad'),
]
PM25_LEVELS = [
    (15, 'Good'),
    (35, 'Moderate'),
    (75, 'Bad'),
]
WORST_LABEL = 'Very Bad'


def _label(value, levels):
    for upper, label in levels:
        if value <= upper:
            return label
    return WORST_LABEL


def fine_dust_status(pm10):
    return _label(pm10, PM10_LEVELS)


def ultrafine_dust_status(pm25):
    return _label(pm25, PM25_LEVELS)


def fetch_air_quality(lat, lng):
    """Get PM10/PM2.5 indices and status labels for a point."""
    try:
        r = http_session.get(settings.air_quality_url, params={
            'latitude': lat,
            'longitude': lng,
            'current': 'pm10,pm2_5',
        }, timeout=settings.http_timeout)
        r.raise_for_status()
        data = r.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning(f'Air quality fetch failed for {lat},{lng}: {e}')
        raise ProviderError('airQuality', f'Upstream request failed: {e}') from e

    current = data.get('current') or {}
    pm10 = current.get('pm10')
    pm25 = current.get('pm2_5')
    if pm10 is None or pm25 is None:
        raise ProviderError('airQuality', 'No PM10/PM2.5 reading for this location')

    fine = int(round(pm10))
    ultrafine = int(round(pm25))
    return {
        'fineDustIndex': fine,
        'ultrafineDustIndex': ultrafine,
        'fineDustStatus': fine_dust_status(fine),
        'ultrafineDustStatus': ultrafine_dust_status(ultrafine),
    }

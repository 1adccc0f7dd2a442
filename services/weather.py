import logging

import requests

from config import settings
from services import http_session
from services.errors import ProviderError

logger = logging.getLogger(__name__)

# Precipitation type codes reported as `condition`
NO_PRECIP = 0
RAIN = 1
RAIN_SNOW = 2
SNOW = 3
DRIZZLE = 5
FREEZING_DRIZZLE = 6
SNOW_FLURRY = 7

# Precipitation types that involve liquid water
RAIN_TYPES = {RAIN, RAIN_SNOW, DRIZZLE, FREEZING_DRIZZLE}

# WMO weather code -> precipitation type
WMO_PRECIP = {
    51: DRIZZLE, 53: DRIZZLE, 55: DRIZZLE,
    56: FREEZING_DRIZZLE, 57: FREEZING_DRIZZLE,
    61: RAIN, 63: RAIN, 65: RAIN,
    66: RAIN_SNOW, 67: RAIN_SNOW,
    71: SNOW, 73: SNOW, 75: SNOW, 77: SNOW,
    80: RAIN, 81: RAIN, 82: RAIN,
    85: SNOW_FLURRY, 86: SNOW_FLURRY,
    95: RAIN, 96: RAIN, 99: RAIN,
}


def precipitation_type(weather_code):
    if weather_code is None:
        return NO_PRECIP
    return WMO_PRECIP.get(int(weather_code), NO_PRECIP)


def _build_weather(current):
    temperature = current.get('temperature_2m')
    wind_speed = current.get('wind_speed_10m')
    if temperature is None or wind_speed is None:
        raise ProviderError('weather', 'Incomplete current conditions in response')

    condition = precipitation_type(current.get('weather_code'))
    rain_mm = (current.get('rain') or 0) + (current.get('showers') or 0)

    return {
        'temperature': float(temperature),
        'condition': condition,
        'windSpeed': float(wind_speed),
        'rainWarning': condition in RAIN_TYPES or rain_mm >= settings.rain_warning_mm,
        'windWarning': wind_speed >= settings.wind_warning_ms,
    }


def fetch_weather(lat, lng):
    """Current temperature, precipitation type and wind alerts at a point."""
    try:
        r = http_session.get(settings.weather_url, params={
            'latitude': lat,
            'longitude': lng,
            'current': 'temperature_2m,rain,showers,weather_code,wind_speed_10m',
            'wind_speed_unit': 'ms',
            'timezone': 'auto',
        }, timeout=settings.http_timeout)
        r.raise_for_status()
        data = r.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning(f'Weather fetch failed for {lat},{lng}: {e}')
        raise ProviderError('weather', f'Upstream request failed: {e}') from e

    return _build_weather(data.get('current') or {})

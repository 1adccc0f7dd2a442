import logging

import requests

from config import settings
from services import http_session
from services.errors import ProviderError

logger = logging.getLogger(__name__)


def fetch_sun_times(lat, lng):
    """Today's sunrise/sunset as local 'h:mm:ss AM' strings."""
    params = {'lat': lat, 'lng': lng, 'date': 'today', 'formatted': 1}
    if settings.sun_timezone:
        params['tzid'] = settings.sun_timezone

    try:
        r = http_session.get(settings.sun_times_url, params=params, timeout=settings.http_timeout)
        r.raise_for_status()
        data = r.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning(f'Sun times fetch failed for {lat},{lng}: {e}')
        raise ProviderError('sunTimes', f'Upstream request failed: {e}') from e

    status = data.get('status')
    if status != 'OK':
        raise ProviderError('sunTimes', f'Upstream returned status {status}')

    results = data.get('results') or {}
    if not results.get('sunrise') or not results.get('sunset'):
        raise ProviderError('sunTimes', 'Missing sunrise/sunset in response')

    return {
        'sunrise': results['sunrise'],
        'sunset': results['sunset'],
    }

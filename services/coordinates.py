import logging
from collections import namedtuple

import requests

from config import settings
from services import http_session
from services.errors import CoordinateResolutionError

logger = logging.getLogger(__name__)

Coordinates = namedtuple('Coordinates', ['lat', 'lng'])


def _score(res):
    """Lower is better: trails and summits beat parks, parks beat towns."""
    cls = res.get('class', '')
    typ = res.get('type', '')
    if cls == 'route' and typ in ('hiking', 'foot'):
        return 0
    if cls == 'highway' and typ in ('path', 'footway', 'track'):
        return 1
    if cls == 'natural' and typ in ('peak', 'mountain_range', 'ridge', 'volcano'):
        return 2
    if cls == 'leisure' or 'park' in typ or 'forest' in typ:
        return 3
    if cls == 'boundary' and 'national' in res.get('display_name', '').lower():
        return 4
    return 5


def resolve_coordinates(trail_name):
    """Map a trail name to Coordinates using Nominatim.

    Raises CoordinateResolutionError when the name is unknown or the
    geocoder cannot be reached.
    """
    params = {'q': trail_name, 'format': 'json', 'limit': 5}
    if settings.nominatim_country_codes:
        params['countrycodes'] = settings.nominatim_country_codes

    try:
        r = http_session.get(settings.nominatim_url, params=params, timeout=settings.http_timeout)
        r.raise_for_status()
        results = r.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning(f'Geocoding {trail_name!r} failed: {e}')
        raise CoordinateResolutionError(f'Geocoder unavailable: {e}') from e

    if not results:
        raise CoordinateResolutionError(f"Trail '{trail_name}' not found")

    best = min(results, key=_score)
    try:
        return Coordinates(lat=float(best['lat']), lng=float(best['lon']))
    except (KeyError, TypeError, ValueError) as e:
        raise CoordinateResolutionError(f"Malformed geocoder result for '{trail_name}'") from e

"""
Mountain info: one request, three providers.

Resolves a trail name to coordinates, then fires the weather, air quality
and sun time lookups in parallel. Every provider is allowed to settle before
the response is built; a failed provider shows up as null plus an entry in
`errors` and never takes its siblings down with it.
"""
import time
import logging
from collections import namedtuple
from concurrent.futures import ThreadPoolExecutor, wait
from functools import partial

from flask import Blueprint, request, jsonify

from config import settings
from services.coordinates import resolve_coordinates
from services.weather import fetch_weather
from services.airquality import fetch_air_quality
from services.suntime import fetch_sun_times

logger = logging.getLogger(__name__)

mountain_info_bp = Blueprint('mountain_info', __name__)

# Outcome of one provider call: exactly one of value/error is meaningful
ProviderResult = namedtuple('ProviderResult', ['name', 'value', 'error'])


def _describe(exc):
    return str(exc) or exc.__class__.__name__


def settle_all(calls, timeout=None):
    """Run (name, callable) pairs concurrently and wait for all to settle.

    Each call gets its own worker in a pool owned by this invocation, so
    concurrent requests never queue behind one another. Returns
    ProviderResults in the order the calls were given. A call still pending
    after `timeout` seconds is reported as failed; it is not cancelled and
    keeps running on its worker.
    """
    executor = ThreadPoolExecutor(max_workers=max(1, len(calls)))
    try:
        futures = [(name, executor.submit(fn)) for name, fn in calls]
        wait([f for _, f in futures], timeout=timeout)
    finally:
        executor.shutdown(wait=False)

    results = []
    for name, future in futures:
        if not future.done():
            logger.warning(f'{name} provider still pending after {timeout}s')
            results.append(ProviderResult(name, None, f'timed out after {timeout:g}s'))
            continue
        exc = future.exception()
        if exc is not None:
            logger.warning(f'{name} provider failed: {exc}')
            results.append(ProviderResult(name, None, _describe(exc)))
        else:
            results.append(ProviderResult(name, future.result(), None))
    return results


def merge_results(results):
    """Build the response mapping (fixed key order) and the error list."""
    data = {}
    errors = []
    for result in results:
        data[result.name] = result.value
        if result.error is not None:
            errors.append(f'{result.name} API Error: {result.error}')
    return data, errors


@mountain_info_bp.route('/mountain-info')
def api_mountain_info():
    trail_name = (request.args.get('trailName') or '').strip()
    if not trail_name:
        return jsonify({'message': 'trailName is required.'}), 400

    try:
        lat, lng = resolve_coordinates(trail_name)

        start = time.monotonic()
        results = settle_all([
            ('weather', partial(fetch_weather, lat, lng)),
            ('airQuality', partial(fetch_air_quality, lat, lng)),
            ('sunTimes', partial(fetch_sun_times, lat, lng)),
        ], timeout=settings.fanout_timeout)
        elapsed_ms = (time.monotonic() - start) * 1000
        logger.info(f'Provider fan-out for {trail_name!r} ({lat:.4f},{lng:.4f}) took {elapsed_ms:.0f}ms')

        data, errors = merge_results(results)
        if errors:
            return jsonify({'message': 'Errors occurred', 'errors': errors, 'data': data}), 500
        return jsonify(data)
    except Exception:
        logger.exception(f'mountain-info request for {trail_name!r} failed')
        return jsonify({'message': 'Internal Server Error'}), 500

from unittest.mock import MagicMock

import pytest
import requests

from app import create_app
from services.coordinates import Coordinates
from services import mountain_info


@pytest.fixture
def app():
    return create_app({'TESTING': True})


@pytest.fixture
def client(app):
    return app.test_client()


def fake_response(payload=None, status=200):
    """Stand-in for a requests.Response carrying a JSON payload."""
    r = MagicMock()
    r.status_code = status
    r.json.return_value = payload
    if status >= 400:
        r.raise_for_status.side_effect = requests.HTTPError(f'{status} Server Error')
    return r


@pytest.fixture
def http_get(monkeypatch):
    """Patch the shared session's GET; set .return_value or .side_effect."""
    from services import http_session
    mock = MagicMock()
    monkeypatch.setattr(http_session, 'get', mock)
    return mock


WEATHER = {
    'temperature': 5.6,
    'condition': 0,
    'windSpeed': 0.2,
    'rainWarning': False,
    'windWarning': False,
}
AIR_QUALITY = {
    'fineDustIndex': 32,
    'ultrafineDustIndex': 23,
    'fineDustStatus': 'Moderate',
    'ultrafineDustStatus': 'Moderate',
}
SUN_TIMES = {'sunrise': '7:26:54 AM', 'sunset': '5:15:33 PM'}


@pytest.fixture
def providers(monkeypatch):
    """Replace the resolver and the three providers with call-counting mocks."""
    mocks = {
        'resolve': MagicMock(return_value=Coordinates(37.660934, 126.993247)),
        'weather': MagicMock(return_value=dict(WEATHER)),
        'airQuality': MagicMock(return_value=dict(AIR_QUALITY)),
        'sunTimes': MagicMock(return_value=dict(SUN_TIMES)),
    }
    monkeypatch.setattr(mountain_info, 'resolve_coordinates', mocks['resolve'])
    monkeypatch.setattr(mountain_info, 'fetch_weather', mocks['weather'])
    monkeypatch.setattr(mountain_info, 'fetch_air_quality', mocks['airQuality'])
    monkeypatch.setattr(mountain_info, 'fetch_sun_times', mocks['sunTimes'])
    return mocks

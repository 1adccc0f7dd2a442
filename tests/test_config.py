from app import create_app
from config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv('MOUNTAIN_INFO_FANOUT_TIMEOUT', raising=False)
    s = Settings(_env_file=None)
    assert s.fanout_timeout == 15.0
    assert s.http_timeout == 10.0
    assert s.sun_timezone == 'Asia/Seoul'


def test_env_override_is_applied(monkeypatch):
    monkeypatch.setenv('MOUNTAIN_INFO_FANOUT_TIMEOUT', '2.5')
    monkeypatch.setenv('MOUNTAIN_INFO_PORT', '9000')
    s = Settings(_env_file=None)
    assert s.fanout_timeout == 2.5
    assert s.port == 9000


def test_flask_config_uses_upper_case_keys(monkeypatch):
    monkeypatch.setenv('MOUNTAIN_INFO_WIND_WARNING_MS', '20')
    config = Settings(_env_file=None).flask_config()
    assert config['WIND_WARNING_MS'] == 20.0
    assert 'FANOUT_TIMEOUT' in config


def test_app_carries_settings():
    app = create_app({'TESTING': True})
    assert app.config['FANOUT_TIMEOUT'] > 0
    assert app.config['COMPRESS_MIMETYPES'] == ['application/json']
    assert app.config['TESTING'] is True

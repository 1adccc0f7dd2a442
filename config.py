"""
Application configuration.

Defaults below can be overridden with MOUNTAIN_INFO_-prefixed environment
variables (e.g. MOUNTAIN_INFO_FANOUT_TIMEOUT=5) or a .env file.
"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix='MOUNTAIN_INFO_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
    )

    # Upstream APIs
    nominatim_url: str = 'https://nominatim.openstreetmap.org/search'
    nominatim_country_codes: str = Field(default='', description="e.g. 'kr', empty = worldwide")
    weather_url: str = 'https://api.open-meteo.com/v1/forecast'
    air_quality_url: str = 'https://air-quality-api.open-meteo.com/v1/air-quality'
    sun_times_url: str = 'https://api.sunrise-sunset.org/json'
    sun_timezone: str = 'Asia/Seoul'
    user_agent: str = 'MountainInfo/1.0'

    # Timeouts (seconds)
    http_timeout: float = 10.0
    fanout_timeout: float = 15.0

    # Weather alert thresholds
    wind_warning_ms: float = 14.0
    rain_warning_mm: float = 1.0

    log_level: str = 'INFO'
    host: str = '0.0.0.0'
    port: int = 8095

    def flask_config(self):
        """Settings as upper-case keys for app.config."""
        return {name.upper(): value for name, value in self.model_dump().items()}


settings = Settings()

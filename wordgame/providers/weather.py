from __future__ import annotations
from abc import ABC, abstractmethod

from ..config import Settings
from ..schemas import Weather
from ..upstream import UpstreamClient

BARCELONA = { 'city': 'Barcelona', 'latitude': 41.3874, 'longitude': 2.1686 }

class WeatherProvider(ABC):
    """Current temperature for a fixed city.

    ``fetch`` returns the raw upstream payload; ``shape`` maps it to
    ``Weather`` without I/O so each provider can be tested on canned data.
    """

    city: str = BARCELONA['city']

    @abstractmethod
    async def fetch(self, client: UpstreamClient) -> dict: ...

    @abstractmethod
    def shape(self, payload: dict) -> Weather: ...

    async def current(self, client: UpstreamClient) -> Weather:
        return self.shape(await self.fetch(client))

class OpenWeatherMapProvider(WeatherProvider):
    def __init__(self, api_key: str, url: str):
        self.api_key = api_key
        self.url = url

    async def fetch(self, client: UpstreamClient) -> dict:
        params = { 'q': self.city, 'units': 'metric', 'appid': self.api_key }
        return await client.get_json(self.url, params=params)

    def shape(self, payload: dict) -> Weather:
        return Weather(city=payload.get('name') or self.city, temperature=payload['main']['temp'])

class OpenMeteoProvider(WeatherProvider):
    """Key-less provider; temperature comes from the ``current_weather`` block."""

    def __init__(self, url: str):
        self.url = url

    async def fetch(self, client: UpstreamClient) -> dict:
        params = {
            'latitude': BARCELONA['latitude'],
            'longitude': BARCELONA['longitude'],
            'current_weather': 'true',
        }
        return await client.get_json(self.url, params=params)

    def shape(self, payload: dict) -> Weather:
        return Weather(city=self.city, temperature=payload['current_weather']['temperature'])

def select_provider(settings: Settings) -> WeatherProvider:
    if settings.weather_api_key:
        return OpenWeatherMapProvider(settings.weather_api_key, settings.openweather_api_url)
    return OpenMeteoProvider(settings.open_meteo_api_url)

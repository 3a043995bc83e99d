from __future__ import annotations
from fastapi import Request

from .config import Settings
from .dictionary import WordStore
from .providers.weather import WeatherProvider
from .upstream import UpstreamClient

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_store(request: Request) -> WordStore:
    return request.app.state.store

def get_client(request: Request) -> UpstreamClient:
    return request.app.state.client

def get_events(request: Request):
    return request.app.state.events

def get_weather(request: Request) -> WeatherProvider:
    return request.app.state.weather

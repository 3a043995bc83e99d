from __future__ import annotations
import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_WORDS_FILE = PACKAGE_DIR / 'data' / 'words.json'

# Fixed for the process lifetime; order is part of the API.
SUPPORTED_LANGUAGES = ('es', 'en', 'fr', 'de', 'it', 'pt', 'nl', 'zh', 'ja', 'ko')

class Settings(BaseModel):
    port: int = 3000
    host: str = '0.0.0.0'
    words_file: Path = DEFAULT_WORDS_FILE
    weather_api_key: Optional[str] = None
    static_dir: Path = Path('public')
    log_level: str = 'INFO'
    http_timeout: float = 10.0

    # Upstream endpoints
    word_api_url: str = 'https://random-words-api.kushcreates.com/api'
    joke_api_url: str = 'https://api.chucknorris.io/jokes/random'
    pokemon_api_url: str = 'https://pokeapi.co/api/v2/pokemon'
    trivia_api_url: str = 'https://opentdb.com/api.php'
    openweather_api_url: str = 'https://api.openweathermap.org/data/2.5/weather'
    open_meteo_api_url: str = 'https://api.open-meteo.com/v1/forecast'

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """Build settings from environment variables, ignoring unset or blank ones."""
        env = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            raw = env.get(name.upper())
            if raw is not None and raw.strip():
                values[name] = raw.strip()
        return cls(**values)

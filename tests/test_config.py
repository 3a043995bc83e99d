import pytest
from pydantic import ValidationError

from wordgame.config import DEFAULT_WORDS_FILE, SUPPORTED_LANGUAGES, Settings

def test_defaults():
    settings = Settings.from_env({})
    assert settings.port == 3000
    assert settings.weather_api_key is None
    assert settings.words_file == DEFAULT_WORDS_FILE
    assert DEFAULT_WORDS_FILE.exists()

def test_from_env():
    settings = Settings.from_env({ 'PORT': '8080', 'WEATHER_API_KEY': '  ', 'WORDS_FILE': '/tmp/w.json' })
    assert settings.port == 8080
    assert settings.weather_api_key is None
    assert str(settings.words_file) == '/tmp/w.json'

def test_bad_port():
    with pytest.raises(ValidationError):
        Settings.from_env({ 'PORT': 'abc' })

def test_languages():
    assert len(SUPPORTED_LANGUAGES) == 10
    assert SUPPORTED_LANGUAGES[0] == 'es'

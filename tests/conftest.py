import json

import httpx
import pytest
from fastapi.testclient import TestClient

from wordgame.config import Settings
from wordgame.factory import create_app
from wordgame.upstream import UpstreamClient

class FakeUpstream:
    """Callable for ``httpx.MockTransport``: canned replies keyed by URL prefix."""

    def __init__(self):
        self.replies = {}
        self.requests = []

    def reply(self, prefix, status=200, json=None, content=None, error=None):
        self.replies[prefix] = (status, json, content, error)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)
        for prefix, (status, body, content, error) in self.replies.items():
            if url.startswith(prefix):
                if error is not None:
                    raise error(f'cannot reach {prefix}', request=request)
                if content is not None:
                    return httpx.Response(status, content=content)
                return httpx.Response(status, json=body)
        return httpx.Response(404, json={ 'detail': 'unmocked' })

class FakeSio:
    def __init__(self):
        self.emitted = []

    async def emit(self, event, data=None, **kwargs):
        self.emitted.append((event, data, kwargs))

@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / 'words.json'
    path.write_text(json.dumps(['gato', 'perro', 'pez']), encoding='utf-8')
    return path

@pytest.fixture
def settings(tmp_path, words_file):
    return Settings(
        words_file=words_file,
        static_dir=tmp_path / 'public',
        word_api_url='http://words.test/api',
        joke_api_url='http://jokes.test/jokes/random',
        pokemon_api_url='http://poke.test/api/v2/pokemon',
        trivia_api_url='http://trivia.test/api.php',
        openweather_api_url='http://owm.test/data/2.5/weather',
        open_meteo_api_url='http://meteo.test/v1/forecast',
    )

@pytest.fixture
def upstream():
    return FakeUpstream()

@pytest.fixture
def sio():
    return FakeSio()

@pytest.fixture
def app(settings, upstream, sio):
    http = httpx.AsyncClient(transport=httpx.MockTransport(upstream))
    return create_app(settings, client=UpstreamClient(http), sio=sio)

@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c

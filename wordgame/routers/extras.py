from __future__ import annotations
import logging
from typing import Any, Awaitable, Callable, TypeVar

from fastapi import APIRouter, Depends

from ..config import Settings
from ..deps import get_client, get_settings, get_weather
from ..errors import TransportError, UpstreamError
from ..proxies import TRIVIA_AMOUNT, TRIVIA_HISTORY_CATEGORY, shape_joke, shape_pokemon, shape_trivia
from ..providers.weather import WeatherProvider
from ..schemas import Joke, Pokemon, Trivia, Weather
from ..upstream import UpstreamClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/api/v3')

T = TypeVar('T')

async def _proxy(call: Callable[[], Awaitable[T]], upstream_msg: str, failure_msg: str) -> T:
    """Run one upstream call and its reshaping, mapping failures to our errors.

    Upstream statuses are forwarded; anything else becomes a 500.
    """
    try:
        return await call()
    except UpstreamError as exc:
        raise UpstreamError(upstream_msg, exc.status_code) from exc
    except TransportError as exc:
        raise TransportError(failure_msg) from exc
    except (AttributeError, KeyError, TypeError, IndexError, ValueError) as exc:
        logger.warning('Unexpected upstream payload: %r', exc)
        raise TransportError(failure_msg) from exc

@router.get('/jokes/chucknorris', response_model=Joke)
async def chuck_norris_joke(
    client: UpstreamClient = Depends(get_client),
    settings: Settings = Depends(get_settings),
):
    async def call() -> Joke:
        return shape_joke(await client.get_json(settings.joke_api_url))
    return await _proxy(call, 'Error al obtener el chiste', 'Error interno al obtener el chiste')

@router.get('/pokemon/{pokemon_id}', response_model=Pokemon)
async def pokemon(
    pokemon_id: str,
    client: UpstreamClient = Depends(get_client),
    settings: Settings = Depends(get_settings),
):
    url = f"{settings.pokemon_api_url.rstrip('/')}/{pokemon_id.strip().lower()}"

    async def call() -> Pokemon:
        return shape_pokemon(await client.get_json(url))
    return await _proxy(call, 'Pokémon no encontrado', 'Error al obtener el Pokémon')

@router.get('/trivia/history', response_model=Trivia)
async def history_trivia(
    client: UpstreamClient = Depends(get_client),
    settings: Settings = Depends(get_settings),
):
    params: dict[str, Any] = {
        'amount': TRIVIA_AMOUNT,
        'category': TRIVIA_HISTORY_CATEGORY,
        'type': 'multiple',
    }

    async def call() -> Trivia:
        return shape_trivia(await client.get_json(settings.trivia_api_url, params=params))
    return await _proxy(call, 'Error al obtener las preguntas', 'Error interno al obtener las preguntas')

@router.get('/weather/barcelona', response_model=Weather)
async def barcelona_weather(
    client: UpstreamClient = Depends(get_client),
    weather: WeatherProvider = Depends(get_weather),
):
    return await _proxy(
        lambda: weather.current(client),
        'Error al obtener el clima',
        'Error interno al obtener el clima',
    )

from __future__ import annotations
import logging
from typing import Optional

from fastapi import APIRouter, Depends

from ..config import SUPPORTED_LANGUAGES, Settings
from ..deps import get_client, get_events, get_settings, get_store
from ..dictionary import WordStore, parse_length
from ..errors import NotFound, TransportError, UpstreamError, ValidationError
from ..proxies import first_generated_word
from ..schemas import LanguagesResponse, WordListResponse, WordResponse
from ..upstream import UpstreamClient

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_LENGTH = 5
DEFAULT_LANG = 'es'

@router.get('/api/v1/words', response_model=WordResponse)
async def random_word(length: Optional[str] = None, store: WordStore = Depends(get_store)):
    word = store.random_word(parse_length(length))
    if word is None:
        raise NotFound('Not Found')
    return WordResponse(word=word)

@router.get('/api/v1/words/all', response_model=WordListResponse)
async def all_words(store: WordStore = Depends(get_store)):
    words = store.snapshot()
    return WordListResponse(words=words, total=len(words))

@router.get('/api/v2/languages', response_model=LanguagesResponse)
async def languages():
    return LanguagesResponse(languages=list(SUPPORTED_LANGUAGES))

@router.get('/api/v2/words', response_model=WordResponse)
async def external_word(
    length: Optional[str] = None,
    lang: Optional[str] = None,
    store: WordStore = Depends(get_store),
    client: UpstreamClient = Depends(get_client),
    events=Depends(get_events),
    settings: Settings = Depends(get_settings),
):
    if lang is None:
        lang = DEFAULT_LANG
    if lang not in SUPPORTED_LANGUAGES:
        raise ValidationError('Idioma no soportado')
    size = parse_length(length)
    if size is None:
        size = DEFAULT_LENGTH

    params = { 'language': lang, 'length': size, 'words': 1 }
    try:
        payload = await client.get_json(settings.word_api_url, params=params)
    except UpstreamError as exc:
        raise NotFound('Error en la API externa') from exc
    except TransportError as exc:
        raise TransportError('Error al obtener la palabra externa') from exc

    if not isinstance(payload, list) or not payload:
        raise NotFound('No se encontró palabra')

    try:
        word = first_generated_word(payload)
        added = await store.add(word)
    except (KeyError, TypeError, IndexError, OSError) as exc:
        logger.warning('Could not register generated word: %s', exc)
        raise TransportError('Error al obtener la palabra externa') from exc

    if added:
        await events.word_added(word, len(store))
    return WordResponse(word=word)

from __future__ import annotations
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

import socketio
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings
from .dictionary import WordStore
from .errors import ApiError, route_not_found_body
from .managers.events import EventManager, NullEventManager
from .providers.weather import WeatherProvider, select_provider
from .routers import extras, words
from .upstream import UpstreamClient

logger = logging.getLogger(__name__)

def create_app(
    settings: Optional[Settings] = None,
    store: Optional[WordStore] = None,
    client: Optional[UpstreamClient] = None,
    weather: Optional[WeatherProvider] = None,
    sio: Optional[socketio.AsyncServer] = None,
) -> FastAPI:
    """Build the REST app. The word file is read here, before any request is served."""
    settings = settings or Settings()
    store = store if store is not None else WordStore.load(settings.words_file)
    client = client or UpstreamClient(timeout=settings.http_timeout)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await client.aclose()

    app = FastAPI(title="Word Game Server", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store
    app.state.client = client
    app.state.weather = weather or select_provider(settings)
    app.state.events = EventManager(sio) if sio is not None else NullEventManager()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=['*'],
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    @app.middleware('http')
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed = (time.perf_counter() - started) * 1000
        logger.info('%s %s %s %.1f ms', request.method, request.url.path, response.status_code, elapsed)
        return response

    @app.exception_handler(ApiError)
    async def api_error(request: Request, exc: ApiError):
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def route_not_found(request: Request, exc: StarletteHTTPException):
        # Unknown paths and wrong methods look the same to clients
        if exc.status_code in (404, 405):
            return JSONResponse(route_not_found_body(), status_code=404)
        return await http_exception_handler(request, exc)

    app.include_router(words.router)
    app.include_router(extras.router)

    # Mounted last so API routes win; misses fall through to route_not_found
    if settings.static_dir.is_dir():
        app.mount('/', StaticFiles(directory=settings.static_dir, html=True), name='static')

    return app

def register_socket_events(sio: socketio.AsyncServer, app: FastAPI):
    @sio.event
    async def connect(sid, environ, auth=None):
        await app.state.events.send_total(sid, len(app.state.store))

    @sio.on('ping')
    async def on_ping(sid):
        await sio.emit('pong', to=sid)

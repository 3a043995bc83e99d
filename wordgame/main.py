from __future__ import annotations
import logging

import socketio
import uvicorn

from .config import Settings
from .factory import create_app, register_socket_events
from .log import setup_logging

logger = logging.getLogger(__name__)

settings = Settings.from_env()
setup_logging(settings.log_level)

# Socket.IO server (ASGI)
sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins='*')
app = create_app(settings, sio=sio)
register_socket_events(sio, app)

# Export ASGI app for uvicorn
application = socketio.ASGIApp(sio, other_asgi_app=app)

def run():
    logger.info('Server running on http://localhost:%d', settings.port)
    uvicorn.run(application, host=settings.host, port=settings.port, log_level=settings.log_level.lower())

if __name__ == '__main__':
    run()

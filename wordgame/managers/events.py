from __future__ import annotations
import logging

from ..schemas import WordAddedEvent

logger = logging.getLogger(__name__)

class EventManager:
    """Pushes dataset changes to connected Socket.IO clients."""

    def __init__(self, sio):
        self.sio = sio

    async def word_added(self, word: str, total: int):
        event = WordAddedEvent(word=word, total=total)
        await self.sio.emit('words:added', event.model_dump())

    async def send_total(self, sid: str, total: int):
        await self.sio.emit('words:total', { 'total': total }, to=sid)

class NullEventManager:
    """Used when no realtime server is attached (tests, embedding)."""

    async def word_added(self, word: str, total: int):
        logger.debug('No event server attached, dropping words:added for %r', word)

    async def send_total(self, sid: str, total: int):
        pass

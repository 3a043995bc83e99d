from __future__ import annotations
import logging

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'

def setup_logging(level: str = 'INFO') -> None:
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(level.upper())

from __future__ import annotations
import asyncio
import json
import logging
import os
import random
import re
from pathlib import Path
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

# Leading integer, the way a lenient query-string parser reads "7" or "7abc"
_INT_PREFIX = re.compile(r'\s*([+-]?[0-9]+)')

def parse_length(raw: Optional[str]) -> Optional[int]:
    if not raw:
        return None
    match = _INT_PREFIX.match(raw)
    if not match:
        return None
    return int(match.group(1))

class DatasetError(Exception):
    pass

class WordStore:
    """Ordered, file-backed word list.

    Loaded once at startup. The only mutation is ``add``, which appends a word
    not already present (case-insensitively) and rewrites the whole file.
    """

    def __init__(self, path: Union[str, Path], words: Optional[List[str]] = None):
        self.path = Path(path)
        self._words: List[str] = list(words or [])
        self._lock = asyncio.Lock()

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'WordStore':
        path = Path(path)
        if not path.exists():
            logger.warning('Word file %s not found, starting with an empty dataset', path)
            return cls(path)
        try:
            with open(path, encoding='utf-8') as fh:
                data = json.load(fh)
        except json.JSONDecodeError as exc:
            raise DatasetError(f'{path} is not valid JSON: {exc}') from exc
        if not isinstance(data, list) or not all(isinstance(w, str) for w in data):
            raise DatasetError(f'{path} must hold a JSON array of strings')
        logger.info('Loaded %d words from %s', len(data), path)
        return cls(path, data)

    def __len__(self) -> int:
        return len(self._words)

    def snapshot(self) -> List[str]:
        return list(self._words)

    def candidates(self, length: Optional[int] = None) -> List[str]:
        if length is None:
            return list(self._words)
        return [w for w in self._words if len(w) == length]

    def random_word(self, length: Optional[int] = None) -> Optional[str]:
        pool = self.candidates(length)
        if not pool:
            return None
        return random.choice(pool)

    def contains(self, word: str) -> bool:
        needle = word.lower()
        return any(w.lower() == needle for w in self._words)

    async def add(self, word: str) -> bool:
        """Append ``word`` if new and persist. Returns True when the dataset grew."""
        async with self._lock:
            if self.contains(word):
                return False
            self._words.append(word)
            try:
                self._persist()
            except OSError:
                self._words.pop()
                raise
        logger.info('Added word %r (total %d)', word, len(self._words))
        return True

    def _persist(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + '.tmp')
        with open(tmp, 'w', encoding='utf-8') as fh:
            json.dump(self._words, fh, ensure_ascii=False, indent=2)
        os.replace(tmp, self.path)

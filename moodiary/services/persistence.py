from __future__ import annotations

import logging
from typing import Protocol

from moodiary.db.engine import connect
from moodiary.db.repositories.blobs import get_blob, set_blob

logger = logging.getLogger(__name__)


class PersistenceAdapter(Protocol):
    async def load(self, key: str) -> str | None: ...

    async def save(self, key: str, blob: str) -> None: ...


class SqlitePersistence:
    """Key-value blobs in the ``journal_blobs`` table.

    Failures are logged and swallowed: ``load`` answers None, ``save`` drops
    the write. The caller's in-memory state stays as it is.
    """

    def __init__(self, db_path: str) -> None:
        self._db_path = db_path

    async def load(self, key: str) -> str | None:
        try:
            db = await connect(self._db_path)
            try:
                return await get_blob(db, key)
            finally:
                await db.close()
        except Exception:
            logger.exception("Failed to load %s", key)
            return None

    async def save(self, key: str, blob: str) -> None:
        try:
            db = await connect(self._db_path)
            try:
                await set_blob(db, key, blob)
            finally:
                await db.close()
        except Exception:
            logger.exception("Failed to save %s", key)


class MemoryPersistence:
    def __init__(self, blobs: dict[str, str] | None = None) -> None:
        self.blobs: dict[str, str] = dict(blobs or {})

    async def load(self, key: str) -> str | None:
        return self.blobs.get(key)

    async def save(self, key: str, blob: str) -> None:
        self.blobs[key] = blob

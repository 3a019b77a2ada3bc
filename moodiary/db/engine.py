import os

import aiosqlite

from moodiary.config import settings
from moodiary.db.models import SCHEMA

_db_path = settings.db_path


async def connect(path: str) -> aiosqlite.Connection:
    db = await aiosqlite.connect(path)
    db.row_factory = aiosqlite.Row
    await db.execute("PRAGMA busy_timeout=5000")
    await db.execute("PRAGMA journal_mode=WAL")
    return db


async def init_db(path: str | None = None) -> None:
    path = path or _db_path
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    db = await connect(path)
    try:
        for statement in SCHEMA:
            await db.execute(statement)
        await db.commit()
    finally:
        await db.close()

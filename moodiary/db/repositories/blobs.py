import aiosqlite


async def get_blob(
    db: aiosqlite.Connection,
    key: str,
) -> str | None:
    cursor = await db.execute(
        "SELECT value FROM journal_blobs WHERE key = ?", (key,)
    )
    row = await cursor.fetchone()
    if row:
        return row["value"]
    return None


async def set_blob(
    db: aiosqlite.Connection,
    key: str,
    value: str,
) -> None:
    await db.execute(
        """
        INSERT INTO journal_blobs (key, value)
        VALUES (?, ?)
        ON CONFLICT(key) DO UPDATE SET
            value = excluded.value,
            updated_at = CURRENT_TIMESTAMP
        """,
        (key, value),
    )
    await db.commit()

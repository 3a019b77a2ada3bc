SCHEMA = [
    """
    CREATE TABLE IF NOT EXISTS journal_blobs (
        key TEXT PRIMARY KEY,
        value TEXT NOT NULL,
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    """,
]

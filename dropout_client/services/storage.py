# local key/value storage for the client
# single sqlite table, string keys and string values, last write wins
# blocking sqlite calls run in a worker thread so callers can await them

import asyncio
import logging
import sqlite3
from pathlib import Path
from typing import Optional

from dropout_client.config import settings

logger = logging.getLogger(__name__)

# keys persisted by the stores
AUTH_TOKEN_KEY = "authToken"
USER_DATA_KEY = "userData"
CHAT_HISTORY_KEY = "chatHistory"


class LocalStorage:
    """durable async key/value store backed by a sqlite file"""

    def __init__(self, path: Optional[str] = None):
        self.path = path if path is not None else settings.STORAGE_PATH
        self.conn: Optional[sqlite3.Connection] = None

    async def connect(self):
        """open the storage file and create the table if needed"""
        if self.conn is not None:
            return

        logger.info(f"Opening local storage: {self.path}")
        self.conn = await asyncio.to_thread(self._open)
        logger.info("Local storage ready")

    def _open(self) -> sqlite3.Connection:
        if self.path != ":memory:":
            Path(self.path).parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self.path, check_same_thread=False)
        conn.execute("CREATE TABLE IF NOT EXISTS kv (key TEXT PRIMARY KEY, value TEXT NOT NULL)")
        conn.commit()
        return conn

    async def close(self):
        """close the storage file"""
        if self.conn:
            conn, self.conn = self.conn, None
            await asyncio.to_thread(conn.close)
            logger.info("Local storage closed")

    def _require_conn(self) -> sqlite3.Connection:
        if self.conn is None:
            raise RuntimeError("LocalStorage is not connected; call connect() first")
        return self.conn

    # item accessors

    async def get_item(self, key: str) -> Optional[str]:
        conn = self._require_conn()

        def _get():
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
            return row[0] if row else None

        return await asyncio.to_thread(_get)

    async def set_item(self, key: str, value: str):
        conn = self._require_conn()

        def _set():
            conn.execute(
                "INSERT INTO kv (key, value) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, value),
            )
            conn.commit()

        await asyncio.to_thread(_set)

    async def remove_item(self, key: str):
        conn = self._require_conn()

        def _remove():
            conn.execute("DELETE FROM kv WHERE key = ?", (key,))
            conn.commit()

        await asyncio.to_thread(_remove)

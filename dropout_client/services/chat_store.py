# chat history store — ordered transcript persisted as one json list
# the transcript is a convenience cache: read/write failures are logged, not raised

import logging
import random
import string
import time

from pydantic import TypeAdapter

from dropout_client.models.chat import ChatMessage
from dropout_client.services.storage import LocalStorage, CHAT_HISTORY_KEY

logger = logging.getLogger(__name__)

_transcript_adapter = TypeAdapter(list[ChatMessage])

ID_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits
ID_SUFFIX_LENGTH = 9


class ChatHistoryStore:

    def __init__(self, storage: LocalStorage):
        self.storage = storage

    async def load(self) -> list[ChatMessage]:
        try:
            raw = await self.storage.get_item(CHAT_HISTORY_KEY)
            if not raw:
                return []
            return _transcript_adapter.validate_json(raw)
        except Exception as e:
            logger.error(f"Error getting chat history: {e}")
            return []

    async def replace(self, messages: list[ChatMessage]):
        """overwrite the stored transcript with messages"""
        try:
            payload = _transcript_adapter.dump_json(messages, by_alias=True).decode()
            await self.storage.set_item(CHAT_HISTORY_KEY, payload)
        except Exception as e:
            logger.error(f"Error saving chat history: {e}")

    async def append(self, messages: list[ChatMessage]):
        history = await self.load()
        await self.replace(history + list(messages))

    async def clear(self):
        try:
            await self.storage.remove_item(CHAT_HISTORY_KEY)
        except Exception as e:
            logger.error(f"Error clearing chat history: {e}")

    @staticmethod
    def new_id() -> str:
        """millisecond timestamp followed by a random base-36 suffix"""
        millis = time.time_ns() // 1_000_000
        suffix = "".join(random.choices(ID_SUFFIX_ALPHABET, k=ID_SUFFIX_LENGTH))
        return f"{millis}{suffix}"

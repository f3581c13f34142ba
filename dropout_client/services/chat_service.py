# chat service — support chatbot transcript
# an empty store shows a welcome message that is never written back on its own

import logging
from datetime import datetime, timezone

from dropout_client.models.chat import ChatMessage
from dropout_client.services.chat_store import ChatHistoryStore
from dropout_client.services.gateway import RemoteGateway

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = (
    "Hi! I'm your counselling assistant. I'm here to help you with any concerns about "
    "your studies, stress management, or just to chat. How are you feeling today?"
)
CLEARED_WELCOME_MESSAGE = "Hi! I'm your counselling assistant. How can I help you today?"
APOLOGY_MESSAGE = "I'm sorry, I'm having trouble connecting right now. Please try again later."


class ChatService:

    def __init__(self, gateway: RemoteGateway, store: ChatHistoryStore):
        self.gateway = gateway
        self.store = store
        self.messages: list[ChatMessage] = []
        self.loaded = False

    def _message(self, text: str, is_user: bool) -> ChatMessage:
        return ChatMessage(
            id=self.store.new_id(),
            message=text,
            isUser=is_user,
            timestamp=datetime.now(timezone.utc),
        )

    async def load_transcript(self) -> list[ChatMessage]:
        history = await self.store.load()
        if history:
            self.messages = history
        else:
            self.messages = [self._message(WELCOME_MESSAGE, is_user=False)]
        self.loaded = True
        return list(self.messages)

    async def send(self, text: str) -> list[ChatMessage]:
        """post a user message and append the bot reply (or an apology on failure)"""
        text = text.strip()
        if not text:
            return list(self.messages)

        # appending to an unloaded transcript would overwrite stored history
        if not self.loaded:
            await self.load_transcript()

        self.messages.append(self._message(text, is_user=True))

        try:
            reply = await self.gateway.send_chat_message(text)
            self.messages.append(self._message(reply.reply, is_user=False))
        except Exception as e:
            logger.error(f"Chat error: {e!r}")
            self.messages.append(self._message(APOLOGY_MESSAGE, is_user=False))

        await self.store.replace(self.messages)
        return list(self.messages)

    async def clear(self) -> list[ChatMessage]:
        await self.store.clear()
        self.messages = [self._message(CLEARED_WELCOME_MESSAGE, is_user=False)]
        return list(self.messages)

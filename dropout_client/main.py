# dropout-risk mobile client core
# composition root: opens local storage, wires stores, gateway and services

import logging
from contextlib import asynccontextmanager
from typing import Callable, Optional

import httpx

from dropout_client.config import settings
from dropout_client.services.auth_service import AuthService
from dropout_client.services.chat_service import ChatService
from dropout_client.services.chat_store import ChatHistoryStore
from dropout_client.services.dashboard_service import DashboardService
from dropout_client.services.gateway import RemoteGateway
from dropout_client.services.resilience import Notice
from dropout_client.services.session_store import SessionStore
from dropout_client.services.storage import LocalStorage

logger = logging.getLogger(__name__)


def setup_logging():
    """configure root logging for an app run"""
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


class DropoutClient:
    """owns every store and service for one app run"""

    def __init__(
        self,
        storage_path: Optional[str] = None,
        api_base_url: Optional[str] = None,
        chat_base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        notify: Optional[Callable[[Notice], None]] = None,
    ):
        self.storage = LocalStorage(storage_path)
        self.session = SessionStore(self.storage)
        self.chat_history = ChatHistoryStore(self.storage)
        self.gateway = RemoteGateway(
            self.session,
            api_base_url=api_base_url,
            chat_base_url=chat_base_url,
            transport=transport,
        )
        self.auth = AuthService(self.gateway, self.session)
        self.dashboards = DashboardService(self.gateway, self.session, notify=notify)
        self.chat = ChatService(self.gateway, self.chat_history)

    async def start(self):
        setup_logging()
        logger.info("Starting dropout client...")
        await self.storage.connect()
        await self.gateway.connect()
        logger.info("Dropout client ready")

    async def shutdown(self):
        logger.info("Shutting down dropout client...")
        await self.gateway.close()
        await self.storage.close()


@asynccontextmanager
async def open_client(**kwargs):
    """start a client, yield it, and always shut it down"""
    client = DropoutClient(**kwargs)
    await client.start()
    try:
        yield client
    finally:
        await client.shutdown()

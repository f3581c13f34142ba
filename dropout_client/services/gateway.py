# remote gateway — stateless request/response wrapper around the backend
# auth, dashboard and counselor endpoints on the api service, chat on the chatbot service
# any non-2xx status raises RemoteRejected; transport failures raise NetworkFailure

import logging
from typing import Any, Optional

import httpx

from dropout_client.config import settings
from dropout_client.errors import NetworkFailure, RemoteRejected, Unauthenticated
from dropout_client.models.chat import ChatReply
from dropout_client.models.user import (
    ForgotPasswordResponse,
    LoginRequest,
    LoginResponse,
    SignupRequest,
)
from dropout_client.services.session_store import SessionStore

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Something went wrong"


def _unwrap(data: Any) -> Any:
    """some endpoints wrap their payload in a top-level data field"""
    if isinstance(data, dict) and isinstance(data.get("data"), (dict, list)):
        return data["data"]
    return data


class RemoteGateway:

    def __init__(
        self,
        session: SessionStore,
        api_base_url: Optional[str] = None,
        chat_base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.session = session
        self.api_base_url = api_base_url or settings.API_BASE_URL
        self.chat_base_url = chat_base_url or settings.CHATBOT_API_BASE_URL
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT_SECONDS
        self.transport = transport
        self.api: Optional[httpx.AsyncClient] = None
        self.chat: Optional[httpx.AsyncClient] = None

    # client lifecycle

    def _make_client(self, base_url: str) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=base_url,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
            transport=self.transport,
        )

    async def connect(self):
        if self.api is not None:
            return
        logger.info(f"Connecting gateway to {self.api_base_url} (chat: {self.chat_base_url})")
        self.api = self._make_client(self.api_base_url)
        self.chat = self._make_client(self.chat_base_url)

    async def close(self):
        for client in (self.api, self.chat):
            if client is not None:
                await client.aclose()
        self.api = None
        self.chat = None

    # request plumbing

    async def _auth_headers(self) -> dict:
        """bearer header from the stored token. raises before any network call when signed out."""
        token = await self.session.load_token()
        if not token:
            raise Unauthenticated()
        return {"Authorization": f"Bearer {token}"}

    async def _request(
        self,
        client: Optional[httpx.AsyncClient],
        method: str,
        path: str,
        json: Optional[dict] = None,
        headers: Optional[dict] = None,
    ) -> Any:
        if client is None:
            raise RuntimeError("RemoteGateway is not connected; call connect() first")

        try:
            response = await client.request(method, path, json=json, headers=headers)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed: {e!r}")
            raise NetworkFailure() from e

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.is_success:
            message = None
            if isinstance(data, dict):
                message = data.get("message") or data.get("error")
            logger.warning(f"{method} {path} rejected with {response.status_code}: {message}")
            raise RemoteRejected(response.status_code, message or DEFAULT_ERROR_MESSAGE)

        if data is None:
            raise NetworkFailure(f"Invalid response body from {path}")
        return data

    # auth endpoints

    async def sign_in(self, request: LoginRequest) -> LoginResponse:
        data = await self._request(
            self.api, "POST", "/auth/signin",
            json=request.model_dump(by_alias=True, exclude_none=True),
        )
        return LoginResponse.model_validate(data)

    async def sign_up(self, request: SignupRequest) -> dict:
        return await self._request(
            self.api, "POST", "/auth/signup",
            json=request.model_dump(exclude_none=True),
        )

    async def logout(self) -> dict:
        headers = await self._auth_headers()
        return await self._request(self.api, "POST", "/auth/logout", headers=headers)

    async def forgot_password(self, email: str) -> ForgotPasswordResponse:
        data = await self._request(self.api, "POST", "/auth/forgot-password", json={"email": email})
        return ForgotPasswordResponse.model_validate(data)

    async def reset_password(self, token: str, new_password: str) -> dict:
        return await self._request(
            self.api, "POST", "/auth/reset-password",
            json={"token": token, "newPassword": new_password},
        )

    async def get_profile(self) -> dict:
        headers = await self._auth_headers()
        return await self._request(self.api, "GET", "/auth/profile", headers=headers)

    # dashboard endpoints

    async def get_student_dashboard(self, user_id: str) -> Any:
        headers = await self._auth_headers()
        data = await self._request(self.api, "GET", f"/api/dashboard/student/{user_id}", headers=headers)
        return _unwrap(data)

    async def get_counselor_dashboard(self) -> Any:
        headers = await self._auth_headers()
        data = await self._request(self.api, "GET", "/api/counselor/dashboard", headers=headers)
        return _unwrap(data)

    # chatbot

    async def send_chat_message(self, message: str) -> ChatReply:
        data = await self._request(self.chat, "POST", "/chat", json={"message": message})
        return ChatReply.model_validate(data)

# auth service — sign-in, sign-up, logout and password recovery flows
# rejections propagate to the caller unchanged; logout always clears the local session

import logging
import re
from typing import Optional

from dropout_client.errors import WeakPassword
from dropout_client.models.user import LoginRequest, LoginResponse, SignupRequest, UserProfile
from dropout_client.services.gateway import RemoteGateway
from dropout_client.services.session_store import SessionStore

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8

STUDENT_SCREEN = "dashboard"
COUNSELOR_SCREEN = "counselor-dashboard"


def password_problem(password: str) -> Optional[str]:
    """describe why a new password is too weak, or none if it is acceptable"""
    if len(password) < MIN_PASSWORD_LENGTH:
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
    if not (re.search(r"[a-z]", password) and re.search(r"[A-Z]", password)):
        return "Password must contain both uppercase and lowercase letters"
    if not re.search(r"\d", password):
        return "Password must contain at least one number"
    return None


def landing_screen(profile: Optional[UserProfile]) -> str:
    """dashboard screen selected by the user's role"""
    if profile is not None and profile.is_counselor:
        return COUNSELOR_SCREEN
    return STUDENT_SCREEN


class AuthService:

    def __init__(self, gateway: RemoteGateway, session: SessionStore):
        self.gateway = gateway
        self.session = session

    async def sign_in(self, identifier: str, password: str) -> LoginResponse:
        """sign in with an email address or a user id and persist the session"""
        identifier = identifier.strip()
        if "@" in identifier:
            request = LoginRequest(email=identifier, password=password)
        else:
            request = LoginRequest(userId=identifier, password=password)

        response = await self.gateway.sign_in(request)
        if response.token:
            await self.session.save(response.token, response.user)
        logger.info(f"Signed in as {response.user.user_id} ({response.user.role})")
        return response

    async def sign_up(self, name: str, email: str, password: str, role: str = "student") -> dict:
        return await self.gateway.sign_up(SignupRequest(name=name, email=email, password=password, role=role))

    async def logout(self):
        """tell the backend, then clear the local session no matter what"""
        try:
            if await self.session.load_token():
                await self.gateway.logout()
        except Exception as e:
            logger.warning(f"Logout error: {e!r}")
        finally:
            await self.session.clear()
        logger.info("Local session cleared")

    async def forgot_password(self, email: str) -> Optional[str]:
        """request a reset email. returns the reset token when the backend hands one back."""
        response = await self.gateway.forgot_password(email.strip())
        return response.reset_token

    async def reset_password(self, token: str, new_password: str) -> dict:
        problem = password_problem(new_password)
        if problem:
            raise WeakPassword(problem)
        return await self.gateway.reset_password(token, new_password)

    async def get_profile(self) -> dict:
        return await self.gateway.get_profile()

    async def current_user(self) -> Optional[UserProfile]:
        return await self.session.load_profile()

    async def is_authenticated(self) -> bool:
        return await self.session.is_authenticated()

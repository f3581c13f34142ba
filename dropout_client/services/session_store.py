# session store — auth token and last-known user profile
# lives from sign-in until logout; clear() never fails the caller

import logging
from typing import Optional

from pydantic import ValidationError

from dropout_client.models.user import UserProfile
from dropout_client.services.storage import LocalStorage, AUTH_TOKEN_KEY, USER_DATA_KEY

logger = logging.getLogger(__name__)


class SessionStore:

    def __init__(self, storage: LocalStorage):
        self.storage = storage

    async def save(self, token: str, profile: UserProfile):
        await self.storage.set_item(AUTH_TOKEN_KEY, token)
        await self.storage.set_item(USER_DATA_KEY, profile.model_dump_json(by_alias=True))

    async def load_token(self) -> Optional[str]:
        return await self.storage.get_item(AUTH_TOKEN_KEY)

    async def load_profile(self) -> Optional[UserProfile]:
        """stored profile, or none when absent or unreadable"""
        raw = await self.storage.get_item(USER_DATA_KEY)
        if raw is None:
            return None
        try:
            return UserProfile.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Discarding unreadable user profile: {e}")
            return None

    async def is_authenticated(self) -> bool:
        try:
            return await self.load_token() is not None
        except Exception as e:
            logger.warning(f"Could not read auth token: {e}")
            return False

    async def clear(self):
        """remove token and profile. local sign-out always succeeds once attempted."""
        for key in (AUTH_TOKEN_KEY, USER_DATA_KEY):
            try:
                await self.storage.remove_item(key)
            except Exception as e:
                logger.error(f"Failed to remove {key} from local storage: {e}")

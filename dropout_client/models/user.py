# user models — auth requests/responses and the persisted session profile

from typing import Optional
from pydantic import BaseModel, Field


class UserProfile(BaseModel):
    """last-known signed-in user, stored under the userData key"""
    user_id: str = Field(..., alias="userId")
    name: str = ""
    role: str = "student"
    email: Optional[str] = None

    model_config = {"populate_by_name": True, "extra": "allow"}

    @property
    def is_counselor(self) -> bool:
        return self.role == "counselor"


class LoginRequest(BaseModel):
    email: Optional[str] = None
    user_id: Optional[str] = Field(None, alias="userId")
    password: str

    model_config = {"populate_by_name": True}


class LoginResponse(BaseModel):
    message: str = ""
    user: UserProfile
    token: str


class SignupRequest(BaseModel):
    name: str = Field(..., min_length=1)
    email: Optional[str] = None
    password: str = Field(..., min_length=1)
    role: str = "student"


class ForgotPasswordResponse(BaseModel):
    message: str = ""
    reset_token: Optional[str] = Field(None, alias="resetToken")

    model_config = {"populate_by_name": True, "extra": "ignore"}

from typing import Optional
from pydantic import BaseModel


class LoginRequest(BaseModel):
    username: str = ""
    password: str = ""


class RefreshTokenRequest(BaseModel):
    access_token: str = ""


class TokenResponse(BaseModel):
    access_token: str
    expires_in: int
    token_type: str = "Bearer"


class LoginResponse(TokenResponse):
    user_id: Optional[int] = None
    username: Optional[str] = None
    role: Optional[str] = None

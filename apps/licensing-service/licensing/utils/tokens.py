"""
JWT issuance and validation shared by the users service and the gateway.

Tokens are HS256-signed with claims ``sub`` (user id), ``name``, ``role``,
``tenant_id``, ``iss``, ``aud``, ``iat`` and ``exp``.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timedelta, UTC
from typing import Any, Dict, Optional

import jwt

ALGORITHM = "HS256"
_DEV_SECRET = "dev-only-secret-key-change-me-at-least-32-bytes"


@dataclass(frozen=True)
class JwtSettings:
    secret_key: str
    issuer: str = "license-management"
    audience: str = "license-management-clients"
    expiration_minutes: int = 60

    @classmethod
    def from_env(cls) -> "JwtSettings":
        minutes_raw = os.getenv("JWT_EXPIRATION_MINUTES", "60")
        try:
            minutes = int(minutes_raw)
        except ValueError:
            minutes = 60
        return cls(
            secret_key=os.getenv("JWT_SECRET_KEY", _DEV_SECRET),
            issuer=os.getenv("JWT_ISSUER", "license-management"),
            audience=os.getenv("JWT_AUDIENCE", "license-management-clients"),
            expiration_minutes=max(minutes, 1),
        )

    @property
    def expires_in_seconds(self) -> int:
        return self.expiration_minutes * 60


def issue_token(
    settings: JwtSettings,
    *,
    user_id: Any,
    username: str,
    role: Optional[str] = None,
    tenant_id: Optional[int] = None,
    now: Optional[datetime] = None,
) -> str:
    now = now or datetime.now(UTC)
    claims: Dict[str, Any] = {
        "sub": str(user_id),
        "name": username,
        "role": role or "User",
        "iss": settings.issuer,
        "aud": settings.audience,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=settings.expiration_minutes)).timestamp()),
    }
    if tenant_id is not None:
        claims["tenant_id"] = tenant_id
    return jwt.encode(claims, settings.secret_key, algorithm=ALGORITHM)


def decode_token(settings: JwtSettings, token: str, *, verify_exp: bool = True) -> Dict[str, Any]:
    """Validate signature, issuer and audience and return the claims.

    Raises ``jwt.InvalidTokenError`` (or a subclass) on any failure.
    ``verify_exp=False`` is used by refresh, which accepts expired tokens
    whose signature is still good.
    """
    return jwt.decode(
        token,
        settings.secret_key,
        algorithms=[ALGORITHM],
        audience=settings.audience,
        issuer=settings.issuer,
        options={"verify_exp": verify_exp, "require": ["sub", "exp"]},
    )


def reissue_token(settings: JwtSettings, token: str) -> str:
    claims = decode_token(settings, token, verify_exp=False)
    return issue_token(
        settings,
        user_id=claims["sub"],
        username=claims.get("name", ""),
        role=claims.get("role"),
        tenant_id=claims.get("tenant_id"),
    )

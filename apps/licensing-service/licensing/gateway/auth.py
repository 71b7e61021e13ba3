"""
Gateway authentication: login against the users service and token refresh.
"""
import logging

import httpx
import jwt
from fastapi import APIRouter, Request, status
from starlette.responses import JSONResponse

from licensing.db import schemas
from licensing.gateway.config import GatewaySettings
from licensing.utils.tokens import decode_token, issue_token, reissue_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])

BEARER_PREFIX = "Bearer "


def message_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def bearer_token(request: Request):
    header = request.headers.get("authorization") or ""
    if not header.startswith(BEARER_PREFIX):
        return None
    token = header[len(BEARER_PREFIX):].strip()
    return token or None


def verify_bearer(request: Request, settings: GatewaySettings):
    """Return the token claims, or a 401 response when missing/invalid."""
    token = bearer_token(request)
    if token is None:
        return None, message_response(status.HTTP_401_UNAUTHORIZED, "Unauthorized: Token required")
    try:
        return decode_token(settings.jwt, token), None
    except jwt.InvalidTokenError:
        return None, message_response(status.HTTP_401_UNAUTHORIZED, "Unauthorized: Invalid or expired token")


@router.post("/login", response_model=schemas.TokenResponse)
async def login(payload: schemas.LoginRequest, request: Request):
    settings: GatewaySettings = request.app.state.settings
    client: httpx.AsyncClient = request.app.state.http_client

    if not payload.username.strip() or not payload.password:
        return message_response(status.HTTP_400_BAD_REQUEST, "Username and password are required")

    url = f"{settings.users_service_url}/api/auth/verify"
    try:
        resp = await client.post(
            url,
            json={"username": payload.username, "password": payload.password},
            timeout=settings.timeout_seconds,
        )
    except httpx.TimeoutException:
        logger.warning("Login timed out calling %s", url)
        return message_response(status.HTTP_504_GATEWAY_TIMEOUT, "Users service timed out")
    except httpx.RequestError as exc:
        logger.error("Login could not reach users service at %s: %s", url, exc)
        return message_response(status.HTTP_502_BAD_GATEWAY, "Users service unavailable")

    if resp.status_code in (status.HTTP_400_BAD_REQUEST, status.HTTP_401_UNAUTHORIZED, status.HTTP_404_NOT_FOUND):
        logger.info("Gateway login rejected for username=%s", payload.username)
        return message_response(status.HTTP_401_UNAUTHORIZED, "Invalid username or password")
    if resp.status_code >= 400:
        logger.error("Users service returned %s during login", resp.status_code)
        return message_response(status.HTTP_502_BAD_GATEWAY, "Users service error")

    try:
        body = resp.json()
    except ValueError:
        logger.error("Users service returned a non-JSON body during login (status %s)", resp.status_code)
        return message_response(status.HTTP_502_BAD_GATEWAY, "Users service error")
    user = body.get("data") if isinstance(body, dict) else None
    if not isinstance(user, dict) or user.get("user_id") is None:
        logger.error("Users service response is missing the user id during login")
        return message_response(status.HTTP_502_BAD_GATEWAY, "Users service error")
    token = issue_token(
        settings.jwt,
        user_id=user.get("user_id"),
        username=user.get("username", payload.username),
        role=user.get("role"),
        tenant_id=user.get("tenant_id"),
    )
    logger.info("Issued token for %s", user.get("username", payload.username))
    return schemas.TokenResponse(access_token=token, expires_in=settings.jwt.expires_in_seconds)


@router.post("/refresh", response_model=schemas.TokenResponse)
async def refresh(payload: schemas.RefreshTokenRequest, request: Request):
    settings: GatewaySettings = request.app.state.settings
    token = (payload.access_token or "").strip() or bearer_token(request)
    if not token:
        return message_response(status.HTTP_401_UNAUTHORIZED, "Unauthorized: Token required")
    try:
        new_token = reissue_token(settings.jwt, token)
    except jwt.InvalidTokenError:
        return message_response(status.HTTP_401_UNAUTHORIZED, "Unauthorized: Invalid token")
    return schemas.TokenResponse(access_token=new_token, expires_in=settings.jwt.expires_in_seconds)

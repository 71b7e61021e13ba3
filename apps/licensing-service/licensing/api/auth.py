"""
Authentication endpoints served by the users service.

`/api/auth/login` issues a JWT directly; `/api/auth/verify` only checks
credentials and is what the gateway calls before minting its own token.
"""
from fastapi import APIRouter, Depends

from licensing.api.deps import get_jwt_settings, get_user_service
from licensing.db import schemas
from licensing.services import UserService
from licensing.utils.tokens import JwtSettings, issue_token

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=schemas.ApiResult[schemas.LoginResponse])
def login_endpoint(
    payload: schemas.LoginRequest,
    service: UserService = Depends(get_user_service),
    settings: JwtSettings = Depends(get_jwt_settings),
):
    user = service.authenticate(payload.username, payload.password)
    token = issue_token(
        settings,
        user_id=user.user_id,
        username=user.username,
        role=user.role,
        tenant_id=user.tenant_id,
    )
    body = schemas.LoginResponse(
        access_token=token,
        expires_in=settings.expires_in_seconds,
        user_id=user.user_id,
        username=user.username,
        role=user.role,
    )
    return schemas.ApiResult.ok(body, "Login successful")


@router.post("/verify", response_model=schemas.ApiResult[schemas.User])
def verify_credentials_endpoint(
    payload: schemas.LoginRequest,
    service: UserService = Depends(get_user_service),
):
    user = service.authenticate(payload.username, payload.password)
    return schemas.ApiResult.ok(schemas.User.model_validate(user), "User authenticated successfully")

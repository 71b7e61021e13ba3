"""
Users API endpoints.

Includes the tenant listing/assignment routes and the username lookup used
by the authentication flow (`/api/usersauth/{username}`).
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from licensing.api.deps import get_user_service
from licensing.db import schemas
from licensing.services import UserService

router = APIRouter(prefix="/api/users", tags=["users"])
lookup_router = APIRouter(prefix="/api/usersauth", tags=["users"])


def _one(user) -> schemas.User:
    return schemas.User.model_validate(user)


@router.get("", response_model=schemas.ApiResult[List[schemas.User]])
def list_users_endpoint(service: UserService = Depends(get_user_service)):
    return schemas.ApiResult.ok([_one(u) for u in service.list_users()], "Users retrieved successfully")


@router.get("/tenant/{tenant_id}", response_model=schemas.ApiResult[List[schemas.User]])
def list_users_by_tenant_endpoint(tenant_id: int, service: UserService = Depends(get_user_service)):
    users = [_one(u) for u in service.list_by_tenant(tenant_id)]
    return schemas.ApiResult.ok(users, f"Users for tenant {tenant_id} retrieved successfully")


@router.get("/{user_id}", response_model=schemas.ApiResult[schemas.User])
def get_user_endpoint(user_id: int, service: UserService = Depends(get_user_service)):
    return schemas.ApiResult.ok(_one(service.get_user(user_id)), "User retrieved successfully")


@router.post("", response_model=schemas.ApiResult[schemas.User], status_code=status.HTTP_201_CREATED)
def create_user_endpoint(payload: schemas.UserCreate, service: UserService = Depends(get_user_service)):
    user = service.create_user(
        payload.username,
        payload.email,
        payload.password,
        role=payload.role,
        tenant_id=payload.tenant_id,
    )
    return schemas.ApiResult.ok(_one(user), "User created successfully")


@router.put("/{user_id}/tenant/{tenant_id}", response_model=schemas.ApiResult[schemas.User])
def assign_user_tenant_endpoint(user_id: int, tenant_id: int, service: UserService = Depends(get_user_service)):
    user = service.assign_tenant(user_id, tenant_id)
    return schemas.ApiResult.ok(_one(user), "User assigned to tenant successfully")


@router.put("/{user_id}", response_model=schemas.ApiResult[schemas.User])
def update_user_endpoint(
    user_id: int,
    payload: schemas.UserUpdate,
    service: UserService = Depends(get_user_service),
):
    user = service.update_user(
        user_id,
        payload.email,
        role=payload.role,
        tenant_id=payload.tenant_id,
        password=payload.password,
    )
    return schemas.ApiResult.ok(_one(user), "User updated successfully")


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user_endpoint(user_id: int, service: UserService = Depends(get_user_service)):
    service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@lookup_router.get("/{username}", response_model=schemas.ApiResult[schemas.User])
def get_user_by_username_endpoint(username: str, service: UserService = Depends(get_user_service)):
    return schemas.ApiResult.ok(_one(service.get_by_username(username)), "User retrieved successfully")

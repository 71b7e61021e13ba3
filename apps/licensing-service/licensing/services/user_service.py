"""
User service: account CRUD, tenant assignment and credential checks.

Passwords are hashed with Argon2 on create/update and never leave this
layer in clear or hashed form; routers serialize through `schemas.User`.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from licensing.db import models
from licensing.db.repositories import users as user_repo
from licensing.errors import (
    AuthenticationError,
    InvalidOperationError,
    NotFoundError,
    require_max_length,
    require_positive_id,
    require_text,
)
from licensing.utils.passwords import hash_password, needs_rehash, verify_password

logger = logging.getLogger(__name__)

DEFAULT_ROLE = "User"
USERNAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 320
ROLE_MAX_LENGTH = 50


class UserService:

    def __init__(self, db: Session):
        self.db = db

    def list_users(self) -> List[models.User]:
        return user_repo.get_users(self.db)

    def get_user(self, user_id: int) -> models.User:
        require_positive_id(user_id, "user")
        user = user_repo.get_user(self.db, user_id)
        if user is None:
            raise NotFoundError(f"User with ID {user_id} not found.")
        return user

    def get_by_username(self, username: str) -> models.User:
        username = require_text(username, "Username is required")
        user = user_repo.get_user_by_username(self.db, username)
        if user is None:
            raise NotFoundError(f"User with username {username} not found.")
        return user

    def list_by_tenant(self, tenant_id: int) -> List[models.User]:
        require_positive_id(tenant_id, "tenant")
        return user_repo.get_users_by_tenant(self.db, tenant_id)

    def create_user(
        self,
        username: str,
        email: str,
        password: str,
        role: Optional[str] = None,
        tenant_id: Optional[int] = None,
    ) -> models.User:
        username = require_text(username, "Username is required")
        email = require_text(email, "Email is required")
        password = require_text(password, "Password is required")
        require_max_length(username, USERNAME_MAX_LENGTH, "Username")
        require_max_length(email, EMAIL_MAX_LENGTH, "Email")
        role = (role or "").strip() or DEFAULT_ROLE
        require_max_length(role, ROLE_MAX_LENGTH, "Role")
        if tenant_id is not None:
            require_positive_id(tenant_id, "tenant")
        if user_repo.username_exists(self.db, username):
            raise InvalidOperationError("Username already exists")
        return user_repo.create_user(
            self.db,
            username=username,
            email=email,
            password_hash=hash_password(password),
            role=role,
            tenant_id=tenant_id,
        )

    def update_user(
        self,
        user_id: int,
        email: str,
        role: Optional[str] = None,
        tenant_id: Optional[int] = None,
        password: Optional[str] = None,
    ) -> models.User:
        user = self.get_user(user_id)
        fields = {"email": require_text(email, "Email is required")}
        require_max_length(fields["email"], EMAIL_MAX_LENGTH, "Email")
        if role is not None and role.strip():
            fields["role"] = role.strip()
            require_max_length(fields["role"], ROLE_MAX_LENGTH, "Role")
        if tenant_id is not None:
            require_positive_id(tenant_id, "tenant")
            fields["tenant_id"] = tenant_id
        if password:
            fields["password"] = hash_password(password)
        return user_repo.update_user(self.db, user, **fields)

    def assign_tenant(self, user_id: int, tenant_id: int) -> models.User:
        require_positive_id(tenant_id, "tenant")
        user = self.get_user(user_id)
        return user_repo.update_user(self.db, user, tenant_id=tenant_id)

    def delete_user(self, user_id: int) -> None:
        user = self.get_user(user_id)
        user_repo.delete_user(self.db, user)

    def authenticate(self, username: str, password: str) -> models.User:
        """Return the user for valid credentials or raise AuthenticationError.

        Unknown usernames and wrong passwords produce the same error.
        """
        if not (username or "").strip() or not password:
            raise AuthenticationError("Username and password are required")
        user = user_repo.get_user_by_username(self.db, username.strip())
        if user is None or not verify_password(user.password, password):
            logger.info("Failed login for username=%s", username.strip())
            raise AuthenticationError("Invalid username or password")
        if needs_rehash(user.password):
            user_repo.update_user(self.db, user, password=hash_password(password))
        logger.info("User %s authenticated", user.username)
        return user

"""
User repository functions.

Callers pass already-hashed passwords; hashing lives in
`licensing.utils.passwords`.
"""
from __future__ import annotations

from typing import List, Optional
from sqlalchemy.orm import Session

from licensing.db import models


def get_users(db: Session) -> List[models.User]:
    return db.query(models.User).order_by(models.User.user_id).all()


def get_user(db: Session, user_id: int) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.user_id == user_id).first()


def get_user_by_username(db: Session, username: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.username == username).first()


def get_users_by_tenant(db: Session, tenant_id: int) -> List[models.User]:
    return (
        db.query(models.User)
        .filter(models.User.tenant_id == tenant_id)
        .order_by(models.User.user_id)
        .all()
    )


def username_exists(db: Session, username: str) -> bool:
    return db.query(models.User.user_id).filter(models.User.username == username).first() is not None


def create_user(
    db: Session,
    *,
    username: str,
    email: str,
    password_hash: str,
    role: str,
    tenant_id: Optional[int],
) -> models.User:
    db_user = models.User(
        username=username,
        email=email,
        password=password_hash,
        role=role,
        tenant_id=tenant_id,
    )
    db.add(db_user)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_user)
    return db_user


def update_user(db: Session, db_user: models.User, **fields) -> models.User:
    for key, value in fields.items():
        setattr(db_user, key, value)
    db_user.updated_date = models.now_utc()
    db.commit()
    db.refresh(db_user)
    return db_user


def delete_user(db: Session, db_user: models.User) -> None:
    try:
        db.delete(db_user)
        db.commit()
    except Exception:
        db.rollback()
        raise

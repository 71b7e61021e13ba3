"""
Tenant repository functions.
"""
from __future__ import annotations

from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from licensing.db import models


def get_tenants(db: Session) -> List[models.Tenant]:
    return db.query(models.Tenant).order_by(models.Tenant.tenant_id).all()


def get_tenant(db: Session, tenant_id: int) -> Optional[models.Tenant]:
    return db.query(models.Tenant).filter(models.Tenant.tenant_id == tenant_id).first()


def get_tenant_by_name(db: Session, name: str) -> Optional[models.Tenant]:
    return db.query(models.Tenant).filter(func.lower(models.Tenant.name) == name.lower()).first()


def create_tenant(db: Session, *, name: str) -> models.Tenant:
    db_tenant = models.Tenant(name=name)
    db.add(db_tenant)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_tenant)
    return db_tenant


def update_tenant(db: Session, db_tenant: models.Tenant, *, name: str) -> models.Tenant:
    db_tenant.name = name
    db_tenant.updated_date = models.now_utc()
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_tenant)
    return db_tenant


def delete_tenant(db: Session, db_tenant: models.Tenant) -> None:
    try:
        db.delete(db_tenant)
        db.commit()
    except Exception:
        db.rollback()
        raise

"""
License repository functions.
"""
from __future__ import annotations

from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from licensing.db import models


def get_licenses(db: Session) -> List[models.License]:
    return db.query(models.License).order_by(models.License.license_id).all()


def get_license(db: Session, license_id: int) -> Optional[models.License]:
    return db.query(models.License).filter(models.License.license_id == license_id).first()


def get_license_by_name(db: Session, name: str) -> Optional[models.License]:
    return db.query(models.License).filter(func.lower(models.License.name) == name.lower()).first()


def create_license(db: Session, *, name: str) -> models.License:
    db_license = models.License(name=name)
    db.add(db_license)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_license)
    return db_license


def update_license(db: Session, db_license: models.License, *, name: str) -> models.License:
    db_license.name = name
    db_license.updated_date = models.now_utc()
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_license)
    return db_license


def delete_license(db: Session, db_license: models.License) -> None:
    try:
        db.delete(db_license)
        db.commit()
    except Exception:
        db.rollback()
        raise

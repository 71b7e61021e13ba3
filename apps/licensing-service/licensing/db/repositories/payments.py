"""
Payment repository functions.

Plain persistence for the payments table. Status rules (what may be
refunded, deleted or moved to which status) live in
`licensing.services.payment_service`.
"""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from licensing.db import models


def get_payments(db: Session) -> List[models.Payment]:
    return db.query(models.Payment).order_by(models.Payment.payment_id).all()


def get_payment(db: Session, payment_id: int, *, for_update: bool = False) -> Optional[models.Payment]:
    q = db.query(models.Payment).filter(models.Payment.payment_id == payment_id)
    if for_update:
        # Row lock on Postgres; ignored by SQLite
        q = q.with_for_update()
    return q.first()


def get_payments_by_license(db: Session, license_id: int) -> List[models.Payment]:
    return (
        db.query(models.Payment)
        .filter(models.Payment.license_id == license_id)
        .order_by(models.Payment.payment_date)
        .all()
    )


def get_payments_by_status(db: Session, status: str) -> List[models.Payment]:
    return (
        db.query(models.Payment)
        .filter(models.Payment.status == status)
        .order_by(models.Payment.payment_id)
        .all()
    )


def get_payments_by_date_range(db: Session, start: datetime, end: datetime) -> List[models.Payment]:
    return (
        db.query(models.Payment)
        .filter(models.Payment.payment_date >= start, models.Payment.payment_date <= end)
        .order_by(models.Payment.payment_date)
        .all()
    )


def get_payment_by_transaction_reference(db: Session, reference: str) -> Optional[models.Payment]:
    return (
        db.query(models.Payment)
        .filter(models.Payment.transaction_reference == reference)
        .first()
    )


def transaction_reference_exists(db: Session, reference: str) -> bool:
    return (
        db.query(models.Payment.payment_id)
        .filter(models.Payment.transaction_reference == reference)
        .first()
        is not None
    )


def status_totals(db: Session) -> Dict[str, Tuple[int, Decimal]]:
    """Return {status: (count, summed amount)} in a single grouped query."""
    rows = (
        db.query(
            models.Payment.status,
            func.count(models.Payment.payment_id),
            func.coalesce(func.sum(models.Payment.amount), 0),
        )
        .group_by(models.Payment.status)
        .all()
    )
    return {status: (int(count), Decimal(str(total))) for status, count, total in rows}


def create_payment(db: Session, **fields) -> models.Payment:
    db_payment = models.Payment(**fields)
    db.add(db_payment)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_payment)
    return db_payment


def save_payment(db: Session, db_payment: models.Payment) -> models.Payment:
    db_payment.updated_date = models.now_utc()
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_payment)
    return db_payment


def delete_payment(db: Session, db_payment: models.Payment) -> None:
    try:
        db.delete(db_payment)
        db.commit()
    except Exception:
        db.rollback()
        raise

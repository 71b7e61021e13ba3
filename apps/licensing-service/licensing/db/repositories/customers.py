"""
Customer repository functions.
"""
from __future__ import annotations

from typing import List, Optional
from sqlalchemy.orm import Session

from licensing.db import models


def get_customers(db: Session) -> List[models.Customer]:
    return db.query(models.Customer).order_by(models.Customer.customer_id).all()


def get_customer(db: Session, customer_id: int) -> Optional[models.Customer]:
    return db.query(models.Customer).filter(models.Customer.customer_id == customer_id).first()


def create_customer(db: Session, *, name: str) -> models.Customer:
    db_customer = models.Customer(name=name)
    db.add(db_customer)
    db.commit()
    db.refresh(db_customer)
    return db_customer


def update_customer(db: Session, db_customer: models.Customer, *, name: str) -> models.Customer:
    db_customer.name = name
    db_customer.updated_date = models.now_utc()
    db.commit()
    db.refresh(db_customer)
    return db_customer


def delete_customer(db: Session, db_customer: models.Customer) -> None:
    try:
        db.delete(db_customer)
        db.commit()
    except Exception:
        db.rollback()
        raise

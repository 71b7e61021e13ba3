"""
Shared FastAPI dependencies: one service instance per request, bound to the
request's database session.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from licensing.db.database import get_db
from licensing.services import (
    CustomerService,
    LicenseService,
    NotificationService,
    PaymentService,
    TenantService,
    UserService,
)
from licensing.utils.tokens import JwtSettings


def get_customer_service(db: Session = Depends(get_db)) -> CustomerService:
    return CustomerService(db)


def get_tenant_service(db: Session = Depends(get_db)) -> TenantService:
    return TenantService(db)


def get_license_service(db: Session = Depends(get_db)) -> LicenseService:
    return LicenseService(db)


def get_notification_service(db: Session = Depends(get_db)) -> NotificationService:
    return NotificationService(db)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


def get_payment_service(db: Session = Depends(get_db)) -> PaymentService:
    return PaymentService(db)


def get_jwt_settings() -> JwtSettings:
    return JwtSettings.from_env()

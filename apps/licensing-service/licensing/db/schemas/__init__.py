"""
Pydantic schemas per service with a flat re-export, so callers can write
`schemas.PaymentCreate` without knowing the module split.
"""

from .common import ApiResult
from .customers import CustomerBase, CustomerCreate, CustomerUpdate, Customer
from .tenants import TenantBase, TenantCreate, TenantUpdate, Tenant
from .licenses import LicenseBase, LicenseCreate, LicenseUpdate, License
from .notifications import (
    NotificationBase,
    NotificationCreate,
    NotificationUpdate,
    Notification,
)
from .users import UserCreate, UserUpdate, User
from .auth import LoginRequest, RefreshTokenRequest, TokenResponse, LoginResponse
from .payments import (
    PaymentCreate,
    PaymentStatusUpdate,
    RefundRequest,
    Payment,
    PaymentSummary,
)

__all__ = [
    "ApiResult",
    # Customers
    "CustomerBase",
    "CustomerCreate",
    "CustomerUpdate",
    "Customer",
    # Tenants
    "TenantBase",
    "TenantCreate",
    "TenantUpdate",
    "Tenant",
    # Licenses
    "LicenseBase",
    "LicenseCreate",
    "LicenseUpdate",
    "License",
    # Notifications
    "NotificationBase",
    "NotificationCreate",
    "NotificationUpdate",
    "Notification",
    # Users
    "UserCreate",
    "UserUpdate",
    "User",
    # Auth
    "LoginRequest",
    "RefreshTokenRequest",
    "TokenResponse",
    "LoginResponse",
    # Payments
    "PaymentCreate",
    "PaymentStatusUpdate",
    "RefundRequest",
    "Payment",
    "PaymentSummary",
]

"""Business logic services: validation and state rules over the repositories."""

from .customer_service import CustomerService
from .license_service import LicenseService
from .notification_service import NotificationService
from .payment_service import PaymentService, PaymentStatus
from .tenant_service import TenantService
from .user_service import UserService

__all__ = [
    "CustomerService",
    "LicenseService",
    "NotificationService",
    "PaymentService",
    "PaymentStatus",
    "TenantService",
    "UserService",
]

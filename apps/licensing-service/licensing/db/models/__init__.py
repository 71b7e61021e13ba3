"""
Per-service SQLAlchemy models.

Each service owns exactly one table; they share a declarative `Base` so a
single Alembic history can create any subset of them.
"""

from .base import Base, now_utc  # re-export

from .customers import Customer
from .tenants import Tenant
from .licenses import License
from .notifications import Notification
from .users import User
from .payments import Payment

__all__ = [
    "Base",
    "now_utc",
    "Customer",
    "Tenant",
    "License",
    "Notification",
    "User",
    "Payment",
]

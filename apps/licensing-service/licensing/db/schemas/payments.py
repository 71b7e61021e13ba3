from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator


class PaymentCreate(BaseModel):
    license_id: int
    amount: Decimal
    currency: str = "USD"
    payment_method: str = ""
    transaction_reference: Optional[str] = None
    description: Optional[str] = None
    payment_date: Optional[datetime] = None
    status: Optional[str] = None

    @field_validator("currency")
    @classmethod
    def _normalize_currency(cls, v: str):
        return (v or "").strip().upper()


class PaymentStatusUpdate(BaseModel):
    status: str = ""


class RefundRequest(BaseModel):
    reason: Optional[str] = None


class Payment(BaseModel):
    payment_id: int
    license_id: int
    amount: Decimal
    currency: str
    payment_date: datetime
    status: str
    payment_method: str
    transaction_reference: Optional[str] = None
    description: Optional[str] = None
    created_date: datetime
    updated_date: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class PaymentSummary(BaseModel):
    total_amount: Decimal = Decimal("0.00")
    total_payments: int = 0
    completed_payments: int = 0
    pending_payments: int = 0
    failed_payments: int = 0
    refunded_payments: int = 0
    disputed_payments: int = 0

"""
Payment service: creation rules, status lifecycle, refunds and summary.

Statuses move along a fixed transition table:

    Pending   -> Completed, Failed
    Failed    -> Pending
    Completed -> Refunded, Disputed
    Disputed  -> Completed, Refunded
    Refunded  -> (terminal)

Refunds additionally require the payment to be Completed. Only Pending
payments may be deleted. A non-blank transaction reference may be used by at
most one payment.
"""
import logging
from datetime import datetime, UTC
from decimal import Decimal
from enum import Enum
from typing import Dict, FrozenSet, List, Optional

from sqlalchemy.orm import Session

from licensing.db import models, schemas
from licensing.db.repositories import payments as payment_repo
from licensing.errors import (
    InvalidOperationError,
    NotFoundError,
    ValidationError,
    require_max_length,
    require_positive_id,
    require_text,
)

logger = logging.getLogger(__name__)

DEFAULT_REFUND_REASON = "Refund processed"

# Numeric(18, 2): 16 integer digits, 2 decimals
CENT = Decimal("0.01")
MAX_AMOUNT = Decimal(10) ** 16
PAYMENT_METHOD_MAX_LENGTH = 50
REFERENCE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


class PaymentStatus(str, Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"
    FAILED = "Failed"
    REFUNDED = "Refunded"
    DISPUTED = "Disputed"

    @classmethod
    def parse(cls, value: Optional[str]) -> "PaymentStatus":
        """Match ``value`` case-insensitively; raise ValidationError otherwise."""
        text = (value or "").strip()
        if not text:
            raise ValidationError("Status is required")
        for status in cls:
            if status.value.lower() == text.lower():
                return status
        raise ValidationError(f"Invalid status: {text}")


ALLOWED_TRANSITIONS: Dict[PaymentStatus, FrozenSet[PaymentStatus]] = {
    PaymentStatus.PENDING: frozenset({PaymentStatus.COMPLETED, PaymentStatus.FAILED}),
    PaymentStatus.FAILED: frozenset({PaymentStatus.PENDING}),
    PaymentStatus.COMPLETED: frozenset({PaymentStatus.REFUNDED, PaymentStatus.DISPUTED}),
    PaymentStatus.DISPUTED: frozenset({PaymentStatus.COMPLETED, PaymentStatus.REFUNDED}),
    PaymentStatus.REFUNDED: frozenset(),
}


def can_transition(current: PaymentStatus, target: PaymentStatus) -> bool:
    return target in ALLOWED_TRANSITIONS[current]


def normalize_amount(amount: Optional[Decimal]) -> Decimal:
    """Return ``amount`` rounded to cents, or raise ValidationError when it
    is not a positive value that fits Numeric(18, 2)."""
    if amount is None or not amount.is_finite() or amount <= 0:
        raise ValidationError("Payment amount must be greater than 0")
    # Checked before quantize, which overflows the context for huge values
    if amount >= MAX_AMOUNT:
        raise ValidationError("Payment amount must be less than 10000000000000000")
    rounded = amount.quantize(CENT)
    if rounded >= MAX_AMOUNT:
        raise ValidationError("Payment amount must be less than 10000000000000000")
    if rounded <= 0:
        raise ValidationError("Payment amount must be at least 0.01")
    return rounded


def _as_utc(value: datetime) -> datetime:
    # Naive query parameters are taken as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class PaymentService:
    """Service class for payment operations."""

    def __init__(self, db: Session):
        self.db = db

    # Queries

    def list_payments(self) -> List[models.Payment]:
        return payment_repo.get_payments(self.db)

    def get_payment(self, payment_id: int, *, for_update: bool = False) -> models.Payment:
        require_positive_id(payment_id, "payment")
        payment = payment_repo.get_payment(self.db, payment_id, for_update=for_update)
        if payment is None:
            raise NotFoundError(f"Payment with ID {payment_id} not found.")
        return payment

    def list_by_license(self, license_id: int) -> List[models.Payment]:
        require_positive_id(license_id, "license")
        return payment_repo.get_payments_by_license(self.db, license_id)

    def list_by_status(self, status: str) -> List[models.Payment]:
        parsed = PaymentStatus.parse(status)
        return payment_repo.get_payments_by_status(self.db, parsed.value)

    def list_by_date_range(self, start: datetime, end: datetime) -> List[models.Payment]:
        start, end = _as_utc(start), _as_utc(end)
        if start > end:
            raise ValidationError("Start date must be before end date")
        return payment_repo.get_payments_by_date_range(self.db, start, end)

    def get_by_transaction_reference(self, reference: str) -> models.Payment:
        reference = require_text(reference, "Transaction reference is required")
        payment = payment_repo.get_payment_by_transaction_reference(self.db, reference)
        if payment is None:
            raise NotFoundError(f"Payment with transaction reference {reference} not found.")
        return payment

    def summary(self) -> schemas.PaymentSummary:
        totals = payment_repo.status_totals(self.db)

        def count(status: PaymentStatus) -> int:
            return totals.get(status.value, (0, Decimal("0")))[0]

        completed_amount = totals.get(PaymentStatus.COMPLETED.value, (0, Decimal("0")))[1]
        return schemas.PaymentSummary(
            total_amount=completed_amount.quantize(CENT),
            total_payments=sum(c for c, _ in totals.values()),
            completed_payments=count(PaymentStatus.COMPLETED),
            pending_payments=count(PaymentStatus.PENDING),
            failed_payments=count(PaymentStatus.FAILED),
            refunded_payments=count(PaymentStatus.REFUNDED),
            disputed_payments=count(PaymentStatus.DISPUTED),
        )

    # Commands

    def create_payment(self, payload: schemas.PaymentCreate) -> models.Payment:
        if payload.license_id is None or payload.license_id <= 0:
            raise ValidationError("Valid license ID is required")
        amount = normalize_amount(payload.amount)
        currency = (payload.currency or "").strip().upper()
        if not currency:
            raise ValidationError("Currency is required")
        if len(currency) != 3:
            raise ValidationError("Currency must be a 3-character ISO code")
        method = require_text(payload.payment_method, "Payment method is required")
        require_max_length(method, PAYMENT_METHOD_MAX_LENGTH, "Payment method")
        description = (payload.description or "").strip() or None
        require_max_length(description, DESCRIPTION_MAX_LENGTH, "Description")

        reference = (payload.transaction_reference or "").strip() or None
        require_max_length(reference, REFERENCE_MAX_LENGTH, "Transaction reference")
        if reference is not None and payment_repo.transaction_reference_exists(self.db, reference):
            raise InvalidOperationError("A payment with this transaction reference already exists")

        status = PaymentStatus.parse(payload.status) if payload.status else PaymentStatus.PENDING
        fields = dict(
            license_id=payload.license_id,
            amount=amount,
            currency=currency,
            status=status.value,
            payment_method=method,
            transaction_reference=reference,
            description=description,
        )
        if payload.payment_date is not None:
            fields["payment_date"] = payload.payment_date
        payment = payment_repo.create_payment(self.db, **fields)
        logger.info(
            "Payment %s created for license %s (%s %s, %s)",
            payment.payment_id, payment.license_id, payment.amount, payment.currency, payment.status,
        )
        return payment

    def update_status(self, payment_id: int, status: str) -> models.Payment:
        target = PaymentStatus.parse(status)
        payment = self.get_payment(payment_id, for_update=True)
        current = PaymentStatus.parse(payment.status)
        if current == target:
            return payment
        if not can_transition(current, target):
            raise InvalidOperationError(
                f"Cannot change payment status from {current.value} to {target.value}"
            )
        payment.status = target.value
        payment = payment_repo.save_payment(self.db, payment)
        logger.info("Payment %s status %s -> %s", payment_id, current.value, target.value)
        return payment

    def refund(self, payment_id: int, reason: Optional[str] = None) -> models.Payment:
        reason = (reason or "").strip() or DEFAULT_REFUND_REASON
        require_max_length(reason, DESCRIPTION_MAX_LENGTH, "Refund reason")
        payment = self.get_payment(payment_id, for_update=True)
        if payment.status != PaymentStatus.COMPLETED.value:
            raise InvalidOperationError("Only completed payments can be refunded")
        payment.status = PaymentStatus.REFUNDED.value
        payment.description = reason
        payment = payment_repo.save_payment(self.db, payment)
        logger.info("Payment %s refunded", payment_id)
        return payment

    def delete_payment(self, payment_id: int) -> None:
        payment = self.get_payment(payment_id, for_update=True)
        if payment.status != PaymentStatus.PENDING.value:
            raise InvalidOperationError("Only pending payments can be deleted")
        payment_repo.delete_payment(self.db, payment)
        logger.info("Payment %s deleted", payment_id)

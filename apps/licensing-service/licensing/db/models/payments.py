from sqlalchemy import Column, Integer, String, Numeric, DateTime, Index, CheckConstraint, text
from .base import Base, now_utc


class Payment(Base):
    __tablename__ = 'payments'

    payment_id = Column(Integer, primary_key=True, autoincrement=True)
    license_id = Column(Integer, nullable=False)
    amount = Column(Numeric(18, 2), nullable=False)
    currency = Column(String(3), nullable=False, default='USD')
    payment_date = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    # Pending | Completed | Failed | Refunded | Disputed
    status = Column(String(50), nullable=False, default='Pending')
    payment_method = Column(String(50), nullable=False)
    transaction_reference = Column(String(100), nullable=True)
    description = Column(String(500), nullable=True)
    created_date = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    updated_date = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index('idx_payments_license_id', 'license_id'),
        Index('idx_payments_status', 'status'),
        Index('idx_payments_payment_date', 'payment_date'),
        Index('idx_payments_transaction_reference', 'transaction_reference'),
        Index(
            'uq_payments_transaction_reference',
            'transaction_reference',
            unique=True,
            postgresql_where=text('transaction_reference IS NOT NULL'),
            sqlite_where=text('transaction_reference IS NOT NULL'),
        ),
        CheckConstraint('amount > 0', name='ck_payments_amount_positive'),
    )

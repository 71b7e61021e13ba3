from sqlalchemy import Column, Integer, String, DateTime, Index
from .base import Base, now_utc


class User(Base):
    __tablename__ = 'users'

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), nullable=False, unique=True)
    email = Column(String(320), nullable=False)
    # Argon2 hash; plaintext never persisted
    password = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False, default='User')
    tenant_id = Column(Integer, nullable=True)
    created_date = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    updated_date = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index('idx_users_tenant_id', 'tenant_id'),
    )

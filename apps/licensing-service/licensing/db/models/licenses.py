from sqlalchemy import Column, Integer, String, DateTime
from .base import Base, now_utc


class License(Base):
    __tablename__ = 'licenses'

    license_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)
    created_date = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    updated_date = Column(DateTime(timezone=True), nullable=True)

from sqlalchemy import Column, Integer, String, Text, DateTime, Index
from .base import Base, now_utc


class Notification(Base):
    __tablename__ = 'notifications'

    notification_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    status = Column(String(50), nullable=False, default='Unread')
    created_date = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    updated_date = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index('idx_notifications_status', 'status'),
    )

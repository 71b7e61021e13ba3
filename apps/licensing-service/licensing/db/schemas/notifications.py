from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict


class NotificationBase(BaseModel):
    title: str
    message: str
    status: str = "Unread"


class NotificationCreate(NotificationBase):
    pass


class NotificationUpdate(BaseModel):
    title: str
    message: Optional[str] = None
    status: Optional[str] = None


class Notification(NotificationBase):
    notification_id: int
    created_date: datetime
    updated_date: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)

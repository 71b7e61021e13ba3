from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict


class UserCreate(BaseModel):
    username: str
    email: str
    password: str
    role: str = "User"
    tenant_id: Optional[int] = None


class UserUpdate(BaseModel):
    email: str
    role: Optional[str] = None
    tenant_id: Optional[int] = None
    # Re-hashed when supplied; omitted keeps the current hash
    password: Optional[str] = None


class User(BaseModel):
    """Public view of a user; the password hash is never serialized."""
    user_id: int
    username: str
    email: str
    role: str
    tenant_id: Optional[int] = None
    created_date: datetime
    updated_date: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)

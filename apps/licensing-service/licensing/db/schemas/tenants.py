from datetime import datetime
from pydantic import BaseModel, ConfigDict


class TenantBase(BaseModel):
    name: str


class TenantCreate(TenantBase):
    pass


class TenantUpdate(TenantBase):
    pass


class Tenant(TenantBase):
    tenant_id: int
    created_date: datetime
    updated_date: datetime | None = None
    model_config = ConfigDict(from_attributes=True)

from datetime import datetime
from pydantic import BaseModel, ConfigDict


class LicenseBase(BaseModel):
    name: str


class LicenseCreate(LicenseBase):
    pass


class LicenseUpdate(LicenseBase):
    pass


class License(LicenseBase):
    license_id: int
    created_date: datetime
    updated_date: datetime | None = None
    model_config = ConfigDict(from_attributes=True)

from datetime import datetime
from pydantic import BaseModel, ConfigDict


class CustomerBase(BaseModel):
    name: str


class CustomerCreate(CustomerBase):
    pass


class CustomerUpdate(CustomerBase):
    pass


class Customer(CustomerBase):
    customer_id: int
    created_date: datetime
    updated_date: datetime | None = None
    model_config = ConfigDict(from_attributes=True)

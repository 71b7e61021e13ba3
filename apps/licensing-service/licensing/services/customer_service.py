"""
Customer service: name validation over the customer repository.
"""
from typing import List

from sqlalchemy.orm import Session

from licensing.db import models
from licensing.db.repositories import customers as customer_repo
from licensing.errors import NotFoundError, require_max_length, require_positive_id, require_text

NAME_MAX_LENGTH = 255


class CustomerService:

    def __init__(self, db: Session):
        self.db = db

    def list_customers(self) -> List[models.Customer]:
        return customer_repo.get_customers(self.db)

    def get_customer(self, customer_id: int) -> models.Customer:
        require_positive_id(customer_id, "customer")
        customer = customer_repo.get_customer(self.db, customer_id)
        if customer is None:
            raise NotFoundError(f"Customer with ID {customer_id} not found.")
        return customer

    def create_customer(self, name: str) -> models.Customer:
        name = require_text(name, "Customer name is required")
        require_max_length(name, NAME_MAX_LENGTH, "Customer name")
        return customer_repo.create_customer(self.db, name=name)

    def update_customer(self, customer_id: int, name: str) -> models.Customer:
        customer = self.get_customer(customer_id)
        name = require_text(name, "Customer name is required")
        require_max_length(name, NAME_MAX_LENGTH, "Customer name")
        return customer_repo.update_customer(self.db, customer, name=name)

    def delete_customer(self, customer_id: int) -> None:
        customer = self.get_customer(customer_id)
        customer_repo.delete_customer(self.db, customer)

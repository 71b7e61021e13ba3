"""
Customers API endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from licensing.api.deps import get_customer_service
from licensing.db import schemas
from licensing.services import CustomerService

router = APIRouter(prefix="/api/customers", tags=["customers"])


@router.get("", response_model=schemas.ApiResult[List[schemas.Customer]])
def list_customers_endpoint(service: CustomerService = Depends(get_customer_service)):
    customers = [schemas.Customer.model_validate(c) for c in service.list_customers()]
    return schemas.ApiResult.ok(customers, "Customers retrieved successfully")


@router.get("/{customer_id}", response_model=schemas.ApiResult[schemas.Customer])
def get_customer_endpoint(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    customer = service.get_customer(customer_id)
    return schemas.ApiResult.ok(schemas.Customer.model_validate(customer), "Customer retrieved successfully")


@router.post("", response_model=schemas.ApiResult[schemas.Customer], status_code=status.HTTP_201_CREATED)
def create_customer_endpoint(
    payload: schemas.CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
):
    customer = service.create_customer(payload.name)
    return schemas.ApiResult.ok(schemas.Customer.model_validate(customer), "Customer created successfully")


@router.put("/{customer_id}", response_model=schemas.ApiResult[schemas.Customer])
def update_customer_endpoint(
    customer_id: int,
    payload: schemas.CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
):
    customer = service.update_customer(customer_id, payload.name)
    return schemas.ApiResult.ok(schemas.Customer.model_validate(customer), "Customer updated successfully")


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer_endpoint(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    service.delete_customer(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""
Licenses API endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from licensing.api.deps import get_license_service
from licensing.db import schemas
from licensing.services import LicenseService

router = APIRouter(prefix="/api/licenses", tags=["licenses"])


@router.get("", response_model=schemas.ApiResult[List[schemas.License]])
def list_licenses_endpoint(service: LicenseService = Depends(get_license_service)):
    items = [schemas.License.model_validate(t) for t in service.list_licenses()]
    return schemas.ApiResult.ok(items, "Licenses retrieved successfully")


@router.get("/{license_id}", response_model=schemas.ApiResult[schemas.License])
def get_license_endpoint(license_id: int, service: LicenseService = Depends(get_license_service)):
    item = service.get_license(license_id)
    return schemas.ApiResult.ok(schemas.License.model_validate(item), "License retrieved successfully")


@router.post("", response_model=schemas.ApiResult[schemas.License], status_code=status.HTTP_201_CREATED)
def create_license_endpoint(
    payload: schemas.LicenseCreate,
    service: LicenseService = Depends(get_license_service),
):
    item = service.create_license(payload.name)
    return schemas.ApiResult.ok(schemas.License.model_validate(item), "License created successfully")


@router.put("/{license_id}", response_model=schemas.ApiResult[schemas.License])
def update_license_endpoint(
    license_id: int,
    payload: schemas.LicenseUpdate,
    service: LicenseService = Depends(get_license_service),
):
    item = service.update_license(license_id, payload.name)
    return schemas.ApiResult.ok(schemas.License.model_validate(item), "License updated successfully")


@router.delete("/{license_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_license_endpoint(license_id: int, service: LicenseService = Depends(get_license_service)):
    service.delete_license(license_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

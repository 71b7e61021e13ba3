"""
Tenants API endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from licensing.api.deps import get_tenant_service
from licensing.db import schemas
from licensing.services import TenantService

router = APIRouter(prefix="/api/tenants", tags=["tenants"])


@router.get("", response_model=schemas.ApiResult[List[schemas.Tenant]])
def list_tenants_endpoint(service: TenantService = Depends(get_tenant_service)):
    items = [schemas.Tenant.model_validate(t) for t in service.list_tenants()]
    return schemas.ApiResult.ok(items, "Tenants retrieved successfully")


@router.get("/{tenant_id}", response_model=schemas.ApiResult[schemas.Tenant])
def get_tenant_endpoint(tenant_id: int, service: TenantService = Depends(get_tenant_service)):
    item = service.get_tenant(tenant_id)
    return schemas.ApiResult.ok(schemas.Tenant.model_validate(item), "Tenant retrieved successfully")


@router.post("", response_model=schemas.ApiResult[schemas.Tenant], status_code=status.HTTP_201_CREATED)
def create_tenant_endpoint(
    payload: schemas.TenantCreate,
    service: TenantService = Depends(get_tenant_service),
):
    item = service.create_tenant(payload.name)
    return schemas.ApiResult.ok(schemas.Tenant.model_validate(item), "Tenant created successfully")


@router.put("/{tenant_id}", response_model=schemas.ApiResult[schemas.Tenant])
def update_tenant_endpoint(
    tenant_id: int,
    payload: schemas.TenantUpdate,
    service: TenantService = Depends(get_tenant_service),
):
    item = service.update_tenant(tenant_id, payload.name)
    return schemas.ApiResult.ok(schemas.Tenant.model_validate(item), "Tenant updated successfully")


@router.delete("/{tenant_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_tenant_endpoint(tenant_id: int, service: TenantService = Depends(get_tenant_service)):
    service.delete_tenant(tenant_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

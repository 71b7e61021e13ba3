"""
Tenant service.
"""
from typing import List

from sqlalchemy.orm import Session

from licensing.db import models
from licensing.db.repositories import tenants as tenant_repo
from licensing.errors import (
    InvalidOperationError,
    NotFoundError,
    require_max_length,
    require_positive_id,
    require_text,
)

NAME_MAX_LENGTH = 255


class TenantService:

    def __init__(self, db: Session):
        self.db = db

    def list_tenants(self) -> List[models.Tenant]:
        return tenant_repo.get_tenants(self.db)

    def get_tenant(self, tenant_id: int) -> models.Tenant:
        require_positive_id(tenant_id, "tenant")
        tenant = tenant_repo.get_tenant(self.db, tenant_id)
        if tenant is None:
            raise NotFoundError(f"Tenant with ID {tenant_id} not found.")
        return tenant

    def create_tenant(self, name: str) -> models.Tenant:
        name = require_text(name, "Tenant name is required")
        require_max_length(name, NAME_MAX_LENGTH, "Tenant name")
        if tenant_repo.get_tenant_by_name(self.db, name) is not None:
            raise InvalidOperationError("A tenant with this name already exists")
        return tenant_repo.create_tenant(self.db, name=name)

    def update_tenant(self, tenant_id: int, name: str) -> models.Tenant:
        tenant = self.get_tenant(tenant_id)
        name = require_text(name, "Tenant name is required")
        require_max_length(name, NAME_MAX_LENGTH, "Tenant name")
        existing = tenant_repo.get_tenant_by_name(self.db, name)
        if existing is not None and existing.tenant_id != tenant.tenant_id:
            raise InvalidOperationError("A tenant with this name already exists")
        return tenant_repo.update_tenant(self.db, tenant, name=name)

    def delete_tenant(self, tenant_id: int) -> None:
        tenant = self.get_tenant(tenant_id)
        tenant_repo.delete_tenant(self.db, tenant)

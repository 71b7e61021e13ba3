"""
License service.
"""
from typing import List

from sqlalchemy.orm import Session

from licensing.db import models
from licensing.db.repositories import licenses as license_repo
from licensing.errors import (
    InvalidOperationError,
    NotFoundError,
    require_max_length,
    require_positive_id,
    require_text,
)

NAME_MAX_LENGTH = 255


class LicenseService:

    def __init__(self, db: Session):
        self.db = db

    def list_licenses(self) -> List[models.License]:
        return license_repo.get_licenses(self.db)

    def get_license(self, license_id: int) -> models.License:
        require_positive_id(license_id, "license")
        license_ = license_repo.get_license(self.db, license_id)
        if license_ is None:
            raise NotFoundError(f"License with ID {license_id} not found.")
        return license_

    def create_license(self, name: str) -> models.License:
        name = require_text(name, "License name is required")
        require_max_length(name, NAME_MAX_LENGTH, "License name")
        if license_repo.get_license_by_name(self.db, name) is not None:
            raise InvalidOperationError("A license with this name already exists")
        return license_repo.create_license(self.db, name=name)

    def update_license(self, license_id: int, name: str) -> models.License:
        license_ = self.get_license(license_id)
        name = require_text(name, "License name is required")
        require_max_length(name, NAME_MAX_LENGTH, "License name")
        existing = license_repo.get_license_by_name(self.db, name)
        if existing is not None and existing.license_id != license_.license_id:
            raise InvalidOperationError("A license with this name already exists")
        return license_repo.update_license(self.db, license_, name=name)

    def delete_license(self, license_id: int) -> None:
        license_ = self.get_license(license_id)
        license_repo.delete_license(self.db, license_)

"""Response envelope shared by every service."""
from datetime import datetime, UTC
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ApiResult(BaseModel, Generic[T]):
    success: bool
    message: str = ""
    data: Optional[T] = None
    errors: List[str] = Field(default_factory=list)
    timestamp: datetime = Field(default_factory=_utcnow)

    @classmethod
    def ok(cls, data: T, message: str = "Success") -> "ApiResult[T]":
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, message: str, errors: Optional[List[str]] = None) -> "ApiResult[T]":
        return cls(success=False, message=message, errors=list(errors or []))

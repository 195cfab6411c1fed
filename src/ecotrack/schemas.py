"""Shared response envelope and request base model."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Every endpoint answers with ``{success, data?, message?, count?}``."""

    success: bool = True
    data: T | None = None
    message: str | None = None
    count: int | None = None


class RequestModel(BaseModel):
    """Request body base: accepts both ``snake_case`` and ``camelCase`` keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def changes(self, *nullable: str) -> dict[str, Any]:
        """
        Fields the client actually sent, for partial updates.

        An explicit null only clears a column named in ``nullable``; for any
        other field it is ignored.
        """
        return {
            k: v for k, v in self.model_dump(exclude_unset=True).items() if v is not None or k in nullable
        }


class ORMModel(BaseModel):
    """Response base built from ORM objects."""

    model_config = ConfigDict(from_attributes=True)


def ok(data: object = None, *, count: int | None = None, message: str | None = None) -> ApiResponse:
    """Build a success envelope."""
    return ApiResponse(success=True, data=data, count=count, message=message)


def ok_list(items: list) -> ApiResponse:
    """Build a success envelope for a list, with ``count`` set."""
    return ApiResponse(success=True, data=items, count=len(items))

"""
Base controller.

Controllers translate an HTTP request into one service call and the result into
the standard response envelope. Errors are not handled here: domain errors
propagate to the exception handlers registered on the application.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Type

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlmodel import SQLModel

from postboard.core.models.io.common import PageMeta


class BaseController:
    """Shared response helpers for controllers."""

    read_schema: Optional[Type[BaseModel]] = None

    def serialize(self, obj: Any, schema: Optional[Type[BaseModel]] = None) -> Any:
        """Convert entities to JSON-ready data.

        Table entities go through the read schema so only API fields leave the
        service; other pydantic models are dumped as they are.
        """
        schema = schema or self.read_schema
        if isinstance(obj, (list, tuple)):
            return [self.serialize(item, schema) for item in obj]
        if isinstance(obj, SQLModel) and schema is not None:
            return schema.model_validate(obj, from_attributes=True).model_dump(mode="json")
        if isinstance(obj, BaseModel):
            return obj.model_dump(mode="json")
        return obj

    def ok(
        self,
        data: Any,
        meta: Optional[PageMeta] = None,
        status_code: int = status.HTTP_200_OK,
        schema: Optional[Type[BaseModel]] = None,
    ) -> JSONResponse:
        """Build a successful envelope response."""
        content = {"success": True, "data": self.serialize(data, schema)}
        if meta is not None:
            content["meta"] = meta.model_dump()
        return JSONResponse(status_code=status_code, content=content)

    def created(self, data: Any) -> JSONResponse:
        """Build a 201 envelope response for a newly created resource."""
        return self.ok(data, status_code=status.HTTP_201_CREATED)

    def paginated(
        self,
        items: Iterable[Any],
        total: int,
        limit: int,
        offset: int,
        schema: Optional[Type[BaseModel]] = None,
    ) -> JSONResponse:
        """Build a list envelope with pagination metadata."""
        meta = PageMeta(total=total, limit=limit, offset=offset)
        return self.ok(list(items), meta=meta, schema=schema)

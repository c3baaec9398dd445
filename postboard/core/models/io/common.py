"""
Response envelope models shared by every endpoint.

Successful responses are ``{"success": true, "data": ..., "meta": ...}``;
errors are ``{"success": false, "error": {"code", "message", "details"}}``.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class PageMeta(BaseModel):
    """Pagination metadata attached to list responses."""

    total: int = Field(description="Number of matching records")
    limit: int
    offset: int


class Envelope(BaseModel, Generic[DataT]):
    """Successful response envelope."""

    success: bool = True
    data: DataT
    meta: Optional[PageMeta] = None


class ErrorBody(BaseModel):
    """Error description inside an error envelope."""

    code: str
    message: str
    details: Optional[Dict[str, Any]] = None


class ErrorEnvelope(BaseModel):
    """Error response envelope."""

    success: bool = False
    error: ErrorBody

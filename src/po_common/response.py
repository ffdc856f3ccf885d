"""Unified API response wrapper.

All API endpoints return this format:
{
    "code": 0,           // 0=success, non-0=AppError code
    "message": "success",
    "data": { ... },     // null on error
    "timestamp": "...",
    "request_id": "..."
}
"""

import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field


def new_request_id() -> str:
    return f"req_{uuid.uuid4().hex[:12]}"


class ApiResponse(BaseModel):
    code: int = 0
    message: str = "success"
    data: Any = None
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    request_id: str = Field(default_factory=new_request_id)


def _envelope(code: int, message: str, data: Any, request_id: str | None) -> ApiResponse:
    resp = ApiResponse(code=code, message=message, data=data)
    if request_id:
        resp.request_id = request_id
    return resp


def success_response(data: Any = None, request_id: str | None = None) -> ApiResponse:
    return _envelope(0, "success", data, request_id)


def error_response(code: int, message: str, request_id: str | None = None) -> ApiResponse:
    return _envelope(code, message, None, request_id)

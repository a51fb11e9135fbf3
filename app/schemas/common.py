"""
Единый формат ответов API.

Успех: { "success": true, "data": <payload> }
Ошибка: { "success": false, "error": "<code>", "message": "<text>" }

Коды ошибок: validation_error, id_mismatch (400), not_found (404), method_not_allowed (405),
conflict (409), storage_unavailable, internal_server_error (500).
"""
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class SuccessResponse(BaseModel, Generic[T]):
    """Успешный ответ: success=true, data — позиция, список позиций или null."""

    success: bool = True
    data: T | None = Field(default=None, description="Тело ответа")


class ErrorResponse(BaseModel):
    """Ответ с ошибкой: success=false, код и текст."""

    success: bool = False
    error: str = Field(..., description="Код ошибки (conflict, not_found, validation_error, ...)")
    message: str = Field(..., description="Текст, например 'item 107 already exists'")

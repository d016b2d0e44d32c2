"""
Envelope returned by every JSON endpoint: {success, data, error}.
File downloads and the HTML preview are sent raw, without it.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ErrorDTO(BaseModel):
    message: str
    code: int


class ApiResponse(BaseModel, Generic[T]):
    success: bool
    data: Optional[T] = None
    error: Optional[ErrorDTO] = None

    @classmethod
    def ok(cls, data: T) -> "ApiResponse[T]":
        return cls(success=True, data=data, error=None)


class DeleteResultDTO(BaseModel):
    deleted_count: int

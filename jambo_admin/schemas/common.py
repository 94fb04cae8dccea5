"""Response envelopes"""
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """``{"success": true, "message": ..., "data": ...}``"""
    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None


class ErrorDetail(BaseModel):
    message: str
    stack: Optional[str] = None


class ErrorResponse(BaseModel):
    """``{"success": false, "error": {"message": ..., "stack": ...}}``"""
    success: bool = False
    error: ErrorDetail

"""Pydantic models for error responses."""

from typing import Any, List

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Error body shared by HTTP and gRPC responses."""

    code: int = Field(500, description="HTTP status code or gRPC status code")
    status: str = Field("Internal Server Error", description="Text of the code")
    message: str = Field("", description="Error message")
    details: List[Any] = Field(default_factory=list, description="Additional error details of any type")

    def __str__(self) -> str:
        return f"[{self.status}] {self.message}"


class ErrorResponse(BaseModel):
    """Error response model."""

    error: ErrorDetail = Field(default_factory=ErrorDetail, description="Error body")

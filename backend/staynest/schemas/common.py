"""Schemas shared across routers."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str


class ErrorResponse(BaseModel):
    """Body returned for booking engine errors."""

    detail: str
    code: str
    retryable: bool = False

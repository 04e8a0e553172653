"""Response envelopes shared by all endpoints."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class DataResponse(BaseModel, Generic[T]):
    success: bool = True
    message: str
    data: T


class ListResponse(BaseModel, Generic[T]):
    success: bool = True
    message: str
    data: list[T]
    total: int


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    success: bool = False
    detail: str
    code: str

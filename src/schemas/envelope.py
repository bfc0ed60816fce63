# src/schemas/envelope.py

from typing import Generic, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class DataEnvelope(BaseModel, Generic[T]):
    success: bool = True
    data: T


class MessageEnvelope(BaseModel):
    success: bool = True
    message: str


class ErrorEnvelope(BaseModel):
    success: bool = False
    error: str

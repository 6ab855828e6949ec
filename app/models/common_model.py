# /app/models/common_model.py

from typing import Generic, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Envelope for every successful JSON body: `{"data": ...}`."""
    data: T


class HealthStatus(BaseModel):
    message: str
    version: str
    timestamp: str
    status: str

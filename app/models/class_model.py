# /app/models/class_model.py

from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional

CLASS_NAME_MAX_LENGTH = 128


class ClassCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=CLASS_NAME_MAX_LENGTH)
    description: Optional[str] = Field(default=None)


class ClassUpdate(BaseModel):
    """All fields optional; only the fields present in the request are changed."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=CLASS_NAME_MAX_LENGTH)
    description: Optional[str] = Field(default=None)


class Class(BaseModel):
    """
    The full representation of a Class resource. `description` is left as
    None when the class has none, and the routers drop None fields from the
    response body so it is absent rather than "".
    """
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: Optional[str] = None


class ClassSummary(Class):
    studentCount: int = 0


class BulkStudentIds(BaseModel):
    studentIds: List[str] = Field(..., min_length=1)


class BulkAssignResult(BaseModel):
    assigned: int
    classId: str


class BulkRemoveResult(BaseModel):
    removed: int
    classId: str

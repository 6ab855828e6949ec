# /app/models/student_model.py

# --- Core Imports ---
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional

NAME_MAX_LENGTH = 64

# --- Model Definitions ---

class StudentBase(BaseModel):
    """
    The base model for a Student. Contains fields common to create and read operations.
    """
    firstName: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="The student's given name.")
    lastName: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="The student's family name.")

class StudentCreate(StudentBase):
    """The model used for creating a new student. Inherits all fields from the base."""
    pass

class StudentUpdate(BaseModel):
    """
    The model for updating a student. All fields are optional to allow for
    partial updates.
    """
    firstName: Optional[str] = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)
    lastName: Optional[str] = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)

class Student(StudentBase):
    """
    The full representation of a Student resource as returned by the API.
    `classIds` is rebuilt from the assignment table on every read.
    """
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="The unique, server-generated identifier for the student.")
    classIds: List[str] = Field(default_factory=list, description="IDs of every class the student is assigned to.")

class AssignClassRequest(BaseModel):
    classId: str = Field(..., min_length=1)

class StudentClassesUpdate(BaseModel):
    """Desired full set of class IDs for one student."""
    classIds: List[str]

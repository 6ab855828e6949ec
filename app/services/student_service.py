# /app/services/student_service.py

"""
Business logic for students and their class assignments.

A thin facade over `roster_helpers`: writes go through `crud`, reads through
`aggregation` so every returned Student carries freshly computed classIds.
"""

from typing import List, Optional

from ..models import student_model
from .database_service import DatabaseService
from .roster_helpers import aggregation, crud


def get_all_students(db: DatabaseService) -> List[student_model.Student]:
    """Retrieves all students, each with its classIds."""
    return aggregation.all_students_with_classes(db)


def get_student_by_id(student_id: str, db: DatabaseService) -> Optional[student_model.Student]:
    """Retrieves one student, or None if the id is unknown."""
    return aggregation.student_with_classes(student_id, db)


def create_student(student_data: student_model.StudentCreate, db: DatabaseService) -> student_model.Student:
    """Creates a new student with an empty class list."""
    return crud.create_student(student_data=student_data, db=db)


def update_student(
    student_id: str,
    student_update: student_model.StudentUpdate,
    db: DatabaseService
) -> student_model.Student:
    """Partially updates a student's names."""
    return crud.update_student(student_id=student_id, student_update=student_update, db=db)


def delete_student(student_id: str, db: DatabaseService) -> None:
    """Deletes a student and all of its class assignments."""
    crud.delete_student(student_id=student_id, db=db)


def assign_to_class(student_id: str, class_id: str, db: DatabaseService) -> None:
    """Puts the student in the class."""
    crud.assign_student_to_class(student_id=student_id, class_id=class_id, db=db)


def remove_from_class(student_id: str, class_id: str, db: DatabaseService) -> None:
    crud.remove_student_from_class(student_id=student_id, class_id=class_id, db=db)


def set_classes(student_id: str, class_ids: List[str], db: DatabaseService) -> student_model.Student:
    """Replaces the student's class set and returns the student as it now stands."""
    crud.set_student_classes(student_id=student_id, class_ids=class_ids, db=db)
    return aggregation.student_with_classes(student_id, db)

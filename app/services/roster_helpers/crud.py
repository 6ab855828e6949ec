# /app/services/roster_helpers/crud.py

import logging
from typing import Dict, List

from ...models import class_model, student_model
from ..database_service import DatabaseService
from ..errors import NotFoundError
from . import aggregation, validation

logger = logging.getLogger(__name__)


# --- STUDENT-RELATED CORE BUSINESS LOGIC ---

def create_student(student_data: student_model.StudentCreate, db: DatabaseService) -> student_model.Student:
    """Validates the names, stores the student and returns it with no classes."""
    record = validation.student_columns(student_data.model_dump())
    new_student = db.add_student(record)
    # A new student cannot have any assignments yet.
    return aggregation.to_student(new_student, [])


def update_student(student_id: str, student_update: student_model.StudentUpdate, db: DatabaseService) -> student_model.Student:
    """
    Applies only the fields present in the request body and returns the
    student with its current classIds.
    """
    update_data = validation.student_columns(student_update.model_dump(exclude_unset=True), partial=True)
    updated = db.update_student(student_id, update_data)
    return aggregation.to_student(updated, db.class_ids_for(student_id))


def delete_student(student_id: str, db: DatabaseService) -> None:
    """Deletes the student; its assignments are removed with it."""
    db.delete_student(student_id)


# --- CLASS-RELATED CORE BUSINESS LOGIC ---

def create_class(class_data: class_model.ClassCreate, db: DatabaseService) -> class_model.Class:
    """Validates the name and description and stores the new class."""
    record = validation.class_columns(class_data.model_dump())
    return aggregation.to_class(db.add_class(record))


def update_class(class_id: str, class_update: class_model.ClassUpdate, db: DatabaseService) -> class_model.Class:
    """Applies only the fields present in the request body."""
    update_data = validation.class_columns(class_update.model_dump(exclude_unset=True), partial=True)
    return aggregation.to_class(db.update_class(class_id, update_data))


def delete_class(class_id: str, db: DatabaseService) -> None:
    """Deletes the class; its assignments are removed with it."""
    db.delete_class(class_id)


# --- ASSIGNMENT LOGIC ---

def assign_student_to_class(student_id: str, class_id: str, db: DatabaseService) -> None:
    """Stores a single pair. Unknown ids are NotFound, an existing pair is a Conflict."""
    db.assign(student_id, class_id)


def remove_student_from_class(student_id: str, class_id: str, db: DatabaseService) -> None:
    """Removes a single pair, raising NotFoundError when it does not exist."""
    db.unassign(student_id, class_id)


def set_student_classes(student_id: str, class_ids: List[str], db: DatabaseService) -> Dict[str, int]:
    """
    Makes the student's assignments equal to `class_ids`, assigning what is
    missing and removing what is extra. Every id is checked before anything
    is written, and the additions and removals are committed together.
    """
    if db.get_student_by_id(student_id) is None:
        raise NotFoundError("Student", student_id)
    wanted = set(class_ids)
    for class_id in sorted(wanted):
        if db.get_class_by_id(class_id) is None:
            raise NotFoundError("Class", class_id)

    current = db.class_ids_for(student_id)
    to_add = sorted(wanted - current)
    to_remove = sorted(current - wanted)
    if to_add or to_remove:
        db.replace_student_classes(student_id, to_add, to_remove)

    logger.info("Synced classes for student %s: +%d -%d", student_id, len(to_add), len(to_remove))
    return {"added": len(to_add), "removed": len(to_remove)}


def assign_many(class_id: str, student_ids: List[str], db: DatabaseService) -> int:
    """
    Assigns each listed student to the class, skipping students that are
    already in it. Returns how many new pairs were written.
    """
    if db.get_class_by_id(class_id) is None:
        raise NotFoundError("Class", class_id)
    wanted = set(student_ids)
    for student_id in sorted(wanted):
        if db.get_student_by_id(student_id) is None:
            raise NotFoundError("Student", student_id)

    to_add = sorted(wanted - db.student_ids_for(class_id))
    for student_id in to_add:
        db.assign(student_id, class_id)
    return len(to_add)


def remove_many(class_id: str, student_ids: List[str], db: DatabaseService) -> int:
    """Removes each listed student that is currently in the class."""
    if db.get_class_by_id(class_id) is None:
        raise NotFoundError("Class", class_id)

    to_remove = sorted(set(student_ids) & db.student_ids_for(class_id))
    for student_id in to_remove:
        db.unassign(student_id, class_id)
    return len(to_remove)

# /app/services/database_helpers/class_student_repository_sql.py

"""
This module contains the SQLAlchemy queries for the Student and Class tables.

The repository knows nothing about class membership except that deleting a
student or class must also clear its assignment pairs. That cleanup is
delegated to the AssignmentRepositorySQL sharing this session, and runs in
the same transaction as the entity delete.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.models.class_student_models import Class, Student
from ..errors import NotFoundError
from .assignment_repository_sql import AssignmentRepositorySQL
from .store_guard import store_guard

logger = logging.getLogger(__name__)


class ClassStudentRepositorySQL:
    def __init__(self, db_session: Session, assignment_repo: AssignmentRepositorySQL):
        self.db = db_session
        self.assignment_repo = assignment_repo

    # --- Student Methods ---

    def get_all_students(self) -> List[Student]:
        """Retrieves every student, ordered by last name and then first name."""
        with store_guard(self.db, "fetch students"):
            stmt = select(Student).order_by(Student.last_name, Student.first_name, Student.id)
            return list(self.db.scalars(stmt).all())

    def get_students_by_ids(self, student_ids: Iterable[str]) -> List[Student]:
        student_ids = list(student_ids)
        if not student_ids:
            return []
        with store_guard(self.db, "fetch students"):
            stmt = (
                select(Student)
                .where(Student.id.in_(student_ids))
                .order_by(Student.last_name, Student.first_name, Student.id)
            )
            return list(self.db.scalars(stmt).all())

    def get_student_by_id(self, student_id: str) -> Optional[Student]:
        with store_guard(self.db, "fetch student"):
            return self.db.get(Student, student_id)

    def add_student(self, record: Dict) -> Student:
        """Creates a new Student record from a dict of column values."""
        with store_guard(self.db, "create student"):
            new_student = Student(**record)
            self.db.add(new_student)
            self.db.commit()
            self.db.refresh(new_student)
        logger.info("Created student %s", new_student.id)
        return new_student

    def update_student(self, student_id: str, data: Dict) -> Student:
        """
        Applies a partial update. Keys absent from `data` are left alone.
        Raises NotFoundError if the student does not exist.
        """
        with store_guard(self.db, "update student"):
            db_student = self.db.get(Student, student_id)
            if db_student is None:
                raise NotFoundError("Student", student_id)
            for key, value in data.items():
                setattr(db_student, key, value)
            # Stamp the row even for an empty update.
            db_student.updated_at = datetime.now(timezone.utc)
            self.db.commit()
            self.db.refresh(db_student)
        logger.info("Updated student %s (%s)", student_id, ", ".join(data) or "no fields")
        return db_student

    def delete_student(self, student_id: str) -> None:
        """
        Deletes a student together with all of its assignment pairs.
        Raises NotFoundError if the student does not exist.
        """
        with store_guard(self.db, "delete student"):
            db_student = self.db.get(Student, student_id)
            if db_student is None:
                raise NotFoundError("Student", student_id)
            # Pairs go first; the commit below covers both statements.
            removed = self.assignment_repo.cascade_delete_for_student(student_id)
            self.db.delete(db_student)
            self.db.commit()
        logger.info("Deleted student %s and %d assignment(s)", student_id, removed)

    # --- Class Methods ---

    def get_all_classes(self) -> List[Class]:
        """Retrieves every class, ordered by name."""
        with store_guard(self.db, "fetch classes"):
            stmt = select(Class).order_by(Class.name, Class.id)
            return list(self.db.scalars(stmt).all())

    def get_class_by_id(self, class_id: str) -> Optional[Class]:
        with store_guard(self.db, "fetch class"):
            return self.db.get(Class, class_id)

    def add_class(self, record: Dict) -> Class:
        with store_guard(self.db, "create class"):
            new_class = Class(**record)
            self.db.add(new_class)
            self.db.commit()
            self.db.refresh(new_class)
        logger.info("Created class %s", new_class.id)
        return new_class

    def update_class(self, class_id: str, data: Dict) -> Class:
        with store_guard(self.db, "update class"):
            db_class = self.db.get(Class, class_id)
            if db_class is None:
                raise NotFoundError("Class", class_id)
            for key, value in data.items():
                setattr(db_class, key, value)
            db_class.updated_at = datetime.now(timezone.utc)
            self.db.commit()
            self.db.refresh(db_class)
        logger.info("Updated class %s (%s)", class_id, ", ".join(data) or "no fields")
        return db_class

    def delete_class(self, class_id: str) -> None:
        with store_guard(self.db, "delete class"):
            db_class = self.db.get(Class, class_id)
            if db_class is None:
                raise NotFoundError("Class", class_id)
            removed = self.assignment_repo.cascade_delete_for_class(class_id)
            self.db.delete(db_class)
            self.db.commit()
        logger.info("Deleted class %s and %d assignment(s)", class_id, removed)

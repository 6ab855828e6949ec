# /app/services/database_helpers/assignment_repository_sql.py

"""
The assignment index: the only place the student/class relation is stored.

Every read of a student's `classIds` and every class roster goes through
here. Entity rows are consulted only to check that both ends of a pair exist.
"""

import logging
from typing import Iterable, List, Optional, Set, Tuple

from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.db.models.class_student_models import Class, ClassAssignment, Student
from ..errors import ConflictError, NotFoundError
from .store_guard import store_guard

logger = logging.getLogger(__name__)


class AssignmentRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def _pair_exists(self, student_id: str, class_id: str) -> bool:
        stmt = select(ClassAssignment.id).where(
            ClassAssignment.student_id == student_id,
            ClassAssignment.class_id == class_id,
        )
        return self.db.execute(stmt).first() is not None

    def assign(self, student_id: str, class_id: str) -> ClassAssignment:
        """
        Inserts the (student, class) pair.

        Raises NotFoundError if either id is unknown and ConflictError if the
        pair is already stored.
        """
        with store_guard(self.db, "assign student to class"):
            if self.db.get(Student, student_id) is None:
                raise NotFoundError("Student", student_id)
            if self.db.get(Class, class_id) is None:
                raise NotFoundError("Class", class_id)
            if self._pair_exists(student_id, class_id):
                raise ConflictError(f"Student {student_id} is already assigned to class {class_id}")

            assignment = ClassAssignment(student_id=student_id, class_id=class_id)
            self.db.add(assignment)
            try:
                self.db.commit()
            except IntegrityError as e:
                # A concurrent insert of the same pair won the race.
                self.db.rollback()
                if self._pair_exists(student_id, class_id):
                    raise ConflictError(
                        f"Student {student_id} is already assigned to class {class_id}"
                    ) from e
                raise
            self.db.refresh(assignment)
        logger.info("Assigned student %s to class %s", student_id, class_id)
        return assignment

    def unassign(self, student_id: str, class_id: str) -> None:
        """Removes the pair, raising NotFoundError when it was never stored."""
        with store_guard(self.db, "remove student from class"):
            result = self.db.execute(
                delete(ClassAssignment).where(
                    ClassAssignment.student_id == student_id,
                    ClassAssignment.class_id == class_id,
                )
            )
            if result.rowcount == 0:
                self.db.rollback()
                raise NotFoundError("Assignment", f"{student_id}/{class_id}")
            self.db.commit()
        logger.info("Removed student %s from class %s", student_id, class_id)

    def replace_for_student(self, student_id: str, to_add: Iterable[str], to_remove: Iterable[str]) -> None:
        """
        Inserts and deletes a student's pairs in one transaction. Either every
        change is stored or none is. The caller has already checked that the
        referenced classes exist.
        """
        to_add, to_remove = list(to_add), list(to_remove)
        with store_guard(self.db, "replace student classes"):
            if to_remove:
                self.db.execute(
                    delete(ClassAssignment).where(
                        ClassAssignment.student_id == student_id,
                        ClassAssignment.class_id.in_(to_remove),
                    )
                )
            for class_id in to_add:
                self.db.add(ClassAssignment(student_id=student_id, class_id=class_id))
            try:
                self.db.commit()
            except IntegrityError as e:
                self.db.rollback()
                raise ConflictError(f"Classes of student {student_id} changed concurrently") from e
        logger.info("Replaced classes for student %s: +%d -%d", student_id, len(to_add), len(to_remove))

    # --- Cascade helpers ---
    # These do not commit. The entity repository calls them inside its own
    # delete so the pairs and the entity go away in one transaction.

    def cascade_delete_for_student(self, student_id: str) -> int:
        result = self.db.execute(delete(ClassAssignment).where(ClassAssignment.student_id == student_id))
        return result.rowcount

    def cascade_delete_for_class(self, class_id: str) -> int:
        result = self.db.execute(delete(ClassAssignment).where(ClassAssignment.class_id == class_id))
        return result.rowcount

    # --- Lookups ---

    def class_ids_for(self, student_id: str) -> Set[str]:
        with store_guard(self.db, "fetch student assignments"):
            stmt = select(ClassAssignment.class_id).where(ClassAssignment.student_id == student_id)
            return set(self.db.scalars(stmt).all())

    def student_ids_for(self, class_id: str) -> Set[str]:
        with store_guard(self.db, "fetch class students"):
            stmt = select(ClassAssignment.student_id).where(ClassAssignment.class_id == class_id)
            return set(self.db.scalars(stmt).all())

    def get_pairs(self, student_ids: Optional[Iterable[str]] = None) -> List[Tuple[str, str]]:
        """
        Returns (student_id, class_id) pairs in a single query, optionally
        restricted to the given students.
        """
        with store_guard(self.db, "fetch class assignments"):
            stmt = select(ClassAssignment.student_id, ClassAssignment.class_id)
            if student_ids is not None:
                student_ids = list(student_ids)
                if not student_ids:
                    return []
                stmt = stmt.where(ClassAssignment.student_id.in_(student_ids))
            return [(row.student_id, row.class_id) for row in self.db.execute(stmt)]

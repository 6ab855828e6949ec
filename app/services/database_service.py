# /app/services/database_service.py

from typing import Dict, Generator, Iterable, List, Optional, Set, Tuple

from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from app.db.database import get_db
from app.db.models.class_student_models import Class, ClassAssignment, Student

# --- Repository Imports ---
from .database_helpers.assignment_repository_sql import AssignmentRepositorySQL
from .database_helpers.class_student_repository_sql import ClassStudentRepositorySQL


class DatabaseService:
    def __init__(self, db_session: Session):
        """
        Wires both repositories onto one session, so a cascade delete in the
        entity repository and the pair cleanup it triggers share a transaction.
        """
        self.assignment_repo = AssignmentRepositorySQL(db_session)
        self.class_student_repo = ClassStudentRepositorySQL(db_session, self.assignment_repo)

    # --- STUDENT METHODS (DELEGATED) ---
    def get_all_students(self) -> List[Student]: return self.class_student_repo.get_all_students()
    def get_students_by_ids(self, student_ids: Iterable[str]) -> List[Student]: return self.class_student_repo.get_students_by_ids(student_ids)
    def get_student_by_id(self, student_id: str) -> Optional[Student]: return self.class_student_repo.get_student_by_id(student_id)
    def add_student(self, student_record: Dict) -> Student: return self.class_student_repo.add_student(student_record)
    def update_student(self, student_id: str, student_update_data: Dict) -> Student: return self.class_student_repo.update_student(student_id, student_update_data)
    def delete_student(self, student_id: str) -> None: self.class_student_repo.delete_student(student_id)

    # --- CLASS METHODS (DELEGATED) ---
    def get_all_classes(self) -> List[Class]: return self.class_student_repo.get_all_classes()
    def get_class_by_id(self, class_id: str) -> Optional[Class]: return self.class_student_repo.get_class_by_id(class_id)
    def add_class(self, class_record: Dict) -> Class: return self.class_student_repo.add_class(class_record)
    def update_class(self, class_id: str, class_update_data: Dict) -> Class: return self.class_student_repo.update_class(class_id, class_update_data)
    def delete_class(self, class_id: str) -> None: self.class_student_repo.delete_class(class_id)

    # --- ASSIGNMENT METHODS (DELEGATED) ---
    def assign(self, student_id: str, class_id: str) -> ClassAssignment: return self.assignment_repo.assign(student_id, class_id)
    def unassign(self, student_id: str, class_id: str) -> None: self.assignment_repo.unassign(student_id, class_id)
    def replace_student_classes(self, student_id: str, to_add: Iterable[str], to_remove: Iterable[str]) -> None: self.assignment_repo.replace_for_student(student_id, to_add, to_remove)
    def class_ids_for(self, student_id: str) -> Set[str]: return self.assignment_repo.class_ids_for(student_id)
    def student_ids_for(self, class_id: str) -> Set[str]: return self.assignment_repo.student_ids_for(class_id)
    def get_assignment_pairs(self, student_ids: Optional[Iterable[str]] = None) -> List[Tuple[str, str]]: return self.assignment_repo.get_pairs(student_ids)


def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """
    FastAPI dependency that provides a DatabaseService bound to the
    request's session.
    """
    yield DatabaseService(db_session=db)

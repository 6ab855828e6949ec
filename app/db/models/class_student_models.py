# /app/db/models/class_student_models.py

"""
This module defines the SQLAlchemy ORM models for the `Student` and `Class`
entities and the `ClassAssignment` table that links them.

Students and classes carry only their own fields. Membership lives solely in
`class_assignments`; nothing on a Student row records which classes it is in.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint

from ..base_class import Base


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Student(Base):
    """
    SQLAlchemy model representing a single student.
    """
    __tablename__ = "students"

    id = Column(String(36), primary_key=True, default=_new_id)
    first_name = Column(String(64), nullable=False)
    last_name = Column(String(64), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)


class Class(Base):
    """
    SQLAlchemy model representing a class or course.
    """
    __tablename__ = "classes"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(128), nullable=False, index=True)
    # NULL means "no description"; an empty string is never stored.
    description = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)


class ClassAssignment(Base):
    """
    One (student, class) membership pair.

    The unique constraint keeps a pair from being stored twice, and both
    foreign keys cascade so a deleted endpoint never leaves a dangling row.
    """
    __tablename__ = "class_assignments"

    id = Column(String(36), primary_key=True, default=_new_id)
    student_id = Column(String(36), ForeignKey("students.id", ondelete="CASCADE"), nullable=False)
    class_id = Column(String(36), ForeignKey("classes.id", ondelete="CASCADE"), nullable=False, index=True)
    assigned_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    __table_args__ = (
        UniqueConstraint("student_id", "class_id", name="uq_class_assignments_student_class"),
    )

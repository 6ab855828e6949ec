# /app/services/roster_helpers/aggregation.py

"""
Read-side joins between entity rows and the assignment index.

`classIds` is never stored on a student; every function here rebuilds it
from assignment pairs at read time. List reads fetch the pairs they need in
one query and group them in memory instead of querying once per student.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

from ...models import class_model, student_model
from ...db.models.class_student_models import Class, Student
from ..database_service import DatabaseService
from ..errors import NotFoundError


def group_class_ids_by_student(pairs: Iterable[Tuple[str, str]]) -> Dict[str, List[str]]:
    grouped = defaultdict(set)
    for student_id, class_id in pairs:
        grouped[student_id].add(class_id)
    return {student_id: sorted(class_ids) for student_id, class_ids in grouped.items()}


def to_student(row: Student, class_ids: Iterable[str] = ()) -> student_model.Student:
    return student_model.Student(
        id=row.id,
        firstName=row.first_name,
        lastName=row.last_name,
        classIds=sorted(class_ids),
    )


def to_class(row: Class) -> class_model.Class:
    return class_model.Class.model_validate(row)


def student_with_classes(student_id: str, db: DatabaseService) -> Optional[student_model.Student]:
    row = db.get_student_by_id(student_id)
    if row is None:
        return None
    return to_student(row, db.class_ids_for(student_id))


def all_students_with_classes(db: DatabaseService) -> List[student_model.Student]:
    rows = db.get_all_students()
    class_ids_by_student = group_class_ids_by_student(db.get_assignment_pairs())
    return [to_student(row, class_ids_by_student.get(row.id, [])) for row in rows]


def students_of(class_id: str, db: DatabaseService) -> List[student_model.Student]:
    """
    Returns the students assigned to a class, each carrying its full set of
    classIds, not only `class_id`.
    """
    if db.get_class_by_id(class_id) is None:
        raise NotFoundError("Class", class_id)

    student_ids = db.student_ids_for(class_id)
    if not student_ids:
        return []
    rows = db.get_students_by_ids(student_ids)
    class_ids_by_student = group_class_ids_by_student(db.get_assignment_pairs(student_ids))
    return [to_student(row, class_ids_by_student.get(row.id, [])) for row in rows]

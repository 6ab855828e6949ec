# /app/services/class_service.py

"""
This service module is the business logic layer for classes.

It orchestrates the `roster_helpers` modules and the `DatabaseService`, and
owns the two tabular views of a class: the per-class student counts and the
CSV roster export.
"""

import pandas as pd
from typing import Dict, List, Optional

from ..models import class_model, student_model
from .database_service import DatabaseService
from .errors import NotFoundError
from .roster_helpers import aggregation, crud

ROSTER_COLUMNS = ['First Name', 'Last Name', 'Class Name']


# --- Facade Methods for CRUD Operations ---

def get_all_classes(db: DatabaseService) -> List[class_model.Class]:
    return [aggregation.to_class(row) for row in db.get_all_classes()]


def get_class_by_id(class_id: str, db: DatabaseService) -> Optional[class_model.Class]:
    row = db.get_class_by_id(class_id)
    return aggregation.to_class(row) if row is not None else None


def create_class(class_data: class_model.ClassCreate, db: DatabaseService) -> class_model.Class:
    return crud.create_class(class_data=class_data, db=db)


def update_class(class_id: str, class_update: class_model.ClassUpdate, db: DatabaseService) -> class_model.Class:
    return crud.update_class(class_id=class_id, class_update=class_update, db=db)


def delete_class(class_id: str, db: DatabaseService) -> None:
    crud.delete_class(class_id=class_id, db=db)


def get_students(class_id: str, db: DatabaseService) -> List[student_model.Student]:
    return aggregation.students_of(class_id, db)


def add_students(class_id: str, student_ids: List[str], db: DatabaseService) -> Dict:
    assigned = crud.assign_many(class_id=class_id, student_ids=student_ids, db=db)
    return {"assigned": assigned, "classId": class_id}


def remove_students(class_id: str, student_ids: List[str], db: DatabaseService) -> Dict:
    removed = crud.remove_many(class_id=class_id, student_ids=student_ids, db=db)
    return {"removed": removed, "classId": class_id}


# --- Data Assembly & Export Logic ---

def get_all_classes_with_summary(db: DatabaseService) -> List[class_model.ClassSummary]:
    """
    Retrieves all classes and enriches them with student counts.
    """
    all_classes = db.get_all_classes()
    if not all_classes:
        return []

    pairs_df = pd.DataFrame(db.get_assignment_pairs(), columns=['student_id', 'class_id'])

    student_counts = {}
    if not pairs_df.empty:
        student_counts = pairs_df.groupby('class_id').size().to_dict()

    summary_list = []
    for cls in all_classes:
        summary = class_model.ClassSummary(
            id=cls.id,
            name=cls.name,
            description=cls.description,
            studentCount=int(student_counts.get(cls.id, 0)),
        )
        summary_list.append(summary)
    return summary_list


def export_roster_as_csv(class_id: str, db: DatabaseService) -> str:
    """
    Generates a CSV export for a single class roster, one row per student
    in last-name order.
    """
    class_row = db.get_class_by_id(class_id)
    if class_row is None:
        raise NotFoundError("Class", class_id)

    students_in_class = aggregation.students_of(class_id, db)

    export_data = [
        {
            'First Name': s.firstName,
            'Last Name': s.lastName,
            'Class Name': class_row.name,
        } for s in students_in_class
    ]

    df = pd.DataFrame(export_data) if export_data else pd.DataFrame(columns=ROSTER_COLUMNS)

    return df.to_csv(index=False)

# /app/utils/seed_database.py

"""
Fills the configured database with sample students, classes and assignments.

Run with: python -m app.utils.seed_database
Existing students and classes are deleted first.
"""

import logging
import random
from typing import Dict

from app.core.config import get_settings
from app.core.logging_config import configure_logging
from app.db.database import Database
from app.models.class_model import ClassCreate
from app.models.student_model import StudentCreate
from app.services import class_service, student_service
from app.services.database_service import DatabaseService

logger = logging.getLogger(__name__)

SAMPLE_STUDENTS = [
    ("Jan", "Kowalski"),
    ("Anna", "Nowak"),
    ("Piotr", "Wiśniewski"),
    ("Maria", "Kowalczyk"),
    ("Tomasz", "Kamiński"),
    ("Katarzyna", "Lewandowska"),
    ("Michał", "Zieliński"),
    ("Magdalena", "Szymańska"),
    ("Paweł", "Dąbrowski"),
    ("Agnieszka", "Kozłowska"),
    ("Jakub", "Jankowski"),
    ("Ewa", "Mazur"),
    ("Łukasz", "Krawczyk"),
    ("Monika", "Piotrowska"),
    ("Marcin", "Grabowski"),
]

SAMPLE_CLASSES = [
    ("Matematyka", "Podstawy matematyki dla uczniów - algebra, geometria, analiza matematyczna"),
    ("Fizyka", "Wprowadzenie do fizyki - mechanika, termodynamika, optyka"),
    ("Chemia", "Podstawy chemii organicznej i nieorganicznej"),
    ("Biologia", "Nauki o życiu - anatomia, genetyka, ekologia"),
    ("Historia", "Historia Polski i świata - od starożytności po współczesność"),
    ("Język Polski", "Literatura polska i światowa, gramatyka, retoryka"),
    ("Język Angielski", "Praktyczna nauka języka angielskiego - konwersacja i gramatyka"),
    ("Geografia", "Geografia fizyczna i społeczno-ekonomiczna świata"),
    ("Informatyka", "Podstawy programowania i technologii informatycznych"),
    ("Wychowanie Fizyczne", "Aktywność fizyczna i sport - rozwój kondycji i sprawności"),
]


def clear(db: DatabaseService) -> None:
    # Deleting the entities cascades to their assignments.
    for cls in db.get_all_classes():
        db.delete_class(cls.id)
    for student in db.get_all_students():
        db.delete_student(student.id)


def seed(db: DatabaseService, rng_seed: int = 42) -> Dict[str, int]:
    """
    Replaces the database contents with the sample data. Each student is put
    in 3 to 5 classes chosen by a seeded RNG, so repeated runs give the same
    assignments.
    """
    rng = random.Random(rng_seed)
    clear(db)

    students = [
        student_service.create_student(StudentCreate(firstName=first, lastName=last), db=db)
        for first, last in SAMPLE_STUDENTS
    ]
    classes = [
        class_service.create_class(ClassCreate(name=name, description=description), db=db)
        for name, description in SAMPLE_CLASSES
    ]

    assignments = 0
    for student in students:
        for cls in rng.sample(classes, rng.randint(3, 5)):
            student_service.assign_to_class(student_id=student.id, class_id=cls.id, db=db)
            assignments += 1

    summary = {"students": len(students), "classes": len(classes), "assignments": assignments}
    logger.info("Database seeded: %s", summary)
    return summary


if __name__ == "__main__":
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    database = Database(settings.DATABASE_URL, echo=settings.SQL_ECHO)
    database.create_all()
    session = database.session()
    try:
        seed(DatabaseService(session))
    finally:
        session.close()
        database.dispose()

# /tests/test_aggregation.py

import pytest
from types import SimpleNamespace
from unittest.mock import MagicMock

from app.services.errors import NotFoundError
from app.services.roster_helpers import aggregation

# --- Test Data Fixtures ---

@pytest.fixture
def mock_db_service():
    """Provides a mock of the DatabaseService for dependency injection."""
    return MagicMock()

@pytest.fixture
def mock_student_rows():
    return [
        SimpleNamespace(id="stu_A", first_name="Alice", last_name="Adams"),
        SimpleNamespace(id="stu_B", first_name="Bob", last_name="Brown"),
        SimpleNamespace(id="stu_C", first_name="Cara", last_name="Cole"),
    ]

@pytest.fixture
def mock_pairs():
    return [
        ("stu_A", "cls_2"),
        ("stu_A", "cls_1"),
        ("stu_B", "cls_1"),
        ("stu_A", "cls_2"),
    ]

# --- Unit Tests ---

def test_group_class_ids_by_student_dedupes_and_sorts(mock_pairs):
    grouped = aggregation.group_class_ids_by_student(mock_pairs)
    assert grouped == {"stu_A": ["cls_1", "cls_2"], "stu_B": ["cls_1"]}

def test_group_class_ids_by_student_empty():
    assert aggregation.group_class_ids_by_student([]) == {}

def test_all_students_with_classes_reads_relation_once(mock_db_service, mock_student_rows, mock_pairs):
    mock_db_service.get_all_students.return_value = mock_student_rows
    mock_db_service.get_assignment_pairs.return_value = mock_pairs

    students = aggregation.all_students_with_classes(mock_db_service)

    mock_db_service.get_assignment_pairs.assert_called_once_with()
    mock_db_service.class_ids_for.assert_not_called()
    assert [s.id for s in students] == ["stu_A", "stu_B", "stu_C"]
    assert students[0].classIds == ["cls_1", "cls_2"]
    assert students[2].classIds == []

def test_students_of_returns_full_class_ids(mock_db_service, mock_student_rows, mock_pairs):
    mock_db_service.get_class_by_id.return_value = SimpleNamespace(id="cls_1")
    mock_db_service.student_ids_for.return_value = {"stu_A", "stu_B"}
    mock_db_service.get_students_by_ids.return_value = mock_student_rows[:2]
    mock_db_service.get_assignment_pairs.return_value = mock_pairs

    students = aggregation.students_of("cls_1", mock_db_service)

    mock_db_service.get_assignment_pairs.assert_called_once()
    assert students[0].classIds == ["cls_1", "cls_2"]
    assert students[1].classIds == ["cls_1"]

def test_students_of_empty_class_skips_student_lookup(mock_db_service):
    mock_db_service.get_class_by_id.return_value = SimpleNamespace(id="cls_9")
    mock_db_service.student_ids_for.return_value = set()

    assert aggregation.students_of("cls_9", mock_db_service) == []
    mock_db_service.get_students_by_ids.assert_not_called()

def test_students_of_unknown_class_is_not_found(mock_db_service):
    mock_db_service.get_class_by_id.return_value = None
    with pytest.raises(NotFoundError):
        aggregation.students_of("cls_missing", mock_db_service)

def test_student_with_classes_absent(mock_db_service):
    mock_db_service.get_student_by_id.return_value = None
    assert aggregation.student_with_classes("stu_X", mock_db_service) is None

def test_to_class_keeps_missing_description_as_none():
    row = SimpleNamespace(id="cls_1", name="Math", description=None)
    assert aggregation.to_class(row).description is None

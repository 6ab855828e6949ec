# /tests/test_validation.py

import pytest

from app.services.errors import ValidationError
from app.services.roster_helpers import validation


def test_student_columns_maps_field_names():
    assert validation.student_columns({"firstName": "John", "lastName": "Doe"}) == {
        "first_name": "John",
        "last_name": "Doe",
    }

@pytest.mark.parametrize("payload, field, constraint", [
    ({"firstName": "", "lastName": "Doe"}, "firstName", "must not be empty"),
    ({"firstName": "John", "lastName": "x" * 65}, "lastName", "must be at most 64 characters"),
    ({"firstName": "John"}, "lastName", "is required"),
])
def test_student_columns_rejects_bad_names(payload, field, constraint):
    with pytest.raises(ValidationError) as exc_info:
        validation.student_columns(payload)
    assert exc_info.value.field == field
    assert exc_info.value.constraint == constraint

def test_student_columns_accepts_boundary_lengths():
    columns = validation.student_columns({"firstName": "J", "lastName": "x" * 64})
    assert columns["last_name"] == "x" * 64

def test_partial_student_columns_only_returns_given_fields():
    assert validation.student_columns({"lastName": "Smith"}, partial=True) == {"last_name": "Smith"}
    assert validation.student_columns({}, partial=True) == {}

def test_partial_student_columns_rejects_explicit_null():
    with pytest.raises(ValidationError):
        validation.student_columns({"firstName": None}, partial=True)

def test_class_columns_without_description_stores_none():
    assert validation.class_columns({"name": "Math"}) == {"name": "Math", "description": None}

def test_class_columns_empty_description_means_none():
    assert validation.class_columns({"name": "Math", "description": ""})["description"] is None

def test_class_name_length_limit():
    assert validation.class_columns({"name": "x" * 128})["name"] == "x" * 128
    with pytest.raises(ValidationError) as exc_info:
        validation.class_columns({"name": "x" * 129})
    assert exc_info.value.field == "name"

def test_partial_class_columns_can_clear_description():
    assert validation.class_columns({"description": None}, partial=True) == {"description": None}

def test_unknown_fields_are_rejected():
    with pytest.raises(ValidationError):
        validation.class_columns({"name": "Math", "room": "101"})

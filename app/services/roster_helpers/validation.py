# /app/services/roster_helpers/validation.py

"""
Field checks shared by the student and class write paths.

Every write path runs these before touching the database, whether or not the
input came through an API model. Each helper also maps the API's camelCase
names onto column names.
"""

from typing import Any, Dict

from ..errors import ValidationError
from ...models.student_model import NAME_MAX_LENGTH
from ...models.class_model import CLASS_NAME_MAX_LENGTH

_STUDENT_FIELDS = {"firstName": "first_name", "lastName": "last_name"}


def require_text(field: str, value: Any, max_length: int) -> str:
    if value is None:
        raise ValidationError(field, "is required")
    if not isinstance(value, str):
        raise ValidationError(field, "must be a string")
    if len(value) == 0:
        raise ValidationError(field, "must not be empty")
    if len(value) > max_length:
        raise ValidationError(field, f"must be at most {max_length} characters")
    return value


def normalize_description(value: Any):
    """Empty and missing descriptions both mean "no description"."""
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValidationError("description", "must be a string")
    return value


def student_columns(data: Dict[str, Any], partial: bool = False) -> Dict[str, Any]:
    unknown = set(data) - set(_STUDENT_FIELDS)
    if unknown:
        raise ValidationError(sorted(unknown)[0], "is not a student field")

    columns = {}
    for field, column in _STUDENT_FIELDS.items():
        if partial and field not in data:
            continue
        columns[column] = require_text(field, data.get(field), NAME_MAX_LENGTH)
    return columns


def class_columns(data: Dict[str, Any], partial: bool = False) -> Dict[str, Any]:
    unknown = set(data) - {"name", "description"}
    if unknown:
        raise ValidationError(sorted(unknown)[0], "is not a class field")

    columns = {}
    if not partial or "name" in data:
        columns["name"] = require_text("name", data.get("name"), CLASS_NAME_MAX_LENGTH)
    if not partial or "description" in data:
        columns["description"] = normalize_description(data.get("description"))
    return columns

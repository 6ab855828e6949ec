# /app/services/errors.py

"""
Typed failures raised by the repositories and services.

Routers translate these into HTTP responses; nothing below the router layer
knows about status codes.
"""


class SchoolHubError(Exception):
    """Base class for every error the roster services raise on purpose."""


class ValidationError(SchoolHubError):
    def __init__(self, field: str, constraint: str):
        self.field = field
        self.constraint = constraint
        super().__init__(f"{field}: {constraint}")


class NotFoundError(SchoolHubError):
    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with ID {entity_id} not found")


class ConflictError(SchoolHubError):
    pass


class StoreError(SchoolHubError):
    """The database rejected or failed an operation; the message is passed through as-is."""

# /app/routers/error_mapping.py

from fastapi import HTTPException, status

from ..services.errors import (
    ConflictError,
    NotFoundError,
    SchoolHubError,
    StoreError,
    ValidationError,
)


def to_http_exception(error: SchoolHubError) -> HTTPException:
    """Translates a service-layer error into the HTTP response the API promises."""
    if isinstance(error, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, ConflictError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, StoreError):
        return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="An unexpected server error occurred.")

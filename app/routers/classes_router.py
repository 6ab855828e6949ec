# /app/routers/classes_router.py

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status, Response
from fastapi.responses import StreamingResponse
from typing import List

from ..models import class_model, student_model
from ..models.common_model import DataResponse
from ..services import class_service
from ..services.database_service import DatabaseService, get_db_service
from ..services.errors import SchoolHubError
from .error_mapping import to_http_exception

router = APIRouter()

# --- CLASS COLLECTION ENDPOINTS (/api/v1/classes) ---

@router.get("", response_model=DataResponse[List[class_model.Class]], response_model_exclude_none=True, summary="Get All Classes")
def get_all_classes(db: DatabaseService = Depends(get_db_service)):
    try:
        return {"data": class_service.get_all_classes(db=db)}
    except SchoolHubError as e:
        raise to_http_exception(e)

@router.post("", response_model=DataResponse[class_model.Class], response_model_exclude_none=True, status_code=status.HTTP_201_CREATED, summary="Create a New Class")
def create_new_class(class_create: class_model.ClassCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        return {"data": class_service.create_class(class_data=class_create, db=db)}
    except SchoolHubError as e:
        raise to_http_exception(e)

@router.get("/summary", response_model=DataResponse[List[class_model.ClassSummary]], response_model_exclude_none=True, summary="Get All Classes with Student Counts")
def get_class_summaries(db: DatabaseService = Depends(get_db_service)):
    try:
        return {"data": class_service.get_all_classes_with_summary(db=db)}
    except SchoolHubError as e:
        raise to_http_exception(e)

@router.get("/students", response_model=DataResponse[List[student_model.Student]], summary="Get the Students of a Class (query parameter)")
def get_class_students_by_query(classId: str = Query(..., min_length=1), db: DatabaseService = Depends(get_db_service)):
    try:
        return {"data": class_service.get_students(class_id=classId, db=db)}
    except SchoolHubError as e:
        raise to_http_exception(e)

# --- INDIVIDUAL CLASS RESOURCE ENDPOINTS (/api/v1/classes/{class_id}) ---

@router.get("/{class_id}", response_model=DataResponse[class_model.Class], response_model_exclude_none=True, summary="Get a Single Class")
def get_class_by_id(class_id: str, db: DatabaseService = Depends(get_db_service)):
    try:
        class_details = class_service.get_class_by_id(class_id=class_id, db=db)
    except SchoolHubError as e:
        raise to_http_exception(e)
    if class_details is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Class with ID {class_id} not found")
    return {"data": class_details}

@router.put("/{class_id}", response_model=DataResponse[class_model.Class], response_model_exclude_none=True, summary="Update a Class")
def update_class_details(class_id: str, class_update: class_model.ClassUpdate, db: DatabaseService = Depends(get_db_service)):
    try:
        return {"data": class_service.update_class(class_id=class_id, class_update=class_update, db=db)}
    except SchoolHubError as e:
        raise to_http_exception(e)

@router.delete("/{class_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Class")
def delete_class(class_id: str, db: DatabaseService = Depends(get_db_service)):
    try:
        class_service.delete_class(class_id=class_id, db=db)
    except SchoolHubError as e:
        raise to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/{class_id}/export", summary="Export Class Roster as CSV", response_class=StreamingResponse)
def export_class_roster_csv(class_id: str, db: DatabaseService = Depends(get_db_service)):
    try:
        csv_string = class_service.export_roster_as_csv(class_id=class_id, db=db)
        class_details = class_service.get_class_by_id(class_id=class_id, db=db)
    except SchoolHubError as e:
        raise to_http_exception(e)
    file_name = f"roster_{class_details.name.replace(' ', '_').lower()}.csv"
    return StreamingResponse(iter([csv_string]), media_type="text/csv", headers={"Content-Disposition": f"attachment; filename={file_name}"})

# --- STUDENT SUB-RESOURCE ENDPOINTS ---

@router.get("/{class_id}/students", response_model=DataResponse[List[student_model.Student]], summary="Get the Students of a Class")
def get_class_students(class_id: str, db: DatabaseService = Depends(get_db_service)):
    try:
        return {"data": class_service.get_students(class_id=class_id, db=db)}
    except SchoolHubError as e:
        raise to_http_exception(e)

@router.post("/{class_id}/students", response_model=DataResponse[class_model.BulkAssignResult], summary="Assign Several Students to a Class")
def add_students_to_class(class_id: str, payload: class_model.BulkStudentIds, db: DatabaseService = Depends(get_db_service)):
    try:
        return {"data": class_service.add_students(class_id=class_id, student_ids=payload.studentIds, db=db)}
    except SchoolHubError as e:
        raise to_http_exception(e)

@router.delete("/{class_id}/students", response_model=DataResponse[class_model.BulkRemoveResult], summary="Remove Several Students from a Class")
def remove_students_from_class(class_id: str, payload: class_model.BulkStudentIds = Body(...), db: DatabaseService = Depends(get_db_service)):
    try:
        return {"data": class_service.remove_students(class_id=class_id, student_ids=payload.studentIds, db=db)}
    except SchoolHubError as e:
        raise to_http_exception(e)

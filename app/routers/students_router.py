# /app/routers/students_router.py

from fastapi import APIRouter, Depends, HTTPException, Query, status, Response
from typing import List

from ..models import student_model
from ..models.common_model import DataResponse
from ..services import student_service
from ..services.database_service import DatabaseService, get_db_service
from ..services.errors import SchoolHubError
from .error_mapping import to_http_exception

router = APIRouter()

# --- STUDENT COLLECTION ENDPOINTS (/api/v1/students) ---

@router.get("", response_model=DataResponse[List[student_model.Student]], summary="Get All Students with Their Classes")
def get_all_students(db: DatabaseService = Depends(get_db_service)):
    try:
        return {"data": student_service.get_all_students(db=db)}
    except SchoolHubError as e:
        raise to_http_exception(e)

@router.post("", response_model=DataResponse[student_model.Student], status_code=status.HTTP_201_CREATED, summary="Create a Student")
def create_student(student_create: student_model.StudentCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        return {"data": student_service.create_student(student_data=student_create, db=db)}
    except SchoolHubError as e:
        raise to_http_exception(e)

# Declared before the /{student_id} routes so "classes" is never read as an ID.
@router.post("/classes/assign", status_code=status.HTTP_204_NO_CONTENT, summary="Assign a Student to a Class (query parameters)")
def assign_student_by_query(
    studentId: str = Query(..., min_length=1),
    classId: str = Query(..., min_length=1),
    db: DatabaseService = Depends(get_db_service)
):
    try:
        student_service.assign_to_class(student_id=studentId, class_id=classId, db=db)
    except SchoolHubError as e:
        raise to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# --- INDIVIDUAL STUDENT RESOURCE ENDPOINTS (/api/v1/students/{student_id}) ---

@router.get("/{student_id}", response_model=DataResponse[student_model.Student], summary="Get a Single Student")
def get_student_by_id(student_id: str, db: DatabaseService = Depends(get_db_service)):
    try:
        student = student_service.get_student_by_id(student_id=student_id, db=db)
    except SchoolHubError as e:
        raise to_http_exception(e)
    if student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Student with ID {student_id} not found")
    return {"data": student}

@router.put("/{student_id}", response_model=DataResponse[student_model.Student], summary="Update a Student")
def update_student_details(student_id: str, student_update: student_model.StudentUpdate, db: DatabaseService = Depends(get_db_service)):
    try:
        return {"data": student_service.update_student(student_id=student_id, student_update=student_update, db=db)}
    except SchoolHubError as e:
        raise to_http_exception(e)

@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Student")
def delete_student(student_id: str, db: DatabaseService = Depends(get_db_service)):
    try:
        student_service.delete_student(student_id=student_id, db=db)
    except SchoolHubError as e:
        raise to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# --- CLASS MEMBERSHIP SUB-RESOURCE ENDPOINTS ---

@router.post("/{student_id}/assign-class", status_code=status.HTTP_204_NO_CONTENT, summary="Assign a Student to a Class")
def assign_student_to_class(student_id: str, payload: student_model.AssignClassRequest, db: DatabaseService = Depends(get_db_service)):
    try:
        student_service.assign_to_class(student_id=student_id, class_id=payload.classId, db=db)
    except SchoolHubError as e:
        raise to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.put("/{student_id}/classes", response_model=DataResponse[student_model.Student], summary="Replace a Student's Classes")
def set_student_classes(student_id: str, payload: student_model.StudentClassesUpdate, db: DatabaseService = Depends(get_db_service)):
    try:
        return {"data": student_service.set_classes(student_id=student_id, class_ids=payload.classIds, db=db)}
    except SchoolHubError as e:
        raise to_http_exception(e)

@router.delete("/{student_id}/classes/{class_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Remove a Student from a Class")
def remove_student_from_class(student_id: str, class_id: str, db: DatabaseService = Depends(get_db_service)):
    try:
        student_service.remove_from_class(student_id=student_id, class_id=class_id, db=db)
    except SchoolHubError as e:
        raise to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

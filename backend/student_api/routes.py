"""HTTP controllers for the `/students` collection.

Controllers are thin: they hand the decoded JSON body and the raw path
identifier to the store and translate its result into a response. Bodies
are taken as arbitrary JSON objects; the `StudentIn`/`Student` schemas
only describe them in the OpenAPI document.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Request
from fastapi.responses import Response

from .schemas import (
    NEW_STUDENT_EXAMPLES,
    STUDENTS_ARRAY_EXAMPLE,
    UPDATED_STUDENT_EXAMPLES,
    Student,
    StudentIn,
)
from .store import StudentStore

router = APIRouter(prefix="/students", tags=["students"])

NOT_FOUND = "Not Found"

_STUDENT_BODY_SCHEMA = {
    "requestBody": {
        "content": {"application/json": {"schema": StudentIn.model_json_schema()}},
    },
}
_NOT_FOUND_RESPONSE = {
    "description": "Student not found.",
    "content": {"text/plain": {"schema": {"type": "string"}, "example": NOT_FOUND}},
}


def get_store(request: Request) -> StudentStore:
    """Return the store owned by the running application."""
    return request.app.state.store


@router.get(
    "",
    summary="Get all students",
    description="Retrieve a list of all student records.",
    responses={
        200: {
            "model": List[Student],
            "description": "A list of students.",
            "content": {"application/json": {"example": STUDENTS_ARRAY_EXAMPLE}},
        },
    },
)
def list_students(store: StudentStore = Depends(get_store)):
    return store.list_all()


@router.post(
    "",
    status_code=201,
    summary="Create a new student",
    openapi_extra=_STUDENT_BODY_SCHEMA,
    responses={201: {"model": Student, "description": "The created student."}},
)
def create_student(
    payload: Dict[str, Any] = Body(..., openapi_examples=NEW_STUDENT_EXAMPLES),
    store: StudentStore = Depends(get_store),
):
    """Store a new student; any `id` in the body is replaced by the assigned one."""
    return store.create(payload)


@router.get(
    "/{student_id}",
    summary="Get a student by ID",
    responses={
        200: {"model": Student, "description": "A single student."},
        404: _NOT_FOUND_RESPONSE,
    },
)
def get_student(
    student_id: str = Path(..., description="Numeric ID of the student to retrieve."),
    store: StudentStore = Depends(get_store),
):
    student = store.find_by_id(student_id)
    if student is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return student


@router.put(
    "/{student_id}",
    summary="Update a student by ID",
    openapi_extra=_STUDENT_BODY_SCHEMA,
    responses={
        200: {"model": Student, "description": "The updated student."},
        404: _NOT_FOUND_RESPONSE,
    },
)
def update_student(
    student_id: str = Path(..., description="Numeric ID of the student to update."),
    payload: Dict[str, Any] = Body(..., openapi_examples=UPDATED_STUDENT_EXAMPLES),
    store: StudentStore = Depends(get_store),
):
    """Replace a student record.

    This is a full replace: fields not present in the body are dropped
    from the stored record. The id is always kept.
    """
    student = store.update(student_id, payload)
    if student is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return student


@router.delete(
    "/{student_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a student by ID",
    responses={204: {"description": "Student successfully deleted."}},
)
def delete_student(
    student_id: str = Path(..., description="Numeric ID of the student to delete."),
    store: StudentStore = Depends(get_store),
):
    """Delete a student. Always answers 204, whether or not it existed."""
    store.delete(student_id)
    return Response(status_code=204)

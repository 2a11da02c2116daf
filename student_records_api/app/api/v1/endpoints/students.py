"""
Student endpoints for API v1.

These routes expose the CRUD API for student records.  Each handler
maps one HTTP request onto one call of the ``StudentService`` bound to
the application and translates store errors into HTTP responses:

* a missing id becomes ``404 Student not found``;
* a create against a full store becomes ``400 Maximum entries (N) reached``.

Handlers are plain functions, so FastAPI runs them in its thread pool
and the store is shared between concurrent requests.
"""

from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from student_records_api.app.core.dependencies import get_student_service
from student_records_api.app.core.exceptions import CapacityExceededError, StudentNotFoundError
from student_records_api.app.schemas.student import StudentRead, StudentWrite
from student_records_api.app.services.student_service import StudentService

router = APIRouter()

NOT_FOUND_DETAIL = "Student not found"


@router.get("", response_model=List[StudentRead])
def list_students(service: StudentService = Depends(get_student_service)) -> List[StudentRead]:
    """Return all students sorted by id."""
    return service.list_students()


@router.get("/{student_id}", response_model=StudentRead)
def get_student(
    student_id: int,
    service: StudentService = Depends(get_student_service),
) -> StudentRead:
    """Retrieve a single student by ID.

    Returns HTTP 404 if the student does not exist.
    """
    try:
        return service.get_student(student_id)
    except StudentNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)


@router.post("", response_model=StudentRead, status_code=status.HTTP_201_CREATED)
def create_student(
    student_in: StudentWrite,
    request: Request,
    response: Response,
    service: StudentService = Depends(get_student_service),
) -> StudentRead:
    """Create a new student.

    The server assigns the id; an ``id`` in the body is ignored.  The
    ``Location`` header points at the new record under the same prefix
    the request used.  Returns HTTP 400 once the store is full.
    """
    try:
        student = service.create_student(student_in)
    except CapacityExceededError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{student.id}"
    return student


@router.put("/{student_id}", response_model=StudentRead)
def update_student(
    student_id: int,
    student_in: StudentWrite,
    service: StudentService = Depends(get_student_service),
) -> StudentRead:
    """Replace an existing student.

    The id in the path wins over any ``id`` in the body.
    """
    try:
        return service.update_student(student_id, student_in)
    except StudentNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(
    student_id: int,
    service: StudentService = Depends(get_student_service),
) -> Response:
    """Delete a student."""
    if not service.delete_student(student_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", response_model=Dict[str, str])
def clear_students(service: StudentService = Depends(get_student_service)) -> Dict[str, str]:
    """Delete every student and restart id numbering at 1."""
    service.clear_all()
    return {"detail": "All students deleted successfully."}

"""
Liveness endpoint.

Reports that the process is serving requests together with the number
of stored students, which is handy when watching a deployment fill up
towards the capacity limit.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from student_records_api.app.core.dependencies import get_student_service
from student_records_api.app.services.student_service import StudentService

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
def health(service: StudentService = Depends(get_student_service)) -> Dict[str, Any]:
    return {"status": "ok", "students": service.count()}

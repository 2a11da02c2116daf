"""
FastAPI dependencies shared by the endpoint modules.

The student store is created once per application in ``create_app``
and kept on ``app.state``; handlers obtain it through
``get_student_service`` rather than importing a module‑level global.
"""

from fastapi import Request

from student_records_api.app.services.student_service import StudentService


def get_student_service(request: Request) -> StudentService:
    """Return the store bound to the application serving ``request``."""
    return request.app.state.student_service

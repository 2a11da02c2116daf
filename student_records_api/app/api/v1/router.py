"""
Top‑level router for version 1 of the API.

Aggregates the endpoint modules.  When new resources are added,
include their routers here.
"""

from fastapi import APIRouter

from .endpoints import health, students

router = APIRouter()

# Students are served under ``/students``.  The original browser front
# end and its deployments call ``/api/students``, so the same router is
# included a second time under that prefix; both expose identical
# endpoints.
router.include_router(students.router, prefix="/students", tags=["students"])
router.include_router(students.router, prefix="/api/students", tags=["students"])
router.include_router(health.router, prefix="/health", tags=["health"])

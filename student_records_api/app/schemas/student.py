"""
Pydantic schemas for student records.

A student has a store‑assigned integer ``id`` plus four opaque fields:
``name``, ``registrationNumber``, ``courses`` and ``projectGroup``.
The JSON payloads use camelCase names; the Python attributes are
snake_case and both spellings are accepted on input.  No content
validation is applied: omitted fields are stored as ``null``.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StudentBase(BaseModel):
    """Fields shared by every student payload."""

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, description="Student name")
    registration_number: Optional[str] = Field(
        None,
        alias="registrationNumber",
        description="Registration number; uniqueness is not enforced",
    )
    courses: Optional[List[str]] = Field(None, description="Course names in display order")
    project_group: Optional[str] = Field(None, alias="projectGroup", description="Project group label")


class StudentWrite(StudentBase):
    """Schema for creating or replacing a student.

    Clients may send an ``id`` (for example when echoing back a record
    they previously read) but it is never used: on create the store
    assigns the id, on update the id from the URL path wins.
    """

    id: Optional[int] = Field(None, description="Ignored; the server decides the id")


class StudentKey(BaseModel):
    """The store‑assigned identifier of a student."""

    id: int


# Pydantic orders fields base‑first along the reversed MRO, so listing
# ``StudentKey`` last puts ``id`` at the front of every response.
class StudentRead(StudentBase, StudentKey):
    """Schema for a stored student."""

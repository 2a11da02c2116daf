"""
Errors raised by the student store.

The HTTP layer translates these into responses; the store itself never
builds HTTP objects.
"""


class StudentStoreError(Exception):
    """Base class for every error the student store raises."""


class StudentNotFoundError(StudentStoreError, LookupError):
    """No student is stored under the requested id."""

    def __init__(self, student_id: int) -> None:
        super().__init__(f"Student {student_id} not found")
        self.student_id = student_id


class CapacityExceededError(StudentStoreError):
    """The store already holds the maximum number of students."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"Maximum entries ({capacity}) reached")
        self.capacity = capacity

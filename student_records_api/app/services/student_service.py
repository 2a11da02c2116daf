"""
In‑memory store for student records.

``StudentService`` owns every student record of the running process:
a mapping from id to record, the counter used to hand out ids and the
capacity bound.  Nothing is persisted; a restart starts empty.

Ids start at 1 and increase by one for each successful create.  They
are never reused after a delete; only ``clear_all`` resets the counter.
The store holds at most ``capacity`` records and rejects creates
beyond that instead of evicting anything.

All writes run under one lock, so the capacity check, the counter
increment and the insert of a create form a single critical section.
Reads work on a copy of the mapping taken without the lock.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List

from student_records_api.app.core.exceptions import CapacityExceededError, StudentNotFoundError
from student_records_api.app.schemas.student import StudentBase, StudentRead

MAX_ENTRIES = 100

logger = logging.getLogger(__name__)


class StudentService:
    """Thread‑safe CRUD store for students."""

    def __init__(self, capacity: int = MAX_ENTRIES) -> None:
        self.capacity = capacity
        self._records: Dict[int, StudentRead] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def list_students(self) -> List[StudentRead]:
        """Return every stored student ordered by ascending id."""
        snapshot = self._records.copy()
        return [snapshot[student_id].model_copy(deep=True) for student_id in sorted(snapshot)]

    def get_student(self, student_id: int) -> StudentRead:
        """Return the student stored under ``student_id``.

        Raises
        ------
        StudentNotFoundError
            If no such student exists.
        """
        record = self._records.get(student_id)
        if record is None:
            raise StudentNotFoundError(student_id)
        return record.model_copy(deep=True)

    def count(self) -> int:
        return len(self._records)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def create_student(self, data: StudentBase) -> StudentRead:
        """Store a new student under the next id and return it.

        Any ``id`` carried by ``data`` is ignored.

        Raises
        ------
        CapacityExceededError
            If the store already holds ``capacity`` students.  The
            store is left untouched.
        """
        with self._lock:
            if len(self._records) >= self.capacity:
                logger.warning("Rejected student create: store is full (%s)", self.capacity)
                raise CapacityExceededError(self.capacity)
            self._last_id += 1
            record = self._to_record(self._last_id, data)
            self._records[record.id] = record
        logger.info("Created student %s", record.id)
        return record.model_copy(deep=True)

    def update_student(self, student_id: int, data: StudentBase) -> StudentRead:
        """Replace every field of an existing student except its id.

        Raises
        ------
        StudentNotFoundError
            If no student is stored under ``student_id``.
        """
        with self._lock:
            if student_id not in self._records:
                raise StudentNotFoundError(student_id)
            record = self._to_record(student_id, data)
            self._records[student_id] = record
        logger.info("Updated student %s", student_id)
        return record.model_copy(deep=True)

    def delete_student(self, student_id: int) -> bool:
        """Delete a student.

        Returns ``True`` if a record was removed, ``False`` if there was
        nothing stored under ``student_id``.
        """
        with self._lock:
            removed = self._records.pop(student_id, None)
        if removed is None:
            return False
        logger.info("Deleted student %s", student_id)
        return True

    def clear_all(self) -> None:
        """Remove every student and restart id assignment at 1."""
        with self._lock:
            removed = len(self._records)
            self._records = {}
            self._last_id = 0
        logger.info("Cleared %s students", removed)

    @staticmethod
    def _to_record(student_id: int, data: StudentBase) -> StudentRead:
        fields = data.model_dump(exclude={"id"})
        return StudentRead(id=student_id, **fields)

"""
Outcome types returned by the student repository.

Storage problems come back as a value instead of being hidden behind None, so a
caller can tell "not found" apart from "the database failed".
"""

from typing import NamedTuple

from database import Student


class Found(NamedTuple):
    student: Student


class NotFound(NamedTuple):
    student_id: int


class Done(NamedTuple):
    """A write went through. affected is 0 when the target id did not exist."""
    affected: int


class DuplicateId(NamedTuple):
    student_id: int


class StorageError(NamedTuple):
    operation: str
    detail: str

    def __str__(self):
        return f"Error {self.operation}: {self.detail}"

"""
Query modules for reading and writing student records.

This package provides a clean interface to the students table without coupling
to any specific UI: the StudentDAO for storage, plain functions for filtering
and sorting, and formatting helpers for console output.
"""

from .results import Found, NotFound, Done, DuplicateId, StorageError
from .student_dao import StudentDAO
from .student_queries import filter_by_grade, sort_by_name
from .formatting import StudentFormatter

__all__ = [
    'Found',
    'NotFound',
    'Done',
    'DuplicateId',
    'StorageError',
    'StudentDAO',
    'filter_by_grade',
    'sort_by_name',
    'StudentFormatter',
]

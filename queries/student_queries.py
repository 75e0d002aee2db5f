"""
In-memory queries over a list of students.

This module provides:
- Filtering by exact grade
- Alphabetical sorting by name (case-sensitive or case-insensitive)

Both work on the list returned by StudentDAO.get_all() and never touch the
database themselves.
"""

from typing import Iterable, List

from database import Student


def filter_by_grade(students: Iterable[Student], grade: int) -> List[Student]:
    """
    Return the students whose grade equals `grade`, in their original order.

    Example:
        >>> matches = filter_by_grade(dao.get_all(), 10)
        >>> print(f"{len(matches)} students in grade 10")
    """
    return [s for s in students if s.grade == grade]


def sort_by_name(students: Iterable[Student], ignore_case: bool = False) -> List[Student]:
    """
    Return the students ordered by name.

    Case-sensitive ordering compares code points, so 'Zoe' sorts before 'adam'.
    With ignore_case=True names are compared casefolded. The sort is stable:
    students with equal names keep their relative order.
    """
    if ignore_case:
        return sorted(students, key=lambda s: s.name.casefold())
    return sorted(students, key=lambda s: s.name)

"""
Export and import of student records as plain text.

File format, one record per line, no header and no quoting:

    id,name,email,grade
    7,Jane Doe,jane@x.com,9

Commas inside a name or email are not escaped, so such records do not survive
a round trip.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Union

from database import Student, parse_integer

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ','
FIELD_COUNT = 4


class StudentFileError(Exception):
    """Raised when a student file cannot be read or written."""


class MalformedLineError(ValueError):
    """Raised when a line is not a valid `id,name,email,grade` record."""


def format_line(student: Student) -> str:
    return FIELD_SEPARATOR.join(
        [str(student.id), student.name, student.email, str(student.grade)]
    )


def parse_line(line: str) -> Student:
    """
    Parse one `id,name,email,grade` line.

    Raises:
        MalformedLineError: wrong number of fields, or id/grade not an integer
            that fits the INTEGER column
    """
    parts = line.rstrip('\r\n').split(FIELD_SEPARATOR)
    if len(parts) != FIELD_COUNT:
        raise MalformedLineError(f"expected {FIELD_COUNT} fields, got {len(parts)}")

    raw_id, name, email, raw_grade = parts
    try:
        student_id = parse_integer(raw_id)
        grade = parse_integer(raw_grade)
    except ValueError as e:
        raise MalformedLineError(str(e)) from e

    return Student(student_id, name, email, grade)


def export_students(students: Iterable[Student], path: Union[str, Path]) -> int:
    """
    Write the students to `path`, replacing whatever was there.

    Returns:
        Number of records written

    Raises:
        StudentFileError: the file could not be written
    """
    count = 0
    try:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            for student in students:
                f.write(format_line(student) + '\n')
                count += 1
    except OSError as e:
        raise StudentFileError(f"Error exporting students to {path}: {e}") from e

    logger.info(f"Exported {count} student(s) to {path}")
    return count


def import_students(path: Union[str, Path]) -> List[Student]:
    """
    Read students from `path`.

    A malformed line is skipped with a warning and the rest of the file is
    still read. Blank lines are ignored.

    Raises:
        StudentFileError: the file does not exist, could not be read, or is not UTF-8
    """
    students = []
    try:
        with open(path, 'r', encoding='utf-8') as f:
            for line_number, line in enumerate(f, 1):
                if not line.strip():
                    continue
                try:
                    students.append(parse_line(line))
                except MalformedLineError as e:
                    logger.warning(f"Skipping line {line_number} of {path}: {e}")
    except (OSError, UnicodeError) as e:
        raise StudentFileError(f"Error importing students from {path}: {e}") from e

    logger.info(f"Read {len(students)} student(s) from {path}")
    return students

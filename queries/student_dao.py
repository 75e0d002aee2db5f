"""
Data access for the students table.

Every operation opens its own session on the injected connection and closes it
when done, so each call is its own unit of work. Storage failures are logged
here and returned as StorageError; nothing is raised to the caller.
"""

import logging
from typing import List, Union

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from database import DatabaseConnection, Student, StudentRow, StorageUnavailable
from .results import Done, DuplicateId, Found, NotFound, StorageError

logger = logging.getLogger(__name__)


class StudentDAO:
    """CRUD operations on student records."""

    def __init__(self, db: DatabaseConnection):
        self.db = db

    def _storage_error(self, operation: str, error: Exception) -> StorageError:
        logger.error(f"Error {operation}: {error}")
        return StorageError(operation, str(error))

    def add(self, student: Student) -> Union[Done, DuplicateId, StorageError]:
        """
        Insert one student.

        Returns:
            Done(1) on success, DuplicateId if the primary key already exists,
            StorageError for anything else
        """
        try:
            db = self.db.get_db()
        except StorageUnavailable as e:
            return self._storage_error("adding student", e)

        try:
            db.add(StudentRow.from_student(student))
            db.commit()
            return Done(1)
        except IntegrityError as e:
            db.rollback()
            logger.error(f"Error adding student: id {student.id} already exists ({e.orig})")
            return DuplicateId(student.id)
        except (SQLAlchemyError, OverflowError) as e:
            db.rollback()
            return self._storage_error("adding student", e)
        finally:
            db.close()

    def add_if_absent(self, student: Student) -> Union[Done, DuplicateId, StorageError]:
        """
        Look the id up first and only insert when it is free.

        The lookup and the insert are separate units of work; a concurrent
        insert in between is still rejected by the primary key.
        """
        existing = self.get_by_id(student.id)
        if isinstance(existing, Found):
            return DuplicateId(student.id)
        if isinstance(existing, StorageError):
            return existing
        return self.add(student)

    def get_by_id(self, student_id: int) -> Union[Found, NotFound, StorageError]:
        try:
            db = self.db.get_db()
        except StorageUnavailable as e:
            return self._storage_error("fetching student", e)

        try:
            row = db.get(StudentRow, student_id)
            if row is None:
                return NotFound(student_id)
            return Found(row.to_student())
        except (SQLAlchemyError, OverflowError) as e:
            return self._storage_error("fetching student", e)
        finally:
            db.close()

    def get_all(self) -> Union[List[Student], StorageError]:
        """All students in whatever order the store returns them."""
        try:
            db = self.db.get_db()
        except StorageUnavailable as e:
            return self._storage_error("fetching all students", e)

        try:
            return [row.to_student() for row in db.query(StudentRow).all()]
        except (SQLAlchemyError, OverflowError) as e:
            return self._storage_error("fetching all students", e)
        finally:
            db.close()

    def update(self, student: Student) -> Union[Done, StorageError]:
        """Overwrite name, email and grade of the row with student.id (no-op if absent)."""
        try:
            db = self.db.get_db()
        except StorageUnavailable as e:
            return self._storage_error("updating student", e)

        try:
            affected = db.query(StudentRow)\
                .filter_by(id=student.id)\
                .update({'name': student.name, 'email': student.email, 'grade': student.grade})
            db.commit()
            return Done(affected)
        except (SQLAlchemyError, OverflowError) as e:
            db.rollback()
            return self._storage_error("updating student", e)
        finally:
            db.close()

    def delete(self, student_id: int) -> Union[Done, StorageError]:
        """Remove the row with student_id (no-op if absent)."""
        try:
            db = self.db.get_db()
        except StorageUnavailable as e:
            return self._storage_error("deleting student", e)

        try:
            affected = db.query(StudentRow).filter_by(id=student_id).delete()
            db.commit()
            return Done(affected)
        except (SQLAlchemyError, OverflowError) as e:
            db.rollback()
            return self._storage_error("deleting student", e)
        finally:
            db.close()

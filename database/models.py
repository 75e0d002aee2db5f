from typing import NamedTuple

from sqlalchemy import Column, Integer, Text

from .connection import Base

# Range of a SQL INTEGER column (signed 64-bit)
INTEGER_MIN = -2 ** 63
INTEGER_MAX = 2 ** 63 - 1


def parse_integer(raw: str) -> int:
    """
    Parse an integer field (id or grade) that has to fit the INTEGER column.

    Raises:
        ValueError: not an integer, or outside the signed 64-bit range
    """
    value = int(raw.strip())
    if not INTEGER_MIN <= value <= INTEGER_MAX:
        raise ValueError(f"{value} is out of range for an INTEGER column")
    return value


class Student(NamedTuple):
    """A student record as the rest of the application sees it (immutable)."""
    id: int
    name: str
    email: str
    grade: int


class StudentRow(Base):
    __tablename__ = 'students'
    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(Text)
    email = Column(Text)
    grade = Column(Integer)

    @classmethod
    def from_student(cls, student: Student) -> 'StudentRow':
        return cls(id=student.id, name=student.name, email=student.email, grade=student.grade)

    def to_student(self) -> Student:
        return Student(self.id, self.name, self.email, self.grade)

    def __repr__(self):
        return f"<StudentRow {self.name} ({self.id})>"

import pytest

from config import Settings
from database import DatabaseConnection, Student, init_database
from queries import StudentDAO


@pytest.fixture
def db():
    """A fresh in-memory database with the schema in place."""
    connection = DatabaseConnection('sqlite://', echo=False)
    assert init_database(connection)
    yield connection
    connection.close()


@pytest.fixture
def dao(db):
    return StudentDAO(db)


@pytest.fixture
def sample_students():
    return [
        Student(1, 'Alice Smith', 'alice@example.com', 10),
        Student(2, 'Bob Jones', 'bob@example.com', 11),
        Student(3, 'Carol White', 'carol@example.com', 10),
        Student(4, 'Dan Brown', 'dan@example.com', 12),
        Student(5, 'Eve Black', 'eve@example.com', 11),
        Student(6, 'Frank Green', 'frank@example.com', 10),
    ]


@pytest.fixture
def populated_dao(dao, sample_students):
    for student in sample_students:
        dao.add(student)
    return dao


@pytest.fixture
def settings(tmp_path):
    return Settings(
        db_url='sqlite://',
        db_echo=False,
        students_file=str(tmp_path / 'students.txt'),
        num_workers=2,
        log_level='INFO',
    )


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with a fixed sequence of answers."""

    def _feed(*answers):
        remaining = iter(answers)

        def fake_input(prompt=''):
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError
        monkeypatch.setattr('builtins.input', fake_input)

    return _feed

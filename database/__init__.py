from .connection import Base, DatabaseConnection, StorageUnavailable, get_connection
from .models import Student, StudentRow, parse_integer
from .init_db import init_database, verify_database

__all__ = [
    'Base',
    'DatabaseConnection',
    'StorageUnavailable',
    'get_connection',
    'Student',
    'StudentRow',
    'parse_integer',
    'init_database',
    'verify_database',
]

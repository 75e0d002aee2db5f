from .text_file import (
    StudentFileError,
    MalformedLineError,
    format_line,
    parse_line,
    export_students,
    import_students,
)

__all__ = [
    'StudentFileError',
    'MalformedLineError',
    'format_line',
    'parse_line',
    'export_students',
    'import_students',
]

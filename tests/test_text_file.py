import logging

import pytest

from database import Student
from transfer import (
    MalformedLineError, StudentFileError,
    export_students, format_line, import_students, parse_line,
)


def test_parse_line_example():
    assert parse_line('7,Jane Doe,jane@x.com,9\n') == Student(7, 'Jane Doe', 'jane@x.com', 9)


def test_format_line():
    assert format_line(Student(7, 'Jane Doe', 'jane@x.com', 9)) == '7,Jane Doe,jane@x.com,9'


@pytest.mark.parametrize('line', [
    '7,Jane Doe,jane@x.com',
    '7,Jane, Doe,jane@x.com,9',
    'seven,Jane Doe,jane@x.com,9',
    '7,Jane Doe,jane@x.com,nine',
    '7,Jane Doe,jane@x.com,',
])
def test_parse_line_rejects_malformed(line):
    with pytest.raises(MalformedLineError):
        parse_line(line)


def test_export_then_import_round_trip(tmp_path, sample_students):
    path = tmp_path / 'students.txt'

    assert export_students(sample_students, path) == len(sample_students)

    assert set(import_students(path)) == set(sample_students)


def test_export_writes_one_line_per_record(tmp_path):
    path = tmp_path / 'out.txt'
    export_students([Student(1, 'A', 'a@x.com', 10), Student(2, 'B', 'b@x.com', 11)], path)

    assert path.read_text(encoding='utf-8') == '1,A,a@x.com,10\n2,B,b@x.com,11\n'


def test_export_overwrites_existing_file(tmp_path):
    path = tmp_path / 'out.txt'
    path.write_text('old contents\nmore old contents\n', encoding='utf-8')

    export_students([Student(1, 'A', 'a@x.com', 10)], path)

    assert path.read_text(encoding='utf-8') == '1,A,a@x.com,10\n'


def test_import_skips_malformed_lines(tmp_path, caplog):
    path = tmp_path / 'in.txt'
    path.write_text(
        '1,Ann,ann@x.com,10\n'
        'not a record\n'
        '\n'
        '2,Ben,ben@x.com,abc\n'
        '3,Cat,cat@x.com,12\n',
        encoding='utf-8',
    )

    with caplog.at_level(logging.WARNING):
        students = import_students(path)

    assert students == [Student(1, 'Ann', 'ann@x.com', 10), Student(3, 'Cat', 'cat@x.com', 12)]
    assert 'Skipping line 2' in caplog.text
    assert 'Skipping line 4' in caplog.text


def test_import_missing_file_raises(tmp_path):
    with pytest.raises(StudentFileError):
        import_students(tmp_path / 'nope.txt')


def test_export_to_unwritable_path_raises(tmp_path):
    with pytest.raises(StudentFileError):
        export_students([Student(1, 'A', 'a@x.com', 1)], tmp_path / 'no_dir' / 'out.txt')


def test_parse_line_rejects_id_too_large_for_the_column():
    with pytest.raises(MalformedLineError):
        parse_line('99999999999999999999,A,a@x.com,9')


def test_import_skips_out_of_range_ids(tmp_path, caplog):
    path = tmp_path / 'in.txt'
    path.write_text('99999999999999999999,A,a@x.com,9\n7,Jane Doe,jane@x.com,9\n', encoding='utf-8')

    with caplog.at_level(logging.WARNING):
        students = import_students(path)

    assert students == [Student(7, 'Jane Doe', 'jane@x.com', 9)]
    assert 'Skipping line 1' in caplog.text


def test_import_non_utf8_file_raises(tmp_path):
    path = tmp_path / 'latin1.txt'
    path.write_bytes(b'7,Jos\xe9,jose@x.com,9\n')

    with pytest.raises(StudentFileError):
        import_students(path)

from database import Student
from queries import StudentFormatter, filter_by_grade, sort_by_name


def test_filter_by_grade_example(populated_dao):
    matches = filter_by_grade(populated_dao.get_all(), 10)

    assert {s.id for s in matches} == {1, 3, 6}
    assert len(matches) == 3


def test_filter_by_grade_every_value(sample_students):
    for grade in range(0, 15):
        expected = [s for s in sample_students if s.grade == grade]
        assert filter_by_grade(sample_students, grade) == expected


def test_filter_by_grade_no_matches(sample_students):
    assert filter_by_grade(sample_students, 42) == []


def test_sort_by_name_is_case_sensitive_by_default():
    students = [
        Student(1, 'bob', 'b@example.com', 1),
        Student(2, 'Alice', 'a@example.com', 1),
        Student(3, 'Zed', 'z@example.com', 1),
    ]

    assert [s.name for s in sort_by_name(students)] == ['Alice', 'Zed', 'bob']


def test_sort_by_name_ignore_case():
    students = [
        Student(1, 'bob', 'b@example.com', 1),
        Student(2, 'Alice', 'a@example.com', 1),
        Student(3, 'Zed', 'z@example.com', 1),
    ]

    assert [s.name for s in sort_by_name(students, ignore_case=True)] == ['Alice', 'bob', 'Zed']


def test_sort_by_name_is_stable_for_equal_names():
    students = [
        Student(5, 'Sam', 's5@example.com', 1),
        Student(2, 'Amy', 'a@example.com', 1),
        Student(9, 'Sam', 's9@example.com', 1),
        Student(1, 'Sam', 's1@example.com', 1),
    ]

    assert [s.id for s in sort_by_name(students)] == [2, 5, 9, 1]


def test_format_student_list(sample_students):
    text = StudentFormatter.format_student_list(sample_students[:2])

    assert 'Found 2 student(s)' in text
    assert 'Alice Smith' in text
    assert 'bob@example.com' in text


def test_format_student_list_empty():
    assert StudentFormatter.format_student_list([], "Nothing here") == "Nothing here"


def test_format_single_student():
    text = StudentFormatter.format_single_student(Student(7, 'Jane Doe', 'jane@x.com', 9))

    assert 'ID:       7' in text
    assert 'Grade:    9' in text

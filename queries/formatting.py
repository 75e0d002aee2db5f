"""
Formatting utilities for displaying student records.

This module turns Student values into readable text for console output.
"""

from typing import List

from database import Student


class StudentFormatter:
    """Utilities for formatting student records into readable text."""

    @staticmethod
    def format_row(student: Student) -> str:
        """One student as a single table row."""
        name = student.name[:29]
        email = student.email[:34]
        return f"{student.id:<10} {name:<30} {email:<35} {student.grade:>5}"

    @staticmethod
    def format_single_student(student: Student) -> str:
        """
        Format one student's complete record.

        Args:
            student: The student to show

        Returns:
            Formatted multi-line string suitable for display
        """
        lines = []
        lines.append("-" * 80)
        lines.append(f"ID:       {student.id}")
        lines.append(f"Name:     {student.name}")
        lines.append(f"Email:    {student.email}")
        lines.append(f"Grade:    {student.grade}")
        lines.append("-" * 80)
        return "\n".join(lines)

    @staticmethod
    def format_student_list(students: List[Student], empty_message: str = "No students found.") -> str:
        """
        Format a list of students in a table format.

        Args:
            students: Students in the order they should be shown
            empty_message: Text returned when the list is empty

        Returns:
            Formatted multi-line string suitable for display
        """
        if not students:
            return empty_message

        lines = []
        lines.append(f"Found {len(students)} student(s)")
        lines.append("")
        lines.append("=" * 83)
        lines.append(f"{'ID':<10} {'Name':<30} {'Email':<35} {'Grade':>5}")
        lines.append("=" * 83)

        for student in students:
            lines.append(StudentFormatter.format_row(student))

        lines.append("=" * 83)
        return "\n".join(lines)

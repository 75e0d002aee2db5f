#!/usr/bin/env python3
"""
Student Management System - Command Line Interface

An interactive menu for adding, viewing, updating and deleting student
records, exporting/importing them to a text file, and a small demonstration
of processing the records on a pool of worker threads.
"""

import logging
import os
from typing import Callable, List, Optional

from config import Settings, configure_logging, get_settings
from database import DatabaseConnection, Student, init_database, parse_integer
from queries import (
    Found, NotFound, DuplicateId, StorageError,
    StudentDAO, StudentFormatter, filter_by_grade, sort_by_name,
)
from transfer import StudentFileError, export_students, import_students
from workers import process_students_concurrently

logger = logging.getLogger(__name__)

INVALID_CHOICE = -1
EXIT_CHOICE = 11


def parse_choice(raw: str) -> int:
    """Menu input as an int, or INVALID_CHOICE if it is not a number."""
    try:
        return int(raw.strip())
    except ValueError:
        return INVALID_CHOICE


def is_yes(answer: str) -> bool:
    return answer.strip().lower() in ('y', 'yes')


class MenuItem:
    """Represents a single menu item."""

    def __init__(self, key: int, label: str, action: Callable):
        self.key = key
        self.label = label
        self.action = action

    def display(self) -> str:
        """Return formatted menu item for display."""
        return f"  {self.key}. {self.label}"


class MenuSystem:
    """Handles menu display and navigation."""

    def __init__(self, title: str, exit_key: int = EXIT_CHOICE):
        self.title = title
        self.exit_key = exit_key
        self.items: List[MenuItem] = []
        self.running = True

    def add_item(self, key: int, label: str, action: Callable):
        """Add a menu item."""
        self.items.append(MenuItem(key, label, action))

    def display(self):
        """Display the menu."""
        print("\n" + "=" * 80)
        print(self.title)
        print("=" * 80)
        for item in self.items:
            print(item.display())
        print(f"  {self.exit_key}. Exit")
        print("=" * 80)

    def get_choice(self) -> int:
        """Get user's menu choice."""
        return parse_choice(input(f"\nEnter your choice (1-{self.exit_key}): "))

    def find_action(self, choice: int) -> Optional[Callable]:
        for item in self.items:
            if item.key == choice:
                return item.action
        return None

    def run(self):
        """Run the menu loop."""
        while self.running:
            self.display()
            try:
                choice = self.get_choice()
            except EOFError:
                choice = self.exit_key

            if choice == self.exit_key:
                self.running = False
                print("\nThank you for using the Student Management System. Goodbye!")
                break

            action = self.find_action(choice)
            if action is None:
                print("✗ Invalid choice. Please try again.")
            else:
                print("\n" + "=" * 80)
                try:
                    action()
                except KeyboardInterrupt:
                    print("\n\n⚠️  Action cancelled by user.")
                except Exception as e:
                    print(f"\n✗ Error: {str(e)}")
                    logger.exception("Menu action failed")
                print("=" * 80)

            try:
                input("\nPress Enter to continue...")
            except EOFError:
                self.running = False


class CLIActions:
    """All CLI actions, one per menu entry."""

    def __init__(self, dao: StudentDAO, settings: Settings):
        self.dao = dao
        self.settings = settings

    # =========================================================================
    # RECORD ACTIONS
    # =========================================================================

    def add_student(self):
        """Add a new student after checking the id is free."""
        print("ADD NEW STUDENT")
        print("-" * 80)

        student_id = self._read_int("Enter student ID: ", "✗ Invalid ID format. Please enter a number.")
        if student_id is None:
            return

        existing = self.dao.get_by_id(student_id)
        if isinstance(existing, Found):
            print("✗ A student with this ID already exists.")
            return
        if isinstance(existing, StorageError):
            print(f"✗ Could not check ID: {existing.detail}")
            return

        name = input("Enter student name: ")
        email = input("Enter student email: ")
        grade = self._read_int("Enter student grade: ", "✗ Invalid grade format. Please enter a number.")
        if grade is None:
            return

        result = self.dao.add(Student(student_id, name, email, grade))
        if isinstance(result, DuplicateId):
            print("✗ A student with this ID already exists.")
        elif isinstance(result, StorageError):
            print(f"✗ Student was not added: {result.detail}")
        else:
            print("✓ Student added successfully!")

    def display_all(self):
        """Show every student in the database."""
        print("ALL STUDENTS")
        print("-" * 80)

        students = self._load_all()
        if students is None:
            return
        print(StudentFormatter.format_student_list(students, "No students found in the database."))

    def find_by_id(self):
        """Look up a single student by id."""
        print("FIND STUDENT BY ID")
        print("-" * 80)

        student_id = self._read_int("Enter student ID: ", "✗ Invalid ID format. Please enter a number.")
        if student_id is None:
            return

        result = self.dao.get_by_id(student_id)
        if isinstance(result, Found):
            print("✓ Student found:")
            print(StudentFormatter.format_single_student(result.student))
        elif isinstance(result, NotFound):
            print(f"✗ No student found with ID: {student_id}")
        else:
            print(f"✗ Lookup failed: {result.detail}")

    def update_student(self):
        """Update name, email and grade; an empty answer keeps the current value."""
        print("UPDATE STUDENT INFORMATION")
        print("-" * 80)

        current = self._require_student("Enter student ID to update: ")
        if current is None:
            return

        print("Current student information:")
        print(StudentFormatter.format_single_student(current))

        name = input("Enter new name (or press Enter to keep current): ")
        email = input("Enter new email (or press Enter to keep current): ")
        grade_str = input("Enter new grade (or press Enter to keep current): ").strip()

        try:
            grade = parse_integer(grade_str) if grade_str else current.grade
        except ValueError:
            print("✗ Invalid grade format. Please enter a number.")
            return

        updated = current._replace(
            name=name if name else current.name,
            email=email if email else current.email,
            grade=grade,
        )
        result = self.dao.update(updated)
        if isinstance(result, StorageError):
            print(f"✗ Update failed: {result.detail}")
        else:
            print("✓ Student information updated successfully!")

    def delete_student(self):
        """Delete a student after an explicit y/yes confirmation."""
        print("DELETE STUDENT RECORD")
        print("-" * 80)

        student = self._require_student("Enter student ID to delete: ")
        if student is None:
            return

        print("Student to delete:")
        print(StudentFormatter.format_single_student(student))

        if not is_yes(input("Are you sure you want to delete this student? (y/n): ")):
            print("Deletion cancelled.")
            return

        result = self.dao.delete(student.id)
        if isinstance(result, StorageError):
            print(f"✗ Delete failed: {result.detail}")
        else:
            print("✓ Student deleted successfully!")

    # =========================================================================
    # FILE ACTIONS
    # =========================================================================

    def export_to_file(self):
        """Write every student to a text file."""
        print("EXPORT STUDENTS TO FILE")
        print("-" * 80)

        filename = self._read_filename("Enter filename")
        students = self._load_all()
        if students is None:
            return
        if not students:
            print("✗ No students to export.")
            return

        try:
            count = export_students(students, filename)
        except StudentFileError as e:
            logger.error(str(e))
            return
        print(f"✓ Exported {count} student(s) to {filename}")

    def import_from_file(self):
        """Read students from a text file and optionally add the new ones."""
        print("IMPORT STUDENTS FROM FILE")
        print("-" * 80)

        filename = self._read_filename("Enter filename to import from")
        if not os.path.exists(filename):
            print(f"✗ File not found: {filename}")
            return

        try:
            imported = import_students(filename)
        except StudentFileError as e:
            logger.error(str(e))
            return

        print(f"Imported {len(imported)} student(s) from file.")
        if not imported:
            return

        if not is_yes(input("Would you like to add these students to the database? (y/n): ")):
            print("Import cancelled.")
            return

        for student in imported:
            result = self.dao.add_if_absent(student)
            if isinstance(result, DuplicateId):
                print(f"  Skipped (ID exists): {student}")
            elif isinstance(result, StorageError):
                print(f"  ✗ Failed: {student} ({result.detail})")
            else:
                print(f"  Added: {student}")
        print("✓ Import completed!")

    # =========================================================================
    # LIST ACTIONS
    # =========================================================================

    def filter_by_grade(self):
        """Show the students in one grade."""
        print("FILTER STUDENTS BY GRADE")
        print("-" * 80)

        grade = self._read_int("Enter grade to filter by: ", "✗ Invalid grade format. Please enter a number.")
        if grade is None:
            return

        students = self._load_all()
        if students is None:
            return

        matches = filter_by_grade(students, grade)
        print(f"\nStudents in grade {grade} ({len(matches)} students):")
        print(StudentFormatter.format_student_list(matches, f"No students found in grade {grade}"))

    def sort_alphabetically(self):
        """Show all students ordered by name."""
        print("STUDENTS SORTED ALPHABETICALLY")
        print("-" * 80)

        students = self._load_all()
        if students is None:
            return
        print(StudentFormatter.format_student_list(sort_by_name(students), "No students to sort."))

    def process_concurrently(self):
        """Split the students across the worker pool and print each share."""
        print("PROCESSING STUDENTS CONCURRENTLY")
        print("-" * 80)

        students = self._load_all()
        if students is None:
            return
        if not students:
            print("✗ No students to process.")
            return

        process_students_concurrently(students, num_workers=self.settings.num_workers)

    # =========================================================================
    # HELPER METHODS
    # =========================================================================

    def _read_int(self, prompt: str, error_message: str) -> Optional[int]:
        """Prompt for an integer; prints error_message and returns None if it is not one."""
        try:
            return parse_integer(input(prompt))
        except ValueError:
            print(error_message)
            return None

    def _read_filename(self, prompt: str) -> str:
        default = self.settings.students_file
        filename = input(f"{prompt} (default: {default}): ").strip()
        return filename if filename else default

    def _load_all(self) -> Optional[List[Student]]:
        """All students, or None (after telling the user) if storage failed."""
        students = self.dao.get_all()
        if isinstance(students, StorageError):
            print(f"✗ Could not load students: {students.detail}")
            return None
        return students

    def _require_student(self, prompt: str) -> Optional[Student]:
        """Prompt for an id and fetch that student, reporting why if there is none."""
        student_id = self._read_int(prompt, "✗ Invalid ID format. Please enter a number.")
        if student_id is None:
            return None

        result = self.dao.get_by_id(student_id)
        if isinstance(result, Found):
            return result.student
        if isinstance(result, NotFound):
            print(f"✗ No student found with ID: {student_id}")
        else:
            print(f"✗ Lookup failed: {result.detail}")
        return None


def build_menu(actions: CLIActions) -> MenuSystem:
    menu = MenuSystem("STUDENT MANAGEMENT SYSTEM")
    menu.add_item(1, "Add New Student", actions.add_student)
    menu.add_item(2, "Display All Students", actions.display_all)
    menu.add_item(3, "Find Student by ID", actions.find_by_id)
    menu.add_item(4, "Update Student Information", actions.update_student)
    menu.add_item(5, "Delete Student Record", actions.delete_student)
    menu.add_item(6, "Export Students to File", actions.export_to_file)
    menu.add_item(7, "Import Students from File", actions.import_from_file)
    menu.add_item(8, "Filter Students by Grade", actions.filter_by_grade)
    menu.add_item(9, "Sort Students Alphabetically", actions.sort_alphabetically)
    menu.add_item(10, "Process Students Concurrently (Thread Demo)", actions.process_concurrently)
    return menu


def main():
    """Main CLI entry point."""
    settings = get_settings()
    configure_logging(settings.log_level)

    with DatabaseConnection(settings.db_url, settings.db_echo) as db:
        # Operations still run (and report failures) if the schema could not be created
        init_database(db)
        actions = CLIActions(StudentDAO(db), settings)
        menu = build_menu(actions)
        try:
            menu.run()
        except KeyboardInterrupt:
            print("\n\nGoodbye!")
    return 0


if __name__ == '__main__':
    main()

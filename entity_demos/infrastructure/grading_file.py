"""
Grading Files

Reads student records from a line-oriented text file and writes the grade
report. Input lines look like `101, Alice Smith, 84`; blank lines are
skipped. Any bad line aborts the whole read.
"""

import logging
from pathlib import Path
from typing import List

from entity_demos.domain.errors import InvalidValueError, MalformedRecordError, ResourceAccessError
from entity_demos.domain.models import Student

logger = logging.getLogger(__name__)

FIELD_COUNT = 3
REPORT_TITLE = "STUDENT GRADE REPORT"


def parse_student_line(line: str, line_number: int) -> Student:
    """
    Parse one `id,name,score` line.

    Raises:
        MalformedRecordError: Wrong field count, empty field or non-integer id/score
        InvalidValueError: Score outside 0-100
    """
    fields = [f.strip() for f in line.split(",")]
    if len(fields) != FIELD_COUNT:
        raise MalformedRecordError(
            f"Expected {FIELD_COUNT} fields (ID, Name, Score) but found {len(fields)} fields.",
            line_number,
        )
    if not all(fields):
        raise MalformedRecordError(
            "One or more fields are empty or contain only whitespace.", line_number
        )

    raw_id, full_name, raw_score = fields
    try:
        student_id = int(raw_id)
    except ValueError:
        raise MalformedRecordError(f"Student ID '{raw_id}' is not a valid integer.", line_number) from None
    try:
        score = int(raw_score)
    except ValueError:
        raise MalformedRecordError(f"Score '{raw_score}' is not a valid integer.", line_number) from None

    try:
        return Student(id=student_id, full_name=full_name, score=score)
    except InvalidValueError as e:
        raise InvalidValueError(f"Line {line_number}: {e}") from e


def read_students(path: Path) -> List[Student]:
    """
    Read every student from path.

    Raises:
        ResourceAccessError: If the file is missing or unreadable
        MalformedRecordError / InvalidValueError: On the first bad line
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except OSError as e:
        raise ResourceAccessError(f"Could not read {path}: {e}", str(path)) from e
    except UnicodeDecodeError as e:
        raise MalformedRecordError(f"{path} is not valid UTF-8 text: {e.reason}") from e

    students = [
        parse_student_line(line, number)
        for number, line in enumerate(lines, start=1)
        if line.strip()
    ]
    logger.info("Read %d student records from %s", len(students), path)
    return students


def format_student(student: Student) -> str:
    return (
        f"{student.full_name} (ID: {student.id}): "
        f"Score = {student.score}, Grade = {student.grade}"
    )


def build_report(students: List[Student]) -> List[str]:
    """Report lines, without trailing newlines."""
    lines = [REPORT_TITLE, "=" * (len(REPORT_TITLE) - 1), ""]
    lines.extend(format_student(s) for s in students)
    lines.extend(["", f"Total students processed: {len(students)}"])
    return lines


def write_report(students: List[Student], path: Path) -> List[str]:
    """
    Write the grade report to path.

    Returns:
        The lines written

    Raises:
        ResourceAccessError: If the report cannot be written
    """
    path = Path(path)
    lines = build_report(students)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")
    except OSError as e:
        raise ResourceAccessError(f"Could not write {path}: {e}", str(path)) from e

    logger.info("Wrote report for %d students to %s", len(students), path)
    return lines

"""
Student Grading Demo

Reads student records from the grading input file and writes a grade report.
"""

import logging
from pathlib import Path
from typing import List, Optional

from entity_demos.application.console import print_header
from entity_demos.domain.models import Student
from entity_demos.domain.store import KeyedEntityStore
from entity_demos.infrastructure.config import AppConfig, get_config
from entity_demos.infrastructure.grading_file import read_students, write_report

logger = logging.getLogger(__name__)


class StudentResultProcessor:
    def __init__(
        self,
        config: Optional[AppConfig] = None,
        input_file: Optional[Path] = None,
        report_file: Optional[Path] = None,
    ):
        self.config = config or get_config()
        self.input_file = Path(input_file or self.config.grading.input_file)
        self.report_file = Path(report_file or self.config.grading.report_file)

    def load(self) -> KeyedEntityStore[Student]:
        """
        Read students into a store.

        Raises:
            DuplicateKeyError: If two lines share a student id
        """
        return KeyedEntityStore(read_students(self.input_file))

    def run(self) -> List[str]:
        """Read, grade and report. Errors propagate to the caller."""
        print_header("STUDENT GRADING SYSTEM")
        print(f"Reading student data from: {self.input_file}")
        store = self.load()
        print(f"Successfully read {len(store)} student records.\n")

        lines = write_report(store.get_all(), self.report_file)
        for line in lines[3:]:
            print(line)
        print(f"\nReport written to: {self.report_file}")
        logger.debug("Graded %d students", len(store))
        return lines

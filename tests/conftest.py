"""Shared fixtures."""

from datetime import datetime
from pathlib import Path

import pytest

from entity_demos.infrastructure.config import (
    PACKAGED_SEED_DIR,
    AppConfig,
    FinanceConfig,
    GradingConfig,
    InventoryConfig,
)
from entity_demos.infrastructure.seed_data import SeedLoader

REFERENCE_TIME = datetime(2026, 10, 18, 9, 30)


@pytest.fixture
def reference_time() -> datetime:
    return REFERENCE_TIME


@pytest.fixture
def seed_loader() -> SeedLoader:
    """Loader over the seed files shipped with the package."""
    return SeedLoader(PACKAGED_SEED_DIR)


@pytest.fixture
def app_config(tmp_path: Path) -> AppConfig:
    """Configuration with every file path inside tmp_path."""
    return AppConfig(
        seed_dir=PACKAGED_SEED_DIR,
        inventory=InventoryConfig(data_file=tmp_path / "inventory_data.json"),
        grading=GradingConfig(
            input_file=tmp_path / "students.txt",
            report_file=tmp_path / "student_report.txt",
        ),
        finance=FinanceConfig(),
    )


@pytest.fixture
def students_file(tmp_path: Path) -> Path:
    path = tmp_path / "students.txt"
    path.write_text(
        "101, Alice Smith, 84\n"
        "102, Bob Jones, 65\n"
        "\n"
        "103, Carol White, 49\n",
        encoding="utf-8",
    )
    return path

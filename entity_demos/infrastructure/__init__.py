"""
Infrastructure Layer

Configuration, seed data and file adapters.
"""

from entity_demos.infrastructure.config import (
    AppConfig,
    get_config,
    reload_config,
    configure_logging,
)
from entity_demos.infrastructure.seed_data import SeedLoader
from entity_demos.infrastructure.inventory_file import InventoryFile
from entity_demos.infrastructure.grading_file import read_students, write_report

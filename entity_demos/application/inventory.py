"""
Inventory Demo

Seeds inventory records, saves them to the inventory file, clears memory to
simulate a new session and reloads them.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from entity_demos.application.console import print_header, print_section, report_failure
from entity_demos.domain.errors import attempt
from entity_demos.domain.models import InventoryItem
from entity_demos.domain.store import KeyedEntityStore
from entity_demos.infrastructure.config import AppConfig, get_config
from entity_demos.infrastructure.inventory_file import InventoryFile
from entity_demos.infrastructure.seed_data import SeedLoader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InventoryStatistics:
    total_items: int
    total_quantity: int
    average_quantity: float
    oldest: InventoryItem
    newest: InventoryItem


def compute_statistics(store: KeyedEntityStore[InventoryItem]) -> Optional[InventoryStatistics]:
    """Summary figures, or None for an empty store."""
    items = store.get_all()
    if not items:
        return None
    total = sum(i.quantity for i in items)
    return InventoryStatistics(
        total_items=len(items),
        total_quantity=total,
        average_quantity=total / len(items),
        oldest=min(items, key=lambda i: i.date_added),
        newest=max(items, key=lambda i: i.date_added),
    )


class InventoryApp:
    def __init__(
        self,
        config: Optional[AppConfig] = None,
        seeds: Optional[SeedLoader] = None,
        data_file: Optional[Path] = None,
    ):
        self.config = config or get_config()
        self.seeds = seeds or SeedLoader(self.config.seed_dir)
        self.file = InventoryFile(data_file or self.config.inventory.data_file)
        self.store: KeyedEntityStore[InventoryItem] = KeyedEntityStore()

    def seed(self, now: Optional[datetime] = None) -> None:
        for item in self.seeds.inventory(now).items:
            result = attempt(self.store.insert, item)
            if result.ok:
                print(f"Added item with ID {item.id} to inventory.")
            else:
                report_failure("adding item", result)

    def save(self) -> int:
        count = self.file.save_store(self.store)
        print(f"Saved {count} items to {self.file.path}")
        return count

    def load(self) -> int:
        """Replace the in-memory store with the file contents."""
        self.store = self.file.load_store()
        print(f"Loaded {len(self.store)} items from {self.file.path}")
        return len(self.store)

    def clear(self) -> None:
        self.store.clear()
        print("Memory cleared - simulating new session.")

    def print_all_items(self) -> None:
        print_section("Current Inventory Items")
        items = sorted(self.store.get_all(), key=lambda i: i.id)
        if not items:
            print("No items found in inventory.")
            return

        print(f"{'ID':<5} {'Name':<20} {'Quantity':<10} {'Date Added':<15}")
        print("-" * 55)
        for item in items:
            print(f"{item.id:<5} {item.name:<20} {item.quantity:<10} {item.date_added:%Y-%m-%d}")
        print(f"\nTotal items: {len(items)}")
        print(f"Total quantity: {sum(i.quantity for i in items)}")

    def print_statistics(self) -> None:
        print_section("Inventory Statistics")
        stats = compute_statistics(self.store)
        if stats is None:
            print("No items to analyze.")
            return
        print(f"Total unique items: {stats.total_items}")
        print(f"Total quantity across all items: {stats.total_quantity}")
        print(f"Average quantity per item: {stats.average_quantity:.2f}")
        print(f"Oldest item: {stats.oldest.name} (added {stats.oldest.date_added:%Y-%m-%d})")
        print(f"Newest item: {stats.newest.name} (added {stats.newest.date_added:%Y-%m-%d})")

    def run(self) -> None:
        print_header("INVENTORY MANAGEMENT SYSTEM")
        print_section("Seeding Sample Data")
        self.seed()
        self.print_all_items()
        self.print_statistics()

        print_section("Saving Data to File")
        self.save()

        print_section("Clearing Memory (Simulating New Session)")
        self.clear()
        self.print_all_items()

        print_section("Loading Data from File")
        self.load()
        self.print_all_items()
        self.print_statistics()
        logger.debug("Inventory round trip complete via %s", self.file.path)

"""
Warehouse Demo

Electronics and groceries in separate stores, exercising duplicate inserts,
missing ids and invalid quantities through explicit operation results.
"""

import logging
from typing import Optional

from entity_demos.application.console import print_header, print_section, report_failure
from entity_demos.domain.errors import OperationResult, attempt
from entity_demos.domain.models import ElectronicItem, GroceryItem
from entity_demos.domain.store import KeyedEntityStore
from entity_demos.infrastructure.config import AppConfig, get_config
from entity_demos.infrastructure.seed_data import SeedLoader

logger = logging.getLogger(__name__)


class WarehouseManager:
    def __init__(self, config: Optional[AppConfig] = None, seeds: Optional[SeedLoader] = None):
        self.config = config or get_config()
        self.seeds = seeds or SeedLoader(self.config.seed_dir)
        self.electronics: KeyedEntityStore[ElectronicItem] = KeyedEntityStore()
        self.groceries: KeyedEntityStore[GroceryItem] = KeyedEntityStore()

    def seed(self) -> None:
        seed = self.seeds.warehouse()
        for store, items in ((self.electronics, seed.electronics), (self.groceries, seed.groceries)):
            for item in items:
                result = attempt(store.insert, item)
                if not result.ok:
                    report_failure("seeding item", result)
        logger.debug("Seeded %d electronics, %d groceries", len(self.electronics), len(self.groceries))

    @staticmethod
    def print_all_items(store: KeyedEntityStore) -> None:
        items = store.get_all()
        if not items:
            print("No items found in the repository.")
            return
        for item in items:
            print(item)

    @staticmethod
    def increase_stock(store: KeyedEntityStore, item_id: int, quantity: int) -> OperationResult:
        """Add quantity to an item's stock."""
        found = attempt(store.get_by_id, item_id)
        if not found.ok:
            return found
        return attempt(store.update_quantity, item_id, found.value.quantity + quantity)

    @staticmethod
    def remove_item(store: KeyedEntityStore, item_id: int) -> OperationResult:
        return attempt(store.remove, item_id)

    def remove_and_report(self, store: KeyedEntityStore, item_id: int) -> OperationResult:
        result = self.remove_item(store, item_id)
        if result.ok:
            print(f"  Successfully removed item with ID {item_id}")
        else:
            report_failure("removing item", result)
        return result

    def run(self) -> None:
        print_header("WAREHOUSE INVENTORY MANAGEMENT SYSTEM")
        self.seed()

        print_section("All Grocery Items")
        self.print_all_items(self.groceries)
        print_section("All Electronic Items")
        self.print_all_items(self.electronics)

        print_section("Testing Error Handling")
        print("1. Adding duplicate item (ID: 1):")
        result = attempt(self.electronics.insert, ElectronicItem(1, "Duplicate Laptop", 5, "HP", 18))
        if not result.ok:
            report_failure("adding item", result)

        print("2. Removing non-existent item (ID: 999):")
        self.remove_and_report(self.electronics, 999)

        print("3. Updating quantity with a negative value:")
        result = attempt(self.electronics.update_quantity, 1, -10)
        if not result.ok:
            report_failure("updating quantity", result)

        print_section("Additional Operations")
        print("4. Increasing stock for grocery item 101 by 20:")
        result = self.increase_stock(self.groceries, 101, 20)
        if result.ok:
            print(f"  Stock increased for item ID 101. New quantity: {result.value.quantity}")
        else:
            report_failure("increasing stock", result)

        print("5. Removing grocery item 103:")
        self.remove_and_report(self.groceries, 103)

        print_section("Updated Grocery Items")
        self.print_all_items(self.groceries)

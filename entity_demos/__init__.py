"""
Entity Demos

Small console programs built around a generic keyed entity store:
finance, healthcare, warehouse, inventory and student grading.

Architecture:
    - entity_demos/domain: Entities, the keyed store and error kinds
    - entity_demos/infrastructure: Configuration, seed data and file adapters
    - entity_demos/application: The demo programs
    - entity_demos/interfaces: CLI

Usage:
    from entity_demos.domain.store import KeyedEntityStore
    from entity_demos.domain.models import InventoryItem

    store = KeyedEntityStore()
    store.insert(InventoryItem(1, "Laptop", 15, datetime.now()))
    store.update_quantity(1, 20)
"""

__version__ = "1.0.0"

"""
Inventory File

Whole-file JSON persistence for inventory records.

Format: a JSON array of objects with camelCase keys
    [{"id": 1, "name": "Laptop", "quantity": 15, "dateAdded": "2026-09-18T10:00:00"}]

A missing or blank file loads as an empty inventory.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List

from entity_demos.domain.errors import DemoError, MalformedRecordError, ResourceAccessError
from entity_demos.domain.models import InventoryItem
from entity_demos.domain.store import KeyedEntityStore

logger = logging.getLogger(__name__)


def item_to_dict(item: InventoryItem) -> dict:
    return {
        "id": item.id,
        "name": item.name,
        "quantity": item.quantity,
        "dateAdded": item.date_added.isoformat(),
    }


def _require_int(value, field_name: str, index: int) -> int:
    # bool is an int subclass; JSON true/false must not pass as a number
    if type(value) is not int:
        raise MalformedRecordError(
            f"Record {index} field '{field_name}' must be an integer, got {value!r}"
        )
    return value


def item_from_dict(data: dict, index: int) -> InventoryItem:
    """Build an item from one array element; index is 1-based for messages."""
    if not isinstance(data, dict):
        raise MalformedRecordError(f"Record {index} is not an object")
    try:
        return InventoryItem(
            id=_require_int(data["id"], "id", index),
            name=data["name"],
            quantity=_require_int(data["quantity"], "quantity", index),
            date_added=datetime.fromisoformat(data["dateAdded"]),
        )
    except DemoError:
        raise
    except KeyError as e:
        raise MalformedRecordError(f"Record {index} is missing field {e.args[0]!r}") from e
    except (TypeError, ValueError) as e:
        raise MalformedRecordError(f"Record {index} has an invalid field: {e}") from e


class InventoryFile:
    """Reads and writes the full inventory to a single JSON file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def save(self, items: List[InventoryItem]) -> int:
        """
        Overwrite the file with items.

        Returns:
            Number of records written

        Raises:
            ResourceAccessError: If the file cannot be written
        """
        payload = json.dumps([item_to_dict(i) for i in items], indent=2)
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(payload)
        except OSError as e:
            raise ResourceAccessError(f"Could not write {self.path}: {e}", str(self.path)) from e

        logger.info("Saved %d items to %s", len(items), self.path)
        return len(items)

    def load(self) -> List[InventoryItem]:
        """
        Read every record from the file.

        Raises:
            ResourceAccessError: If the file exists but cannot be read
            MalformedRecordError: If the content is not a valid inventory array
        """
        if not self.path.exists():
            logger.info("%s does not exist; starting with an empty inventory", self.path)
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            raise ResourceAccessError(f"Could not read {self.path}: {e}", str(self.path)) from e
        except UnicodeDecodeError as e:
            raise MalformedRecordError(f"{self.path} is not valid UTF-8 text: {e.reason}") from e

        if not text.strip():
            logger.info("%s is empty; starting with an empty inventory", self.path)
            return []

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedRecordError(f"Invalid JSON in {self.path}: {e.msg}", e.lineno) from e

        if data is None:
            return []
        if not isinstance(data, list):
            raise MalformedRecordError(f"{self.path} must contain a JSON array")

        items = [item_from_dict(entry, n) for n, entry in enumerate(data, start=1)]
        logger.info("Loaded %d items from %s", len(items), self.path)
        return items

    def save_store(self, store: KeyedEntityStore[InventoryItem]) -> int:
        """Persist a store's snapshot, ordered by id."""
        return self.save(sorted(store.get_all(), key=lambda i: i.id))

    def load_store(self) -> KeyedEntityStore[InventoryItem]:
        """Load the file into a fresh store. Duplicate ids raise DuplicateKeyError."""
        return KeyedEntityStore(self.load())

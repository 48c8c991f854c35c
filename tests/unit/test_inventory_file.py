"""Tests for entity_demos.infrastructure.inventory_file."""

import json
from datetime import datetime
from pathlib import Path

import pytest

from entity_demos.domain.errors import DuplicateKeyError, MalformedRecordError, ResourceAccessError
from entity_demos.domain.models import InventoryItem
from entity_demos.domain.store import KeyedEntityStore
from entity_demos.infrastructure.inventory_file import InventoryFile

ITEMS = [
    InventoryItem(1, "Laptop", 15, datetime(2026, 9, 18, 9, 30, 0, 123456)),
    InventoryItem(2, "Wireless Mouse", 50, datetime(2026, 9, 23, 9, 30)),
    InventoryItem(3, "Monitor", 12, datetime(2026, 10, 3, 9, 30)),
]


@pytest.fixture
def inventory_file(tmp_path: Path) -> InventoryFile:
    return InventoryFile(tmp_path / "inventory_data.json")


@pytest.mark.unit
class TestSave:
    def test_writes_camel_case_array(self, inventory_file: InventoryFile) -> None:
        inventory_file.save(ITEMS[:1])
        data = json.loads(inventory_file.path.read_text(encoding="utf-8"))
        assert data == [{
            "id": 1,
            "name": "Laptop",
            "quantity": 15,
            "dateAdded": "2026-09-18T09:30:00.123456",
        }]

    def test_unwritable_path(self, tmp_path: Path) -> None:
        target = InventoryFile(tmp_path / "missing" / "inventory.json")
        with pytest.raises(ResourceAccessError):
            target.save(ITEMS)


@pytest.mark.unit
class TestLoad:
    def test_round_trip(self, inventory_file: InventoryFile) -> None:
        store = KeyedEntityStore(ITEMS)
        assert inventory_file.save_store(store) == 3
        reloaded = inventory_file.load_store()
        assert reloaded is not store
        assert sorted(reloaded.get_all(), key=lambda i: i.id) == ITEMS

    def test_missing_file_is_empty(self, inventory_file: InventoryFile) -> None:
        assert inventory_file.load() == []

    def test_blank_file_is_empty(self, inventory_file: InventoryFile) -> None:
        inventory_file.path.write_text("  \n", encoding="utf-8")
        assert len(inventory_file.load_store()) == 0

    def test_invalid_json(self, inventory_file: InventoryFile) -> None:
        inventory_file.path.write_text('[\n  {"id": 1,\n', encoding="utf-8")
        with pytest.raises(MalformedRecordError) as exc:
            inventory_file.load()
        assert exc.value.line_number is not None

    def test_not_an_array(self, inventory_file: InventoryFile) -> None:
        inventory_file.path.write_text('{"id": 1}', encoding="utf-8")
        with pytest.raises(MalformedRecordError, match="JSON array"):
            inventory_file.load()

    def test_missing_field(self, inventory_file: InventoryFile) -> None:
        inventory_file.path.write_text('[{"id": 1, "name": "Laptop", "quantity": 3}]', encoding="utf-8")
        with pytest.raises(MalformedRecordError, match="dateAdded"):
            inventory_file.load()

    def test_bad_date(self, inventory_file: InventoryFile) -> None:
        inventory_file.path.write_text(
            '[{"id": 1, "name": "Laptop", "quantity": 3, "dateAdded": "yesterday"}]',
            encoding="utf-8",
        )
        with pytest.raises(MalformedRecordError, match="Record 1"):
            inventory_file.load()

    def test_invalid_utf8(self, inventory_file: InventoryFile) -> None:
        inventory_file.path.write_bytes(b'[{"id": 1, "name": "\xff"}]')
        with pytest.raises(MalformedRecordError, match="UTF-8"):
            inventory_file.load()

    @pytest.mark.parametrize(
        "field_name, value",
        [("id", 1.9), ("id", "1"), ("quantity", True), ("quantity", "12"), ("quantity", 3.0)],
    )
    def test_non_integer_numbers_rejected(self, inventory_file: InventoryFile, field_name, value) -> None:
        record = {"id": 1, "name": "Laptop", "quantity": 3, "dateAdded": "2026-09-18T09:30:00"}
        record[field_name] = value
        inventory_file.path.write_text(json.dumps([record]), encoding="utf-8")
        with pytest.raises(MalformedRecordError, match=f"Record 1 field '{field_name}'"):
            inventory_file.load()

    def test_duplicate_ids_rejected(self, inventory_file: InventoryFile) -> None:
        inventory_file.save([ITEMS[0], ITEMS[0]])
        with pytest.raises(DuplicateKeyError):
            inventory_file.load_store()

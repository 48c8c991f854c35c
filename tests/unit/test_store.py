"""Tests for entity_demos.domain.store."""

from datetime import date, datetime

import pytest

from entity_demos.domain.errors import DuplicateKeyError, InvalidValueError, NotFoundError
from entity_demos.domain.models import ElectronicItem, GroceryItem, InventoryItem, Patient, Student
from entity_demos.domain.store import KeyedEntityStore


def make_item(item_id: int, quantity: int = 10) -> ElectronicItem:
    return ElectronicItem(item_id, f"Item {item_id}", quantity, "Acme", 12)


@pytest.fixture
def store() -> KeyedEntityStore[ElectronicItem]:
    return KeyedEntityStore([make_item(1), make_item(2), make_item(3)])


@pytest.mark.unit
class TestInsert:
    def test_insert_then_get(self) -> None:
        s = KeyedEntityStore()
        item = make_item(7)
        s.insert(item)
        assert s.get_by_id(7) is item

    def test_duplicate_raises_and_leaves_store_unchanged(self, store) -> None:
        original = store.get_by_id(1)
        with pytest.raises(DuplicateKeyError) as exc:
            store.insert(ElectronicItem(1, "Duplicate Laptop", 5, "HP", 18))
        assert exc.value.entity_id == 1
        assert store.get_by_id(1) is original
        assert len(store) == 3

    def test_constructor_rejects_duplicates(self) -> None:
        with pytest.raises(DuplicateKeyError):
            KeyedEntityStore([make_item(1), make_item(1)])


@pytest.mark.unit
class TestLookupAndRemove:
    def test_get_missing_raises_not_found(self, store) -> None:
        with pytest.raises(NotFoundError) as exc:
            store.get_by_id(999)
        assert exc.value.entity_id == 999

    def test_remove(self, store) -> None:
        store.remove(2)
        assert 2 not in store
        assert len(store) == 2

    def test_second_remove_fails(self, store) -> None:
        store.remove(2)
        with pytest.raises(NotFoundError):
            store.remove(2)
        assert len(store) == 2

    def test_remove_missing_leaves_store_unchanged(self, store) -> None:
        with pytest.raises(NotFoundError):
            store.remove(999)
        assert sorted(i.id for i in store.get_all()) == [1, 2, 3]

    def test_find_by_returns_first_match(self) -> None:
        s = KeyedEntityStore([
            Patient(1, "John Smith", 45, "Male"),
            Patient(2, "Sarah Johnson", 32, "Female"),
        ])
        assert s.find_by(lambda p: p.name == "Sarah Johnson").id == 2

    def test_find_by_no_match_returns_none(self, store) -> None:
        assert store.find_by(lambda i: i.quantity > 1000) is None


@pytest.mark.unit
class TestUpdate:
    def test_update_quantity(self, store) -> None:
        updated = store.update_quantity(1, 42)
        assert updated.quantity == 42
        assert store.get_by_id(1).quantity == 42
        assert store.get_by_id(1).brand == "Acme"

    def test_negative_quantity_rejected_and_value_kept(self, store) -> None:
        with pytest.raises(InvalidValueError):
            store.update_quantity(1, -5)
        assert store.get_by_id(1).quantity == 10

    def test_missing_id_checked_before_value(self, store) -> None:
        with pytest.raises(NotFoundError):
            store.update_quantity(999, -5)

    def test_update_other_field(self) -> None:
        s = KeyedEntityStore([GroceryItem(101, "Milk", 50, date(2026, 10, 25))])
        s.update_field(101, "expiry_date", date(2026, 11, 1))
        assert s.get_by_id(101).expiry_date == date(2026, 11, 1)

    def test_identifier_cannot_change(self, store) -> None:
        with pytest.raises(InvalidValueError):
            store.update_field(1, "id", 50)
        assert 1 in store and 50 not in store

    def test_unknown_field_rejected(self, store) -> None:
        with pytest.raises(InvalidValueError):
            store.update_field(1, "colour", "red")

    def test_computed_property_is_not_a_field(self) -> None:
        s = KeyedEntityStore([Student(1, "Alice Smith", 84)])
        with pytest.raises(InvalidValueError, match="no field 'grade'"):
            s.update_field(1, "grade", "B")
        assert s.get_by_id(1).grade == "A"

    def test_wrong_value_type_rejected_and_value_kept(self, store) -> None:
        with pytest.raises(InvalidValueError) as exc:
            store.update_quantity(1, "5")
        assert isinstance(exc.value.__cause__, TypeError)
        assert store.get_by_id(1).quantity == 10

    def test_update_works_on_immutable_records(self) -> None:
        s = KeyedEntityStore([InventoryItem(1, "Laptop", 15, datetime(2026, 9, 18))])
        s.update_quantity(1, 3)
        assert s.get_by_id(1) == InventoryItem(1, "Laptop", 3, datetime(2026, 9, 18))


@pytest.mark.unit
class TestSnapshot:
    def test_get_all_returns_every_entity(self) -> None:
        s = KeyedEntityStore()
        for i in (3, 1, 2):
            s.insert(make_item(i))
        assert {i.id for i in s.get_all()} == {1, 2, 3}
        assert len(s.get_all()) == 3

    def test_mutating_snapshot_does_not_touch_store(self, store) -> None:
        snapshot = store.get_all()
        snapshot.clear()
        snapshot.append(make_item(99))
        assert {i.id for i in store.get_all()} == {1, 2, 3}

    def test_empty_store(self) -> None:
        assert KeyedEntityStore().get_all() == []

    def test_clear(self, store) -> None:
        store.clear()
        assert len(store) == 0

"""
Keyed Entity Store

Generic in-memory collection of entities keyed by their integer id.
"""

from dataclasses import fields, replace
from typing import Callable, Dict, Generic, List, Optional, Protocol, TypeVar

from entity_demos.domain.errors import DuplicateKeyError, NotFoundError, InvalidValueError


class Identified(Protocol):
    """Anything with an integer identifier can be stored."""

    @property
    def id(self) -> int: ...


T = TypeVar("T", bound=Identified)


class KeyedEntityStore(Generic[T]):
    """
    Uniquely-keyed set of entities of one kind.

    Invariants:
    - At most one entity per id.
    - Failed operations leave the store unchanged.
    - Existence is checked before a new value is validated.

    The store does not log; callers report errors.
    """

    def __init__(self, entities: Optional[List[T]] = None):
        self._items: Dict[int, T] = {}
        for entity in entities or []:
            self.insert(entity)

    def insert(self, entity: T) -> None:
        """Insert under entity.id. Raises DuplicateKeyError if taken."""
        if entity.id in self._items:
            raise DuplicateKeyError(entity.id)
        self._items[entity.id] = entity

    def get_by_id(self, entity_id: int) -> T:
        """Return the entity for entity_id. Raises NotFoundError if absent."""
        try:
            return self._items[entity_id]
        except KeyError:
            raise NotFoundError(entity_id) from None

    def remove(self, entity_id: int) -> None:
        """Delete the entity for entity_id. Raises NotFoundError if absent."""
        if entity_id not in self._items:
            raise NotFoundError(entity_id)
        del self._items[entity_id]

    def update_field(self, entity_id: int, field_name: str, value) -> T:
        """
        Replace one field of a stored entity.

        Args:
            entity_id: Identifier of the entity to update
            field_name: Name of the field to replace (not "id")
            value: New value, validated by the entity's own constructor

        Returns:
            The stored entity after the update

        Raises:
            NotFoundError: If entity_id is absent
            InvalidValueError: If the entity rejects the value
        """
        current = self.get_by_id(entity_id)
        if field_name == "id":
            raise InvalidValueError("The identifier of a stored entity cannot be changed.")
        if field_name not in {f.name for f in fields(current)}:
            raise InvalidValueError(
                f"{type(current).__name__} has no field '{field_name}'."
            )

        # Entities are frozen dataclasses: replace() re-runs their validation
        # and the stored record is swapped only once that succeeds.
        try:
            updated = replace(current, **{field_name: value})
        except TypeError as e:
            raise InvalidValueError(
                f"Invalid value for {type(current).__name__}.{field_name}: {value!r}"
            ) from e
        self._items[entity_id] = updated
        return updated

    def update_quantity(self, entity_id: int, quantity: int) -> T:
        """Set the quantity of a stored item."""
        return self.update_field(entity_id, "quantity", quantity)

    def get_all(self) -> List[T]:
        """Snapshot of all entities; mutating the list does not touch the store."""
        return list(self._items.values())

    def find_by(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """First entity satisfying predicate, or None."""
        for entity in self._items.values():
            if predicate(entity):
                return entity
        return None

    def clear(self) -> None:
        """Drop every entity."""
        self._items.clear()

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._items

    def __len__(self) -> int:
        return len(self._items)

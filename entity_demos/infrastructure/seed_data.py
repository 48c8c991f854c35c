"""
Seed Data Loader

Loads the sample records for each demo from YAML files.
Dates are stored as offsets (days_ago, hours_ago, days_ahead) and resolved
against a reference time, so the samples always look recent.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from entity_demos.domain.errors import MalformedRecordError, ResourceAccessError
from entity_demos.domain.models import (
    ElectronicItem,
    GroceryItem,
    InventoryItem,
    Patient,
    Prescription,
    Transaction,
)

logger = logging.getLogger(__name__)


def resolve_offset(entry: dict, now: datetime) -> datetime:
    """Turn days_ago / hours_ago / days_ahead keys into a timestamp."""
    delta = timedelta(
        days=entry.get("days_ahead", 0) - entry.get("days_ago", 0),
        hours=-entry.get("hours_ago", 0),
    )
    return now + delta


@dataclass
class TransactionSeed:
    """A seeded transaction and the processor channel it is routed through."""
    transaction: Transaction
    channel: str

    @classmethod
    def from_dict(cls, data: dict, now: datetime) -> "TransactionSeed":
        try:
            amount = Decimal(str(data["amount"]))
        except InvalidOperation:
            raise MalformedRecordError(f"Invalid amount: {data['amount']!r}") from None
        return cls(
            transaction=Transaction(
                id=data["id"],
                date=resolve_offset(data, now),
                amount=amount,
                category=data["category"],
            ),
            channel=data.get("channel", "bank_transfer"),
        )


@dataclass
class FinanceSeed:
    transactions: List[TransactionSeed] = field(default_factory=list)
    overdraft_probe: Optional[Transaction] = None

    @classmethod
    def from_dict(cls, data: dict, now: datetime) -> "FinanceSeed":
        probe = data.get("overdraft_probe")
        return cls(
            transactions=[TransactionSeed.from_dict(t, now) for t in data.get("transactions", [])],
            overdraft_probe=TransactionSeed.from_dict(probe, now).transaction if probe else None,
        )


@dataclass
class HealthcareSeed:
    patients: List[Patient] = field(default_factory=list)
    prescriptions: List[Prescription] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict, now: datetime) -> "HealthcareSeed":
        return cls(
            patients=[
                Patient(id=p["id"], name=p["name"], age=p["age"], gender=p["gender"])
                for p in data.get("patients", [])
            ],
            prescriptions=[
                Prescription(
                    id=p["id"],
                    patient_id=p["patient_id"],
                    medication_name=p["medication"],
                    date_issued=resolve_offset(p, now),
                )
                for p in data.get("prescriptions", [])
            ],
        )


@dataclass
class WarehouseSeed:
    electronics: List[ElectronicItem] = field(default_factory=list)
    groceries: List[GroceryItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict, now: datetime) -> "WarehouseSeed":
        return cls(
            electronics=[
                ElectronicItem(
                    id=e["id"],
                    name=e["name"],
                    quantity=e["quantity"],
                    brand=e["brand"],
                    warranty_months=e["warranty_months"],
                )
                for e in data.get("electronics", [])
            ],
            groceries=[
                GroceryItem(
                    id=g["id"],
                    name=g["name"],
                    quantity=g["quantity"],
                    expiry_date=resolve_offset(g, now).date(),
                )
                for g in data.get("groceries", [])
            ],
        )


@dataclass
class InventorySeed:
    items: List[InventoryItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict, now: datetime) -> "InventorySeed":
        return cls(
            items=[
                InventoryItem(
                    id=i["id"],
                    name=i["name"],
                    quantity=i["quantity"],
                    date_added=resolve_offset(i, now),
                )
                for i in data.get("items", [])
            ]
        )


class SeedLoader:
    """
    Loader for demo seed files.

    Manages loading and caching of the raw YAML documents; typed seeds are
    rebuilt on every call so their timestamps follow the reference time.
    """

    def __init__(self, seed_dir: Path):
        self.seed_dir = Path(seed_dir)
        self._cache: Dict[str, Dict[str, Any]] = {}

    def load(self, name: str) -> Dict[str, Any]:
        """
        Load a raw seed document.

        Args:
            name: Seed name without extension (e.g., "warehouse")

        Returns:
            Parsed YAML mapping

        Raises:
            ResourceAccessError: If the seed file cannot be read
            MalformedRecordError: If the file is not a YAML mapping
        """
        if name in self._cache:
            return self._cache[name]

        file_path = self.seed_dir / f"{name}.yaml"
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ResourceAccessError(f"Seed file not readable: {file_path} ({e})", str(file_path)) from e
        except yaml.YAMLError as e:
            line = None
            mark = getattr(e, "problem_mark", None)
            if mark is not None:
                line = mark.line + 1
            raise MalformedRecordError(f"Invalid seed file {file_path}: {e}", line) from e

        if not isinstance(data, dict):
            raise MalformedRecordError(f"Seed file {file_path} must contain a mapping")

        logger.debug("Loaded seed %s from %s", name, file_path)
        self._cache[name] = data
        return data

    def _build(self, name: str, seed_cls, now: Optional[datetime]):
        data = self.load(name)
        try:
            return seed_cls.from_dict(data, now or datetime.now())
        except (KeyError, TypeError) as e:
            raise MalformedRecordError(f"Incomplete record in seed '{name}': {e}") from e

    def finance(self, now: Optional[datetime] = None) -> FinanceSeed:
        return self._build("finance", FinanceSeed, now)

    def healthcare(self, now: Optional[datetime] = None) -> HealthcareSeed:
        return self._build("healthcare", HealthcareSeed, now)

    def warehouse(self, now: Optional[datetime] = None) -> WarehouseSeed:
        return self._build("warehouse", WarehouseSeed, now)

    def inventory(self, now: Optional[datetime] = None) -> InventorySeed:
        return self._build("inventory", InventorySeed, now)

    def clear_cache(self) -> None:
        """Clear the seed cache."""
        self._cache.clear()

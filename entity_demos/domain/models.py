"""
Domain Models

Pure business entities with no framework dependencies.
All validation and business rules encapsulated here.
Entities are frozen; stores swap whole records on update.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from entity_demos.domain.errors import InvalidValueError


# =============================================================================
# VALIDATION HELPERS
# =============================================================================

def _require_text(value: str, label: str) -> None:
    if not value or not value.strip():
        raise InvalidValueError(f"{label} cannot be empty")


def _require_non_negative_quantity(quantity: int) -> None:
    if quantity < 0:
        raise InvalidValueError(
            f"Quantity cannot be negative. Attempted to set quantity to {quantity}."
        )


# =============================================================================
# FINANCE
# =============================================================================

class AccountKind:
    """Closed set of account kinds."""
    CHECKING = "checking"
    SAVINGS = "savings"

    @classmethod
    def all(cls) -> tuple[str, ...]:
        return (cls.CHECKING, cls.SAVINGS)


@dataclass(frozen=True, slots=True)
class Transaction:
    """A single debit against an account."""
    id: int
    date: datetime
    amount: Decimal
    category: str

    def __post_init__(self):
        if self.amount <= 0:
            raise InvalidValueError(f"Transaction amount must be positive, got {self.amount}")
        _require_text(self.category, "Category")


@dataclass(slots=True)
class Account:
    """
    Bank account as a tagged variant.

    Behaviour per kind lives in `apply_transaction`; there are no subclasses.
    """
    account_number: str
    kind: str
    balance: Decimal

    def __post_init__(self):
        _require_text(self.account_number, "Account number")
        if self.kind not in AccountKind.all():
            raise InvalidValueError(f"Unknown account kind: {self.kind}")

    @classmethod
    def savings(cls, account_number: str, opening_balance: Decimal) -> "Account":
        return cls(account_number, AccountKind.SAVINGS, opening_balance)

    @classmethod
    def checking(cls, account_number: str, opening_balance: Decimal) -> "Account":
        return cls(account_number, AccountKind.CHECKING, opening_balance)


# =============================================================================
# HEALTHCARE
# =============================================================================

@dataclass(frozen=True, slots=True)
class Patient:
    id: int
    name: str
    age: int
    gender: str

    def __post_init__(self):
        _require_text(self.name, "Patient name")
        if self.age < 0:
            raise InvalidValueError(f"Age cannot be negative, got {self.age}")

    def __str__(self) -> str:
        return f"Patient ID: {self.id}, Name: {self.name}, Age: {self.age}, Gender: {self.gender}"


@dataclass(frozen=True, slots=True)
class Prescription:
    """
    A medication issued to a patient.

    NOTE: patient_id is not checked against any patient store.
    """
    id: int
    patient_id: int
    medication_name: str
    date_issued: datetime

    def __post_init__(self):
        _require_text(self.medication_name, "Medication name")

    def __str__(self) -> str:
        return (
            f"Prescription ID: {self.id}, Patient ID: {self.patient_id}, "
            f"Medication: {self.medication_name}, Date Issued: {self.date_issued:%Y-%m-%d}"
        )


# =============================================================================
# WAREHOUSE
# =============================================================================

@dataclass(frozen=True, slots=True)
class ElectronicItem:
    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int

    def __post_init__(self):
        _require_text(self.name, "Item name")
        _require_non_negative_quantity(self.quantity)
        if self.warranty_months < 0:
            raise InvalidValueError(f"Warranty cannot be negative, got {self.warranty_months}")

    def __str__(self) -> str:
        return (
            f"Electronic Item [ID: {self.id}, Name: {self.name}, Quantity: {self.quantity}, "
            f"Brand: {self.brand}, Warranty: {self.warranty_months} months]"
        )


@dataclass(frozen=True, slots=True)
class GroceryItem:
    id: int
    name: str
    quantity: int
    expiry_date: date

    def __post_init__(self):
        _require_text(self.name, "Item name")
        _require_non_negative_quantity(self.quantity)

    def __str__(self) -> str:
        return (
            f"Grocery Item [ID: {self.id}, Name: {self.name}, Quantity: {self.quantity}, "
            f"Expiry Date: {self.expiry_date:%Y-%m-%d}]"
        )


# =============================================================================
# INVENTORY
# =============================================================================

@dataclass(frozen=True, slots=True)
class InventoryItem:
    """Immutable inventory record persisted to the inventory file."""
    id: int
    name: str
    quantity: int
    date_added: datetime

    def __post_init__(self):
        _require_text(self.name, "Item name")
        _require_non_negative_quantity(self.quantity)


# =============================================================================
# STUDENT GRADING
# =============================================================================

MIN_SCORE = 0
MAX_SCORE = 100

# (lower bound, grade), highest first
GRADE_BANDS = (
    (80, "A"),
    (70, "B"),
    (60, "C"),
    (50, "D"),
)


def grade_for_score(score: int) -> str:
    """Letter grade for a 0-100 score."""
    for lower, grade in GRADE_BANDS:
        if score >= lower:
            return grade
    return "F"


@dataclass(frozen=True, slots=True)
class Student:
    id: int
    full_name: str
    score: int

    def __post_init__(self):
        _require_text(self.full_name, "Student name")
        if not MIN_SCORE <= self.score <= MAX_SCORE:
            raise InvalidValueError(
                f"Score {self.score} is out of valid range ({MIN_SCORE}-{MAX_SCORE})."
            )

    @property
    def grade(self) -> str:
        return grade_for_score(self.score)

"""
Domain Services

Stateless operations over domain entities: payment processing, account
debits and prescription grouping.
"""

from abc import ABC, abstractmethod
from collections import defaultdict
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List

from entity_demos.domain.models import Account, AccountKind, Prescription, Transaction


# =============================================================================
# TRANSACTION PROCESSORS
# =============================================================================

class TransactionProcessor(ABC):
    """Payment channel a transaction is routed through."""

    label: str = ""

    @abstractmethod
    def process(self, transaction: Transaction) -> str:
        """Process a transaction and return the channel's receipt line."""
        pass


class _LabelledProcessor(TransactionProcessor):
    def process(self, transaction: Transaction) -> str:
        return f"{self.label}: Processing ${transaction.amount:.2f} for {transaction.category}"


class BankTransferProcessor(_LabelledProcessor):
    label = "Bank Transfer"


class MobileMoneyProcessor(_LabelledProcessor):
    label = "Mobile Money"


class CryptoWalletProcessor(_LabelledProcessor):
    label = "Crypto Wallet"


# =============================================================================
# ACCOUNTS
# =============================================================================

@dataclass(frozen=True)
class ApplyOutcome:
    """Result of debiting an account."""
    applied: bool
    balance: Decimal
    message: str


def apply_transaction(account: Account, transaction: Transaction) -> ApplyOutcome:
    """
    Debit an account according to its kind.

    Checking accounts always debit (and may go negative). Savings accounts
    refuse any amount above the current balance and stay unchanged.
    """
    match account.kind:
        case AccountKind.SAVINGS:
            if transaction.amount > account.balance:
                return ApplyOutcome(False, account.balance, "Insufficient funds")
            account.balance -= transaction.amount
            return ApplyOutcome(
                True, account.balance,
                f"Transaction applied. Updated balance: ${account.balance:.2f}"
            )
        case AccountKind.CHECKING:
            account.balance -= transaction.amount
            return ApplyOutcome(
                True, account.balance,
                f"Transaction applied. New balance: ${account.balance:.2f}"
            )
        case _:
            raise ValueError(f"Unhandled account kind: {account.kind}")


# =============================================================================
# PRESCRIPTIONS
# =============================================================================

def group_prescriptions_by_patient(
    prescriptions: Iterable[Prescription]
) -> Dict[int, List[Prescription]]:
    """Map patient_id -> prescriptions, preserving input order per patient."""
    grouped: Dict[int, List[Prescription]] = defaultdict(list)
    for prescription in prescriptions:
        grouped[prescription.patient_id].append(prescription)
    return dict(grouped)

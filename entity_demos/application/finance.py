"""
Finance Demo

Routes seeded transactions through payment processors and debits them from
a savings account, then shows the savings account refusing an overdraft.
"""

import logging
from typing import Dict, Optional

from entity_demos.application.console import print_header, print_section, report_failure
from entity_demos.domain.errors import attempt
from entity_demos.domain.models import Account, Transaction
from entity_demos.domain.services import (
    ApplyOutcome,
    BankTransferProcessor,
    CryptoWalletProcessor,
    MobileMoneyProcessor,
    TransactionProcessor,
    apply_transaction,
)
from entity_demos.domain.store import KeyedEntityStore
from entity_demos.infrastructure.config import AppConfig, get_config
from entity_demos.infrastructure.seed_data import SeedLoader

logger = logging.getLogger(__name__)

PROCESSORS: Dict[str, TransactionProcessor] = {
    "bank_transfer": BankTransferProcessor(),
    "mobile_money": MobileMoneyProcessor(),
    "crypto_wallet": CryptoWalletProcessor(),
}


class FinanceApp:
    """Savings account walkthrough."""

    def __init__(self, config: Optional[AppConfig] = None, seeds: Optional[SeedLoader] = None):
        self.config = config or get_config()
        self.seeds = seeds or SeedLoader(self.config.seed_dir)
        self.transactions: KeyedEntityStore[Transaction] = KeyedEntityStore()
        self.account = Account.savings(
            self.config.finance.savings_account_number,
            self.config.finance.opening_balance,
        )

    def process(self, transaction: Transaction, channel: str) -> ApplyOutcome:
        """Send a transaction through its channel, debit the account and record it."""
        processor = PROCESSORS.get(channel)
        if processor is None:
            raise ValueError(f"Unknown payment channel: {channel}")

        print(f"Transaction {transaction.id} - Date: {transaction.date:%Y-%m-%d %H:%M}")
        print(processor.process(transaction))
        outcome = apply_transaction(self.account, transaction)
        print(outcome.message)

        result = attempt(self.transactions.insert, transaction)
        if not result.ok:
            report_failure("recording transaction", result)
        logger.debug("Transaction %d via %s applied=%s", transaction.id, channel, outcome.applied)
        return outcome

    def run(self) -> Account:
        print_header("FINANCE MANAGEMENT SYSTEM")
        print(f"Created Savings Account: {self.account.account_number}")
        print(f"Initial Balance: ${self.account.balance:.2f}")

        seed = self.seeds.finance()

        print_section("Processing Transactions")
        for entry in seed.transactions:
            self.process(entry.transaction, entry.channel)
            print()

        print_section("Transaction Summary")
        print(f"Total transactions processed: {len(self.transactions)}")
        print(f"Final account balance: ${self.account.balance:.2f}")

        if seed.overdraft_probe is not None:
            probe = seed.overdraft_probe
            print_section("Testing Insufficient Funds")
            print(f"Attempting transaction of ${probe.amount:.2f}")
            print(apply_transaction(self.account, probe).message)

        return self.account

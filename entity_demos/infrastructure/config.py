"""
Configuration Module

Centralized configuration management for the demo programs.
"""

import logging
import os
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from entity_demos.domain.errors import InvalidValueError

# Load environment variables
load_dotenv()

PACKAGED_SEED_DIR = Path(__file__).resolve().parent.parent / "data"


@dataclass
class InventoryConfig:
    """Inventory persistence configuration."""
    data_file: Path = field(default_factory=lambda: Path("inventory_data.json"))

    @classmethod
    def from_env(cls) -> "InventoryConfig":
        return cls(
            data_file=Path(os.getenv("INVENTORY_FILE", "inventory_data.json"))
        )


@dataclass
class GradingConfig:
    """Student grading file locations."""
    input_file: Path = field(default_factory=lambda: Path("students.txt"))
    report_file: Path = field(default_factory=lambda: Path("student_report.txt"))

    @classmethod
    def from_env(cls) -> "GradingConfig":
        return cls(
            input_file=Path(os.getenv("GRADING_INPUT", "students.txt")),
            report_file=Path(os.getenv("GRADING_REPORT", "student_report.txt"))
        )


@dataclass
class FinanceConfig:
    """Finance demo configuration."""
    savings_account_number: str = "SAV-001"
    opening_balance: Decimal = Decimal("1000.00")

    @classmethod
    def from_env(cls) -> "FinanceConfig":
        raw_balance = os.getenv("SAVINGS_OPENING_BALANCE", "1000.00")
        try:
            opening_balance = Decimal(raw_balance)
        except InvalidOperation:
            raise InvalidValueError(
                f"SAVINGS_OPENING_BALANCE must be a decimal amount, got {raw_balance!r}"
            ) from None
        return cls(
            savings_account_number=os.getenv("SAVINGS_ACCOUNT_NUMBER", "SAV-001"),
            opening_balance=opening_balance
        )


@dataclass
class AppConfig:
    """Main application configuration."""
    debug: bool = False
    log_level: str = "WARNING"
    seed_dir: Path = PACKAGED_SEED_DIR

    # Sub-configurations
    inventory: InventoryConfig = field(default_factory=InventoryConfig.from_env)
    grading: GradingConfig = field(default_factory=GradingConfig.from_env)
    finance: FinanceConfig = field(default_factory=FinanceConfig.from_env)

    @classmethod
    def from_env(cls) -> "AppConfig":
        seed_dir = os.getenv("SEED_DIR")
        return cls(
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
            seed_dir=Path(seed_dir) if seed_dir else PACKAGED_SEED_DIR,
            inventory=InventoryConfig.from_env(),
            grading=GradingConfig.from_env(),
            finance=FinanceConfig.from_env()
        )

    @property
    def effective_log_level(self) -> int:
        """Numeric logging level; DEBUG wins over LOG_LEVEL."""
        if self.debug:
            return logging.DEBUG
        level = getattr(logging, self.log_level, None)
        return level if isinstance(level, int) else logging.WARNING


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reload_config() -> AppConfig:
    """Reload configuration from environment."""
    global _config
    _config = AppConfig.from_env()
    return _config


def configure_logging(config: Optional[AppConfig] = None) -> None:
    """Route library logging to stderr at the configured level."""
    config = config or get_config()
    logging.basicConfig(
        level=config.effective_log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

"""
CLI Interface

Command-line entry point for the demo programs.
"""

import argparse
import sys
from typing import Callable, Dict, List, Optional

from entity_demos.application.console import print_header
from entity_demos.application.finance import FinanceApp
from entity_demos.application.grading import StudentResultProcessor
from entity_demos.application.healthcare import HealthSystemApp
from entity_demos.application.inventory import InventoryApp
from entity_demos.application.warehouse import WarehouseManager
from entity_demos.domain.errors import DemoError
from entity_demos.infrastructure.config import AppConfig, configure_logging, get_config


def show_status(config: AppConfig) -> None:
    """Display current configuration."""
    print_header("CONFIGURATION")
    print(f"Log level:       {config.log_level}{' (DEBUG forced)' if config.debug else ''}")
    print(f"Seed directory:  {config.seed_dir}")
    print(f"Inventory file:  {config.inventory.data_file}")
    print(f"Grading input:   {config.grading.input_file}")
    print(f"Grading report:  {config.grading.report_file}")
    print(f"Savings account: {config.finance.savings_account_number} "
          f"(opening ${config.finance.opening_balance:.2f})")
    print()
    print("Override any of these with environment variables or a .env file.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="entity-demos",
        description="Console demos built on a generic keyed entity store",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  entity-demos warehouse
  entity-demos inventory --file /tmp/inventory.json
  entity-demos grading --input students.txt --report report.txt
  entity-demos all
        """
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    sub.add_parser("finance", help="Savings account and payment processors")
    sub.add_parser("healthcare", help="Patients and prescriptions")
    sub.add_parser("warehouse", help="Electronics and groceries with error handling")

    inventory = sub.add_parser("inventory", help="Save and reload inventory from a JSON file")
    inventory.add_argument("--file", "-f", help="Inventory file (default: INVENTORY_FILE or inventory_data.json)")

    grading = sub.add_parser("grading", help="Grade students from a text file")
    grading.add_argument("--input", "-i", help="Input file of id,name,score lines")
    grading.add_argument("--report", "-r", help="Report output file")

    sub.add_parser("all", help="Run finance, healthcare, warehouse and inventory")
    sub.add_parser("status", help="Show current configuration")
    return parser


def run_command(args: argparse.Namespace, config: AppConfig) -> None:
    runners: Dict[str, Callable[[], object]] = {
        "finance": lambda: FinanceApp(config).run(),
        "healthcare": lambda: HealthSystemApp(config).run(),
        "warehouse": lambda: WarehouseManager(config).run(),
        "inventory": lambda: InventoryApp(config, data_file=getattr(args, "file", None)).run(),
        "grading": lambda: StudentResultProcessor(
            config,
            input_file=getattr(args, "input", None),
            report_file=getattr(args, "report", None),
        ).run(),
        "status": lambda: show_status(config),
    }

    if args.command == "all":
        for name in ("finance", "healthcare", "warehouse", "inventory"):
            runners[name]()
    else:
        runners[args.command]()


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        config = get_config()
        configure_logging(config)
        run_command(args, config)
    except DemoError as e:
        print(f"Error ({e.kind}): {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

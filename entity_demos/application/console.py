"""Console formatting shared by the demo programs."""

from entity_demos.domain.errors import OperationResult


def print_header(title: str) -> None:
    """Print formatted header."""
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)


def print_section(title: str) -> None:
    """Print formatted section header."""
    print(f"\n--- {title} ---")


def report_failure(action: str, result: OperationResult) -> None:
    """Print a failed operation with its error kind."""
    print(f"  [{result.kind}] Error {action}: {result.error}")

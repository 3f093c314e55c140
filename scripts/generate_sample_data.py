#!/usr/bin/env python3
"""Generate a synthetic transactions file.

The output is a JSON array in the same shape the export script reads, so it
can be used to try the queries against larger datasets.
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from txn_analytics.generators import TransactionGenerator
from txn_analytics.logging import get_logger, setup_logging
from txn_analytics.sinks.serialization import serialize_value

logger = get_logger(__name__)


def save_json(data: list, output_file: Path) -> None:
    """Save data to JSON file."""
    output_file.parent.mkdir(parents=True, exist_ok=True)
    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(serialize_value(data), f, indent=2, ensure_ascii=False)
    logger.info("Saved %d transactions to %s", len(data), output_file)


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Generate a sample transactions file")
    parser.add_argument(
        "--cases",
        type=int,
        default=50,
        help="Number of cases (distinct mtn values) to generate (default: 50)",
    )
    parser.add_argument(
        "--clients",
        type=int,
        default=12,
        help="Size of the client pool (default: 12)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("local/transactions.json"),
        help="Output file (default: local/transactions.json)",
    )
    args = parser.parse_args()

    setup_logging()

    generator = TransactionGenerator(seed=args.seed, num_clients=args.clients)
    transactions = list(generator.generate_batch(args.cases))
    save_json(transactions, args.output)


if __name__ == "__main__":
    main()

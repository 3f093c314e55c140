#!/usr/bin/env python3
"""Run every transaction query and write each result to its own JSON file.

Usage:
    python scripts/export_results.py --input data/transactions.json --output-dir results
    python scripts/export_results.py --console --sender "Tom Shelby" --client "Billy Kimber"

Defaults come from the environment (TRANSACTIONS_FILE, OUTPUT_DIR, PRETTY_JSON,
SENDER_FULL_NAME, CLIENT_FULL_NAME, LOG_LEVEL, LOG_FORMAT).

Exit codes: 0 all results written, 1 a result could not be written,
2 the transactions file could not be loaded, 3 invalid configuration.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from txn_analytics.config import AnalyticsConfig, QueryConfig
from txn_analytics.exceptions import ConfigurationError, LoaderError, SinkError
from txn_analytics.export import export_results
from txn_analytics.loaders import load_transactions
from txn_analytics.logging import LOG_FORMATS, get_logger, setup_logging
from txn_analytics.sinks import ConsoleSink, JsonFileSink
from txn_analytics.store import TransactionAggregator

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_SINK_FAILURE = 1
EXIT_LOAD_FAILURE = 2
EXIT_CONFIG_FAILURE = 3


def parse_args(config: AnalyticsConfig, argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Answer the transaction queries and export results as JSON"
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=config.input.transactions_file,
        help=f"Transactions JSON file (default: {config.input.transactions_file})",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=config.output.json_output_dir,
        help=f"Directory for result files (default: {config.output.json_output_dir})",
    )
    parser.add_argument(
        "--sender",
        type=str,
        default=config.queries.sender_full_name,
        help="Sender name for getTotalTransactionAmountSentBy",
    )
    parser.add_argument(
        "--client",
        type=str,
        default=config.queries.client_full_name,
        help="Client name for hasOpenComplianceIssues",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        default=config.output.pretty_json,
        help="Pretty-print JSON output",
    )
    parser.add_argument(
        "--console",
        action="store_true",
        help="Print results to stdout instead of writing files",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.log_level,
        help=f"Log level (default: {config.log_level})",
    )
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=config.log_format,
        help=f"Log format (default: {config.log_format})",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    try:
        config = AnalyticsConfig.from_env()
    except ConfigurationError as exc:
        setup_logging()
        logger.error("%s", exc)
        return EXIT_CONFIG_FAILURE

    args = parse_args(config, argv)
    setup_logging(level=args.log_level, format_type=args.log_format)

    try:
        transactions = load_transactions(args.input)
    except LoaderError as exc:
        logger.error("%s", exc)
        return EXIT_LOAD_FAILURE

    aggregator = TransactionAggregator(transactions)
    logger.info("Dataset summary: %s", aggregator.summary())

    if args.console:
        sink = ConsoleSink(pretty=True)
    else:
        try:
            sink = JsonFileSink(args.output_dir, pretty=args.pretty)
        except SinkError as exc:
            logger.error("%s", exc)
            return EXIT_SINK_FAILURE

    queries = QueryConfig(sender_full_name=args.sender, client_full_name=args.client)
    report = export_results(aggregator, sink, queries)
    sink.close()

    return EXIT_OK if report.ok else EXIT_SINK_FAILURE


if __name__ == "__main__":
    sys.exit(main())

"""Entry point for the quoting core.

Runs a single quoting decision from files and prints the resulting plan.

Usage:
    python -m deriv_maker.main --config config/maker.yaml --snapshot state.yaml
    deriv-maker --config config/maker.yaml --dry-run
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime

from deriv_maker.core.config import MakerConfig, load_config
from deriv_maker.core.snapshot import load_inputs
from deriv_maker.domain.errors import TradingError
from deriv_maker.domain.market_data import as_utc
from deriv_maker.strategy.factory import create_quoting_engine


def setup_logging(level: str, log_file: str | None = None) -> None:
    """Configure logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file to write logs to
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        handlers=handlers,
    )


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp, treating a missing offset as UTC."""
    return as_utc(datetime.fromisoformat(value))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Derivatives quote ladder decision",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--config",
        "-c",
        type=str,
        help="Path to configuration file",
    )

    parser.add_argument(
        "--snapshot",
        "-s",
        type=str,
        help="Path to YAML document with market, deposit, position and open orders",
    )

    parser.add_argument(
        "--now",
        type=parse_timestamp,
        help="Current time (ISO 8601, UTC if no offset) for the market data staleness check",
    )

    parser.add_argument(
        "--log-level",
        "-l",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Log file path",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Load config and validate without deciding",
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> MakerConfig:
    """Build configuration from file and command line args.

    Args:
        args: Parsed command line arguments

    Returns:
        Merged configuration
    """
    config = load_config(args.config)

    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.log_file:
        overrides["log_file"] = args.log_file

    return config.model_copy(update=overrides) if overrides else config


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = build_config(args)
    except TradingError as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_level, config.log_file)

    logger = logging.getLogger(__name__)
    logger.info(f"Market: {config.market.market_id}")
    logger.info(f"Subaccount: {config.market.subaccount_id}")

    if args.dry_run:
        logger.info("Dry run - configuration valid")
        return 0

    if not args.snapshot:
        logger.error("No snapshot specified. Use --snapshot.")
        return 1

    engine = create_quoting_engine(config)

    try:
        inputs = load_inputs(args.snapshot, config.market.market_id)
        plan = engine.get_action(
            snapshot=inputs.snapshot,
            resting_orders=inputs.open_orders,
            deposit=inputs.deposit,
            position=inputs.position,
            now=args.now,
        )
    except TradingError as e:
        logger.error(f"Decision failed: {e}")
        return 1

    print(json.dumps(plan.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())

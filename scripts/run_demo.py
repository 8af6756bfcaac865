#!/usr/bin/env python3
"""Run the cooperative demo.

Seeds a cooperative with the demo members (and optionally Faker-generated
ones), executes a couple of withdrawals, credits interest to savings
accounts, prints the full report and shows that duplicate accounts are
rejected. With ``--kafka`` every executed transaction is also published as
an event.
"""

import argparse
import logging
import sys
from decimal import Decimal
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from coop_core.config import CoopConfig
from coop_core.exceptions import ConfigurationError, CoopError, DuplicateAccountError
from coop_core.logging import setup_logging
from coop_core.models import SavingsAccount, TransactionType, make_transaction, to_amount
from coop_core.reporting import build_report
from coop_core.scenarios import CooperativeSeedScenario
from coop_core.sinks import ConsoleSink, KafkaSink
from coop_core.store import Cooperative

logger = logging.getLogger("coop_core.demo")

# (account number, amount) pairs withdrawn after seeding
DEMO_WITHDRAWALS = [
    ("AH-1002-1", Decimal("50000")),
    ("AH-1001-1", Decimal("100000")),
]


def _decimal_arg(value: str) -> Decimal:
    try:
        return to_amount(value, "threshold")
    except CoopError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def run_withdrawals(cooperative: Cooperative, kafka: KafkaSink | None) -> int:
    """Execute the demo withdrawals; returns how many succeeded."""
    executed = 0
    for account_number, amount in DEMO_WITHDRAWALS:
        account = cooperative.find_account_by_number(account_number)
        if account is None:
            logger.warning("Account not found: %s", account_number)
            continue
        try:
            record = make_transaction(TransactionType.WITHDRAWAL, account, amount).execute()
        except CoopError as exc:
            logger.warning("Withdrawal from %s failed: %s", account_number, exc)
            continue
        executed += 1
        if kafka is not None:
            kafka.send_transaction(record)
    return executed


def check_duplicate_rejection(cooperative: Cooperative) -> bool:
    """Try to give member 1002 a second AH-1002-1; True if it was rejected."""
    member = cooperative.find_member_by_id("1002")
    if member is None:
        return False
    try:
        member.add_account(SavingsAccount("AH-1002-1", Decimal("0"), Decimal("0.01")))
    except DuplicateAccountError as exc:
        logger.info("Duplicate account prevented: %s", exc)
        return True
    return False


def load_config() -> CoopConfig:
    """Read the environment configuration, exiting with status 1 if it is invalid."""
    try:
        return CoopConfig.from_env()
    except ConfigurationError as exc:
        setup_logging()
        logger.error("Invalid configuration: %s", exc)
        sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    config = load_config()

    parser = argparse.ArgumentParser(description="Run the cooperative demo")
    parser.add_argument("--seed", type=int, default=config.seed, help="Random seed")
    parser.add_argument(
        "--members",
        type=int,
        default=config.seed_data.num_members,
        help="Number of extra Faker-generated members (default: 0)",
    )
    parser.add_argument(
        "--threshold",
        type=_decimal_arg,
        default=config.report.balance_threshold,
        help="List accounts with a balance above this value (default: 500000)",
    )
    parser.add_argument("--log-level", default=config.log_level, help="Log level")
    parser.add_argument(
        "--log-format", choices=["standard", "json"], default="standard", help="Log format"
    )
    parser.add_argument(
        "--kafka",
        action="store_true",
        help=f"Publish transaction events to {config.kafka.bootstrap_servers}",
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, format_type=args.log_format)

    config.seed = args.seed
    config.seed_data.num_members = args.members

    kafka = KafkaSink(config.kafka) if args.kafka else None
    console = ConsoleSink(pretty=config.report.pretty, max_records=config.report.max_records)

    try:
        cooperative = CooperativeSeedScenario(config).generate()
        run_withdrawals(cooperative, kafka)
        cooperative.apply_interest_to_savings_accounts()

        console.write_report(build_report(cooperative, args.threshold))
        console.write_batch("members", list(cooperative.list_members()))

        if not check_duplicate_rejection(cooperative):
            logger.warning("Duplicate account check did not trigger")
    except CoopError:
        logger.exception("Demo failed")
        sys.exit(1)
    finally:
        if kafka is not None:
            kafka.close()
        console.close()


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Ledger journal entry point.

Ensures the ledger exists, waits for it to become ACTIVE, then records and
reads back a person document in the People table.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from botocore.exceptions import BotoCoreError
from pydantic import ValidationError

from ledger_journal.common.core.request_context import generate_run_id

from . import clients
from .config import JournalConfig
from .core.exceptions import JournalError, LedgerNotReadyError
from .core.logging_config import setup_logging
from .core.readiness import ReadinessPoller
from .core.transaction import TransactionalExecutor, TransactionRunner
from .models.ledger import LedgerState
from .models.person import Person
from .services import people
from .services.ledger_provisioner import LedgerProvisioner
from .services.qldb_executor import QldbTransactionExecutor

logger = logging.getLogger("journal.main")


async def run_journal(
    config: JournalConfig,
    provisioner: LedgerProvisioner,
    executor: TransactionalExecutor,
    person: Person,
    new_last_name: Optional[str] = None,
    include_history: bool = False,
    sleep=asyncio.sleep,
) -> Dict[str, Any]:
    """
    Run the journal flow and return a report.

    Raises:
        ProvisioningError: describe/create failed
        LedgerNotReadyError: the ledger did not become ACTIVE in time
        TransactionFailure: a transaction failed after the driver's retries
    """
    ledger_name = config.LEDGER_NAME

    await provisioner.ensure_ledger(ledger_name)

    poller = ReadinessPoller(
        provisioner.get_state,
        max_attempts=config.READY_MAX_ATTEMPTS,
        delay=config.READY_POLL_INTERVAL,
        sleep=sleep,
    )
    outcome = await poller.wait_for(ledger_name, LedgerState.ACTIVE)
    if outcome.timed_out:
        raise LedgerNotReadyError(ledger_name, outcome)

    runner = TransactionRunner(executor)
    schema_created = await runner.execute(people.ensure_schema)
    documents: List[Dict[str, Any]] = await runner.execute(
        people.journal_unit_of_work(person, new_last_name)
    )
    logger.info(f"Fetched {len(documents)} document(s) for {person.first_name}")

    report: Dict[str, Any] = {
        "ledger": ledger_name,
        "schema_created": schema_created,
        "documents": documents,
    }
    if include_history:
        report["history"] = await runner.execute(people.history_unit_of_work(person.first_name))
    return report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Record and read back a person document in a QLDB ledger"
    )
    parser.add_argument("--ledger-name", type=str, help="Ledger name (default: LEDGER_NAME)")
    parser.add_argument("--region", type=str, help="AWS region (default: AWS_REGION)")
    parser.add_argument("--first-name", type=str, default="John", help="Person first name")
    parser.add_argument("--last-name", type=str, default="Doe", help="Person last name")
    parser.add_argument("--age", type=int, default=42, help="Person age")
    parser.add_argument("--new-last-name", type=str, help="Update the person's last name")
    parser.add_argument("--history", action="store_true", help="Include document history")
    parser.add_argument("--max-attempts", type=int, help="Ledger readiness poll attempts")
    parser.add_argument("--poll-interval", type=float, help="Seconds between readiness polls")
    return parser


def apply_overrides(config: JournalConfig, args: argparse.Namespace) -> JournalConfig:
    """Return a copy of config with the CLI flags that were given applied."""
    overrides = {
        "LEDGER_NAME": args.ledger_name,
        "AWS_REGION": args.region,
        "READY_MAX_ATTEMPTS": args.max_attempts,
        "READY_POLL_INTERVAL": args.poll_interval,
    }
    update = {k: v for k, v in overrides.items() if v is not None}
    return JournalConfig.model_validate({**config.model_dump(), **update})


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    from .config import config as base_config

    try:
        config = apply_overrides(base_config, args)
        person = Person(first_name=args.first_name, last_name=args.last_name, age=args.age)
    except ValidationError as e:
        parser.error(str(e))

    setup_logging(config.LOG_CONFIG_PATH)
    run_id = generate_run_id()
    logger.info(f"Starting journal run {run_id} for ledger {config.LEDGER_NAME}")

    executor: Optional[QldbTransactionExecutor] = None
    try:
        provisioner = LedgerProvisioner(
            clients.create_qldb_client(config),
            permissions_mode=config.PERMISSIONS_MODE,
            deletion_protection=config.DELETION_PROTECTION,
        )
        executor = QldbTransactionExecutor(clients.create_qldb_driver(config))
        report = asyncio.run(
            run_journal(
                config,
                provisioner,
                executor,
                person,
                new_last_name=args.new_last_name,
                include_history=args.history,
            )
        )
    except JournalError as e:
        logger.error(f"Journal run failed: {e}", exc_info=True)
        return 1
    except BotoCoreError as e:
        # e.g. UnknownServiceError when botocore ships no qldb models
        logger.error(f"Could not create QLDB clients: {e}", exc_info=True)
        return 1
    finally:
        if executor is not None:
            executor.close()

    print(json.dumps(report, indent=2, ensure_ascii=False, default=str))
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()

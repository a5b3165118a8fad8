import logging

import boto3
from botocore.config import Config
from pyqldb.config.retry_config import RetryConfig
from pyqldb.driver.qldb_driver import QldbDriver

from .config import JournalConfig

logger = logging.getLogger("journal.clients")


def create_qldb_client(config: JournalConfig):
    """Create the control-plane client (CreateLedger / DescribeLedger)."""
    return boto3.client(
        "qldb",
        region_name=config.AWS_REGION,
        endpoint_url=config.QLDB_ENDPOINT_URL or None,
        verify=config.VERIFY_SSL,
    )


def create_qldb_driver(config: JournalConfig) -> QldbDriver:
    """
    Create the session driver for transactions.

    The HTTP connection pool is sized to the number of concurrent
    transactions; the driver rejects a pool smaller than that.
    """
    logger.info(
        f"Creating QLDB driver for {config.LEDGER_NAME} "
        f"(max transactions: {config.MAX_CONCURRENT_TRANSACTIONS}, "
        f"retry limit: {config.RETRY_LIMIT})"
    )
    return QldbDriver(
        ledger_name=config.LEDGER_NAME,
        region_name=config.AWS_REGION,
        endpoint_url=config.QLDB_SESSION_ENDPOINT_URL or None,
        verify=config.VERIFY_SSL,
        config=Config(max_pool_connections=config.MAX_CONCURRENT_TRANSACTIONS),
        max_concurrent_transactions=config.MAX_CONCURRENT_TRANSACTIONS,
        retry_config=RetryConfig(retry_limit=config.RETRY_LIMIT),
    )

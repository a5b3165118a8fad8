import asyncio
import logging
from typing import Any

from ..core.transaction import UnitOfWork

logger = logging.getLogger("journal.qldb_executor")


class QldbTransactionExecutor:
    """
    Transactional executor backed by pyqldb's QldbDriver.

    execute_lambda starts a transaction, runs the unit of work, commits, and
    retries the whole unit of work on OCC conflicts or retriable errors using
    the RetryConfig the driver was built with. The blocking driver call runs
    in a worker thread.
    """

    def __init__(self, driver: Any):
        self.driver = driver

    async def run(self, unit_of_work: UnitOfWork) -> Any:
        return await asyncio.to_thread(self.driver.execute_lambda, unit_of_work)

    def close(self) -> None:
        """Close the driver and release its pooled sessions."""
        logger.debug("Closing QLDB driver")
        self.driver.close()

import logging
from typing import Any, Callable, Protocol, TypeVar

from .exceptions import TransactionFailure

logger = logging.getLogger("journal.transaction")

T = TypeVar("T")

# A unit of work receives the transaction-scoped statement executor.
# It may be invoked more than once when the executor retries, so it must be
# safe to re-run.
UnitOfWork = Callable[[Any], T]


class TransactionalExecutor(Protocol):
    async def run(self, unit_of_work: UnitOfWork) -> Any: ...


class TransactionRunner:
    """
    Runs a unit of work through a transactional executor.

    Retries, backoff and commit/abort are the executor's job; the runner only
    passes the result through or wraps the terminal failure.
    """

    def __init__(self, executor: TransactionalExecutor):
        self.executor = executor

    async def execute(self, unit_of_work: UnitOfWork) -> Any:
        name = getattr(unit_of_work, "__name__", repr(unit_of_work))
        logger.debug(f"Executing unit of work: {name}")
        try:
            return await self.executor.run(unit_of_work)
        except Exception as e:
            logger.error(f"Transaction failed for {name}: {e}")
            raise TransactionFailure(e) from e

import asyncio
import logging
from typing import Any, Awaitable, Callable

from ..models.ledger import PollOutcome

logger = logging.getLogger("journal.readiness")

StatusQuery = Callable[[str], Awaitable[Any]]
Sleep = Callable[[float], Awaitable[Any]]


class ReadinessPoller:
    """
    Polls a status provider until a resource reaches a target status.

    The poller only observes the resource. A failing status query propagates
    immediately; running out of attempts is reported in the returned
    PollOutcome (timed_out=True) and left to the caller to act on.
    """

    def __init__(
        self,
        query: StatusQuery,
        max_attempts: int = 30,
        delay: float = 10.0,
        sleep: Sleep = asyncio.sleep,
    ):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        self.query = query
        self.max_attempts = max_attempts
        self.delay = delay
        self.sleep = sleep

    async def wait_for(self, resource_id: str, target: Any) -> PollOutcome:
        """
        Query the status of resource_id until it equals target.

        Performs at most max_attempts queries and sleeps only between them,
        so a session that never reaches target sleeps max_attempts - 1 times.
        """
        if not resource_id:
            raise ValueError("resource_id must be a non-empty string")

        logger.info(f"Waiting for {resource_id} to reach {target}...")
        status = None
        attempt = 0
        while attempt < self.max_attempts:
            attempt += 1
            status = await self.query(resource_id)
            logger.info(
                f"{resource_id} status: {status} (attempt {attempt}/{self.max_attempts})",
                extra={"resource_id": resource_id, "status": str(status), "attempt": attempt},
            )

            if status == target:
                return PollOutcome(final_status=status, attempts_used=attempt, timed_out=False)

            if attempt < self.max_attempts:
                await self.sleep(self.delay)

        logger.warning(
            f"{resource_id} did not reach {target} within {self.max_attempts} attempts "
            f"(last status: {status})"
        )
        return PollOutcome(final_status=status, attempts_used=attempt, timed_out=True)

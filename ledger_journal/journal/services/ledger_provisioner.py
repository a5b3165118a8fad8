import asyncio
import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from ..core.exceptions import LedgerNotFoundError, ProvisioningError
from ..models.ledger import LedgerDescription, LedgerState

logger = logging.getLogger("journal.provisioner")


class LedgerProvisioner:
    """Ledger create/describe via the boto3 `qldb` control-plane client."""

    def __init__(
        self,
        client: Any,  # boto3 qldb client
        permissions_mode: str = "ALLOW_ALL",
        deletion_protection: bool = True,
    ):
        self.client = client
        self.permissions_mode = permissions_mode
        self.deletion_protection = deletion_protection

    async def describe(self, ledger_name: str) -> LedgerDescription:
        try:
            resp = await asyncio.to_thread(self.client.describe_ledger, Name=ledger_name)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code")
            if code == "ResourceNotFoundException":
                raise LedgerNotFoundError(ledger_name, e) from e
            logger.error(f"Failed to describe ledger {ledger_name}: {e}")
            raise ProvisioningError(ledger_name, e) from e
        except BotoCoreError as e:
            logger.error(f"Failed to describe ledger {ledger_name}: {e}")
            raise ProvisioningError(ledger_name, e) from e
        return self._parse(ledger_name, resp)

    async def create(self, ledger_name: str) -> LedgerDescription:
        logger.info(f"Creating ledger {ledger_name}")
        try:
            resp = await asyncio.to_thread(
                self.client.create_ledger,
                Name=ledger_name,
                PermissionsMode=self.permissions_mode,
                DeletionProtection=self.deletion_protection,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to create ledger {ledger_name}: {e}")
            raise ProvisioningError(ledger_name, e) from e

        description = self._parse(ledger_name, resp)
        logger.info(f"Success. Ledger state: {description.state}.")
        return description

    async def ensure_ledger(self, ledger_name: str) -> LedgerDescription:
        """Create the ledger unless it already exists (in any state)."""
        try:
            description = await self.describe(ledger_name)
        except LedgerNotFoundError:
            return await self.create(ledger_name)
        logger.info(f"Ledger {ledger_name} already exists (state: {description.state})")
        return description

    async def get_state(self, ledger_name: str) -> LedgerState:
        """Status query used by the readiness poller."""
        description = await self.describe(ledger_name)
        return description.state

    @staticmethod
    def _parse(ledger_name: str, resp: dict) -> LedgerDescription:
        try:
            return LedgerDescription.model_validate(resp)
        except ValidationError as e:
            logger.error(f"Unexpected ledger response for {ledger_name}: {e}")
            raise ProvisioningError(ledger_name, e) from e

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class LedgerState(str, Enum):
    """Ledger states reported by the control plane."""

    CREATING = "CREATING"
    ACTIVE = "ACTIVE"
    DELETING = "DELETING"
    DELETED = "DELETED"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PollOutcome:
    """
    Result of one readiness poll session.

    final_status is the last status observed; timed_out is True when the
    attempt budget ran out before the target status was seen.
    """

    final_status: Any
    attempts_used: int
    timed_out: bool


class LedgerDescription(BaseModel):
    """DescribeLedger / CreateLedger response."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(..., alias="Name", description="Ledger name")
    state: LedgerState = Field(..., alias="State", description="Current ledger state")
    arn: Optional[str] = Field(None, alias="Arn", description="Ledger ARN")
    creation_date_time: Optional[datetime] = Field(
        None, alias="CreationDateTime", description="Creation timestamp"
    )
    permissions_mode: Optional[str] = Field(
        None, alias="PermissionsMode", description="ALLOW_ALL or STANDARD"
    )
    deletion_protection: Optional[bool] = Field(
        None, alias="DeletionProtection", description="Whether deletion protection is on"
    )

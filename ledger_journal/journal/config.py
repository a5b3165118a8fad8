"""
Journal configuration definition.

Loads configuration from environment variables and provides a Pydantic model.
Uses pydantic-settings for type safety and defaults.
"""

import sys
from pydantic import Field
from ledger_journal.common.core.config import BaseAppConfig


class JournalConfig(BaseAppConfig):
    """
    Configuration management for the journal service.
    """

    # Ledger
    LEDGER_NAME: str = Field(
        default="community-journal", min_length=1, description="Target ledger name"
    )
    PERMISSIONS_MODE: str = Field(
        default="ALLOW_ALL", description="PermissionsMode used when creating the ledger"
    )
    DELETION_PROTECTION: bool = Field(
        default=True, description="DeletionProtection used when creating the ledger"
    )

    # Endpoint overrides (empty means the AWS default endpoint)
    QLDB_ENDPOINT_URL: str = Field(default="", description="Control plane endpoint override")
    QLDB_SESSION_ENDPOINT_URL: str = Field(
        default="", description="Session (transaction) endpoint override"
    )

    # Session driver
    MAX_CONCURRENT_TRANSACTIONS: int = Field(
        default=10, ge=1, description="Session pool size and HTTP connection pool size"
    )
    RETRY_LIMIT: int = Field(default=4, ge=0, description="Driver retries per transaction")

    # Readiness polling
    READY_MAX_ATTEMPTS: int = Field(default=30, ge=1, description="Max ledger status polls")
    READY_POLL_INTERVAL: float = Field(
        default=10.0, ge=0, description="Delay between ledger status polls (seconds)"
    )

    # model_config is inherited


# Load config as a singleton.
# pydantic-settings reads environment variables during instantiation.
try:
    config = JournalConfig()
except Exception as e:
    sys.stderr.write(f"Failed to load configuration: {e}\n")
    raise

"""
Custom exception classes.

Represent errors related to ledger provisioning and transactions.
"""

from typing import Any

TRANSACTION_FAILED_MARKER = "Transactional operation failed"


class JournalError(Exception):
    """Base exception class for the journal service."""

    pass


class ProvisioningError(JournalError):
    """Raised when a ledger describe/create call fails."""

    def __init__(self, ledger_name: str, cause: Exception):
        self.ledger_name = ledger_name
        self.cause = cause
        super().__init__(f"Ledger provisioning failed for {ledger_name}: {cause}")


class LedgerNotFoundError(ProvisioningError):
    """Raised when the ledger does not exist."""

    pass


class LedgerNotReadyError(JournalError):
    """Raised by callers that treat a timed-out readiness poll as fatal."""

    def __init__(self, ledger_name: str, outcome: Any):
        self.ledger_name = ledger_name
        self.outcome = outcome
        super().__init__(
            f"Ledger {ledger_name} not ready after {outcome.attempts_used} attempts "
            f"(last state: {outcome.final_status})"
        )


class TransactionFailure(JournalError):
    """Raised when a unit of work or the transactional executor fails."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"{TRANSACTION_FAILED_MARKER}: {cause}")

"""
Core logic package.

Provides the readiness poller, the transaction runner and the error taxonomy.
"""

from .exceptions import (
    JournalError,
    LedgerNotFoundError,
    LedgerNotReadyError,
    ProvisioningError,
    TransactionFailure,
)
from .readiness import ReadinessPoller
from .transaction import TransactionalExecutor, TransactionRunner

__all__ = [
    "JournalError",
    "LedgerNotFoundError",
    "LedgerNotReadyError",
    "ProvisioningError",
    "TransactionFailure",
    "ReadinessPoller",
    "TransactionalExecutor",
    "TransactionRunner",
]

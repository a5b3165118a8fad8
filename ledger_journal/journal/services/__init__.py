"""
Services package.

Provides the ledger control-plane and transaction integrations.
"""

from .ledger_provisioner import LedgerProvisioner
from .qldb_executor import QldbTransactionExecutor

__all__ = [
    "LedgerProvisioner",
    "QldbTransactionExecutor",
]

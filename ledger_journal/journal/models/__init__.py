"""
Data models package.
"""

from .ledger import LedgerDescription, LedgerState, PollOutcome
from .person import Person

__all__ = [
    "LedgerDescription",
    "LedgerState",
    "PollOutcome",
    "Person",
]

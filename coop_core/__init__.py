"""Account and transaction engine for a small financial cooperative."""

from coop_core.models import (
    Account,
    AccountKind,
    Deposit,
    Member,
    SavingsAccount,
    TransactionRecord,
    TransactionType,
    Withdrawal,
)
from coop_core.store import Cooperative

__version__ = "0.1.0"

__all__ = [
    "Account",
    "AccountKind",
    "Cooperative",
    "Deposit",
    "Member",
    "SavingsAccount",
    "TransactionRecord",
    "TransactionType",
    "Withdrawal",
    "__version__",
]

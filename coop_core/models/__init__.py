"""Domain models for the cooperative."""

from coop_core.models.account import Account, SavingsAccount
from coop_core.models.base import Event, to_amount
from coop_core.models.enums import AccountKind, TransactionType
from coop_core.models.member import Member
from coop_core.models.transaction import (
    Deposit,
    Transaction,
    TransactionRecord,
    Withdrawal,
    execute,
    make_transaction,
)

__all__ = [
    "Account",
    "AccountKind",
    "Deposit",
    "Event",
    "Member",
    "SavingsAccount",
    "Transaction",
    "TransactionRecord",
    "TransactionType",
    "Withdrawal",
    "execute",
    "make_transaction",
    "to_amount",
]

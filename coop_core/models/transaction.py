"""Transaction commands for the cooperative domain.

A transaction is an immutable (account, amount) pair. ``execute()`` applies
its effect every time it is called and returns a ``TransactionRecord``
describing that application; the transaction itself keeps no result state.
"""

import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, ClassVar

from coop_core.exceptions import (
    CoopError,
    InsufficientFundsError,
    InvalidArgumentError,
    TransactionFailedError,
)
from coop_core.models.account import Account
from coop_core.models.base import to_amount
from coop_core.models.enums import TransactionType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransactionRecord:
    """Outcome of one successful transaction execution."""

    transaction_id: str
    transaction_type: TransactionType
    account_number: str
    amount: Decimal
    balance_before: Decimal
    balance_after: Decimal
    executed_at: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True, eq=False)
class Transaction(ABC):
    """Single unit of work against one account.

    Commands compare by identity: two deposits of the same amount to the
    same account are still two transactions.
    """

    account: Account
    amount: Decimal

    transaction_type: ClassVar[TransactionType]

    def __post_init__(self) -> None:
        if self.account is None:
            raise InvalidArgumentError("account cannot be None")
        if not isinstance(self.account, Account):
            raise InvalidArgumentError(
                f"account must be an Account, got {type(self.account).__name__}"
            )
        amount = to_amount(self.amount)
        if amount <= 0:
            raise InvalidArgumentError(
                f"The {self.transaction_type.value.lower()} amount must be "
                f"greater than 0, got {amount}"
            )
        object.__setattr__(self, "amount", amount)

    def execute(self) -> TransactionRecord:
        """Apply the transaction to its account."""
        with self.account.lock:
            before = self.account.balance
            self._apply()
            after = self.account.balance

        logger.info(
            "%s executed: account=%s amount=%.2f balance %.2f -> %.2f",
            self.transaction_type.value.capitalize(),
            self.account.account_number,
            self.amount,
            before,
            after,
            extra={
                **self._log_context(),
                "balance_before": before,
                "balance_after": after,
            },
        )
        return TransactionRecord(
            transaction_id=uuid.uuid4().hex,
            transaction_type=self.transaction_type,
            account_number=self.account.account_number,
            amount=self.amount,
            balance_before=before,
            balance_after=after,
        )

    def _log_context(self) -> dict[str, Any]:
        return {
            "account_number": self.account.account_number,
            "transaction_type": self.transaction_type.value,
            "amount": self.amount,
        }

    @abstractmethod
    def _apply(self) -> None:
        """Mutate the account; called with the account lock held."""


@dataclass(frozen=True, eq=False)
class Deposit(Transaction):
    """Credit ``amount`` to the account."""

    transaction_type: ClassVar[TransactionType] = TransactionType.DEPOSIT

    def _apply(self) -> None:
        try:
            self.account.deposit(self.amount)
        except CoopError as exc:
            logger.error(
                "Deposit to %s failed: %s",
                self.account.account_number,
                exc,
                extra=self._log_context(),
            )
            raise TransactionFailedError(
                f"Could not execute deposit to {self.account.account_number}: {exc}",
                cause=exc,
            ) from exc


@dataclass(frozen=True, eq=False)
class Withdrawal(Transaction):
    """Debit ``amount`` from the account.

    Sufficiency is checked here first; account-specific rules such as the
    savings minimum balance are enforced by the account and propagate as is.
    """

    transaction_type: ClassVar[TransactionType] = TransactionType.WITHDRAWAL

    def _apply(self) -> None:
        balance = self.account.balance
        if balance < self.amount:
            logger.warning(
                "Withdrawal rejected for %s: balance %.2f < amount %.2f",
                self.account.account_number,
                balance,
                self.amount,
                extra=self._log_context(),
            )
            raise InsufficientFundsError(
                f"Insufficient funds. Current balance: {balance:.2f}, "
                f"requested amount: {self.amount:.2f}",
                account_number=self.account.account_number,
                balance=balance,
                amount=self.amount,
            )

        try:
            self.account.withdraw(self.amount)
        except CoopError as exc:
            logger.warning("Withdrawal rejected: %s", exc, extra=self._log_context())
            raise


def execute(transaction: Transaction) -> TransactionRecord:
    """Execute a transaction; same as ``transaction.execute()``."""
    return transaction.execute()


def make_transaction(
    transaction_type: TransactionType | str, account: Account, amount: Any
) -> Transaction:
    """Build the transaction variant named by ``transaction_type``.

    Strings are matched case-insensitively against the enum values.
    """
    if isinstance(transaction_type, str):
        transaction_type = transaction_type.upper()
    try:
        kind = TransactionType(transaction_type)
    except ValueError as exc:
        raise InvalidArgumentError(
            f"Unknown transaction type: {transaction_type!r}"
        ) from exc
    if kind is TransactionType.DEPOSIT:
        return Deposit(account, amount)
    return Withdrawal(account, amount)

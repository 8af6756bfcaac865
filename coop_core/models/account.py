"""Account models for the cooperative domain.

Two account kinds exist:
- BASIC: plain balance holder with a flat management fee policy
- SAVINGS: accrues interest and keeps a minimum residual balance on withdrawal

Every mutator runs under the account's own re-entrant lock, so concurrent
deposits and withdrawals on the same account are serialized. Nothing is
atomic across accounts or across the cooperative registries.
"""

import threading
from decimal import Decimal
from typing import Any, ClassVar

from coop_core.exceptions import (
    BelowMinimumBalanceError,
    InsufficientFundsError,
    InvalidArgumentError,
)
from coop_core.models.base import ZERO, require_text, to_amount
from coop_core.models.enums import AccountKind


class Account:
    """Balance-holding account identified by its account number."""

    kind: ClassVar[AccountKind] = AccountKind.BASIC
    MANAGEMENT_FEE: ClassVar[Decimal] = Decimal("5000")

    def __init__(self, account_number: str, balance: Any = ZERO) -> None:
        self._account_number = require_text(account_number, "account_number")
        initial = to_amount(balance, "balance")
        if initial < 0:
            raise InvalidArgumentError("Initial balance cannot be negative")
        self._balance = initial
        self._lock = threading.RLock()

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def lock(self) -> threading.RLock:
        """Lock guarding this account's balance."""
        return self._lock

    def deposit(self, amount: Any) -> None:
        """Increase the balance by a positive amount."""
        value = self._positive(amount, "deposit")
        with self._lock:
            self._balance += value

    def withdraw(self, amount: Any) -> None:
        """Decrease the balance by a positive amount it can cover."""
        value = self._positive(amount, "withdrawal")
        with self._lock:
            self._check_sufficient(value)
            self._balance -= value

    def apply_fee(self) -> bool:
        """Deduct the management fee if the balance covers it.

        Returns
        -------
        bool
            True when the fee was charged.
        """
        with self._lock:
            if self._balance >= self.MANAGEMENT_FEE:
                self._balance -= self.MANAGEMENT_FEE
                return True
            return False

    def _positive(self, amount: Any, operation: str) -> Decimal:
        value = to_amount(amount)
        if value <= 0:
            raise InvalidArgumentError(
                f"The {operation} amount must be greater than 0, got {value}"
            )
        return value

    def _check_sufficient(self, amount: Decimal) -> None:
        if self._balance < amount:
            raise InsufficientFundsError(
                f"Insufficient funds in {self._account_number}. "
                f"Current balance: {self._balance:.2f}, requested amount: {amount:.2f}",
                account_number=self._account_number,
                balance=self._balance,
                amount=amount,
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Account):
            return NotImplemented
        return self._account_number == other._account_number

    def __hash__(self) -> int:
        return hash(self._account_number)

    def __repr__(self) -> str:
        return f"Account(account_number={self._account_number!r}, balance={self._balance:.2f})"


class SavingsAccount(Account):
    """Savings account with interest accrual and a minimum residual balance."""

    kind: ClassVar[AccountKind] = AccountKind.SAVINGS
    MINIMUM_BALANCE: ClassVar[Decimal] = Decimal("50000")

    def __init__(
        self,
        account_number: str,
        balance: Any = ZERO,
        interest_rate: Any = ZERO,
    ) -> None:
        super().__init__(account_number, balance)
        rate = to_amount(interest_rate, "interest_rate")
        if rate < 0 or rate > 1:
            raise InvalidArgumentError(
                f"Interest rate must be between 0 and 1, got {rate}"
            )
        self._interest_rate = rate

    @property
    def interest_rate(self) -> Decimal:
        return self._interest_rate

    def withdraw(self, amount: Any) -> None:
        """Withdraw while keeping at least ``MINIMUM_BALANCE`` in the account."""
        value = self._positive(amount, "withdrawal")
        with self._lock:
            if self._balance - value < self.MINIMUM_BALANCE:
                raise BelowMinimumBalanceError(
                    f"Withdrawal would leave {self._account_number} below the minimum "
                    f"balance ({self.MINIMUM_BALANCE:.2f}). "
                    f"Current balance: {self._balance:.2f}, requested amount: {value:.2f}",
                    account_number=self._account_number,
                    balance=self._balance,
                    amount=value,
                )
            self._check_sufficient(value)
            self._balance -= value

    def apply_interest(self) -> Decimal:
        """Credit one period of interest and return the amount credited.

        Each call compounds on the current balance.
        """
        with self._lock:
            before = self._balance
            self._balance = before * (1 + self._interest_rate)
            return self._balance - before

    def __repr__(self) -> str:
        return (
            f"SavingsAccount(account_number={self._account_number!r}, "
            f"balance={self._balance:.2f}, interest_rate={self._interest_rate})"
        )

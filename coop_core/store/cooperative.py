"""Cooperative aggregate root with uniqueness-enforcing registries."""

import logging
import threading
from decimal import Decimal
from typing import Any

from coop_core.exceptions import (
    DuplicateAccountError,
    DuplicateMemberError,
    EntityNotFoundError,
    InvalidArgumentError,
)
from coop_core.models import Account, AccountKind, Member
from coop_core.models.base import ZERO, require_text, to_amount

logger = logging.getLogger(__name__)


class Cooperative:
    """Registry of members and accounts keyed by their unique identifiers.

    Members are indexed by id number and accounts by account number. Each
    registry keeps insertion order for enumeration. Registration is
    append-only and serialized by a registry lock; readers receive tuple
    snapshots. Registering a member and then its account is two separate
    steps and is not atomic.
    """

    def __init__(self, name: str, tax_id: str) -> None:
        self.name = require_text(name, "name")
        self.tax_id = require_text(tax_id, "tax_id")

        self._members: list[Member] = []
        self._accounts: list[Account] = []

        # Identity indexes
        self._members_by_id: dict[str, Member] = {}
        self._accounts_by_number: dict[str, Account] = {}

        self._lock = threading.Lock()

        logger.info(
            "Cooperative created: %s (tax id %s)",
            self.name,
            self.tax_id,
            extra={"cooperative": self.name},
        )

    # Registration
    def register_member(self, member: Member) -> None:
        """Add a member; its id number must not be registered yet."""
        if member is None:
            raise InvalidArgumentError("member cannot be None")

        with self._lock:
            if member.id_number in self._members_by_id:
                raise DuplicateMemberError(
                    f"A member with id number {member.id_number} is already registered"
                )
            self._members.append(member)
            self._members_by_id[member.id_number] = member

        logger.info(
            "Member registered: %s (id %s)",
            member.full_name,
            member.id_number,
            extra={"cooperative": self.name, "member_id": member.id_number},
        )

    def register_account(self, account: Account) -> None:
        """Add an account; its number must not be registered yet.

        This is independent of ``Member.add_account``: callers attach the
        account to its owner and register it here, handling both failures.
        """
        if account is None:
            raise InvalidArgumentError("account cannot be None")

        with self._lock:
            if account.account_number in self._accounts_by_number:
                raise DuplicateAccountError(
                    f"An account numbered {account.account_number} is already registered"
                )
            self._accounts.append(account)
            self._accounts_by_number[account.account_number] = account

        logger.info(
            "Account registered: %s",
            account.account_number,
            extra={"cooperative": self.name, "account_number": account.account_number},
        )

    # Lookups
    def find_member_by_id(self, id_number: str) -> Member | None:
        """Return the member with this id number, or None."""
        return self._members_by_id.get(id_number)

    def find_account_by_number(self, account_number: str) -> Account | None:
        """Return the account with this number, or None."""
        return self._accounts_by_number.get(account_number)

    def get_member(self, id_number: str) -> Member:
        """Return the member with this id number or raise."""
        member = self.find_member_by_id(id_number)
        if member is None:
            raise EntityNotFoundError(f"Member {id_number} not found")
        return member

    def get_account(self, account_number: str) -> Account:
        """Return the account with this number or raise."""
        account = self.find_account_by_number(account_number)
        if account is None:
            raise EntityNotFoundError(f"Account {account_number} not found")
        return account

    def owner_of(self, account: Account) -> Member | None:
        """Return the first registered member holding ``account``."""
        for member in self._members:
            if member.owns(account):
                return member
        return None

    # Query methods
    def list_members(self) -> tuple[Member, ...]:
        """All members in registration order."""
        return tuple(self._members)

    def list_accounts(self) -> tuple[Account, ...]:
        """All accounts in registration order."""
        return tuple(self._accounts)

    def member_names(self) -> list[str]:
        """Member names in alphabetical order."""
        return sorted(m.full_name for m in self._members)

    def accounts_above_balance(self, threshold: Any) -> list[Account]:
        """Accounts whose balance is strictly above ``threshold``.

        Ordered by balance, highest first; equal balances keep registration
        order.
        """
        limit = to_amount(threshold, "threshold")
        matching = [a for a in self._accounts if a.balance > limit]
        return sorted(matching, key=lambda a: a.balance, reverse=True)

    def total_balance(self) -> Decimal:
        """Sum of all registered account balances."""
        return sum((a.balance for a in self._accounts), ZERO)

    # Batch operations
    def apply_interest_to_savings_accounts(self) -> int:
        """Credit one period of interest to every savings account.

        Returns
        -------
        int
            Number of accounts that received interest.
        """
        affected = 0
        for account in self.list_accounts():
            if account.kind is not AccountKind.SAVINGS:
                continue
            before = account.balance
            account.apply_interest()
            logger.debug(
                "Interest applied to %s: %.2f -> %.2f (rate %s)",
                account.account_number,
                before,
                account.balance,
                account.interest_rate,
            )
            affected += 1

        logger.info(
            "Interest applied to %d savings account(s)",
            affected,
            extra={"cooperative": self.name, "count": affected},
        )
        return affected

    def apply_fees(self) -> int:
        """Charge the management fee on every account that can cover it.

        Returns
        -------
        int
            Number of accounts charged.
        """
        charged = sum(1 for account in self.list_accounts() if account.apply_fee())
        logger.info(
            "Management fee charged to %d account(s)",
            charged,
            extra={"cooperative": self.name, "count": charged},
        )
        return charged

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "members": len(self._members),
            "accounts": len(self._accounts),
        }

    def __repr__(self) -> str:
        return f"Cooperative(name={self.name!r}, tax_id={self.tax_id!r})"

"""Member model for the cooperative domain."""

from decimal import Decimal

from coop_core.exceptions import DuplicateAccountError, InvalidArgumentError
from coop_core.models.account import Account
from coop_core.models.base import ZERO, require_text


class Member:
    """Cooperative member (socio) owning one or more accounts.

    Account numbers are unique per member. That check only looks at this
    member's own accounts; the cooperative registry enforces its own,
    separate uniqueness.
    """

    def __init__(self, full_name: str, id_number: str) -> None:
        self._full_name = require_text(full_name, "full_name")
        self._id_number = require_text(id_number, "id_number")
        self._accounts: list[Account] = []

    @property
    def full_name(self) -> str:
        return self._full_name

    @property
    def id_number(self) -> str:
        return self._id_number

    @property
    def accounts(self) -> tuple[Account, ...]:
        return tuple(self._accounts)

    def add_account(self, account: Account) -> None:
        """Attach an account to this member."""
        if account is None:
            raise InvalidArgumentError("account cannot be None")
        if self.owns(account.account_number):
            raise DuplicateAccountError(
                f"Member {self._id_number} already has an account numbered "
                f"{account.account_number}"
            )
        self._accounts.append(account)

    def owns(self, account: Account | str) -> bool:
        """Whether this member holds the given account or account number."""
        number = account if isinstance(account, str) else account.account_number
        return any(a.account_number == number for a in self._accounts)

    def total_balance(self) -> Decimal:
        """Sum of the balances of all owned accounts."""
        return sum((a.balance for a in self._accounts), ZERO)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Member):
            return NotImplemented
        return self._id_number == other._id_number

    def __hash__(self) -> int:
        return hash(self._id_number)

    def __repr__(self) -> str:
        return (
            f"Member(full_name={self._full_name!r}, id_number={self._id_number!r}, "
            f"accounts={len(self._accounts)})"
        )

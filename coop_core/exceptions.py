"""Custom exception hierarchy for coop-core."""

from decimal import Decimal


class CoopError(Exception):
    """Base exception for all coop-core errors."""


class InvalidArgumentError(CoopError, ValueError):
    """Raised for empty identities, non-positive amounts or out-of-range rates."""


class DuplicateEntityError(CoopError):
    """Raised when a uniqueness constraint is violated at registration."""


class DuplicateMemberError(DuplicateEntityError):
    """Raised when a member id number is already registered."""


class DuplicateAccountError(DuplicateEntityError):
    """Raised when an account number is already registered or owned."""


class EntityNotFoundError(CoopError):
    """Raised when a referenced entity does not exist."""


class WithdrawalRejectedError(CoopError):
    """Raised when a withdrawal breaks a balance rule.

    The balance is left untouched when this is raised.
    """

    def __init__(
        self,
        message: str,
        account_number: str | None = None,
        balance: Decimal | None = None,
        amount: Decimal | None = None,
    ) -> None:
        super().__init__(message)
        self.account_number = account_number
        self.balance = balance
        self.amount = amount


class InsufficientFundsError(WithdrawalRejectedError):
    """Raised when the withdrawal amount exceeds the available balance."""


class BelowMinimumBalanceError(WithdrawalRejectedError):
    """Raised when a savings withdrawal would breach the minimum balance."""


class TransactionFailedError(CoopError):
    """Raised when a transaction could not be applied to its account."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConfigurationError(CoopError):
    """Raised when configuration is invalid or missing."""


class SinkError(CoopError):
    """Raised when a sink operation fails."""

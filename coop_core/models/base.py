"""Base models shared across the cooperative domain."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from coop_core.exceptions import InvalidArgumentError

ZERO = Decimal("0")


@dataclass
class Event:
    """Standard event envelope for streaming."""

    event_id: str
    event_type: str  # entity.action (e.g., transaction.deposit)
    event_time: datetime
    source: str  # Service/system that generated
    subject: str  # Entity ID affected
    data: dict
    metadata: dict = field(default_factory=dict)


def to_amount(value: Any, field_name: str = "amount") -> Decimal:
    """Coerce a monetary value to ``Decimal``.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")``.

    Raises
    ------
    InvalidArgumentError
        If the value is missing, boolean, non-numeric or not finite.
    """
    if value is None or isinstance(value, bool):
        raise InvalidArgumentError(f"{field_name} must be a number, got {value!r}")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except InvalidOperation as exc:
            raise InvalidArgumentError(
                f"{field_name} must be a number, got {value!r}"
            ) from exc
    if not amount.is_finite():
        raise InvalidArgumentError(f"{field_name} must be finite, got {value!r}")
    return amount


def require_text(value: Any, field_name: str) -> str:
    """Return ``value`` if it is a non-blank string."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"{field_name} must be a non-empty string")
    return value

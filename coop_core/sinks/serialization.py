"""Shared serialization utilities for sinks."""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from coop_core.models import Account, Member, SavingsAccount


def to_dict(obj: Any) -> dict:
    """Convert a domain object to a JSON-ready dictionary."""
    if isinstance(obj, Account):
        return account_to_dict(obj)
    elif isinstance(obj, Member):
        return member_to_dict(obj)
    elif is_dataclass(obj) and not isinstance(obj, type):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return {k: serialize_value(v) for k, v in obj.items()}
    else:
        return {"value": str(obj)}


def account_to_dict(account: Account) -> dict:
    """Serialize an account, including its interest rate when it has one."""
    result: dict[str, Any] = {
        "account_number": account.account_number,
        "kind": account.kind.value,
        "balance": serialize_value(account.balance),
    }
    if isinstance(account, SavingsAccount):
        result["interest_rate"] = serialize_value(account.interest_rate)
    return result


def member_to_dict(member: Member) -> dict:
    """Serialize a member with its account numbers and total balance."""
    return {
        "full_name": member.full_name,
        "id_number": member.id_number,
        "accounts": [a.account_number for a in member.accounts],
        "total_balance": serialize_value(member.total_balance()),
    }


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass without deep copy.

    Uses ``dataclasses.fields()`` + ``getattr`` instead of ``asdict()`` so
    nested domain objects (an Account inside a transaction) go through
    ``serialize_value`` rather than being deep-copied.
    """
    return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, (Account, Member)):
        return to_dict(value)
    elif is_dataclass(value) and not isinstance(value, type):
        return dataclass_to_dict(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value

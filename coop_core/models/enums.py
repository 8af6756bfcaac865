"""Enumeration types for cooperative entities."""

from enum import Enum


class AccountKind(str, Enum):
    BASIC = "BASIC"
    SAVINGS = "SAVINGS"


class TransactionType(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"

"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from coop_core.models import Account, Member, SavingsAccount
from coop_core.store import Cooperative


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def basic_account() -> Account:
    """Basic account holding 1000."""
    return Account("CC-0001", Decimal("1000"))


@pytest.fixture
def savings_account() -> SavingsAccount:
    """Savings account A-1 with 600000 at 2%."""
    return SavingsAccount("A-1", Decimal("600000"), Decimal("0.02"))


@pytest.fixture
def member() -> Member:
    """Member Carlos with no accounts."""
    return Member("Carlos Pérez", "1002")


@pytest.fixture
def cooperative() -> Cooperative:
    """Empty cooperative."""
    return Cooperative("Cooperativa Test", "900000000-1")

"""Savings account generator for sample cooperative data."""

import random
from decimal import Decimal
from typing import Iterator

from coop_core.generators.base import BaseGenerator
from coop_core.models import Member, SavingsAccount


class SavingsAccountGenerator(BaseGenerator):
    """Generate savings accounts numbered after their owner.

    Account numbers follow ``AH-<id number>-<sequence>``, with the sequence
    continuing after the accounts the member already holds.
    """

    BALANCE_RANGE = (50_000, 2_000_000)
    RATE_RANGE = (0.005, 0.05)

    def generate_for_member(self, member: Member, count: int = 1) -> Iterator[SavingsAccount]:
        """Generate ``count`` accounts for ``member`` without attaching them."""
        start = len(member.accounts) + 1
        for sequence in range(start, start + count):
            yield self._generate_one(f"AH-{member.id_number}-{sequence}")

    def _generate_one(self, account_number: str) -> SavingsAccount:
        balance = random.randint(*self.BALANCE_RANGE)
        rate = round(random.uniform(*self.RATE_RANGE), 3)
        return SavingsAccount(
            account_number=account_number,
            balance=Decimal(balance),
            interest_rate=Decimal(str(rate)),
        )

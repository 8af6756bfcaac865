"""Seed scenario that populates a cooperative with sample members."""

import logging
import random
from dataclasses import dataclass
from decimal import Decimal

from coop_core.config import CoopConfig
from coop_core.exceptions import CoopError, DuplicateAccountError, InvalidArgumentError
from coop_core.generators import MemberGenerator, SavingsAccountGenerator
from coop_core.models import Member, SavingsAccount
from coop_core.store.cooperative import Cooperative

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DemoMember:
    """One seed row: a member and one savings account to open for them."""

    full_name: str
    id_number: str
    interest_rate: Decimal
    account_number: str
    opening_balance: Decimal


DEMO_MEMBERS: tuple[DemoMember, ...] = (
    DemoMember("Ana Gómez", "1001", Decimal("0.02"), "AH-1001-1", Decimal("600000")),
    DemoMember("Carlos Pérez", "1002", Decimal("0.03"), "AH-1002-1", Decimal("200000")),
    DemoMember("María López", "1003", Decimal("0.015"), "AH-1003-1", Decimal("800000")),
    DemoMember("Carlos Pérez", "1002", Decimal("0.03"), "AH-1002-2", Decimal("400000")),
)


def open_account(cooperative: Cooperative, member: Member, account: SavingsAccount) -> None:
    """Attach ``account`` to ``member`` and register it with the cooperative.

    Both duplicate checks run before either side changes, so a rejected
    account is neither owned by the member nor registered.

    Raises
    ------
    DuplicateAccountError
        If the member already holds the number or the cooperative has it
        registered.
    """
    if account is None:
        raise InvalidArgumentError("account cannot be None")
    if member.owns(account):
        raise DuplicateAccountError(
            f"Member {member.id_number} already holds an account numbered "
            f"{account.account_number}"
        )
    if cooperative.find_account_by_number(account.account_number) is not None:
        raise DuplicateAccountError(
            f"An account numbered {account.account_number} is already registered"
        )
    member.add_account(account)
    cooperative.register_account(account)


class CooperativeSeedScenario:
    """Populate a cooperative with demo rows and generated members.

    Rows that fail validation are logged and skipped, so one bad row does
    not stop the rest of the seeding.
    """

    def __init__(self, config: CoopConfig | None = None) -> None:
        self.config = config or CoopConfig()
        seed = self.config.seed
        locale = self.config.seed_data.locale

        if seed is not None:
            random.seed(seed)

        self.cooperative = Cooperative(self.config.name, self.config.tax_id)
        self._member_gen = MemberGenerator(seed=seed, locale=locale)
        self._account_gen = SavingsAccountGenerator(seed=seed, locale=locale)
        self.skipped: list[str] = []

    def generate(self) -> Cooperative:
        """Seed and return the cooperative.

        Returns
        -------
        Cooperative
            Cooperative holding all seeded members and accounts.
        """
        seed_data = self.config.seed_data
        logger.info(
            "Starting seed scenario: demo=%s generated_members=%d",
            seed_data.include_demo_members,
            seed_data.num_members,
        )

        if seed_data.include_demo_members:
            for row in DEMO_MEMBERS:
                self._seed_demo_row(row)

        for member in self._member_gen.generate_batch(seed_data.num_members):
            self._seed_generated_member(member)

        summary = self.cooperative.summary()
        logger.info(
            "Seeded %d members, %d accounts (%d rows skipped)",
            summary["members"],
            summary["accounts"],
            len(self.skipped),
        )
        return self.cooperative

    def _seed_demo_row(self, row: DemoMember) -> None:
        try:
            member = self.cooperative.find_member_by_id(row.id_number)
            if member is None:
                member = Member(row.full_name, row.id_number)
                self.cooperative.register_member(member)
            account = SavingsAccount(row.account_number, row.opening_balance, row.interest_rate)
            open_account(self.cooperative, member, account)
        except CoopError as exc:
            logger.warning(
                "Skipping demo row for %s: %s",
                row.full_name,
                exc,
                extra={"member_id": row.id_number, "account_number": row.account_number},
            )
            self.skipped.append(row.account_number)

    def _seed_generated_member(self, member: Member) -> None:
        try:
            self.cooperative.register_member(member)
        except CoopError as exc:
            logger.warning(
                "Skipping generated member %s: %s",
                member.id_number,
                exc,
                extra={"member_id": member.id_number},
            )
            self.skipped.append(member.id_number)
            return

        count = random.randint(*self.config.seed_data.accounts_per_member)
        for account in self._account_gen.generate_for_member(member, count):
            try:
                open_account(self.cooperative, member, account)
            except CoopError as exc:
                logger.warning(
                    "Skipping account %s: %s",
                    account.account_number,
                    exc,
                    extra={"member_id": member.id_number, "account_number": account.account_number},
                )
                self.skipped.append(account.account_number)

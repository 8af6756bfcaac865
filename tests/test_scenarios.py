"""Tests for the seed scenario."""

import logging
from decimal import Decimal

import pytest

from coop_core.config import CoopConfig, SeedConfig
from coop_core.exceptions import DuplicateAccountError
from coop_core.models import Member, SavingsAccount
from coop_core.scenarios import DEMO_MEMBERS, CooperativeSeedScenario, open_account
from coop_core.store import Cooperative


class TestDemoSeed:
    """Tests for seeding the demo members."""

    def test_demo_members(self) -> None:
        cooperative = CooperativeSeedScenario().generate()

        assert cooperative.summary() == {"members": 3, "accounts": 4}
        carlos = cooperative.find_member_by_id("1002")
        assert carlos is not None
        assert [a.account_number for a in carlos.accounts] == ["AH-1002-1", "AH-1002-2"]
        assert cooperative.total_balance() == Decimal("2000000")

    def test_demo_rows_match_seed_data(self) -> None:
        assert len(DEMO_MEMBERS) == 4
        assert {row.id_number for row in DEMO_MEMBERS} == {"1001", "1002", "1003"}

    def test_uses_config_identity(self) -> None:
        config = CoopConfig(name="Coop Norte", tax_id="800-1")
        cooperative = CooperativeSeedScenario(config).generate()

        assert cooperative.name == "Coop Norte"
        assert cooperative.tax_id == "800-1"

    def test_duplicate_row_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.WARNING, logger="coop_core")
        scenario = CooperativeSeedScenario()
        cooperative = scenario.generate()

        scenario._seed_demo_row(DEMO_MEMBERS[0])

        assert scenario.skipped == ["AH-1001-1"]
        assert cooperative.summary()["accounts"] == 4
        assert any("Skipping demo row" in r.getMessage() for r in caplog.records)


class TestGeneratedSeed:
    """Tests for seeding Faker-generated members."""

    def test_generated_members(self, seed: int) -> None:
        config = CoopConfig(
            seed=seed,
            seed_data=SeedConfig(num_members=5, accounts_per_member=(1, 2)),
        )
        cooperative = CooperativeSeedScenario(config).generate()

        assert len(cooperative.list_members()) == 8
        generated = cooperative.list_members()[3:]
        for member in generated:
            assert 1 <= len(member.accounts) <= 2
            for account in member.accounts:
                assert cooperative.find_account_by_number(account.account_number) is account
                assert cooperative.owner_of(account) is member

    def test_without_demo_members(self, seed: int) -> None:
        config = CoopConfig(
            seed=seed,
            seed_data=SeedConfig(num_members=3, include_demo_members=False),
        )
        cooperative = CooperativeSeedScenario(config).generate()

        assert len(cooperative.list_members()) == 3
        assert cooperative.find_member_by_id("1001") is None

    def test_empty(self) -> None:
        config = CoopConfig(seed_data=SeedConfig(include_demo_members=False))
        cooperative = CooperativeSeedScenario(config).generate()

        assert cooperative.summary() == {"members": 0, "accounts": 0}


class TestOpenAccount:
    """Tests for open_account."""

    def test_registers_both_sides(self, cooperative: Cooperative, member: Member) -> None:
        account = SavingsAccount("AH-1002-1", Decimal("200000"), Decimal("0.03"))

        open_account(cooperative, member, account)

        assert member.owns(account)
        assert cooperative.find_account_by_number("AH-1002-1") is account

    def test_cooperative_duplicate_raised(self, cooperative: Cooperative, member: Member) -> None:
        cooperative.register_account(SavingsAccount("AH-1002-1", Decimal("60000")))

        with pytest.raises(DuplicateAccountError):
            open_account(cooperative, member, SavingsAccount("AH-1002-1", Decimal("70000")))

        assert not member.owns("AH-1002-1")

    def test_taken_number_leaves_second_member_untouched(self, cooperative: Cooperative) -> None:
        first = Member("Ana Gómez", "1001")
        second = Member("Luis Rojas", "1004")
        cooperative.register_member(first)
        cooperative.register_member(second)
        taken = SavingsAccount("AH-X", Decimal("100000"))
        open_account(cooperative, first, taken)

        with pytest.raises(DuplicateAccountError):
            open_account(cooperative, second, SavingsAccount("AH-X", Decimal("900000")))

        assert second.accounts == ()
        assert second.total_balance() == Decimal("0")
        assert cooperative.owner_of(taken) is first
        assert cooperative.total_balance() == Decimal("100000")
        assert cooperative.summary()["accounts"] == 1

    def test_member_duplicate_leaves_cooperative_untouched(
        self, cooperative: Cooperative, member: Member
    ) -> None:
        member.add_account(SavingsAccount("AH-1002-1", Decimal("60000")))

        with pytest.raises(DuplicateAccountError):
            open_account(cooperative, member, SavingsAccount("AH-1002-1", Decimal("70000")))

        assert cooperative.find_account_by_number("AH-1002-1") is None
        assert len(member.accounts) == 1

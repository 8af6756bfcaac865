"""Tests for the Cooperative registry."""

import logging
from decimal import Decimal

import pytest

from coop_core.exceptions import (
    DuplicateAccountError,
    DuplicateMemberError,
    EntityNotFoundError,
    InvalidArgumentError,
)
from coop_core.models import Account, Member, SavingsAccount, Withdrawal
from coop_core.store import Cooperative


def _savings(number: str, balance: str, rate: str = "0.02") -> SavingsAccount:
    return SavingsAccount(number, Decimal(balance), Decimal(rate))


class TestCooperativeCreation:
    """Tests for cooperative construction."""

    def test_fields(self, cooperative: Cooperative) -> None:
        assert cooperative.name == "Cooperativa Test"
        assert cooperative.tax_id == "900000000-1"
        assert cooperative.list_members() == ()
        assert cooperative.list_accounts() == ()

    @pytest.mark.parametrize("name,tax_id", [("", "1"), ("Coop", ""), (None, "1")])
    def test_invalid(self, name: object, tax_id: object) -> None:
        with pytest.raises(InvalidArgumentError):
            Cooperative(name, tax_id)  # type: ignore[arg-type]

    def test_creation_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="coop_core")

        Cooperative("Coop Log", "123")

        assert any("Coop Log" in r.getMessage() for r in caplog.records)


class TestMemberRegistry:
    """Tests for member registration and lookup."""

    def test_register_and_find(self, cooperative: Cooperative, member: Member) -> None:
        cooperative.register_member(member)

        assert cooperative.find_member_by_id("1002") is member
        assert cooperative.get_member("1002") is member
        assert cooperative.list_members() == (member,)

    def test_duplicate_member(self, cooperative: Cooperative) -> None:
        first = Member("Carlos Pérez", "1002")
        cooperative.register_member(first)

        with pytest.raises(DuplicateMemberError):
            cooperative.register_member(Member("Otro Nombre", "1002"))

        assert cooperative.list_members() == (first,)
        assert cooperative.find_member_by_id("1002") is first

    def test_register_none(self, cooperative: Cooperative) -> None:
        with pytest.raises(InvalidArgumentError):
            cooperative.register_member(None)  # type: ignore[arg-type]

    def test_find_missing_returns_none(self, cooperative: Cooperative) -> None:
        assert cooperative.find_member_by_id("9999") is None

    def test_get_missing_raises(self, cooperative: Cooperative) -> None:
        with pytest.raises(EntityNotFoundError, match="9999"):
            cooperative.get_member("9999")

    def test_registration_order(self, cooperative: Cooperative) -> None:
        members = [Member("Zoe", "3"), Member("Ana", "1"), Member("Luis", "2")]
        for m in members:
            cooperative.register_member(m)

        assert cooperative.list_members() == tuple(members)
        assert cooperative.member_names() == ["Ana", "Luis", "Zoe"]


class TestAccountRegistry:
    """Tests for account registration and lookup."""

    def test_register_and_find(self, cooperative: Cooperative, savings_account: SavingsAccount) -> None:
        cooperative.register_account(savings_account)

        assert cooperative.find_account_by_number("A-1") is savings_account
        assert cooperative.get_account("A-1") is savings_account

    def test_duplicate_account(self, cooperative: Cooperative) -> None:
        first = _savings("AH-1", "100000")
        cooperative.register_account(first)

        with pytest.raises(DuplicateAccountError):
            cooperative.register_account(_savings("AH-1", "999999"))

        assert cooperative.find_account_by_number("AH-1") is first

    def test_registration_log_carries_context(
        self, cooperative: Cooperative, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO, logger="coop_core")

        cooperative.register_account(_savings("AH-7", "100000"))

        record = next(r for r in caplog.records if "Account registered" in r.getMessage())
        assert record.account_number == "AH-7"
        assert record.cooperative == "Cooperativa Test"
        assert len(cooperative.list_accounts()) == 1

    def test_register_none(self, cooperative: Cooperative) -> None:
        with pytest.raises(InvalidArgumentError):
            cooperative.register_account(None)  # type: ignore[arg-type]

    def test_find_missing_returns_none(self, cooperative: Cooperative) -> None:
        assert cooperative.find_account_by_number("NOPE") is None

    def test_get_missing_raises(self, cooperative: Cooperative) -> None:
        with pytest.raises(EntityNotFoundError):
            cooperative.get_account("NOPE")

    def test_member_and_cooperative_checks_are_independent(self, cooperative: Cooperative) -> None:
        ana = Member("Ana", "1001")
        carlos = Member("Carlos", "1002")
        cooperative.register_member(ana)
        cooperative.register_member(carlos)

        shared = _savings("AH-X", "100000")
        ana.add_account(shared)
        cooperative.register_account(shared)

        # Passes at member scope, fails at cooperative scope
        other = _savings("AH-X", "200000")
        carlos.add_account(other)
        with pytest.raises(DuplicateAccountError):
            cooperative.register_account(other)

        # Passes at cooperative scope, fails at member scope
        unregistered = _savings("AH-Y", "100000")
        cooperative.register_account(unregistered)
        ana.add_account(unregistered)
        with pytest.raises(DuplicateAccountError):
            ana.add_account(_savings("AH-Y", "100000"))

    def test_owner_of(self, cooperative: Cooperative, member: Member) -> None:
        account = _savings("AH-1002-1", "200000")
        member.add_account(account)
        cooperative.register_member(member)
        cooperative.register_account(account)

        assert cooperative.owner_of(account) is member
        assert cooperative.owner_of(_savings("AH-0", "60000")) is None


class TestQueries:
    """Tests for read-only queries."""

    @pytest.fixture
    def populated(self, cooperative: Cooperative) -> Cooperative:
        for number, balance in (("AH-1", "600000"), ("AH-2", "200000"), ("AH-3", "800000")):
            cooperative.register_account(_savings(number, balance))
        return cooperative

    def test_accounts_above_balance_scenario(self, populated: Cooperative) -> None:
        result = populated.accounts_above_balance(500000)

        assert [a.balance for a in result] == [Decimal("800000"), Decimal("600000")]
        assert [a.account_number for a in result] == ["AH-3", "AH-1"]

    def test_total_balance_scenario(self, populated: Cooperative) -> None:
        assert populated.total_balance() == Decimal("1600000")

    def test_threshold_is_strict(self, populated: Cooperative) -> None:
        result = populated.accounts_above_balance(Decimal("600000"))
        assert [a.account_number for a in result] == ["AH-3"]

    def test_ties_keep_registration_order(self, cooperative: Cooperative) -> None:
        for number in ("T-1", "T-2", "T-3"):
            cooperative.register_account(_savings(number, "300000"))
        cooperative.register_account(_savings("T-4", "900000"))

        result = cooperative.accounts_above_balance(0)

        assert [a.account_number for a in result] == ["T-4", "T-1", "T-2", "T-3"]

    def test_empty_queries(self, cooperative: Cooperative) -> None:
        assert cooperative.accounts_above_balance(0) == []
        assert cooperative.total_balance() == Decimal("0")

    def test_queries_reflect_executed_transactions(self, populated: Cooperative) -> None:
        Withdrawal(populated.get_account("AH-1"), Decimal("100000")).execute()

        assert populated.total_balance() == Decimal("1500000")
        assert [a.account_number for a in populated.accounts_above_balance(500000)] == ["AH-3"]

    def test_summary(self, populated: Cooperative) -> None:
        populated.register_member(Member("Ana", "1001"))

        assert populated.summary() == {"members": 1, "accounts": 3}


class TestBatchOperations:
    """Tests for interest and fee runs."""

    def test_apply_interest_only_to_savings(self, cooperative: Cooperative) -> None:
        savings = _savings("AH-1", "600000", "0.02")
        basic = Account("CC-1", Decimal("600000"))
        cooperative.register_account(savings)
        cooperative.register_account(basic)

        affected = cooperative.apply_interest_to_savings_accounts()

        assert affected == 1
        assert savings.balance == Decimal("612000")
        assert basic.balance == Decimal("600000")

    def test_interest_log_carries_count(
        self, cooperative: Cooperative, caplog: pytest.LogCaptureFixture
    ) -> None:
        cooperative.register_account(_savings("AH-1", "600000", "0.02"))
        caplog.set_level(logging.INFO, logger="coop_core")

        cooperative.apply_interest_to_savings_accounts()

        record = next(r for r in caplog.records if "Interest applied to 1" in r.getMessage())
        assert record.count == 1

    def test_apply_interest_empty(self, cooperative: Cooperative) -> None:
        assert cooperative.apply_interest_to_savings_accounts() == 0

    def test_apply_fees(self, cooperative: Cooperative) -> None:
        rich = Account("CC-1", Decimal("10000"))
        poor = Account("CC-2", Decimal("100"))
        cooperative.register_account(rich)
        cooperative.register_account(poor)

        assert cooperative.apply_fees() == 1
        assert rich.balance == Decimal("5000")
        assert poor.balance == Decimal("100")

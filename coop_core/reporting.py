"""Read-only reports over a cooperative's query surface."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Iterable

from coop_core.models import Account
from coop_core.models.base import ZERO, to_amount
from coop_core.store.cooperative import Cooperative

OWNER_NOT_FOUND = "Owner not found"


@dataclass
class BalanceStatistics:
    """Summary statistics over a set of account balances."""

    count: int = 0
    total: Decimal = ZERO
    average: Decimal = ZERO
    maximum: Decimal = ZERO
    minimum: Decimal = ZERO

    @classmethod
    def from_accounts(cls, accounts: Iterable[Account]) -> "BalanceStatistics":
        """Compute statistics; all zeros when there are no accounts."""
        balances = [a.balance for a in accounts]
        if not balances:
            return cls()
        total = sum(balances, ZERO)
        return cls(
            count=len(balances),
            total=total,
            average=total / len(balances),
            maximum=max(balances),
            minimum=min(balances),
        )


@dataclass
class AccountLine:
    """One account row in a report."""

    account_number: str
    balance: Decimal
    owner: str


@dataclass
class CooperativeReport:
    """Snapshot of a cooperative for display."""

    name: str
    tax_id: str
    member_count: int
    statistics: BalanceStatistics
    threshold: Decimal
    member_names: list[str] = field(default_factory=list)
    accounts_above_threshold: list[AccountLine] = field(default_factory=list)

    @property
    def total_balance(self) -> Decimal:
        return self.statistics.total


def build_report(cooperative: Cooperative, threshold: Any) -> CooperativeReport:
    """Collect the figures of a full cooperative report.

    Parameters
    ----------
    cooperative : Cooperative
        Cooperative to report on.
    threshold : Any
        Accounts with a balance strictly above this value are listed.

    Returns
    -------
    CooperativeReport
        Report snapshot; later balance changes are not reflected.
    """
    above = cooperative.accounts_above_balance(threshold)
    lines = []
    for account in above:
        owner = cooperative.owner_of(account)
        lines.append(
            AccountLine(
                account_number=account.account_number,
                balance=account.balance,
                owner=owner.full_name if owner else OWNER_NOT_FOUND,
            )
        )

    return CooperativeReport(
        name=cooperative.name,
        tax_id=cooperative.tax_id,
        member_count=len(cooperative.list_members()),
        statistics=BalanceStatistics.from_accounts(cooperative.list_accounts()),
        threshold=to_amount(threshold, "threshold"),
        member_names=cooperative.member_names(),
        accounts_above_threshold=lines,
    )


def render_report(report: CooperativeReport) -> str:
    """Render a report as plain text."""
    stats = report.statistics
    rule = "=" * 60
    out = [
        rule,
        f"COOPERATIVE REPORT: {report.name} (tax id {report.tax_id})",
        rule,
        "Statistics:",
        f"  Members:          {report.member_count}",
        f"  Accounts:         {stats.count}",
        f"  Total balance:    ${stats.total:,.2f}",
        f"  Average balance:  ${stats.average:,.2f}",
        f"  Maximum balance:  ${stats.maximum:,.2f}",
        f"  Minimum balance:  ${stats.minimum:,.2f}",
        "",
        "Registered members:",
    ]
    out.extend(f"  - {name}" for name in report.member_names)
    out.append("")
    out.append(f"Accounts with balance > ${report.threshold:,.2f}:")
    if not report.accounts_above_threshold:
        out.append("  (none)")
    for line in report.accounts_above_threshold:
        out.append(f"  - {line.account_number}: ${line.balance:,.2f} - Owner: {line.owner}")
    out.append("")
    out.append(f"Total in the cooperative: ${report.total_balance:,.2f}")
    return "\n".join(out)

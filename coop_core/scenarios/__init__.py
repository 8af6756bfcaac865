"""Scenarios for seeding cooperatives with sample data."""

from coop_core.scenarios.seed import (
    DEMO_MEMBERS,
    CooperativeSeedScenario,
    DemoMember,
    open_account,
)

__all__ = ["DEMO_MEMBERS", "CooperativeSeedScenario", "DemoMember", "open_account"]

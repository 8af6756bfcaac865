"""Sample data generators."""

from coop_core.generators.account import SavingsAccountGenerator
from coop_core.generators.base import BaseGenerator
from coop_core.generators.member import MemberGenerator

__all__ = ["BaseGenerator", "MemberGenerator", "SavingsAccountGenerator"]

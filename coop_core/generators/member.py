"""Member generator for sample cooperative data."""

from typing import Iterator

from coop_core.generators.base import BaseGenerator
from coop_core.models import Member


class MemberGenerator(BaseGenerator):
    """Generate members with realistic names and unique id numbers."""

    ID_DIGITS = 10

    def generate(self) -> Member:
        """Generate a single member.

        Returns
        -------
        Member
            Generated member without accounts.
        """
        id_number = str(self.fake.unique.random_number(digits=self.ID_DIGITS, fix_len=True))
        return Member(full_name=self.fake.name(), id_number=id_number)

    def generate_batch(self, count: int) -> Iterator[Member]:
        """Generate multiple members.

        Parameters
        ----------
        count : int
            Number of members to generate.

        Yields
        ------
        Member
            Generated members.
        """
        for _ in range(count):
            yield self.generate()

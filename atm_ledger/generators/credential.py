"""PIN and holder name generation."""

from atm_ledger.generators.base import BaseGenerator


class PinGenerator(BaseGenerator):
    """Generate 4 digit PINs, uniform over [1000, 9999].

    No collision check is made against existing accounts: login keys on
    the (account ID, PIN) pair, so two accounts may share a PIN.
    """

    MIN_PIN = 1000
    MAX_PIN = 9999

    def generate(self) -> str:
        return str(self.fake.random_int(min=self.MIN_PIN, max=self.MAX_PIN))


class HolderGenerator(BaseGenerator):
    """Generate display names for demo accounts."""

    def generate(self) -> str:
        return self.fake.name()

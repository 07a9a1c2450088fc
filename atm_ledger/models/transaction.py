"""Transaction model."""

from dataclasses import dataclass
from datetime import date

from atm_ledger.models.enums import TransactionKind


@dataclass(frozen=True)
class Transaction:
    """One balance-changing event. Never mutated once recorded."""

    kind: TransactionKind
    amount: int  # positive, whole currency units
    occurred_on: date

    @property
    def signed_amount(self) -> int:
        """Amount as it affects the balance."""
        if self.kind == TransactionKind.WITHDRAWAL:
            return -self.amount
        return self.amount

"""Account model."""

from dataclasses import dataclass, field

from atm_ledger.models.transaction import Transaction


@dataclass
class Account:
    """Ledger holder record.

    The PIN is stored and compared in plaintext, matching the legacy
    record format. ``transactions`` is append-only and kept in the
    order the operations were applied.
    """

    account_id: str  # prefix + sequence number, e.g. ACC1001
    name: str
    pin: str  # 4 digits
    balance: int = 0
    transactions: list[Transaction] = field(default_factory=list)

    def matches(self, account_id: str, pin: str) -> bool:
        """Return True when both credentials are exactly equal."""
        return self.account_id == account_id and self.pin == pin

    def computed_balance(self) -> int:
        """Balance derived from the transaction history alone."""
        return sum(tx.signed_amount for tx in self.transactions)

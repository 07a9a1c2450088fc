"""Account identifier generation."""

from typing import Sequence

from atm_ledger.exceptions import CorruptStoreError
from atm_ledger.models import Account


class IdentifierGenerator:
    """Derive the next account identifier from the stored accounts.

    The next number is the suffix of the *last* account in insertion
    order plus one, not a scan for the maximum. This is only unique as
    long as the store is append-only and keeps its order.

    Parameters
    ----------
    prefix : str
        Fixed identifier prefix (default ``"ACC"``).
    base : int
        Number given to the first account (default 1001).
    """

    def __init__(self, prefix: str = "ACC", base: int = 1001) -> None:
        self.prefix = prefix
        self.base = base

    def next(self, accounts: Sequence[Account]) -> str:
        """Return the identifier for a new account appended to ``accounts``."""
        if not accounts:
            return f"{self.prefix}{self.base}"
        return f"{self.prefix}{self.parse(accounts[-1].account_id) + 1}"

    def parse(self, account_id: str) -> int:
        """Return the numeric suffix of ``account_id``.

        Raises
        ------
        CorruptStoreError
            If the identifier does not carry the prefix and a decimal suffix.
        """
        suffix = account_id[len(self.prefix):]
        if not account_id.startswith(self.prefix) or not (suffix.isascii() and suffix.isdigit()):
            raise CorruptStoreError(
                f"Account identifier {account_id!r} does not match {self.prefix}<number>"
            )
        return int(suffix)

"""Account store interface and an in-memory implementation."""

import copy
from typing import Protocol, Sequence

from atm_ledger.models import Account


class AccountStore(Protocol):
    """Durable whole-collection storage for accounts.

    Every mutation writes the full collection back. There is no locking,
    so a store must only be used by one process at a time.
    """

    def load_all(self) -> list[Account]:
        """Return every stored account in insertion order."""
        ...

    def save_all(self, accounts: Sequence[Account]) -> None:
        """Replace the stored collection with ``accounts``."""
        ...


class InMemoryAccountStore:
    """Account store kept in process memory.

    Accounts are deep-copied on the way in and out so callers cannot
    change stored state without going through ``save_all``.
    """

    def __init__(self, accounts: Sequence[Account] | None = None) -> None:
        self._accounts: list[Account] = copy.deepcopy(list(accounts or []))
        self.save_count = 0

    def load_all(self) -> list[Account]:
        return copy.deepcopy(self._accounts)

    def save_all(self, accounts: Sequence[Account]) -> None:
        self._accounts = copy.deepcopy(list(accounts))
        self.save_count += 1

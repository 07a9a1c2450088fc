"""Account stores."""

from atm_ledger.store.base import AccountStore, InMemoryAccountStore
from atm_ledger.store.json_file import JsonFileAccountStore

__all__ = ["AccountStore", "InMemoryAccountStore", "JsonFileAccountStore"]

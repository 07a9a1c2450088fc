"""Domain models for the account ledger."""

from atm_ledger.models.account import Account
from atm_ledger.models.enums import MenuChoice, SessionState, TransactionKind
from atm_ledger.models.transaction import Transaction

__all__ = [
    "Account",
    "MenuChoice",
    "SessionState",
    "Transaction",
    "TransactionKind",
]

"""Terminal account ledger backed by a flat JSON record store."""

from atm_ledger.ledger import LedgerEngine, parse_amount
from atm_ledger.models import Account, Transaction, TransactionKind
from atm_ledger.registry import AccountRegistry

__version__ = "0.1.0"

__all__ = [
    "Account",
    "AccountRegistry",
    "LedgerEngine",
    "Transaction",
    "TransactionKind",
    "__version__",
    "parse_amount",
]

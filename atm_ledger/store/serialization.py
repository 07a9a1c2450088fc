"""Conversion between ledger models and durable JSON records.

Record keys follow the legacy ``users.json`` layout::

    {
      "accountID": "ACC1001",
      "name": "Ana",
      "pin": "4821",
      "balance": 60,
      "transactions": [
        {"type": "deposit", "amount": 100, "date": "2024-03-01"}
      ]
    }
"""

from datetime import date
from typing import Any

from atm_ledger.exceptions import CorruptStoreError
from atm_ledger.models import Account, Transaction, TransactionKind


def transaction_to_record(tx: Transaction) -> dict[str, Any]:
    """Convert a transaction to a JSON-compatible dict."""
    return {
        "type": tx.kind.value,
        "amount": tx.amount,
        "date": tx.occurred_on.isoformat(),
    }


def account_to_record(account: Account) -> dict[str, Any]:
    """Convert an account to a JSON-compatible dict."""
    return {
        "accountID": account.account_id,
        "name": account.name,
        "pin": account.pin,
        "balance": account.balance,
        "transactions": [transaction_to_record(tx) for tx in account.transactions],
    }


def transaction_from_record(record: Any) -> Transaction:
    """Build a transaction from a stored record.

    Raises
    ------
    CorruptStoreError
        If the record is missing fields or holds values of the wrong type.
    """
    if not isinstance(record, dict):
        raise CorruptStoreError(f"Transaction record must be an object, got {type(record).__name__}")
    try:
        kind = TransactionKind(record["type"])
        amount = _require_int(record["amount"], "amount")
        occurred_on = date.fromisoformat(record["date"])
    except (KeyError, TypeError, ValueError) as exc:
        raise CorruptStoreError(f"Malformed transaction record {record!r}: {exc}") from exc

    if amount <= 0:
        raise CorruptStoreError(f"Transaction amount must be positive, got {amount}")

    return Transaction(kind=kind, amount=amount, occurred_on=occurred_on)


def account_from_record(record: Any) -> Account:
    """Build an account from a stored record.

    Raises
    ------
    CorruptStoreError
        If the record is missing fields or holds values of the wrong type.
    """
    if not isinstance(record, dict):
        raise CorruptStoreError(f"Account record must be an object, got {type(record).__name__}")
    try:
        account_id = _require_str(record["accountID"], "accountID")
        name = _require_str(record["name"], "name")
        pin = record["pin"]
        balance = _require_int(record["balance"], "balance")
        raw_transactions = record.get("transactions", [])
    except KeyError as exc:
        raise CorruptStoreError(f"Account record missing field {exc}") from exc
    except (TypeError, ValueError) as exc:
        raise CorruptStoreError(f"Malformed account record: {exc}") from exc

    # Older files may hold the PIN as a bare number
    if isinstance(pin, int) and not isinstance(pin, bool):
        pin = str(pin)
    if not isinstance(pin, str):
        raise CorruptStoreError(f"Account {account_id} has a malformed pin")
    if balance < 0:
        raise CorruptStoreError(f"Account {account_id} has a negative balance")
    if not isinstance(raw_transactions, list):
        raise CorruptStoreError(f"Account {account_id} transactions must be a list")

    return Account(
        account_id=account_id,
        name=name,
        pin=pin,
        balance=balance,
        transactions=[transaction_from_record(tx) for tx in raw_transactions],
    )


def _require_str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string")
    return value


def _require_int(value: Any, key: str) -> int:
    # bool is an int subclass, reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{key} must be an integer")
    return value

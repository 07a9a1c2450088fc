"""Balance and history operations on authenticated accounts.

Each operation either completes fully (balance, history and store all
updated) or leaves the account exactly as it was.
"""

from datetime import date
from typing import Callable

from atm_ledger.exceptions import InsufficientFundsError, InvalidAmountError
from atm_ledger.logging import get_logger
from atm_ledger.models import Account, Transaction, TransactionKind
from atm_ledger.registry import AccountRegistry

logger = get_logger(__name__)


def parse_amount(raw: int | str) -> int:
    """Parse a user-supplied amount into a positive whole number.

    Fractional and malformed input is rejected rather than truncated.

    Raises
    ------
    InvalidAmountError
        If ``raw`` is not a positive integer or a string of digits.
    """
    if isinstance(raw, bool):
        raise InvalidAmountError(f"Invalid amount: {raw!r}")

    if isinstance(raw, int):
        amount = raw
    elif isinstance(raw, str):
        text = raw.strip()
        if not (text.isascii() and text.isdigit()):
            raise InvalidAmountError(f"Invalid amount: {raw!r}")
        try:
            amount = int(text)
        except ValueError as exc:
            # Beyond the interpreter's integer string conversion limit
            raise InvalidAmountError(f"Invalid amount: {len(text)} digit number") from exc
    else:
        raise InvalidAmountError(f"Invalid amount: {raw!r}")

    if amount <= 0:
        raise InvalidAmountError(f"Amount must be positive, got {amount}")
    return amount


class LedgerEngine:
    """Apply deposits and withdrawals to accounts held by a registry.

    Parameters
    ----------
    registry : AccountRegistry
        Source of accounts and the store to persist them to.
    clock : Callable[[], date]
        Returns "today" for new transactions.
    """

    def __init__(
        self,
        registry: AccountRegistry,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self.registry = registry
        self.clock = clock

    def check_balance(self, account_id: str, pin: str) -> int:
        return self.registry.authenticate(account_id, pin).balance

    def deposit(self, account_id: str, pin: str, amount: int | str) -> int:
        """Add ``amount`` to the balance and return the new balance."""
        value = parse_amount(amount)
        account = self.registry.authenticate(account_id, pin)
        self._apply(account, TransactionKind.DEPOSIT, value)
        return account.balance

    def withdraw(self, account_id: str, pin: str, amount: int | str) -> int:
        """Take ``amount`` from the balance and return the new balance.

        Raises
        ------
        InsufficientFundsError
            If ``amount`` exceeds the balance. Nothing is changed.
        """
        value = parse_amount(amount)
        account = self.registry.authenticate(account_id, pin)
        if value > account.balance:
            logger.warning(
                "Declined withdrawal of %d from %s with balance %d",
                value,
                account.account_id,
                account.balance,
            )
            raise InsufficientFundsError(balance=account.balance, requested=value)
        self._apply(account, TransactionKind.WITHDRAWAL, value)
        return account.balance

    def history(self, account_id: str, pin: str) -> list[Transaction]:
        """Return the account's transactions, oldest first."""
        return list(self.registry.authenticate(account_id, pin).transactions)

    def _apply(self, account: Account, kind: TransactionKind, amount: int) -> None:
        tx = Transaction(kind=kind, amount=amount, occurred_on=self.clock())
        previous_balance = account.balance

        account.balance = previous_balance + tx.signed_amount
        account.transactions.append(tx)
        try:
            self.registry.persist()
        except Exception:
            account.balance = previous_balance
            account.transactions.pop()
            raise

        logger.info(
            "%s of %d on %s, balance %d",
            kind.value.capitalize(),
            amount,
            account.account_id,
            account.balance,
        )

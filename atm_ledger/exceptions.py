"""Custom exception hierarchy for atm-ledger."""


class LedgerError(Exception):
    """Base exception for all atm-ledger errors."""


class StoreUnavailableError(LedgerError):
    """Raised when the account store cannot be read or written."""


class CorruptStoreError(StoreUnavailableError):
    """Raised when the account store content is not well-formed."""


class AccountNotFoundError(LedgerError):
    """Raised when no account matches an identifier and PIN pair."""


class AuthenticationError(AccountNotFoundError):
    """Raised when credentials do not authenticate exactly one account."""


class InvalidAmountError(LedgerError):
    """Raised when an amount is not a positive whole number."""


class InsufficientFundsError(LedgerError):
    """Raised when a withdrawal exceeds the account balance."""

    def __init__(self, balance: int, requested: int) -> None:
        super().__init__(f"Requested {requested} exceeds balance {balance}")
        self.balance = balance
        self.requested = requested


class EmptyAnswerError(LedgerError):
    """Raised when an interactive prompt receives no answer."""


class InvalidEntityStateError(LedgerError):
    """Raised when an entity is in an invalid state for the operation."""


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""

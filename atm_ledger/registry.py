"""Account registration and authentication."""

from atm_ledger.exceptions import AuthenticationError, InvalidEntityStateError
from atm_ledger.generators import IdentifierGenerator, PinGenerator
from atm_ledger.logging import get_logger
from atm_ledger.models import Account
from atm_ledger.store import AccountStore

logger = get_logger(__name__)


class AccountRegistry:
    """Resident copy of the account collection plus the store behind it.

    The full collection is loaded once at construction and every
    mutation is written back with ``persist``.

    Authentication compares plaintext PINs with ``==`` and applies no
    lockout or rate limiting. This is the legacy behavior, kept so
    existing ``users.json`` files keep working.
    """

    def __init__(
        self,
        store: AccountStore,
        identifiers: IdentifierGenerator | None = None,
        credentials: PinGenerator | None = None,
    ) -> None:
        self.store = store
        self.identifiers = identifiers or IdentifierGenerator()
        self.credentials = credentials or PinGenerator()
        self.accounts: list[Account] = store.load_all()

    def register(self, name: str) -> Account:
        """Create, persist and return a new zero-balance account.

        The returned account carries the generated PIN. It is not
        recoverable through any other operation.

        Raises
        ------
        InvalidEntityStateError
            If ``name`` is blank.
        StoreUnavailableError
            If the store cannot be written. The account is not kept.
        """
        name = name.strip()
        if not name:
            raise InvalidEntityStateError("Account name must not be empty")

        account = Account(
            account_id=self.identifiers.next(self.accounts),
            name=name,
            pin=self.credentials.generate(),
        )

        self.accounts.append(account)
        try:
            self.persist()
        except Exception:
            self.accounts.pop()
            raise

        logger.info("Registered account %s", account.account_id)
        return account

    def authenticate(self, account_id: str, pin: str) -> Account:
        """Return the single account matching both credentials.

        Raises
        ------
        AuthenticationError
            If zero or more than one account matches.
        """
        matches = [account for account in self.accounts if account.matches(account_id, pin)]
        if len(matches) != 1:
            logger.warning("Authentication failed for account %s", account_id)
            raise AuthenticationError(f"No account matches {account_id} with the given PIN")
        return matches[0]

    def persist(self) -> None:
        """Write the resident collection back to the store."""
        self.store.save_all(self.accounts)

"""JSON file account store."""

import json
import os
import tempfile
from pathlib import Path
from typing import Sequence

from atm_ledger.exceptions import CorruptStoreError, StoreUnavailableError
from atm_ledger.logging import get_logger
from atm_ledger.models import Account
from atm_ledger.store.serialization import account_from_record, account_to_record

logger = get_logger(__name__)


class JsonFileAccountStore:
    """Persist all accounts as one JSON array in a single file."""

    def __init__(self, path: str | Path, pretty: bool = True) -> None:
        """Initialize JSON file store.

        Parameters
        ----------
        path : str | Path
            File holding the account records. A missing file is an
            empty store; it is created on the first save.
        pretty : bool
            Indent the JSON output.
        """
        self.path = Path(path)
        self.pretty = pretty

    def load_all(self) -> list[Account]:
        """Read every account from the file.

        Raises
        ------
        StoreUnavailableError
            If the file cannot be read.
        CorruptStoreError
            If the file is not a JSON array of well-formed account records.
        """
        if not self.path.exists():
            logger.debug("Store %s does not exist yet, starting empty", self.path)
            return []

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except ValueError as exc:
            # JSONDecodeError, bad encoding, or an integer too long to convert
            raise CorruptStoreError(f"Store {self.path} is not valid JSON: {exc}") from exc
        except OSError as exc:
            raise StoreUnavailableError(f"Cannot read store {self.path}: {exc}") from exc

        if not isinstance(data, list):
            raise CorruptStoreError(f"Store {self.path} must hold a JSON array of accounts")

        accounts = [account_from_record(record) for record in data]
        for account in accounts:
            if account.balance != account.computed_balance():
                logger.warning(
                    "Account %s balance %d differs from its history total %d",
                    account.account_id,
                    account.balance,
                    account.computed_balance(),
                )

        logger.debug("Loaded %d accounts from %s", len(accounts), self.path)
        return accounts

    def save_all(self, accounts: Sequence[Account]) -> None:
        """Overwrite the file with ``accounts``.

        The data is written to a temporary file next to the target and
        moved into place, so the file always holds a complete collection.

        Raises
        ------
        StoreUnavailableError
            If the file cannot be written.
        """
        data = [account_to_record(account) for account in accounts]
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                else:
                    json.dump(data, f, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except (OSError, ValueError, TypeError) as exc:
            raise StoreUnavailableError(f"Cannot write store {self.path}: {exc}") from exc
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        logger.debug("Saved %d accounts to %s", len(data), self.path)

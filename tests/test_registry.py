"""Tests for account registration and authentication."""

from unittest.mock import patch

import pytest

from atm_ledger.exceptions import (
    AccountNotFoundError,
    AuthenticationError,
    InvalidEntityStateError,
    StoreUnavailableError,
)
from atm_ledger.models import Account
from atm_ledger.registry import AccountRegistry
from atm_ledger.store import InMemoryAccountStore, JsonFileAccountStore


class TestRegister:
    """Tests for AccountRegistry.register."""

    def test_first_account(self, registry: AccountRegistry) -> None:
        account = registry.register("Ana")

        assert account.account_id == "ACC1001"
        assert account.name == "Ana"
        assert account.balance == 0
        assert account.transactions == []
        assert len(account.pin) == 4
        assert 1000 <= int(account.pin) <= 9999

    def test_identifiers_increase(self, registry: AccountRegistry) -> None:
        ids = [registry.register(name).account_id for name in ("Ana", "Bo", "Cy")]

        assert ids == ["ACC1001", "ACC1002", "ACC1003"]

    def test_register_persists(
        self, registry: AccountRegistry, memory_store: InMemoryAccountStore
    ) -> None:
        account = registry.register("Ana")

        assert memory_store.load_all() == [account]

    def test_name_is_stripped(self, registry: AccountRegistry) -> None:
        assert registry.register("  Ana  ").name == "Ana"

    def test_blank_name_rejected(
        self, registry: AccountRegistry, memory_store: InMemoryAccountStore
    ) -> None:
        with pytest.raises(InvalidEntityStateError):
            registry.register("   ")

        assert registry.accounts == []
        assert memory_store.save_count == 0

    def test_continues_from_existing_store(self) -> None:
        store = InMemoryAccountStore(
            [Account(account_id="ACC1007", name="Existing", pin="1111")]
        )
        registry = AccountRegistry(store)

        assert registry.register("Ana").account_id == "ACC1008"

    def test_failed_save_discards_account(
        self, registry: AccountRegistry, memory_store: InMemoryAccountStore
    ) -> None:
        with patch.object(memory_store, "save_all", side_effect=StoreUnavailableError("down")):
            with pytest.raises(StoreUnavailableError):
                registry.register("Ana")

        assert registry.accounts == []
        assert registry.register("Ana").account_id == "ACC1001"

    def test_reload_from_json_file(self, json_store: JsonFileAccountStore) -> None:
        account = AccountRegistry(json_store).register("Ana")

        reloaded = AccountRegistry(json_store)

        assert reloaded.accounts == [account]


class TestAuthenticate:
    """Tests for AccountRegistry.authenticate."""

    def test_matching_credentials(self, registry: AccountRegistry) -> None:
        account = registry.register("Ana")

        assert registry.authenticate(account.account_id, account.pin) is account

    def test_wrong_pin(self, registry: AccountRegistry) -> None:
        account = registry.register("Ana")
        wrong_pin = account.pin[:-1] + ("0" if account.pin[-1] != "0" else "1")

        with pytest.raises(AuthenticationError):
            registry.authenticate(account.account_id, wrong_pin)

    def test_wrong_identifier(self, registry: AccountRegistry) -> None:
        account = registry.register("Ana")

        with pytest.raises(AccountNotFoundError):
            registry.authenticate("ACC1002", account.pin)

    def test_comparison_is_exact(self, registry: AccountRegistry) -> None:
        account = registry.register("Ana")

        with pytest.raises(AuthenticationError):
            registry.authenticate(account.account_id.lower(), account.pin)
        with pytest.raises(AuthenticationError):
            registry.authenticate(account.account_id, f" {account.pin}")

    def test_empty_registry(self, registry: AccountRegistry) -> None:
        with pytest.raises(AuthenticationError):
            registry.authenticate("ACC1001", "1234")

    def test_shared_pin_is_harmless(self) -> None:
        store = InMemoryAccountStore(
            [
                Account(account_id="ACC1001", name="Ana", pin="1234"),
                Account(account_id="ACC1002", name="Bo", pin="1234"),
            ]
        )
        registry = AccountRegistry(store)

        assert registry.authenticate("ACC1002", "1234").name == "Bo"

    def test_duplicate_records_do_not_authenticate(self) -> None:
        store = InMemoryAccountStore(
            [
                Account(account_id="ACC1001", name="Ana", pin="1234"),
                Account(account_id="ACC1001", name="Copy", pin="1234"),
            ]
        )
        registry = AccountRegistry(store)

        with pytest.raises(AuthenticationError):
            registry.authenticate("ACC1001", "1234")

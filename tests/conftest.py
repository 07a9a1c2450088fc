"""Pytest configuration and fixtures."""

from datetime import date
from pathlib import Path

import pytest

from atm_ledger.generators import IdentifierGenerator, PinGenerator
from atm_ledger.ledger import LedgerEngine
from atm_ledger.registry import AccountRegistry
from atm_ledger.store import InMemoryAccountStore, JsonFileAccountStore


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def today() -> date:
    """Fixed transaction date."""
    return date(2024, 3, 15)


@pytest.fixture
def memory_store() -> InMemoryAccountStore:
    """Empty in-memory account store."""
    return InMemoryAccountStore()


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Location for a JSON account store inside a temporary directory."""
    return tmp_path / "users.json"


@pytest.fixture
def json_store(store_path: Path) -> JsonFileAccountStore:
    """JSON file account store that does not exist on disk yet."""
    return JsonFileAccountStore(store_path)


@pytest.fixture
def registry(memory_store: InMemoryAccountStore, seed: int) -> AccountRegistry:
    """Registry over an empty in-memory store."""
    return AccountRegistry(
        memory_store,
        identifiers=IdentifierGenerator(),
        credentials=PinGenerator(seed=seed),
    )


@pytest.fixture
def engine(registry: AccountRegistry, today: date) -> LedgerEngine:
    """Ledger engine with a fixed clock."""
    return LedgerEngine(registry, clock=lambda: today)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by setup_logging."""
    import logging

    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)

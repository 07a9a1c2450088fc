"""Configuration management for atm-ledger."""

from dataclasses import dataclass, field
from pathlib import Path

from atm_ledger.exceptions import ConfigurationError


@dataclass
class StoreConfig:
    """Account store configuration."""

    path: Path = field(default_factory=lambda: Path("users.json"))
    pretty_json: bool = True


@dataclass
class IdentifierConfig:
    """Account identifier format."""

    prefix: str = "ACC"
    base: int = 1001


@dataclass
class LedgerConfig:
    """Main configuration for atm-ledger."""

    store: StoreConfig = field(default_factory=StoreConfig)
    identifiers: IdentifierConfig = field(default_factory=IdentifierConfig)
    log_level: str = "WARNING"
    log_format: str = "standard"
    seed: int | None = None

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        import os

        store = StoreConfig(
            path=Path(os.getenv("ATM_STORE_PATH", "users.json")),
            pretty_json=os.getenv("ATM_PRETTY_JSON", "true").lower() == "true",
        )

        identifiers = IdentifierConfig(
            prefix=os.getenv("ATM_ACCOUNT_PREFIX", "ACC"),
            base=_env_int("ATM_ACCOUNT_BASE", "1001"),
        )

        seed = _env_int("SEED", None) if os.getenv("SEED") else None

        return cls(
            store=store,
            identifiers=identifiers,
            log_level=os.getenv("LOG_LEVEL", "WARNING"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            seed=seed,
        )


def _env_int(name: str, default: str | None) -> int:
    import os

    raw = os.getenv(name, default)
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc

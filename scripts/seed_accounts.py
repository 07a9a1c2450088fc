#!/usr/bin/env python3
"""Seed an account store with demo holders.

Registers fake account holders and runs a few deposits and withdrawals
through the ledger engine, so the resulting file can be used to try the
``atm-ledger`` menu.
"""

import argparse
import random
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from atm_ledger.generators import HolderGenerator, PinGenerator
from atm_ledger.ledger import LedgerEngine
from atm_ledger.logging import setup_logging
from atm_ledger.registry import AccountRegistry
from atm_ledger.store import JsonFileAccountStore


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed an atm-ledger account store")
    parser.add_argument("--store", default="users.json", help="Accounts JSON file")
    parser.add_argument("--accounts", type=int, default=5, help="Number of holders to add")
    parser.add_argument("--operations", type=int, default=4, help="Operations per holder")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--log-level", default="INFO", help="Log level")
    return parser.parse_args()


def main() -> None:
    """Register holders and apply random operations."""
    args = parse_args()
    setup_logging(level=args.log_level)
    rng = random.Random(args.seed)

    registry = AccountRegistry(
        JsonFileAccountStore(args.store),
        credentials=PinGenerator(seed=args.seed),
    )
    engine = LedgerEngine(registry)
    holders = HolderGenerator(seed=args.seed)

    print("=" * 60)
    print(f"Seeding {args.accounts} accounts into {args.store}")
    print("=" * 60)

    for _ in range(args.accounts):
        account = registry.register(holders.generate())
        for _ in range(args.operations):
            amount = rng.randint(10, 500)
            # Withdraw only what the account can cover
            if rng.random() < 0.6 or amount > account.balance:
                engine.deposit(account.account_id, account.pin, amount)
            else:
                engine.withdraw(account.account_id, account.pin, amount)
        print(
            f"{account.account_id:10} PIN {account.pin}  "
            f"balance {account.balance:>6}  {account.name}"
        )

    print(f"\nStore now holds {len(registry.accounts)} accounts")


if __name__ == "__main__":
    main()

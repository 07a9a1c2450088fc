"""Terminal front end: prompts, the ATM menu loop and the ``atm-ledger`` command."""

import argparse
import sys
from pathlib import Path
from typing import Callable

from atm_ledger.config import LedgerConfig
from atm_ledger.exceptions import (
    AccountNotFoundError,
    EmptyAnswerError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidEntityStateError,
    LedgerError,
    StoreUnavailableError,
)
from atm_ledger.generators import IdentifierGenerator, PinGenerator
from atm_ledger.ledger import LedgerEngine, parse_amount
from atm_ledger.logging import get_logger, setup_logging
from atm_ledger.models import Account, MenuChoice, SessionState
from atm_ledger.registry import AccountRegistry
from atm_ledger.store import JsonFileAccountStore

logger = get_logger(__name__)

MENU = (
    "***Menu***\n"
    " 1. Checking Balance\n"
    " 2. Depositing Money\n"
    " 3. Withdrawing Money\n"
    " 4. Viewing Transaction History\n"
    " 5. Exit \n"
    " make your choice: "
)


class Prompter:
    """Ask questions on a line-oriented terminal."""

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
    ) -> None:
        self.input_func = input_func
        self.output_func = output_func

    def ask(self, question: str, strip: bool = True) -> str:
        """Return the answer to ``question``.

        Credentials are asked with ``strip=False`` so they are compared
        exactly as typed.

        Raises
        ------
        EmptyAnswerError
            If the answer is empty or input is exhausted.
        """
        try:
            answer = self.input_func(question)
        except EOFError as exc:
            raise EmptyAnswerError("you have to answer the question") from exc

        if not answer.strip():
            raise EmptyAnswerError("you have to answer the question")
        return answer.strip() if strip else answer

    def say(self, message: str) -> None:
        self.output_func(message)


class AtmSession:
    """One authenticated run of the ATM menu."""

    def __init__(
        self,
        registry: AccountRegistry,
        engine: LedgerEngine,
        prompter: Prompter | None = None,
    ) -> None:
        self.registry = registry
        self.engine = engine
        self.prompter = prompter or Prompter()
        self.state = SessionState.IDLE
        self.account_id: str | None = None
        self.pin: str | None = None
        self._handlers: dict[MenuChoice, tuple[SessionState, Callable[[], None]]] = {
            MenuChoice.CHECK_BALANCE: (SessionState.QUERYING, self.check_balance),
            MenuChoice.DEPOSIT: (SessionState.DEPOSITING, self.deposit),
            MenuChoice.WITHDRAW: (SessionState.WITHDRAWING, self.withdraw),
            MenuChoice.HISTORY: (SessionState.REVIEWING, self.history),
        }

    def authenticate(self) -> Account | None:
        """Prompt for credentials. Returns None when they are rejected."""
        self.prompter.say("Welcome to the authentication system.")
        try:
            account_id = self.prompter.ask("Enter your account ID: ", strip=False)
            pin = self.prompter.ask("Enter your PIN: ", strip=False)
        except EmptyAnswerError as exc:
            self.prompter.say(f"Error occurred during authentication: {exc}")
            return None

        try:
            account = self.registry.authenticate(account_id, pin)
        except AccountNotFoundError:
            self.prompter.say("Authentication failed. Please check your credentials.")
            return None

        self.account_id = account_id
        self.pin = pin
        logger.info("Session opened for %s", account_id)
        return account

    def run(self) -> int:
        """Authenticate, then serve menu choices until exit. Returns an exit status."""
        if self.authenticate() is None:
            self.state = SessionState.CLOSED
            return 1

        while True:
            try:
                answer = self.prompter.ask(MENU)
            except EmptyAnswerError as exc:
                self.prompter.say(f"Error occurred in the menu: {exc}")
                break

            try:
                choice = MenuChoice(answer)
            except ValueError:
                self.prompter.say("Invalid choice.")
                continue

            if choice == MenuChoice.EXIT:
                break

            state, handler = self._handlers[choice]
            self.state = state
            try:
                handler()
            except LedgerError as exc:
                self._report(exc)
            finally:
                self.state = SessionState.IDLE

        self.state = SessionState.CLOSED
        logger.info("Session closed for %s", self.account_id)
        return 0

    def check_balance(self) -> None:
        balance = self.engine.check_balance(self.account_id, self.pin)
        account = self.registry.authenticate(self.account_id, self.pin)
        self.prompter.say(f"Hello {account.name}, your balance is {balance}")

    def deposit(self) -> None:
        amount = parse_amount(self.prompter.ask("Enter the amount you want to deposit: "))
        balance = self.engine.deposit(self.account_id, self.pin, amount)
        self.prompter.say(f"Deposit of ${amount} successful.")
        self.prompter.say(f"New balance: ${balance}")

    def withdraw(self) -> None:
        amount = parse_amount(self.prompter.ask("Enter the amount you want to withdraw: "))
        balance = self.engine.withdraw(self.account_id, self.pin, amount)
        self.prompter.say(f"Withdrawal of ${amount} successful.")
        self.prompter.say(f"New balance: ${balance}")

    def history(self) -> None:
        transactions = self.engine.history(self.account_id, self.pin)
        if not transactions:
            self.prompter.say("No transaction history available.")
            return

        account = self.registry.authenticate(self.account_id, self.pin)
        self.prompter.say(f"Transaction history for {account.name}:")
        for tx in transactions:
            self.prompter.say(
                f"Type: {tx.kind.value}, Amount: ${tx.amount}, "
                f"Date: {tx.occurred_on.isoformat()}"
            )

    def _report(self, exc: LedgerError) -> None:
        if isinstance(exc, InsufficientFundsError):
            self.prompter.say("Insufficient balance.")
        elif isinstance(exc, InvalidAmountError):
            self.prompter.say("Invalid amount.")
        elif isinstance(exc, AccountNotFoundError):
            self.prompter.say("User not found.")
        elif isinstance(exc, StoreUnavailableError):
            logger.error("Store failure during %s: %s", self.state.value, exc)
            self.prompter.say(f"Could not save your changes: {exc}")
        else:
            self.prompter.say(f"Error occurred: {exc}")


def register(registry: AccountRegistry, prompter: Prompter) -> Account:
    """Prompt for a display name and create an account.

    The new PIN is printed here once and cannot be shown again.
    """
    name = prompter.ask("Enter your name:")
    account = registry.register(name)
    prompter.say("User added successfully.")
    prompter.say(f"Your account ID is {account.account_id} and your PIN is {account.pin}")
    return account


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="atm-ledger",
        description="Terminal account ledger: check balance, deposit, withdraw, view history.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=["login", "register"],
        default="login",
        help="login to an existing account (default) or register a new one",
    )
    parser.add_argument("--store", default=None, help="Path to the accounts JSON file")
    parser.add_argument("--log-level", default=None, help="Log level (default: WARNING)")
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default=None,
        help="Log output format",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for PIN generation")
    return parser


def main(argv: list[str] | None = None, prompter: Prompter | None = None) -> int:
    """Entry point for the ``atm-ledger`` command. Returns an exit status."""
    args = build_parser().parse_args(argv)

    try:
        config = LedgerConfig.from_env()
    except LedgerError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    if args.store is not None:
        config.store.path = Path(args.store)
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_format is not None:
        config.log_format = args.log_format
    if args.seed is not None:
        config.seed = args.seed

    setup_logging(level=config.log_level, format_type=config.log_format)
    prompter = prompter or Prompter()

    try:
        registry = AccountRegistry(
            JsonFileAccountStore(config.store.path, pretty=config.store.pretty_json),
            identifiers=IdentifierGenerator(
                prefix=config.identifiers.prefix,
                base=config.identifiers.base,
            ),
            credentials=PinGenerator(seed=config.seed),
        )

        if args.command == "register":
            try:
                register(registry, prompter)
            except (EmptyAnswerError, InvalidEntityStateError) as exc:
                prompter.say(f"Error occurred during registration: {exc}")
                return 1
            return 0

        return AtmSession(registry, LedgerEngine(registry), prompter).run()
    except StoreUnavailableError as exc:
        logger.error("Account store unavailable: %s", exc)
        prompter.say(f"Account store unavailable: {exc}")
        return 1
    except Exception:
        logger.exception("Unexpected error, aborting")
        return 2

"""Enumeration types for ledger entities and the interactive session."""

from enum import Enum


class TransactionKind(str, Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"


class MenuChoice(str, Enum):
    CHECK_BALANCE = "1"
    DEPOSIT = "2"
    WITHDRAW = "3"
    HISTORY = "4"
    EXIT = "5"


class SessionState(str, Enum):
    IDLE = "IDLE"
    QUERYING = "QUERYING"
    DEPOSITING = "DEPOSITING"
    WITHDRAWING = "WITHDRAWING"
    REVIEWING = "REVIEWING"
    CLOSED = "CLOSED"

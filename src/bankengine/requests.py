# src/bankengine/requests.py
"""Request kinds and the records queued until the end of an epoch."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from bankengine.typing import AccountKey, Amount

__all__ = ["RequestType", "PendingLoan", "PendingOperation", "DEFERRED_OPERATIONS"]


class RequestType(Enum):
    """Type of action requested to the bank."""

    OPEN_ACCOUNT = "open_account"
    CLOSE_ACCOUNT = "close_account"
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"
    LOAN = "loan"


# Requests that wait for `Bank.commit_operations`
DEFERRED_OPERATIONS = frozenset({RequestType.WITHDRAW, RequestType.CLOSE_ACCOUNT})


@dataclass(slots=True, frozen=True)
class PendingLoan:
    """Loan of *amount* requested by account *key* during the current epoch."""

    key: AccountKey
    amount: Amount = 0


@dataclass(slots=True, frozen=True)
class PendingOperation:
    """Withdrawal or closure requested by account *key* during the current epoch."""

    key: AccountKey
    kind: RequestType
    amount: Amount = 0

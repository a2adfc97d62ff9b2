"""
bankengine - Batch admission control for a simulated bank
=========================================================

bankengine decides, once per epoch, whether a whole batch of pending
requests (loans, withdrawals, account closures) can be served from the
bank's treasury without ever driving it negative. A batch is applied in
full or discarded in full; the decision for loans follows a banker's
algorithm style greedy simulation.

Quick Start
-----------
>>> import bankengine as be
>>> bank = be.Bank(initial_treasury=0, loan_interest_rate=0.01)
>>> bank.request(42, be.RequestType.OPEN_ACCOUNT, 10_000)
>>> bank.request(42, be.RequestType.LOAN, 5_000)
>>> bank.request(42, be.RequestType.WITHDRAW, 2_000)
>>> result = bank.end_epoch()
>>> result.loans_accepted, result.operations_accepted
(True, True)

Configuration via YAML file and keyword overrides:

>>> bank = be.Bank.init(config="my_bank.yml", loan_interest_rate=0.05)

Key Concepts
------------
**Immediate requests**
  OPEN_ACCOUNT and DEPOSIT change the treasury and the account table at once.

**Deferred requests**
  WITHDRAW, CLOSE_ACCOUNT and LOAN are queued until the end of the epoch.

**Safety checks**
  `commit_loans` and `commit_operations` evaluate their whole queue on
  scratch state; an UNSAFE verdict returns False and leaves every balance
  and the treasury untouched.

Public API
----------
Bank
    The admission engine.
RequestType
    Kinds of request accepted by `Bank.request`.
HashMap, OrderedList
    Generic containers backing the bank.
Config, ConfigValidator
    Configuration dataclass and validation.
logging
    Custom logging with DEEP_DEBUG level.

See Also
--------
bankengine.safety : The loan and operation safety checks
defaults.yml : Default configuration parameters
"""

from __future__ import annotations

__version__: str = "0.1.0"

from . import logging  # noqa: E402 (must be first to install BankLogger)
from .bank import Bank  # noqa: E402
from .config import Config, ConfigValidator  # noqa: E402
from .containers import HashMap, OrderedList, OrderedListView  # noqa: E402
from .errors import (  # noqa: E402
    BankEngineError,
    ConfigurationError,
    IndexOutOfRange,
    KeyNotFound,
    ValueNotFound,
)
from .requests import PendingLoan, PendingOperation, RequestType  # noqa: E402
from .results import EpochResult, EpochStats  # noqa: E402
from .safety import (  # noqa: E402
    LoanSimulation,
    loans_are_safe,
    operations_are_safe,
    simulate_loan_grants,
)

__all__ = [
    "__version__",
    # Engine
    "Bank",
    "RequestType",
    "PendingLoan",
    "PendingOperation",
    "EpochResult",
    "EpochStats",
    # Safety checks
    "LoanSimulation",
    "simulate_loan_grants",
    "loans_are_safe",
    "operations_are_safe",
    # Containers
    "HashMap",
    "OrderedList",
    "OrderedListView",
    # Configuration
    "Config",
    "ConfigValidator",
    # Errors
    "BankEngineError",
    "ConfigurationError",
    "KeyNotFound",
    "IndexOutOfRange",
    "ValueNotFound",
    # Utilities
    "logging",
]

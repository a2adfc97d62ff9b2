# src/bankengine/bank.py
"""
Bank: batch admission control over a shared treasury.

Requests arrive during an epoch. Openings and deposits take effect at
once; withdrawals, closures and loans are queued. At the end of the epoch
each queue is checked as a whole by `bankengine.safety` and either every
queued effect is applied or none is. The queue is drained in both cases.

One epoch, issued serially by a single caller::

    bank.request(...)            # zero or more
    bank.commit_loans()
    bank.commit_operations()
    bank.accrue_interest()

`end_epoch` runs the last three steps in that order.

Arithmetic
----------
Treasury and balances are integers. Float updates (interest) are computed
in float and truncated toward zero, like assigning a double to an
unsigned 64-bit integer.
"""

from __future__ import annotations

import logging
import operator
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from bankengine import logging as _logging
from bankengine.config import Config, ConfigValidator
from bankengine.containers import (
    DEFAULT_BUCKET_CAPACITY,
    HashMap,
    OrderedList,
    OrderedListView,
)
from bankengine.errors import ConfigurationError, KeyNotFound
from bankengine.requests import (
    DEFERRED_OPERATIONS,
    PendingLoan,
    PendingOperation,
    RequestType,
)
from bankengine.results import EpochResult, EpochStats
from bankengine.safety import operations_are_safe, operations_need, simulate_loan_grants
from bankengine.typing import AMOUNT_MAX, AccountKey, Amount

__all__ = ["Bank"]

log = _logging.getLogger(__name__)


# helpers
# ---------------------------------------------------------------------------
def _read_yaml(obj: str | Path | Mapping[str, Any] | None) -> Dict[str, Any]:
    """Return a plain dict – {} if *obj* is None."""
    if obj is None:
        return {}
    if isinstance(obj, Mapping):
        return dict(obj)
    p = Path(obj)
    with p.open("rt", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"config root must be mapping, got {type(data)!r}")
    return dict(data)


def _package_defaults() -> Dict[str, Any]:
    """Load bankengine/defaults.yml"""
    txt = resources.files("bankengine").joinpath("defaults.yml").read_text()
    return yaml.safe_load(txt) or {}


def _checked_amount(amount: object) -> Amount:
    """Return *amount* as a plain int in ``[0, 2**64)`` or raise ValueError."""
    try:
        value = operator.index(amount)  # type: ignore[arg-type]
    except TypeError:
        raise ValueError(
            f"amount must be an integer, got {type(amount).__name__}"
        ) from None
    if not 0 <= value <= AMOUNT_MAX:
        raise ValueError(f"amount must be in [0, {AMOUNT_MAX}], got {value}")
    return value


# Bank
# ---------------------------------------------------------------------------
class Bank:
    """
    Treasury, accounts and the pending queues of the current epoch.

    Parameters
    ----------
    initial_treasury : int, default 0
        Treasury before any request.
    loan_interest_rate : float, default 0.1
        Share of each granted loan retained by the bank. Must be >= 0.
    deposit_interest_rate : float, default 0.005
        Per-epoch interest credited to every account. Must be >= 0.
    bucket_capacity : int, default 65536
        Number of chains of the account table.

    Raises
    ------
    ConfigurationError
        If a parameter is negative or has the wrong type.

    Examples
    --------
    >>> from bankengine import Bank, RequestType
    >>> bank = Bank(initial_treasury=100, loan_interest_rate=0.1)
    >>> bank.request(1, RequestType.LOAN, 100)
    >>> bank.request(2, RequestType.LOAN, 60)
    >>> bank.commit_loans()
    True
    >>> bank.treasury
    116
    """

    __slots__ = (
        "config",
        "stats",
        "_treasury",
        "_accounts",
        "_pending_loans",
        "_pending_operations",
    )

    def __init__(
        self,
        initial_treasury: Amount = 0,
        loan_interest_rate: float = 0.1,
        deposit_interest_rate: float = 0.005,
        *,
        bucket_capacity: int = DEFAULT_BUCKET_CAPACITY,
    ) -> None:
        ConfigValidator.validate_config(
            {
                "initial_treasury": initial_treasury,
                "loan_interest_rate": loan_interest_rate,
                "deposit_interest_rate": deposit_interest_rate,
                "bucket_capacity": bucket_capacity,
            }
        )
        self.config = Config(
            initial_treasury=initial_treasury,
            loan_interest_rate=float(loan_interest_rate),
            deposit_interest_rate=float(deposit_interest_rate),
            bucket_capacity=bucket_capacity,
        )
        self.stats = EpochStats()
        self._treasury: Amount = initial_treasury
        self._accounts: HashMap[Amount] = HashMap(bucket_capacity)
        self._pending_loans: OrderedList[PendingLoan] = OrderedList()
        self._pending_operations: OrderedList[PendingOperation] = OrderedList()

    # Constructor
    # ---------------------------------------------------------------------
    @classmethod
    def init(
        cls,
        config: str | Path | Mapping[str, Any] | None = None,
        **overrides: Any,  # anything here wins last
    ) -> "Bank":
        """
        Build a Bank.

        Order of precedence (later overrides earlier):

            1. package defaults  (bankengine/defaults.yml)
            2. *config*  (Path / str / Mapping / None)
            3. explicit keyword arguments (**overrides)

        An optional ``logging`` section (``default_level`` and per-module
        ``modules`` levels) is applied to the bankengine loggers.
        """
        cfg_dict: Dict[str, Any] = _package_defaults()
        cfg_dict.update(_read_yaml(config))
        cfg_dict.update(overrides)

        ConfigValidator.validate_config(cfg_dict)

        log_config = cfg_dict.pop("logging", None)
        if log_config is not None:
            _logging.configure(log_config)

        return cls(
            cfg_dict["initial_treasury"],
            cfg_dict["loan_interest_rate"],
            cfg_dict["deposit_interest_rate"],
            bucket_capacity=cfg_dict["bucket_capacity"],
        )

    # Requests
    # ---------------------------------------------------------------------
    def request(
        self, key: AccountKey, request_type: RequestType, amount: Amount = 0
    ) -> None:
        """
        Submit a request for account *key*.

        OPEN_ACCOUNT and DEPOSIT are applied immediately; WITHDRAW,
        CLOSE_ACCOUNT and LOAN wait for the matching commit.

        Raises
        ------
        KeyNotFound
            On DEPOSIT to an account that does not exist.
        ValueError
            On OPEN_ACCOUNT with a key outside ``[0, 2**32)``, or when
            *amount* is not an integer in ``[0, 2**64)``.
        """
        amount = _checked_amount(amount)

        if request_type is RequestType.OPEN_ACCOUNT:
            self._accounts.insert(key, amount)
            self._treasury += amount
            log.debug(f"  Opened account {key} with {amount:,}")

        elif request_type is RequestType.DEPOSIT:
            balance = self._accounts.get(key)
            self._accounts[key] = balance + amount
            self._treasury += amount
            log.debug(f"  Deposit of {amount:,} on account {key}")

        elif request_type in DEFERRED_OPERATIONS:
            self._pending_operations.append(PendingOperation(key, request_type, amount))
            log.debug(f"  Queued {request_type.value} of {amount:,} for account {key}")

        elif request_type is RequestType.LOAN:
            self._pending_loans.append(PendingLoan(key, amount))
            log.debug(f"  Queued loan of {amount:,} for account {key}")

        else:
            raise ValueError(f"Unknown request type: {request_type!r}")

    def pending_request_exists(self, key: AccountKey) -> bool:
        """True if *key* has a queued loan or operation."""
        return (
            self._pending_loans.find(lambda loan: loan.key == key) != -1
            or self._pending_operations.find(lambda op: op.key == key) != -1
        )

    def has_pending_loans(self) -> bool:
        return len(self._pending_loans) > 0

    def has_pending_operations(self) -> bool:
        return len(self._pending_operations) > 0

    def pending_loans(self) -> OrderedListView[PendingLoan]:
        """Loans queued in the current epoch (read-only view)."""
        return OrderedListView(self._pending_loans)

    def pending_operations(self) -> OrderedListView[PendingOperation]:
        """Withdrawals and closures queued in the current epoch (read-only view)."""
        return OrderedListView(self._pending_operations)

    # Commits
    # ---------------------------------------------------------------------
    def commit_loans(self) -> bool:
        """
        Grant the whole loan queue if it is safe, otherwise none of it.

        On success only the interest share ``amount * loan_interest_rate``
        of every loan is added to the treasury; the principal is paid out
        to the borrower and is not tracked in any account balance.

        Returns
        -------
        bool
            True if the batch was granted (or the queue was empty).
        """
        if not self._pending_loans:
            return True

        rate = self.config.loan_interest_rate
        try:
            amounts = [loan.amount for loan in self._pending_loans]
            log.info(
                f"--- Committing {len(amounts)} Loan(s) "
                f"(total {sum(amounts):,}, treasury {self._treasury:,}) ---"
            )
            if log.isEnabledFor(logging.DEBUG):
                log.debug(
                    f"  Pending loans (first 10): {list(self._pending_loans)[:10]}"
                )

            simulation = simulate_loan_grants(self._treasury, amounts, rate)
            if simulation.safe:
                for amount in amounts:
                    self._treasury = int(self._treasury + amount * rate)
        finally:
            self._pending_loans.clear()

        log.info(
            f"  Loans {'accepted' if simulation.safe else 'rejected'} after "
            f"{simulation.rounds} round(s); treasury {self._treasury:,}"
        )
        return simulation.safe

    def commit_operations(self) -> bool:
        """
        Pay out the whole withdrawal/closure queue if the treasury covers it.

        Closing an account forfeits any balance beyond the requested amount.
        Effects are staged per account before anything is written, so a
        queued operation on an unknown account raises without partial
        effects.

        Returns
        -------
        bool
            True if the batch was applied (or the queue was empty).

        Raises
        ------
        KeyNotFound
            If a safe batch targets an account that does not exist (or was
            closed earlier in the same batch). Nothing is applied and the
            queue is still drained.
        """
        if not self._pending_operations:
            return True

        try:
            need = operations_need(op.amount for op in self._pending_operations)
            log.info(
                f"--- Committing {len(self._pending_operations)} Operation(s) "
                f"(need {need:,}, treasury {self._treasury:,}) ---"
            )
            if log.isEnabledFor(logging.DEBUG):
                log.debug(
                    f"  Pending operations (first 10): "
                    f"{list(self._pending_operations)[:10]}"
                )

            is_safe = operations_are_safe(
                self._treasury, (op.amount for op in self._pending_operations)
            )
            if is_safe:
                staged = self._stage_operations()
                self._treasury -= need
                for key, balance in staged.items():
                    if balance is None:
                        self._accounts.remove(key)
                    else:
                        self._accounts[key] = balance
        finally:
            self._pending_operations.clear()

        log.info(
            f"  Operations {'accepted' if is_safe else 'rejected'}; "
            f"treasury {self._treasury:,}"
        )
        return is_safe

    def _stage_operations(self) -> dict[AccountKey, Amount | None]:
        """Final balance of every touched account, None meaning closed."""
        staged: dict[AccountKey, Amount | None] = {}
        for op in self._pending_operations:
            if op.key in staged:
                current = staged[op.key]
            else:
                current = self._accounts.get(op.key)
            if current is None:
                raise KeyNotFound(op.key)

            if op.kind is RequestType.CLOSE_ACCOUNT:
                staged[op.key] = None
            else:
                staged[op.key] = current - op.amount
        return staged

    def accrue_interest(self) -> None:
        """Multiply every balance by ``1 + deposit_interest_rate``."""
        factor = 1 + self.config.deposit_interest_rate
        for key in self._accounts.keys():
            self._accounts[key] = int(self._accounts[key] * factor)

    def end_epoch(self) -> EpochResult:
        """
        Close the current epoch.

        Commits loans and operations (only when queued) and accrues deposit
        interest, then records the outcome in `stats`. An operations batch
        naming a missing account counts as rejected; `commit_operations`
        has already discarded it without applying anything.
        """
        loans_ok = self.commit_loans() if self._pending_loans else None
        operations_ok: bool | None = None
        if self._pending_operations:
            try:
                operations_ok = self.commit_operations()
            except KeyNotFound as exc:
                log.warning(f"  Operations rejected: {exc}")
                operations_ok = False
        self.accrue_interest()

        result = EpochResult(
            epoch=self.stats.epochs + 1,
            loans_accepted=loans_ok,
            operations_accepted=operations_ok,
            treasury=self._treasury,
        )
        self.stats.record(result)
        log.info(
            f"Epoch {result.epoch} closed: treasury {self._treasury:,}, "
            f"{len(self._accounts)} account(s)"
        )
        return result

    # Queries
    # ---------------------------------------------------------------------
    @property
    def treasury(self) -> Amount:
        return self._treasury

    def account_balance(self, key: AccountKey) -> Amount:
        """
        Balance of account *key*.

        Raises
        ------
        KeyNotFound
            If the account does not exist.
        """
        return self._accounts.get(key)

    def account_keys(self) -> OrderedListView[AccountKey]:
        """Account keys in opening order (read-only view)."""
        return self._accounts.keys()

    def account_exists(self, key: AccountKey) -> bool:
        return self._accounts.contains(key)

    def account_count(self) -> int:
        return self._accounts.length()

    def total_balance(self) -> Amount:
        """Sum of all account balances."""
        return sum(balance for _, balance in self._accounts.items())

    def __repr__(self) -> str:
        return (
            f"Bank(treasury={self._treasury}, accounts={len(self._accounts)}, "
            f"pending_loans={len(self._pending_loans)}, "
            f"pending_operations={len(self._pending_operations)})"
        )

"""
Configuration dataclass for bank parameters.

Config instances are created by `Bank.__init__` after the parameters have
passed `ConfigValidator`; they are immutable and carry no logic.

See Also
--------
ConfigValidator : Centralized validation for configuration parameters
bankengine.bank.Bank.init : Builds a bank from defaults, YAML and overrides
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class Config:
    """
    Immutable configuration of a Bank.

    Parameters
    ----------
    initial_treasury : int
        Treasury before any request is processed (>= 0).
    loan_interest_rate : float
        Loan interest factor in favor of the bank (>= 0).
    deposit_interest_rate : float
        Deposit interest factor in favor of the depositors (>= 0).
    bucket_capacity : int
        Number of chains of the account table (>= 1).

    Examples
    --------
    >>> from bankengine.config import Config
    >>> cfg = Config(
    ...     initial_treasury=0,
    ...     loan_interest_rate=0.1,
    ...     deposit_interest_rate=0.005,
    ...     bucket_capacity=65536,
    ... )
    >>> cfg.loan_interest_rate
    0.1
    """

    initial_treasury: int
    loan_interest_rate: float
    deposit_interest_rate: float
    bucket_capacity: int = 65536

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

# src/bankengine/safety.py
"""
Safety checks run before a pending batch is committed.

Both checks work on scratch copies of the bank state and never touch the
live treasury.

Loans
-----
Banker's-algorithm style greedy fixpoint. Starting from the treasury ``T``,
each round scans every ungranted request in queue order and grants request
``i`` whenever ``a_i <= B``; a grant returns only the interest to the
working budget::

    B <- trunc(B + a_i * r)

The principal leaves the bank with the borrower. The batch is SAFE once
every request is granted and UNSAFE as soon as a full round grants
nothing. Worst case O(n^2).

Operations
----------
Withdrawals and closures have no interest component, so the batch is SAFE
iff the total payout fits in the treasury::

    sum(a_i) <= T
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from bankengine import logging as _logging
from bankengine.typing import Amount, Bool1D, Rate

log = _logging.getLogger(__name__)

__all__ = [
    "LoanSimulation",
    "simulate_loan_grants",
    "loans_are_safe",
    "operations_need",
    "operations_are_safe",
]


@dataclass(slots=True, frozen=True)
class LoanSimulation:
    """
    Outcome of one loan safety simulation.

    Attributes
    ----------
    safe : bool
        True when every request could be granted.
    granted : Bool1D
        Grant mark per request, in queue order.
    grant_order : tuple[int, ...]
        Queue indices in the order they were granted.
    rounds : int
        Number of scan rounds performed, including the final empty one of
        an UNSAFE run.
    final_budget : int
        Working budget after the last grant.
    """

    safe: bool
    granted: Bool1D
    grant_order: tuple[int, ...]
    rounds: int
    final_budget: int


def simulate_loan_grants(
    treasury: Amount, amounts: Iterable[Amount], loan_interest_rate: Rate
) -> LoanSimulation:
    """
    Run the greedy grant rounds on a scratch budget.

    Parameters
    ----------
    treasury : int
        Budget available before any grant.
    amounts : iterable of int
        Requested principals, in queue order.
    loan_interest_rate : float
        Share of each principal returned to the budget on grant.

    Returns
    -------
    LoanSimulation
    """
    requested = [int(a) for a in amounts]
    n = len(requested)
    granted = np.zeros(n, dtype=np.bool_)
    order: list[int] = []
    budget = int(treasury)
    rounds = 0

    while len(order) < n:
        rounds += 1
        found = False
        for i in range(n):
            if not granted[i] and requested[i] <= budget:
                budget = int(budget + requested[i] * loan_interest_rate)
                granted[i] = True
                order.append(i)
                found = True
                if log.isEnabledFor(_logging.DEEP_DEBUG):
                    log.deep(
                        f"    round {rounds}: granted request {i} "
                        f"({requested[i]:,}), budget now {budget:,}"
                    )
        if not found:
            if log.isEnabledFor(logging.DEBUG):
                blocked = [requested[i] for i in np.flatnonzero(~granted)]
                log.debug(
                    f"  Round {rounds} granted nothing; {len(blocked)} request(s) "
                    f"blocked with budget {budget:,}: {blocked[:10]}"
                )
            return LoanSimulation(False, granted, tuple(order), rounds, budget)

    return LoanSimulation(True, granted, tuple(order), rounds, budget)


def loans_are_safe(
    treasury: Amount, amounts: Iterable[Amount], loan_interest_rate: Rate
) -> bool:
    """True if every requested loan can be granted starting from *treasury*."""
    return simulate_loan_grants(treasury, amounts, loan_interest_rate).safe


def operations_need(amounts: Iterable[Amount]) -> Amount:
    """Total payout of a batch of withdrawals/closures."""
    return sum(int(a) for a in amounts)


def operations_are_safe(treasury: Amount, amounts: Iterable[Amount]) -> bool:
    """True if the whole batch can be paid out of *treasury*."""
    return operations_need(amounts) <= treasury

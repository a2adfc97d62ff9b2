"""
Reusable builders for banks and containers in unit / property tests.

* Banks default to a tiny bucket table so chains actually collide.
* Interest rates default to zero unless a test needs them.

Example
-------
>>> bank = make_bank(treasury=100, loan_interest_rate=0.1)
>>> open_accounts(bank, {1: 50, 2: 75})
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from bankengine import Bank, OrderedList, RequestType


def make_bank(
    treasury: int = 0,
    *,
    loan_interest_rate: float = 0.0,
    deposit_interest_rate: float = 0.0,
    bucket_capacity: int = 16,
    **kwargs: Any,
) -> Bank:
    return Bank(
        treasury,
        loan_interest_rate,
        deposit_interest_rate,
        bucket_capacity=bucket_capacity,
        **kwargs,
    )


def open_accounts(bank: Bank, balances: Mapping[int, int]) -> None:
    """Open one account per ``key: balance`` pair, in mapping order."""
    for key, balance in balances.items():
        bank.request(key, RequestType.OPEN_ACCOUNT, balance)


def make_list(values: Iterable[Any], *, capacity: int = 4) -> OrderedList:
    lst: OrderedList = OrderedList(capacity)
    for v in values:
        lst.append(v)
    return lst

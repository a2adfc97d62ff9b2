"""Pytest configuration and fixtures for bankengine tests."""

import os

import pytest

from bankengine import Bank, RequestType, logging


@pytest.fixture
def small_bank() -> Bank:
    """A bank with a small table (many collisions) and three funded accounts."""
    bank = Bank(
        initial_treasury=0,
        loan_interest_rate=0.1,
        deposit_interest_rate=0.0,
        bucket_capacity=8,
    )
    for key, amount in ((1, 100), (2, 200), (3, 300)):
        bank.request(key, RequestType.OPEN_ACCOUNT, amount)
    return bank


@pytest.fixture(autouse=True)
def mute_bankengine_logs(caplog):
    # DEBUG only for the coverage run so every logging branch executes
    if os.environ.get("COVERAGE_RUN") == "true":
        level = logging.DEBUG
    else:
        level = logging.ERROR

    caplog.set_level(level, logger="bankengine")
    logging.getLogger("bankengine").setLevel(level)

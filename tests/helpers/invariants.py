# tests/helpers/invariants.py
"""
Structural invariants that must hold between any two public calls.
"""

from __future__ import annotations

from collections import Counter

from bankengine import Bank, HashMap


def assert_map_consistent(table: HashMap) -> None:
    """
    Raise ``AssertionError`` if the chains and the ordered key list disagree.
    """
    keys = list(table.keys())

    # cardinality
    assert len(keys) == len(table)
    assert int(table.chain_lengths().sum()) == len(table)

    # uniqueness
    assert not [k for k, c in Counter(keys).items() if c > 1]

    # every key is reachable through its own bucket
    for key in keys:
        assert table.contains(key)
        assert table.hash(key) < table.bucket_capacity


def assert_bank_invariants(bank: Bank) -> None:
    """Treasury non-negative, queues drained, account table consistent."""
    assert bank.treasury >= 0
    assert not bank.has_pending_loans()
    assert not bank.has_pending_operations()
    assert bank.account_count() == len(bank.account_keys())
    # accessing the private table is fine in tests
    assert_map_consistent(bank._accounts)  # noqa: SLF001

# tests/__init__.py

from tests.helpers.factories import make_bank, make_list, open_accounts
from tests.helpers.invariants import assert_bank_invariants, assert_map_consistent

__all__ = [
    "make_bank",
    "make_list",
    "open_accounts",
    "assert_bank_invariants",
    "assert_map_consistent",
]

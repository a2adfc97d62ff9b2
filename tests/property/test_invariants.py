"""Property-based tests for bankengine invariants using Hypothesis.

Randomized request streams and container operations must preserve the
structural and accounting invariants regardless of input.
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from bankengine import HashMap, OrderedList, RequestType
from bankengine.safety import loans_are_safe
from tests.helpers.factories import make_bank, make_list
from tests.helpers.invariants import assert_bank_invariants, assert_map_consistent

keys_strategy = st.integers(min_value=0, max_value=2**32 - 1)
small_keys_strategy = st.integers(min_value=0, max_value=50)
amount_strategy = st.integers(min_value=0, max_value=10**6)
rate_strategy = st.floats(min_value=0.0, max_value=1.0, allow_nan=False)
# decimal rates whose products never land just below an integer
nice_rate_strategy = st.sampled_from([0.0, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0])


# ============================================================================
# OrderedList
# ============================================================================


@given(values=st.lists(st.integers(), max_size=30), new=st.integers())
def test_append_then_remove_at_same_index_round_trips(values, new):
    lst = make_list(values)
    lst.append(new)
    lst.remove_at(len(lst) - 1)
    assert len(lst) == len(values)
    assert list(lst) == values


@given(
    values=st.lists(st.integers(), min_size=1, max_size=30),
    data=st.data(),
)
def test_remove_at_matches_python_list(values, data):
    lst = make_list(values)
    mirror = list(values)
    while mirror:
        idx = data.draw(st.integers(min_value=0, max_value=len(mirror) - 1))
        lst.remove_at(idx)
        del mirror[idx]
        assert list(lst) == mirror
    assert len(lst) == 0


@given(ops=st.lists(st.tuples(st.booleans(), st.integers(0, 20)), max_size=80))
def test_interleaved_append_and_remove_first(ops):
    lst: OrderedList[int] = OrderedList()
    mirror: list[int] = []
    for is_append, value in ops:
        if is_append or value not in mirror:
            lst.append(value)
            mirror.append(value)
        else:
            lst.remove_first(value)
            mirror.remove(value)
    assert list(lst) == mirror


# ============================================================================
# HashMap
# ============================================================================


@given(
    ops=st.lists(st.tuples(st.booleans(), small_keys_strategy, st.integers()), max_size=100),
    capacity=st.integers(min_value=1, max_value=8),
)
def test_hash_map_matches_dict(ops, capacity):
    table: HashMap[int] = HashMap(capacity)
    mirror: dict[int, int] = {}
    for is_insert, key, value in ops:
        if is_insert:
            table.insert(key, value)
            mirror[key] = value
        elif key in mirror:
            table.remove(key)
            del mirror[key]
    assert list(table.keys()) == list(mirror)
    assert {k: table[k] for k in table.keys()} == mirror
    assert_map_consistent(table)


@given(key=keys_strategy, capacity=st.integers(min_value=1, max_value=2**16))
def test_hash_in_range(key, capacity):
    assert 0 <= HashMap(capacity).hash(key) < capacity


# ============================================================================
# Safety check
# ============================================================================


@given(
    treasury=amount_strategy,
    extra=amount_strategy,
    amounts=st.lists(amount_strategy, max_size=15),
    rate=nice_rate_strategy,
)
@settings(max_examples=200)
def test_loan_safety_is_monotonic_in_budget(treasury, extra, amounts, rate):
    if loans_are_safe(treasury, amounts, rate):
        assert loans_are_safe(treasury + extra, amounts, rate)


@given(amounts=st.lists(amount_strategy, min_size=1, max_size=15), rate=rate_strategy)
def test_loans_within_treasury_are_safe(amounts, rate):
    assert loans_are_safe(max(amounts), amounts, rate)


# ============================================================================
# Bank
# ============================================================================

request_strategy = st.tuples(
    st.sampled_from(
        [
            RequestType.OPEN_ACCOUNT,
            RequestType.DEPOSIT,
            RequestType.WITHDRAW,
            RequestType.CLOSE_ACCOUNT,
        ]
    ),
    small_keys_strategy,
    amount_strategy,
)


@given(epochs=st.lists(st.lists(request_strategy, max_size=10), max_size=10))
@settings(max_examples=100, deadline=None)
def test_conservation_without_loans(epochs):
    """With no loans and no deposit interest, treasury == sum of balances."""
    bank = make_bank(0, loan_interest_rate=0.1, deposit_interest_rate=0.0)

    for requests in epochs:
        for request_type, key, amount in requests:
            exists = bank.account_exists(key)
            if request_type is RequestType.OPEN_ACCOUNT:
                if exists:
                    continue
                bank.request(key, request_type, amount)
            elif not exists or bank.pending_request_exists(key):
                continue
            elif request_type is RequestType.DEPOSIT:
                bank.request(key, request_type, amount)
            elif request_type is RequestType.WITHDRAW:
                bank.request(key, request_type, min(amount, bank.account_balance(key)))
            else:
                bank.request(key, request_type, bank.account_balance(key))

        bank.end_epoch()
        assert_bank_invariants(bank)
        assert bank.treasury == bank.total_balance()


@given(
    treasury=amount_strategy,
    loans=st.lists(st.tuples(small_keys_strategy, amount_strategy), max_size=10),
    rate=rate_strategy,
)
def test_rejected_loans_change_nothing(treasury, loans, rate):
    bank = make_bank(treasury, loan_interest_rate=rate)
    for key, amount in loans:
        bank.request(key, RequestType.LOAN, amount)
    accepted = bank.commit_loans()
    if not accepted:
        assert bank.treasury == treasury
    else:
        assert bank.treasury >= treasury
    assert not bank.has_pending_loans()

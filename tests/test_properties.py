"""
Property-based tests: every search agrees with a plain membership check
and with every other search.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from search_suite.searches import NUMERIC_ONLY, SEARCHES
from search_suite.views import NOT_FOUND

# ============================================================
# Strategies (Input Generation)
# ============================================================

int_keys = st.lists(st.integers(min_value=-10 ** 12, max_value=10 ** 12), max_size=200).map(sorted)
small_int_keys = st.lists(st.integers(min_value=0, max_value=20), max_size=60).map(sorted)
float_keys = st.lists(
    st.floats(min_value=-1e9, max_value=1e9, allow_nan=False, allow_infinity=False), max_size=100
).map(sorted)
text_keys = st.lists(st.text(max_size=5), max_size=60).map(sorted)


def check_result(keys, target, index):
    if target in keys:
        assert index != NOT_FOUND
        assert 0 <= index < len(keys)
        assert keys[index] == target
    else:
        assert index == NOT_FOUND


# ============================================================
# Correctness
# ============================================================


@given(keys=int_keys, data=st.data())
def test_integer_keys(keys, data):
    if keys and data.draw(st.booleans()):
        target = data.draw(st.sampled_from(keys))
    else:
        target = data.draw(st.integers(min_value=-10 ** 12 - 5, max_value=10 ** 12 + 5))
    for search in SEARCHES.values():
        check_result(keys, target, search(keys, target))


@given(keys=small_int_keys, target=st.integers(min_value=-2, max_value=22))
def test_heavily_duplicated_keys(keys, target):
    for search in SEARCHES.values():
        check_result(keys, target, search(keys, target))


@given(keys=float_keys, data=st.data())
def test_float_keys(keys, data):
    if keys and data.draw(st.booleans()):
        target = data.draw(st.sampled_from(keys))
    else:
        target = data.draw(st.floats(min_value=-1e9, max_value=1e9, allow_nan=False))
    for search in SEARCHES.values():
        check_result(keys, target, search(keys, target))


@given(keys=text_keys, target=st.text(max_size=5))
def test_text_keys(keys, target):
    for name, search in SEARCHES.items():
        if name in NUMERIC_ONLY:
            continue
        check_result(keys, target, search(keys, target))


# ============================================================
# Agreement
# ============================================================


@settings(max_examples=200)
@given(keys=small_int_keys, target=st.integers(min_value=-2, max_value=22))
def test_all_searches_agree(keys, target):
    results = {name: search(keys, target) for name, search in SEARCHES.items()}
    found = [index for index in results.values() if index != NOT_FOUND]
    assert len(found) in (0, len(results))
    assert len({keys[index] for index in found}) <= 1

import pytest

from search_suite.datasets import DISTRIBUTIONS, make_keys, pick_queries


@pytest.mark.parametrize("distribution", DISTRIBUTIONS)
def test_keys_are_sorted_ints(distribution):
    keys = make_keys(distribution, 500, seed=1)
    assert len(keys) == 500
    assert all(isinstance(k, int) for k in keys)
    assert keys == sorted(keys)


@pytest.mark.parametrize("distribution", DISTRIBUTIONS)
def test_empty_dataset(distribution):
    assert make_keys(distribution, 0, seed=1) == []


@pytest.mark.parametrize("distribution", DISTRIBUTIONS)
def test_seed_makes_keys_reproducible(distribution):
    assert make_keys(distribution, 200, seed=7) == make_keys(distribution, 200, seed=7)


def test_sequential_keys():
    assert make_keys("sequential", 5) == [1, 2, 3, 4, 5]


def test_uniform_keys_are_unique():
    keys = make_keys("uniform", 2000, seed=3)
    assert len(set(keys)) == 2000


def test_duplicates_repeat():
    keys = make_keys("duplicates", 1000, seed=3)
    assert len(set(keys)) < 100


def test_unknown_distribution():
    with pytest.raises(ValueError):
        make_keys("zipf", 10)


def test_negative_size():
    with pytest.raises(ValueError):
        make_keys("uniform", -1)


def test_queries_all_present():
    keys = make_keys("uniform", 300, seed=2)
    queries = pick_queries(keys, 50, miss_rate=0.0, seed=2)
    assert len(queries) == 50
    assert set(queries) <= set(keys)


@pytest.mark.parametrize("distribution", DISTRIBUTIONS)
def test_queries_all_absent(distribution):
    keys = make_keys(distribution, 300, seed=2)
    queries = pick_queries(keys, 50, miss_rate=1.0, seed=2)
    assert not set(queries) & set(keys)


def test_queries_for_empty_keys():
    assert pick_queries([], 3) == [0, 0, 0]


@pytest.mark.parametrize("miss_rate", [-0.1, 1.5])
def test_bad_miss_rate(miss_rate):
    with pytest.raises(ValueError):
        pick_queries([1, 2, 3], 5, miss_rate=miss_rate)

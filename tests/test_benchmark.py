import pytest

import run_benchmark
from search_suite.benchmark import (
    BenchmarkConfig,
    agrees,
    describe_result,
    format_table,
    measure,
    run_benchmark as run_searches,
    skipped_searches,
    summarize,
)
from search_suite.datasets import make_keys, pick_queries
from search_suite.searches import SEARCHES, search_binary
from search_suite.views import NOT_FOUND


def test_describe_result():
    assert describe_result(4999) == "Found at index 4999"
    assert describe_result(NOT_FOUND) == "Not found"


def test_agrees_on_duplicates():
    keys = [1, 2, 2, 2, 3]
    assert agrees(keys, 1, 3)
    assert not agrees(keys, 1, 0)
    assert agrees(keys, NOT_FOUND, NOT_FOUND)
    assert not agrees(keys, 2, NOT_FOUND)


def test_measure_counts_probes():
    result, elapsed, probes = measure(search_binary, list(range(1, 101)), 50)
    assert result == 49
    assert elapsed >= 0
    assert 1 <= probes <= 7


@pytest.mark.parametrize("distribution", ["sequential", "uniform", "clustered", "skewed", "duplicates"])
def test_all_searches_succeed(distribution):
    keys = make_keys(distribution, 2000, seed=11)
    queries = pick_queries(keys, 40, miss_rate=0.3, seed=11)
    all_results = run_searches(keys, queries)
    assert list(all_results) == list(SEARCHES)
    for data in all_results.values():
        assert len(data['times']) == 40
        assert all(data['successes'])


def test_interpolation_skipped_for_text_keys():
    keys = ["ant", "bee", "cat"]
    assert "Interpolation Search" in skipped_searches(keys, list(SEARCHES))
    all_results = run_searches(keys, ["bee", "cow"])
    assert "Interpolation Search" not in all_results
    assert all(all(data['successes']) for data in all_results.values())


def test_summary_table():
    all_results = run_searches(list(range(100)), [5, 50, 500], ["Binary Search", "Jump Search"])
    rows = summarize(all_results)
    assert [row[0] for row in rows] == ["Binary Search", "Jump Search"]
    assert rows[0][-1] == "100.0%"
    table = format_table(rows)
    assert "Avg Probes" in table
    assert "Jump Search" in table


def test_config_defaults():
    config = BenchmarkConfig()
    assert config.dataset_size == 10000
    assert len(config.search_names) == 7


@pytest.mark.parametrize("kwargs", [
    {"dataset_size": -1},
    {"runs": 0},
    {"distribution": "zipf"},
    {"miss_rate": 2.0},
    {"algorithms": ["bogo"]},
    {"algorithms": []},
])
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        BenchmarkConfig(**kwargs)


def test_parse_args():
    config = run_benchmark.parse_args(["--dataset-size", "500", "--algorithms", "binary", "ternary",
                                       "--no-progress"])
    assert config.dataset_size == 500
    assert config.search_names == ["Binary Search", "Ternary Search"]
    assert not config.show_progress


def test_parse_args_rejects_bad_config():
    with pytest.raises(SystemExit):
        run_benchmark.parse_args(["--runs", "0"])


def test_run_prints_results(capsys):
    config = BenchmarkConfig(dataset_size=10000, runs=5, seed=0)
    run_benchmark.run(config)
    out = capsys.readouterr().out
    assert "Found at index 4999" in out
    assert "Uniform Binary Search" in out
    assert "100.0%" in out

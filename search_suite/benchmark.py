import time
from dataclasses import dataclass, field

import numpy as np
from tabulate import tabulate
from tqdm import tqdm

from .datasets import DISTRIBUTIONS
from .keys import CapabilityMismatchError, require_numeric_key
from .searches import NUMERIC_ONLY, SEARCHES, search_binary
from .views import NOT_FOUND, CountingView

DEFAULT_DATASET_SIZE = 10000
DEFAULT_RUNS = 10

# Short command line names for the registry entries
ALGORITHM_KEYS = {
    "binary": "Binary Search",
    "interpolation": "Interpolation Search",
    "exponential": "Exponential Search",
    "jump": "Jump Search",
    "fibonacci": "Fibonacci Search",
    "ternary": "Ternary Search",
    "uniform": "Uniform Binary Search",
}

TABLE_HEADERS = ["Search Method", "Avg Time (µs)", "Avg Probes", "Max Probes", "Success Rate"]


@dataclass
class BenchmarkConfig:
    dataset_size: int = DEFAULT_DATASET_SIZE
    runs: int = DEFAULT_RUNS
    distribution: str = "sequential"
    miss_rate: float = 0.0
    seed: int | None = None
    algorithms: list[str] = field(default_factory=lambda: list(ALGORITHM_KEYS))
    show_progress: bool = False

    def __post_init__(self):
        if self.dataset_size < 0:
            raise ValueError(f"dataset size must be non-negative, got {self.dataset_size}")
        if self.runs < 1:
            raise ValueError(f"number of runs must be at least 1, got {self.runs}")
        if self.distribution not in DISTRIBUTIONS:
            raise ValueError(f"unknown distribution {self.distribution!r}, "
                             f"expected one of {', '.join(DISTRIBUTIONS)}")
        if not 0.0 <= self.miss_rate <= 1.0:
            raise ValueError(f"miss rate must be within [0, 1], got {self.miss_rate}")
        unknown = [a for a in self.algorithms if a not in ALGORITHM_KEYS]
        if unknown:
            raise ValueError(f"unknown algorithm(s) {', '.join(unknown)}, "
                             f"expected any of {', '.join(ALGORITHM_KEYS)}")
        if not self.algorithms:
            raise ValueError("select at least one algorithm")

    @property
    def search_names(self) -> list[str]:
        return [ALGORITHM_KEYS[a] for a in self.algorithms]


def describe_result(index: int) -> str:
    return "Not found" if index == NOT_FOUND else f"Found at index {index}"


def agrees(keys, reference: int, result: int) -> bool:
    """
    True if `result` is consistent with the reference search: both report
    NOT_FOUND, or both point at equal keys (duplicates may differ in index).
    """
    if reference == NOT_FOUND or result == NOT_FOUND:
        return reference == result
    return 0 <= result < len(keys) and keys[result] == keys[reference]


def measure(search, keys, target) -> tuple[int, float, int]:
    """
    Runs one search over a probe-counting view of the keys.
    Returns the result, the elapsed time in microseconds, and the number of probes.
    """
    view = CountingView(keys)
    start_time = time.perf_counter()
    result = search(view, target)
    end_time = time.perf_counter()
    return result, (end_time - start_time) * 1e6, view.probes


def skipped_searches(keys, names) -> dict[str, str]:
    """Searches that cannot run over these keys, with the reason."""
    skipped = {}
    if not len(keys):
        return skipped
    for name in names:
        if name in NUMERIC_ONLY:
            try:
                require_numeric_key(keys[0])
            except CapabilityMismatchError as e:
                skipped[name] = str(e)
    return skipped


def run_benchmark(keys, queries, names=None, show_progress: bool = False) -> dict:
    """
    Runs every named search for every query.
    Returns a dict mapping each search name to its per-query
    'times' (µs), 'probes' and 'successes'. Searches that cannot handle
    the key type are left out of the result.
    """
    names = list(SEARCHES) if names is None else list(names)
    skipped = skipped_searches(keys, names)
    names = [name for name in names if name not in skipped]

    all_results = {name: {'times': [], 'probes': [], 'successes': []} for name in names}

    query_iterator = queries
    if show_progress:
        query_iterator = tqdm(queries, desc="Benchmarking", unit="query")

    for query in query_iterator:
        reference = search_binary(keys, query)
        for name in names:
            result, elapsed, probes = measure(SEARCHES[name], keys, query)
            all_results[name]['times'].append(elapsed)
            all_results[name]['probes'].append(probes)
            all_results[name]['successes'].append(agrees(keys, reference, result))

    return all_results


def summarize(all_results: dict) -> list[list]:
    """Averages the raw benchmark results into one table row per search."""
    table_data = []
    for name, data in all_results.items():
        avg_time = np.mean(data['times']) if data['times'] else 0
        avg_probes = np.mean(data['probes']) if data['probes'] else 0
        max_probes = max(data['probes']) if data['probes'] else 0
        success_rate = np.mean(data['successes']) * 100 if data['successes'] else 0
        table_data.append([name, f"{avg_time:.2f}", f"{avg_probes:.2f}", max_probes, f"{success_rate:.1f}%"])
    return table_data


def format_table(table_data: list[list]) -> str:
    return tabulate(table_data, headers=TABLE_HEADERS, tablefmt="grid")

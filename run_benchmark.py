import argparse
import sys

import numpy as np

from search_suite.benchmark import (ALGORITHM_KEYS, DEFAULT_DATASET_SIZE, DEFAULT_RUNS, BenchmarkConfig,
                                    describe_result, format_table, measure, run_benchmark, skipped_searches,
                                    summarize)
from search_suite.datasets import DISTRIBUTIONS, make_keys, pick_queries
from search_suite.searches import SEARCHES


def run_single_target(keys: list[int], names: list[str]):
    """
    Times every search once for the middle key, the classic single-target check.
    """
    if not keys:
        print("Empty dataset, nothing to look up.")
        return
    target = keys[(len(keys) - 1) // 2]
    print(f"\nSearching for the middle key {target}:")
    for name in names:
        result, elapsed, probes = measure(SEARCHES[name], keys, target)
        print(f"{name}:")
        print(f"  Result: {describe_result(result)}")
        print(f"  Time: {elapsed / 1e3:.4f} ms ({probes} probes)")


def run(config: BenchmarkConfig):
    """
    Generates the dataset, runs the searches, and prints the benchmark results,
    averaging results over multiple search queries.
    """
    print("--- Search Algorithm Benchmark ---")

    # 1. Generate the sorted keys
    print(f"\n1. Generating {config.dataset_size} {config.distribution} keys...")
    keys = make_keys(config.distribution, config.dataset_size, seed=config.seed)

    names = config.search_names
    skipped = skipped_searches(keys, names)
    for name, reason in skipped.items():
        print(f"Skipping {name}: {reason}")

    # 2. Single target lookup
    print("2. Single target lookup")
    run_single_target(keys, [name for name in names if name not in skipped])

    # 3. Averaged benchmark over random queries
    print(f"\n3. Running benchmarks over {config.runs} random queries "
          f"({config.miss_rate:.0%} absent)...")
    queries = pick_queries(keys, config.runs, miss_rate=config.miss_rate, seed=config.seed)
    all_results = run_benchmark(keys, queries, names, show_progress=config.show_progress)

    print("\n\n--- Final Averaged Benchmark Results ---")
    print(format_table(summarize(all_results)))

    if "Binary Search" in all_results:
        print("\nAnalysis:")
        print(f"Averaged over {config.runs} search queries on a dataset of {len(keys)} keys.")
        print(f"Baseline Binary Search averages {np.mean(all_results['Binary Search']['probes']):.2f} probes.")
        print("-" * 80)


def parse_args(argv=None) -> BenchmarkConfig:
    parser = argparse.ArgumentParser(description="Benchmark search algorithms over sorted keys.")
    parser.add_argument("--dataset-size", type=int, default=DEFAULT_DATASET_SIZE,
                        help="Number of keys to generate.")
    parser.add_argument("--runs", type=int, default=DEFAULT_RUNS,
                        help="Number of random search queries to average over.")
    parser.add_argument("--distribution", choices=DISTRIBUTIONS, default="sequential",
                        help="How the keys are distributed. 'sequential' uses the keys 1..N.")
    parser.add_argument("--miss-rate", type=float, default=0.0,
                        help="Fraction of queries that are absent from the dataset.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for keys and queries.")
    parser.add_argument("--algorithms", nargs="+", choices=list(ALGORITHM_KEYS), default=list(ALGORITHM_KEYS),
                        help="Subset of searches to run.")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar.")
    args = parser.parse_args(argv)

    try:
        config = BenchmarkConfig(
            dataset_size=args.dataset_size,
            runs=args.runs,
            distribution=args.distribution,
            miss_rate=args.miss_rate,
            seed=args.seed,
            algorithms=args.algorithms,
            show_progress=not args.no_progress,
        )
    except ValueError as e:
        parser.error(str(e))
    return config


if __name__ == "__main__":
    run(parse_args(sys.argv[1:]))

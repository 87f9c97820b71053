import numpy as np
from scipy.stats import gaussian_kde

# Largest generated key, keys fit in 32 bits (2^32 - 1)
KEY_MAX = 4294967295

DISTRIBUTIONS = ("sequential", "uniform", "clustered", "skewed", "duplicates")


def sequential_keys(size: int) -> list[int]:
    """The keys 1..size, the layout the classic search benchmark uses."""
    return list(range(1, size + 1))


def uniform_keys(size: int, rng: np.random.Generator, max_value: int = KEY_MAX) -> list[int]:
    """
    Draws unique keys uniformly from [0, max_value].
    Interpolation search's best case.
    """
    if size > max_value + 1:
        raise ValueError(f"cannot draw {size} unique keys from [0, {max_value}]")
    values = np.unique(rng.integers(0, max_value, size=size, endpoint=True, dtype=np.int64))
    # Top up whatever collided until we have exactly `size` unique keys
    while len(values) < size:
        extra = rng.integers(0, max_value, size=size - len(values), endpoint=True, dtype=np.int64)
        values = np.unique(np.concatenate([values, extra]))
    return values.tolist()


def clustered_keys(size: int, rng: np.random.Generator, max_value: int = KEY_MAX,
                   num_clusters: int = 5) -> list[int]:
    """
    Samples keys from a Gaussian KDE fitted to a handful of random cluster
    centres. Dense clumps with wide empty gaps in between, which is where
    interpolation estimates go wrong.
    """
    if size == 0:
        return []
    # Fit KDE model on a few centres, each repeated with small spread
    centres = rng.uniform(0.05, 0.95, size=num_clusters)
    seeds = np.concatenate([c + rng.normal(0, 0.01, size=20) for c in centres])
    kde = gaussian_kde(seeds, bw_method=0.05)

    samples = kde.resample(size=size, seed=rng)[0]
    samples = np.clip(samples, 0.0, 1.0)
    return np.sort((samples * max_value).astype(np.int64)).tolist()


def skewed_keys(size: int, rng: np.random.Generator, max_value: int = KEY_MAX) -> list[int]:
    """Lognormal keys: most of them small, a long sparse tail of large ones."""
    if size == 0:
        return []
    samples = rng.lognormal(mean=0.0, sigma=2.0, size=size)
    samples = samples / samples.max()
    return np.sort((samples * max_value).astype(np.int64)).tolist()


def duplicate_keys(size: int, rng: np.random.Generator, distinct: int = 16) -> list[int]:
    """Keys drawn from a small range so most values repeat many times."""
    return np.sort(rng.integers(0, distinct, size=size, dtype=np.int64)).tolist()


def make_keys(distribution: str, size: int, seed: int | None = None) -> list[int]:
    """
    Generates a sorted list of integer keys for benchmarking.
    Returns:
        An ascending list of `size` keys drawn from the named distribution.
    """
    if size < 0:
        raise ValueError(f"dataset size must be non-negative, got {size}")
    rng = np.random.default_rng(seed)

    if distribution == "sequential":
        return sequential_keys(size)
    elif distribution == "uniform":
        return uniform_keys(size, rng)
    elif distribution == "clustered":
        return clustered_keys(size, rng)
    elif distribution == "skewed":
        return skewed_keys(size, rng)
    elif distribution == "duplicates":
        return duplicate_keys(size, rng)
    raise ValueError(f"unknown distribution {distribution!r}, expected one of {', '.join(DISTRIBUTIONS)}")


def pick_queries(keys: list[int], count: int, miss_rate: float = 0.0,
                 seed: int | None = None) -> list[int]:
    """
    Picks `count` query values. Roughly `miss_rate` of them are values that
    do not occur in `keys` (some below the minimum, some above the maximum,
    the rest in gaps between keys); the others are existing keys.
    """
    if not 0.0 <= miss_rate <= 1.0:
        raise ValueError(f"miss rate must be within [0, 1], got {miss_rate}")
    if count < 0:
        raise ValueError(f"query count must be non-negative, got {count}")
    if not keys:
        return [0] * count

    rng = np.random.default_rng(seed)
    present = set(keys)
    low, high = keys[0], keys[-1]
    queries = []
    for _ in range(count):
        if rng.random() >= miss_rate:
            queries.append(keys[int(rng.integers(len(keys)))])
            continue

        roll = rng.random()
        if roll < 0.25:
            queries.append(low - 1)
        elif roll < 0.5:
            queries.append(high + 1)
        else:
            # A gap value if one exists near a random key, otherwise fall
            # back to just past the maximum
            candidate = keys[int(rng.integers(len(keys)))] + 1
            queries.append(candidate if candidate not in present else high + 1)
    return queries

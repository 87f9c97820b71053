from collections.abc import Sequence
from functools import lru_cache
from math import isqrt

from .keys import K, N, require_numeric_key
from .views import NOT_FOUND, as_view

# --- Search Algorithms over Sorted Sequences ---
# Every search takes an ascending, randomly-addressable sequence (or an
# IndexedView over one) and a target, and returns the index of an equal key
# or NOT_FOUND. None of them mutate the input or keep state between calls.


def search_binary(data: Sequence[K], target: K) -> int:
    """
    Binary search algorithm.
    Returns the index of an element equal to the target, or NOT_FOUND.
    """
    view = as_view(data)
    return _binary_between(view, target, 0, len(view) - 1)


def _binary_between(view, target, left: int, right: int) -> int:
    """Binary search restricted to the inclusive range [left, right]."""
    while left <= right:
        mid = left + (right - left) // 2
        key = view[mid]
        if key == target:
            return mid
        elif key < target:
            left = mid + 1
        else:
            right = mid - 1
    return NOT_FOUND


def search_interpolation(data: Sequence[N], target: N) -> int:
    """
    Interpolation search.
    Estimates the probe position from the target's value relative to the
    keys at both ends of the current range. Needs numeric keys: the target
    is checked once up front, on its own and against the first key, and
    CapabilityMismatchError is raised for keys without subtraction and division.

    Averages O(log log n) probes on uniformly distributed keys and degrades
    towards O(n) on heavily skewed ones.
    """
    require_numeric_key(target)
    view = as_view(data)
    low, high = 0, len(view) - 1
    if high >= 0:
        require_numeric_key(target, view[0])

    while low <= high:
        low_key, high_key = view[low], view[high]
        if target < low_key or high_key < target:
            break

        if high_key == low_key:
            # Every key in [low, high] is equal and the guard above pins the
            # target to that value.
            return low if low_key == target else NOT_FOUND

        ratio = (target - low_key) / (high_key - low_key)
        try:
            pos = low + int((high - low) * ratio)
        except (ValueError, OverflowError):
            # Spans too wide for the key type (inf / inf) give no estimate;
            # fall back to the midpoint.
            pos = low + (high - low) // 2
        pos = min(max(pos, low), high)

        key = view[pos]
        if key == target:
            return pos
        elif key < target:
            low = pos + 1
        else:
            high = pos - 1
    return NOT_FOUND


def search_exponential(data: Sequence[K], target: K) -> int:
    """
    Exponential search.
    Finds range where element may exist by doubling the index,
    then performs binary search within that range.
    """
    view = as_view(data)
    n = len(view)
    if n == 0:
        return NOT_FOUND

    if view[0] == target:
        return 0

    # Find range for binary search by doubling index
    i = 1
    while i < n and view[i] <= target:
        i *= 2

    return _binary_between(view, target, i // 2, min(i, n - 1))


def search_jump(data: Sequence[K], target: K) -> int:
    """
    Jump search.
    Skips ahead in blocks of floor(sqrt(n)) until the block's last key is no
    longer below the target, then scans that block linearly. O(sqrt(n)).
    """
    view = as_view(data)
    n = len(view)
    if n == 0:
        return NOT_FOUND

    block = isqrt(n)
    prev, step = 0, block
    while view[min(step, n) - 1] < target:
        prev = step
        step += block
        if prev >= n:
            return NOT_FOUND

    end = min(step, n)
    while view[prev] < target:
        prev += 1
        if prev == end:
            return NOT_FOUND

    return prev if view[prev] == target else NOT_FOUND


def search_fibonacci(data: Sequence[K], target: K) -> int:
    """
    Fibonacci search.
    Splits the range at Fibonacci offsets, so narrowing the range only
    needs additions and subtractions.
    """
    view = as_view(data)
    n = len(view)
    if n == 0:
        return NOT_FOUND

    # Smallest Fibonacci number >= n, along with its two predecessors
    fib_m2, fib_m1 = 0, 1
    fib_m = fib_m1 + fib_m2
    while fib_m < n:
        fib_m2, fib_m1 = fib_m1, fib_m
        fib_m = fib_m1 + fib_m2

    # Everything up to and including offset is known to be below the target
    offset = -1
    while fib_m > 1:
        i = min(offset + fib_m2, n - 1)
        key = view[i]
        if key < target:
            # one Fibonacci step down, eliminate the prefix up to i
            fib_m, fib_m1 = fib_m1, fib_m2
            fib_m2 = fib_m - fib_m1
            offset = i
        elif key > target:
            # two Fibonacci steps down
            fib_m = fib_m2
            fib_m1 = fib_m1 - fib_m2
            fib_m2 = fib_m - fib_m1
        else:
            return i

    if fib_m1 == 1 and offset + 1 < n and view[offset + 1] == target:
        return offset + 1
    return NOT_FOUND


def search_ternary(data: Sequence[K], target: K) -> int:
    """
    Ternary search.
    Probes two points per round and keeps one of the three parts. Fewer
    rounds than binary search, but more probes and comparisons in total.
    """
    view = as_view(data)
    left, right = 0, len(view) - 1

    while left <= right:
        third = (right - left) // 3
        mid1, mid2 = left + third, right - third

        key1 = view[mid1]
        if key1 == target:
            return mid1
        key2 = view[mid2]
        if key2 == target:
            return mid2

        if target < key1:
            right = mid1 - 1
        elif key2 < target:
            left = mid2 + 1
        else:
            left, right = mid1 + 1, mid2 - 1
    return NOT_FOUND


@lru_cache(maxsize=256)
def uniform_deltas(length: int) -> tuple[int, ...]:
    """
    Jump distances for uniform binary search over `length` keys.
    delta[k] = (length + 2**k) // 2**(k + 1), i.e. length / 2**(k + 1)
    rounded half up. The table halves at every step and always ends in 0.
    Cached, so each length's table is built once.
    """
    deltas = []
    power = 1
    while True:
        half = power
        power <<= 1
        deltas.append((length + half) // power)
        if deltas[-1] == 0:
            return tuple(deltas)


def search_uniform_binary(data: Sequence[K], target: K) -> int:
    """
    Uniform binary search (Knuth's Algorithm C).
    Moves a single probe index by precomputed, halving distances instead of
    recomputing a midpoint from both bounds.
    """
    view = as_view(data)
    n = len(view)
    if n == 0:
        return NOT_FOUND

    deltas = uniform_deltas(n)
    mid = deltas[0] - 1
    step = 1
    while True:
        if 0 <= mid < n:
            key = view[mid]
            if key == target:
                return mid
            go_left = target < key
        else:
            # One past either end: treat as -inf / +inf instead of reading
            go_left = mid >= n

        delta = deltas[step]
        if delta == 0:
            return NOT_FOUND
        mid = mid - delta if go_left else mid + delta
        step += 1


# Registry of all searches, keyed by display name.
SEARCHES = {
    "Binary Search": search_binary,
    "Interpolation Search": search_interpolation,
    "Exponential Search": search_exponential,
    "Jump Search": search_jump,
    "Fibonacci Search": search_fibonacci,
    "Ternary Search": search_ternary,
    "Uniform Binary Search": search_uniform_binary,
}

# Searches that need NumericKey targets on top of plain ordering.
NUMERIC_ONLY = frozenset({"Interpolation Search"})

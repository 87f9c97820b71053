from collections.abc import Iterable, Mapping

import numpy as np

# Sentinel returned by every search when the target is absent.
NOT_FOUND = -1


class IndexedView:
    """
    Read-only positional view over an ordered sequence.

    Anything that already supports len() and integer indexing (lists, tuples,
    ranges, 1-D numpy arrays) is used in place. Any other finite iterable is
    materialized once into a tuple. Mappings are rejected.
    """
    def __init__(self, data: Iterable):
        if isinstance(data, np.ndarray):
            if data.ndim != 1:
                raise ValueError(f"expected a 1-D array, got shape {data.shape}")
            self._unwrap = True
        else:
            if isinstance(data, Mapping):
                raise ValueError("expected a sequence, got a mapping; pass sorted(mapping) instead")
            if not (hasattr(data, "__len__") and hasattr(data, "__getitem__")):
                data = tuple(data)
            self._unwrap = False
        self._data = data
        self._length = len(data)

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index: int):
        value = self._data[index]
        # numpy scalars would wrap around on subtraction; hand out Python ones
        if self._unwrap and isinstance(value, np.generic):
            return value.item()
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(length={self._length})"


class CountingView(IndexedView):
    """An IndexedView that counts every positional access (probe)."""
    def __init__(self, data: Iterable):
        super().__init__(data)
        self.probes = 0

    def __getitem__(self, index: int):
        self.probes += 1
        return super().__getitem__(index)

    def reset(self) -> None:
        self.probes = 0


def as_view(data) -> IndexedView:
    """Wraps data in an IndexedView unless it already is one."""
    if isinstance(data, IndexedView):
        return data
    return IndexedView(data)

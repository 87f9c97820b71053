from typing import Protocol, TypeVar, runtime_checkable

# --- Key Capabilities ---
# Plain ordering is all six comparison searches need. Interpolation also
# needs key arithmetic, which is modeled as a separate, narrower capability.


class CapabilityMismatchError(TypeError):
    """Raised when a search is handed keys lacking a capability it requires."""


class Ordered(Protocol):
    def __lt__(self, other, /) -> bool: ...
    def __le__(self, other, /) -> bool: ...


@runtime_checkable
class NumericKey(Protocol):
    """A key whose difference with another key yields a Magnitude."""
    def __sub__(self, other, /): ...


@runtime_checkable
class Magnitude(Protocol):
    """A distance between keys that divides into a ratio."""
    def __truediv__(self, other, /): ...


K = TypeVar("K", bound=Ordered)
N = TypeVar("N", bound=NumericKey)


def require_numeric_key(target, key=None) -> None:
    """
    Rejects targets that cannot drive an interpolation probe.
    With `key` given, also rejects targets that cannot be subtracted from
    the sequence's keys (e.g. a float target over Decimal keys).
    Checked once at the call boundary, so no arithmetic is ever attempted
    on an unsupported type inside a search loop.
    """
    if not isinstance(target, NumericKey):
        raise CapabilityMismatchError(
            f"{type(target).__name__} keys do not support subtraction; "
            "interpolation search needs numeric keys"
        )
    other = target if key is None else key
    try:
        span = target - other
    except TypeError as e:
        raise CapabilityMismatchError(
            f"{type(target).__name__} targets cannot be subtracted from "
            f"{type(other).__name__} keys: {e}"
        ) from e
    if not isinstance(span, Magnitude):
        raise CapabilityMismatchError(
            f"differences of {type(target).__name__} keys ({type(span).__name__}) "
            "do not support division"
        )

"""
Tabulated Möbius function μ(n) for the small n needed by the inversion
    π(x) = Σ_{n>=1} μ(n)/n · J(x^(1/n)).
"""

from types import MappingProxyType

from .config import Config
from .errors import DomainError

# μ(1), ..., μ(30)
_MOBIUS_VALUES = (
    1, -1, -1, 0, -1, 1, -1, 0, 0, 1,
    -1, 0, -1, 1, 1, 0, -1, 0, -1, 0,
    1, 1, -1, 0, 0, 1, 0, 0, -1, -1,
)


class MobiusTable:
    """Immutable lookup of μ(n) for 1 <= n <= max_n. Lookups outside the table fail loudly."""

    def __init__(self, values=_MOBIUS_VALUES):
        if not values or values[0] != 1:
            raise DomainError("a Möbius table must start with μ(1) = 1")
        if any(v not in (-1, 0, 1) for v in values):
            raise DomainError("Möbius values must be -1, 0 or 1")
        self._table = MappingProxyType({n: int(v) for n, v in enumerate(values, start=1)})
        self.max_n = len(values)

    def mu(self, n: int) -> int:
        if isinstance(n, bool) or not isinstance(n, int):
            raise DomainError(f"μ(n) needs an integer n, got {n!r}")
        try:
            return self._table[n]
        except KeyError:
            raise DomainError(f"μ({n}) is outside the tabulated range 1..{self.max_n}") from None

    def __getitem__(self, n: int) -> int:
        return self.mu(n)

    def __len__(self):
        return self.max_n

    def items(self):
        return self._table.items()

    # MappingProxyType does not pickle; rebuild from the raw values instead.
    def __reduce__(self):
        return (self.__class__, (tuple(self._table.values()),))


MOBIUS = MobiusTable()
assert MOBIUS.max_n == Config.MOBIUS_TABLE_SIZE

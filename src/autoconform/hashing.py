"""
Order-dependent combination of a property list into one hash.

``Hasher`` is an explicit accumulator: its state lives on the instance and
is folded forward one value at a time.  Two hashers built with the same
seed and fed the same values in the same order finalize to the same
integer within a process (``str`` hashes still depend on
``PYTHONHASHSEED``).

Usage::

    from autoconform.hashing import Hasher, combine

    combine([1, "a", 2.5])
    Hasher(seed=7).combine(1).combine("a").finalize()

Callers are responsible for keeping a record's hashable list in the same
logical order and content as its equatable list; only then do equal
records hash equal.
"""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Any, Iterable, Optional

from autoconform.config import get_hash_seed
from autoconform.kinds import Float32

# Contribution of every NaN, so NaNs that compare equal also hash equal.
_NAN_HASH = hash(("autoconform", "nan"))


@lru_cache(maxsize=1)
def default_seed() -> int:
    """Seed used when none is passed, read from config once per process.

    Later config overrides do not change it, so hashes of live records stay
    stable.
    """
    return get_hash_seed()


def _contribution(value: Any) -> int:
    if type(value) is float and math.isnan(value):
        return _NAN_HASH
    if type(value) is Float32 and value.is_nan():
        return _NAN_HASH
    return hash(value)


class Hasher:
    """Accumulating hash state.

    Args:
        seed: Initial state. Defaults to ``default_seed()``.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._state: int = default_seed() if seed is None else seed
        self._count: int = 0

    @property
    def state(self) -> int:
        return self._state

    def combine(self, value: Any) -> "Hasher":
        """Fold *value* into the state.

        Raises:
            TypeError: If *value* is unhashable.
        """
        self._state = hash((self._state, _contribution(value)))
        self._count += 1
        return self

    def combine_all(self, values: Iterable[Any]) -> "Hasher":
        for value in values:
            self.combine(value)
        return self

    def finalize(self) -> int:
        return hash((self._state, self._count))


def combine(values: Iterable[Any], seed: Optional[int] = None) -> int:
    """Hash an ordered list of values into a single integer."""
    return Hasher(seed).combine_all(values).finalize()

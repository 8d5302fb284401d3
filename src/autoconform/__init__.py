"""
autoconform - structural equality, hashing and ordering from property lists.

A record opts in by exposing an ordered list of its significant values;
the derivation engines turn two such lists into an equality result, a
combined hash, or an ordering verdict.

Public API::

    from autoconform import (
        # Capability mixins
        AutoEquatable,
        AutoHashable,
        AutoComparable,
        # Engines
        equals,
        combine,
        Hasher,
        is_smaller,
        explain_order,
        # Comparator
        compare_values,
        Verdict,
        # Kinds
        ValueKind,
        Float32,
        Char,
    )
"""

from autoconform.comparator import Verdict, compare_values, values_equal
from autoconform.equality import equals
from autoconform.errors import AutoConformError, InvalidCharacterError
from autoconform.hashing import Hasher, combine, default_seed
from autoconform.kinds import Char, Float32, ValueKind, kind_of
from autoconform.ordering import (
    OrderingExplanation,
    PositionCheck,
    explain_order,
    greater_equal,
    greater_than,
    is_smaller,
    less_equal,
    less_than,
)
from autoconform.protocols import AutoComparable, AutoEquatable, AutoHashable

__version__ = "0.1.0"
__all__ = [
    # Capability mixins
    "AutoEquatable",
    "AutoHashable",
    "AutoComparable",
    # Comparator
    "Verdict",
    "compare_values",
    "values_equal",
    # Kinds
    "ValueKind",
    "Float32",
    "Char",
    "kind_of",
    # Equality
    "equals",
    # Hashing
    "Hasher",
    "combine",
    "default_seed",
    # Ordering
    "is_smaller",
    "less_than",
    "greater_than",
    "less_equal",
    "greater_equal",
    "explain_order",
    "PositionCheck",
    "OrderingExplanation",
    # Errors
    "AutoConformError",
    "InvalidCharacterError",
    "__version__",
]

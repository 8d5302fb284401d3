"""
Capability mixins a record opts into by listing its significant values.

Each mixin requires one property returning an ordered list of values and
derives Python's comparison protocol from it:

- ``AutoEquatable`` -- ``equatable_properties`` gives ``==`` / ``!=``
- ``AutoHashable`` -- ``hashable_properties`` gives ``hash()``
- ``AutoComparable`` -- ``comparable_properties`` gives ``<``, ``>``,
  ``<=``, ``>=`` and ``==`` (its equatable list is the comparable list)

Usage::

    from autoconform import AutoComparable, AutoHashable

    class Version(AutoComparable, AutoHashable):
        def __init__(self, major: int, minor: int) -> None:
            self.major = major
            self.minor = minor

        @property
        def comparable_properties(self) -> list:
            return [self.major, self.minor]

        @property
        def hashable_properties(self) -> list:
            return [self.major, self.minor]

Property lists are read again on every operator call.  Operators return
``NotImplemented`` for operands of a different class.  When combining with
``@dataclass``, pass ``eq=False`` so the generated ``__eq__`` does not
replace the derived one.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

from autoconform.equality import equals
from autoconform.hashing import combine
from autoconform.ordering import is_smaller


def _same_record(lhs: object, rhs: object) -> bool:
    return lhs.__class__ is rhs.__class__


class AutoEquatable(ABC):
    """Structural ``==`` over ``equatable_properties``."""

    @property
    @abstractmethod
    def equatable_properties(self) -> Sequence[Any]:
        """Ordered values that decide equality."""

    def __eq__(self, other: object) -> bool:
        if not _same_record(self, other):
            return NotImplemented
        return equals(self.equatable_properties, other.equatable_properties)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result


class AutoHashable(ABC):
    """``hash()`` over ``hashable_properties``.

    Keep the hashable list in the same order and content as the equatable
    list, otherwise equal records may hash differently.
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # A base defining __eq__ nulls __hash__; restore ours.
        if cls.__hash__ is None:
            cls.__hash__ = AutoHashable.__hash__

    @property
    @abstractmethod
    def hashable_properties(self) -> Sequence[Any]:
        """Ordered values that feed the hash."""

    def __hash__(self) -> int:
        return combine(self.hashable_properties)


class AutoComparable(AutoEquatable):
    """Ordering over ``comparable_properties``.

    See ``autoconform.ordering`` for the scan rules; in particular ``a < b``
    and ``b < a`` can both hold when positions are incomparable.
    """

    @property
    @abstractmethod
    def comparable_properties(self) -> Sequence[Any]:
        """Ordered values that decide ordering and equality."""

    @property
    def equatable_properties(self) -> Sequence[Any]:
        return self.comparable_properties

    def __lt__(self, other: object) -> bool:
        if not _same_record(self, other):
            return NotImplemented
        return is_smaller(self.comparable_properties, other.comparable_properties)

    def __gt__(self, other: object) -> bool:
        if not _same_record(self, other):
            return NotImplemented
        return is_smaller(other.comparable_properties, self.comparable_properties)

    def __le__(self, other: object) -> bool:
        if not _same_record(self, other):
            return NotImplemented
        return self == other or self < other

    def __ge__(self, other: object) -> bool:
        if not _same_record(self, other):
            return NotImplemented
        return self == other or self > other

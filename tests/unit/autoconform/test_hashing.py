"""Tests for the order-dependent hash combiner."""

from __future__ import annotations

import pytest

from autoconform.config import get_config
from autoconform.equality import equals
from autoconform.hashing import Hasher, combine, default_seed
from autoconform.kinds import Char, Float32


class TestCombine:
    def test_deterministic(self):
        assert combine([1, "a", 2.5]) == combine([1, "a", 2.5])

    def test_order_sensitive(self):
        assert combine([1, 2]) != combine([2, 1])

    def test_length_sensitive(self):
        assert combine([1]) != combine([1, 1])

    def test_empty_list(self):
        assert combine([]) == combine([])
        assert isinstance(combine([]), int)

    def test_seed_changes_result(self):
        assert combine([1, 2], seed=1) != combine([1, 2], seed=2)

    def test_default_seed_from_config(self):
        get_config(hash_seed=99)
        assert default_seed() == 99
        assert combine([1, 2]) == combine([1, 2], seed=99)

    def test_default_seed_fixed_after_first_use(self):
        seed = default_seed()
        before = combine([1, 2])
        get_config(hash_seed=seed + 5)
        assert default_seed() == seed
        assert combine([1, 2]) == before

    def test_nan_hashes_consistently(self):
        assert combine([float("nan")]) == combine([float("nan")])
        assert combine([Float32(float("nan"))]) == combine([Float32(float("nan"))])

    def test_unhashable_raises(self):
        with pytest.raises(TypeError):
            combine([[1, 2]])

    @pytest.mark.parametrize(
        "lhs,rhs",
        [
            ([1, "a"], [1, "a"]),
            ([Char("c"), Float32(0.1)], [Char("c"), Float32(0.1)]),
            ([None, (1, 2)], [None, (1, 2)]),
        ],
    )
    def test_consistent_with_equality(self, lhs, rhs):
        assert equals(lhs, rhs)
        assert combine(lhs) == combine(rhs)


class TestHasher:
    def test_chaining(self):
        h = Hasher(seed=3).combine(1).combine("a")
        assert h.finalize() == combine([1, "a"], seed=3)

    def test_combine_all(self):
        assert Hasher(seed=0).combine_all([1, 2]).finalize() == combine([1, 2], seed=0)

    def test_state_is_per_instance(self):
        a = Hasher(seed=0)
        b = Hasher(seed=0)
        a.combine(1)
        assert b.state == 0
        assert a.state != b.state

    def test_finalize_does_not_consume(self):
        h = Hasher(seed=0).combine(5)
        assert h.finalize() == h.finalize()


# ---------------------------------------------------------------------------
# Float edge cases
# ---------------------------------------------------------------------------

NAN = float("nan")


class TestFloatEdgeCases:
    @pytest.mark.parametrize(
        "lhs,rhs",
        [
            (NAN, float("nan")),
            (0.0, -0.0),
            (Float32(NAN), Float32(NAN)),
            (Float32(0.0), Float32(-0.0)),
        ],
    )
    def test_equal_values_hash_equal(self, lhs, rhs):
        assert equals([lhs], [rhs])
        assert combine([lhs]) == combine([rhs])

    @pytest.mark.parametrize(
        "lhs,rhs",
        [
            (NAN, 1.0),
            (1.0, NAN),
            (Float32(NAN), Float32(2.0)),
            (Float32(2.0), Float32(NAN)),
        ],
    )
    def test_nan_not_equal_to_number(self, lhs, rhs):
        assert not equals([lhs], [rhs])

    def test_nan_does_not_bridge_numbers(self):
        assert not equals([1.0], [NAN])
        assert not equals([NAN], [2.0])
        assert not equals([1.0], [2.0])

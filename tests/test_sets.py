"""
Tests for predsets — the set interface.

These tests verify that:
1. elem is plain application of the characteristic function
2. subset and seteq are propositions, decided only on bounded universes
3. seteq is an equivalence on sampled predicates
4. Mixing universes is rejected
"""

import pytest

from predsets.errors import UniverseMismatch
from predsets.logic import Verdict
from predsets.sampling import all_subsets, random_subsets, sample_predicates
from predsets.sets import (
    Predicate,
    complement,
    elem,
    emptyset,
    fullset,
    intersection,
    set_of,
    seteq,
    subset,
    union,
)
from predsets.universe import Universe


U = Universe.finite("U", [1, 2, 3, 4])
LETTERS = Universe.finite("L", ["a", "b"])
NATURALS = Universe.unbounded("ℕ", member=lambda n: isinstance(n, int) and n >= 0)

SUBSETS = all_subsets(U)


# =============================================================================
# MEMBERSHIP AND CONSTRUCTORS
# =============================================================================

class TestMembership:
    """Test elem and the set constructors."""

    def test_set_of(self):
        s = set_of(U, 1, 3)
        assert elem(1, s)
        assert not elem(2, s)
        assert 3 in s
        assert s.name == "{1, 3}"

    def test_extension_in_universe_order(self):
        assert set_of(U, 4, 1).extension() == (1, 4)

    def test_empty_and_full(self):
        assert emptyset(U).extension() == ()
        assert fullset(U).extension() == (1, 2, 3, 4)

    def test_predicate_from_function(self):
        evens = Predicate(NATURALS, lambda n: n % 2 == 0, "even")
        assert elem(10, evens)
        assert not elem(7, evens)

    def test_binary_operations(self):
        a = set_of(U, 1, 2)
        b = set_of(U, 2, 3)
        assert union(a, b).extension() == (1, 2, 3)
        assert intersection(a, b).extension() == (2,)
        assert complement(a).extension() == (3, 4)

    def test_named(self):
        s = set_of(U, 1).named("one")
        assert s.name == "one"
        assert elem(1, s)


# =============================================================================
# SUBSET AND EQUALITY
# =============================================================================

class TestSubset:
    """Test subset and seteq."""

    def test_subset_holds(self):
        assert subset(set_of(U, 1), set_of(U, 1, 2)).verdict() is Verdict.HOLDS

    def test_subset_fails(self):
        assert subset(set_of(U, 1, 3), set_of(U, 1, 2)).verdict() is Verdict.FAILS

    def test_seteq_is_extensional(self):
        """Different characteristic functions, same members."""
        small = Predicate(U, lambda x: x < 3, "small")
        assert seteq(small, set_of(U, 2, 1))
        assert not seteq(small, set_of(U, 1))

    def test_seteq_over_unbounded_is_not_established(self):
        evens = Predicate(NATURALS, lambda n: n % 2 == 0, "even")
        doubled = Predicate(NATURALS, lambda n: (n // 2) * 2 == n, "doubled")
        assert seteq(evens, doubled).verdict() is Verdict.NOT_ESTABLISHED

    def test_universe_mismatch(self):
        with pytest.raises(UniverseMismatch, match="ranges over"):
            subset(set_of(U, 1), set_of(LETTERS, "a"))

    @pytest.mark.parametrize("s", SUBSETS, ids=lambda s: s.name)
    def test_empty_and_full_bounds(self, s):
        assert subset(emptyset(U), s)
        assert subset(s, fullset(U))

    @pytest.mark.parametrize("s", SUBSETS + sample_predicates(U), ids=lambda s: s.name)
    def test_seteq_reflexive(self, s):
        assert seteq(s, s)

    def test_seteq_symmetric_and_transitive(self):
        sample = random_subsets(U, count=12, seed=7) + sample_predicates(U, seed=7)
        for a in sample:
            for b in sample:
                assert bool(seteq(a, b)) == bool(seteq(b, a))
                if not seteq(a, b):
                    continue
                for c in sample:
                    if seteq(b, c):
                        assert seteq(a, c)

    def test_sample_predicates(self):
        none, everything, only, others = sample_predicates(U, seed=3)
        assert (none.name, everything.name) == ("none", "all")
        assert others.name == "≠" + only.name[1:]
        assert none.extension() == ()
        assert seteq(everything, fullset(U))
        assert seteq(union(only, others), fullset(U))
        assert len(only.extension()) == 1
